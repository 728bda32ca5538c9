"""Plugin response: overall check status, messages and performance data."""

import logging
from enum import IntEnum
from typing import List

from .performance_data import PerformanceData, PerformanceDataPoint


class CheckStatus(IntEnum):
    """Check result status; the value is the plugin exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class Response:
    """Collects the outcome of one check execution.

    The overall status only ever gets worse. Performance data points are
    handed to a ``PerformanceData`` collection owned by this response.

    Usage:
        response = Response("all interfaces up")
        response.add_performance_data_point(PerformanceDataPoint("rx", 12.5, "B"))
        response.update_status(CheckStatus.WARNING, "eth1 is flapping")
        print(response.output())
    """

    STATE_PRIORITIES = {
        CheckStatus.OK: 0,
        CheckStatus.UNKNOWN: 1,
        CheckStatus.WARNING: 2,
        CheckStatus.CRITICAL: 3,
    }

    def __init__(self, default_message: str = "", json_label: bool = False):
        self.default_message = default_message
        self.json_label = json_label
        self.status = CheckStatus.OK
        self.messages: List[str] = []
        self.performance_data = PerformanceData()
        self.logger = logging.getLogger(__name__)

    def update_status(self, status: CheckStatus, message: str = "") -> None:
        """Record a partial result.

        The message is kept regardless of status; the overall status is only
        replaced by a worse one.
        """
        status = CheckStatus(status)
        if message:
            self.messages.append(message)

        if self.STATE_PRIORITIES[status] > self.STATE_PRIORITIES[self.status]:
            self.logger.debug(f"Status changed from {self.status.name} to {status.name}")
            self.status = status

    def add_performance_data_point(self, point: PerformanceDataPoint) -> None:
        """Add a point to the performance data; errors propagate unchanged."""
        self.performance_data.add(point)
        self.logger.debug(f"Added performance data point {point.name!r} (label {point.sub_label!r})")

    def set_performance_data_json_label(self, json_label: bool) -> None:
        """Switch between flat and JSON encoded performance data labels."""
        self.json_label = json_label

    @property
    def exit_code(self) -> int:
        return int(self.status)

    def output(self) -> str:
        """Render the full plugin output line.

        Format: ``STATUS: message[, message...][ | perfdata]``
        """
        message = ", ".join(self.messages) or self.default_message
        line = f"{self.status.name}: {message}" if message else self.status.name

        performance_data = self.performance_data.render(self.json_label)
        if performance_data:
            line += " | " + performance_data
        return line
