"""Exceptions raised while validating and collecting performance data."""

from typing import Optional


class PerformanceDataError(Exception):
    """Base exception for performance data errors.

    Carries the name and sub-label of the offending data point so the caller
    can tell which metric was rejected.
    """

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        sub_label: Optional[str] = None,
    ):
        super().__init__(message)
        self.name = name
        self.sub_label = sub_label

    def __str__(self) -> str:
        parts = [str(self.args[0])]

        if self.name:
            parts.append(f"metric: {self.name}")

        if self.sub_label:
            parts.append(f"label: {self.sub_label}")

        return " | ".join(parts)


class InvalidPointError(PerformanceDataError):
    """A data point violates the plugin output grammar."""


class EmptyNameError(InvalidPointError):
    """Data point name is an empty string."""


class InvalidNameCharsError(InvalidPointError):
    """Data point name contains an equal sign or a single quote."""


class InvalidUnitCharsError(InvalidPointError):
    """Unit contains digits, semicolons or quotes."""


class MinExceedsMaxError(InvalidPointError):
    """Minimum is larger than maximum."""


class ValueBelowMinError(InvalidPointError):
    """Value is smaller than the minimum."""


class ValueAboveMaxError(InvalidPointError):
    """Value is larger than the maximum."""


class DuplicateMetricError(PerformanceDataError):
    """A data point with the same name and sub-label was already added."""


class RejectedPointError(PerformanceDataError):
    """Raised by ``PerformanceData.add`` when a data point fails validation.

    The underlying validation error is available as ``reason`` and is also
    chained as ``__cause__``.
    """

    def __init__(self, message: str, reason: InvalidPointError):
        super().__init__(message, name=reason.name, sub_label=reason.sub_label)
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.args[0]}: {self.reason}"
