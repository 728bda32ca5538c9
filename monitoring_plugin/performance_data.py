"""Performance data in the Nagios/Icinga plugin output format.

A check builds ``PerformanceDataPoint`` objects with the fluent setters and adds
them to a ``PerformanceData`` collection. Points are validated when they are
added, not when they are built. The collection renders the performance data
suffix of the plugin output line, e.g.::

    'load'=1.5;4;8;0; 'temperature_cpu0'=52°C;70;85;;

See http://nagios-plugins.org/doc/guidelines.html#AEN200
"""

import json
import math
import string
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Dict, Iterator, List, NamedTuple, Optional

from .exceptions import (
    DuplicateMetricError,
    EmptyNameError,
    InvalidNameCharsError,
    InvalidPointError,
    InvalidUnitCharsError,
    MinExceedsMaxError,
    RejectedPointError,
    ValueAboveMaxError,
    ValueBelowMinError,
)

FORBIDDEN_NAME_CHARS = frozenset("='")
FORBIDDEN_UNIT_CHARS = frozenset(string.digits + ";'\"")


def format_number(value: float) -> str:
    """Format a number the way Go's ``%g`` verb does with shortest precision.

    Uses the shortest digits that round-trip and switches to exponent
    notation when the decimal exponent is below -4 or at least 6.

    Examples:
        10.0 -> "10", 0.25 -> "0.25", 1000000.0 -> "1e+06", 1e-05 -> "1e-05"
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    number = Decimal(repr(value))
    exponent = number.adjusted()

    if exponent < -4 or exponent >= 6:
        sign, digits, _ = number.as_tuple()
        digits = "".join(str(d) for d in digits).rstrip("0") or "0"
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        exp_sign = "-" if exponent < 0 else "+"
        return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exponent):02d}"

    return format(number.normalize(), "f")


class PerformanceDataPointKey(NamedTuple):
    """Identity of a data point inside a ``PerformanceData`` collection."""

    name: str
    sub_label: str = ""


@dataclass
class PerformanceDataPoint:
    """A single metric of a check result.

    Construction never fails on bad input. Grammar and bounds are checked by
    ``validate()``, which ``PerformanceData.add`` calls before storing a copy.

    Usage:
        point = PerformanceDataPoint("memory_usage", 55, "%").set_warn(80).set_crit(90)
    """

    name: str
    value: float
    unit: str = ""
    warn: Optional[float] = None
    crit: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    sub_label: str = ""

    def set_min(self, value: float) -> "PerformanceDataPoint":
        """Set the minimum value."""
        self.min = value
        return self

    def set_max(self, value: float) -> "PerformanceDataPoint":
        """Set the maximum value."""
        self.max = value
        return self

    def set_warn(self, value: float) -> "PerformanceDataPoint":
        """Set the warning threshold."""
        self.warn = value
        return self

    def set_crit(self, value: float) -> "PerformanceDataPoint":
        """Set the critical threshold."""
        self.crit = value
        return self

    def set_sub_label(self, sub_label: str) -> "PerformanceDataPoint":
        """Set the label that tells apart points sharing the same name.

        Setting it again overwrites the previous label.
        """
        self.sub_label = sub_label
        return self

    @property
    def key(self) -> PerformanceDataPointKey:
        return PerformanceDataPointKey(self.name, self.sub_label)

    def validate(self) -> None:
        """Check the point against the plugin output grammar.

        Raises the first violation found, in this order: empty name, bad name
        characters, bad unit characters, min above max, value below min,
        value above max.

        Raises:
            InvalidPointError: one of its subclasses, describing the violation
        """
        context = {"name": self.name, "sub_label": self.sub_label}

        if self.name == "":
            raise EmptyNameError("data point name cannot be an empty string", **context)

        if any(char in FORBIDDEN_NAME_CHARS for char in self.name):
            raise InvalidNameCharsError(
                "name can not contain the equal sign or single quote (')", **context
            )

        if any(char in FORBIDDEN_UNIT_CHARS for char in self.unit):
            raise InvalidUnitCharsError(
                "unit can not contain numbers, semicolon or quotes", **context
            )

        if self.min is not None and self.max is not None and self.min > self.max:
            raise MinExceedsMaxError("min cannot be larger than max", **context)

        if self.min is not None and self.value < self.min:
            raise ValueBelowMinError("value cannot be smaller than min", **context)

        if self.max is not None and self.value > self.max:
            raise ValueAboveMaxError("value cannot be larger than max", **context)

    def _label(self, json_label: bool) -> str:
        if json_label:
            label = {"metric": self.name}
            if self.sub_label:
                label["label"] = self.sub_label
            return json.dumps(label, separators=(",", ":"), ensure_ascii=False)

        if self.sub_label:
            return f"{self.name}_{self.sub_label}"
        return self.name

    def output(self, json_label: bool = False) -> str:
        """Render the point as ``'label'=value[unit];warn;crit;min;max``.

        Absent thresholds and bounds leave their slot empty; all four slots
        are always present.
        """
        fields = [f"'{self._label(json_label)}'={format_number(self.value)}{self.unit}"]
        for optional in (self.warn, self.crit, self.min, self.max):
            fields.append("" if optional is None else format_number(optional))
        return ";".join(fields)


class PerformanceData:
    """Collection of performance data points of one check execution.

    Points are keyed by ``(name, sub_label)``; adding a key twice is an
    error. Rendering keeps insertion order.
    """

    def __init__(self):
        self._points: Dict[PerformanceDataPointKey, PerformanceDataPoint] = {}

    def add(self, point: PerformanceDataPoint) -> None:
        """Validate ``point`` and store a copy of it.

        The collection is left unchanged when the point is rejected.

        Raises:
            RejectedPointError: the point failed validation
            DuplicateMetricError: a point with the same key is already stored
        """
        try:
            point.validate()
        except InvalidPointError as e:
            raise RejectedPointError("given performance data point is not valid", e) from e

        key = point.key
        if key in self._points:
            raise DuplicateMetricError(
                "a performance data point with this name and label does already exist",
                name=key.name,
                sub_label=key.sub_label,
            )

        self._points[key] = replace(point)

    def get(self, name: str, sub_label: str = "") -> Optional[PerformanceDataPoint]:
        """Return a copy of the stored point, or None if there is none."""
        point = self._points.get(PerformanceDataPointKey(name, sub_label))
        return replace(point) if point is not None else None

    def keys(self) -> List[PerformanceDataPointKey]:
        return list(self._points)

    def render(self, json_label: bool = False) -> str:
        """Render all points separated by single spaces."""
        return " ".join(point.output(json_label) for point in self._points.values())

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, key) -> bool:
        # a bare name means "no sub-label"
        if isinstance(key, str):
            key = (key, "")
        return tuple(key) in self._points

    def __iter__(self) -> Iterator[PerformanceDataPointKey]:
        return iter(list(self._points))
