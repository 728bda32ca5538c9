"""
Monitoring Plugin

Validation and rendering of performance data for Nagios/Icinga compatible
check plugins.
"""

# Logging is configured at app entry point via monitoring_plugin/logging_utils.py
# No need to configure logging here.

from .exceptions import (
    PerformanceDataError,
    InvalidPointError,
    EmptyNameError,
    InvalidNameCharsError,
    InvalidUnitCharsError,
    MinExceedsMaxError,
    ValueBelowMinError,
    ValueAboveMaxError,
    DuplicateMetricError,
    RejectedPointError,
)
from .performance_data import PerformanceData, PerformanceDataPoint, PerformanceDataPointKey
from .response import CheckStatus, Response

__version__ = "0.1.0"
__author__ = "Monitoring Plugin Team"
__description__ = "Performance data formatting for Nagios/Icinga check plugins"

__all__ = [
    "PerformanceData",
    "PerformanceDataPoint",
    "PerformanceDataPointKey",
    "CheckStatus",
    "Response",
    "PerformanceDataError",
    "InvalidPointError",
    "EmptyNameError",
    "InvalidNameCharsError",
    "InvalidUnitCharsError",
    "MinExceedsMaxError",
    "ValueBelowMinError",
    "ValueAboveMaxError",
    "DuplicateMetricError",
    "RejectedPointError",
]
