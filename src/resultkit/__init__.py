"""resultkit: a Result type for explicit success and failure values.

Public API:
    - Success / Failure: The two constructible variants of ``Result``
    - Result: The abstract base, for annotations and ``isinstance`` checks
    - collect_failures() / collect_successes(): Unwrap one variant from a batch
    - raise_on_failures(): Raise a single error listing every failure in a batch
    - flatten(): Collapse a nested ``Result``
"""

from __future__ import annotations

import logging

from resultkit.errors import (
    ConfigurationError,
    ConstructionError,
    ResultError,
    UnwrapError,
)
from resultkit.report import (
    DEFAULT_REPORT,
    ReportFormat,
    format_failures,
    resolve_report_format,
)
from resultkit.result import Failure, Result, Success
from resultkit.sequences import (
    collect_failures,
    collect_successes,
    flatten,
    is_failure,
    is_success,
    raise_on_failures,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_REPORT",
    "ConfigurationError",
    "ConstructionError",
    "Failure",
    "ReportFormat",
    "Result",
    "ResultError",
    "Success",
    "UnwrapError",
    "collect_failures",
    "collect_successes",
    "flatten",
    "format_failures",
    "is_failure",
    "is_success",
    "raise_on_failures",
    "resolve_report_format",
]
