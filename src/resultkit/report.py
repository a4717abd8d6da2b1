"""Failure report formatting.

Renders a list of failure values into the aggregated message raised by
``raise_on_failures``::

    Failures found:
     - 3
     - five

``ReportFormat`` is the schema for the rendering knobs. ``DEFAULT_REPORT``
produces the message above. Callers may pass a ``ReportFormat`` or a mapping of
field overrides wherever a report is accepted; ``resolve_report_format``
validates the latter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from resultkit.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class ReportFormat(BaseModel):
    """Immutable rendering options for aggregated failure reports."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    #: Label used when no message is passed.
    default_message: str = Field(default="Failures found")
    bullet: str = Field(default=" - ")
    separator: str = Field(default="\n", min_length=1)

    def label(self, message: str | None) -> str:
        """Return the label line (with trailing separator) for ``message``.

        ``None`` selects ``default_message``. An empty label yields no line at
        all, and a label already ending in a colon gets no second one.
        """
        text = self.default_message if message is None else message
        if not text:
            return ""
        colon = "" if text.endswith(":") else ":"
        return f"{text}{colon}{self.separator}"


DEFAULT_REPORT = ReportFormat()


def format_failures(
    failures: Iterable[object],
    message: str | None = None,
    *,
    report: ReportFormat | Mapping[str, Any] = DEFAULT_REPORT,
) -> str:
    """Render ``failures`` as a labelled, bulleted report, one line per value.

    Example:
        format_failures([3, "five"], "errors")  # => 'errors:\\n - 3\\n - five'
        format_failures([3], report={"bullet": "* "})  # => 'Failures found:\\n* 3'
    """
    fmt = resolve_report_format(report)
    lines = fmt.separator.join(f"{fmt.bullet}{failure}" for failure in failures)
    return f"{fmt.label(message)}{lines}"


def resolve_report_format(
    report: ReportFormat | Mapping[str, Any] | None = None,
) -> ReportFormat:
    """Return ``report`` as a validated ``ReportFormat``.

    A ``ReportFormat`` is returned as is, ``None`` selects ``DEFAULT_REPORT``,
    and a mapping is treated as field overrides on top of the defaults.

    Raises:
        ConfigurationError: If the overrides fail validation.
    """
    if report is None:
        return DEFAULT_REPORT
    if isinstance(report, ReportFormat):
        return report

    try:
        return ReportFormat.model_validate(dict(report))
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        raise ConfigurationError(
            f"Report format validation failed for {field!r}: {err.get('msg')}",
            hint=f"Valid fields: {', '.join(sorted(ReportFormat.model_fields))}",
        ) from e
