"""Operations over sequences of results.

These unwrap the successes or failures out of a batch of results without
raising on the other variant. Output order always follows input order, and
payload types may be mixed; callers handle heterogeneous lists themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeIs

from resultkit.errors import ResultError
from resultkit.report import (
    DEFAULT_REPORT,
    ReportFormat,
    format_failures,
    resolve_report_format,
)
from resultkit.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def is_success[T, E](result: Result[T, E]) -> TypeIs[Success[T, E]]:
    """Return True if ``result`` is a ``Success``; usable with ``filter()``."""
    return result.is_success()


def is_failure[T, E](result: Result[T, E]) -> TypeIs[Failure[T, E]]:
    """Return True if ``result`` is a ``Failure``; usable with ``filter()``."""
    return result.is_failure()


def collect_failures(results: Iterable[Result[Any, Any]]) -> list[Any]:
    """Return the failure values of ``results`` in order, skipping successes.

    Example:
        collect_failures([Failure(3), Success(1), Failure("five")])  # => [3, 'five']
    """
    return [result.error for result in results if isinstance(result, Failure)]


def collect_successes(results: Iterable[Result[Any, Any]]) -> list[Any]:
    """Return the success values of ``results`` in order, skipping failures.

    Example:
        collect_successes([Success(1), Failure(7), Success("nine")])  # => [1, 'nine']
    """
    return [result.value for result in results if isinstance(result, Success)]


def raise_on_failures(
    results: Iterable[Result[Any, Any]],
    message: str | None = None,
    error_class: type[Exception] = ResultError,
    *,
    report: ReportFormat | Mapping[str, Any] = DEFAULT_REPORT,
) -> None:
    """Raise one ``error_class`` listing every failure in ``results``, if any.

    The message is ``message`` (``"Failures found"`` when omitted) followed by
    one bulleted line per failure value::

        raise_on_failures([Failure(3), Success(1), Failure("five")], "errors")
        # ResultError: errors:
        #  - 3
        #  - five

    A message already ending in ``:`` gets no extra colon, and an empty
    message drops the label line. Nothing is raised when there are no
    failures.

    ``report`` is a ``ReportFormat`` or a mapping of its fields; invalid
    overrides raise ``ConfigurationError`` whether or not failures exist.
    """
    fmt = resolve_report_format(report)
    failures = collect_failures(results)
    if not failures:
        return

    text = format_failures(failures, message, report=fmt)
    raise error_class(text)


def flatten[T, E](result: Result[Result[T, E], E]) -> Result[T, E]:
    """Remove one level of nesting from a result holding a result.

    Example:
        flatten(Success(Success("hello")))  # => Success(value='hello')
        flatten(Success(Failure(5)))        # => Failure(error=5)
        flatten(Failure(5))                 # => Failure(error=5)

    Raises:
        TypeError: If ``result`` is not a Result, or holds a success that is not one.
    """
    match result:
        case Success(value=Result() as inner):
            return inner
        case Success(value=inner):
            raise TypeError(
                f"Expected a Result inside Success, got {type(inner).__name__}"
            )
        case Failure(error=error):
            return Failure(error)
    raise TypeError(f"Expected a Result, got {type(result).__name__}")
