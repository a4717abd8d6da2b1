"""Exception hierarchy for resultkit."""

from __future__ import annotations


class ResultError(Exception):
    """Base exception for all resultkit errors.

    Also the default kind raised by ``expect``, ``expect_failure`` and
    ``raise_on_failures``.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(ResultError, LookupError):
    """A value was extracted from the variant that does not hold it.

    Default kind for ``unwrap`` and ``unwrap_failure``. Catchable as
    ``LookupError`` as well as ``ResultError``.
    """


class ConstructionError(ResultError, TypeError):
    """``Result`` was constructed or subclassed directly."""


class ConfigurationError(ResultError):
    """Report format validation or resolution failed."""
