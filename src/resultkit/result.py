"""Result type: a success value or a failure value, never both.

A ``Result`` is returned instead of raising for expected failures. Its payload
is not directly reachable through the base type, so callers handle both paths
explicitly: destructure with :meth:`Result.match` or a ``match`` statement,
sequence fallible steps with :meth:`Result.and_then` / :meth:`Result.or_else`,
transform with :meth:`Result.map` / :meth:`Result.map_failure`, or extract with
the ``unwrap`` family.

Only :class:`Success` and :class:`Failure` can be constructed. Both are frozen,
so every operation returns a new result or a plain value.

Example:
    def parse_port(text: str) -> Result[int, str]:
        return Success(int(text)) if text.isdigit() else Failure(f"bad port {text!r}")

    parse_port("8080").map(lambda p: p + 1).unwrap_or(0)   # => 8081
    parse_port("http").map(lambda p: p + 1).unwrap_or(0)   # => 0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import dataclasses
from typing import TYPE_CHECKING, Any, NoReturn, Self

from resultkit.errors import ConstructionError, ResultError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable


_VARIANTS = frozenset({"Success", "Failure"})


class Result[T, E](ABC):
    """Either a :class:`Success` holding ``T`` or a :class:`Failure` holding ``E``.

    Abstract and closed: ``Result(...)`` raises :class:`ConstructionError`, as
    does subclassing it outside this module.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        """Reject direct construction of the abstract base."""
        del args, kwargs
        if cls is Result:
            raise ConstructionError(
                "Result is abstract, use Success() or Failure()",
                hint="Construct results with Success(value) or Failure(error).",
            )
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise ConstructionError(
                f"Cannot subclass Result as {cls.__name__}: "
                "Success and Failure are its only variants"
            )

    # --- Predicates ---

    @abstractmethod
    def is_success(self, pred: Callable[[T], bool] | None = None) -> bool:
        """Return True if this is a ``Success``.

        With ``pred``, the success value must also satisfy it. ``pred`` is never
        called on a ``Failure``.

        Example:
            Success(2).is_success(lambda v: v > 1)       # => True
            Success(0).is_success(lambda v: v > 1)       # => False
            Failure("hey").is_success(lambda v: v > 1)   # => False
        """

    @abstractmethod
    def is_failure(self, pred: Callable[[E], bool] | None = None) -> bool:
        """Return True if this is a ``Failure``, optionally satisfying ``pred``."""

    # --- Transformation ---

    @abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to a success value, leaving a failure untouched.

        Example:
            Success(2).map(lambda v: v * 2)      # => Success(value=4)
            Failure("hey").map(lambda v: v * 2)  # => Failure(error='hey')
        """

    @abstractmethod
    def map_failure[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to a failure value, leaving a success untouched."""

    @abstractmethod
    def map_or[U](self, fn: Callable[[T], U], fallback: U | Callable[[E], U]) -> U:
        """Return ``fn(value)`` on success, else the fallback.

        A callable ``fallback`` is called with the failure value; anything else
        is returned as is. To return a function literally on failure, wrap it:
        ``fallback=lambda _: some_function``.

        Example:
            Success("foo").map_or(len, 42)                  # => 3
            Failure("bar").map_or(len, 42)                  # => 42
            Failure("bar").map_or(len, lambda e: e.upper()) # => 'BAR'
        """

    @abstractmethod
    def inspect_success(self, fn: Callable[[T], object]) -> Self:
        """Call ``fn`` with the success value for its side effects; return self.

        Example:
            Success(2).inspect_success(print).map(lambda v: v**3)  # prints 2
        """

    @abstractmethod
    def inspect_failure(self, fn: Callable[[E], object]) -> Self:
        """Call ``fn`` with the failure value for its side effects; return self."""

    # --- Extraction ---

    @abstractmethod
    def expect(self, message: str, error_class: type[Exception] = ResultError) -> T:
        """Return the success value, or raise ``error_class`` on failure.

        The raised message is ``"{message}: {error}"``.

        Example:
            Failure("emergency failure").expect("Testing expect")
            # ResultError: Testing expect: emergency failure
        """

    @abstractmethod
    def expect_failure(
        self, message: str, error_class: type[Exception] = ResultError
    ) -> E:
        """Return the failure value, or raise ``error_class`` on success."""

    @abstractmethod
    def unwrap(self, error_class: type[Exception] = UnwrapError) -> T:
        """Return the success value, or raise ``error_class`` on failure.

        Prefer :meth:`match` or :meth:`unwrap_or` where the failure path matters.

        Example:
            Failure("emergency failure").unwrap()
            # UnwrapError: Called Result.unwrap on a Failure value: emergency failure
        """

    @abstractmethod
    def unwrap_failure(self, error_class: type[Exception] = UnwrapError) -> E:
        """Return the failure value, or raise ``error_class`` on success."""

    @abstractmethod
    def unwrap_or(self, fallback: T | Callable[[E], T]) -> T:
        """Return the success value, else the fallback.

        A callable ``fallback`` is called with the failure value, as in
        :meth:`map_or`.

        Example:
            Success(9).unwrap_or(42)          # => 9
            Failure("error").unwrap_or(42)    # => 42
            Failure("foo").unwrap_or(len)     # => 3
        """

    # --- Combination ---

    @abstractmethod
    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` if this is a success, else this failure.

        Example:
            Success(3).and_(Success("5"))   # => Success(value='5')
            Success(3).and_(Failure("5"))   # => Failure(error='5')
            Failure(3).and_(Success("5"))   # => Failure(error=3)
        """

    @abstractmethod
    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Return ``fn(value)`` on success; a failure passes through uncalled.

        Example:
            def squared(x: int) -> Result[str, str]:
                return Success(str(x * x)) if x <= 9 else Failure("overflowed")

            Success(2).and_then(squared)    # => Success(value='4')
            Success(10).and_then(squared)   # => Failure(error='overflowed')
        """

    @abstractmethod
    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Return this success, or ``other`` if this is a failure."""

    @abstractmethod
    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Return ``fn(error)`` on failure; a success passes through uncalled."""

    @abstractmethod
    def match[U](
        self, *, on_success: Callable[[T], U], on_failure: Callable[[E], U]
    ) -> U:
        """Call exactly one handler for the held variant and return its result.

        Example:
            Success(10).match(on_success=lambda v: v * v, on_failure=lambda e: 0)
            # => 100
        """


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T, E](Result[T, E]):
    """The successful variant of :class:`Result`."""

    value: T

    def is_success(self, pred: Callable[[T], bool] | None = None) -> bool:
        return True if pred is None else bool(pred(self.value))

    def is_failure(self, pred: Callable[[E], bool] | None = None) -> bool:
        return False

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        return Success(fn(self.value))

    def map_failure[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        return Success(self.value)

    def map_or[U](self, fn: Callable[[T], U], fallback: U | Callable[[E], U]) -> U:
        return fn(self.value)

    def inspect_success(self, fn: Callable[[T], object]) -> Self:
        fn(self.value)
        return self

    def inspect_failure(self, fn: Callable[[E], object]) -> Self:
        return self

    def expect(self, message: str, error_class: type[Exception] = ResultError) -> T:
        return self.value

    def expect_failure(
        self, message: str, error_class: type[Exception] = ResultError
    ) -> NoReturn:
        _unwrap_failed(message, self.value, error_class)

    def unwrap(self, error_class: type[Exception] = UnwrapError) -> T:
        return self.value

    def unwrap_failure(self, error_class: type[Exception] = UnwrapError) -> NoReturn:
        _unwrap_failed(
            "Called Result.unwrap_failure on a Success value", self.value, error_class
        )

    def unwrap_or(self, fallback: T | Callable[[E], T]) -> T:
        return self.value

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        return other

    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        return Success(self.value)

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return Success(self.value)

    def match[U](
        self, *, on_success: Callable[[T], U], on_failure: Callable[[E], U]
    ) -> U:
        return on_success(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T, E](Result[T, E]):
    """The failed variant of :class:`Result`."""

    error: E

    def is_success(self, pred: Callable[[T], bool] | None = None) -> bool:
        return False

    def is_failure(self, pred: Callable[[E], bool] | None = None) -> bool:
        return True if pred is None else bool(pred(self.error))

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        return Failure(self.error)

    def map_failure[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        return Failure(fn(self.error))

    def map_or[U](self, fn: Callable[[T], U], fallback: U | Callable[[E], U]) -> U:
        return _resolve_fallback(fallback, self.error)

    def inspect_success(self, fn: Callable[[T], object]) -> Self:
        return self

    def inspect_failure(self, fn: Callable[[E], object]) -> Self:
        fn(self.error)
        return self

    def expect(
        self, message: str, error_class: type[Exception] = ResultError
    ) -> NoReturn:
        _unwrap_failed(message, self.error, error_class)

    def expect_failure(
        self, message: str, error_class: type[Exception] = ResultError
    ) -> E:
        return self.error

    def unwrap(self, error_class: type[Exception] = UnwrapError) -> NoReturn:
        _unwrap_failed(
            "Called Result.unwrap on a Failure value", self.error, error_class
        )

    def unwrap_failure(self, error_class: type[Exception] = UnwrapError) -> E:
        return self.error

    def unwrap_or(self, fallback: T | Callable[[E], T]) -> T:
        return _resolve_fallback(fallback, self.error)

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        return Failure(self.error)

    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return Failure(self.error)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return fn(self.error)

    def match[U](
        self, *, on_success: Callable[[T], U], on_failure: Callable[[E], U]
    ) -> U:
        return on_failure(self.error)


# --- Internal helpers ---


def _resolve_fallback[U, E](fallback: U | Callable[[E], U], error: E) -> U:
    """Call a callable fallback with ``error``; return any other fallback as is."""
    if callable(fallback):
        return fallback(error)
    return fallback


def _unwrap_failed(
    message: str, payload: object, error_class: type[Exception]
) -> NoReturn:
    """Raise ``error_class`` labelled with ``message`` and the stringified payload."""
    raise error_class(f"{message}: {payload}")
