"""Property tests for the algebra of Result operations."""

from __future__ import annotations

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from resultkit import (
    Failure,
    ResultError,
    Success,
    collect_failures,
    collect_successes,
    flatten,
    raise_on_failures,
)
from tests.helpers import Recorder

pytestmark = pytest.mark.unit

payloads = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=20),
    st.lists(st.integers(), max_size=3),
)
results = st.one_of(payloads.map(Success), payloads.map(Failure))

_settings = settings(max_examples=50, deadline=None, derandomize=True)


@given(value=payloads)
@_settings
def test_variant_predicates_are_exclusive(value: Any) -> None:
    assert Success(value).is_success() and not Success(value).is_failure()
    assert Failure(value).is_failure() and not Failure(value).is_success()


@given(value=st.integers(), threshold=st.integers())
@_settings
def test_is_success_predicate_agrees_with_predicate(value: int, threshold: int) -> None:
    pred = Recorder(returns=value > threshold)

    assert Success(value).is_success(pred) is (value > threshold)
    assert Failure(value).is_success(pred) is False
    assert pred.calls == [value]


@given(value=st.integers(), fallback=st.integers())
@_settings
def test_map_then_map_or_composes(value: int, fallback: int) -> None:
    def f(v: int) -> int:
        return v * 3

    def g(v: int) -> str:
        return f"<{v}>"

    assert Success(value).map(f).map_or(g, fallback) == g(f(value))


@given(result=results)
@_settings
def test_match_with_identity_returns_payload(result: Any) -> None:
    held = result.value if isinstance(result, Success) else result.error

    assert result.match(on_success=lambda v: v, on_failure=lambda e: e) == held


@given(value=payloads)
@_settings
def test_flatten_laws(value: Any) -> None:
    assert flatten(Success(Success(value))) == Success(value)
    assert flatten(Success(Failure(value))) == Failure(value)
    assert flatten(Failure(value)) == Failure(value)


@given(batch=st.lists(results, max_size=8))
@_settings
def test_collectors_partition_in_order(batch: list[Any]) -> None:
    failures = collect_failures(batch)
    successes = collect_successes(batch)

    assert len(failures) + len(successes) == len(batch)
    assert failures == [r.error for r in batch if isinstance(r, Failure)]
    assert successes == [r.value for r in batch if isinstance(r, Success)]


@given(batch=st.lists(results, max_size=8))
@_settings
def test_raise_on_failures_lists_every_failure(batch: list[Any]) -> None:
    failures = collect_failures(batch)
    if not failures:
        raise_on_failures(batch)
        return

    with pytest.raises(ResultError) as exc:
        raise_on_failures(batch, "errors")

    expected = "errors:\n" + "\n".join(f" - {failure}" for failure in failures)
    assert str(exc.value) == expected


@given(result=results, other=results)
@_settings
def test_and_or_select_by_receiver_variant(result: Any, other: Any) -> None:
    if result.is_success():
        assert result.and_(other) is other
        assert result.or_(other) == result
    else:
        assert result.and_(other) == result
        assert result.or_(other) is other
