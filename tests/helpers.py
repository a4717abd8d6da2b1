"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists to give combinator tests one
shared way to count and inspect callback invocations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Recorder:
    """Callable double that records every argument it is called with.

    Returns ``returns`` when set, otherwise echoes its argument back.
    """

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return arg if self.returns is None else self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)
