"""Fail-open bookkeeping.

Nothing in the pipeline is allowed to raise into the host. Component
boundaries catch, log, and substitute a safe default; the Guarded wrapper
records which kind of fallback fired so callers (and tests) can tell a clean
result from a substituted one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Fallback(str, Enum):
    ENVIRONMENT = "environment"  # expected collection missing or malformed
    PARSE = "parse"  # line unreadable, skipped, default kept
    UNEXPECTED = "unexpected"  # exception caught at a boundary


@dataclass(frozen=True)
class Guarded(Generic[T]):
    value: T
    fallback: Fallback | None = None

    @property
    def ok(self) -> bool:
        return self.fallback is None
