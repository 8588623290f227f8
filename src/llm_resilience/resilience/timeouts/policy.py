"""Resilience – TimeoutPolicy for individual attempts."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from llm_resilience.kernel.errors import InfrastructureTimeoutError

T = TypeVar("T")


class AttemptTimeoutError(InfrastructureTimeoutError):
    """A single attempt exceeded its per-attempt timeout."""

    default_code = "attempt_timeout"

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            f"Attempt timed out after {timeout_seconds}s",
            detail={"timeout_seconds": timeout_seconds},
        )
        self.timeout_seconds = timeout_seconds


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Configuration for timeout enforcement."""
    timeout_seconds: float

    @classmethod
    def from_ms(cls, timeout_ms: int | None) -> TimeoutPolicy | None:
        if timeout_ms is None:
            return None
        return cls(timeout_seconds=timeout_ms / 1000)

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        """Await *func* under the deadline.

        Only a deadline that actually expired becomes ``AttemptTimeoutError``;
        a ``TimeoutError`` raised by *func* itself propagates unchanged.
        """
        scope = asyncio.timeout(self.timeout_seconds)
        try:
            async with scope:
                return await func()
        except TimeoutError as exc:
            if not scope.expired():
                raise
            raise AttemptTimeoutError(self.timeout_seconds) from exc


__all__ = ["AttemptTimeoutError", "TimeoutPolicy"]
