from __future__ import annotations

import time
from dataclasses import dataclass, field

from .errors import RequestError


@dataclass
class CallContext:
    """Deadline and cancellation handle passed through every remote call.

    A context without a deadline never expires. ``cancel()`` marks the
    context as done; calls made with it afterwards fail without reaching the
    network.

    Examples:
        >>> ctx = CallContext.with_timeout(30)
        >>> ctx.remaining() <= 30
        True
    """

    deadline: float | None = None
    _cancelled: bool = field(default=False, repr=False)

    @classmethod
    def background(cls) -> CallContext:
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> CallContext:
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or ``None`` without one."""

        if self.deadline is None:
            return None
        return max(self.deadline - time.monotonic(), 0.0)

    def check(self) -> None:
        """Raise :class:`RequestError` if the context is cancelled or expired."""

        if self._cancelled:
            raise RequestError("context canceled")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise RequestError("context deadline exceeded")


__all__ = ["CallContext"]
