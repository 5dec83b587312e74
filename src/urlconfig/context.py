from __future__ import annotations

import threading
import time
from typing import Optional

from .errors import ContextCancelledError


class Context:
    """Cancellation signal handed to factories.

    A context can be cancelled explicitly with `cancel()` or implicitly by
    passing its deadline (a `time.monotonic()` timestamp). Child contexts are
    cancelled together with their parent; cancelling a child leaves the parent
    alone.

    The registry forwards the context to factories without looking at it.
    Factories that block (dial a socket, open a remote file, ...) should check
    `cancelled` or use `remaining()` as their timeout.
    """

    def __init__(self, *, deadline: Optional[float] = None, parent: Optional["Context"] = None) -> None:
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self._deadline = deadline
        self._parent = parent
        self._event = threading.Event()
        self._reason: Optional[str] = None
        self._lock = threading.Lock()

    @classmethod
    def background(cls) -> "Context":
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, *, parent: Optional["Context"] = None) -> "Context":
        seconds = float(seconds)
        if seconds < 0:
            raise ValueError("timeout must be >= 0")
        return cls(deadline=time.monotonic() + seconds, parent=parent)

    @classmethod
    def with_deadline(cls, deadline: float, *, parent: Optional["Context"] = None) -> "Context":
        return cls(deadline=float(deadline), parent=parent)

    def child(self) -> "Context":
        return Context(parent=self)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def reason(self) -> Optional[str]:
        if self._event.is_set():
            return self._reason
        if self._parent is not None and self._parent.cancelled:
            return self._parent.reason
        if self._deadline_exceeded():
            return "deadline exceeded"
        return None

    def cancel(self, reason: str = "context cancelled") -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._parent is not None and self._parent.cancelled:
            return True
        return self._deadline_exceeded()

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, `None` without one, never negative."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled, the deadline passes or `timeout` elapses.

        Returns True when the context ended up cancelled.
        """
        limit = self.remaining()
        if timeout is not None:
            limit = float(timeout) if limit is None else min(limit, float(timeout))

        end = None if limit is None else time.monotonic() + limit
        # Parent cancellation does not set our event, so poll in short slices.
        while not self.cancelled:
            slice_s = 0.05
            if end is not None:
                left = end - time.monotonic()
                if left <= 0:
                    break
                slice_s = min(slice_s, left)
            self._event.wait(slice_s)
        return self.cancelled

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise ContextCancelledError(self.reason or "context cancelled")

    def _deadline_exceeded(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "active"
        return f"Context({state}, remaining={self.remaining()!r})"
