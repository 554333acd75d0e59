# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Per-call execution context.

A CallContext carries an optional deadline and a cancellation flag through a
blocking API call. It can be cancelled from another thread; children created
with ``with_timeout`` inherit the parent's deadline and cancellation.
"""

from __future__ import annotations

import threading
import time

from .errors import Cancelled, ContextError, DeadlineExceeded


class CallContext:
    def __init__(self, timeout: float | None = None, *, parent: CallContext | None = None):
        self._cancelled = threading.Event()
        self._parent = parent
        self._lock = threading.Lock()
        self._children: list[CallContext] = []

        deadline = time.monotonic() + timeout if timeout is not None else None
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self.deadline = deadline

        if parent is not None:
            parent._register(self)

    @classmethod
    def background(cls) -> CallContext:
        """A context that is never cancelled and has no deadline."""
        return cls()

    def with_timeout(self, timeout: float) -> CallContext:
        """Derive a child context that expires after ``timeout`` seconds at the latest."""
        return CallContext(timeout, parent=self)

    def _register(self, child: CallContext) -> None:
        with self._lock:
            self._children.append(child)
        if self._cancelled.is_set():
            child.cancel()

    def cancel(self) -> None:
        self._cancelled.set()
        with self._lock:
            children = list(self._children)
        for child in children:
            child.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def done(self) -> bool:
        return self.cancelled or self.expired()

    def error(self) -> ContextError | None:
        """Return the reason the context is done, or None while it is still live."""
        if self.cancelled:
            return Cancelled()
        if self.expired():
            return DeadlineExceeded()
        return None

    def remaining(self) -> float | None:
        """Seconds left before the deadline (never negative), or None without a deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def __enter__(self) -> CallContext:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


__all__ = ["CallContext"]
