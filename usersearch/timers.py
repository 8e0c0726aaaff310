"""Single-slot cancellable timers scheduled on the running asyncio loop.

Each :class:`DebounceTimer` holds at most one pending callback: scheduling
again cancels whatever was waiting (last call wins). A :class:`TimerGroup`
owns the timers of one component so they can all be cancelled on teardown.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class DebounceTimer:
    def __init__(self, name: str, delay: float) -> None:
        self.name = name
        self.delay = delay
        self.closed = False
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending: Optional[Tuple[Callable[..., Any], tuple]] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: Callable[..., Any], *args: Any) -> None:
        """Run ``callback(*args)`` after ``delay`` seconds, replacing any pending call."""
        self.cancel()
        if self.closed:
            logger.debug("timer %s is closed; dropping schedule", self.name)
            return
        loop = asyncio.get_running_loop()
        self._pending = (callback, args)
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> bool:
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        self._pending = None
        return True

    def flush(self) -> bool:
        """Run the pending callback right away. Returns False when nothing was pending."""
        if self._pending is None:
            return False
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._fire_pending()
        return True

    def close(self) -> None:
        self.cancel()
        self.closed = True

    def _fire(self) -> None:
        self._handle = None
        self._fire_pending()

    def _fire_pending(self) -> None:
        pending, self._pending = self._pending, None
        if pending is None or self.closed:
            return
        callback, args = pending
        callback(*args)


class TimerGroup:
    """Named single-slot timers owned by one component."""

    def __init__(self) -> None:
        self._timers: Dict[str, DebounceTimer] = {}
        self.closed = False

    def timer(self, name: str, delay: float) -> DebounceTimer:
        existing = self._timers.get(name)
        if existing is not None:
            return existing
        timer = DebounceTimer(name, delay)
        if self.closed:
            timer.close()
        self._timers[name] = timer
        return timer

    def cancel_all(self) -> None:
        for timer in self._timers.values():
            timer.cancel()

    def close(self) -> None:
        for timer in self._timers.values():
            timer.close()
        self.closed = True
