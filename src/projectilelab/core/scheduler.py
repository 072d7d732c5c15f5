"""
Frame schedulers driving the launch animation.

A scheduler runs one callback per display frame on the caller's thread.
``request_frame`` returns a handle that ``cancel_frame`` accepts to drop the
callback before it runs.
"""
from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Any, Protocol

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """Cooperative, single-threaded frame scheduler."""

    def request_frame(self, callback: FrameCallback) -> Any:
        ...

    def cancel_frame(self, handle: Any) -> None:
        ...


class ManualScheduler:
    """
    Deterministic scheduler advanced explicitly with :meth:`tick`.

    Callbacks requested during a tick run on the next tick, one frame later,
    like a display refresh loop. Used for headless export and tests.

    Attributes
    ----------
    frame : int
        Number of ticks performed so far
    """

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)
        self.frame = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def tick(self) -> int:
        """
        Run every callback pending at the start of this frame.

        Returns
        -------
        int
            Number of callbacks run
        """
        due = list(self._pending)
        self.frame += 1
        ran = 0
        for handle in due:
            # Cancelled by an earlier callback of this tick
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback()
            ran += 1
        return ran

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        """
        Tick until nothing is pending.

        Returns
        -------
        int
            Number of ticks performed

        Raises
        ------
        RuntimeError
            If callbacks are still pending after ``max_ticks``
        """
        ticks = 0
        while self._pending:
            if ticks >= max_ticks:
                raise RuntimeError(
                    f"Scheduler still busy after {max_ticks} ticks"
                )
            self.tick()
            ticks += 1
        return ticks
