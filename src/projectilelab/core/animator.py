"""
Launch animation state machine.

Steps a marker across pre-computed trajectory samples, one sample per frame,
then leaves it at the landing point.

State Machine:
    IDLE → RUNNING → IDLE
"""
from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from enum import Enum, auto
from typing import Any

from projectilelab.core.sampler import TrajectorySample
from projectilelab.core.scheduler import FrameScheduler
from projectilelab.utils.validation import validate_count

TOTAL_FRAMES = 120


class AnimationState(Enum):
    """Launch animator states."""

    IDLE = auto()  # No run in progress, launch control enabled
    RUNNING = auto()  # Frames being emitted, launch control disabled


class LaunchAnimator:
    """
    Frame-driven animation of one launch at a time.

    Parameters
    ----------
    scheduler : FrameScheduler
        Runs each step on the next display frame
    on_position : Callable[[TrajectorySample], None]
        Receives the current projectile position, once per step
    on_rest : Callable[[TrajectorySample], None] | None
        Receives the last sample when a run completes
    on_control : Callable[[bool], None] | None
        Receives False when a run starts and True when the launch control
        may be used again
    total_frames : int
        Frames per run. A complete run takes ``total_frames + 1`` steps.

    Attributes
    ----------
    state : AnimationState
        Current state
    current_frame : int
        Index of the next frame to emit
    samples : tuple[TrajectorySample, ...]
        Samples of the active (or last) run

    Notes
    -----
    Frame ``k`` shows ``samples[floor(k / total_frames * (n - 1))]``, so the
    first frame shows the launch point and frame ``total_frames`` the landing
    point. The pending frame handle is the only continuation of a run:
    dropping it (:meth:`cancel`, or :meth:`start` while running) ends the run
    without any further emission.

    Examples
    --------
    >>> scheduler = ManualScheduler()
    >>> positions = []
    >>> animator = LaunchAnimator(scheduler, on_position=positions.append)
    >>> animator.start(sample(evaluate(20.0, 45.0)))
    >>> scheduler.run_until_idle()
    121
    >>> positions[-1] == animator.samples[-1]
    True
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        on_position: Callable[[TrajectorySample], None],
        on_rest: Callable[[TrajectorySample], None] | None = None,
        on_control: Callable[[bool], None] | None = None,
        total_frames: int = TOTAL_FRAMES,
    ) -> None:
        validate_count(total_frames, "Total frames")
        self.scheduler = scheduler
        self.on_position = on_position
        self.on_rest = on_rest
        self.on_control = on_control
        self.total_frames = total_frames

        self.state = AnimationState.IDLE
        self.current_frame = 0
        self.samples: tuple[TrajectorySample, ...] = ()
        self._pending_frame: Any = None

    @property
    def running(self) -> bool:
        return self.state is AnimationState.RUNNING

    def start(self, samples: Sequence[TrajectorySample]) -> None:
        """
        Start a new run, replacing any run in progress.

        Parameters
        ----------
        samples : Sequence[TrajectorySample]
            Path to animate. An empty sequence ends the run immediately
            without emitting anything.
        """
        self._drop_pending_frame()

        self.samples = tuple(samples)
        self.current_frame = 0
        self.state = AnimationState.RUNNING
        self._signal_control(False)

        if not self.samples:
            self._finish()
            return

        self._pending_frame = self.scheduler.request_frame(self._step)

    def cancel(self) -> None:
        """Abort the current run without emitting a resting position."""
        if not self.running:
            return
        self._drop_pending_frame()
        self.state = AnimationState.IDLE
        self._signal_control(True)

    def _step(self) -> None:
        self._pending_frame = None

        progress = self.current_frame / self.total_frames
        index = math.floor(progress * (len(self.samples) - 1))
        self.on_position(self.samples[index])
        self.current_frame += 1

        if self.current_frame <= self.total_frames:
            self._pending_frame = self.scheduler.request_frame(self._step)
        else:
            self._finish()

    def _finish(self) -> None:
        if self.samples and self.on_rest is not None:
            self.on_rest(self.samples[-1])
        self.state = AnimationState.IDLE
        self._signal_control(True)

    def _drop_pending_frame(self) -> None:
        if self._pending_frame is not None:
            self.scheduler.cancel_frame(self._pending_frame)
            self._pending_frame = None

    def _signal_control(self, enabled: bool) -> None:
        if self.on_control is not None:
            self.on_control(enabled)
