"""
Tests for the launch animator state machine and the manual scheduler.
"""
import math

import pytest

from projectilelab.core.animator import TOTAL_FRAMES, AnimationState, LaunchAnimator
from projectilelab.core.kinematics import evaluate
from projectilelab.core.sampler import TrajectorySample, sample
from projectilelab.core.scheduler import ManualScheduler


class Recorder:
    """Collects everything the animator emits."""

    def __init__(self):
        self.positions = []
        self.rests = []
        self.control = []

    def attach(self, scheduler, **kwargs):
        return LaunchAnimator(
            scheduler,
            on_position=self.positions.append,
            on_rest=self.rests.append,
            on_control=self.control.append,
            **kwargs,
        )


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def samples():
    return sample(evaluate(20.0, 45.0, 9.8))


# --- Scheduler ---

def test_scheduler_runs_callbacks_next_tick(scheduler):
    calls = []
    scheduler.request_frame(lambda: calls.append("a"))
    assert calls == []
    assert scheduler.tick() == 1
    assert calls == ["a"]
    assert scheduler.frame == 1


def test_scheduler_defers_requests_made_during_tick(scheduler):
    calls = []

    def first():
        calls.append(1)
        scheduler.request_frame(lambda: calls.append(2))

    scheduler.request_frame(first)
    scheduler.tick()
    assert calls == [1]
    scheduler.tick()
    assert calls == [1, 2]


def test_scheduler_cancel(scheduler):
    calls = []
    handle = scheduler.request_frame(lambda: calls.append("x"))
    scheduler.cancel_frame(handle)
    scheduler.cancel_frame(handle)  # second cancel is a no-op
    assert scheduler.pending == 0
    assert scheduler.run_until_idle() == 0
    assert calls == []


def test_scheduler_cancel_within_same_tick(scheduler):
    calls = []
    handles = {}

    def first():
        calls.append("a")
        scheduler.cancel_frame(handles["b"])

    handles["a"] = scheduler.request_frame(first)
    handles["b"] = scheduler.request_frame(lambda: calls.append("b"))
    assert scheduler.tick() == 1
    assert calls == ["a"]
    assert scheduler.pending == 0


def test_scheduler_run_until_idle_limit(scheduler):
    def forever():
        scheduler.request_frame(forever)

    scheduler.request_frame(forever)
    with pytest.raises(RuntimeError, match="still busy"):
        scheduler.run_until_idle(max_ticks=5)


# --- Animator ---

class TestLaunchRun:

    def test_initial_state(self, scheduler, recorder):
        animator = recorder.attach(scheduler)
        assert animator.state is AnimationState.IDLE
        assert animator.total_frames == TOTAL_FRAMES
        assert not animator.running

    def test_start_disables_control_and_schedules(self, scheduler, recorder, samples):
        animator = recorder.attach(scheduler)
        animator.start(samples)
        assert animator.state is AnimationState.RUNNING
        assert animator.current_frame == 0
        assert recorder.control == [False]
        assert recorder.positions == []  # first frame waits for the scheduler
        assert scheduler.pending == 1

    def test_full_run(self, scheduler, recorder, samples):
        animator = recorder.attach(scheduler)
        animator.start(samples)
        ticks = scheduler.run_until_idle()

        assert ticks == TOTAL_FRAMES + 1
        assert len(recorder.positions) == TOTAL_FRAMES + 1
        assert recorder.positions[0] == samples[0]
        assert recorder.positions[-1] == samples[-1]
        assert recorder.rests == [samples[-1]]
        assert recorder.control == [False, True]
        assert animator.state is AnimationState.IDLE
        assert animator.current_frame == TOTAL_FRAMES + 1

    def test_frame_to_sample_mapping(self, scheduler, recorder, samples):
        animator = recorder.attach(scheduler)
        animator.start(samples)
        scheduler.run_until_idle()
        n = len(samples)
        for frame, point in enumerate(recorder.positions):
            expected = samples[math.floor(frame / TOTAL_FRAMES * (n - 1))]
            assert point == expected

    def test_positions_move_forward(self, scheduler, recorder, samples):
        animator = recorder.attach(scheduler)
        animator.start(samples)
        scheduler.run_until_idle()
        distances = [p.distance for p in recorder.positions]
        assert distances == sorted(distances)

    def test_custom_frame_count(self, scheduler, recorder, samples):
        animator = recorder.attach(scheduler, total_frames=10)
        animator.start(samples)
        assert scheduler.run_until_idle() == 11
        assert len(recorder.positions) == 11

    def test_invalid_frame_count(self, scheduler, recorder):
        with pytest.raises(ValueError):
            recorder.attach(scheduler, total_frames=0)

    def test_restartable_after_completion(self, scheduler, recorder, samples):
        animator = recorder.attach(scheduler)
        animator.start(samples)
        scheduler.run_until_idle()
        animator.start(samples)
        scheduler.run_until_idle()
        assert len(recorder.positions) == 2 * (TOTAL_FRAMES + 1)
        assert recorder.control == [False, True, False, True]

    def test_works_without_optional_callbacks(self, scheduler, samples):
        positions = []
        animator = LaunchAnimator(scheduler, on_position=positions.append)
        animator.start(samples)
        scheduler.run_until_idle()
        assert len(positions) == TOTAL_FRAMES + 1
        assert animator.state is AnimationState.IDLE


class TestDegenerateRuns:

    def test_empty_samples_finish_immediately(self, scheduler, recorder):
        animator = recorder.attach(scheduler)
        animator.start([])
        assert animator.state is AnimationState.IDLE
        assert recorder.control == [False, True]
        assert recorder.positions == []
        assert recorder.rests == []
        assert scheduler.pending == 0

    def test_flat_launch_has_no_motion(self, scheduler, recorder):
        origin = TrajectorySample(0.0, 0.0)
        animator = recorder.attach(scheduler)
        animator.start(sample(evaluate(10.0, 0.0, 9.8)))
        scheduler.run_until_idle()
        assert set(recorder.positions) == {origin}
        assert recorder.rests == [origin]
        assert animator.state is AnimationState.IDLE


class TestCancellation:

    def test_restart_mid_run(self, scheduler, recorder, samples):
        animator = recorder.attach(scheduler)
        animator.start(samples)
        for _ in range(60):
            scheduler.tick()
        assert animator.current_frame == 60
        assert len(recorder.positions) == 60

        other = sample(evaluate(30.0, 60.0, 9.8))
        animator.start(other)
        assert animator.current_frame == 0
        assert animator.state is AnimationState.RUNNING
        assert scheduler.pending == 1
        assert len(recorder.positions) == 60  # nothing emitted by the restart

        scheduler.run_until_idle()
        replacement = recorder.positions[60:]
        assert len(replacement) == TOTAL_FRAMES + 1
        assert all(p in other for p in replacement)
        assert recorder.rests == [other[-1]]
        # control stays disabled across the restart
        assert recorder.control == [False, False, True]

    def test_cancel(self, scheduler, recorder, samples):
        animator = recorder.attach(scheduler)
        animator.start(samples)
        scheduler.tick()
        animator.cancel()
        assert animator.state is AnimationState.IDLE
        assert scheduler.pending == 0
        assert recorder.control == [False, True]
        assert recorder.rests == []
        scheduler.run_until_idle()
        assert len(recorder.positions) == 1

    def test_cancel_when_idle_is_noop(self, scheduler, recorder):
        animator = recorder.attach(scheduler)
        animator.cancel()
        assert recorder.control == []
        assert animator.state is AnimationState.IDLE
