"""
Headless rendering of a launch animation to a GIF.

Runs the same animator as the interactive app, stepped by a manual scheduler
instead of GUI timers, and grabs one image per emitted frame.
"""
from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.animation import PillowWriter

from projectilelab.core.animator import TOTAL_FRAMES, LaunchAnimator
from projectilelab.core.kinematics import LaunchParameters
from projectilelab.core.sampler import DEFAULT_STEP_COUNT, TrajectorySample, sample
from projectilelab.core.scheduler import ManualScheduler
from projectilelab.utils.validation import validate_count
from projectilelab.visualization.renderer import TrajectoryRenderer


def export_animation(
    params: LaunchParameters,
    path: str | Path,
    fps: int = 30,
    step_count: int = DEFAULT_STEP_COUNT,
    total_frames: int = TOTAL_FRAMES,
    dpi: int = 100,
) -> int:
    """
    Render a full launch animation to a GIF file.

    Parameters
    ----------
    params : LaunchParameters
        Launch to animate
    path : str | Path
        Output file; parent directories are created
    fps : int
        Playback rate of the GIF
    step_count : int
        Sampling intervals of the trajectory
    total_frames : int
        Animator frames per run
    dpi : int
        Resolution of the grabbed frames

    Returns
    -------
    int
        Number of frames written (``total_frames + 1``)
    """
    validate_count(fps, "Frames per second")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    result = params.evaluate()
    samples = sample(result, step_count=step_count)

    fig, ax = plt.subplots(figsize=(8, 5))
    renderer = TrajectoryRenderer(ax)
    renderer.draw_curve(samples, result)

    writer = PillowWriter(fps=fps)
    frames = 0

    def grab(point: TrajectorySample) -> None:
        nonlocal frames
        renderer.draw_position(point)
        writer.grab_frame()
        frames += 1

    scheduler = ManualScheduler()
    animator = LaunchAnimator(
        scheduler,
        on_position=grab,
        on_rest=renderer.draw_position,
        total_frames=total_frames,
    )
    try:
        with writer.saving(fig, str(path), dpi):
            animator.start(samples)
            scheduler.run_until_idle()
    finally:
        plt.close(fig)

    return frames
