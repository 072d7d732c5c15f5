"""
ProjectileLab - Interactive 2D projectile motion under constant gravity.

Core Components
---------------
evaluate : Closed-form launch kinematics
sample : Trajectory discretization for plotting
LaunchAnimator : Frame-stepped launch animation

Presentation
------------
app.ProjectileApp : Matplotlib window with sliders and launch button
visualization.plotting.plot_trajectory : Static matplotlib/plotly figure
visualization.export.export_animation : Headless GIF rendering of a launch

Examples
--------
>>> from projectilelab import evaluate, sample
>>> result = evaluate(20.0, 45.0, 9.8)
>>> samples = sample(result)
>>> len(samples)
101
"""

__version__ = "0.1.0"

from projectilelab.core.animator import TOTAL_FRAMES, AnimationState, LaunchAnimator
from projectilelab.core.kinematics import (
    DEFAULT_GRAVITY,
    GRAVITY_PRESETS,
    KinematicsResult,
    LaunchParameters,
    evaluate,
    format_results,
    parse_gravity,
)
from projectilelab.core.sampler import TrajectorySample, axis_bound, sample
from projectilelab.core.scheduler import FrameScheduler, ManualScheduler

__all__ = [
    # Version
    "__version__",
    # Kinematics
    "evaluate",
    "parse_gravity",
    "format_results",
    "KinematicsResult",
    "LaunchParameters",
    "DEFAULT_GRAVITY",
    "GRAVITY_PRESETS",
    # Sampling
    "sample",
    "axis_bound",
    "TrajectorySample",
    # Animation
    "LaunchAnimator",
    "AnimationState",
    "TOTAL_FRAMES",
    "FrameScheduler",
    "ManualScheduler",
]
