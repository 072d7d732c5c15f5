"""Core physics and animation: kinematics, sampling and launch stepping."""

from .animator import TOTAL_FRAMES, AnimationState, LaunchAnimator
from .kinematics import (
    DEFAULT_GRAVITY,
    GRAVITY_PRESETS,
    KinematicsResult,
    LaunchParameters,
    evaluate,
    format_results,
    parse_gravity,
)
from .sampler import (
    DEFAULT_STEP_COUNT,
    DEFAULT_TOLERANCE,
    TrajectorySample,
    axis_bound,
    sample,
)
from .scheduler import FrameScheduler, ManualScheduler

__all__ = [
    "evaluate",
    "parse_gravity",
    "format_results",
    "KinematicsResult",
    "LaunchParameters",
    "DEFAULT_GRAVITY",
    "GRAVITY_PRESETS",
    "sample",
    "axis_bound",
    "TrajectorySample",
    "DEFAULT_STEP_COUNT",
    "DEFAULT_TOLERANCE",
    "LaunchAnimator",
    "AnimationState",
    "TOTAL_FRAMES",
    "FrameScheduler",
    "ManualScheduler",
]
