"""
Discretization of a launch into (distance, height) samples for plotting.
"""
from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from projectilelab.core.kinematics import KinematicsResult
from projectilelab.utils.validation import (
    validate_count,
    validate_finite,
    validate_non_negative,
)

DEFAULT_STEP_COUNT = 100
# Relative to the peak height; absorbs rounding at the analytic landing time
DEFAULT_TOLERANCE = 1e-10
AXIS_STEP = 10.0


class TrajectorySample(NamedTuple):
    """One point of the sampled path [m]."""

    distance: float
    height: float


def sample(
    result: KinematicsResult,
    step_count: int = DEFAULT_STEP_COUNT,
    tolerance: float = DEFAULT_TOLERANCE,
) -> tuple[TrajectorySample, ...]:
    """
    Sample the parabolic path of a launch.

    Parameters
    ----------
    result : KinematicsResult
        Evaluated launch
    step_count : int
        Number of equal time intervals over [0, time_of_flight]. Up to
        ``step_count + 1`` samples are produced.
    tolerance : float
        Heights down to ``-tolerance * max(1, max_height)`` are accepted
        and clamped to 0. Scaling by the peak height keeps the landing
        sample for long, low-gravity flights.

    Returns
    -------
    tuple[TrajectorySample, ...]
        Ordered samples, truncated at the first one below the tolerance.
        A launch with no flight time yields only the launch point.

    Raises
    ------
    ValueError
        If step_count is not a positive integer or tolerance is negative

    Notes
    -----
    The output only depends on the arguments, so calling again with the same
    result reproduces the same sequence.
    """
    validate_count(step_count, "Step count")
    validate_finite(tolerance, "Tolerance")
    validate_non_negative(tolerance, "Tolerance")

    tof = result.time_of_flight
    if not tof > 0:
        return (TrajectorySample(0.0, 0.0),)

    t = np.arange(step_count + 1, dtype=np.float64) / step_count * tof
    x, y = result.position(t)

    floor = -tolerance * max(1.0, result.max_height)
    below = np.flatnonzero(y < floor)
    end = int(below[0]) if below.size else len(t)

    return tuple(
        TrajectorySample(float(xi), max(0.0, float(yi)))
        for xi, yi in zip(x[:end], y[:end])
    )


def axis_bound(value: float, step: float = AXIS_STEP) -> float:
    """
    Round an axis extent up to the next multiple of ``step``.

    Zero, negative and non-finite extents give ``step`` so the axis never
    collapses.

    Examples
    --------
    >>> axis_bound(40.8)
    50.0
    >>> axis_bound(0.0)
    10.0
    """
    if not math.isfinite(value) or value <= 0:
        return float(step)
    return float(math.ceil(value / step) * step)
