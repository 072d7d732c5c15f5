"""
Closed-form kinematics for a projectile launched from ground level.

Maps launch speed, launch angle and gravity to the derived quantities of an
ideal (drag-free) parabolic flight.
"""
from __future__ import annotations

import math
import warnings
from dataclasses import dataclass

from projectilelab.utils.validation import validate_finite, validate_non_negative

# Standard gravity used whenever the supplied value is unusable [m/s²]
DEFAULT_GRAVITY = 9.8

GRAVITY_PRESETS = {
    "earth": 9.8,
    "moon": 1.62,
    "mars": 3.71,
    "jupiter": 24.79,
}


def parse_gravity(raw: object, default: float = DEFAULT_GRAVITY) -> float:
    """
    Resolve a user-supplied gravity value.

    Parameters
    ----------
    raw : object
        Number, numeric string or preset name (see ``GRAVITY_PRESETS``).
    default : float
        Value substituted when ``raw`` is not a finite positive number.

    Returns
    -------
    g : float
        Gravitational acceleration [m/s²]

    Notes
    -----
    Falling back never raises; a ``RuntimeWarning`` records the substitution.
    """
    if isinstance(raw, str) and raw.strip().lower() in GRAVITY_PRESETS:
        return GRAVITY_PRESETS[raw.strip().lower()]

    try:
        g = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        g = math.nan

    if not math.isfinite(g) or g <= 0:
        warnings.warn(
            f"Unusable gravity {raw!r}, falling back to {default} m/s²",
            RuntimeWarning,
            stacklevel=2,
        )
        return float(default)
    return g


@dataclass(frozen=True)
class KinematicsResult:
    """
    Derived quantities of one launch.

    Attributes
    ----------
    initial_speed : float
        Launch speed v0 [m/s]
    angle_rad : float
        Launch angle [rad]
    gravity : float
        Gravitational acceleration [m/s²]
    horizontal_velocity : float
        v0·cos(θ) [m/s]
    vertical_velocity : float
        v0·sin(θ) [m/s]
    time_of_flight : float
        2·vy/g [s], 0 when vy <= 0
    max_range : float
        vx·T [m], 0 when vy <= 0
    max_height : float
        vy²/(2g) [m], 0 when vy <= 0
    """

    initial_speed: float
    angle_rad: float
    gravity: float
    horizontal_velocity: float
    vertical_velocity: float
    time_of_flight: float
    max_range: float
    max_height: float

    @property
    def angle_deg(self) -> float:
        return math.degrees(self.angle_rad)

    def position(self, t):
        """Unclipped (x, y) of the projectile at time t (scalar or array)."""
        x = self.horizontal_velocity * t
        y = self.vertical_velocity * t - 0.5 * self.gravity * t ** 2
        return x, y


def evaluate(v0: float, angle_deg: float, g: object = DEFAULT_GRAVITY) -> KinematicsResult:
    """
    Evaluate launch kinematics.

    Parameters
    ----------
    v0 : float
        Launch speed [m/s], must be non-negative
    angle_deg : float
        Launch angle above the horizontal [deg]
    g : object
        Gravity [m/s²]; anything accepted by :func:`parse_gravity`

    Returns
    -------
    KinematicsResult

    Raises
    ------
    ValueError
        If v0 is negative

    Examples
    --------
    >>> r = evaluate(20.0, 45.0, 9.8)
    >>> round(r.max_range, 2)
    40.82
    """
    v0 = float(v0)
    angle_deg = float(angle_deg)
    validate_finite(v0, "Initial speed")
    validate_non_negative(v0, "Initial speed")
    validate_finite(angle_deg, "Launch angle")
    gravity = parse_gravity(g)

    angle_rad = angle_deg * (math.pi / 180)
    vx = v0 * math.cos(angle_rad)
    vy = v0 * math.sin(angle_rad)

    # Launching level or downward never leaves the ground
    if vy <= 0:
        time_of_flight = max_range = max_height = 0.0
    else:
        time_of_flight = (2 * vy) / gravity
        max_range = vx * time_of_flight
        max_height = (vy * vy) / (2 * gravity)

    return KinematicsResult(
        initial_speed=v0,
        angle_rad=angle_rad,
        gravity=gravity,
        horizontal_velocity=vx,
        vertical_velocity=vy,
        time_of_flight=time_of_flight,
        max_range=max_range,
        max_height=max_height,
    )


@dataclass
class LaunchParameters:
    """
    Snapshot of the launch inputs.

    Rebuilt from the controls on every change; ``gravity`` is kept as supplied
    and only resolved on :meth:`evaluate`.
    """

    initial_speed: float
    launch_angle_deg: float
    gravity: object = DEFAULT_GRAVITY

    def evaluate(self) -> KinematicsResult:
        return evaluate(self.initial_speed, self.launch_angle_deg, self.gravity)


def format_results(result: KinematicsResult) -> dict[str, str]:
    """
    Format the derived quantities for display, two decimals with units.

    Returns
    -------
    dict[str, str]
        Keys: ``range``, ``height``, ``time``, ``vx``, ``vy``
    """
    return {
        "range": f"{result.max_range:.2f} m",
        "height": f"{result.max_height:.2f} m",
        "time": f"{result.time_of_flight:.2f} s",
        "vx": f"{result.horizontal_velocity:.2f} m/s",
        "vy": f"{result.vertical_velocity:.2f} m/s",
    }
