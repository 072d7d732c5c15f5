"""
Validation utilities for launch parameters and sampling settings.

Strict checks raise ValueError; non-strict checks issue a RuntimeWarning.
"""
from __future__ import annotations

import math
import numbers
import warnings


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Validate that a scalar value is positive.

    Parameters
    ----------
    value : float
        Value to validate
    name : str
        Parameter name for error messages
    strict : bool
        If True, raise ValueError. If False, issue warning.

    Raises
    ------
    ValueError
        If strict=True and value <= 0
    """
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        if strict:
            raise ValueError(msg)
        else:
            warnings.warn(msg, RuntimeWarning, stacklevel=2)


def validate_non_negative(value: float, name: str) -> None:
    """Validate that a value is non-negative."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_finite(value: float, name: str) -> None:
    """Validate that a value is neither NaN nor infinite."""
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def validate_count(value: int, name: str) -> None:
    """
    Validate a positive integer count (steps, frames).

    Raises
    ------
    ValueError
        If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
