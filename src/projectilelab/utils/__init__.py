"""Utility functions for ProjectileLab."""

from .validation import (
    validate_count,
    validate_finite,
    validate_non_negative,
    validate_positive,
)

__all__ = [
    "validate_positive",
    "validate_non_negative",
    "validate_finite",
    "validate_count",
]
