"""
Verification Test Suite for ProjectileLab.

These tests compare evaluated and sampled trajectories against textbook
results for ideal projectile motion.

Test Categories:
- Range: v0² sin(2θ) / g, complementary angles, 45° optimum
- Shape: parabola symmetry, apex height, landing point
"""

import numpy as np
import pytest


# -----------------------------------------------------------------------------
# Common Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(params=[1.62, 3.71, 9.8, 24.79], ids=["moon", "mars", "earth", "jupiter"])
def gravity(request):
    return request.param


@pytest.fixture(params=[0.0, 5.0, 20.0, 73.5])
def speed(request):
    return request.param


@pytest.fixture
def angles():
    """Launch angles across the slider range [deg]."""
    return np.linspace(0.0, 90.0, 19)
