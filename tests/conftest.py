"""Shared pytest fixtures for pyunimodal tests."""
import pytest
import numpy as np

from pyunimodal.core.curves import Point, SampledCurve
from pyunimodal.algorithms.sampler import build_grid


@pytest.fixture
def grid():
    """Default sampling grid (101 samples over [0, 1])."""
    return build_grid(0.01)


@pytest.fixture
def triangle_stroke():
    """Stroke forming a triangle that peaks at x=0.5."""
    return [Point(0.0, 0.0), Point(0.5, 1.0), Point(1.0, 0.0)]


@pytest.fixture
def triangle_curve(grid):
    """Triangle peaking at x=0.5 sampled on the default grid."""
    return SampledCurve(grid, 1.0 - 2.0 * np.abs(grid - 0.5))


@pytest.fixture
def noisy_bump_curve(grid):
    """Gaussian bump centred at x=0.3 with reproducible noise."""
    rng = np.random.default_rng(2024)
    y = np.exp(-((grid - 0.3) ** 2) / 0.02) + rng.normal(scale=0.05, size=grid.size)
    return SampledCurve(grid, y)


@pytest.fixture
def small_curve():
    """Five-sample curve with a clear peak at index 2."""
    return SampledCurve(np.array([0.0, 0.25, 0.5, 0.75, 1.0]), np.array([0.2, 0.6, 1.0, 0.5, 0.1]))


@pytest.fixture
def dict_stroke():
    """Stroke in the mapping representation used by drawing front-ends, out of order."""
    return [
        {'x': 0.9, 'y': 0.3},
        {'x': 0.1, 'y': 0.2},
        {'x': 0.5, 'y': 0.8},
        {'x': 0.3, 'y': 0.6},
        {'x': 0.7, 'y': 0.6},
    ]
