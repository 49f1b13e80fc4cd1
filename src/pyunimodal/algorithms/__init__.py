"""
Numerical algorithms of the fitting pipeline.

This module provides resampling of freehand strokes, isotonic (PAVA) and unimodal
regression, pointwise curve transforms, lattice operations on pairs of fitted
curves, concave quadratic regression and symbolic export.
"""

from .sampler import resample, sort_points, build_grid
from .isotonic import isotonic_regression, compute_weights
from .unimodal import fit_unimodal, calculate_error
from .transforms import (scale_peak_to_one, flip_about_peak, flip_about_one,
                         least_increasing_envelope, least_decreasing_envelope)
from .lattice import pointwise_max, pointwise_min, join, meet, combine_fits, require_same_grid
from .quadratic import QuadraticFit, fit_concave_quadratic
from .piecewise_builder import PiecewiseBuilder

__all__ = [
    "resample",
    "sort_points",
    "build_grid",
    "isotonic_regression",
    "compute_weights",
    "fit_unimodal",
    "calculate_error",
    "scale_peak_to_one",
    "flip_about_peak",
    "flip_about_one",
    "least_increasing_envelope",
    "least_decreasing_envelope",
    "pointwise_max",
    "pointwise_min",
    "join",
    "meet",
    "combine_fits",
    "require_same_grid",
    "QuadraticFit",
    "fit_concave_quadratic",
    "PiecewiseBuilder"
]
