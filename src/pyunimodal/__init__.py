"""
pyunimodal - Unimodal (single-peak) regression of freehand strokes.

This library turns a hand-drawn stroke into a sampled curve, fits the best
curve that rises to a single peak and then falls (or the valley dual), and
derives pointwise transforms and lattice combinations of two fitted curves.

Key Features:
- Resampling of irregular strokes onto a regular grid over [0, 1]
- Weighted isotonic regression (Pool Adjacent Violators Algorithm)
- O(n^2) search for the best unimodal piecewise-isotonic fit
- Peak normalization, reflections and least monotonic envelopes
- Union, intersection, join and meet of two fitted curves
- Concave quadratic regression and symbolic export with SymPy
- Background fitting with a timeout

Main Components:
- Core: Points, sampled curves, fit results and exceptions
- Algorithms: Sampling, regression, transforms and lattice operations
- Execution: Background worker with timeout and cancellation
- Parsing: YAML configuration, data files, tables and validation
- Data: Processing constants and the default configuration
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyunimodal")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"

# Core value types
from .core.curves import Point, Shape, SampledCurve, FitResult, LatticeResult
from .core.exceptions import CurveError, CurveAlignmentError, CurveFitError, FitTimeoutError, FitCancelledError

# Algorithms
from .algorithms.sampler import resample
from .algorithms.isotonic import isotonic_regression
from .algorithms.unimodal import fit_unimodal
from .algorithms.transforms import (scale_peak_to_one, flip_about_peak, flip_about_one,
                                    least_increasing_envelope, least_decreasing_envelope)
from .algorithms.lattice import pointwise_max, pointwise_min, join, meet, combine_fits
from .algorithms.quadratic import fit_concave_quadratic
from .algorithms.piecewise_builder import PiecewiseBuilder

# Execution
from .execution.worker import FitTask, submit_fit, run_with_timeout

# Main API functions
from .parsing.api import (
    DrawingResult,
    fit_drawing,
    compare_drawings,
    fit_from_file,
    curve_to_piecewise,
    load_pipeline_config,
    validate_yaml_file
)
from .parsing.config.pipeline_config import PipelineConfig

__all__ = [
    # Version
    '__version__',

    # Core
    'Point',
    'Shape',
    'SampledCurve',
    'FitResult',
    'LatticeResult',
    'CurveError',
    'CurveAlignmentError',
    'CurveFitError',
    'FitTimeoutError',
    'FitCancelledError',

    # Algorithms
    'resample',
    'isotonic_regression',
    'fit_unimodal',
    'scale_peak_to_one',
    'flip_about_peak',
    'flip_about_one',
    'least_increasing_envelope',
    'least_decreasing_envelope',
    'pointwise_max',
    'pointwise_min',
    'join',
    'meet',
    'combine_fits',
    'fit_concave_quadratic',
    'PiecewiseBuilder',

    # Execution
    'FitTask',
    'submit_fit',
    'run_with_timeout',

    # Main API
    'DrawingResult',
    'fit_drawing',
    'compare_drawings',
    'fit_from_file',
    'curve_to_piecewise',
    'load_pipeline_config',
    'validate_yaml_file',
    'PipelineConfig'
]

# Package metadata
__description__ = "Unimodal regression and lattice operations for hand-drawn curves"
