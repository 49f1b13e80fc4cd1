import logging
import math
from typing import Optional, Sequence, Union

import numpy as np

from pyunimodal.algorithms.isotonic import isotonic_regression
from pyunimodal.core.curves import FitResult, SampledCurve, Shape
from pyunimodal.data.constants import ProcessingConstants, ErrorMessages

logger = logging.getLogger(__name__)


def calculate_error(actual: Union[np.ndarray, Sequence[float]],
                    predicted: Union[np.ndarray, Sequence[float]]) -> float:
    """Sum of squared residuals between the observed values and a fit."""
    actual = np.asarray(actual, dtype=np.float64)
    predicted = np.asarray(predicted, dtype=np.float64)
    if actual.shape != predicted.shape:
        raise ValueError(f"Array length mismatch: actual({actual.size}) != predicted({predicted.size})")
    return float(np.sum((actual - predicted) ** 2))


def fit_unimodal(curve: SampledCurve, shape: Union[Shape, str] = Shape.CONCAVE) -> Optional[FitResult]:
    """
    Find the best piecewise-isotonic fit that rises to a single peak and then falls.

    Every split ``j`` in ``[1, n-2]`` is tried: ``[0..j]`` gets a non-decreasing fit and
    ``[j+1..n-1]`` a non-increasing one. A split replaces the best one only if its total
    squared error is strictly smaller, so ties keep the lowest ``j``. The peak is whichever
    boundary value of the best split is larger (``j`` on ties). For ``Shape.CONVEX`` the
    directions and the boundary comparison are mirrored, and the peak index marks the valley.

    Runs in O(n^2).

    Args:
        curve: Sampled input curve
        shape: ``Shape.CONCAVE`` (peak) or ``Shape.CONVEX`` (valley)
    Returns:
        FitResult, or None when the curve has fewer than 3 samples
    """
    shape = Shape(shape)
    n = len(curve)
    if n < ProcessingConstants.MIN_FIT_POINTS:
        logger.warning(ErrorMessages.INSUFFICIENT_DATA_POINTS.format(
            min_points=ProcessingConstants.MIN_FIT_POINTS, count=n))
        return None
    concave = shape == Shape.CONCAVE
    x, y = curve.x, curve.y
    logger.debug("Searching %d split points for the best %s fit", n - 2, shape.value)
    best_error = math.inf
    best_fit = None
    best_peak_index = 0
    for j in range(1, n - 1):
        left_fit = isotonic_regression(x[:j + 1], y[:j + 1], increasing=concave)
        right_fit = isotonic_regression(x[j + 1:], y[j + 1:], increasing=not concave)
        error = calculate_error(y[:j + 1], left_fit) + calculate_error(y[j + 1:], right_fit)
        if not error < best_error:
            continue
        if concave:
            best_peak_index = j if left_fit[j] >= right_fit[0] else j + 1
        else:
            best_peak_index = j if left_fit[j] <= right_fit[0] else j + 1
        best_fit = np.concatenate((left_fit, right_fit))
        best_error = error
    if best_fit is None:
        # Only reachable when every candidate error is NaN, which finite curves rule out
        logger.error("No split produced a finite error for a curve of %d samples", n)
        return None
    peak = (x[best_peak_index], best_fit[best_peak_index])
    logger.info("Best %s fit: peak index %d at (%.3f, %.3f), error %.6f",
                shape.value, best_peak_index, peak[0], peak[1], best_error)
    return FitResult(fit=curve.with_y(best_fit), peak_index=best_peak_index,
                     error=best_error, shape=shape)
