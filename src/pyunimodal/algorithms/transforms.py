"""Pointwise transforms applied to fitted curves before they are combined."""
import logging

import numpy as np

from pyunimodal.core.curves import SampledCurve

logger = logging.getLogger(__name__)


def _check_peak_index(curve: SampledCurve, peak_index: int) -> None:
    if not 0 <= peak_index < len(curve):
        raise IndexError(f"Peak index {peak_index} out of range for a curve of {len(curve)} samples")


def scale_peak_to_one(curve: SampledCurve, peak_index: int) -> SampledCurve:
    """
    Divide every value by the value at ``peak_index`` so the peak becomes 1.
    A peak value of exactly 0 leaves the curve unchanged.
    """
    _check_peak_index(curve, peak_index)
    peak_y = curve.y[peak_index]
    if peak_y == 0:
        logger.warning("Peak value at index %d is 0, skipping normalization", peak_index)
        return curve.with_y(curve.y)
    logger.debug("Scaling curve by 1/%.6f (peak index %d)", peak_y, peak_index)
    return curve.with_y(curve.y / peak_y)


def flip_about_peak(curve: SampledCurve, peak_index: int) -> SampledCurve:
    """Reflect the samples up to and including ``peak_index`` through the line y = peak value."""
    _check_peak_index(curve, peak_index)
    peak_y = curve.y[peak_index]
    values = curve.y.copy()
    values[:peak_index + 1] = 2.0 * peak_y - values[:peak_index + 1]
    return curve.with_y(values)


def flip_about_one(curve: SampledCurve) -> SampledCurve:
    """Reflect the samples above 1 through the line y = 1."""
    values = np.where(curve.y > 1.0, 2.0 - curve.y, curve.y)
    flipped = int(np.count_nonzero(curve.y > 1.0))
    if flipped:
        logger.debug("Reflected %d samples above y=1", flipped)
    return curve.with_y(values)


def least_increasing_envelope(curve: SampledCurve) -> SampledCurve:
    """Smallest non-decreasing curve on or above the input (running maximum from the left)."""
    return curve.with_y(np.maximum.accumulate(curve.y))


def least_decreasing_envelope(curve: SampledCurve) -> SampledCurve:
    """Smallest non-increasing curve on or above the input (running maximum from the right)."""
    return curve.with_y(np.maximum.accumulate(curve.y[::-1])[::-1])
