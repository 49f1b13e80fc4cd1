import logging

import numpy as np

from pyunimodal.algorithms.transforms import (least_decreasing_envelope, least_increasing_envelope,
                                              scale_peak_to_one)
from pyunimodal.core.curves import FitResult, LatticeResult, SampledCurve
from pyunimodal.core.exceptions import CurveAlignmentError
from pyunimodal.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


def require_same_grid(**curves: SampledCurve) -> None:
    """Raise CurveAlignmentError unless all named curves share the grid of the first one."""
    items = list(curves.items())
    first_name, first = items[0]
    for name, curve in items[1:]:
        if not first.same_grid(curve):
            logger.error("Grid mismatch between '%s' (%d samples) and '%s' (%d samples)",
                         first_name, len(first), name, len(curve))
            raise CurveAlignmentError(ErrorMessages.GRID_MISMATCH.format(first=first_name, second=name))


def pointwise_max(f: SampledCurve, g: SampledCurve) -> SampledCurve:
    """Index-aligned maximum, the union of the two bumps."""
    require_same_grid(f=f, g=g)
    return f.with_y(np.maximum(f.y, g.y))


def pointwise_min(f: SampledCurve, g: SampledCurve) -> SampledCurve:
    """Index-aligned minimum, the intersection of the two bumps."""
    require_same_grid(f=f, g=g)
    return f.with_y(np.minimum(f.y, g.y))


def join(union: SampledCurve, f_increasing: SampledCurve, g_increasing: SampledCurve) -> SampledCurve:
    """``min(union, min(f_increasing, g_increasing))`` per index, using least-increasing envelopes."""
    require_same_grid(union=union, f_increasing=f_increasing, g_increasing=g_increasing)
    return union.with_y(np.minimum(union.y, np.minimum(f_increasing.y, g_increasing.y)))


def meet(union: SampledCurve, f_decreasing: SampledCurve, g_decreasing: SampledCurve) -> SampledCurve:
    """``min(union, min(f_decreasing, g_decreasing))`` per index, using least-decreasing envelopes."""
    require_same_grid(union=union, f_decreasing=f_decreasing, g_decreasing=g_decreasing)
    return union.with_y(np.minimum(union.y, np.minimum(f_decreasing.y, g_decreasing.y)))


def combine_fits(f: FitResult, g: FitResult) -> LatticeResult:
    """
    Derive every lattice curve for a pair of fits.

    Both fits are scaled to peak 1 first; union, intersection and the envelopes are taken
    from the scaled curves, and join/meet are built from the union and the envelopes.
    Args:
        f: First fit
        g: Second fit, sampled on the same grid as ``f``
    Returns:
        LatticeResult
    Raises:
        CurveAlignmentError: If the fits are sampled on different grids
    """
    require_same_grid(f=f.fit, g=g.fit)
    logger.info("Combining fits: f peak at index %d, g peak at index %d", f.peak_index, g.peak_index)
    f_scaled = scale_peak_to_one(f.fit, f.peak_index)
    g_scaled = scale_peak_to_one(g.fit, g.peak_index)
    union = pointwise_max(f_scaled, g_scaled)
    intersection = pointwise_min(f_scaled, g_scaled)
    f_increasing = least_increasing_envelope(f_scaled)
    g_increasing = least_increasing_envelope(g_scaled)
    f_decreasing = least_decreasing_envelope(f_scaled)
    g_decreasing = least_decreasing_envelope(g_scaled)
    result = LatticeResult(
        f_scaled=f_scaled,
        g_scaled=g_scaled,
        union=union,
        intersection=intersection,
        f_increasing=f_increasing,
        g_increasing=g_increasing,
        f_decreasing=f_decreasing,
        g_decreasing=g_decreasing,
        join=join(union, f_increasing, g_increasing),
        meet=meet(union, f_decreasing, g_decreasing),
    )
    logger.debug("Lattice curves computed on %d samples", len(union))
    return result
