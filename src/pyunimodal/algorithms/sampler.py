import logging
from typing import List, Sequence

import numpy as np

from pyunimodal.core.curves import Point, PointLike, SampledCurve
from pyunimodal.data.constants import ProcessingConstants, ErrorMessages

logger = logging.getLogger(__name__)


def sort_points(points: Sequence[PointLike]) -> List[Point]:
    """Convert points to ``Point`` and sort them by x, keeping the input order for equal x."""
    converted = [Point.from_any(p) for p in points]
    # sorted() is stable, so ties on x keep their stroke order
    return sorted(converted, key=lambda p: p.x)


def build_grid(step: float = ProcessingConstants.DEFAULT_STEP,
               upper_bound: float = ProcessingConstants.DOMAIN_UPPER_BOUND) -> np.ndarray:
    """
    Build the regular grid ``0, step, 2*step, ...`` up to ``upper_bound``.
    The default bound of 1.001 keeps x=1 on the grid despite floating-point drift.
    """
    if not np.isfinite(step) or step <= 0:
        raise ValueError(ErrorMessages.INVALID_STEP.format(step=step))
    count = int(np.floor(upper_bound / step)) + 1
    # Multiplying instead of accumulating avoids the drift of repeated additions
    grid = ProcessingConstants.DOMAIN_LOWER_BOUND + np.arange(count, dtype=np.float64) * step
    logger.debug("Built sampling grid: step=%.6f, %d samples in [%.3f, %.3f]",
                 step, count, grid[0], grid[-1])
    return grid


def resample(points: Sequence[PointLike], step: float = ProcessingConstants.DEFAULT_STEP) -> SampledCurve:
    """
    Resample a freehand stroke onto a regular grid over [0, 1].

    The points are sorted by x first. For each grid position the scan pointer advances
    while the next input point is still left of the grid position. The input y is taken
    directly when the current input point already reaches the grid position or is the last
    one; otherwise y is linearly interpolated between the bracketing pair.

    Args:
        points: Stroke points in any order, as Points, ``{'x', 'y'}`` mappings or pairs
        step: Grid spacing
    Returns:
        SampledCurve: One sample per grid position
    Raises:
        ValueError: If no points are given or the step is invalid
    """
    if len(points) == 0:
        logger.error("Cannot resample an empty stroke")
        raise ValueError("Cannot resample an empty stroke")
    ordered = sort_points(points)
    grid = build_grid(step)
    logger.debug("Resampling %d stroke points onto %d grid positions", len(ordered), grid.size)
    values = np.empty_like(grid)
    last = len(ordered) - 1
    index = 0
    for k, current_x in enumerate(grid):
        while index < last and ordered[index + 1].x < current_x:
            index += 1
        p0 = ordered[index]
        if index == last or p0.x >= current_x:
            values[k] = p0.y
            continue
        p1 = ordered[index + 1]
        denominator = p1.x - p0.x
        if denominator == 0:
            values[k] = p0.y
            continue
        t = (current_x - p0.x) / denominator
        values[k] = p0.y + t * (p1.y - p0.y)
    logger.info("Resampled stroke of %d points to %d samples (step=%.4f)", len(ordered), grid.size, step)
    return SampledCurve(grid, values)
