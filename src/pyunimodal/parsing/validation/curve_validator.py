"""Validation of raw strokes and fitted curves."""

import logging
import math
from typing import List, Sequence

from pyunimodal.core.curves import FitResult, Point, PointLike, Shape
from pyunimodal.parsing.validation.array_validator import is_monotonic

logger = logging.getLogger(__name__)


def validate_stroke(points: Sequence[PointLike]) -> List[Point]:
    """
    Convert a raw stroke to Points, rejecting empty strokes and non-finite coordinates.
    Raises:
        ValueError: If the stroke is empty or a point cannot be converted
    """
    if points is None or len(points) == 0:
        raise ValueError("Stroke contains no points")
    converted = []
    for i, p in enumerate(points):
        try:
            point = Point.from_any(p)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid point at index {i}: {str(e)}") from e
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise ValueError(f"Point at index {i} has non-finite coordinates: ({point.x}, {point.y})")
        converted.append(point)
    logger.debug("Validated stroke of %d points", len(converted))
    return converted


def validate_fit_shape(result: FitResult, tolerance: float = 1e-9, raise_error: bool = False) -> bool:
    """Check that a fit rises to its peak and falls after it (mirrored for valleys)."""
    rising, falling = ("non_decreasing", "non_increasing")
    if result.shape == Shape.CONVEX:
        rising, falling = falling, rising
    y = result.fit.y
    left_ok = is_monotonic(y[:result.peak_index + 1], "Fit before peak", rising, tolerance, raise_error)
    right_ok = is_monotonic(y[result.peak_index:], "Fit after peak", falling, tolerance, raise_error)
    return left_ok and right_ok
