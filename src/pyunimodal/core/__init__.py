"""Core value types and exceptions for pyunimodal."""

from .curves import Point, PointLike, Shape, SampledCurve, FitResult, LatticeResult
from .exceptions import CurveError, CurveAlignmentError, CurveFitError, FitTimeoutError, FitCancelledError

__all__ = [
    "Point",
    "PointLike",
    "Shape",
    "SampledCurve",
    "FitResult",
    "LatticeResult",
    "CurveError",
    "CurveAlignmentError",
    "CurveFitError",
    "FitTimeoutError",
    "FitCancelledError"
]
