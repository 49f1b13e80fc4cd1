"""Validation utilities for pyunimodal."""

from .array_validator import is_monotonic
from .curve_validator import validate_stroke, validate_fit_shape

__all__ = [
    "is_monotonic",
    "validate_stroke",
    "validate_fit_shape"
]
