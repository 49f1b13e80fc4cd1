"""
curves.py

This module defines the value types passed between the stages of the fitting pipeline.
All of them are immutable: every stage returns a fresh object instead of mutating its input.

Classes:
    Point: A single (x, y) sample with named fields. ``Point.from_any`` converts the
           tuple and mapping representations used by drawing front-ends.
    Shape: The two unimodal shapes, a peak (concave) or a valley (convex).
    SampledCurve: An ordered sequence of samples with strictly increasing x, backed by
                  read-only numpy arrays.
    FitResult: The best unimodal fit of a SampledCurve with its peak index and squared error.
    LatticeResult: All curves derived from a pair of fits by the lattice operations.

Type Aliases:
    PointLike: Anything ``Point.from_any`` accepts.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Mapping, Sequence, Tuple, Union

import numpy as np

from pyunimodal.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """
    A sampled point of a drawn curve.

    Attributes:
        x (float): Position along the horizontal axis, conventionally in [0, 1].
        y (float): Value at x, unconstrained.
    """
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_any(cls, obj: "PointLike") -> "Point":
        """Convert a Point, an ``{'x': .., 'y': ..}`` mapping or an ``(x, y)`` pair into a Point."""
        if isinstance(obj, Point):
            return obj
        if isinstance(obj, Mapping):
            try:
                return cls(obj['x'], obj['y'])
            except KeyError as e:
                raise ValueError(f"Point mapping is missing key {e}: {dict(obj)}") from e
        if isinstance(obj, (Sequence, np.ndarray)) and not isinstance(obj, str):
            if len(obj) != 2:
                raise ValueError(f"Point sequence must have exactly 2 elements, got {len(obj)}")
            return cls(obj[0], obj[1])
        raise ValueError(f"Cannot convert {type(obj).__name__} to Point")

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


PointLike = Union[Point, Mapping[str, float], Sequence[float]]


class Shape(str, Enum):
    CONCAVE = "concave"
    CONVEX = "convex"


@dataclass(frozen=True, eq=False)
class SampledCurve:
    """
    An ordered sequence of samples with strictly increasing x.

    Both arrays are copied on construction and made read-only, so a curve can be shared
    between stages without defensive copies. Derived curves on the same grid are created
    with ``with_y``.

    Attributes:
        x (np.ndarray): Strictly increasing sample positions.
        y (np.ndarray): Sample values, same length as x.
    """
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        x = np.array(self.x, dtype=np.float64).ravel()
        y = np.array(self.y, dtype=np.float64).ravel()
        if x.size != y.size:
            raise ValueError(f"Array length mismatch: x({x.size}) != y({y.size})")
        if x.size < ProcessingConstants.MIN_DATA_POINTS:
            raise ValueError("A sampled curve needs at least one sample")
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ValueError("Sampled curve values must be finite")
        if x.size > 1 and np.any(np.diff(x) <= 0):
            raise ValueError("Sampled curve x-values must be strictly increasing")
        x.flags.writeable = False
        y.flags.writeable = False
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    @classmethod
    def from_points(cls, points: Sequence[PointLike]) -> "SampledCurve":
        pts = [Point.from_any(p) for p in points]
        return cls(np.array([p.x for p in pts]), np.array([p.y for p in pts]))

    def __len__(self) -> int:
        return int(self.x.size)

    def __getitem__(self, index: int) -> Point:
        return Point(self.x[index], self.y[index])

    def __iter__(self) -> Iterator[Point]:
        for xi, yi in zip(self.x, self.y):
            yield Point(xi, yi)

    @property
    def points(self) -> List[Point]:
        return list(self)

    @property
    def step(self) -> float:
        """Spacing between the first two samples (0.0 for a single sample)."""
        if len(self) < 2:
            return 0.0
        return float(self.x[1] - self.x[0])

    def with_y(self, values: Union[np.ndarray, Sequence[float]]) -> "SampledCurve":
        """Return a new curve on the same grid with the given y-values."""
        return SampledCurve(self.x, values)

    def slice(self, start: int, stop: int = None) -> "SampledCurve":
        return SampledCurve(self.x[start:stop], self.y[start:stop])

    def same_grid(self, other: "SampledCurve",
                  tolerance: float = ProcessingConstants.GRID_TOLERANCE) -> bool:
        if len(self) != len(other):
            return False
        return bool(np.allclose(self.x, other.x, rtol=0.0, atol=tolerance))

    def allclose(self, other: "SampledCurve", atol: float = 1e-9) -> bool:
        """True if both curves share a grid and their y-values agree within ``atol``."""
        return self.same_grid(other) and bool(np.allclose(self.y, other.y, rtol=0.0, atol=atol))

    def to_array(self) -> np.ndarray:
        """Return an (n, 2) array of [x, y] rows."""
        return np.column_stack((self.x, self.y))


@dataclass(frozen=True)
class FitResult:
    """
    Best unimodal fit of a sampled curve.

    Attributes:
        fit (SampledCurve): Fitted values on the grid of the input curve.
        peak_index (int): Index of the peak (valley for convex fits) in ``fit``.
        error (float): Sum of squared residuals between the fit and the input.
        shape (Shape): Whether the fit rises then falls (concave) or falls then rises (convex).
    """
    fit: SampledCurve
    peak_index: int
    error: float
    shape: Shape = Shape.CONCAVE

    def __post_init__(self):
        if not 0 <= self.peak_index < len(self.fit):
            raise ValueError(f"Peak index {self.peak_index} out of range for a fit of {len(self.fit)} samples")
        if self.error < 0:
            raise ValueError(f"Fit error must be non-negative, got {self.error}")

    @property
    def peak(self) -> Point:
        return self.fit[self.peak_index]

    @property
    def increasing_part(self) -> SampledCurve:
        if self.shape == Shape.CONCAVE:
            return self.fit.slice(0, self.peak_index + 1)
        return self.fit.slice(self.peak_index)

    @property
    def decreasing_part(self) -> SampledCurve:
        if self.shape == Shape.CONCAVE:
            return self.fit.slice(self.peak_index)
        return self.fit.slice(0, self.peak_index + 1)


@dataclass(frozen=True)
class LatticeResult:
    """Curves derived from two fits f and g; all share the grid of the inputs."""
    f_scaled: SampledCurve
    g_scaled: SampledCurve
    union: SampledCurve
    intersection: SampledCurve
    f_increasing: SampledCurve
    g_increasing: SampledCurve
    f_decreasing: SampledCurve
    g_decreasing: SampledCurve
    join: SampledCurve
    meet: SampledCurve
