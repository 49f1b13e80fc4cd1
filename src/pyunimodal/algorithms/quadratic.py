import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
import sympy as sp

from pyunimodal.core.curves import SampledCurve
from pyunimodal.core.exceptions import CurveFitError
from pyunimodal.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuadraticFit:
    """
    Concave quadratic ``c0 + c1*x + c2*x**2`` fitted by least squares.

    Attributes:
        coefficients (Tuple[float, float, float]): (c0, c1, c2), lowest degree first.
        clamped (bool): True if the fitted c2 was positive and replaced by the curvature cap.
        error (float): Sum of squared residuals of the returned coefficients.
    """
    coefficients: Tuple[float, float, float]
    clamped: bool
    error: float

    def evaluate(self, x: Union[float, np.ndarray, Sequence[float]]) -> Union[float, np.ndarray]:
        c0, c1, c2 = self.coefficients
        x_arr = np.asarray(x, dtype=np.float64)
        result = c0 + c1 * x_arr + c2 * x_arr ** 2
        return float(result) if result.ndim == 0 else result

    def as_expression(self, symbol: sp.Symbol = None) -> sp.Expr:
        x = symbol if symbol is not None else sp.Symbol('x')
        c0, c1, c2 = (sp.Float(c) for c in self.coefficients)
        return c0 + c1 * x + c2 * x ** 2

    def to_curve(self, curve: SampledCurve) -> SampledCurve:
        """Evaluate the fit on the grid of ``curve``."""
        return curve.with_y(self.evaluate(curve.x))


def fit_concave_quadratic(x_values: Union[np.ndarray, Sequence[float]],
                          y_values: Union[np.ndarray, Sequence[float]],
                          max_curvature: float = ProcessingConstants.QUADRATIC_MAX_CURVATURE) -> QuadraticFit:
    """
    Fit ``y = c0 + c1*x + c2*x**2`` through the normal equations and force concavity.

    A positive ``c2`` is replaced by ``max_curvature`` while c0 and c1 keep their
    least-squares values.
    Raises:
        ValueError: If the arrays differ in length
        CurveFitError: If the normal equations are singular (fewer than 3 distinct x)
    """
    x = np.asarray(x_values, dtype=np.float64)
    y = np.asarray(y_values, dtype=np.float64)
    if x.size != y.size:
        raise ValueError(f"Array length mismatch: x({x.size}) != y({y.size})")
    design = np.vander(x, ProcessingConstants.QUADRATIC_DEGREE + 1, increasing=True)
    normal_matrix = design.T @ design
    rhs = design.T @ y
    logger.debug("Solving quadratic normal equations for %d samples", x.size)
    try:
        if np.linalg.matrix_rank(normal_matrix) < ProcessingConstants.QUADRATIC_DEGREE + 1:
            raise np.linalg.LinAlgError("Singular matrix")
        coefficients = np.linalg.solve(normal_matrix, rhs)
    except np.linalg.LinAlgError as e:
        raise CurveFitError(f"Quadratic regression failed for {x.size} samples: {str(e)}") from e
    clamped = bool(coefficients[2] > 0)
    if clamped:
        logger.info("Fitted curvature %.6f is convex, clamping to %.6f", coefficients[2], max_curvature)
        coefficients[2] = max_curvature
    error = float(np.sum((y - design @ coefficients) ** 2))
    logger.info("Quadratic fit: c0=%.6f, c1=%.6f, c2=%.6f, error=%.6f",
                coefficients[0], coefficients[1], coefficients[2], error)
    return QuadraticFit(coefficients=tuple(float(c) for c in coefficients), clamped=clamped, error=error)
