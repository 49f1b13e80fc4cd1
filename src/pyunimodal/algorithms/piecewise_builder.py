import logging
from typing import Tuple

import numpy as np
import sympy as sp

from pyunimodal.core.curves import SampledCurve
from pyunimodal.parsing.config.yaml_keys import CONSTANT_KEY, EXTRAPOLATE_KEY

logger = logging.getLogger(__name__)


class PiecewiseBuilder:
    """Symbolic export of sampled curves as linear-interpolation piecewise functions."""

    VALID_BOUNDS = (CONSTANT_KEY, EXTRAPOLATE_KEY)

    @staticmethod
    def build_from_curve(curve: SampledCurve, x: sp.Symbol = None,
                         lower: str = CONSTANT_KEY, upper: str = CONSTANT_KEY) -> sp.Piecewise:
        """
        Main entry point for curve-based piecewise creation.
        Args:
            curve: Sampled curve (a fit, an envelope, a join, ...)
            x: Symbol of the piecewise function, ``x`` by default
            lower: Behaviour left of the first sample ('constant' or 'extrapolate')
            upper: Behaviour right of the last sample ('constant' or 'extrapolate')
        Returns:
            sp.Piecewise: Linear interpolant of the curve
        """
        x = x if x is not None else sp.Symbol('x')
        PiecewiseBuilder._validate_bounds((lower, upper))
        logger.info("Building piecewise function from %d samples, bounds=(%s, %s)", len(curve), lower, upper)
        try:
            result = PiecewiseBuilder._build_linear(curve.x, curve.y, x, lower, upper)
            logger.debug("Built piecewise function with %d conditions", len(result.args))
            return result
        except Exception as e:
            logger.error("Failed to build piecewise from curve: %s", e, exc_info=True)
            raise ValueError(f"Failed building piecewise from curve: {str(e)}") from e

    @staticmethod
    def _validate_bounds(bounds: Tuple[str, str]) -> None:
        for bound in bounds:
            if bound not in PiecewiseBuilder.VALID_BOUNDS:
                raise ValueError(f"Invalid boundary type '{bound}'. "
                                 f"Must be one of: {', '.join(PiecewiseBuilder.VALID_BOUNDS)}")

    @staticmethod
    def _build_linear(x_array: np.ndarray, y_array: np.ndarray,
                      x: sp.Symbol, lower: str, upper: str) -> sp.Piecewise:
        """
        Create basic linear interpolation piecewise function.
        Args:
            x_array: Sample positions (strictly increasing)
            y_array: Sample values
            x: Symbol
            lower: Lower boundary behavior ('constant' or 'extrapolate')
            upper: Upper boundary behavior ('constant' or 'extrapolate')
        Returns:
            sp.Piecewise: Linear interpolation piecewise function
        """
        xs = [float(v) for v in x_array]
        ys = [float(v) for v in y_array]
        conditions = []
        # Handle lower bound (x < xs[0])
        if lower == EXTRAPOLATE_KEY and len(xs) > 1:
            slope = (ys[1] - ys[0]) / (xs[1] - xs[0])
            lower_expr = ys[0] + slope * (x - xs[0])
        else:
            lower_expr = sp.Float(ys[0])
        conditions.append((lower_expr, x < xs[0]))
        for i in range(len(xs) - 1):
            slope = (ys[i + 1] - ys[i]) / (xs[i + 1] - xs[i])
            expr = ys[i] + slope * (x - xs[i])
            conditions.append((expr, sp.And(x >= xs[i], x < xs[i + 1])))
        # Handle upper bound (x >= xs[-1])
        if upper == EXTRAPOLATE_KEY and len(xs) > 1:
            slope = (ys[-1] - ys[-2]) / (xs[-1] - xs[-2])
            upper_expr = ys[-1] + slope * (x - xs[-1])
        else:
            upper_expr = sp.Float(ys[-1])
        conditions.append((upper_expr, x >= xs[-1]))
        return sp.Piecewise(*conditions)
