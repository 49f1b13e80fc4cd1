"""Demonstration script for fitting and combining hand-drawn strokes."""
import logging

import numpy as np
import sympy as sp

from pyunimodal.parsing.api import compare_drawings, curve_to_piecewise, fit_drawing, load_pipeline_config
from pyunimodal.parsing.io.data_handler import fit_to_dataframe
from pyunimodal.parsing.config.pipeline_config import PipelineConfig


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def synthetic_stroke(center, height, seed, count=40):
    """Noisy bump sampled at random positions, in drawing order."""
    rng = np.random.default_rng(seed)
    xs = np.sort(rng.uniform(0.0, 1.0, size=count))
    ys = height * np.exp(-((xs - center) ** 2) / 0.02) + rng.normal(scale=0.04, size=count)
    return [{'x': float(x), 'y': float(y)} for x, y in zip(xs, ys)]


def demonstrate_fitting():
    """Fit two strokes, combine them and export the join."""
    setup_logging()
    config = load_pipeline_config()
    f_points = synthetic_stroke(0.3, 1.0, seed=1)
    g_points = synthetic_stroke(0.65, 0.7, seed=2)
    print(f"\n{'=' * 80}")
    for name, points in (("f", f_points), ("g", g_points)):
        result = fit_drawing(points, config)
        print(f"{name}: {result.summary}")
        print(fit_to_dataframe(result.fit, result.curve, decimals=config.decimals).iloc[::10].to_string(index=False))
        print(f"{'-' * 80}")
    quadratic = fit_drawing(f_points, PipelineConfig(method='quadratic'))
    print(f"f: {quadratic.summary}")
    lattice = compare_drawings(f_points, g_points, config)
    print(f"\n{'=' * 80}")
    print("LATTICE")
    print(f"{'=' * 80}")
    for label in ("union", "intersection", "join", "meet"):
        curve = getattr(lattice, label)
        peak = int(np.argmax(curve.y))
        print(f"{label:>12}: max {curve.y[peak]:.3f} at x={curve.x[peak]:.2f}")
    x = sp.Symbol('x')
    join_expr = curve_to_piecewise(lattice.join, x, config)
    print(f"\njoin(0.5) = {float(join_expr.subs(x, 0.5)):.4f}")


if __name__ == "__main__":
    demonstrate_fitting()
