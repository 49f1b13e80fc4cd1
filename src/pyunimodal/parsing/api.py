import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import sympy as sp

from pyunimodal.algorithms.lattice import combine_fits
from pyunimodal.algorithms.piecewise_builder import PiecewiseBuilder
from pyunimodal.algorithms.quadratic import QuadraticFit, fit_concave_quadratic
from pyunimodal.algorithms.sampler import resample
from pyunimodal.algorithms.unimodal import fit_unimodal
from pyunimodal.core.curves import FitResult, LatticeResult, PointLike, SampledCurve
from pyunimodal.data import DEFAULT_CONFIG_PATH
from pyunimodal.data.constants import ProcessingConstants, ErrorMessages
from pyunimodal.execution.worker import run_with_timeout
from pyunimodal.parsing.config.pipeline_config import PipelineConfig
from pyunimodal.parsing.config.pipeline_yaml_parser import PipelineYAMLParser
from pyunimodal.parsing.config.yaml_keys import QUADRATIC_KEY, UNIMODAL_KEY
from pyunimodal.parsing.io.data_handler import format_fit_summary, load_points
from pyunimodal.parsing.validation.curve_validator import validate_fit_shape, validate_stroke

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawingResult:
    """
    Outcome of fitting one stroke.

    Attributes:
        curve: The stroke resampled onto the regular grid
        fit: Unimodal fit (method 'unimodal'), otherwise None
        quadratic: Concave quadratic fit (method 'quadratic'), otherwise None
        summary: One-line description for display
    """
    curve: SampledCurve
    fit: Optional[FitResult] = None
    quadratic: Optional[QuadraticFit] = None
    summary: str = ""


def load_pipeline_config(yaml_path: Union[str, Path, None] = None) -> PipelineConfig:
    """
    Load a pipeline configuration from YAML.
    Args:
        yaml_path: Path to the YAML file; the bundled default configuration if None
    Returns:
        PipelineConfig
    """
    yaml_path = DEFAULT_CONFIG_PATH if yaml_path is None else yaml_path
    logger.info("Loading pipeline configuration from: %s", yaml_path)
    return PipelineYAMLParser(yaml_path).pipeline_config


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a pipeline YAML file.
    Args:
        yaml_path: Path to the YAML configuration file to validate
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        _ = PipelineYAMLParser(yaml_path)
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("YAML file not found: %s", yaml_path)
        raise FileNotFoundError(f"YAML file not found: {yaml_path}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e


def fit_drawing(points: Sequence[PointLike], config: Optional[PipelineConfig] = None) -> Optional[DrawingResult]:
    """
    Fit a freehand stroke.

    The stroke is resampled onto the configured grid and fitted with the configured method
    on a background worker bounded by the configured timeout.
    Args:
        points: Raw stroke points in any order
        config: Pipeline settings, defaults if None
    Returns:
        DrawingResult, or None if the stroke has fewer than 3 points or no fit could be computed
    Raises:
        ValueError: If the stroke is empty or contains invalid points
        FitTimeoutError: If the fit exceeds the timeout
        CurveFitError: If the quadratic system is singular
    Examples:
        result = fit_drawing([(0.0, 0.1), (0.4, 0.9), (1.0, 0.2)])
        print(result.summary)
    """
    config = config or PipelineConfig()
    stroke = validate_stroke(points)
    if len(stroke) < ProcessingConstants.MIN_FIT_POINTS:
        logger.warning(ErrorMessages.INSUFFICIENT_DATA_POINTS.format(
            min_points=ProcessingConstants.MIN_FIT_POINTS, count=len(stroke)))
        return None
    logger.info("Fitting stroke of %d points: method=%s, shape=%s, step=%s",
                len(stroke), config.method, config.shape.value, config.step)
    curve = resample(stroke, config.step)
    if config.method == QUADRATIC_KEY:
        quadratic = run_with_timeout(fit_concave_quadratic, curve.x, curve.y, timeout=config.timeout)
        c0, c1, c2 = quadratic.coefficients
        summary = f"Quadratic Fit | y = {c0:.3f} + {c1:.3f}x + {c2:.3f}x^2 | Error: {quadratic.error:.4f}"
        return DrawingResult(curve=curve, quadratic=quadratic, summary=summary)
    fit = run_with_timeout(fit_unimodal, curve, config.shape, timeout=config.timeout)
    if fit is None:
        logger.warning("Could not compute regression for %d samples", len(curve))
        return None
    if not validate_fit_shape(fit):
        logger.warning("Fit is not unimodal within tolerance (peak index %d)", fit.peak_index)
    return DrawingResult(curve=curve, fit=fit, summary=format_fit_summary(fit))


def compare_drawings(f_points: Sequence[PointLike], g_points: Sequence[PointLike],
                     config: Optional[PipelineConfig] = None) -> Optional[LatticeResult]:
    """
    Fit two strokes f and g on the same grid and derive their lattice curves.
    The unimodal method is always used since join and meet need a peak.
    Returns:
        LatticeResult, or None if either stroke cannot be fitted
    """
    config = replace(config or PipelineConfig(), method=UNIMODAL_KEY)
    f_result = fit_drawing(f_points, config)
    g_result = fit_drawing(g_points, config)
    if f_result is None or g_result is None:
        logger.warning("Cannot combine drawings: %s could not be fitted",
                       "f" if f_result is None else "g")
        return None
    return combine_fits(f_result.fit, g_result.fit)


def fit_from_file(file_config: Dict[str, Union[str, int]], config: Optional[PipelineConfig] = None,
                  header: bool = True) -> Optional[DrawingResult]:
    """Load a stroke with ``load_points`` and fit it with ``fit_drawing``."""
    try:
        points = load_points(file_config, header=header)
    except Exception as e:
        logger.error("Failed to load stroke from %s: %s", file_config, e, exc_info=True)
        raise
    return fit_drawing(points, config)


def curve_to_piecewise(curve: SampledCurve, x: Optional[sp.Symbol] = None,
                       config: Optional[PipelineConfig] = None) -> sp.Piecewise:
    """Export a curve as a sympy Piecewise using the configured boundary behaviour."""
    config = config or PipelineConfig()
    lower, upper = config.bounds
    return PiecewiseBuilder.build_from_curve(curve, x, lower, upper)
