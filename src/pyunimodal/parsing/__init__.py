"""
Configuration, I/O and validation modules for pyunimodal.

This package handles YAML pipeline configuration, loading strokes from data
files, tabulating results and validating inputs. The high-level entry points
live in ``pyunimodal.parsing.api``.
"""

from .config.pipeline_config import PipelineConfig
from .config.pipeline_yaml_parser import PipelineYAMLParser
from .io.data_handler import load_points, curve_to_dataframe, fit_to_dataframe, format_fit_summary
from .validation import is_monotonic, validate_stroke, validate_fit_shape

__all__ = [
    'PipelineConfig',
    'PipelineYAMLParser',
    'load_points',
    'curve_to_dataframe',
    'fit_to_dataframe',
    'format_fit_summary',
    'is_monotonic',
    'validate_stroke',
    'validate_fit_shape'
]
