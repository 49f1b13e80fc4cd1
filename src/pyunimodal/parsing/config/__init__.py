"""Pipeline configuration parsing and YAML key definitions."""

from .pipeline_config import PipelineConfig
from .pipeline_yaml_parser import PipelineYAMLParser
from . import yaml_keys as _yk

# Re-export everything defined in yaml_keys.__all__
globals().update({k: getattr(_yk, k) for k in _yk.__all__})

__all__ = [
    "PipelineConfig",
    "PipelineYAMLParser",
    *_yk.__all__,
]
