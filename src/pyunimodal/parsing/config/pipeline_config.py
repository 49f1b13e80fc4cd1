import logging
from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, Iterable, Mapping, Tuple

from pyunimodal.core.curves import Shape
from pyunimodal.data.constants import ProcessingConstants
from pyunimodal.parsing.config.yaml_keys import (SAMPLING_KEY, FITTING_KEY, WORKER_KEY, EXPORT_KEY, STEP_KEY,
                                                 SHAPE_KEY, METHOD_KEY, UNIMODAL_KEY, QUADRATIC_KEY, TIMEOUT_KEY,
                                                 DECIMALS_KEY, BOUNDS_KEY, CONSTANT_KEY, EXTRAPOLATE_KEY)

logger = logging.getLogger(__name__)

SECTION_KEYS = {
    SAMPLING_KEY: {STEP_KEY},
    FITTING_KEY: {SHAPE_KEY, METHOD_KEY},
    WORKER_KEY: {TIMEOUT_KEY},
    EXPORT_KEY: {DECIMALS_KEY, BOUNDS_KEY},
}
VALID_METHODS = (UNIMODAL_KEY, QUADRATIC_KEY)
VALID_BOUNDS = (CONSTANT_KEY, EXTRAPOLATE_KEY)


@dataclass(frozen=True)
class PipelineConfig:
    """Settings of one fitting pipeline run; every field has a default."""
    step: float = ProcessingConstants.DEFAULT_STEP
    shape: Shape = Shape.CONCAVE
    method: str = UNIMODAL_KEY
    timeout: float = ProcessingConstants.DEFAULT_TIMEOUT
    decimals: int = ProcessingConstants.DEFAULT_DECIMALS
    bounds: Tuple[str, str] = (CONSTANT_KEY, CONSTANT_KEY)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "PipelineConfig":
        """
        Build and validate a configuration from nested sections.
        Args:
            config: Mapping with optional 'sampling', 'fitting', 'worker' and 'export' sections
        Returns:
            PipelineConfig
        Raises:
            ValueError: On unknown keys, wrong types or out-of-range values
        """
        if not isinstance(config, Mapping):
            raise ValueError("The pipeline configuration must be a dictionary/object structure with "
                             f"key-value pairs, got {type(config).__name__}")
        _reject_unknown_keys(config.keys(), SECTION_KEYS.keys(), "section")
        sections: Dict[str, Mapping[str, Any]] = {}
        for section_name in SECTION_KEYS:
            section = config.get(section_name) or {}
            if not isinstance(section, Mapping):
                raise ValueError(f"The '{section_name}' section must be a dictionary with key-value pairs")
            _reject_unknown_keys(section.keys(), SECTION_KEYS[section_name], f"key in '{section_name}'")
            sections[section_name] = section
        defaults = cls()
        step = _number(sections[SAMPLING_KEY].get(STEP_KEY, defaults.step), STEP_KEY)
        if not 0 < step <= ProcessingConstants.MAX_STEP:
            raise ValueError(f"'{STEP_KEY}' must be in (0, {ProcessingConstants.MAX_STEP}], got {step}")
        shape_value = sections[FITTING_KEY].get(SHAPE_KEY, defaults.shape.value)
        try:
            shape = Shape(shape_value)
        except ValueError as e:
            raise ValueError(f"Invalid '{SHAPE_KEY}': {shape_value}. "
                             f"Must be one of: {', '.join(s.value for s in Shape)}") from e
        method = sections[FITTING_KEY].get(METHOD_KEY, defaults.method)
        if method not in VALID_METHODS:
            raise ValueError(f"Invalid '{METHOD_KEY}': {method}. Must be one of: {', '.join(VALID_METHODS)}")
        timeout = _number(sections[WORKER_KEY].get(TIMEOUT_KEY, defaults.timeout), TIMEOUT_KEY)
        if timeout < 0:
            raise ValueError(f"'{TIMEOUT_KEY}' cannot be negative, got {timeout}")
        decimals = sections[EXPORT_KEY].get(DECIMALS_KEY, defaults.decimals)
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ValueError(f"'{DECIMALS_KEY}' must be a non-negative integer, got {decimals!r}")
        bounds = sections[EXPORT_KEY].get(BOUNDS_KEY, list(defaults.bounds))
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
            raise ValueError(f"'{BOUNDS_KEY}' must be a list of two boundary types, got {bounds!r}")
        for bound in bounds:
            if bound not in VALID_BOUNDS:
                raise ValueError(f"Invalid boundary type '{bound}'. Must be one of: {', '.join(VALID_BOUNDS)}")
        result = cls(step=step, shape=shape, method=method, timeout=timeout,
                     decimals=decimals, bounds=(bounds[0], bounds[1]))
        logger.debug("Pipeline configuration: %s", result)
        return result

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {
            SAMPLING_KEY: {STEP_KEY: self.step},
            FITTING_KEY: {SHAPE_KEY: self.shape.value, METHOD_KEY: self.method},
            WORKER_KEY: {TIMEOUT_KEY: self.timeout},
            EXPORT_KEY: {DECIMALS_KEY: self.decimals, BOUNDS_KEY: list(self.bounds)},
        }


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {type(value).__name__}")
    return float(value)


def _reject_unknown_keys(keys: Iterable[str], valid: Iterable[str], what: str) -> None:
    valid = set(valid)
    unknown = set(keys) - valid
    if not unknown:
        return
    logger.error("Unknown %s found in configuration: %s", what, unknown)
    error_msg = f"Unknown {what} found in configuration: \n ->"
    for key in sorted(unknown, key=str):
        matches = get_close_matches(str(key), valid, n=1, cutoff=0.6)
        suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
        error_msg += f" - '{key}'{suggestion}\n"
    raise ValueError(error_msg)
