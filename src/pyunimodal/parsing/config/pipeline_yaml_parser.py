import logging
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML, constructor, error

from pyunimodal.parsing.config.pipeline_config import PipelineConfig

logger = logging.getLogger(__name__)


class PipelineYAMLParser:
    """
    Reads a fitting pipeline configuration from a YAML file.

    The file is loaded with the safe loader; duplicate keys are rejected. Every
    loading or validation problem other than a missing file is reported as ValueError.

    Attributes:
        config_path (Path): The file that was read.
        config (dict): The raw mapping as loaded.
        pipeline_config (PipelineConfig): The validated settings.
    """

    def __init__(self, yaml_path: Union[str, Path]) -> None:
        self.config_path = Path(yaml_path)
        self.config = self._load_config()
        self._validate_config()
        self.pipeline_config = PipelineConfig.from_dict(self.config)
        logger.info("Loaded pipeline configuration from %s: step=%s, shape=%s, method=%s, timeout=%s",
                    self.config_path, self.pipeline_config.step, self.pipeline_config.shape.value,
                    self.pipeline_config.method, self.pipeline_config.timeout)

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        logger.debug("Loading pipeline YAML: %s", self.config_path)
        try:
            with open(self.config_path, 'r') as f:
                return yaml.load(f)
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key in pipeline file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except error.YAMLError as e:
            logger.error("YAML syntax error in pipeline file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e

    def _validate_config(self) -> None:
        if not isinstance(self.config, dict):
            logger.error("Invalid YAML structure in %s: root is %s", self.config_path, type(self.config).__name__)
            raise ValueError("The YAML file must start with a dictionary/object structure with key-value pairs, "
                             f"not a {type(self.config).__name__}")
