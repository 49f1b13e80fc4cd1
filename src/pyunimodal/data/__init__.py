"""Constants and bundled configuration files."""

from pathlib import Path

from .constants import ProcessingConstants, ErrorMessages, FileConstants

CONFIG_DIR = Path(__file__).parent / "configs"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "default_pipeline.yaml"

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants",
    "CONFIG_DIR",
    "DEFAULT_CONFIG_PATH"
]
