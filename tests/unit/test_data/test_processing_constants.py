"""Unit tests for processing constants and bundled data."""

import pytest

from pyunimodal.data import DEFAULT_CONFIG_PATH, CONFIG_DIR
from pyunimodal.data.constants import ProcessingConstants, ErrorMessages, FileConstants


class TestConstants:
    """Test cases for constant values."""
    def test_sampling_constants(self):
        """Test the grid defaults."""
        assert 0 < ProcessingConstants.DEFAULT_STEP <= ProcessingConstants.MAX_STEP
        assert ProcessingConstants.DOMAIN_UPPER_BOUND > 1.0
        assert ProcessingConstants.MIN_FIT_POINTS == 3

    def test_constants_are_frozen(self):
        """Test that constant instances cannot be modified."""
        with pytest.raises(AttributeError):
            ProcessingConstants().DEFAULT_STEP = 0.1

    def test_message_templates(self):
        """Test that message templates format with their placeholders."""
        assert ErrorMessages.INSUFFICIENT_DATA_POINTS.format(min_points=3, count=2) == "Need at least 3 points, got 2"
        assert "0.500" in ErrorMessages.FIT_TIMEOUT.format(timeout=0.5)

    def test_supported_extensions(self):
        """Test the readable file types."""
        assert set(FileConstants.SUPPORTED_EXTENSIONS) == {'.csv', '.xlsx', '.txt'}

    def test_default_config_is_bundled(self):
        """Test that the default YAML file ships with the package."""
        assert DEFAULT_CONFIG_PATH.is_file()
        assert DEFAULT_CONFIG_PATH.parent == CONFIG_DIR
