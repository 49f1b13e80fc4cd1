"""Unit tests for PipelineConfig."""

import pytest

from pyunimodal.core.curves import Shape
from pyunimodal.parsing.config.pipeline_config import PipelineConfig


class TestPipelineConfigDefaults:
    """Test cases for the default configuration."""
    def test_defaults(self):
        """Test the default field values."""
        config = PipelineConfig()
        assert config.step == 0.01
        assert config.shape == Shape.CONCAVE
        assert config.method == 'unimodal'
        assert config.timeout == 1.0
        assert config.decimals == 2
        assert config.bounds == ('constant', 'constant')

    def test_empty_mapping_gives_defaults(self):
        """Test that every section is optional."""
        assert PipelineConfig.from_dict({}) == PipelineConfig()

    def test_empty_section_gives_defaults(self):
        """Test that a section present but empty (YAML null) is accepted."""
        assert PipelineConfig.from_dict({'sampling': None, 'worker': {}}) == PipelineConfig()

    def test_round_trip(self):
        """Test that to_dict output is accepted by from_dict."""
        config = PipelineConfig(step=0.05, shape=Shape.CONVEX, method='quadratic', timeout=0.0,
                                decimals=4, bounds=('extrapolate', 'constant'))
        assert PipelineConfig.from_dict(config.to_dict()) == config


class TestPipelineConfigFromDict:
    """Test cases for building a configuration from nested sections."""
    def test_full_configuration(self):
        """Test a configuration setting every key."""
        config = PipelineConfig.from_dict({
            'sampling': {'step': 0.02},
            'fitting': {'shape': 'convex', 'method': 'quadratic'},
            'worker': {'timeout': 2},
            'export': {'decimals': 3, 'bounds': ['extrapolate', 'extrapolate']},
        })
        assert config.step == 0.02
        assert config.shape == Shape.CONVEX
        assert config.method == 'quadratic'
        assert config.timeout == 2.0
        assert isinstance(config.timeout, float)
        assert config.decimals == 3
        assert config.bounds == ('extrapolate', 'extrapolate')

    def test_unknown_section_suggestion(self):
        """Test that misspelt sections get a suggestion."""
        with pytest.raises(ValueError, match="did you mean 'sampling'"):
            PipelineConfig.from_dict({'samplng': {'step': 0.01}})

    def test_unknown_key_in_section(self):
        """Test that misspelt keys get a suggestion."""
        with pytest.raises(ValueError, match="did you mean 'timeout'"):
            PipelineConfig.from_dict({'worker': {'timout': 1.0}})

    @pytest.mark.parametrize("step", [0, -0.01, 0.75])
    def test_step_out_of_range(self, step):
        """Test the step range check."""
        with pytest.raises(ValueError, match="'step' must be in"):
            PipelineConfig.from_dict({'sampling': {'step': step}})

    @pytest.mark.parametrize("value", ["0.01", True, None])
    def test_step_must_be_number(self, value):
        """Test that non-numeric steps are rejected."""
        with pytest.raises(ValueError, match="must be a number"):
            PipelineConfig.from_dict({'sampling': {'step': value}})

    def test_invalid_shape(self):
        """Test rejection of an unknown shape."""
        with pytest.raises(ValueError, match="Invalid 'shape'"):
            PipelineConfig.from_dict({'fitting': {'shape': 'bimodal'}})

    def test_invalid_method(self):
        """Test rejection of an unknown method."""
        with pytest.raises(ValueError, match="Invalid 'method'"):
            PipelineConfig.from_dict({'fitting': {'method': 'spline'}})

    def test_negative_timeout(self):
        """Test rejection of a negative timeout."""
        with pytest.raises(ValueError, match="cannot be negative"):
            PipelineConfig.from_dict({'worker': {'timeout': -1}})

    @pytest.mark.parametrize("decimals", [-1, 2.5, True])
    def test_invalid_decimals(self, decimals):
        """Test rejection of decimals that are not non-negative integers."""
        with pytest.raises(ValueError, match="non-negative integer"):
            PipelineConfig.from_dict({'export': {'decimals': decimals}})

    @pytest.mark.parametrize("bounds", ['constant', ['constant'], ['constant', 'linear']])
    def test_invalid_bounds(self, bounds):
        """Test rejection of malformed boundary lists."""
        with pytest.raises(ValueError):
            PipelineConfig.from_dict({'export': {'bounds': bounds}})

    def test_section_must_be_mapping(self):
        """Test rejection of a scalar section."""
        with pytest.raises(ValueError, match="must be a dictionary"):
            PipelineConfig.from_dict({'fitting': 'concave'})

    def test_root_must_be_mapping(self):
        """Test rejection of a non-mapping root."""
        with pytest.raises(ValueError, match="must be a dictionary"):
            PipelineConfig.from_dict(['sampling'])
