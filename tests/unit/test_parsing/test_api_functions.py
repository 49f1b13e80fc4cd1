"""Unit tests for the high-level pipeline functions."""

import threading

import pytest
import numpy as np
import sympy as sp

from pyunimodal.core.curves import LatticeResult, Shape
from pyunimodal.core.exceptions import FitTimeoutError
from pyunimodal.parsing import api
from pyunimodal.parsing.api import (fit_drawing, compare_drawings, fit_from_file, curve_to_piecewise,
                                    load_pipeline_config, validate_yaml_file)
from pyunimodal.parsing.config.pipeline_config import PipelineConfig


class TestFitDrawing:
    """Test cases for fit_drawing."""
    def test_triangle(self, triangle_stroke):
        """Test that a triangle stroke peaks in the middle with no error."""
        result = fit_drawing(triangle_stroke)
        assert len(result.curve) == 101
        assert result.fit.peak_index == 50
        assert result.fit.error == pytest.approx(0.0, abs=1e-20)
        assert result.quadratic is None
        assert result.summary == "Concave Fit | Peak: (0.500, 1.000) | Error: 0.0000"

    def test_unordered_mapping_points(self, dict_stroke):
        """Test strokes given as unordered mappings."""
        result = fit_drawing(dict_stroke, PipelineConfig(step=0.1))
        assert len(result.curve) == 11
        assert result.fit.peak.x == pytest.approx(0.5)
        assert result.fit.peak.y == pytest.approx(0.8)

    def test_convex_shape(self):
        """Test a valley stroke with the convex shape."""
        stroke = [(0.0, 1.0), (0.5, 0.0), (1.0, 1.0)]
        result = fit_drawing(stroke, PipelineConfig(shape=Shape.CONVEX))
        assert result.fit.shape == Shape.CONVEX
        assert result.fit.peak.y == pytest.approx(0.0)
        assert result.summary.startswith("Convex Fit")

    def test_quadratic_method(self, triangle_stroke):
        """Test the quadratic method."""
        result = fit_drawing(triangle_stroke, PipelineConfig(method='quadratic'))
        assert result.fit is None
        assert result.quadratic.coefficients[2] < 0
        assert not result.quadratic.clamped
        assert result.summary.startswith("Quadratic Fit | y = ")

    @pytest.mark.parametrize("stroke", [[(0.1, 0.2)], [(0.1, 0.2), (0.4, 0.9)]])
    def test_short_stroke(self, stroke):
        """Test that strokes of fewer than 3 points give no result."""
        assert fit_drawing(stroke) is None

    def test_empty_stroke(self):
        """Test that an empty stroke is rejected."""
        with pytest.raises(ValueError, match="no points"):
            fit_drawing([])

    def test_invalid_point(self):
        """Test that malformed points are reported with their index."""
        with pytest.raises(ValueError, match="index 1"):
            fit_drawing([(0.0, 0.0), (0.5,), (1.0, 0.0)])

    def test_non_finite_point(self):
        """Test that NaN coordinates are rejected."""
        with pytest.raises(ValueError, match="non-finite"):
            fit_drawing([(0.0, 0.0), (0.5, float('nan')), (1.0, 0.0)])

    def test_timeout(self, triangle_stroke, monkeypatch):
        """Test that a fit exceeding the budget raises FitTimeoutError."""
        release = threading.Event()

        def blocked_fit(curve, shape):
            release.wait(10.0)

        monkeypatch.setattr(api, 'fit_unimodal', blocked_fit)
        try:
            with pytest.raises(FitTimeoutError):
                fit_drawing(triangle_stroke, PipelineConfig(timeout=0.05))
        finally:
            release.set()

    def test_zero_timeout_runs_inline(self, triangle_stroke):
        """Test that a zero timeout still fits."""
        assert fit_drawing(triangle_stroke, PipelineConfig(timeout=0.0)).fit.peak_index == 50


class TestCompareDrawings:
    """Test cases for compare_drawings."""
    def test_two_bumps(self):
        """Test combining two triangle strokes with different peaks."""
        f = [(0.0, 0.0), (0.3, 2.0), (1.0, 0.0)]
        g = [(0.0, 0.0), (0.7, 0.5), (1.0, 0.0)]
        result = compare_drawings(f, g)
        assert isinstance(result, LatticeResult)
        assert result.f_scaled.y.max() == pytest.approx(1.0)
        assert result.g_scaled.y.max() == pytest.approx(1.0)
        assert int(np.argmax(result.join.y)) == 70
        assert int(np.argmax(result.meet.y)) == 30

    def test_forces_unimodal_method(self, triangle_stroke):
        """Test that a quadratic configuration still combines unimodal fits."""
        result = compare_drawings(triangle_stroke, triangle_stroke, PipelineConfig(method='quadratic'))
        assert result.join.allclose(result.f_scaled)

    def test_short_stroke(self, triangle_stroke):
        """Test that an unfittable stroke gives no result."""
        assert compare_drawings(triangle_stroke, [(0.0, 0.0), (1.0, 1.0)]) is None


class TestFileAndExport:
    """Test cases for file input, symbolic export and configuration loading."""
    def test_fit_from_file(self, tmp_path):
        """Test fitting a stroke read from CSV."""
        path = tmp_path / "stroke.csv"
        path.write_text("x,y\n1.0,0.0\n0.0,0.0\n0.5,1.0\n")
        result = fit_from_file({'file_path': path, 'x_column': 'x', 'y_column': 'y'})
        assert result.fit.peak_index == 50

    def test_fit_from_file_missing(self, tmp_path):
        """Test that loading errors propagate."""
        with pytest.raises(FileNotFoundError):
            fit_from_file({'file_path': tmp_path / "none.csv", 'x_column': 'x', 'y_column': 'y'})

    def test_curve_to_piecewise(self, triangle_stroke):
        """Test export of a fit with extrapolated bounds."""
        config = PipelineConfig(bounds=('extrapolate', 'constant'))
        fit = fit_drawing(triangle_stroke, config).fit
        x = sp.Symbol('x')
        pw = curve_to_piecewise(fit.fit, x, config)
        assert float(pw.subs(x, 0.25)) == pytest.approx(0.5)
        assert float(pw.subs(x, -0.5)) == pytest.approx(-1.0)
        assert float(pw.subs(x, 2.0)) == pytest.approx(0.0)

    def test_load_default_config(self):
        """Test that the bundled configuration is used by default."""
        assert load_pipeline_config() == PipelineConfig()

    def test_validate_yaml_file(self, tmp_path):
        """Test validation of good and bad files."""
        good = tmp_path / "good.yaml"
        good.write_text("fitting:\n  method: quadratic\n")
        assert validate_yaml_file(good) is True
        bad = tmp_path / "bad.yaml"
        bad.write_text("fitting:\n  methd: quadratic\n")
        with pytest.raises(ValueError, match="YAML validation failed"):
            validate_yaml_file(bad)
        with pytest.raises(FileNotFoundError):
            validate_yaml_file(tmp_path / "missing.yaml")
