"""Tests for scale & floor resolution."""

import pytest

from scanoverlay.core.calibration import resolve_calibration
from scanoverlay.models import Confidence, ScaleFactor, ScanFloorSummary


class TestCalibratedPath:

    def test_uses_scale_factor_and_model_floor(self, scale_factor, model_frame, floor_summary):
        calibration, warnings = resolve_calibration(scale_factor, model_frame, floor_summary)

        assert warnings == []
        assert calibration.calibrated
        assert calibration.final_scale_factor == 11.3
        assert calibration.vertical_scale == 11.1
        assert calibration.model_floor_y == -2.0
        assert calibration.scan_floor_y == pytest.approx(0.0)
        assert calibration.confidence == Confidence.HIGH

    def test_scan_floor_from_summary(self, scale_factor, model_frame):
        summary = ScanFloorSummary(bounding_box_min_y=0.5, average_wall_height=3.0)

        calibration, _ = resolve_calibration(scale_factor, model_frame, summary)

        assert calibration.scan_floor_y == pytest.approx(-1.0)

    def test_summary_defaults(self, scale_factor, model_frame):
        """No summary: min y 0 and a 2.5m wall height."""
        calibration, _ = resolve_calibration(scale_factor, model_frame, None)

        assert calibration.scan_floor_y == pytest.approx(-1.25)

    def test_confidence_passes_through(self, scale_factor, model_frame):
        medium = scale_factor.model_copy(update={"confidence": Confidence.MEDIUM})

        calibration, _ = resolve_calibration(medium, model_frame)

        assert calibration.confidence == Confidence.MEDIUM
        assert not calibration.low_confidence


class TestFallbackPath:

    @pytest.mark.parametrize("has_scale,has_frame", [(False, False), (True, False), (False, True)])
    def test_missing_input_falls_back(self, scale_factor, model_frame, floor_summary, has_scale, has_frame):
        calibration, warnings = resolve_calibration(
            scale_factor if has_scale else None,
            model_frame if has_frame else None,
            floor_summary,
        )

        assert not calibration.calibrated
        assert calibration.final_scale_factor == 1.0
        assert calibration.vertical_scale == 1.0
        assert calibration.model_floor_y == 0.0
        assert calibration.scan_floor_y == 0.0
        assert calibration.low_confidence
        assert [w.code for w in warnings] == ["missing_calibration"]

    @pytest.mark.parametrize("field", ["scale_x", "uniform_horizontal_scale", "vertical_scale"])
    def test_non_positive_scale_is_treated_as_absent(self, model_frame, field):
        bad = ScaleFactor(**{field: 0.0})

        calibration, warnings = resolve_calibration(bad, model_frame)

        assert not calibration.calibrated
        assert [w.code for w in warnings] == ["invalid_scale_factor", "missing_calibration"]

    def test_nan_scale_is_invalid(self):
        assert not ScaleFactor(vertical_scale=float("nan")).is_valid()
        assert not ScaleFactor(uniform_horizontal_scale=-2.0).is_valid()
        assert ScaleFactor().is_valid()
