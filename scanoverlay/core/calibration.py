"""Scale & floor resolution: the numbers every builder shares in one pass."""

from __future__ import annotations
import logging

from scanoverlay.models import (
    BuildWarning, Confidence, ModelFrame, ResolvedCalibration,
    ScaleFactor, ScanFloorSummary,
)

logger = logging.getLogger(__name__)


def resolve_calibration(
    scale_factor: ScaleFactor | None,
    model_frame: ModelFrame | None,
    floor_summary: ScanFloorSummary | None = None,
    default_wall_height: float = 2.5,
) -> tuple[ResolvedCalibration, list[BuildWarning]]:
    """
    Derive the scale factors and the two floor references.

    Calibrated only when both a valid scale factor and a model frame are
    present; otherwise unit scale and zero floors, with a low-confidence
    warning. Never raises.
    """
    warnings: list[BuildWarning] = []

    if scale_factor is not None and not scale_factor.is_valid():
        message = (
            "Scale factor has a non-positive scale value "
            f"(uniform={scale_factor.uniform_horizontal_scale}, "
            f"vertical={scale_factor.vertical_scale}); ignoring it"
        )
        logger.warning(message)
        warnings.append(BuildWarning(code="invalid_scale_factor", message=message, field="scale_factor"))
        scale_factor = None

    if scale_factor is None or model_frame is None:
        missing = [
            name for name, value in (("scale_factor", scale_factor), ("model_frame", model_frame))
            if value is None
        ]
        message = (
            f"Calibration unavailable (missing {', '.join(missing)}); "
            "using unit scale and zero floor, measurements may appear small or misaligned"
        )
        logger.warning(message)
        warnings.append(BuildWarning(code="missing_calibration", message=message, field=missing[0]))
        return ResolvedCalibration(confidence=Confidence.LOW, calibrated=False), warnings

    if floor_summary is None:
        floor_summary = ScanFloorSummary(average_wall_height=default_wall_height)

    calibration = ResolvedCalibration(
        final_scale_factor=scale_factor.uniform_horizontal_scale,
        vertical_scale=scale_factor.vertical_scale,
        model_floor_y=model_frame.bounding_box.min.y,
        scan_floor_y=floor_summary.floor_y,
        confidence=scale_factor.confidence,
        calibrated=True,
    )
    logger.debug(
        "Calibration: scale=%.6f vertical=%.6f model_floor_y=%.6f scan_floor_y=%.6f (%s)",
        calibration.final_scale_factor, calibration.vertical_scale,
        calibration.model_floor_y, calibration.scan_floor_y, calibration.confidence.value,
    )
    return calibration, warnings
