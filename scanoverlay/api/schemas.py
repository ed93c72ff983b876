"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from scanoverlay.models import (
    MeasurementGeometry, ModelFrame, OverlayConfig, OverlayParams,
    ScaleFactor, ScanFloorSummary, ScanMetadata, Theme,
)


class MeasurementRequest(BaseModel):
    """Request body for the /measurements endpoint."""
    metadata: ScanMetadata | None = None
    visible: bool = True
    model_frame: ModelFrame | None = None
    scale_factor: ScaleFactor | None = None
    floor_summary: ScanFloorSummary | None = None
    theme: Theme | None = None  # Overrides params.theme when given
    params: OverlayParams = OverlayParams()
    config: OverlayConfig = OverlayConfig()


class MeasurementResponse(BaseModel):
    """Response from the /measurements endpoint."""
    geometry: MeasurementGeometry
    builder_count: int
    wall_count: int


class ScaleFactorRequest(BaseModel):
    """Request body for the /calibration/scale-factor endpoint."""
    model_frame: ModelFrame
    metadata: ScanMetadata | None = None


class BuilderInfo(BaseModel):
    id: str
    name: str
