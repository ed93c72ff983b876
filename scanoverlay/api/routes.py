"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from scanoverlay.models import ScaleFactor, ScanFloorSummary, ScanMetadata
from scanoverlay.services.measurement_service import MeasurementService
from scanoverlay.api.schemas import (
    BuilderInfo, MeasurementRequest, MeasurementResponse, ScaleFactorRequest,
)

router = APIRouter()

# Shared service instance
_service = MeasurementService()


@router.post("/measurements", response_model=MeasurementResponse)
async def build_measurements(request: MeasurementRequest) -> MeasurementResponse:
    """Build the measurement overlay for a scan in the model's frame."""
    geometry = _service.build(
        request.metadata,
        visible=request.visible,
        model_frame=request.model_frame,
        scale_factor=request.scale_factor,
        floor_summary=request.floor_summary,
        theme=request.theme,
        params=request.params,
        config=request.config,
    )

    return MeasurementResponse(
        geometry=geometry,
        builder_count=len(_service.list_builders()),
        wall_count=len(geometry.wireframes),
    )


@router.post("/scan/summary", response_model=ScanFloorSummary)
async def summarize_scan(metadata: ScanMetadata) -> ScanFloorSummary:
    """Floor reference and wall statistics for a scan."""
    return _service.summarize_scan(metadata)


@router.post("/calibration/scale-factor", response_model=ScaleFactor)
async def scale_factor(request: ScaleFactorRequest) -> ScaleFactor:
    """Scale factor derived from the model loader's transform."""
    return _service.scale_factor_for(request.model_frame, request.metadata)


@router.get("/builders", response_model=list[BuilderInfo])
async def list_builders() -> list[BuilderInfo]:
    """List all available geometry builders."""
    return [BuilderInfo(**b) for b in _service.list_builders()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
