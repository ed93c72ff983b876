"""High-level measurement service: facade for the API layer and host code."""

from __future__ import annotations

from scanoverlay.models import (
    MeasurementGeometry, ModelFrame, OverlayConfig, OverlayParams,
    ScaleFactor, ScanFloorSummary, ScanMetadata, Theme,
)
from scanoverlay.core.analysis import analyze_scan, derive_scale_factor
from scanoverlay.core.assembler import MeasurementAssembler, annotate_surface_areas
from scanoverlay.core.registry import BuilderRegistry, create_default_registry


class MeasurementService:
    """Fills in defaults, delegates to the assembler, post-processes output."""

    def __init__(self, registry: BuilderRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.assembler = MeasurementAssembler(self.registry)

    def build(
        self,
        metadata: ScanMetadata | None,
        visible: bool = True,
        model_frame: ModelFrame | None = None,
        scale_factor: ScaleFactor | None = None,
        floor_summary: ScanFloorSummary | None = None,
        theme: Theme | str | None = None,
        params: OverlayParams | None = None,
        config: OverlayConfig | None = None,
    ) -> MeasurementGeometry:
        if params is None:
            params = OverlayParams()
        if theme is not None:
            params = params.model_copy(update={"theme": Theme(theme)})
        if config is None:
            config = OverlayConfig()

        geometry = self.assembler.assemble(
            metadata, visible, model_frame, scale_factor, floor_summary, params, config,
        )

        if params.annotate_input and metadata is not None and not geometry.is_empty:
            annotate_surface_areas(metadata, geometry)
        return geometry

    def summarize_scan(self, metadata: ScanMetadata) -> ScanFloorSummary:
        return analyze_scan(metadata)

    def scale_factor_for(
        self, model_frame: ModelFrame, metadata: ScanMetadata | None = None,
    ) -> ScaleFactor:
        summary = analyze_scan(metadata) if metadata is not None else ScanFloorSummary()
        return derive_scale_factor(model_frame, summary)

    def list_builders(self) -> list[dict[str, str]]:
        return [
            {"id": b.get_id(), "name": b.get_name()}
            for b in self.registry.list_builders()
        ]


_default_service: MeasurementService | None = None


def create_room_measurements(
    metadata: ScanMetadata | None,
    visible: bool = False,
    model_frame: ModelFrame | None = None,
    scale_factor: ScaleFactor | None = None,
    floor_summary: ScanFloorSummary | None = None,
    theme: Theme | str | None = None,
    params: OverlayParams | None = None,
    config: OverlayConfig | None = None,
) -> MeasurementGeometry:
    """One-call build with the default builders."""
    global _default_service
    if _default_service is None:
        _default_service = MeasurementService()
    return _default_service.build(
        metadata, visible, model_frame, scale_factor, floor_summary, theme, params, config,
    )


def update_measurements_visibility(geometry: MeasurementGeometry, visible: bool) -> None:
    """Show or hide a built overlay without rebuilding it."""
    geometry.set_visible(visible)
