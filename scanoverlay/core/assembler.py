"""Measurement assembler: orchestrates resolution and builder execution."""

from __future__ import annotations
import logging

from scanoverlay.models import (
    MeasurementContext, MeasurementGeometry, ModelFrame, OverlayConfig,
    OverlayParams, ScaleFactor, ScanFloorSummary, ScanMetadata,
)
from scanoverlay.core.alignment import AlignmentResolver
from scanoverlay.core.calibration import resolve_calibration
from scanoverlay.core.parsing import parse_scan
from scanoverlay.core.registry import BuilderRegistry

logger = logging.getLogger(__name__)


class MeasurementAssembler:
    """
    Stateless overlay assembler.

    Takes scan metadata + calibration inputs, parses and resolves once,
    runs applicable builders, and returns a complete MeasurementGeometry.
    Every call is a full rebuild; nothing is cached between calls.
    """

    def __init__(self, registry: BuilderRegistry) -> None:
        self.registry = registry

    def assemble(
        self,
        metadata: ScanMetadata | None,
        visible: bool = True,
        model_frame: ModelFrame | None = None,
        scale_factor: ScaleFactor | None = None,
        floor_summary: ScanFloorSummary | None = None,
        params: OverlayParams | None = None,
        config: OverlayConfig | None = None,
    ) -> MeasurementGeometry:
        if params is None:
            params = OverlayParams()
        if config is None:
            config = OverlayConfig()

        # Disabled: an empty but valid container
        if metadata is None or not visible:
            return MeasurementGeometry(visible=visible)

        # Parse phase: typed records, malformed ones dropped with a warning
        scan, parse_warnings = parse_scan(metadata)
        logger.info(
            "Building measurements: %d walls, %d doors, %d windows (%d records skipped)",
            len(scan.walls), len(scan.doors), len(scan.windows), len(parse_warnings),
        )

        # Resolution phase: scale, floors, horizontal alignment
        calibration, calibration_warnings = resolve_calibration(
            scale_factor, model_frame, floor_summary, params.default_wall_height,
        )
        resolver = AlignmentResolver(params.min_wall_depth)
        alignment, alignment_warnings = resolver.resolve(
            scan, calibration, model_frame, config.strategy_override,
        )

        context = MeasurementContext(
            scan=scan,
            params=params,
            config=config,
            calibration=calibration,
            alignment=alignment,
        )
        context.extend_warnings(calibration_warnings)
        context.extend_warnings(parse_warnings)
        context.extend_warnings(alignment_warnings)

        # Build phase: run applicable builders
        for builder in self.registry.get_applicable_builders(context):
            builder.build(context)

        geometry = MeasurementGeometry(
            visible=visible,
            wireframes=context.wireframes,
            corner_markers=context.corner_markers,
            openings=context.openings,
            labels=context.labels,
            surface_areas=context.surface_areas,
            total_surface_area=context.total_surface_area,
            calibration=calibration,
            alignment=alignment,
            warnings=context.warnings,
        )

        logger.info(
            "Created %d wall wireframes, %d opening markers, %d labels; "
            "total surface area %.2fm² (%s, %s alignment)",
            len(geometry.wireframes), len(geometry.openings), len(geometry.labels),
            geometry.total_surface_area, calibration.confidence.value, alignment.strategy.value,
        )
        return geometry


def annotate_surface_areas(metadata: ScanMetadata, geometry: MeasurementGeometry) -> None:
    """
    Write computed areas back onto the raw input records.

    Compatibility shim for callers that read `surfaceArea` off wall
    records and a total off the metadata. Each record gets its own
    width x height, even when identifiers repeat. Mutates the input.
    """
    if not metadata.walls:
        return
    skipped = set(geometry.skipped_elements)
    for i, record in enumerate(metadata.walls):
        if not isinstance(record, dict) or f"wall-{i}" in skipped:
            continue
        width, height = record["dimensions"][0], record["dimensions"][1]
        record["surfaceArea"] = width * height
    metadata.total_surface_area = geometry.total_surface_area
