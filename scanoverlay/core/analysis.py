"""Coordinate-system analysis: scan floor summary and model scale derivation."""

from __future__ import annotations
import logging

import numpy as np

from scanoverlay.core.parsing import parse_scan
from scanoverlay.models import (
    Confidence, ModelFrame, ScaleFactor, ScanFloorSummary, ScanMetadata,
)

logger = logging.getLogger(__name__)

# Assumed accuracy of scanner wall placement, meters
SCAN_PRECISION = 0.01


def analyze_scan(metadata: ScanMetadata) -> ScanFloorSummary:
    """
    Summarize the scan's vertical reference from its valid walls.

    Wall poses sit at wall centers, so the lowest center minus half the
    average height locates the scan floor. No valid walls: defaults.
    """
    scan, _warnings = parse_scan(metadata)
    if not scan.walls:
        return ScanFloorSummary()

    centers = np.array([w.pose.position.as_tuple() for w in scan.walls], dtype=float)
    widths = np.array([w.segment.width for w in scan.walls], dtype=float)
    heights = np.array([w.segment.height for w in scan.walls], dtype=float)

    lo = centers.min(axis=0)
    hi = centers.max(axis=0)

    summary = ScanFloorSummary(
        bounding_box_min_y=float(lo[1]),
        bounding_box_center_y=float((lo[1] + hi[1]) / 2),
        average_wall_height=float(heights.mean()),
        average_wall_width=float(widths.mean()),
        wall_count=len(scan.walls),
        total_surface_area=float((widths * heights).sum()),
    )
    logger.debug(
        "Scan summary: %d walls, floor y %.4f, avg height %.3f",
        summary.wall_count, summary.floor_y, summary.average_wall_height,
    )
    return summary


def derive_scale_factor(model_frame: ModelFrame, summary: ScanFloorSummary) -> ScaleFactor:
    """
    Scale factor from the model loader's own uniform scale.

    The loader scales the model by one factor on every axis; that factor
    is exactly model units per scan meter. Without scan bounds or with
    an empty model there is nothing to trust: unit scale, low confidence.
    """
    size = model_frame.bounding_box.size
    if summary.wall_count == 0 or size.length() == 0:
        logger.warning("Cannot derive scale factor: missing scan bounds or empty model")
        return ScaleFactor(confidence=Confidence.LOW)

    loader_scale = model_frame.scale.x
    return ScaleFactor(
        scale_x=loader_scale,
        scale_y=loader_scale,
        scale_z=loader_scale,
        uniform_horizontal_scale=loader_scale,
        vertical_scale=loader_scale,
        precision=SCAN_PRECISION * loader_scale,
        confidence=Confidence.HIGH,
    )
