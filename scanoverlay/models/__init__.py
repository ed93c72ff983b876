from .geometry import Vector3, Quaternion, Offset2D, Segment, Pose
from .scan import (
    WallSegment, Opening, OpeningCategory, ScanMetadata, ScanFloorSummary,
    ParsedWall, ParsedOpening, ParsedScan,
)
from .calibration import (
    Confidence, BoundingBox, BoundingSphere, ModelFrame, ScaleFactor,
    ResolvedCalibration, AlignmentStrategy, ScanBounds, AlignmentResult,
)
from .overlay import (
    LineSet, PointSet, OpeningSolid, DimensionLabel, BuildWarning,
    OverlayStats, MeasurementGeometry, DrawableKind, BOX_EDGES,
)
from .parameters import Theme, Palette, OverlayParams, OverlayConfig
from .context import MeasurementContext

__all__ = [
    "Vector3", "Quaternion", "Offset2D", "Segment", "Pose",
    "WallSegment", "Opening", "OpeningCategory", "ScanMetadata", "ScanFloorSummary",
    "ParsedWall", "ParsedOpening", "ParsedScan",
    "Confidence", "BoundingBox", "BoundingSphere", "ModelFrame", "ScaleFactor",
    "ResolvedCalibration", "AlignmentStrategy", "ScanBounds", "AlignmentResult",
    "LineSet", "PointSet", "OpeningSolid", "DimensionLabel", "BuildWarning",
    "OverlayStats", "MeasurementGeometry", "DrawableKind", "BOX_EDGES",
    "Theme", "Palette", "OverlayParams", "OverlayConfig",
    "MeasurementContext",
]
