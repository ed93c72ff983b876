"""Model-frame and calibration models supplied by the model loader."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

from .geometry import Vector3, Quaternion, Offset2D


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class BoundingBox(BaseModel):
    min: Vector3
    max: Vector3
    center: Vector3
    size: Vector3

    @classmethod
    def from_min_max(cls, lo: Vector3, hi: Vector3) -> BoundingBox:
        return cls(
            min=lo,
            max=hi,
            center=(lo + hi) * 0.5,
            size=hi - lo,
        )


class BoundingSphere(BaseModel):
    center: Vector3
    radius: float


class ModelFrame(BaseModel):
    """Placement and extents of the loaded room model in the scene."""
    position: Vector3 = Field(default_factory=Vector3)
    rotation: Quaternion = Field(default_factory=Quaternion)
    scale: Vector3 = Field(default_factory=lambda: Vector3(x=1.0, y=1.0, z=1.0))
    bounding_box: BoundingBox
    bounding_sphere: BoundingSphere | None = None


class ScaleFactor(BaseModel):
    """Scan-meters to model-units conversion."""
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0
    uniform_horizontal_scale: float = 1.0  # Used for X/Z and wall width/depth
    vertical_scale: float = 1.0            # Used for Y and wall height
    precision: float = 0.0                 # Model units
    confidence: Confidence = Confidence.LOW

    def is_valid(self) -> bool:
        """All scale values must be strictly positive (and finite)."""
        values = (
            self.scale_x, self.scale_y, self.scale_z,
            self.uniform_horizontal_scale, self.vertical_scale,
        )
        return all(v > 0 and v != float("inf") for v in values)


class ResolvedCalibration(BaseModel):
    """Scale factors and floor references used by every builder in one pass."""
    final_scale_factor: float = 1.0
    vertical_scale: float = 1.0
    model_floor_y: float = 0.0
    scan_floor_y: float = 0.0
    confidence: Confidence = Confidence.LOW
    calibrated: bool = False

    @property
    def low_confidence(self) -> bool:
        return self.confidence == Confidence.LOW


class AlignmentStrategy(str, Enum):
    FIRST_WALL_TO_MIN = "first_wall_to_min"
    MIN_TO_MIN = "min_to_min"
    MAX_TO_MAX = "max_to_max"
    CENTER_TO_CENTER = "center_to_center"
    NONE = "none"  # Uncalibrated: no model frame to align against


class ScanBounds(BaseModel):
    """Floor-plane extents of the scaled scan point cloud."""
    min_x: float = 0.0
    max_x: float = 0.0
    min_z: float = 0.0
    max_z: float = 0.0
    point_count: int = 0

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def center_z(self) -> float:
        return (self.min_z + self.max_z) / 2


class AlignmentResult(BaseModel):
    """Chosen horizontal offset plus every candidate, for diagnostics."""
    strategy: AlignmentStrategy = AlignmentStrategy.NONE
    offset: Offset2D = Field(default_factory=Offset2D)
    alternatives: dict[AlignmentStrategy, Offset2D] = {}
    scan_bounds: ScanBounds = Field(default_factory=ScanBounds)
