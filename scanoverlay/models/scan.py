"""Scan element models: walls, doors, windows as captured by the scanner."""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, Field

from .geometry import Pose

# Finite, numeric (no strings, no bools) values only.
ScanNumber = Annotated[float, Field(strict=True, allow_inf_nan=False)]
Dimension = Annotated[float, Field(strict=True, allow_inf_nan=False, ge=0.0)]

# Column-major 4x4 rigid transform, exactly 16 numbers.
PoseTransform = Annotated[list[ScanNumber], Field(min_length=16, max_length=16)]


class OpeningCategory(str, Enum):
    DOOR = "door"
    WINDOW = "window"


class WallSegment(BaseModel):
    """A scanned wall: box dimensions plus a pose at the wall center."""
    dimensions: tuple[Dimension, Dimension, Dimension]  # width, height, depth (meters)
    transform: PoseTransform
    identifier: str | None = None

    @property
    def width(self) -> float:
        return self.dimensions[0]

    @property
    def height(self) -> float:
        return self.dimensions[1]

    @property
    def depth(self) -> float:
        return self.dimensions[2]

    @property
    def surface_area(self) -> float:
        """Unscaled face area in square meters."""
        return self.width * self.height


class Opening(BaseModel):
    """A scanned door or window. Size is nominal, keyed by category."""
    category: OpeningCategory
    transform: PoseTransform


class ScanMetadata(BaseModel):
    """
    Raw scan export.

    Element records stay untyped here; each one is validated on its own
    by the parser so one bad record never rejects the whole scan.
    """
    walls: list[Any] | None = None
    doors: list[Any] | None = None
    windows: list[Any] | None = None
    total_surface_area: float | None = None  # Set only by annotate_surface_areas

    @property
    def is_empty(self) -> bool:
        return not (self.walls or self.doors or self.windows)


class ScanFloorSummary(BaseModel):
    """Vertical reference data for the scan coordinate system."""
    bounding_box_min_y: float = 0.0      # Lowest wall-center Y
    bounding_box_center_y: float = 0.0
    average_wall_height: float = 2.5     # Meters
    average_wall_width: float = 0.0
    wall_count: int = 0
    total_surface_area: float | None = None

    @property
    def floor_y(self) -> float:
        """Wall centers sit half a wall height above the floor."""
        return self.bounding_box_min_y - self.average_wall_height / 2


class ParsedWall(BaseModel):
    """A wall that passed validation, with its decoded scan-space pose."""
    index: int
    element_id: str   # wall-<index>, used in names and warnings
    wall_id: str      # identifier, or element_id when the scan has none
    segment: WallSegment
    pose: Pose


class ParsedOpening(BaseModel):
    """A door or window that passed validation, with its decoded pose."""
    index: int
    element_id: str   # door-<index> / window-<index>
    opening: Opening
    pose: Pose

    @property
    def category(self) -> OpeningCategory:
        return self.opening.category


class ParsedScan(BaseModel):
    """Typed view of a scan; records that failed validation are absent."""
    walls: list[ParsedWall] = []
    doors: list[ParsedOpening] = []
    windows: list[ParsedOpening] = []

    @property
    def openings(self) -> list[ParsedOpening]:
        return self.doors + self.windows
