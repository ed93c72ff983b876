"""Overlay output models: drawable descriptors and the container holding them."""

from __future__ import annotations
from enum import Enum
from typing import Iterator, Union
from pydantic import BaseModel, Field

from .geometry import Vector3, Quaternion, Segment
from .calibration import ResolvedCalibration, AlignmentResult
from .scan import OpeningCategory


# Box corner order: bottom face then top face, each -x-z, +x-z, +x+z, -x+z
BOX_EDGES: list[tuple[int, int]] = [
    (0, 1), (1, 2), (2, 3), (3, 0),  # Bottom perimeter
    (4, 5), (5, 6), (6, 7), (7, 4),  # Top perimeter
    (0, 4), (1, 5), (2, 6), (3, 7),  # Verticals
]


class DrawableKind(str, Enum):
    LINE_SET = "line_set"
    POINT_SET = "point_set"
    OPENING_SOLID = "opening_solid"
    DIMENSION_LABEL = "dimension_label"


class LineSet(BaseModel):
    """Indexed line segments (LineSegments in the host)."""
    kind: DrawableKind = DrawableKind.LINE_SET
    name: str
    vertices: list[Vector3]
    edges: list[tuple[int, int]] = Field(default_factory=lambda: list(BOX_EDGES))
    color: int = 0x9333EA
    opacity: float = 0.8
    visible: bool = True

    def positions(self) -> list[float]:
        """Flat xyz buffer, two points per edge."""
        flat: list[float] = []
        for a, b in self.edges:
            flat.extend(self.vertices[a].as_tuple())
            flat.extend(self.vertices[b].as_tuple())
        return flat


class PointSet(BaseModel):
    """Corner markers (Points in the host)."""
    kind: DrawableKind = DrawableKind.POINT_SET
    name: str
    vertices: list[Vector3]
    color: int = 0x000000
    size: float = 3.0
    visible: bool = True


class OpeningSolid(BaseModel):
    """Translucent box marking a door or window, plus its outline."""
    kind: DrawableKind = DrawableKind.OPENING_SOLID
    name: str
    category: OpeningCategory
    position: Vector3
    rotation: Quaternion
    size: Vector3                 # Scaled width, height, thickness
    color: int
    opacity: float
    outline: LineSet
    visible: bool = True

    @property
    def vertices(self) -> list[Vector3]:
        return self.outline.vertices


class DimensionLabel(BaseModel):
    """Text descriptor for a wall's real-world size, anchored at the wall."""
    kind: DrawableKind = DrawableKind.DIMENSION_LABEL
    name: str = "dimension-label"
    wall_id: str
    text: str
    width: float                  # Meters, unscaled
    height: float                 # Meters, unscaled
    surface_area: float           # Square meters, unscaled
    anchor_position: Vector3
    anchor_rotation: Quaternion
    label_position: Vector3
    sprite_scale: tuple[float, float] = (1.0, 0.35)
    text_color: str = "#000000"
    stroke_color: str = "#ffffff"
    extension_lines: list[Segment] = []
    extension_line_color: int = 0x000000
    visible: bool = True


Drawable = Union[LineSet, PointSet, OpeningSolid, DimensionLabel]


class BuildWarning(BaseModel):
    """A recovered problem: the build continued without this element or input."""
    code: str
    message: str
    element: str | None = None
    field: str | None = None
    skipped: bool = False


class OverlayStats(BaseModel):
    """Summary statistics for one build."""
    walls: int = 0
    doors: int = 0
    windows: int = 0
    labels: int = 0
    skipped: int = 0

    @classmethod
    def from_geometry(cls, geometry: MeasurementGeometry) -> OverlayStats:
        doors = sum(1 for o in geometry.openings if o.category == OpeningCategory.DOOR)
        return cls(
            walls=len(geometry.wireframes),
            doors=doors,
            windows=len(geometry.openings) - doors,
            labels=len(geometry.labels),
            skipped=len(geometry.skipped_elements),
        )


class MeasurementGeometry(BaseModel):
    """
    Everything one build produces, ready for the host to attach under
    a single named group.

    The caller owns the container: it inserts it into its scene graph
    and disposes it (and any container it replaces).
    """
    name: str = "room-measurements"
    visible: bool = True
    wireframes: list[LineSet] = []
    corner_markers: list[PointSet] = []
    openings: list[OpeningSolid] = []
    labels: list[DimensionLabel] = []
    surface_areas: dict[str, float] = {}
    total_surface_area: float = 0.0
    calibration: ResolvedCalibration | None = None
    alignment: AlignmentResult | None = None
    warnings: list[BuildWarning] = []
    stats: OverlayStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = OverlayStats.from_geometry(self)

    @property
    def skipped_elements(self) -> list[str]:
        return [w.element for w in self.warnings if w.skipped and w.element is not None]

    @property
    def is_empty(self) -> bool:
        return not (self.wireframes or self.corner_markers or self.openings or self.labels)

    def drawables(self) -> Iterator[Drawable]:
        yield from self.wireframes
        yield from self.corner_markers
        for opening in self.openings:
            yield opening
            yield opening.outline
        yield from self.labels

    def set_visible(self, visible: bool) -> None:
        """Flip visibility on the group and every drawable, without rebuilding."""
        self.visible = visible
        for drawable in self.drawables():
            drawable.visible = visible

    def dispose(self) -> None:
        """Drop all drawables; the host releases whatever it attached."""
        self.wireframes = []
        self.corner_markers = []
        self.openings = []
        self.labels = []
        self.stats = OverlayStats()
