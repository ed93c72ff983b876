"""Measurement context: accumulates state during one overlay build."""

from __future__ import annotations
import logging
from pydantic import BaseModel, Field

from .scan import ParsedScan, ParsedWall
from .calibration import ResolvedCalibration, AlignmentResult
from .overlay import LineSet, PointSet, OpeningSolid, DimensionLabel, BuildWarning
from .parameters import OverlayParams, OverlayConfig

logger = logging.getLogger(__name__)


class MeasurementContext(BaseModel):
    """
    Holds all state during a single overlay build.

    The resolvers fill in calibration and alignment once.
    Builders read them and add drawables.
    The assembler orchestrates the flow and packages the output.
    """
    # Input
    scan: ParsedScan
    params: OverlayParams
    config: OverlayConfig = Field(default_factory=OverlayConfig)

    # Resolution results (populated before any builder runs)
    calibration: ResolvedCalibration = Field(default_factory=ResolvedCalibration)
    alignment: AlignmentResult = Field(default_factory=AlignmentResult)

    # Output (populated by builders)
    wireframes: list[LineSet] = []
    corner_markers: list[PointSet] = []
    openings: list[OpeningSolid] = []
    labels: list[DimensionLabel] = []
    surface_areas: dict[str, float] = {}
    total_surface_area: float = 0.0
    warnings: list[BuildWarning] = []

    def add_wall_area(self, wall: ParsedWall, area: float) -> None:
        if wall.wall_id in self.surface_areas:
            self.warn(
                "duplicate_wall_id",
                f"Wall identifier {wall.wall_id!r} appears more than once; "
                "the map keeps the last area, the total counts both",
                element=wall.element_id,
                field="identifier",
            )
        self.surface_areas[wall.wall_id] = area
        self.total_surface_area += area

    def warn(
        self,
        code: str,
        message: str,
        element: str | None = None,
        field: str | None = None,
        skipped: bool = False,
    ) -> None:
        logger.warning("%s: %s", element or code, message)
        self.warnings.append(BuildWarning(
            code=code, message=message, element=element, field=field, skipped=skipped,
        ))

    def extend_warnings(self, warnings: list[BuildWarning]) -> None:
        self.warnings.extend(warnings)
