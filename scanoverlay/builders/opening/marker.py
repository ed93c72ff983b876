"""Door and window markers: translucent boxes at nominal standard sizes.

Openings carry no measured size, so no dimension labels are emitted.
"""

from __future__ import annotations
import logging

from scanoverlay.builders.base import GeometryBuilder, box_corners
from scanoverlay.core.composer import compose_pose
from scanoverlay.models import (
    LineSet, MeasurementContext, OpeningCategory, OpeningSolid,
    ParsedOpening, Vector3,
)

logger = logging.getLogger(__name__)


# Nominal (width, height, thickness) in meters
NOMINAL_SIZES: dict[OpeningCategory, tuple[float, float, float]] = {
    OpeningCategory.DOOR: (0.9, 2.0, 0.1),
    OpeningCategory.WINDOW: (1.2, 1.5, 0.1),
}

OPACITY: dict[OpeningCategory, float] = {
    OpeningCategory.DOOR: 0.6,
    OpeningCategory.WINDOW: 0.5,
}


class OpeningMarkerBuilder(GeometryBuilder):
    """Marker solid + outline for every opening of one category."""

    priority = 60
    dependencies = ["wall.wireframe"]

    def __init__(self, category: OpeningCategory) -> None:
        self.category = category

    def get_id(self) -> str:
        return f"opening.{self.category.value}"

    def get_name(self) -> str:
        return f"{self.category.value.capitalize()} Markers"

    def applies(self, context: MeasurementContext) -> bool:
        return len(self._openings(context)) > 0

    def build(self, context: MeasurementContext) -> None:
        for opening in self._openings(context):
            self._guarded(context, opening.element_id, lambda o=opening: self._build_opening(o, context))

    def _openings(self, context: MeasurementContext) -> list[ParsedOpening]:
        if self.category == OpeningCategory.DOOR:
            return context.scan.doors
        return context.scan.windows

    def _build_opening(self, opening: ParsedOpening, context: MeasurementContext) -> None:
        calibration = context.calibration
        palette = context.params.palette
        s = calibration.final_scale_factor
        v = calibration.vertical_scale

        width, height, thickness = NOMINAL_SIZES[self.category]
        size = Vector3(x=width * s, y=height * v, z=thickness * s)

        pose = compose_pose(opening.pose, calibration, context.alignment)
        corners = box_corners(pose, size.x / 2, size.y / 2, size.z / 2)

        if self.category == OpeningCategory.DOOR:
            fill, outline_color = palette.door_fill, palette.door_outline
        else:
            fill, outline_color = palette.window_fill, palette.window_outline

        context.openings.append(OpeningSolid(
            name=opening.element_id,
            category=self.category,
            position=pose.position,
            rotation=pose.rotation,
            size=size,
            color=fill,
            opacity=OPACITY[self.category],
            outline=LineSet(
                name=f"{opening.element_id}-frame",
                vertices=corners,
                color=outline_color,
                opacity=1.0,
            ),
        ))

        logger.debug(
            "%s: center (%.4f, %.4f, %.4f), size %.3f x %.3f x %.3f",
            opening.element_id, pose.position.x, pose.position.y, pose.position.z,
            size.x, size.y, size.z,
        )
