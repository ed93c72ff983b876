"""Wall wireframes: the measured box of each scanned wall.

Emits a 12-edge wireframe per wall, its surface area, and a dimension
label. Optional corner markers reuse the same eight vertices.
"""

from __future__ import annotations
import logging

from scanoverlay.builders.base import GeometryBuilder, box_corners
from scanoverlay.builders.labels import create_dimension_label
from scanoverlay.core.composer import compose_pose
from scanoverlay.models import (
    LineSet, MeasurementContext, ParsedWall, PointSet,
)

logger = logging.getLogger(__name__)


class WallWireframeBuilder(GeometryBuilder):
    """Wireframe box + dimension label + surface area per wall."""

    priority = 50  # Walls first: labels and area totals come from here

    def get_id(self) -> str:
        return "wall.wireframe"

    def get_name(self) -> str:
        return "Wall Wireframes"

    def applies(self, context: MeasurementContext) -> bool:
        return len(context.scan.walls) > 0

    def build(self, context: MeasurementContext) -> None:
        for wall in context.scan.walls:
            self._guarded(context, wall.element_id, lambda w=wall: self._build_wall(w, context))

    def _build_wall(self, wall: ParsedWall, context: MeasurementContext) -> None:
        params = context.params
        calibration = context.calibration
        palette = params.palette
        seg = wall.segment

        s = calibration.final_scale_factor
        v = calibration.vertical_scale

        half_width = seg.width * s / 2
        half_height = seg.height * v / 2
        half_depth = max(seg.depth, params.min_wall_depth) * s / 2

        pose = compose_pose(wall.pose, calibration, context.alignment)
        corners = box_corners(pose, half_width, half_height, half_depth)

        lines = LineSet(
            name=f"wall-{wall.index}-lines",
            vertices=corners,
            color=palette.wall_line,
        )
        markers = None
        if params.show_corner_markers:
            markers = PointSet(
                name=f"wall-{wall.index}-points",
                vertices=corners,
                color=palette.corner_marker,
                size=params.corner_marker_size,
            )

        # Area is real-world: unscaled width x height
        area = seg.surface_area
        label = create_dimension_label(
            wall_id=wall.wall_id,
            width=seg.width,
            height=seg.height,
            surface_area=area,
            pose=pose,
            measurement_scale=s,
            palette=palette,
            label_offset=params.label_offset,
            extension_line_length=params.extension_line_length,
        )

        # Nothing is added until the whole wall has been built
        context.wireframes.append(lines)
        if markers is not None:
            context.corner_markers.append(markers)
        context.labels.append(label)
        context.add_wall_area(wall, area)

        logger.debug(
            "%s (%s): %.3fm x %.3fm x %.3fm, area %.2fm², center (%.4f, %.4f, %.4f)",
            wall.element_id, wall.wall_id, seg.width, seg.height, seg.depth, area,
            pose.position.x, pose.position.y, pose.position.z,
        )
