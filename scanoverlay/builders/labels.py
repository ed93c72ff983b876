"""Dimension labels: text + anchor descriptors for wall measurements.

The host renders the text (sprite, billboard) at `label_position`; the
extension lines tie the wall's left and right edges to the label.
"""

from __future__ import annotations

from scanoverlay.models import DimensionLabel, Palette, Pose, Segment, Vector3

SPRITE_WIDTH = 3.0     # Multiples of the measurement scale
SPRITE_ASPECT = 0.35

# Outward face normal in wall-local space
WALL_NORMAL = Vector3(x=0.0, y=0.0, z=-1.0)


def format_dimensions(width: float, height: float, surface_area: float) -> str:
    """e.g. '3.50m × 2.50m (8.75m²)'."""
    return f"{width:.2f}m × {height:.2f}m ({surface_area:.2f}m²)"


def create_dimension_label(
    wall_id: str,
    width: float,
    height: float,
    surface_area: float,
    pose: Pose,
    measurement_scale: float,
    palette: Palette,
    label_offset: float = 0.05,
    extension_line_length: float = 0.2,
) -> DimensionLabel:
    """Build the label descriptor for one wall, anchored at its model-space pose."""
    normal = pose.rotation.rotate(WALL_NORMAL)
    label_position = pose.position + normal * (label_offset * measurement_scale)

    return DimensionLabel(
        wall_id=wall_id,
        text=format_dimensions(width, height, surface_area),
        width=width,
        height=height,
        surface_area=surface_area,
        anchor_position=pose.position,
        anchor_rotation=pose.rotation,
        label_position=label_position,
        sprite_scale=(SPRITE_WIDTH * measurement_scale, SPRITE_WIDTH * measurement_scale * SPRITE_ASPECT),
        text_color=palette.label_text,
        stroke_color=palette.label_stroke,
        extension_line_color=palette.extension_line,
        extension_lines=extension_lines(
            pose, width, label_position, extension_line_length, measurement_scale,
        ),
    )


def extension_lines(
    pose: Pose,
    width: float,
    label_position: Vector3,
    length: float,
    measurement_scale: float,
) -> list[Segment]:
    """
    Left and right extension lines, at wall center height, each running
    from a wall edge toward the label's projection onto the wall line.
    """
    scaled_width = width * measurement_scale
    half_width = scaled_width / 2
    center_y = pose.position.y

    left = pose.apply(Vector3(x=-half_width))
    right = pose.apply(Vector3(x=half_width))

    wall_dir = (right - left).normalized()
    on_plane = Vector3(x=label_position.x, y=center_y, z=label_position.z)
    along = max(0.0, min(scaled_width, (on_plane - left).dot(wall_dir)))
    projected = left + wall_dir * along
    projected = Vector3(x=projected.x, y=center_y, z=projected.z)

    segments: list[Segment] = []
    for edge in (left, right):
        direction = (projected - edge).normalized()
        end = edge + direction * (length * measurement_scale)
        segments.append(Segment(start=edge, end=Vector3(x=end.x, y=center_y, z=end.z)))
    return segments
