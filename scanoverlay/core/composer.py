"""Per-element transform composition: scan pose to model-space pose."""

from __future__ import annotations

from scanoverlay.models import AlignmentResult, Pose, ResolvedCalibration, Vector3


def compose_pose(
    pose: Pose,
    calibration: ResolvedCalibration,
    alignment: AlignmentResult,
) -> Pose:
    """
    Map a scan-space pose into the model frame.

    X/Z are scaled then shifted by the shared alignment offset. Y is
    re-expressed relative to the scan floor, scaled vertically, and
    placed on the model floor. Both frames share a rotational
    convention, so rotation passes through.
    """
    p = pose.position
    s = calibration.final_scale_factor

    floor_relative_y = (p.y - calibration.scan_floor_y) * calibration.vertical_scale

    return Pose(
        position=Vector3(
            x=p.x * s + alignment.offset.x,
            y=calibration.model_floor_y + floor_relative_y,
            z=p.z * s + alignment.offset.z,
        ),
        rotation=pose.rotation.model_copy(),
    )
