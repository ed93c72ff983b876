"""
Shared pytest fixtures for the measurement overlay tests.

Scan records are built the way the scanner exports them: raw dicts with
a 16-number column-major `transform`.
"""

from __future__ import annotations

import math
from typing import Any, Callable

import pytest

from scanoverlay.core.pose import pose_to_column_major
from scanoverlay.models import (
    BoundingBox, BoundingSphere, Confidence, ModelFrame, Pose, Quaternion,
    ScaleFactor, ScanFloorSummary, ScanMetadata, Vector3,
)


def make_transform(x: float = 0.0, y: float = 0.0, z: float = 0.0, yaw_degrees: float = 0.0) -> list[float]:
    """Column-major rigid transform: rotation about +Y, then translation."""
    half = math.radians(yaw_degrees) / 2
    pose = Pose(
        position=Vector3(x=x, y=y, z=z),
        rotation=Quaternion(x=0.0, y=math.sin(half), z=0.0, w=math.cos(half)),
    )
    return pose_to_column_major(pose)


def make_wall(
    width: float, height: float, depth: float,
    x: float = 0.0, y: float = 0.0, z: float = 0.0,
    yaw_degrees: float = 0.0, identifier: str | None = None,
) -> dict[str, Any]:
    record: dict[str, Any] = {
        "dimensions": [width, height, depth],
        "transform": make_transform(x, y, z, yaw_degrees),
    }
    if identifier is not None:
        record["identifier"] = identifier
    return record


def make_opening(category: str, x: float = 0.0, y: float = 0.0, z: float = 0.0, yaw_degrees: float = 0.0) -> dict[str, Any]:
    return {"category": category, "transform": make_transform(x, y, z, yaw_degrees)}


@pytest.fixture
def transform() -> Callable[..., list[float]]:
    return make_transform


@pytest.fixture
def wall() -> Callable[..., dict[str, Any]]:
    return make_wall


@pytest.fixture
def opening() -> Callable[..., dict[str, Any]]:
    return make_opening


@pytest.fixture
def two_wall_metadata() -> ScanMetadata:
    """Two walls meeting at a corner, one door, one window."""
    return ScanMetadata(
        walls=[
            make_wall(3.0, 2.5, 0.1, x=0.0, y=1.25, z=0.0, identifier="wall-a"),
            make_wall(4.0, 2.5, 0.0, x=1.5, y=1.25, z=2.0, yaw_degrees=90, identifier="wall-b"),
        ],
        doors=[make_opening("door", x=0.5, y=1.0, z=0.0)],
        windows=[make_opening("window", x=1.5, y=1.5, z=2.5, yaw_degrees=90)],
    )


@pytest.fixture
def model_frame() -> ModelFrame:
    """A loaded model scaled ~11x by the loader."""
    lo = Vector3(x=-10.0, y=-2.0, z=-8.0)
    hi = Vector3(x=30.0, y=26.0, z=40.0)
    box = BoundingBox.from_min_max(lo, hi)
    return ModelFrame(
        scale=Vector3(x=11.3, y=11.3, z=11.3),
        bounding_box=box,
        bounding_sphere=BoundingSphere(center=box.center, radius=box.size.length() / 2),
    )


@pytest.fixture
def scale_factor() -> ScaleFactor:
    return ScaleFactor(
        scale_x=11.3,
        scale_y=11.1,
        scale_z=11.3,
        uniform_horizontal_scale=11.3,
        vertical_scale=11.1,
        precision=0.113,
        confidence=Confidence.HIGH,
    )


@pytest.fixture
def floor_summary() -> ScanFloorSummary:
    """Wall centers at 1.25m on 2.5m walls: scan floor at y=0."""
    return ScanFloorSummary(
        bounding_box_min_y=1.25,
        bounding_box_center_y=1.25,
        average_wall_height=2.5,
    )
