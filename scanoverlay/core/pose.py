"""Pose transform decoding: 16-number column-major matrices to position + rotation."""

from __future__ import annotations
from typing import Sequence

import numpy as np

from scanoverlay.models import Pose, Quaternion, Vector3


def column_major_to_matrix(data: Sequence[float]) -> np.ndarray:
    """Convert a column-major 16-element list to a 4x4 matrix."""
    if len(data) != 16:
        raise ValueError(f"Expected 16 elements, got {len(data)}")
    return np.asarray(data, dtype=float).reshape(4, 4, order="F")


def matrix_to_column_major(matrix: np.ndarray) -> list[float]:
    """Convert a 4x4 matrix to a column-major 16-element list."""
    return matrix.flatten(order="F").tolist()


def rotation_matrix_to_quaternion(R: np.ndarray) -> np.ndarray:
    """Convert 3x3 rotation matrix to quaternion [x, y, z, w]."""
    trace = np.trace(R)

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (R[2, 1] - R[1, 2]) * s
        y = (R[0, 2] - R[2, 0]) * s
        z = (R[1, 0] - R[0, 1]) * s
    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2])
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s
    elif R[1, 1] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2])
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1])
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    return np.array([x, y, z, w])


def decompose(matrix: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Split a 4x4 affine matrix into translation, rotation quaternion and scale.

    Scale is the length of each basis column; a reflection (negative
    determinant) is folded into the X scale so the remaining basis is a
    proper rotation.
    """
    basis = matrix[:3, :3]
    scale = np.linalg.norm(basis, axis=0)
    if np.linalg.det(basis) < 0:
        scale[0] = -scale[0]

    # Degenerate axes keep their (zero) column rather than dividing by zero
    safe = np.where(np.abs(scale) < 1e-12, 1.0, scale)
    rotation = basis / safe

    translation = matrix[:3, 3].copy()
    return translation, rotation_matrix_to_quaternion(rotation), scale


def decode_pose(data: Sequence[float]) -> Pose:
    """
    Decode a scanner pose transform into a rigid Pose.

    Any scale encoded in the matrix is discarded: element dimensions
    already define size.
    """
    translation, quat, _scale = decompose(column_major_to_matrix(data))
    norm = np.linalg.norm(quat)
    if norm > 1e-12:
        quat = quat / norm
    return Pose(
        position=Vector3(x=float(translation[0]), y=float(translation[1]), z=float(translation[2])),
        rotation=Quaternion(x=float(quat[0]), y=float(quat[1]), z=float(quat[2]), w=float(quat[3])),
    )


def pose_to_column_major(pose: Pose) -> list[float]:
    """Encode a Pose as the 16-number column-major layout the scanner emits."""
    q = pose.rotation
    x, y, z, w = q.x, q.y, q.z, q.w
    matrix = np.eye(4)
    matrix[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    matrix[:3, 3] = pose.position.as_tuple()
    return matrix_to_column_major(matrix)
