"""Geometric primitives used throughout the overlay engine."""

from __future__ import annotations
import math
from pydantic import BaseModel, Field


class Vector3(BaseModel):
    """Point or direction in 3D space (Y-up, Three.js convention)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance_to(self, other: Vector3) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        ln = self.length()
        if ln < 1e-10:
            return Vector3()
        return Vector3(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


class Quaternion(BaseModel):
    """Rotation stored as (x, y, z, w). Defaults to identity."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def rotate(self, v: Vector3) -> Vector3:
        """Apply this (unit) rotation to a vector."""
        qx, qy, qz, qw = self.x, self.y, self.z, self.w

        # t = 2 * cross(q.xyz, v)
        tx = 2 * (qy * v.z - qz * v.y)
        ty = 2 * (qz * v.x - qx * v.z)
        tz = 2 * (qx * v.y - qy * v.x)

        # v' = v + w * t + cross(q.xyz, t)
        return Vector3(
            x=v.x + qw * tx + qy * tz - qz * ty,
            y=v.y + qw * ty + qz * tx - qx * tz,
            z=v.z + qw * tz + qx * ty - qy * tx,
        )

    def as_list(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]


class Offset2D(BaseModel):
    """Translation on the floor plane (X-Z)."""
    x: float = 0.0
    z: float = 0.0


class Segment(BaseModel):
    """A single line segment between two points."""
    start: Vector3
    end: Vector3

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class Pose(BaseModel):
    """Rigid placement: position plus rotation, no scale."""
    position: Vector3 = Field(default_factory=Vector3)
    rotation: Quaternion = Field(default_factory=Quaternion)

    def apply(self, local: Vector3) -> Vector3:
        """Rotate a local-space point, then translate it."""
        return self.rotation.rotate(local) + self.position
