"""Horizontal alignment: the single X/Z translation from scan space to model space."""

from __future__ import annotations
import logging

import numpy as np

from scanoverlay.models import (
    AlignmentResult, AlignmentStrategy, BoundingBox, BuildWarning,
    ModelFrame, Offset2D, ParsedScan, ResolvedCalibration, ScanBounds, Vector3,
)

logger = logging.getLogger(__name__)


class AlignmentResolver:
    """
    Computes every candidate alignment strategy and picks one.

    First wall to model min wins whenever a wall exists (it tracks
    L-shaped footprints better than a bounding-box fit); otherwise the
    scan's min corner goes to the model's min corner. Max-to-max and
    center-to-center are computed for comparison only, unless the
    caller overrides the choice.
    """

    def __init__(self, min_wall_depth: float = 0.1) -> None:
        self.min_wall_depth = min_wall_depth

    def resolve(
        self,
        scan: ParsedScan,
        calibration: ResolvedCalibration,
        model_frame: ModelFrame | None,
        strategy_override: AlignmentStrategy | None = None,
    ) -> tuple[AlignmentResult, list[BuildWarning]]:
        warnings: list[BuildWarning] = []
        bounds = self.scan_bounds(scan, calibration.final_scale_factor)

        if model_frame is None or not calibration.calibrated:
            return AlignmentResult(scan_bounds=bounds), warnings

        alternatives = self.candidates(scan, calibration, model_frame.bounding_box, bounds)

        strategy = self._auto_select(alternatives)
        if strategy_override is not None:
            if strategy_override in alternatives:
                strategy = strategy_override
            else:
                message = (
                    f"Alignment strategy {strategy_override.value!r} is not available "
                    f"for this scan; using {strategy.value!r}"
                )
                logger.warning(message)
                warnings.append(BuildWarning(
                    code="unavailable_strategy", message=message, field="strategy_override",
                ))

        offset = alternatives[strategy]
        logger.info(
            "Alignment %s: offset=(%.6f, %.6f) over %d scan points",
            strategy.value, offset.x, offset.z, bounds.point_count,
        )
        for name, alt in alternatives.items():
            logger.debug("  candidate %s: (%.6f, %.6f)", name.value, alt.x, alt.z)

        return AlignmentResult(
            strategy=strategy,
            offset=offset,
            alternatives=alternatives,
            scan_bounds=bounds,
        ), warnings

    def scan_bounds(self, scan: ParsedScan, scale: float) -> ScanBounds:
        """Floor-plane bounds of the scaled scan point cloud."""
        points = self.point_cloud(scan, scale)
        if points.size == 0:
            return ScanBounds()
        lo = points.min(axis=0)
        hi = points.max(axis=0)
        return ScanBounds(
            min_x=float(lo[0]), max_x=float(hi[0]),
            min_z=float(lo[1]), max_z=float(hi[1]),
            point_count=int(points.shape[0]),
        )

    def point_cloud(self, scan: ParsedScan, scale: float) -> np.ndarray:
        """
        Scaled (x, z) points: four footprint corners per wall, the
        center of every door and window.
        """
        points: list[tuple[float, float]] = []

        for wall in scan.walls:
            seg = wall.segment
            half_width = seg.width * scale / 2
            half_depth = max(seg.depth, self.min_wall_depth) * scale / 2
            center = Vector3(x=wall.pose.position.x * scale, z=wall.pose.position.z * scale)
            for dx, dz in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
                local = Vector3(x=dx * half_width, z=dz * half_depth)
                corner = wall.pose.rotation.rotate(local) + center
                points.append((corner.x, corner.z))

        for opening in scan.openings:
            pos = opening.pose.position
            points.append((pos.x * scale, pos.z * scale))

        return np.array(points, dtype=float).reshape(-1, 2)

    def candidates(
        self,
        scan: ParsedScan,
        calibration: ResolvedCalibration,
        model_box: BoundingBox,
        bounds: ScanBounds,
    ) -> dict[AlignmentStrategy, Offset2D]:
        scale = calibration.final_scale_factor
        alternatives = {
            AlignmentStrategy.MIN_TO_MIN: Offset2D(
                x=model_box.min.x - bounds.min_x,
                z=model_box.min.z - bounds.min_z,
            ),
            AlignmentStrategy.MAX_TO_MAX: Offset2D(
                x=model_box.max.x - bounds.max_x,
                z=model_box.max.z - bounds.max_z,
            ),
            AlignmentStrategy.CENTER_TO_CENTER: Offset2D(
                x=model_box.center.x - bounds.center_x,
                z=model_box.center.z - bounds.center_z,
            ),
        }
        if scan.walls:
            first = scan.walls[0].pose.position
            alternatives[AlignmentStrategy.FIRST_WALL_TO_MIN] = Offset2D(
                x=model_box.min.x - first.x * scale,
                z=model_box.min.z - first.z * scale,
            )
        return alternatives

    def _auto_select(self, alternatives: dict[AlignmentStrategy, Offset2D]) -> AlignmentStrategy:
        if AlignmentStrategy.FIRST_WALL_TO_MIN in alternatives:
            return AlignmentStrategy.FIRST_WALL_TO_MIN
        return AlignmentStrategy.MIN_TO_MIN


def resolve_alignment(
    scan: ParsedScan,
    calibration: ResolvedCalibration,
    model_frame: ModelFrame | None,
    strategy_override: AlignmentStrategy | None = None,
    min_wall_depth: float = 0.1,
) -> tuple[AlignmentResult, list[BuildWarning]]:
    """Functional entry point over AlignmentResolver."""
    return AlignmentResolver(min_wall_depth).resolve(
        scan, calibration, model_frame, strategy_override,
    )
