"""Abstract base class for all overlay geometry builders.

Every builder in the system implements this interface. Builders are:
- Self-contained: each emits one kind of drawable (wall wireframes, door markers, ...)
- Composable: multiple builders run in sequence via the registry
- Conditional: each builder decides if it applies to the current context
- Contained: a failure on one element never stops the others
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Callable

from scanoverlay.models import MeasurementContext, Pose, Vector3

logger = logging.getLogger(__name__)


def box_corners(pose: Pose, half_width: float, half_height: float, half_depth: float) -> list[Vector3]:
    """
    Eight corners of an oriented box centered on the pose.

    Bottom face first, then top face; each face runs
    (-x, -z), (+x, -z), (+x, +z), (-x, +z) in local space.
    """
    local: list[Vector3] = []
    for y in (-half_height, half_height):
        for dx, dz in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
            local.append(Vector3(x=dx * half_width, y=y, z=dz * half_depth))
    return [pose.apply(v) for v in local]


class GeometryBuilder(ABC):
    """
    Base class for all overlay builders.

    Subclasses implement `applies()` and `build()`.
    The assembler queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `build()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of builders that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this builder (e.g., 'wall.wireframe')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Wall Wireframes')."""
        ...

    @abstractmethod
    def applies(self, context: MeasurementContext) -> bool:
        """Return True if this builder should run for the given context."""
        ...

    @abstractmethod
    def build(self, context: MeasurementContext) -> None:
        """
        Add drawables for the given context.

        Calibration and alignment are already resolved on the context;
        builders read them and never resolve anything themselves.
        """
        ...

    def _guarded(
        self, context: MeasurementContext, element_id: str, build_one: Callable[[], None],
    ) -> bool:
        """Run one element's build; on failure record a skip and carry on."""
        try:
            build_one()
        except Exception as exc:
            logger.exception("Error building %s", element_id)
            context.warn(
                "element_build_failed",
                f"Skipping {element_id}: {type(exc).__name__}: {exc}",
                element=element_id,
                skipped=True,
            )
            return False
        return True
