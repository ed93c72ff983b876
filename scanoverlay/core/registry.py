"""Builder registry: the set of geometry builders and their run order."""

from __future__ import annotations
import logging

from scanoverlay.models.context import MeasurementContext
from scanoverlay.models.parameters import OverlayConfig
from scanoverlay.builders.base import GeometryBuilder

logger = logging.getLogger(__name__)


class BuilderRegistry:
    """
    Builders keyed by id.

    For each build the registry selects the builders the config enables
    and the context needs, then orders them: lowest priority first, and
    never ahead of a selected builder it depends on.
    """

    def __init__(self) -> None:
        self._builders: dict[str, GeometryBuilder] = {}

    def register(self, builder: GeometryBuilder) -> None:
        builder_id = builder.get_id()
        if builder_id in self._builders:
            logger.warning("Replacing registered builder %s", builder_id)
        self._builders[builder_id] = builder

    def unregister(self, builder_id: str) -> None:
        self._builders.pop(builder_id, None)

    def get_builder(self, builder_id: str) -> GeometryBuilder | None:
        return self._builders.get(builder_id)

    def list_builders(self) -> list[GeometryBuilder]:
        """Registered builders, in registration order."""
        return list(self._builders.values())

    @staticmethod
    def is_enabled(builder_id: str, config: OverlayConfig) -> bool:
        """An empty enabled list means every builder not explicitly disabled."""
        if config.enabled_builders and builder_id not in config.enabled_builders:
            return False
        return builder_id not in config.disabled_builders

    def get_applicable_builders(self, context: MeasurementContext) -> list[GeometryBuilder]:
        selected = {
            builder_id: builder
            for builder_id, builder in self._builders.items()
            if self.is_enabled(builder_id, context.config) and builder.applies(context)
        }
        return self._run_order(selected)

    def _run_order(self, selected: dict[str, GeometryBuilder]) -> list[GeometryBuilder]:
        """
        Repeatedly take the lowest-priority builder whose dependencies
        have all been placed. Dependencies outside the selection (disabled
        or not applicable) do not hold anything back.

        Raises ValueError on a dependency cycle.
        """
        pending = sorted(selected.values(), key=lambda b: (b.priority, b.get_id()))
        placed: set[str] = set()
        ordered: list[GeometryBuilder] = []

        while pending:
            ready = next(
                (
                    b for b in pending
                    if all(dep in placed or dep not in selected for dep in b.dependencies)
                ),
                None,
            )
            if ready is None:
                cycle = ", ".join(b.get_id() for b in pending)
                raise ValueError(f"Builder dependency cycle among: {cycle}")
            pending.remove(ready)
            placed.add(ready.get_id())
            ordered.append(ready)

        return ordered


def create_default_registry() -> BuilderRegistry:
    """Walls, then doors, then windows."""
    from scanoverlay.builders.wall.wireframe import WallWireframeBuilder
    from scanoverlay.builders.opening.marker import OpeningMarkerBuilder
    from scanoverlay.models import OpeningCategory

    registry = BuilderRegistry()
    registry.register(WallWireframeBuilder())
    registry.register(OpeningMarkerBuilder(OpeningCategory.DOOR))
    registry.register(OpeningMarkerBuilder(OpeningCategory.WINDOW))
    return registry
