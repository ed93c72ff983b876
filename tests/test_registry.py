"""Tests for builder selection and run order."""

import pytest

from scanoverlay.builders.base import GeometryBuilder
from scanoverlay.core.registry import BuilderRegistry, create_default_registry
from scanoverlay.models import MeasurementContext, OverlayConfig, OverlayParams, ParsedScan


class StubBuilder(GeometryBuilder):

    def __init__(self, builder_id, priority=100, dependencies=(), applies=True):
        self.builder_id = builder_id
        self.priority = priority
        self.dependencies = list(dependencies)
        self._applies = applies

    def get_id(self):
        return self.builder_id

    def get_name(self):
        return self.builder_id

    def applies(self, context):
        return self._applies

    def build(self, context):
        pass


def make_context(config=None):
    return MeasurementContext(
        scan=ParsedScan(), params=OverlayParams(), config=config or OverlayConfig(),
    )


def ids(builders):
    return [b.get_id() for b in builders]


class TestRunOrder:

    def test_priority_then_id(self):
        registry = BuilderRegistry()
        registry.register(StubBuilder("c", priority=20))
        registry.register(StubBuilder("b", priority=10))
        registry.register(StubBuilder("a", priority=20))

        assert ids(registry.get_applicable_builders(make_context())) == ["b", "a", "c"]

    def test_dependency_runs_first_despite_priority(self):
        registry = BuilderRegistry()
        registry.register(StubBuilder("early", priority=1, dependencies=["late"]))
        registry.register(StubBuilder("late", priority=50))
        registry.register(StubBuilder("middle", priority=10))

        assert ids(registry.get_applicable_builders(make_context())) == ["middle", "late", "early"]

    def test_unselected_dependency_does_not_block(self):
        """Doors still build when the wall builder is disabled."""
        config = OverlayConfig(disabled_builders=["wall.wireframe"])
        registry = BuilderRegistry()
        registry.register(StubBuilder("wall.wireframe", priority=50))
        registry.register(StubBuilder("opening.door", priority=60, dependencies=["wall.wireframe"]))

        assert ids(registry.get_applicable_builders(make_context(config))) == ["opening.door"]

    def test_cycle_raises(self):
        registry = BuilderRegistry()
        registry.register(StubBuilder("a", dependencies=["b"]))
        registry.register(StubBuilder("b", dependencies=["a"]))

        with pytest.raises(ValueError, match="cycle"):
            registry.get_applicable_builders(make_context())


class TestSelection:

    def test_not_applicable_is_dropped(self):
        registry = BuilderRegistry()
        registry.register(StubBuilder("yes"))
        registry.register(StubBuilder("no", applies=False))

        assert ids(registry.get_applicable_builders(make_context())) == ["yes"]

    @pytest.mark.parametrize("config,expected", [
        (OverlayConfig(), True),
        (OverlayConfig(enabled_builders=["other"]), False),
        (OverlayConfig(enabled_builders=["x"], disabled_builders=["x"]), False),
        (OverlayConfig(disabled_builders=["other"]), True),
    ])
    def test_is_enabled(self, config, expected):
        assert BuilderRegistry.is_enabled("x", config) is expected

    def test_replacing_logs_warning(self, caplog):
        registry = BuilderRegistry()
        registry.register(StubBuilder("x", priority=1))
        registry.register(StubBuilder("x", priority=2))

        assert registry.get_builder("x").priority == 2
        assert "Replacing registered builder x" in caplog.text

    def test_unregister(self):
        registry = create_default_registry()
        registry.unregister("opening.window")
        registry.unregister("missing")

        assert ids(registry.list_builders()) == ["wall.wireframe", "opening.door"]
