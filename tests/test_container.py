"""Tests for the dependency injection container."""

import pytest

from map_navigator.adapters.rendering import TextPathRenderer
from map_navigator.container import Container, get_container, reset_container
from map_navigator.domain.models import PathStatus
from map_navigator.graph.dijkstra import DijkstraEngine
from map_navigator.ports.graph import ShortestPathEnginePort
from map_navigator.ports.rendering import PathRendererPort
from map_navigator.services import PathQueryService


class TestContainer:
    def test_resolve_unregistered_raises(self):
        with pytest.raises(KeyError):
            Container().resolve(PathQueryService)

    def test_singleton_registration(self):
        container = Container()
        container.register(PathRendererPort, TextPathRenderer)

        assert container.resolve(PathRendererPort) is container.resolve(PathRendererPort)

    def test_transient_registration(self):
        container = Container()
        container.register(ShortestPathEnginePort, DijkstraEngine, singleton=False)

        assert container.resolve(ShortestPathEnginePort) is not container.resolve(
            ShortestPathEnginePort
        )

    def test_re_registering_replaces_cached_singleton(self):
        container = Container()
        container.register(PathRendererPort, TextPathRenderer)
        first = container.resolve(PathRendererPort)

        container.register(PathRendererPort, TextPathRenderer)

        assert container.resolve(PathRendererPort) is not first

    def test_clear_all(self):
        container = Container()
        container.register(PathRendererPort, TextPathRenderer)
        container.clear_all()

        assert not container.is_registered(PathRendererPort)

    def test_default_bindings(self, sample_map):
        container = Container.create_default()
        service = container.resolve(PathQueryService)

        assert isinstance(service.engine, DijkstraEngine)
        assert isinstance(service.renderer, TextPathRenderer)
        assert service.find_path(sample_map, "A", "D").status is PathStatus.FOUND

    def test_override_engine_before_resolving_service(self, sample_map):
        calls = []

        class RecordingEngine(DijkstraEngine):
            def compute(self, graph, source):
                calls.append(source.name)
                return super().compute(graph, source)

        container = Container.create_default()
        container.register(ShortestPathEnginePort, RecordingEngine)

        container.resolve(PathQueryService).find_path(sample_map, "B", "E")

        assert calls == ["B"]


def test_get_container_is_shared_until_reset():
    first = get_container()
    assert get_container() is first

    reset_container()
    assert get_container() is not first
