# tests/app/test_api.py
import math

import pytest

from geo_route.app import api
from geo_route.domain.entities.geography import GeoPoint
from geo_route.domain.errors import (
    EmptyGraphError,
    GeoRouteError,
    MalformedGraphError,
    NoPathError,
    UnknownVertexError,
)
from geo_route.domain.routing.routing_metrics import HaversineMetric

A, B, C, D = GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0), GeoPoint(0.0, 2.0), GeoPoint(1.0, 1.0)


@pytest.fixture
def graph():
    return api.build_graph(
        [("A", 0, 0), ("B", 0, 1), ("C", 0, 2), ("D", 1, 1)],
        [(0, 1), (1, 2), (1, 3), (3, 2)],
    )


def test_typical_call_sequence(graph):
    start = api.nearest(graph, GeoPoint(-0.2, 0.1))
    end = api.nearest(graph, GeoPoint(0.1, 2.2))
    assert api.connected(graph, start, end)
    path = api.route(graph, start, end)
    assert path == [A, B, C]
    assert api.length(path) == 2.0


def test_literal_scenario(graph):
    assert api.connected(graph, A, C)
    assert api.nearest(graph, GeoPoint(0.0, 0.9)) == B
    assert api.length(api.route(graph, A, D)) == 2.0
    with pytest.raises(NoPathError):
        api.route(graph, A, A)


def test_length_edge_cases():
    assert api.length([]) == 0.0
    assert api.length([A]) == 0.0
    assert api.length([A, D]) == pytest.approx(math.sqrt(2))
    hav = HaversineMetric("km")
    assert api.length([A, B], hav) == pytest.approx(hav.distance(A, B))


def test_length_follows_the_graph_metric():
    hav = HaversineMetric("mi")
    g = api.build_graph([("A", 0, 0), ("B", 0, 1), ("C", 0, 2)], [(0, 1), (1, 2)], metric=hav)
    path = api.route(g, A, C)
    assert api.length(path, graph=g) == pytest.approx(2 * hav.distance(A, B))
    assert api.length(path, graph=g) > 100.0  # miles, not degrees
    assert api.length(path) == 2.0
    # an explicit metric wins over the graph's
    assert api.length(path, HaversineMetric("km"), graph=g) == pytest.approx(
        2 * HaversineMetric("km").distance(A, B)
    )


def test_errors_are_typed():
    with pytest.raises(MalformedGraphError):
        api.build_graph([("A", 0, 0)], [(0, 1)])
    with pytest.raises(EmptyGraphError):
        api.nearest(api.build_graph([], []), A)
    g = api.build_graph([("A", 0, 0)], [])
    with pytest.raises(UnknownVertexError):
        api.connected(g, A, B)
    for exc in (MalformedGraphError, EmptyGraphError, UnknownVertexError, NoPathError):
        assert issubclass(exc, GeoRouteError)


def test_repeated_queries_are_identical(graph):
    q = GeoPoint(0.5, 1.5)
    assert len({api.nearest(graph, q) for _ in range(5)}) == 1
    assert api.nearest(graph, q) == B  # equidistant from B, C and D
    assert {api.connected(graph, A, D) for _ in range(5)} == {True}
    assert len({tuple(api.route(graph, A, C)) for _ in range(5)}) == 1
