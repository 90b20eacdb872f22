# geo_route/app/api.py
"""
Functional entry points over a built Graph.
Each call wraps the graph in the matching component; errors propagate unchanged.
"""

from collections.abc import Iterable, Sequence

from geo_route.app.protocols import DistanceMetric
from geo_route.domain.entities.geography import GeoPoint, Path
from geo_route.domain.entities.graph import EdgeLike, Graph, VertexLike
from geo_route.domain.entities.graph import build_graph as _build_graph
from geo_route.domain.routing.routing_metrics import route_length
from geo_route.domain.routing.routing_nearest import NearestPointIndex
from geo_route.domain.routing.routing_pathfinder import PathFinder
from geo_route.domain.routing.routing_reachability import ReachabilityChecker


def build_graph(
    vertices: Iterable[VertexLike],
    edges: Iterable[EdgeLike],
    metric: DistanceMetric | None = None,
) -> Graph:
    return _build_graph(vertices, edges, metric)


def nearest(graph: Graph, point: GeoPoint) -> GeoPoint:
    return NearestPointIndex(graph).nearest(point)


def connected(graph: Graph, p1: GeoPoint, p2: GeoPoint) -> bool:
    return ReachabilityChecker(graph).connected(p1, p2)


def route(graph: Graph, start: GeoPoint, end: GeoPoint) -> Path:
    return PathFinder(graph).route(start, end)


def length(
    path: Sequence[GeoPoint],
    metric: DistanceMetric | None = None,
    *,
    graph: Graph | None = None,
) -> float:
    """
    Total path distance. Pass the graph the path came from (or its metric) to
    measure in that graph's units; with neither, the planar metric is used.
    """
    if metric is None and graph is not None:
        metric = graph.metric
    return route_length(path, metric)
