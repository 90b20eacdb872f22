# geo_route/domain/routing/routing_core.py
from dataclasses import dataclass, field

from geo_route.app.protocols import NoopHooks, SearchHooks
from geo_route.domain.entities.geography import GeoPoint, Path, RoutePlan
from geo_route.domain.entities.graph import Graph
from geo_route.domain.routing.routing_metrics import route_length
from geo_route.domain.routing.routing_nearest import NearestPointIndex
from geo_route.domain.routing.routing_pathfinder import PathFinder
from geo_route.domain.routing.routing_reachability import ReachabilityChecker


@dataclass
class Navigator:
    """
    Convenience façade bundling the routing components over one graph.
    Components only read the graph, so one Navigator can serve many callers.
    """

    graph: Graph
    hooks: SearchHooks = field(default_factory=NoopHooks)

    def __post_init__(self):
        self.index = NearestPointIndex(self.graph)
        self.checker = ReachabilityChecker(self.graph)
        self.finder = PathFinder(self.graph, self.checker, hooks=self.hooks)

    def nearest(self, q: GeoPoint) -> GeoPoint:
        return self.index.nearest(q)

    def connected(self, a: GeoPoint, b: GeoPoint) -> bool:
        return self.checker.connected(a, b)

    def route(self, a: GeoPoint, b: GeoPoint) -> Path:
        return self.finder.route(a, b)

    def length(self, path: Path) -> float:
        return route_length(path, self.graph.metric)

    def plan(self, query_start: GeoPoint, query_end: GeoPoint) -> RoutePlan:
        start, end = self.index.nearest(query_start), self.index.nearest(query_end)
        path = self.finder.route(start, end)
        return RoutePlan(query_start, query_end, start, end, path, self.length(path))
