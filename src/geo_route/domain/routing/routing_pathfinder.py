import heapq
import time

from geo_route.app.protocols import NoopHooks, SearchHooks
from geo_route.domain.entities.geography import GeoPoint, Path
from geo_route.domain.entities.graph import Graph
from geo_route.domain.errors import NoPathError, PathReconstructionError
from geo_route.domain.routing.routing_reachability import ReachabilityChecker


class PathFinder:
    """Dijkstra over a Graph; weights come from the graph's metric."""

    def __init__(
        self,
        graph: Graph,
        checker: ReachabilityChecker | None = None,
        hooks: SearchHooks | None = None,
    ):
        self.G = graph
        self.checker = checker or ReachabilityChecker(graph)
        self._hooks = hooks or NoopHooks()

    def _search(self, start: GeoPoint) -> tuple[dict[GeoPoint, float], dict[GeoPoint, GeoPoint], int]:
        dist: dict[GeoPoint, float] = {start: 0.0}
        previous: dict[GeoPoint, GeoPoint] = {}
        settled: set[GeoPoint] = set()
        seq = 0
        relaxed = 0
        # (distance, insertion seq, vertex): seq breaks ties FIFO and keeps GeoPoint out of comparisons
        frontier: list[tuple[float, int, GeoPoint]] = [(0.0, seq, start)]
        while frontier:
            d, _, cur = heapq.heappop(frontier)
            if cur in settled or d > dist[cur]:
                continue  # stale entry
            settled.add(cur)
            for n in self.G.neighbors(cur):
                cand = d + self.G.weight(cur, n)
                if n not in dist or cand < dist[n]:
                    dist[n] = cand
                    previous[n] = cur
                    seq += 1
                    relaxed += 1
                    heapq.heappush(frontier, (cand, seq, n))
        return dist, previous, relaxed

    def shortest_distances(self, start: GeoPoint) -> dict[GeoPoint, float]:
        """Settled distance from start to every vertex in its component."""
        self.G.require(start)
        return self._search(start)[0]

    def route(self, start: GeoPoint, end: GeoPoint) -> Path:
        self.G.require(start, end)
        if start == end:
            self._hooks.error(reason="start_is_end", start=str(start), end=str(end))
            raise NoPathError(start, end, "start equals end, no route")
        if not self.checker.connected(start, end):
            self._hooks.error(reason="disconnected", start=str(start), end=str(end))
            raise NoPathError(start, end, "no path")

        t0 = time.perf_counter()
        self._hooks.search_start(start=str(start), end=str(end), vertices=len(self.G))
        dist, previous, relaxed = self._search(start)
        path = self._reconstruct(start, end, previous)
        self._hooks.search_end(
            start=str(start),
            end=str(end),
            settled=len(dist),
            relaxed=relaxed,
            hops=len(path) - 1,
            length=dist[end],
            ms=(time.perf_counter() - t0) * 1000,
        )
        return path

    def _reconstruct(
        self, start: GeoPoint, end: GeoPoint, previous: dict[GeoPoint, GeoPoint]
    ) -> Path:
        path = [end]
        cur = end
        # a valid chain visits each vertex at most once
        for _ in range(len(previous)):
            if cur == start:
                break
            nxt = previous.get(cur)
            if nxt is None:
                break
            path.append(nxt)
            cur = nxt
        if cur != start:
            self._hooks.error(reason="broken_chain", start=str(start), end=str(end), at=str(cur))
            raise PathReconstructionError(start, end, cur)
        path.reverse()
        return path
