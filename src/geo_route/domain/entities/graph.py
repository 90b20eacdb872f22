import math
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import numpy as np

from geo_route.app.protocols import DistanceMetric
from geo_route.domain.entities.geography import EdgeRecord, GeoPoint, VertexRecord
from geo_route.domain.errors import MalformedGraphError, UnknownVertexError
from geo_route.domain.routing.routing_metrics import PLANAR

VertexLike = VertexRecord | tuple[str, float, float]
EdgeLike = EdgeRecord | tuple[int, int]


class Graph:
    """
    Undirected adjacency over GeoPoint, built once by build_graph and read-only after.
    Vertex order is construction order; neighbours keep insertion order.
    Weights are never stored: weight(a, b) asks the metric every time.
    """

    def __init__(
        self,
        adjacency: Mapping[GeoPoint, tuple[GeoPoint, ...]],
        names: Mapping[GeoPoint, str],
        metric: DistanceMetric,
    ):
        self._adj = MappingProxyType(dict(adjacency))
        self._names = MappingProxyType(dict(names))
        self.metric = metric
        self.vertices: tuple[GeoPoint, ...] = tuple(self._adj)
        coords = np.array([(p.lat, p.lon) for p in self.vertices], dtype=float).reshape(-1, 2)
        coords.setflags(write=False)
        self.coords = coords
        self._pos = {p: i for i, p in enumerate(self.vertices)}
        # undirected count; a self-loop counts once
        self.edge_count = sum(
            1 for a, ns in self._adj.items() for b in ns if self._pos[a] <= self._pos[b]
        )

    # --------------- lookups -----------------------------

    def position(self, p: GeoPoint) -> int:
        """Construction-order position of a vertex."""
        try:
            return self._pos[p]
        except KeyError:
            raise UnknownVertexError(p) from None

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def adjacency(self) -> Mapping[GeoPoint, tuple[GeoPoint, ...]]:
        return self._adj

    def has_vertex(self, p: GeoPoint) -> bool:
        return p in self._adj

    def require(self, *points: GeoPoint) -> None:
        for p in points:
            if p not in self._adj:
                raise UnknownVertexError(p)

    def neighbors(self, p: GeoPoint) -> tuple[GeoPoint, ...]:
        try:
            return self._adj[p]
        except KeyError:
            raise UnknownVertexError(p) from None

    def has_edge(self, a: GeoPoint, b: GeoPoint) -> bool:
        return b in self._adj.get(a, ())

    def weight(self, a: GeoPoint, b: GeoPoint) -> float:
        return self.metric.distance(a, b)

    def name_of(self, p: GeoPoint) -> str:
        try:
            return self._names[p]
        except KeyError:
            raise UnknownVertexError(p) from None

    def __contains__(self, p: object) -> bool:
        return p in self._adj

    def __iter__(self) -> Iterator[GeoPoint]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count}, metric={self.metric.name!r})"


def _vertex(rec: VertexLike, pos: int) -> tuple[str, GeoPoint]:
    try:
        if isinstance(rec, VertexRecord):
            name, lat, lon = rec.name, rec.lat, rec.lon
        else:
            name, lat, lon = rec
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError) as e:
        raise MalformedGraphError(f"vertex {pos}: bad record {rec!r} ({e})") from None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise MalformedGraphError(f"vertex {pos}: non-finite coordinates ({lat}, {lon})")
    return str(name), GeoPoint(lat, lon)


def _edge(rec: EdgeLike, pos: int, n: int) -> tuple[int, int]:
    try:
        a, b = (rec.a, rec.b) if isinstance(rec, EdgeRecord) else rec
    except (TypeError, ValueError):
        raise MalformedGraphError(f"edge {pos}: bad record {rec!r}") from None
    for i in (a, b):
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
            raise MalformedGraphError(f"edge {pos}: index {i!r} is not an integer")
        if not 0 <= i < n:
            raise MalformedGraphError(f"edge {pos}: index {i} out of range [0, {n})")
    return int(a), int(b)


def build_graph(
    vertices: Iterable[VertexLike],
    edges: Iterable[EdgeLike],
    metric: DistanceMetric | None = None,
) -> Graph:
    points: list[GeoPoint] = []
    names: dict[GeoPoint, str] = {}
    for pos, rec in enumerate(vertices):
        name, p = _vertex(rec, pos)
        points.append(p)
        names.setdefault(p, name)  # identical coordinates collapse to the first record

    # dict-as-ordered-set: idempotent duplicates, deterministic iteration
    adj: dict[GeoPoint, dict[GeoPoint, None]] = {p: {} for p in points}
    for pos, rec in enumerate(edges):
        i, j = _edge(rec, pos, len(points))
        a, b = points[i], points[j]
        adj[a][b] = None
        adj[b][a] = None

    return Graph({p: tuple(ns) for p, ns in adj.items()}, names, metric or PLANAR)
