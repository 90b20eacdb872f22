import math

import numpy as np

from geo_route.domain.entities.geography import GeoPoint
from geo_route.domain.entities.graph import Graph
from geo_route.domain.errors import EmptyGraphError


class NearestPointIndex:
    """
    Linear scan over every vertex with the graph's vectorized metric.
    A query equal to a vertex returns that vertex. Ties go to the vertex
    that comes first in construction order (argmin returns the first minimum).
    """

    def __init__(self, graph: Graph):
        self.G = graph

    def nearest_with_distance(self, q: GeoPoint) -> tuple[GeoPoint, float]:
        if not len(self.G):
            raise EmptyGraphError("cannot search an empty graph")
        # argmin would silently pick vertex 0 for a NaN query
        if not (math.isfinite(q.lat) and math.isfinite(q.lon)):
            raise ValueError(f"query {q} has non-finite coordinates")
        d =self.G.metric.distances(q, self.G.coords)
        i = int(np.argmin(d))
        return self.G.vertices[i], float(d[i])

    def nearest(self, q: GeoPoint) -> GeoPoint:
        return self.nearest_with_distance(q)[0]
