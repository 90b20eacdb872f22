from typing import Protocol, runtime_checkable

import numpy as np

from geo_route.domain.entities.geography import GeoPoint


# ------------- Metrics --------------------
@runtime_checkable
class DistanceMetric(Protocol):
    """
    Responsibilities:
      • Distance between two points (edge weight, route length).
      • Vectorized distance from one point to many (nearest-point scan).
    Must be commutative and zero iff the coordinates are equal.
    """

    name: str

    def distance(self, a: GeoPoint, b: GeoPoint) -> float: ...
    def distances(self, q: GeoPoint, coords: np.ndarray) -> np.ndarray:
        """coords is a (n, 2) array of (lat, lon) rows; returns shape (n,)."""


# ------------- Search hooks --------------------
@runtime_checkable
class SearchHooks(Protocol):
    def graph_loaded(self, *, source, vertices, edges): ...
    def search_start(self, *, start, end, vertices): ...
    def search_end(self, *, start, end, settled, relaxed, hops, length, ms): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def graph_loaded(self, **_):
        pass

    def search_start(self, **_):
        pass

    def search_end(self, **_):
        pass

    def error(self, **_):
        pass
