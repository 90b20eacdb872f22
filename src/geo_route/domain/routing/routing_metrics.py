import math
from collections.abc import Sequence

import numpy as np

from geo_route.app.protocols import DistanceMetric
from geo_route.domain.entities.geography import GeoPoint

EARTH_RADIUS = {"mi": 3958.8, "km": 6371.0}


class PlanarMetric(DistanceMetric):
    name = "planar"

    def distance(self, a, b):
        return math.hypot(b.lat - a.lat, b.lon - a.lon)

    def distances(self, q, coords):
        return np.hypot(coords[:, 0] - q.lat, coords[:, 1] - q.lon)


class HaversineMetric(DistanceMetric):
    name = "haversine"

    def __init__(self, unit: str = "mi"):
        try:
            self.radius = EARTH_RADIUS[unit]
        except KeyError:
            raise ValueError(f"Unknown distance unit {unit!r}")
        self.unit = unit

    def distance(self, a, b):
        if a == b:
            return 0.0
        lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
        dlat = lat2 - lat1
        dlon = math.radians(b.lon - a.lon)
        h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        return 2 * self.radius * math.asin(min(1.0, math.sqrt(h)))

    def distances(self, q, coords):
        lat1 = math.radians(q.lat)
        lat2 = np.radians(coords[:, 0])
        dlat = lat2 - lat1
        dlon = np.radians(coords[:, 1] - q.lon)
        h = np.sin(dlat / 2) ** 2 + math.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
        return 2 * self.radius * np.arcsin(np.minimum(1.0, np.sqrt(h)))


PLANAR = PlanarMetric()


def route_length(path: Sequence[GeoPoint], metric: DistanceMetric | None = None) -> float:
    """Sum of consecutive pairwise distances; 0.0 for empty or one-point paths."""
    m = metric or PLANAR
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += m.distance(a, b)
    return total
