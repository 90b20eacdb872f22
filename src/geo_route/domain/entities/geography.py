import math
from dataclasses import dataclass


# Core coordinate types shared by the graph and the routing components
@dataclass(frozen=True)
class GeoPoint:
    lat: float  # decimal degrees
    lon: float

    def distance(self, other: "GeoPoint") -> float:
        """Planar distance in degrees; see routing_metrics for great-circle."""
        return math.hypot(other.lat - self.lat, other.lon - self.lon)

    def __str__(self) -> str:
        return f"({self.lat}, {self.lon})"


@dataclass(frozen=True)
class VertexRecord:
    name: str
    lat: float
    lon: float

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lon)


@dataclass(frozen=True)
class EdgeRecord:
    a: int  # positions in the vertex list
    b: int


Path = list[GeoPoint]


@dataclass
class RoutePlan:
    query_start: GeoPoint
    query_end: GeoPoint
    start: GeoPoint  # nearest graph vertices
    end: GeoPoint
    path: Path
    length: float

    @property
    def hops(self) -> int:
        return max(0, len(self.path) - 1)
