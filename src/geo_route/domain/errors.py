from geo_route.domain.entities.geography import GeoPoint


class GeoRouteError(Exception):
    """Base class for every typed failure raised by the routing core."""


class MalformedGraphError(GeoRouteError):
    def __init__(self, msg: str, *, line: int | None = None):
        super().__init__(msg if line is None else f"line {line}: {msg}")
        self.line = line


class EmptyGraphError(GeoRouteError):
    pass


class UnknownVertexError(GeoRouteError):
    def __init__(self, point: GeoPoint):
        super().__init__(f"{point} is not a vertex of the graph")
        self.point = point


class NoPathError(GeoRouteError):
    def __init__(self, start: GeoPoint, end: GeoPoint, reason: str = "no path"):
        super().__init__(f"{reason} between {start} and {end}")
        self.start, self.end, self.reason = start, end, reason


class PathReconstructionError(GeoRouteError):
    def __init__(self, start: GeoPoint, end: GeoPoint, at: GeoPoint):
        super().__init__(f"predecessor chain from {end} broke at {at} before reaching {start}")
        self.start, self.end, self.at = start, end, at
