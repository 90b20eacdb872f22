from geo_route.domain.entities.geography import GeoPoint
from geo_route.domain.entities.graph import Graph


class ReachabilityChecker:
    def __init__(self, graph: Graph):
        self.G = graph

    def connected(self, p1: GeoPoint, p2: GeoPoint) -> bool:
        self.G.require(p1, p2)
        if p1 == p2:
            return True
        stack, seen = [p1], {p1}
        while stack:
            p = stack.pop()
            for n in self.G.neighbors(p):
                if n in seen:
                    continue
                if n == p2:
                    return True
                seen.add(n)
                stack.append(n)
        return False

    def component(self, p: GeoPoint) -> frozenset[GeoPoint]:
        """Every vertex reachable from p, p included."""
        self.G.require(p)
        stack, seen = [p], {p}
        while stack:
            for n in self.G.neighbors(stack.pop()):
                if n not in seen:
                    seen.add(n)
                    stack.append(n)
        return frozenset(seen)
