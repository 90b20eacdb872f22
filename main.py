# main.py
import argparse
import sys
import time

from geo_route.app.build import build
from geo_route.domain.entities.geography import GeoPoint
from geo_route.domain.errors import GeoRouteError


def run(graph_file: str, start: GeoPoint, end: GeoPoint, *, metric: str = "haversine", level: str = "WARNING") -> int:
    try:
        app = build(
            {
                "graph": {"file": graph_file},
                "metric": {"kind": metric},
                "log": {"level": level},
            }
        )
        t0 = time.perf_counter()
        plan = app.navigator.plan(start, end)
        ms = (time.perf_counter() - t0) * 1000
    except (GeoRouteError, FileNotFoundError) as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    g = app.graph
    print(f"Nearest point to {start} is {g.name_of(plan.start)} {plan.start}.")
    print(f"Nearest point to {end} is {g.name_of(plan.end)} {plan.end}.")
    unit = getattr(g.metric, "unit", "deg")
    print(f"The route distance between them is {plan.length:.3f} {unit} over {plan.hops} edges")
    print(f"Total time = {ms:.3f} ms")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Shortest route between two coordinates on a .graph file")
    ap.add_argument("graph")
    ap.add_argument("start_lat", type=float)
    ap.add_argument("start_lon", type=float)
    ap.add_argument("end_lat", type=float)
    ap.add_argument("end_lon", type=float)
    ap.add_argument("--metric", choices=["haversine", "planar"], default="haversine")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    return run(
        args.graph,
        GeoPoint(args.start_lat, args.start_lon),
        GeoPoint(args.end_lat, args.end_lon),
        metric=args.metric,
        level=args.log_level,
    )


if __name__ == "__main__":
    sys.exit(main())
