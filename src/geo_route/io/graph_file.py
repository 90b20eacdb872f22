# io/graph_file.py
"""
Reader/writer for the whitespace-separated .graph format:

    <vertexCount> <edgeCount>
    <name> <latitude> <longitude>      (vertexCount lines, 0-indexed)
    <indexA> <indexB>                  (edgeCount lines)

Every parse failure is raised as MalformedGraphError with its 1-based line number.
"""

import os
from collections.abc import Iterable, Iterator

from geo_route.app.protocols import DistanceMetric
from geo_route.domain.entities.geography import EdgeRecord, VertexRecord
from geo_route.domain.entities.graph import Graph, build_graph
from geo_route.domain.errors import MalformedGraphError


def _fields(lines: Iterator[tuple[int, str]], n: int, what: str) -> tuple[int, list[str]]:
    try:
        lineno, raw = next(lines)
    except StopIteration:
        raise MalformedGraphError(f"unexpected end of input, expected {what}") from None
    parts = raw.split()
    if len(parts) != n:
        raise MalformedGraphError(f"expected {n} fields for {what}, got {len(parts)}", line=lineno)
    return lineno, parts


def _int(tok: str, lineno: int, what: str) -> int:
    try:
        return int(tok)
    except ValueError:
        raise MalformedGraphError(f"{what} {tok!r} is not an integer", line=lineno) from None


def _float(tok: str, lineno: int, what: str) -> float:
    try:
        return float(tok)
    except ValueError:
        raise MalformedGraphError(f"{what} {tok!r} is not a number", line=lineno) from None


def parse_graph(lines: Iterable[str], metric: DistanceMetric | None = None) -> Graph:
    numbered = ((i, s) for i, s in enumerate(lines, start=1) if s.strip())

    lineno, (v_tok, e_tok) = _fields(numbered, 2, "header")
    n_vertices = _int(v_tok, lineno, "vertex count")
    n_edges = _int(e_tok, lineno, "edge count")
    if n_vertices < 0 or n_edges < 0:
        raise MalformedGraphError("negative vertex or edge count", line=lineno)

    vertices: list[VertexRecord] = []
    for _ in range(n_vertices):
        lineno, (name, lat, lon) = _fields(numbered, 3, "vertex")
        vertices.append(
            VertexRecord(name, _float(lat, lineno, "latitude"), _float(lon, lineno, "longitude"))
        )

    edges: list[EdgeRecord] = []
    for _ in range(n_edges):
        lineno, (a, b) = _fields(numbered, 2, "edge")
        rec = EdgeRecord(_int(a, lineno, "index"), _int(b, lineno, "index"))
        for i in (rec.a, rec.b):
            if not 0 <= i < n_vertices:
                raise MalformedGraphError(f"index {i} out of range [0, {n_vertices})", line=lineno)
        edges.append(rec)

    extra = next(numbered, None)
    if extra is not None:
        raise MalformedGraphError("unexpected data after the declared edges", line=extra[0])

    return build_graph(vertices, edges, metric)


def load_graph(path: str | os.PathLike, metric: DistanceMetric | None = None) -> Graph:
    with open(path, encoding="utf-8") as f:
        return parse_graph(f, metric)


def dump_graph(graph: Graph) -> str:
    """
    Serialize back to .graph text; each undirected edge is written once.
    Names must be a single non-empty token, otherwise MalformedGraphError.
    """
    out = [f"{graph.vertex_count} {graph.edge_count}"]
    for p in graph.vertices:
        name = graph.name_of(p)
        if len(name.split()) != 1 or name != name.strip():
            raise MalformedGraphError(
                f"vertex {graph.position(p)}: name {name!r} is not a single whitespace-free token"
            )
        out.append(f"{name} {p.lat!r} {p.lon!r}")
    for p in graph.vertices:
        i = graph.position(p)
        for n in graph.neighbors(p):
            j = graph.position(n)
            if i <= j:
                out.append(f"{i} {j}")
    return "\n".join(out) + "\n"
