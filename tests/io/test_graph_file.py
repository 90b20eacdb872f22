# tests/io/test_graph_file.py
import pytest

from geo_route.domain.entities.geography import GeoPoint
from geo_route.domain.entities.graph import build_graph
from geo_route.domain.errors import MalformedGraphError
from geo_route.domain.routing.routing_metrics import HaversineMetric
from geo_route.io.graph_file import dump_graph, load_graph, parse_graph

DIAMOND = """\
4 4
A 0 0
B 0 1
C 0 2
D 1 1
0 1
1 2
1 3
3 2
"""


def test_parse_literal_graph():
    g = parse_graph(DIAMOND.splitlines())
    assert g.vertex_count == 4 and g.edge_count == 4
    assert g.name_of(GeoPoint(1.0, 1.0)) == "D"
    assert set(g.neighbors(GeoPoint(0.0, 1.0))) == {GeoPoint(0.0, 0.0), GeoPoint(0.0, 2.0), GeoPoint(1.0, 1.0)}


def test_blank_lines_and_extra_whitespace_are_ignored():
    text = "\n2  1\n\nx\t35.5 -78.25\n  y 36 -79  \n0 1\n\n\n"
    g = parse_graph(text.splitlines())
    assert g.vertices == (GeoPoint(35.5, -78.25), GeoPoint(36.0, -79.0))
    assert g.edge_count == 1


def test_load_graph_from_file_with_metric(tmp_path):
    f = tmp_path / "tiny.graph"
    f.write_text(DIAMOND, encoding="utf-8")
    hav = HaversineMetric("km")
    g = load_graph(f, metric=hav)
    assert g.metric is hav
    assert len(g) == 4


def test_load_graph_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "nope.graph")


def test_dump_then_parse_keeps_structure():
    g = parse_graph(DIAMOND.splitlines())
    text = dump_graph(g)
    assert text.splitlines()[0] == "4 4"
    assert "D 1.0 1.0" in text.splitlines()
    g2 = parse_graph(text.splitlines())
    assert g2.vertices == g.vertices
    assert {p: set(ns) for p, ns in g2.adjacency.items()} == {p: set(ns) for p, ns in g.adjacency.items()}


@pytest.mark.parametrize("name", ["New York", "", "tab\tname", " padded"])
def test_dump_rejects_names_the_format_cannot_hold(name):
    g = build_graph([(name, 40.7, -74.0), ("b", 0, 1)], [(0, 1)])
    with pytest.raises(MalformedGraphError, match="vertex 0: name"):
        dump_graph(g)


def test_dump_output_always_parses():
    g = build_graph([("New_York", 40.7, -74.0), ("b", 0, 1)], [(0, 1)])
    g2 = parse_graph(dump_graph(g).splitlines())
    assert g2.name_of(GeoPoint(40.7, -74.0)) == "New_York"
    assert g2.edge_count == 1


@pytest.mark.parametrize(
    "text, line, match",
    [
        ("2\n", 1, "expected 2 fields"),
        ("x 1\n", 1, "not an integer"),
        ("-1 0\n", 1, "negative"),
        ("1 0\nA 0\n", 2, "expected 3 fields"),
        ("1 0\nA north 0\n", 2, "latitude"),
        ("1 0\nA 0 west\n", 2, "longitude"),
        ("2 1\nA 0 0\nB 0 1\n0 1 2\n", 4, "expected 2 fields"),
        ("2 1\nA 0 0\nB 0 1\n0 b\n", 4, "not an integer"),
        ("2 1\nA 0 0\nB 0 1\n0 2\n", 4, "out of range"),
        ("2 1\nA 0 0\nB 0 1\n-1 0\n", 4, "out of range"),
        ("1 0\nA 0 0\n0 0\n", 3, "unexpected data"),
    ],
)
def test_malformed_lines_report_line_numbers(text, line, match):
    with pytest.raises(MalformedGraphError, match=match) as ei:
        parse_graph(text.splitlines())
    assert ei.value.line == line


@pytest.mark.parametrize("text", ["", "2 0\nA 0 0\n", "1 1\nA 0 0\n"])
def test_truncated_input_is_malformed(text):
    with pytest.raises(MalformedGraphError, match="unexpected end of input"):
        parse_graph(text.splitlines())
