"""Tests for adjgraph.core.graph."""
import copy
import io

import pytest

from adjgraph.config import DisplayOptions
from adjgraph.core.graph import Graph


def _path_graph(n):
    """Helper: path 1-2-...-n with both arc directions."""
    pairs = []
    for v in range(1, n):
        pairs.append((v, v + 1))
        pairs.append((v + 1, v))
    g = Graph()
    g.build([f"v{i}" for i in range(1, n + 1)], pairs + [(0, 0)])
    return g


# --- build ---

def test_build_abc_scenario():
    g = Graph()
    g.build(["A", "B", "C"], [(1, 2), (2, 3), (0, 0)])
    assert g.size == 3
    assert g.adjacency() == [[1], [2], []]
    assert [g.payload(v) for v in (1, 2, 3)] == ["A", "B", "C"]


def test_build_stops_at_sentinel():
    g = Graph()
    g.build(["A", "B", "C"], [(1, 2), (0, 0), (2, 3)])
    assert g.adjacency() == [[1], [], []]


def test_build_without_sentinel_reads_to_end():
    g = Graph()
    g.build(["A", "B"], iter([(1, 2), (2, 1)]))
    assert g.edges() == [(1, 2), (2, 1)]


def test_build_short_payloads_stops_early():
    g = Graph()
    g.build(["A"], [(1, 2)], size=3)
    assert g.size == 3
    assert g.payload(1) == "A"
    assert g.payload(2) is None
    assert g.edges() == []


def test_build_malformed_pair_stops_stream():
    g = Graph()
    g.build(["A", "B", "C"], [(1, 2), (2,), (2, 3)])
    assert g.edges() == [(1, 2)]


def test_build_non_integer_pair_stops_stream():
    g = Graph()
    g.build(["A", "B", "C"], [(1, 2), ("x", 3), (2, 3)])
    assert g.edges() == [(1, 2)]


def test_build_clamps_to_capacity():
    g = Graph(capacity=2)
    g.build(["A", "B", "C"], [(1, 2), (2, 3)])
    assert g.size == 2
    assert g.edges() == [(1, 2)]


def test_build_replaces_previous_contents():
    g = _path_graph(4)
    g.build(["X"], [])
    assert g.size == 1
    assert g.edges() == []
    assert g.payload(1) == "X"


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        Graph(capacity=0)


# --- insert / remove ---

def test_insert_edge_idempotent():
    g = Graph()
    g.build(["A", "B", "C"], [])
    g.insert_edge(1, 3)
    g.insert_edge(1, 3)
    g.insert_edge(1, 3)
    assert g.neighbors(1) == [3]


def test_insert_edge_single_direction():
    g = Graph()
    g.build(["A", "B"], [])
    g.insert_edge(1, 2)
    assert g.has_edge(1, 2)
    assert not g.has_edge(2, 1)


def test_insert_edge_appends_in_order():
    g = Graph()
    g.build(["A", "B", "C", "D"], [])
    g.insert_edge(1, 4)
    g.insert_edge(1, 2)
    g.insert_edge(1, 3)
    assert g.neighbors(1) == [4, 2, 3]


@pytest.mark.parametrize("src,dst", [(0, 1), (1, 0), (-1, 2), (2, -3), (4, 1), (1, 4), (2, 2)])
def test_insert_edge_invalid_is_noop(src, dst):
    g = Graph()
    g.build(["A", "B", "C"], [(1, 2), (2, 3)])
    before = g.adjacency()
    g.insert_edge(src, dst)
    assert g.adjacency() == before


def test_insert_then_remove_restores_list():
    g = Graph()
    g.build(["A", "B", "C", "D"], [(1, 2), (1, 4)])
    before = g.adjacency()
    g.insert_edge(1, 3)
    g.remove_edge(1, 3)
    assert g.adjacency() == before


def test_remove_edge_keeps_order():
    g = Graph()
    g.build(["A", "B", "C", "D"], [(1, 2), (1, 3), (1, 4)])
    g.remove_edge(1, 3)
    assert g.neighbors(1) == [2, 4]


def test_remove_missing_edge_is_noop():
    g = Graph()
    g.build(["A", "B", "C"], [(1, 2)])
    g.remove_edge(1, 3)
    g.remove_edge(2, 1)
    g.remove_edge(5, 1)
    assert g.edges() == [(1, 2)]


def test_are_in_range():
    g = Graph()
    g.build(["A", "B", "C"], [])
    assert g.are_in_range(0, 2)
    assert not g.are_in_range(0, 3)
    assert not g.are_in_range(-1, 0)


def test_read_helpers_out_of_range():
    g = Graph()
    g.build(["A"], [])
    assert g.neighbors(2) == []
    assert g.payload(0) is None
    assert not g.has_edge(1, 2)
    g.set_payload(5, "Z")
    assert g.payload(1) == "A"


# --- copy / destroy ---

def test_copy_preserves_structure():
    g = _path_graph(4)
    h = g.copy()
    assert h.size == g.size
    assert h.capacity == g.capacity
    assert h.adjacency() == g.adjacency()
    assert [h.payload(v) for v in range(1, 5)] == [g.payload(v) for v in range(1, 5)]


def test_copy_isolation_both_ways():
    g = Graph()
    g.build([["a"], ["b"], ["c"]], [(1, 2), (2, 3)])
    h = g.copy()

    h.insert_edge(3, 1)
    h.remove_edge(1, 2)
    h.payload(1).append("mutated")
    assert g.edges() == [(1, 2), (2, 3)]
    assert g.payload(1) == ["a"]

    g.insert_edge(1, 3)
    g.set_payload(2, ["changed"])
    assert h.edges() == [(2, 3), (3, 1)]
    assert h.payload(2) == ["b"]


def test_copy_module_protocol():
    g = _path_graph(3)
    for h in (copy.copy(g), copy.deepcopy(g)):
        h.insert_edge(1, 3)
        assert not g.has_edge(1, 3)


def test_destroy_twice_is_safe():
    g = _path_graph(5)
    g.destroy()
    g.destroy()
    assert g.size == 0
    assert g.edges() == []
    assert g.enumerate_subgraphs(1) == []


def test_destroy_does_not_touch_copy():
    g = _path_graph(3)
    h = g.copy()
    g.destroy()
    assert h.size == 3
    assert h.edges() == [(1, 2), (2, 1), (2, 3), (3, 2)]


# --- display ---

def test_display_pair():
    g = _path_graph(3)
    out = io.StringIO()
    text = g.display(1, 3, out)
    assert text == "1\t3\n"
    assert out.getvalue() == text


def test_display_out_of_range():
    g = _path_graph(3)
    out = io.StringIO()
    g.display(1, 4, out)
    assert out.getvalue() == "DISPLAY ERROR: No path exists\n"


def test_display_defaults_to_stdout(capsys):
    g = _path_graph(2)
    g.display(2, 1)
    assert capsys.readouterr().out == "2\t1\n"


def test_display_all_rows():
    g = Graph()
    g.build(["Library", "Cafe", "Gym"], [])
    opts = DisplayOptions(header="H", indent="", sep=" ")
    text = g.display_all(io.StringIO(), options=opts)
    assert text.splitlines() == [
        "H",
        "Library", "1 2", "1 3",
        "Cafe", "2 1", "2 3",
        "Gym", "3 1", "3 2",
    ]


def test_display_all_empty_graph():
    out = io.StringIO()
    Graph().display_all(out)
    assert out.getvalue().count("\n") == 1
