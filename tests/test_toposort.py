import io
import sys

import pytest

from tallerdatos.toposort import is_tree, load_graph, main, topological_sort


def test_load_graph_maps_letters():
    assert load_graph(["3", "2", "A", "B", "B", "C"]) == (3, [(0, 1), (1, 2)])


def test_load_graph_accepts_joined_letters():
    assert load_graph(["3", "2", "AB", "BC"]) == load_graph(["3", "2", "A", "B", "B", "C"])


def test_load_graph_unknown_vertex():
    with pytest.raises(ValueError):
        load_graph(["3", "1", "A", "?"])


def test_load_graph_vertex_outside_graph():
    with pytest.raises(ValueError):
        load_graph(["2", "1", "A", "D"])


def test_load_graph_missing_edges():
    with pytest.raises(ValueError):
        load_graph(["3", "2", "A", "B"])


@pytest.mark.parametrize("count", ["0", "703"])
def test_load_graph_vertex_count_out_of_range(count):
    with pytest.raises(ValueError):
        load_graph([count, "0"])


def test_sort_respects_every_edge():
    edges = [(0, 3), (1, 3), (3, 2), (4, 2), (0, 4)]
    order = topological_sort(5, edges)
    assert sorted(order) == list(range(5))
    position = {vertex: i for i, vertex in enumerate(order)}
    assert all(position[s] < position[t] for s, t in edges)


def test_sort_without_edges_keeps_vertex_order():
    assert topological_sort(4, []) == [0, 1, 2, 3]


def test_sort_detects_cycle():
    with pytest.raises(ValueError):
        topological_sort(3, [(0, 1), (1, 2), (2, 0)])


def test_sort_rejects_edge_outside_graph():
    with pytest.raises(ValueError):
        topological_sort(2, [(0, 5)])


def test_is_tree_false_when_a_vertex_has_no_incoming_edge():
    assert is_tree(3, [(0, 1), (1, 2)]) is False


def test_is_tree_true_when_every_vertex_has_incoming_edge():
    assert is_tree(3, [(0, 1), (1, 2), (2, 0)]) is True


def test_main_prints_check_and_order(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3 2\nA B\nB C\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "false\nA B C \n"


def test_main_prints_only_check_for_cycle(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2 2\nA B\nB A\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "true\n"


def test_main_silent_for_out_of_range_count(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == ""