import pytest

from pipegraph.graph import Node
from pipegraph.traversal import BreadthFirst, DepthFirst, Traversal

TREE = [("a", "b"), ("a", "c"), ("b", "d"), ("c", "e"), ("c", "f")]


def keys(items):
    return [item.key for item in items]


def test_breadth_first_order(make_graph):
    graph = make_graph(TREE)

    assert keys(BreadthFirst(graph.node("a"), "out")) == ["b", "c", "d", "e", "f"]


def test_depth_first_order(make_graph):
    graph = make_graph(TREE)

    assert keys(DepthFirst(graph.node("a"), "out")) == ["b", "d", "c", "e", "f"]


@pytest.mark.parametrize("strategy", [BreadthFirst, DepthFirst])
def test_cycles_terminate_and_visit_each_node_once(make_graph, strategy):
    graph = make_graph([("a", "b"), ("b", "c"), ("c", "a")])

    visited = keys(strategy(graph.node("a"), "out"))

    assert sorted(visited) == ["b", "c"]


@pytest.mark.parametrize("strategy", [BreadthFirst, DepthFirst])
def test_diamond_visits_shared_descendant_once(make_graph, strategy):
    graph = make_graph([("a", "b"), ("b", "d"), ("a", "c"), ("c", "d")])

    visited = keys(strategy(graph.node("a"), "out"))

    assert visited.count("d") == 1
    assert sorted(visited) == ["b", "c", "d"]


def test_start_is_never_emitted(make_graph):
    graph = make_graph([("a", "b"), ("b", "a")])

    assert keys(BreadthFirst(graph.node("a"), "out")) == ["b"]


def test_label_restricts_walk(family):
    walk = BreadthFirst(family.node("dad"), "out", "spouse")

    assert keys(walk) == ["mum"]


def test_in_direction(family):
    assert keys(DepthFirst(family.node("cousin"), "in")) == ["uncle", "grandpa"]


def test_edge_walk_with_fetcher(make_graph):
    graph = make_graph(TREE)

    edges = list(BreadthFirst(graph.node("a"), "out_edges", fetcher="out"))

    assert [(edge.from_node.key, edge.to.key) for edge in edges] == TREE


def test_callable_adjacency():
    a, b, c = Node("a"), Node("b"), Node("c")
    a.connect_to(b)
    b.connect_to(c)

    walk = BreadthFirst(a, lambda item, label: item.nodes("out"))

    assert keys(walk) == ["b", "c"]


def test_iterating_again_starts_over(make_graph):
    graph = make_graph(TREE)
    walk = BreadthFirst(graph.node("a"), "out")

    assert next(walk).key == "b"
    assert keys(walk) == ["b", "c", "d", "e", "f"]
    assert keys(walk) == ["b", "c", "d", "e", "f"]


def test_unknown_adjacency_raises():
    with pytest.raises(ValueError):
        BreadthFirst(Node("a"), "sideways")


def test_base_traversal_requires_a_visit_order():
    walk = Traversal(Node("a"), "out")

    with pytest.raises(NotImplementedError):
        next(walk)
