import networkx as nx
import pytest

from pipegraph.errors import (
    DuplicateEdgeError,
    DuplicateNodeError,
    InvalidEdgeFilterError,
    InvalidPropertiesError,
    NoSuchNodeError,
)
from pipegraph.graph import Edge, Graph, GraphBuilder, Node


def test_add_and_fetch_node_by_key():
    graph = Graph()
    node = graph.add(Node("a", {"name": "A"}))

    assert graph.node("a") is node
    assert graph.node("missing") is None
    assert node in graph
    assert len(graph) == 1
    assert graph.nodes() == [node]


def test_adding_a_duplicate_key_raises():
    graph = Graph()
    graph.add(Node("a"))

    with pytest.raises(DuplicateNodeError) as excinfo:
        graph.add(Node("a"))

    assert excinfo.value.key == "a"
    assert "'a'" in str(excinfo.value)
    assert len(graph) == 1


def test_delete_cascades_to_incident_edges(family):
    dad = family.node("dad")
    grandpa = family.node("grandpa")
    me = family.node("me")
    mum = family.node("mum")

    family.delete(dad)

    assert dad not in family
    assert family.node("dad") is None
    assert dad not in family.nodes()
    assert list(grandpa.nodes("out")) == [family.node("uncle")]
    assert list(me.nodes("in")) == [mum]
    assert list(mum.edges("in")) == []
    assert all(dad not in (edge.from_node, edge.to) for edge in family.edges())


def test_deleting_an_unknown_node_raises(family):
    with pytest.raises(NoSuchNodeError):
        family.delete(Node("stranger"))

    # Same key, different node.
    with pytest.raises(NoSuchNodeError):
        family.delete(Node("dad"))

    assert family.node("dad") is not None


def test_similar_edges_are_rejected_but_other_labels_are_kept():
    a, b = Node("a"), Node("b")

    first = a.connect_to(b, "x")

    with pytest.raises(DuplicateEdgeError):
        a.connect_to(b, "x")

    second = a.connect_to(b, "y")

    assert list(a.edges("out")) == [first, second]
    assert list(b.edges("in")) == [first, second]


def test_failed_connect_leaves_both_nodes_unchanged():
    a, b = Node("a"), Node("b")
    a.connect_to(b)

    with pytest.raises(DuplicateEdgeError):
        a.connect_to(b)

    assert len(list(a.edges("out"))) == 1
    assert len(list(b.edges("in"))) == 1


def test_connect_rolls_back_when_only_the_target_conflicts():
    a, b = Node("a"), Node("b")
    b.connect_via(Edge(a, b))

    with pytest.raises(DuplicateEdgeError):
        a.connect_to(b)

    assert list(a.edges("out")) == []
    assert len(list(b.edges("in"))) == 1


def test_connect_via_same_edge_twice_changes_nothing():
    a, b = Node("a"), Node("b")
    edge = Edge(a, b, "x")

    assert a.connect_via(edge) is edge
    a.connect_via(edge)

    assert list(a.edges("out")) == [edge]
    assert list(a.edges("in")) == []


def test_disconnect_via_is_idempotent():
    a, b = Node("a"), Node("b")
    edge = a.connect_to(b)

    b.disconnect_via(edge)
    b.disconnect_via(edge)

    assert list(b.edges("in")) == []
    assert list(a.edges("out")) == [edge]


def test_edge_similarity():
    a, b, c = Node("a"), Node("b"), Node("c")

    assert Edge(a, b, "x").similar(Edge(a, b, "x"))
    assert not Edge(a, b, "x").similar(Edge(a, b, "y"))
    assert not Edge(a, b, "x").similar(Edge(a, c, "x"))
    assert not Edge(a, b, "x").similar(Edge(b, a, "x"))
    assert not Edge(a, b).similar(None)


def test_edge_nodes_and_aliases():
    a, b = Node("a"), Node("b")
    edge = a.connect_to(b, "child", {"since": 2001})

    assert edge.parent is a and edge.child is b
    assert edge.nodes("out") is b
    assert edge.nodes("in") is a
    assert edge.get("since") == 2001
    assert str(edge) == "'a' -'child'-> 'b'"


def test_loop_edge_sits_in_both_sets():
    a = Node("a")
    edge = a.connect_to(a, "self")

    assert list(a.edges("in")) == [edge]
    assert list(a.edges("out")) == [edge]

    a.disconnect_from(a)

    assert list(a.edges("in")) == []
    assert list(a.edges("out")) == []


def test_edges_filtered_by_label(family):
    dad = family.node("dad")

    assert [edge.to.key for edge in dad.edges("out", "child")] == ["me", "sister"]
    assert [edge.to.key for edge in dad.edges("out", "spouse")] == ["mum"]
    assert [node.key for node in dad.nodes("out")] == ["me", "sister", "mum"]


def test_edges_filtered_by_predicate(family):
    dad = family.node("dad")

    young = dad.edges("out", predicate=lambda edge: edge.to.get("age") < 18)

    assert [edge.to.key for edge in young] == ["sister"]
    spouses = dad.out_edges(predicate=lambda edge: edge.label == "spouse")
    parents = family.node("me").in_edges(predicate=lambda edge: True)

    assert [edge.to.key for edge in spouses] == ["mum"]
    assert [edge.from_node.key for edge in parents] == ["dad", "mum"]


def test_label_and_predicate_together_are_rejected(family):
    dad = family.node("dad")

    with pytest.raises(InvalidEdgeFilterError):
        dad.edges("out", "child", lambda edge: True)

    with pytest.raises(InvalidEdgeFilterError):
        dad.out_edges("child", lambda edge: True).to_list()


def test_disconnect_from_removes_matching_edges_only(family):
    dad = family.node("dad")
    me = family.node("me")

    dad.disconnect_from(me, "spouse")
    assert me in list(dad.nodes("out"))

    dad.disconnect_from(me)
    assert me not in list(dad.nodes("out"))
    assert dad not in list(me.nodes("in"))

    # Nothing left to remove.
    dad.disconnect_from(me)


def test_node_queries_return_pipelines(family):
    dad = family.node("dad")
    me = family.node("me")

    assert [node.key for node in dad.out("child")] == ["me", "sister"]
    assert [node.key for node in me.in_()] == ["dad", "mum"]
    assert [edge.label for edge in dad.out_edges()] == ["child", "child", "spouse"]
    assert [edge.from_node.key for edge in me.in_edges("child")] == ["dad", "mum"]
    assert [node.key for node in me.ancestors("child")] == ["dad", "mum", "grandpa"]
    assert [node.key for node in family.node("grandpa").descendants("child")] == [
        "dad",
        "uncle",
        "me",
        "sister",
        "cousin",
    ]


def test_properties_bag():
    node = Node("a")

    assert node.properties == {}
    assert node.get("missing") is None
    assert node.set("name", "A") == "A"
    assert node.get("name") == "A"

    node.properties = None
    assert node.properties == {}

    with pytest.raises(InvalidPropertiesError):
        node.properties = ["not", "a", "dict"]


def test_builder_rejects_unknown_endpoints():
    builder = GraphBuilder()
    builder.add_nodes(["a"])

    with pytest.raises(KeyError):
        builder.add_edges([("a", "b")])


def test_to_networkx_projects_permitted_edges(family):
    digraph = family.to_networkx(lambda edge: edge.label == "child")

    assert isinstance(digraph, nx.DiGraph)
    assert digraph.number_of_nodes() == len(family)
    assert digraph.number_of_edges() == 7
    assert not digraph.has_edge(family.node("dad"), family.node("mum"))
    assert family.to_networkx().number_of_edges() == 8


def test_builder_accepts_tuple_keys():
    builder = GraphBuilder()
    plain, with_props = builder.add_nodes([("a", 1), (("b", 2), {"name": "B"})])
    builder.add_edges([(("a", 1), ("b", 2), "next")])

    assert builder.graph.node(("a", 1)) is plain
    assert with_props.get("name") == "B"
    assert [node.key for node in plain.nodes("out")] == [("b", 2)]
