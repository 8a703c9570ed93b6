from __future__ import annotations

import pytest

from pipegraph.config import reset_config
from pipegraph.graph.graph_builder import GraphBuilder
from pipegraph.graph.graph_store import Graph


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in (
        "PIPEGRAPH_TRAVERSAL_STRATEGY",
        "PIPEGRAPH_PIPELINE_COMPACT_EXPANDED",
        "PIPEGRAPH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    reset_config()
    yield
    reset_config()


@pytest.fixture()
def family() -> Graph:
    """
    Three generations joined by "child" edges, plus one "spouse" edge:

        grandpa
        |      \\
        dad     uncle
        |   \\       \\
        me   sister   cousin
    """
    builder = GraphBuilder()
    builder.add_nodes(
        [
            ("grandpa", {"name": "Grandpa", "type": "person", "age": 80}),
            ("dad", {"name": "Dad", "type": "person", "age": 50}),
            ("uncle", {"name": "Uncle", "type": "person", "age": 47}),
            ("mum", {"name": "Mum", "type": "person", "age": 49}),
            ("me", {"name": "Me", "type": "person", "age": 20}),
            ("sister", {"name": "Sister", "type": "person", "age": 17}),
            ("cousin", {"name": "Cousin", "type": "person", "age": 15}),
        ]
    )
    builder.add_edges(
        [
            ("grandpa", "dad", "child"),
            ("grandpa", "uncle", "child"),
            ("dad", "me", "child"),
            ("dad", "sister", "child"),
            ("uncle", "cousin", "child"),
            ("mum", "me", "child"),
            ("mum", "sister", "child"),
            ("dad", "mum", "spouse"),
        ]
    )
    return builder.graph


@pytest.fixture()
def make_graph():
    """Builds a graph from (from, to) key pairs, all with the same label."""

    def _make(pairs, label=None) -> Graph:
        builder = GraphBuilder()
        builder.add_nodes(dict.fromkeys(key for pair in pairs for key in pair))
        builder.add_edges([(a, b, label) for a, b in pairs])
        return builder.graph

    return _make
