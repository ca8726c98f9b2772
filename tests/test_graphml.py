"""Tests for the GraphML converter."""

import networkx as nx

from kg_explorer.converters import graph_to_networkx, write_graphml
from kg_explorer.graph import KnowledgeGraph


def _graph():
    graph = KnowledgeGraph()
    graph.set_definition("Gravity", "A force")
    graph.add_example("Gravity", "Apples fall")
    graph.add_example("Gravity", "Tides")
    graph.add_related_concept("Gravity", "Thermodynamics")
    graph.add_subtopic("General", "Orbits")
    return graph


class TestGraphML:
    """Tests for graph_to_networkx and write_graphml."""

    def test_nodes_carry_attributes(self):
        G = graph_to_networkx(_graph())
        assert G.nodes["Gravity"]["definition"] == "A force"
        assert G.nodes["Gravity"]["examples"] == "Apples fall; Tides"
        assert G.nodes["General"]["definition"] == ""

    def test_edges_are_tagged(self):
        G = graph_to_networkx(_graph())
        assert G.edges["Gravity", "Thermodynamics"]["relation"] == "related_to"
        assert G.edges["General", "Orbits"]["relation"] == "subtopic"

    def test_forward_references_become_bare_nodes(self):
        G = graph_to_networkx(_graph())
        assert "Thermodynamics" in G
        assert "definition" not in G.nodes["Thermodynamics"]

    def test_write_graphml(self, tmp_path):
        path = tmp_path / "graph.graphml"
        G = write_graphml(_graph(), path)
        loaded = nx.read_graphml(str(path))
        assert loaded.number_of_nodes() == G.number_of_nodes() == 4
        assert loaded.number_of_edges() == 2
