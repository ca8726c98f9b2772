"""Convert the knowledge graph to GraphML.

Concepts become nodes carrying their definition and examples. Related
concepts and root subtopics become directed edges tagged with a
``relation`` attribute, so forward-referenced names appear as bare nodes.
"""

from __future__ import annotations

from pathlib import Path

import networkx as nx

from ..graph import KnowledgeGraph


def graph_to_networkx(graph: KnowledgeGraph) -> nx.DiGraph:
    """Convert a knowledge graph to a NetworkX DiGraph.

    Args:
        graph: Populated knowledge graph

    Returns:
        NetworkX directed graph
    """
    G = nx.DiGraph()

    for name, concept in graph.items():
        G.add_node(
            name,
            definition=concept.definition or "",
            examples="; ".join(sorted(concept.examples)),
        )

    for name, concept in graph.items():
        for related in sorted(concept.related_concepts):
            G.add_edge(name, related, relation="related_to")
        for subtopic in sorted(concept.subtopics):
            G.add_edge(name, subtopic, relation="subtopic")

    return G


def write_graphml(graph: KnowledgeGraph, output_path: Path | str) -> nx.DiGraph:
    """Convert ``graph`` and save it as a GraphML file.

    Args:
        graph: Populated knowledge graph
        output_path: Destination file

    Returns:
        The NetworkX graph that was written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    G = graph_to_networkx(graph)
    nx.write_graphml(G, str(output_path))
    return G


__all__ = ["graph_to_networkx", "write_graphml"]
