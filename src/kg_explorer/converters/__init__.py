"""Graph format converters.

Converts the in-memory knowledge graph to formats like GraphML.
"""

from .graphml import graph_to_networkx, write_graphml

__all__ = ["graph_to_networkx", "write_graphml"]
