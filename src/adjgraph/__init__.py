"""
adjgraph: a small adjacency-list graph with deep copy, pair display, and
enumeration of connected induced subgraphs of a fixed size.
"""

from .core.graph import Graph, Vertex
from .core.subgraphs import (
    count_connected_subgraphs,
    enumerate_connected_subgraphs,
    iter_connected_subgraphs,
)
from .io.description import (
    GraphDescription,
    parse_description,
    read_description,
    graph_from_description,
    load_graph,
)
from .io.convert import to_networkx, from_networkx
from .config import MAX_VERTICES, DisplayOptions

__all__ = [
    # Core
    "Graph",
    "Vertex",
    "count_connected_subgraphs",
    "enumerate_connected_subgraphs",
    "iter_connected_subgraphs",
    # IO
    "GraphDescription",
    "parse_description",
    "read_description",
    "graph_from_description",
    "load_graph",
    "to_networkx",
    "from_networkx",
    # Config
    "MAX_VERTICES",
    "DisplayOptions",
]
