from .graph import Graph, Vertex
from .subgraphs import (
    count_connected_subgraphs,
    enumerate_connected_subgraphs,
    iter_connected_subgraphs,
)

__all__ = [
    "Graph",
    "Vertex",
    "count_connected_subgraphs",
    "enumerate_connected_subgraphs",
    "iter_connected_subgraphs",
]
