from .description import (
    GraphDescription,
    parse_description,
    read_description,
    graph_from_description,
    load_graph,
)
from .convert import to_networkx, from_networkx

__all__ = [
    "GraphDescription",
    "parse_description",
    "read_description",
    "graph_from_description",
    "load_graph",
    "to_networkx",
    "from_networkx",
]
