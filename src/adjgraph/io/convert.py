from __future__ import annotations

from typing import Optional

import networkx as nx

from adjgraph.core.graph import Graph


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Export as a DiGraph on nodes 1..size.

    Every stored arc becomes one directed edge; payloads go to the
    'data' node attribute.
    """
    G = nx.DiGraph()
    for v in range(1, len(graph) + 1):
        G.add_node(v, data=graph.payload(v))
    G.add_edges_from(graph.edges())
    return G


def from_networkx(G: nx.Graph, *, capacity: Optional[int] = None) -> Graph:
    """
    Build a Graph from a NetworkX graph.

    Nodes are numbered 1..n in G's iteration order. An undirected G
    contributes both arc directions per edge, a DiGraph only the stored
    direction. Payloads come from the 'data' node attribute, falling back
    to str(node). Self-loops are dropped.
    """
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.DiGraph(G) if G.is_directed() else nx.Graph(G)

    index = {node: i + 1 for i, node in enumerate(G.nodes())}
    payloads = [attrs.get("data", str(node)) for node, attrs in G.nodes(data=True)]

    pairs = []
    for u, v in G.edges():
        pairs.append((index[u], index[v]))
        if not G.is_directed():
            pairs.append((index[v], index[u]))

    g = Graph(capacity=capacity)
    g.build(payloads, pairs)
    return g
