from __future__ import annotations

from typing import Iterable, Optional

import networkx as nx
import matplotlib.pyplot as plt

from adjgraph.core.graph import Graph
from adjgraph.io.convert import to_networkx


def base_layout(G: nx.Graph, seed: int = 7):
    """
    planar_layout if G is planar, otherwise spring_layout.
    """
    U = G.to_undirected(as_view=True) if G.is_directed() else G
    is_planar, _ = nx.check_planarity(U)
    if is_planar:
        return nx.planar_layout(U)
    return nx.spring_layout(G, seed=seed, iterations=300)


def draw_graph(
    graph: Graph,
    *,
    highlight: Optional[Iterable[int]] = None,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 1.2,
    with_payloads: bool = False,
    save_path: Optional[str] = None,
):
    """
    Draw the graph; vertices listed in *highlight* (1-based ids, e.g. one
    enumerated subgraph) and the arcs among them are coloured.

    If save_path is set the figure is written there and closed, otherwise
    it is shown. Returns the figure.
    """
    G = to_networkx(graph)
    order = list(highlight or ())
    marked = set(order)

    fig, ax = plt.subplots(figsize=(7, 7))
    ax.set_axis_off()
    title = f"|V|={G.number_of_nodes()}  arcs={G.number_of_edges()}"
    if marked:
        title += "  subgraph: " + " ".join(str(v) for v in order)
    ax.set_title(title)

    if G.number_of_nodes() > 0:
        pos = base_layout(G, seed=seed)
        node_color = ["tab:orange" if v in marked else "tab:blue" for v in G.nodes()]
        edge_color = [
            "tab:orange" if u in marked and v in marked else "0.6"
            for u, v in G.edges()
        ]
        labels = None
        if with_payloads:
            labels = {v: f"{v}: {d}" for v, d in G.nodes(data="data")}
        nx.draw_networkx(
            G,
            pos=pos,
            ax=ax,
            labels=labels,
            node_color=node_color,
            edge_color=edge_color,
            node_size=node_size,
            width=edge_width,
            arrows=True,
        )

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
