"""
Adjacency-list graph over vertices 0..size-1.

Vertices are addressed with 1-based ids by every public method; the
adjacency lists themselves store 0-based targets. Arcs are stored exactly
as inserted: insert_edge(a, b) does not add b -> a.

Mutators never raise on bad input. Out-of-range ids, self-loops and
duplicate arcs are ignored, and a malformed description stops build early.
"""
from __future__ import annotations

import copy as _copy
import sys
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple

from adjgraph.config import DEFAULT_DISPLAY, MAX_VERTICES, DisplayOptions
from adjgraph.core.subgraphs import count_connected_subgraphs, iter_connected_subgraphs


@dataclass
class Vertex:
    """A vertex payload and the ordered 0-based targets of its outgoing arcs."""

    data: Any = None
    edges: List[int] = field(default_factory=list)


class Graph:
    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = MAX_VERTICES
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.size = 0
        self._vertices: List[Vertex] = []

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        n_arcs = sum(len(v.edges) for v in self._vertices)
        return f"Graph(size={self.size}, arcs={n_arcs}, capacity={self.capacity})"

    # ------------------------------------------------------------------
    # Construction, copy, destruction
    # ------------------------------------------------------------------

    def build(
        self,
        payloads: Sequence[Any],
        edge_pairs: Iterable[Sequence[int]],
        *,
        size: Optional[int] = None,
    ) -> None:
        """
        Populate the graph from vertex payloads and a 1-based arc stream.

        size defaults to len(payloads) and is clamped to the capacity.
        The arc stream ends at a pair whose source is 0 (the (0, 0)
        sentinel), at end of stream, or at the first pair that is not two
        integers. If fewer payloads than size are given, the remaining
        vertices keep a None payload and no arcs are read.
        """
        self.destroy()

        if size is None:
            size = len(payloads)
        self.size = max(0, min(size, self.capacity))
        self._vertices = [Vertex() for _ in range(self.size)]

        for v in range(self.size):
            if v >= len(payloads):
                return
            self._vertices[v].data = payloads[v]

        for pair in edge_pairs:
            try:
                src, dest = pair
            except (TypeError, ValueError):
                return
            if not isinstance(src, int) or not isinstance(dest, int):
                return
            if src == 0:
                return
            self.insert_edge(src, dest)

    def copy(self) -> "Graph":
        """Deep copy: payloads and adjacency lists are duplicated, order preserved."""
        other = Graph(capacity=self.capacity)
        other.size = self.size
        other._vertices = [
            Vertex(data=_copy.deepcopy(v.data), edges=list(v.edges))
            for v in self._vertices
        ]
        return other

    def __copy__(self) -> "Graph":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Graph":
        return self.copy()

    def destroy(self) -> None:
        """Release every arc and payload. Safe to call repeatedly."""
        for v in self._vertices:
            v.edges.clear()
            v.data = None
        self._vertices = []
        self.size = 0

    # ------------------------------------------------------------------
    # Edge mutators
    # ------------------------------------------------------------------

    def are_in_range(self, source: int, destination: int) -> bool:
        """Both 0-based indices lie in [0, size)."""
        return 0 <= source < self.size and 0 <= destination < self.size

    def _arc_indices(self, source: int, destination: int) -> Optional[Tuple[int, int]]:
        u, v = source - 1, destination - 1
        if u == v or not self.are_in_range(u, v):
            return None
        return u, v

    def insert_edge(self, source: int, destination: int) -> None:
        """Append source -> destination unless it is a self-loop, out of range, or present."""
        arc = self._arc_indices(source, destination)
        if arc is None:
            return
        u, v = arc
        edges = self._vertices[u].edges
        if v not in edges:
            edges.append(v)

    def remove_edge(self, source: int, destination: int) -> None:
        """Remove source -> destination if present, keeping the order of the other arcs."""
        arc = self._arc_indices(source, destination)
        if arc is None:
            return
        u, v = arc
        edges = self._vertices[u].edges
        if v in edges:
            edges.remove(v)

    # ------------------------------------------------------------------
    # Read access (1-based)
    # ------------------------------------------------------------------

    def has_edge(self, source: int, destination: int) -> bool:
        arc = self._arc_indices(source, destination)
        if arc is None:
            return False
        u, v = arc
        return v in self._vertices[u].edges

    def neighbors(self, vertex: int) -> List[int]:
        u = vertex - 1
        if not self.are_in_range(u, u):
            return []
        return [v + 1 for v in self._vertices[u].edges]

    def edges(self) -> List[Tuple[int, int]]:
        """All stored arcs as 1-based (source, destination) pairs, in storage order."""
        return [
            (u + 1, v + 1)
            for u, vert in enumerate(self._vertices)
            for v in vert.edges
        ]

    def adjacency(self) -> List[List[int]]:
        """Snapshot of the 0-based adjacency lists."""
        return [list(v.edges) for v in self._vertices]

    def payload(self, vertex: int) -> Any:
        u = vertex - 1
        if not self.are_in_range(u, u):
            return None
        return self._vertices[u].data

    def set_payload(self, vertex: int, value: Any) -> None:
        u = vertex - 1
        if self.are_in_range(u, u):
            self._vertices[u].data = value

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def display(
        self,
        source: int,
        destination: int,
        out: Optional[TextIO] = None,
        *,
        options: DisplayOptions = DEFAULT_DISPLAY,
    ) -> str:
        """
        Echo a (source, destination) pair, or the display error if either
        id is out of range. No path is computed.
        """
        if not self.are_in_range(source - 1, destination - 1):
            text = options.error + "\n"
        else:
            text = f"{source}\t{destination}\n"
        (sys.stdout if out is None else out).write(text)
        return text

    def display_all(
        self,
        out: Optional[TextIO] = None,
        *,
        options: DisplayOptions = DEFAULT_DISPLAY,
    ) -> str:
        """Header, then each vertex payload followed by a row per other vertex."""
        lines = [options.header]
        for u in range(self.size):
            lines.append(str(self._vertices[u].data))
            for v in range(self.size):
                if v != u:
                    lines.append(f"{options.indent}{u + 1}{options.sep}{v + 1}")
        text = "\n".join(lines) + "\n"
        (sys.stdout if out is None else out).write(text)
        return text

    # ------------------------------------------------------------------
    # Subgraph enumeration
    # ------------------------------------------------------------------

    def _enumeration_adjacency(self, k: int) -> Optional[List[List[int]]]:
        if k <= 0 or k > self.size or k > self.capacity:
            return None
        return [v.edges for v in self._vertices]

    def iter_subgraphs(self, k: int) -> Iterator[List[int]]:
        """
        Stream connected induced subgraphs on exactly k vertices as 1-based
        id lists in discovery order. Each root only grows through
        higher-numbered vertices, so every vertex set appears once.
        """
        adj = self._enumeration_adjacency(k)
        if adj is None:
            return iter(())
        return iter_connected_subgraphs(adj, k)

    def enumerate_subgraphs(self, k: int) -> List[List[int]]:
        return list(self.iter_subgraphs(k))

    def count_subgraphs(self, k: int) -> int:
        adj = self._enumeration_adjacency(k)
        if adj is None:
            return 0
        return count_connected_subgraphs(adj, k)
