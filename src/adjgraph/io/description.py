from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from adjgraph.core.graph import Graph


@dataclass(frozen=True)
class GraphDescription:
    """
    Tokenized graph description.

    size:       declared vertex count (first line)
    payloads:   one free-text line per vertex, possibly fewer than size
                if the input was truncated
    edge_pairs: 1-based (from, to) pairs, sentinel excluded
    """

    size: int
    payloads: Tuple[str, ...]
    edge_pairs: Tuple[Tuple[int, int], ...]


EMPTY_DESCRIPTION = GraphDescription(size=0, payloads=(), edge_pairs=())


def _parse_pairs(tokens: List[str]) -> List[Tuple[int, int]]:
    pairs: List[Tuple[int, int]] = []
    for i in range(0, len(tokens) - 1, 2):
        try:
            src, dest = int(tokens[i]), int(tokens[i + 1])
        except ValueError:
            break
        if src == 0:
            break
        pairs.append((src, dest))
    return pairs


def parse_description(text: str) -> GraphDescription:
    """
    Parse the text description format:

      n
      <payload line 1>
      ...
      <payload line n>
      from to
      ...
      0 0

    Parsing is forgiving: a missing or non-integer count gives an empty
    description, a short payload section keeps what is there, and the
    arc stream ends at the sentinel, at end of input, at a dangling
    token, or at the first non-integer token.
    """
    lines = text.splitlines()
    if not lines:
        return EMPTY_DESCRIPTION
    head = lines[0].split()
    try:
        n = int(head[0]) if head else 0
    except ValueError:
        return EMPTY_DESCRIPTION
    n = max(0, n)

    payloads = tuple(line.rstrip("\r\n") for line in lines[1 : n + 1])
    if len(payloads) < n:
        return GraphDescription(size=n, payloads=payloads, edge_pairs=())

    tokens = " ".join(lines[n + 1 :]).split()
    return GraphDescription(size=n, payloads=payloads, edge_pairs=tuple(_parse_pairs(tokens)))


def read_description(path: Union[str, Path]) -> GraphDescription:
    return parse_description(Path(path).read_text(encoding="utf-8"))


def graph_from_description(desc: GraphDescription, *, capacity: Optional[int] = None) -> Graph:
    g = Graph(capacity=capacity)
    g.build(desc.payloads, desc.edge_pairs, size=desc.size)
    return g


def load_graph(path: Union[str, Path], *, capacity: Optional[int] = None) -> Graph:
    """Read a description file and build a Graph from it."""
    return graph_from_description(read_description(path), capacity=capacity)
