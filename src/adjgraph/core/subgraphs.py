from __future__ import annotations

from typing import Iterator, List, Sequence, Set


def _closed_neighborhood(sub: Sequence[int], adj: Sequence[Sequence[int]]) -> Set[int]:
    """Vertices of *sub* together with every target of their adjacency lists."""
    closed = set(sub)
    for v in sub:
        closed.update(adj[v])
    return closed


def _root_extension(root: int, adj: Sequence[Sequence[int]]) -> List[int]:
    ext: List[int] = []
    for u in adj[root]:
        if u > root and u not in ext:
            ext.append(u)
    return ext


def _extend_subgraph(
    sub: List[int],
    ext: List[int],
    root: int,
    k: int,
    adj: Sequence[Sequence[int]],
) -> Iterator[List[int]]:
    if len(sub) == k:
        yield [v + 1 for v in sub]
        return

    while ext and len(sub) < k:
        w = ext.pop(0)

        # exclusive neighborhood of w with respect to sub
        closed = _closed_neighborhood(sub, adj)
        new_ext = list(ext)
        for u in adj[w]:
            if u > root and u not in closed and u not in new_ext:
                new_ext.append(u)

        sub.append(w)
        yield from _extend_subgraph(sub, new_ext, root, k, adj)
        sub.pop()


def iter_connected_subgraphs(adj: Sequence[Sequence[int]], k: int) -> Iterator[List[int]]:
    """
    Stream every connected induced subgraph on exactly k vertices.

    adj[u] lists the 0-based targets of u. Each subgraph is yielded as a
    list of 1-based vertex ids in discovery order, starting with its
    smallest vertex (the root). Every vertex set is produced at most once.

    k <= 0 or k > len(adj) yields nothing.
    """
    n = len(adj)
    if k <= 0 or k > n:
        return
    for root in range(n):
        yield from _extend_subgraph([root], _root_extension(root, adj), root, k, adj)


def enumerate_connected_subgraphs(adj: Sequence[Sequence[int]], k: int) -> List[List[int]]:
    """List form of iter_connected_subgraphs."""
    return list(iter_connected_subgraphs(adj, k))


def count_connected_subgraphs(adj: Sequence[Sequence[int]], k: int) -> int:
    return sum(1 for _ in iter_connected_subgraphs(adj, k))
