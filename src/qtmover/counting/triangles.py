"""Per-edge triangle counts over the original graph."""
from __future__ import annotations

from typing import List, Set

from qtmover.structure.working import WorkingGraph


def count_triangles(working: WorkingGraph, u: int, v: int) -> int:
    """Number of triangles through the pair (u, v): their common neighbours."""
    return len((working.neighbors(u) - {v}) & (working.neighbors(v) - {u}))


def count_all_triangles(working: WorkingGraph) -> int:
    """
    Store on every original edge the number of triangles it lies in.

    Forward algorithm (Schank, "Algorithmic Aspects of Triangle-Based Network
    Analysis"): vertices are ranked by descending degree, ties by ascending
    index. A[t] collects the already-processed lower-ranked neighbours of t,
    so each triangle is found exactly once, at its two highest-ranked
    vertices.

    Returns the total number of triangles. Only the real vertices and the
    original edges take part; the universal root is ignored.
    """
    n = working.n
    verts = working.vertices
    order = sorted(range(n), key=lambda x: (-verts[x].degree, x))
    rank: List[int] = [0] * n
    for r, x in enumerate(order):
        rank[x] = r

    for e in working.edges.values():
        e.num_triangles = 0

    A: List[Set[int]] = [set() for _ in range(n)]
    total = 0
    for s in order:
        for t in working.neighbors(s):
            if rank[s] >= rank[t]:
                continue
            common = A[s] & A[t]
            if common:
                working.edge(s, t).num_triangles += len(common)
                for v in common:
                    working.edge(s, v).num_triangles += 1
                    working.edge(v, t).num_triangles += 1
                total += len(common)
            A[t].add(s)
    return total
