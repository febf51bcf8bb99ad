from __future__ import annotations

import sys
from typing import Set

from qtmover.errors import InternalConsistencyError
from qtmover.structure.edge import EdgeKey, edge_key
from qtmover.structure.working import WorkingGraph


INFINITY = sys.maxsize


class PseudoC4P4Counter:
    """
    Estimates how many C4s, plus P4s with (u, v) as centre edge, pass through
    an edge. A high score marks an edge the initializer should rather not
    keep as a tree edge.

    Triangle counts must already be stored on the edges (count_all_triangles).
    """

    def __init__(self, working: WorkingGraph) -> None:
        self._working = working
        self._infinities: Set[EdgeKey] = set()

    def score(self, u: int, v: int) -> int:
        key = edge_key(u, v)
        if key in self._infinities:
            return INFINITY
        w = self._working
        if u == w.root or v == w.root:
            # every neighbour of v is a neighbour of the universal root too:
            # (v, root) closes deg(v) triangles and v has no private neighbour left
            return 0
        if key not in w.edges:
            raise InternalConsistencyError(
                f"score requested for non-edge ({w.vertices[u].id!r}, {w.vertices[v].id!r})"
            )
        tri = w.edges[key].num_triangles
        return (w.vertices[u].degree - 1 - tri) * (w.vertices[v].degree - 1 - tri)

    def set_to_infinity(self, u: int, v: int) -> None:
        """Pin the score of (u, v) to INFINITY for the rest of the run."""
        self._infinities.add(edge_key(u, v))

    def is_infinite(self, u: int, v: int) -> bool:
        return edge_key(u, v) in self._infinities
