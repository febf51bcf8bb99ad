from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

EdgeKey = Tuple[int, int]


def edge_key(u: int, v: int) -> EdgeKey:
    """Canonical key of the undirected pair {u, v} of arena indices."""
    return (u, v) if u <= v else (v, u)


@dataclass(eq=False)
class Edge:
    """
    An original-graph edge. Both endpoints reach the same record through
    edge_key, so num_triangles is shared, not stored per endpoint.
    """

    key: EdgeKey
    num_triangles: int = 0

    def __repr__(self) -> str:
        u, v = self.key
        return f"Edge({u}-{v}, triangles={self.num_triangles})"
