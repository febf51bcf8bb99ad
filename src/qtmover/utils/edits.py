from __future__ import annotations

from typing import FrozenSet, Hashable, Set

import networkx as nx


def _undirected_edges(G: nx.Graph) -> Set[FrozenSet[Hashable]]:
    return {frozenset((u, v)) for u, v in G.edges() if u != v}


def edit_set(original: nx.Graph, edited: nx.Graph) -> Set[FrozenSet[Hashable]]:
    """Edges inserted or deleted when going from original to edited (directions ignored)."""
    return _undirected_edges(original) ^ _undirected_edges(edited)


def count_edits(original: nx.Graph, edited: nx.Graph) -> int:
    """Number of edge insertions plus deletions between the two graphs."""
    return len(edit_set(original, edited))
