"""Recognition of quasi-threshold graphs.

A graph is quasi-threshold iff every connected induced subgraph has a
universal vertex, so the forest can be peeled off top-down: take a universal
vertex of each component as the next tree node, delete it, and recurse into
the remaining components.
"""
from __future__ import annotations

from typing import Dict, Hashable, Optional

import networkx as nx


def qt_forest_from_graph(G: nx.Graph) -> Optional[Dict[Hashable, Optional[Hashable]]]:
    """
    Return a rooted forest {v: parent or None} whose ancestor closure is G,
    or None if G is not quasi-threshold.
    """
    forest: Dict[Hashable, Optional[Hashable]] = {}
    stack = [(frozenset(G.nodes()), None)]
    while stack:
        nodes, parent = stack.pop()
        if not nodes:
            continue
        H = G.subgraph(nodes)
        for comp in nx.connected_components(H):
            # a universal vertex has maximum degree, so checking that one suffices
            top = max(comp, key=lambda v: len(comp.intersection(G.adj[v])))
            if len(comp.intersection(G.adj[top])) != len(comp) - 1:
                return None
            forest[top] = parent
            stack.append((frozenset(comp - {top}), top))
    return forest


def is_quasi_threshold(G: nx.Graph) -> bool:
    """True iff G contains neither an induced P4 nor an induced C4."""
    return qt_forest_from_graph(G) is not None


def forest_closure(forest: Dict[Hashable, Optional[Hashable]]) -> nx.Graph:
    """Undirected ancestor/descendant closure of a {v: parent or None} forest."""
    C = nx.Graph()
    C.add_nodes_from(forest)
    for v in forest:
        p = forest[v]
        while p is not None:
            C.add_edge(p, v)
            p = forest[p]
    return C


def skeleton_closure(D: nx.DiGraph) -> nx.Graph:
    """Transitive closure of a parent->child skeleton, as an undirected graph."""
    closure = nx.transitive_closure(D, reflexive=False)
    return closure.to_undirected()
