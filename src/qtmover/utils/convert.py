from __future__ import annotations

from typing import Hashable, Iterable, Tuple

import networkx as nx

from qtmover.errors import InvalidInputError


def ensure_simple_graph(G: nx.Graph) -> nx.Graph:
    """
    Return a simple undirected view of G as a new nx.Graph.

    Parallel edges collapse and directions are dropped; G itself is not modified.
    """
    if G.is_directed():
        G = G.to_undirected(as_view=False)
    # also collapses the parallel edges of a MultiGraph
    return nx.Graph(G)


def graph_from_edges(
    vertices: Iterable[Hashable],
    edges: Iterable[Tuple[Hashable, Hashable]],
) -> nx.Graph:
    """
    Build a validated undirected graph.

    Raises InvalidInputError on duplicate vertex ids, edges that reference an
    unknown vertex, or self-loops. Repeated edges are merged.
    """
    G = nx.Graph()
    for v in vertices:
        if v in G:
            raise InvalidInputError(f"duplicate vertex id {v!r}")
        G.add_node(v)
    for u, v in edges:
        if u not in G or v not in G:
            raise InvalidInputError(f"edge ({u!r}, {v!r}) references an unknown vertex")
        if u == v:
            raise InvalidInputError(f"self-loop on vertex {u!r}")
        G.add_edge(u, v)
    return G
