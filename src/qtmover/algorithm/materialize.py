"""Turn the final forest into an output graph over the input vertex ids."""
from __future__ import annotations

from typing import Iterator, Set, Tuple, Union

import networkx as nx

from qtmover.structure.edge import EdgeKey, edge_key
from qtmover.structure.working import WorkingGraph


def iter_closure_edges(working: WorkingGraph) -> Iterator[Tuple[int, int]]:
    """
    Yield (ancestor, descendant) index pairs for every non-root ancestor of
    every vertex: the edge set of the quasi-threshold graph the forest defines.
    """
    verts = working.vertices
    stack = [(c, ()) for c in reversed(verts[working.root].children)]
    while stack:
        v, ancestors = stack.pop()
        for a in ancestors:
            yield a, v
        children = verts[v].children
        if children:
            path = ancestors + (v,)
            stack.extend((c, path) for c in reversed(children))


def iter_skeleton_edges(working: WorkingGraph) -> Iterator[Tuple[int, int]]:
    """Yield (parent, child) index pairs of the forest, skipping the root's edges."""
    verts = working.vertices
    stack = list(reversed(verts[working.root].children))
    while stack:
        v = stack.pop()
        children = verts[v].children
        for c in children:
            yield v, c
        stack.extend(reversed(children))


def closure_edge_keys(working: WorkingGraph) -> Set[EdgeKey]:
    return {edge_key(a, v) for a, v in iter_closure_edges(working)}


def count_tree_edits(working: WorkingGraph) -> int:
    """Insertions plus deletions turning the original graph into the current forest's closure."""
    return len(closure_edge_keys(working) ^ working.edges.keys())


def build_qt_graph(
    working: WorkingGraph,
    show_transitive_closures: bool = True,
) -> Union[nx.Graph, nx.DiGraph]:
    """
    Materialize the forest.

    show_transitive_closures=True: the edited quasi-threshold graph
        (undirected, every ancestor joined to every descendant).
    show_transitive_closures=False: the directed parent->child skeleton,
        which implies the same graph.

    Every real vertex is a node of the result; the root never is.
    """
    verts = working.vertices
    if show_transitive_closures:
        out: Union[nx.Graph, nx.DiGraph] = nx.Graph()
        pairs = iter_closure_edges(working)
    else:
        out = nx.DiGraph()
        pairs = iter_skeleton_edges(working)
    out.add_nodes_from(vert.id for vert in verts[: working.root])
    out.add_edges_from((verts[a].id, verts[b].id) for a, b in pairs)
    return out
