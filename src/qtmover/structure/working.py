"""Index-based working graph: original adjacency plus the current rooted tree.

All vertices live in one arena (a list). Real vertices occupy slots 0..n-1 in
ascending id order, so comparing indices is the same as comparing ids; the
synthetic universal root occupies slot n.
"""
from __future__ import annotations

from collections import defaultdict, deque
from typing import Dict, Hashable, Iterable, Iterator, List, Set

import networkx as nx

from qtmover.errors import InternalConsistencyError, InvalidInputError
from qtmover.structure.edge import Edge, EdgeKey, edge_key
from qtmover.structure.vertex import ROOT_SENTINEL, Vertex
from qtmover.utils.convert import ensure_simple_graph


class WorkingGraph:
    def __init__(
        self,
        ids: Iterable[Hashable],
        edges: Iterable[tuple[Hashable, Hashable]],
        root: Hashable = ROOT_SENTINEL,
    ) -> None:
        try:
            ordered = sorted(ids)
        except TypeError as exc:
            raise InvalidInputError(f"vertex ids must be mutually orderable: {exc}") from exc

        index_of: Dict[Hashable, int] = {}
        for i, vid in enumerate(ordered):
            if vid in index_of:
                raise InvalidInputError(f"duplicate vertex id {vid!r}")
            index_of[vid] = i
        if root in index_of:
            raise InvalidInputError(f"root id {root!r} collides with an input vertex id")

        n = len(ordered)
        adj: List[Set[int]] = [set() for _ in range(n + 1)]
        self.edges: Dict[EdgeKey, Edge] = {}
        for a, b in edges:
            if a not in index_of or b not in index_of:
                raise InvalidInputError(f"edge ({a!r}, {b!r}) references an unknown vertex")
            u, v = index_of[a], index_of[b]
            if u == v:
                raise InvalidInputError(f"self-loop on vertex {a!r}")
            key = edge_key(u, v)
            if key in self.edges:
                continue
            self.edges[key] = Edge(key)
            adj[u].add(v)
            adj[v].add(u)

        self.adj = adj
        self.index_of = index_of
        self.vertices: List[Vertex] = [
            Vertex(vid, i, degree=len(adj[i])) for i, vid in enumerate(ordered)
        ]
        self.root = n
        self.vertices.append(Vertex(root, n, degree=n, depth=0, parent=n))

    @classmethod
    def from_networkx(cls, graph: nx.Graph, root: Hashable = ROOT_SENTINEL) -> "WorkingGraph":
        """Snapshot a networkx graph; the caller's graph is never touched."""
        G = ensure_simple_graph(graph)
        loops = list(nx.selfloop_edges(G))
        if loops:
            raise InvalidInputError(f"self-loops are not supported: {loops[:5]!r}")
        return cls(G.nodes(), G.edges(), root=root)

    # ------------------------------------------------------------------
    # Original graph
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def n(self) -> int:
        """Number of real (non-root) vertices."""
        return self.root

    def real_indices(self) -> range:
        return range(self.root)

    def neighbors(self, v: int) -> Set[int]:
        return self.adj[v]

    def has_edge(self, u: int, v: int) -> bool:
        return edge_key(u, v) in self.edges

    def edge(self, u: int, v: int) -> Edge:
        try:
            return self.edges[edge_key(u, v)]
        except KeyError:
            raise InternalConsistencyError(
                f"no original edge between {self.vertices[u].id!r} and {self.vertices[v].id!r}"
            ) from None

    def is_adjacent(self, u: int, v: int) -> bool:
        """Adjacency in the original graph augmented by the universal root."""
        if u == v:
            return False
        if u == self.root or v == self.root:
            return True
        return v in self.adj[u]

    def original_edges(self) -> Iterator[tuple[Hashable, Hashable]]:
        for u, v in self.edges:
            yield self.vertices[u].id, self.vertices[v].id

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def parent(self, v: int) -> int:
        return self.vertices[v].parent

    def children(self, v: int) -> List[int]:
        return self.vertices[v].children

    def depth(self, v: int) -> int:
        return self.vertices[v].depth

    def attach_all_to_root(self) -> None:
        root = self.vertices[self.root]
        root.children = []
        for vert in self.vertices[: self.root]:
            vert.parent = self.root
            vert.depth = 1
            vert.children = []
            root.children.append(vert.index)

    def change_parent(self, child: int, new_parent: int) -> None:
        c = self.vertices[child]
        old = c.parent
        if old >= 0:
            self.vertices[old].children.remove(child)
        c.parent = new_parent
        self.vertices[new_parent].children.append(child)

    def adjust_subtree_depth(self, v: int, delta: int) -> None:
        """Add delta to the depth of v and of every descendant of v."""
        stack = [v]
        while stack:
            x = stack.pop()
            vert = self.vertices[x]
            vert.depth += delta
            stack.extend(vert.children)

    def compute_depths(self) -> None:
        """Recompute every depth top-down from the root."""
        for vert in self.vertices:
            vert.depth = -1
        self.vertices[self.root].depth = 0
        seen = 1
        queue = deque([self.root])
        while queue:
            x = queue.popleft()
            d = self.vertices[x].depth + 1
            for c in self.vertices[x].children:
                child = self.vertices[c]
                if child.depth != -1:
                    raise InternalConsistencyError(f"vertex {child.id!r} reached twice")
                child.depth = d
                seen += 1
                queue.append(c)
        if seen != len(self.vertices):
            lost = [v.id for v in self.vertices if v.depth == -1]
            raise InternalConsistencyError(f"vertices not reachable from the root: {lost[:5]!r}")

    def depth_order(self) -> List[int]:
        """All arena indices by strictly decreasing depth (ties: ascending index)."""
        buckets: Dict[int, List[int]] = defaultdict(list)
        for vert in self.vertices:
            buckets[vert.depth].append(vert.index)
        return [x for d in sorted(buckets, reverse=True) for x in buckets[d]]

    def check_tree(self) -> None:
        """Raise InternalConsistencyError unless the tree invariants hold."""
        verts = self.vertices
        root = verts[self.root]
        if root.parent != self.root or root.depth != 0:
            raise InternalConsistencyError("root must be its own parent at depth 0")

        listed_under = [-1] * len(verts)
        for vert in verts:
            for c in vert.children:
                if c == self.root or listed_under[c] != -1:
                    raise InternalConsistencyError(f"vertex {verts[c].id!r} has two parents")
                listed_under[c] = vert.index
                if verts[c].parent != vert.index:
                    raise InternalConsistencyError(
                        f"{verts[c].id!r} listed as child of {vert.id!r} "
                        f"but records parent {verts[verts[c].parent].id!r}"
                    )

        for vert in verts[: self.root]:
            if listed_under[vert.index] == -1:
                raise InternalConsistencyError(f"vertex {vert.id!r} is not a child of its parent")
            parent = verts[vert.parent]
            if vert.depth != parent.depth + 1:
                raise InternalConsistencyError(
                    f"depth of {vert.id!r} is {vert.depth}, parent depth is {parent.depth}"
                )
        # depths strictly increase along parent edges, so parent chains cannot cycle

    def parent_map(self) -> Dict[Hashable, Hashable]:
        """{id: parent id} for real vertices; top-level vertices map to None."""
        out: Dict[Hashable, Hashable] = {}
        for vert in self.vertices[: self.root]:
            out[vert.id] = None if vert.parent == self.root else self.vertices[vert.parent].id
        return out
