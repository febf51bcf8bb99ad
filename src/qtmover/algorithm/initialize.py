from __future__ import annotations

import heapq
import logging
from collections import Counter
from typing import List

from qtmover.counting.pseudo_c4p4 import PseudoC4P4Counter
from qtmover.structure.working import WorkingGraph

log = logging.getLogger(__name__)


def initialize(working: WorkingGraph, scorer: PseudoC4P4Counter) -> None:
    """
    Greedy first guess at the forest (single pass, no backtracking).

    Vertices are taken by descending original degree, ties by ascending id.
    Each vertex first moves under the most frequent parent among its "close"
    unprocessed neighbours, then adopts those unprocessed neighbours that look
    better placed below it than below their current parent.

    Depths are only approximate afterwards; callers recompute them.
    Triangle counts must already be on the edges.
    """
    working.attach_all_to_root()
    verts = working.vertices

    queue = [(-verts[x].degree, x) for x in working.real_indices()]
    heapq.heapify(queue)
    processed: List[bool] = [False] * len(working)

    moved = 0
    adopted = 0
    while queue:
        _, current = heapq.heappop(queue)
        cur = verts[current]
        processed[current] = True

        candidates = sorted(v for v in working.neighbors(current) if not processed[v])

        # non-strict comparisons here, strict ones in the adoption step below
        close = []
        for v in candidates:
            vert = verts[v]
            if vert.parent == cur.parent or (
                scorer.score(current, v) <= scorer.score(v, vert.parent)
                and vert.depth <= working.edge(current, v).num_triangles + 1
            ):
                close.append(v)

        occurrences = Counter(verts[v].parent for v in close)
        if occurrences:
            # most frequent parent, ties to the lowest id
            new_parent = max(occurrences, key=lambda p: (occurrences[p], -p))
            if new_parent != cur.parent:
                working.change_parent(current, new_parent)
                cur.depth = 0
                scorer.set_to_infinity(current, new_parent)
                moved += 1

        for v in candidates:
            vert = verts[v]
            if vert.parent == cur.parent or (
                scorer.score(current, v) < scorer.score(v, vert.parent)
                and vert.depth < working.edge(current, v).num_triangles + 1
            ):
                working.change_parent(v, current)
                vert.depth += 1
                adopted += 1

    log.debug("initialize: %d vertices moved, %d adoptions", moved, adopted)
