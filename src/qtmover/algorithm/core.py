from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from qtmover.errors import InternalConsistencyError
from qtmover.structure.working import WorkingGraph


@dataclass
class CoreResult:
    """
    Outcome of one core pass for the moved vertex vm.

    best_parent: where vm should be reattached (best_parent_of[root]).
    close_children: per vertex, the children whose subtree gains from vm as
        an ancestor (child_close > 0); vm adopts close_children[best_parent].
    """

    best_parent: int
    close_children: Dict[int, List[int]] = field(default_factory=dict)
    child_close: Dict[int, int] = field(default_factory=dict)
    score_max: Dict[int, int] = field(default_factory=dict)
    best_parent_of: Dict[int, int] = field(default_factory=dict)

    def children_to_adopt(self, parent: int) -> List[int]:
        return self.close_children.get(parent, [])


def diff(working: WorkingGraph, vm: int, v: int) -> int:
    """+1 if vm and v are adjacent (the root counts as adjacent), else -1."""
    return 1 if working.is_adjacent(vm, v) else -1


def core(working: WorkingGraph, vm: int) -> CoreResult:
    """
    Bottom-up dynamic program over the current tree for the vertex vm.

    Vertices are visited by strictly decreasing depth, so all children are
    done before their parent. For each v:

      child_close(v) = diff(vm, v) + sum of child_close over all children
      score_max(v)   = diff(vm, v) + max(sum of child_close over close children,
                                         best score_max among the children)

    best_parent_of(v) is v when the close-children sum wins, else it is
    inherited from the best child. Among children with equal score_max the
    lowest id wins. Depths must be current.
    """
    child_close: Dict[int, int] = {}
    score_max: Dict[int, int] = {}
    best_parent_of: Dict[int, int] = {}
    close_children: Dict[int, List[int]] = {}

    for v in working.depth_order():
        d = diff(working, vm, v)
        child_close_sum = 0
        close_sum = 0
        close: List[int] = []
        best_child = -1
        best_score = -1

        for c in working.children(v):
            try:
                cc = child_close[c]
                sc = score_max[c]
            except KeyError:
                raise InternalConsistencyError(
                    f"child {working.vertices[c].id!r} of {working.vertices[v].id!r} "
                    "was not scored before its parent (stale depths?)"
                ) from None
            if cc > 0:
                close.append(c)
                close_sum += cc
            child_close_sum += cc
            if sc > best_score or (sc == best_score and best_child >= 0 and c < best_child):
                best_child = c
                best_score = sc

        if close:
            close_children[v] = sorted(close)
        child_close[v] = child_close_sum + d

        if best_child >= 0 and best_score > close_sum:
            score_max[v] = best_score + d
            best_parent_of[v] = best_parent_of[best_child]
        else:
            score_max[v] = close_sum + d
            best_parent_of[v] = v

    return CoreResult(
        best_parent=best_parent_of[working.root],
        close_children=close_children,
        child_close=child_close,
        score_max=score_max,
        best_parent_of=best_parent_of,
    )
