from __future__ import annotations

import logging
import random
from typing import List, Optional

from qtmover.algorithm.core import CoreResult, core
from qtmover.algorithm.materialize import count_tree_edits
from qtmover.config import ANNEALING_ITERATIONS, INITIAL_SUB_OPTIMAL_CHOICE_PROBABILITY, ITERATIONS
from qtmover.structure.working import WorkingGraph

log = logging.getLogger(__name__)


def detach(working: WorkingGraph, vm: int) -> None:
    """Hand vm's children to its parent and park vm under the root at depth 1."""
    verts = working.vertices
    vert = verts[vm]
    old_parent = vert.parent
    old_children = vert.children

    working.change_parent(vm, working.root)
    vert.depth = 1
    vert.children = []

    for c in old_children:
        working.adjust_subtree_depth(c, -1)
        verts[c].parent = old_parent
    verts[old_parent].children.extend(old_children)


def reattach(working: WorkingGraph, vm: int, new_parent: int, adopt: List[int]) -> None:
    """Hang vm below new_parent and move the adopted children of new_parent below vm."""
    verts = working.vertices
    vert = verts[vm]
    working.change_parent(vm, new_parent)
    vert.depth = verts[new_parent].depth + 1

    if adopt:
        taken = set(adopt)
        parent = verts[new_parent]
        parent.children = [c for c in parent.children if c not in taken]
        vert.children = list(adopt)
        for c in adopt:
            working.adjust_subtree_depth(c, 1)
            verts[c].parent = vm


def sub_optimal_probability(
    iteration: int,
    annealing_iterations: int,
    initial_probability: float,
) -> float:
    """Chance of a random parent in a sweep; linear decay to 0 at annealing_iterations."""
    if iteration >= annealing_iterations:
        return 0.0
    return initial_probability * (1.0 - iteration / annealing_iterations)


def _random_other_vertex(working: WorkingGraph, vm: int, rng: random.Random) -> int:
    r = rng.randrange(len(working) - 1)
    return r + 1 if r >= vm else r


def move_vertex(
    working: WorkingGraph,
    vm: int,
    rng: Optional[random.Random] = None,
    probability: float = 0.0,
) -> CoreResult:
    """Detach vm, run the core pass and reattach it at the chosen place."""
    detach(working, vm)
    result = core(working, vm)

    new_parent = result.best_parent
    if probability > 0.0 and rng is not None and rng.random() < probability:
        new_parent = _random_other_vertex(working, vm, rng)

    reattach(working, vm, new_parent, result.children_to_adopt(new_parent))
    return result


def refine(
    working: WorkingGraph,
    rng: random.Random,
    *,
    iterations: int = ITERATIONS,
    annealing_iterations: int = ANNEALING_ITERATIONS,
    initial_sub_optimal_choice_probability: float = INITIAL_SUB_OPTIMAL_CHOICE_PROBABILITY,
    simulated_annealing: bool = False,
    edit_history: Optional[List[int]] = None,
) -> None:
    """
    Local-search sweeps over the forest built by initialize.

    Every sweep moves each non-root vertex once, in an order freshly shuffled
    with rng. No convergence test: exactly `iterations` sweeps run. With
    simulated_annealing, sweep i picks a random parent instead of the best
    one with probability sub_optimal_probability(i, ...).

    If edit_history is given, the edit count after each sweep is appended.
    """
    working.compute_depths()
    order = list(working.real_indices())

    for i in range(iterations):
        rng.shuffle(order)
        p = 0.0
        if simulated_annealing:
            p = sub_optimal_probability(i, annealing_iterations, initial_sub_optimal_choice_probability)

        for vm in order:
            move_vertex(working, vm, rng, p)

        if edit_history is not None:
            edit_history.append(count_tree_edits(working))
            log.debug("sweep %d: %d edits", i + 1, edit_history[-1])
        elif log.isEnabledFor(logging.DEBUG):
            log.debug("sweep %d: %d edits", i + 1, count_tree_edits(working))
