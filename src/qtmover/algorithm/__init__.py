from .initialize import initialize
from .core import CoreResult, core, diff
from .refine import detach, reattach, move_vertex, refine, sub_optimal_probability
from .materialize import build_qt_graph, count_tree_edits, iter_closure_edges, iter_skeleton_edges
from .mover import QuasiThresholdMover, quasi_threshold_editing

__all__ = [
    "initialize",
    "CoreResult",
    "core",
    "diff",
    "detach",
    "reattach",
    "move_vertex",
    "refine",
    "sub_optimal_probability",
    "build_qt_graph",
    "count_tree_edits",
    "iter_closure_edges",
    "iter_skeleton_edges",
    "QuasiThresholdMover",
    "quasi_threshold_editing",
]
