"""
qtmover: Quasi-Threshold Mover, a heuristic that edits a graph into a
quasi-threshold graph (the closure of a rooted forest) to expose a
hierarchical community structure.
"""

from .algorithm.mover import QuasiThresholdMover, quasi_threshold_editing
from .algorithm.materialize import build_qt_graph
from .config import QtmConfig
from .errors import InvalidInputError, InternalConsistencyError

# Building blocks
from .structure.working import WorkingGraph
from .structure.vertex import ROOT_SENTINEL
from .counting.triangles import count_all_triangles, count_triangles
from .counting.pseudo_c4p4 import INFINITY, PseudoC4P4Counter

# Utilities
from .utils.convert import ensure_simple_graph, graph_from_edges
from .utils.edits import edit_set, count_edits
from .utils.recognition import (
    is_quasi_threshold,
    qt_forest_from_graph,
    forest_closure,
    skeleton_closure,
)

__all__ = [
    # Entry points
    "QuasiThresholdMover",
    "quasi_threshold_editing",
    "build_qt_graph",
    "QtmConfig",
    # Errors
    "InvalidInputError",
    "InternalConsistencyError",
    # Structure / counting
    "WorkingGraph",
    "ROOT_SENTINEL",
    "count_all_triangles",
    "count_triangles",
    "INFINITY",
    "PseudoC4P4Counter",
    # Utils
    "ensure_simple_graph",
    "graph_from_edges",
    "edit_set",
    "count_edits",
    "is_quasi_threshold",
    "qt_forest_from_graph",
    "forest_closure",
    "skeleton_closure",
]
