from .convert import ensure_simple_graph, graph_from_edges
from .edits import edit_set, count_edits
from .recognition import (
    is_quasi_threshold,
    qt_forest_from_graph,
    forest_closure,
    skeleton_closure,
)

__all__ = [
    "ensure_simple_graph",
    "graph_from_edges",
    "edit_set",
    "count_edits",
    "is_quasi_threshold",
    "qt_forest_from_graph",
    "forest_closure",
    "skeleton_closure",
]
