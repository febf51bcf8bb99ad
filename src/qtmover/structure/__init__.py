from .vertex import ROOT_SENTINEL, Vertex
from .edge import Edge, EdgeKey, edge_key
from .working import WorkingGraph

__all__ = [
    "ROOT_SENTINEL",
    "Vertex",
    "Edge",
    "EdgeKey",
    "edge_key",
    "WorkingGraph",
]
