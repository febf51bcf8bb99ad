from .triangles import count_all_triangles, count_triangles
from .pseudo_c4p4 import INFINITY, PseudoC4P4Counter

__all__ = [
    "count_all_triangles",
    "count_triangles",
    "INFINITY",
    "PseudoC4P4Counter",
]
