from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Hashable, List


@total_ordering
class _RootSentinel:
    """Placeholder id for the universal root; compares greater than any id."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: Any) -> bool:
        return other is self

    def __lt__(self, other: Any) -> bool:
        return False

    def __hash__(self) -> int:
        return hash("qtmover.root")

    def __repr__(self) -> str:
        return "ROOT"


ROOT_SENTINEL = _RootSentinel()


@dataclass(eq=False)
class Vertex:
    """
    A vertex of the working graph, doubling as a node of the current tree.

    parent/children hold arena indices, never Vertex objects. The root is its
    own parent.
    """

    id: Hashable
    index: int
    degree: int
    depth: int = -1
    parent: int = -1
    children: List[int] = field(default_factory=list)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Vertex):
            return self.id == other.id
        return NotImplemented

    def __lt__(self, other: "Vertex") -> bool:
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Vertex({self.id!r}, depth={self.depth})"
