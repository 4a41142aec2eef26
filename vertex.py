# vertex.py

from PyQt5.QtCore import QPoint
from typing import Dict, List, Optional, Tuple

from edge import Edge
from utils_geom import PointLike, to_point, v_add, within_radius

# Label of a placeholder vertex; never inserted into a Graph
UNLABELED = -1

class Vertex:
    __slots__ = ("_label", "_position", "_selected", "_adjacent")

    def __init__(self, label: int = UNLABELED, position: Optional[PointLike] = None):
        self._label = label
        self._position = None if position is None else to_point(position)
        self._selected = False
        self._adjacent: List[Edge] = []

    # --- Getters and Setters ---
    def getLabel(self) -> int:
        return self._label

    def setLabel(self, label: int) -> None:
        # Uniqueness is the owning graph's job (see Graph.relabelVertex)
        self._label = label

    def hasPosition(self) -> bool:
        return self._position is not None

    def getPosition(self) -> Optional[QPoint]:
        return self._position

    def setPosition(self, pos: Optional[PointLike]) -> None:
        self._position = None if pos is None else to_point(pos)

    def moveBy(self, dx: int, dy: int) -> None:
        if self._position is None:
            raise ValueError(f"Vertex {self._label} has no position to move")
        self._position = v_add(self._position, QPoint(dx, dy))

    def pos_tuple(self) -> Optional[Tuple[int, int]]:
        if self._position is None:
            return None
        return (self._position.x(), self._position.y())

    def isSelected(self) -> bool:
        return self._selected

    def setSelected(self, s: bool) -> None:
        self._selected = bool(s)

    def getAdjacent(self) -> List[Edge]:
        return self._adjacent

    # --- Adjacency ---
    def addEdge(self, other: "Vertex") -> Edge:
        """Append an edge to ``other``. Parallel edges are allowed."""
        edge = Edge(self, other)
        self._adjacent.append(edge)
        return edge

    def removeEdge(self, other: "Vertex") -> bool:
        """Remove the first edge pointing at ``other``.

        Returns whether one was found. Parallel edges need one call each.
        """
        for i, e in enumerate(self._adjacent):
            if e.getTarget() is other:
                del self._adjacent[i]
                return True
        return False

    def contains(self, point: PointLike, radius: int) -> bool:
        if self._position is None:
            return False
        return within_radius(to_point(point), self._position, radius)

    def toDocument(self) -> Dict[str, int]:
        doc = {"label": self._label}
        if self._position is not None:
            doc["x"] = self._position.x()
            doc["y"] = self._position.y()
        return doc

    def __repr__(self) -> str:
        return f"V({self._label})"
