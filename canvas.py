# canvas.py

from typing import Optional

from graph import Graph
from vertex import Vertex
from utils_geom import PointLike, to_point


class GraphCanvas:
    """Mouse-driven editing on top of a Graph.

    A drawing widget forwards its click and drag positions here and then
    repaints from ``getGraph().getVertices()`` / ``getEdges()``. Only one
    vertex is selected at a time; its ``selected`` flag mirrors that.
    """

    def __init__(self, graph: Optional[Graph] = None):
        self.graph = graph if graph is not None else Graph()
        self.lastActive: Optional[Vertex] = None

    def getGraph(self) -> Graph:
        return self.graph

    def setGraph(self, graph: Graph) -> None:
        # Selection belongs to the old graph
        self.clearSelection()
        self.graph = graph

    # --- Mouse events ---
    def handleClick(self, point: PointLike, clickCount: int = 1) -> None:
        p = to_point(point)
        if clickCount == 1:
            if self.graph.vertexCountAtPosition(p) == 0:
                self.addVertexAt(p)
                self.clearSelection()
                return
            other = self.graph.vertexAtPosition(p)
            if self.lastActive is None:
                self.select(other)
                return
            a, b = self.lastActive.getLabel(), other.getLabel()
            # Clicking the selected vertex again only ever removes a self-loop
            if self.graph.hasEdge(a, b):
                self.graph.removeEdge(a, b)
            elif other is not self.lastActive:
                self.graph.addEdge(a, b)
            self.clearSelection()
        elif clickCount == 2:
            self.removeVertexAt(p)
            self.clearSelection()

    def handleDrag(self, point: PointLike) -> bool:
        p = to_point(point)
        current = self.graph.vertexAtPosition(p)
        if current is None or not current.isSelected():
            return False
        if self.graph.vertexCountAtPosition(p) >= 2:
            return False
        self.graph.moveVertex(current.getLabel(), p)
        return True

    # --- Editing helpers ---
    def addVertexAt(self, point: PointLike) -> Optional[Vertex]:
        p = to_point(point)
        if self.graph.vertexCountAtPosition(p) > 0:
            return None
        return self.graph.addVertex(self.graph.firstUnusedLabel(), p)

    def removeVertexAt(self, point: PointLike) -> bool:
        v = self.graph.vertexAtPosition(point)
        if v is None:
            return False
        if v is self.lastActive:
            self.lastActive = None
        self.graph.removeVertex(v.getLabel())
        return True

    def toggleEdge(self, first: Vertex, second: Vertex) -> bool:
        """Connect the two vertices, or disconnect them if already connected.

        Returns True when an edge was added.
        """
        a, b = first.getLabel(), second.getLabel()
        if self.graph.hasEdge(a, b):
            self.graph.removeEdge(a, b)
            return False
        self.graph.addEdge(a, b)
        return True

    # --- Selection ---
    def select(self, v: Optional[Vertex]) -> None:
        self.clearSelection()
        if v is not None:
            v.setSelected(True)
            self.lastActive = v

    def clearSelection(self) -> None:
        if self.lastActive is not None:
            self.lastActive.setSelected(False)
        self.lastActive = None

    def getSelected(self) -> Optional[Vertex]:
        return self.lastActive
