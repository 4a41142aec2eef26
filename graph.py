# graph.py

from vertex import Vertex
from edge import Edge
from errors import (
    GraphError, NegativeLabelError, DuplicateLabelError,
    MissingLabelError, GraphFileCorruptedError,
)
from utils_geom import PointLike, to_point
from typing import Callable, Dict, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field
import logging

logger = logging.getLogger(__name__)


@dataclass
class GraphConfig:
    # Hit-test radius around a vertex center, in canvas pixels
    vertex_radius: int = 15

    # Persistence
    json_indent: int = 4
    save_suffix: str = ".json"
    save_name_format: str = "%Y%m%d_%H%M%S"


@dataclass(frozen=True)
class GraphEvent:
    """One successful mutation, as passed to ``Graph.on_mutation``."""
    action: str
    labels: Tuple[int, ...]
    details: Dict[str, object] = field(default_factory=dict)

    def __str__(self) -> str:
        labels = ", ".join(str(l) for l in self.labels)
        return f"{self.action}({labels})"


class Graph:
    """Undirected graph of labeled vertices.

    Each logical edge is stored as two mirrored directed edges, one in each
    endpoint's adjacency list. Labels are positive and unique; ``0`` is never
    a valid label.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self.vertices: List[Vertex] = []
        self.config = config or GraphConfig()

        # Observer hook, called with a GraphEvent after each mutation
        self.on_mutation: Optional[Callable[[GraphEvent], None]] = None

    # --------------------------
    # Small helpers
    # --------------------------
    def _emit(self, action: str, *labels: int, **details) -> None:
        event = GraphEvent(action, tuple(labels), dict(details))
        logger.debug("graph mutation: %s", event)
        if self.on_mutation is not None:
            self.on_mutation(event)

    @staticmethod
    def _check_positive(*labels: int) -> None:
        for label in labels:
            if label <= 0:
                raise NegativeLabelError()

    def _require(self, label: int) -> Vertex:
        v = self.findByLabel(label)
        if v is None:
            raise MissingLabelError()
        return v

    def _resolve_pair(self, firstLabel: int, secondLabel: int) -> Tuple[Vertex, Vertex]:
        self._check_positive(firstLabel, secondLabel)
        first = self.findByLabel(firstLabel)
        second = self.findByLabel(secondLabel)
        if first is None or second is None:
            raise MissingLabelError()
        return first, second

    # --------------------------
    # Lookup
    # --------------------------
    def findByLabel(self, label: int) -> Optional[Vertex]:
        for v in self.vertices:
            if v.getLabel() == label:
                return v
        return None

    def containsLabel(self, label: int) -> bool:
        return self.findByLabel(label) is not None

    def vertexAtPosition(self, point: PointLike) -> Optional[Vertex]:
        p = to_point(point)
        r = self.config.vertex_radius
        for v in self.vertices:
            if v.contains(p, r):
                return v
        return None

    def vertexCountAtPosition(self, point: PointLike) -> int:
        p = to_point(point)
        r = self.config.vertex_radius
        return sum(1 for v in self.vertices if v.contains(p, r))

    # --------------------------
    # Base graph ops
    # --------------------------
    def clear(self):
        self.vertices.clear()
        self._emit("clear")

    def addVertex(self, label: int, position: Optional[PointLike] = None) -> Vertex:
        self._check_positive(label)
        if self.containsLabel(label):
            raise DuplicateLabelError()
        v = Vertex(label, position)
        self.vertices.append(v)
        self._emit("add_vertex", label, position=v.pos_tuple())
        return v

    def removeVertex(self, label: int) -> None:
        self._check_positive(label)
        target = self._require(label)
        # Purge both directions so no edge is left pointing at the removed vertex
        for other in self.vertices:
            while target.removeEdge(other):
                pass
            while other.removeEdge(target):
                pass
        self.vertices.remove(target)
        self._emit("remove_vertex", label)

    def moveVertex(self, label: int, position: PointLike) -> Vertex:
        self._check_positive(label)
        v = self._require(label)
        v.setPosition(position)
        self._emit("move_vertex", label, position=v.pos_tuple())
        return v

    def relabelVertex(self, oldLabel: int, newLabel: int) -> Vertex:
        self._check_positive(oldLabel, newLabel)
        v = self._require(oldLabel)
        if oldLabel == newLabel:
            return v
        if self.containsLabel(newLabel):
            raise DuplicateLabelError()
        v.setLabel(newLabel)
        self._emit("relabel_vertex", oldLabel, newLabel)
        return v

    def addEdge(self, firstLabel: int, secondLabel: int) -> None:
        first, second = self._resolve_pair(firstLabel, secondLabel)
        first.addEdge(second)
        second.addEdge(first)
        self._emit("add_edge", firstLabel, secondLabel)

    def hasEdge(self, firstLabel: int, secondLabel: int) -> bool:
        first = self.findByLabel(firstLabel)
        second = self.findByLabel(secondLabel)
        if first is None or second is None:
            return False
        return any(e.getTarget() is second for e in first.getAdjacent())

    def removeEdge(self, firstLabel: int, secondLabel: int) -> bool:
        first, second = self._resolve_pair(firstLabel, secondLabel)
        forward = first.removeEdge(second)
        backward = second.removeEdge(first)
        if forward != backward:
            logger.warning(
                "edge %d-%d was only stored in one direction", firstLabel, secondLabel
            )
        removed = forward and backward
        if removed:
            self._emit("remove_edge", firstLabel, secondLabel)
        return removed

    def firstUnusedLabel(self) -> int:
        used = {v.getLabel() for v in self.vertices}
        i = 1
        while i in used:
            i += 1
        return i

    # --------------------------
    # Getters (used by UI)
    # --------------------------
    def getVertices(self) -> List[Vertex]:
        return list(self.vertices)

    def getEdges(self) -> List[Edge]:
        return [e for v in self.vertices for e in v.getAdjacent()]

    def vertexCount(self) -> int:
        return len(self.vertices)

    def edgeCount(self) -> int:
        """Number of undirected edges (each mirrored pair counts once)."""
        return len(self.edgesToDocument())

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self.vertices))

    def __contains__(self, label) -> bool:
        return self.containsLabel(label)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={self.edgeCount()})"

    # --------------------------
    # Documents
    # --------------------------
    def verticesToDocument(self) -> List[Dict[str, int]]:
        return [v.toDocument() for v in self.vertices]

    def edgesToDocument(self) -> List[Dict[str, int]]:
        docs = []
        for v in self.vertices:
            loops = 0
            for e in v.getAdjacent():
                if e.isLoop():
                    # A self-loop is stored twice in the same list; emit every second copy
                    loops += 1
                    if loops % 2 == 0:
                        docs.append(e.toDocument())
                elif e.getSource().getLabel() < e.getTarget().getLabel():
                    docs.append(e.toDocument())
        return docs

    def toDocument(self) -> Dict[str, object]:
        return {
            "numOfVertices": len(self.vertices),
            "numOfEdges": len(self.getEdges()),
            "vertices": self.verticesToDocument(),
            "edges": self.edgesToDocument(),
        }

    @classmethod
    def fromDocument(cls, document, config: Optional[GraphConfig] = None) -> "Graph":
        """Rebuild a graph through the public mutation API.

        Any structural problem in ``document`` (missing keys, wrong types,
        duplicate or unknown labels) raises GraphFileCorruptedError.
        """
        graph = cls(config)
        try:
            for entry in document["vertices"]:
                label = _read_int(entry, "label")
                if "x" in entry or "y" in entry:
                    position = (_read_int(entry, "x"), _read_int(entry, "y"))
                else:
                    position = None
                graph.addVertex(label, position)

            for entry in document["edges"]:
                graph.addEdge(_read_int(entry, "firstLabel"), _read_int(entry, "secondLabel"))
        except (GraphError, KeyError, TypeError, ValueError, AttributeError, OverflowError) as e:
            logger.debug("rejecting graph document: %r", e)
            raise GraphFileCorruptedError() from None
        return graph


def _read_int(entry, key: str) -> int:
    value = entry[key]
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    return value
