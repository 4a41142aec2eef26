# edge.py
from __future__ import annotations
from typing import Dict, Tuple

class Edge:
    """Directed connection from ``source`` to ``target``.

    An undirected edge in a Graph is a mirrored pair of these. Endpoints are
    references into the graph's vertex list and are fixed for the edge's
    lifetime.
    """
    __slots__ = ("_source", "_target")

    def __init__(self, source, target):
        self._source = source
        self._target = target

    # --- Getters ---
    def getSource(self): return self._source
    def getTarget(self): return self._target

    def isLoop(self) -> bool:
        return self._source is self._target

    # Labels are read at call time so relabeling shows up here
    def key(self) -> Tuple[int, int]:
        return (self._source.getLabel(), self._target.getLabel())

    def toDocument(self) -> Dict[str, int]:
        first, second = self.key()
        return {"firstLabel": first, "secondLabel": second}

    def __repr__(self):
        return f"E({self._source.getLabel()} -> {self._target.getLabel()})"
