# event_log.py
"""
Audit log of graph edits.

A GraphEventLog attaches to a Graph through its ``on_mutation`` hook and
keeps every successful mutation in order, numbered from 1. Nothing in the
graph depends on it; detach it and the graph behaves the same.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterator, List
import logging

from graph import Graph, GraphEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogEntry:
    sequence: int
    timestamp: datetime
    event: GraphEvent

    def __str__(self) -> str:
        return f"#{self.sequence} {self.timestamp.isoformat()} {self.event}"


class GraphEventLog:
    def __init__(self) -> None:
        self._entries: List[LogEntry] = []

    def attach(self, graph: Graph) -> None:
        if graph.on_mutation is not None and graph.on_mutation != self.record:
            raise ValueError("graph already has a mutation observer attached")
        graph.on_mutation = self.record

    def detach(self, graph: Graph) -> None:
        if graph.on_mutation == self.record:
            graph.on_mutation = None

    def record(self, event: GraphEvent) -> LogEntry:
        entry = LogEntry(len(self._entries) + 1, datetime.now(timezone.utc), event)
        self._entries.append(entry)
        logger.info("%s", entry)
        return entry

    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def actions(self) -> List[str]:
        return [e.event.action for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))
