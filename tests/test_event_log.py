from __future__ import annotations

import logging

import pytest

from event_log import GraphEventLog
from graph import Graph


def test_records_mutations_in_order() -> None:
    g = Graph()
    log = GraphEventLog()
    log.attach(g)

    g.addVertex(1)
    g.addVertex(2)
    g.addEdge(1, 2)
    g.moveVertex(2, (5, 5))

    assert log.actions() == ["add_vertex", "add_vertex", "add_edge", "move_vertex"]
    assert [e.sequence for e in log] == [1, 2, 3, 4]
    assert log.entries()[3].event.details == {"position": (5, 5)}
    assert len(log) == 4


def test_detach_stops_recording() -> None:
    g = Graph()
    log = GraphEventLog()
    log.attach(g)
    g.addVertex(1)
    log.detach(g)
    g.addVertex(2)
    assert len(log) == 1
    assert g.on_mutation is None


def test_attach_refuses_foreign_observer() -> None:
    g = Graph()
    g.on_mutation = lambda event: None
    with pytest.raises(ValueError):
        GraphEventLog().attach(g)


def test_entries_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    g = Graph()
    GraphEventLog().attach(g)
    with caplog.at_level(logging.INFO, logger="event_log"):
        g.addVertex(7)
    assert "add_vertex(7)" in caplog.text


def test_clear() -> None:
    g = Graph()
    log = GraphEventLog()
    log.attach(g)
    g.addVertex(1)
    log.clear()
    assert log.entries() == []
    g.addVertex(2)
    assert log.entries()[0].sequence == 1
