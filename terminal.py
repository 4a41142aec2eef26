# terminal.py

from graph import Graph
from event_log import GraphEventLog
from errors import GraphError
from persistence import (
    save_to_json, load_from_json, timestamped_filename, list_saved_graphs
)
from pathlib import Path
from typing import Iterator, Optional, TextIO
import logging
import sys

logger = logging.getLogger(__name__)

RESET_CONFIRMATION = "YES"

OPTIONS = (
    ' "av LABEL" to add a vertex to the graph, or',
    ' "rv LABEL" to remove an existing vertex from the graph, or',
    ' "ae LABEL1 LABEL2" to add an edge to the graph, or',
    ' "re LABEL1 LABEL2" to remove an existing edge from the graph, or',
    ' "vv" to view the list of labels of current vertices, or',
    ' "ve" to view the list of current edges, or',
    ' "R" to reset the graph, or',
    ' "S" to save the graph, or',
    ' "L" to load a saved graph, or',
    ' "Q" to quit.',
)


class GraphTerminal:
    """Text command loop over a Graph.

    Input is read as whitespace-separated tokens, so a command and its
    arguments may span lines.
    """

    def __init__(self, graph: Optional[Graph] = None, directory=".",
                 instream: TextIO = None, outstream: TextIO = None,
                 event_log: Optional[GraphEventLog] = None):
        self.event_log = event_log
        self.graph = None
        self.setGraph(graph if graph is not None else Graph())
        self.directory = Path(directory)
        self.instream = instream or sys.stdin
        self.outstream = outstream or sys.stdout
        self.running = True
        self._tokens = self._read_tokens()

    def _read_tokens(self) -> Iterator[str]:
        for line in self.instream:
            yield from line.split()

    def _next_token(self) -> Optional[str]:
        return next(self._tokens, None)

    def _next_int(self) -> Optional[int]:
        token = self._next_token()
        if token is None:
            return None
        try:
            return int(token)
        except ValueError:
            return None

    def setGraph(self, graph: Graph) -> None:
        # The audit log follows the active graph across resets and loads
        if self.event_log is not None:
            if self.graph is not None:
                self.event_log.detach(self.graph)
            self.event_log.attach(graph)
        self.graph = graph

    def say(self, text: str = "") -> None:
        print(text, file=self.outstream)

    # --------------------------
    # Loop
    # --------------------------
    def run(self) -> None:
        self.say("Welcome to Graph Simulator!")
        while self.running:
            self.say("Choose one of the options below:")
            for line in OPTIONS:
                self.say(line)
            self.say()
            command = self._next_token()
            if command is None:
                # End of input behaves like Q
                break
            self.execute(command)
            self.say()

    def execute(self, command: str) -> None:
        handlers = {
            "av": self.addVertex,
            "rv": self.removeVertex,
            "ae": self.addEdge,
            "re": self.removeEdge,
            "vv": self.listVertices,
            "ve": self.listEdges,
            "R": self.resetGraph,
            "S": self.saveGraph,
            "L": self.loadGraph,
            "Q": self.quit,
        }
        handler = handlers.get(command)
        if handler is None:
            self.say("Invalid command.")
            return
        try:
            handler()
        except GraphError as e:
            self.say(str(e))

    # --------------------------
    # Commands
    # --------------------------
    def addVertex(self):
        label = self._next_int()
        if label is None:
            self.say("Invalid command.")
            return
        self.graph.addVertex(label)
        self.say(f"Added a vertex with label {label}.")

    def removeVertex(self):
        label = self._next_int()
        if label is None:
            self.say("Invalid command.")
            return
        self.graph.removeVertex(label)
        self.say(f"Removed a vertex with label {label}.")

    def _edge_labels(self):
        first = self._next_int()
        second = self._next_int()
        if first is None or second is None:
            self.say("Invalid command.")
            return None
        return first, second

    def addEdge(self):
        labels = self._edge_labels()
        if labels is None:
            return
        first, second = labels
        self.graph.addEdge(first, second)
        self.say(f"Added an edge from vertex with label {first} to vertex with label {second}.")

    def removeEdge(self):
        labels = self._edge_labels()
        if labels is None:
            return
        first, second = labels
        if self.graph.removeEdge(first, second):
            self.say(f"Removed an edge from vertex with label {first} to vertex with label {second}.")
        else:
            self.say("The specified edge did not exist.")

    def listVertices(self):
        self.say("The current graph has vertices with labels:")
        self.say(" ".join(str(v.getLabel()) for v in self.graph.getVertices()))

    def listEdges(self):
        self.say("The current graph has edges:")
        for e in self.graph.getEdges():
            first, second = e.key()
            self.say(f"From vertex with label {first} to vertex with label {second}.")

    def resetGraph(self):
        self.say(f'This action is irreversible. If you really intend to do this, type "{RESET_CONFIRMATION}" below:')
        if self._next_token() == RESET_CONFIRMATION:
            self.setGraph(Graph(self.graph.config))
            self.say("Operation succeeded.")
        else:
            self.say("Operation aborted.")

    def saveGraph(self):
        path = self.directory / timestamped_filename(self.graph.config)
        try:
            save_to_json(self.graph, path)
        except OSError as e:
            logger.error("saving to %s failed: %s", path, e)
            self.say("Unexpected file error.")
            return
        self.say(f"Saved current graph to file {path.name}.")

    def loadGraph(self):
        try:
            files = list_saved_graphs(self.directory, self.graph.config)
        except OSError as e:
            logger.error("listing %s failed: %s", self.directory, e)
            self.say("Unexpected file error.")
            return
        self.say(f"{len(files)} save files found.")
        if not files:
            return
        self.say(f"Type the corresponding index number (1 - {len(files)}) to load them; "
                 "type ANY other number to abort the operation:")
        for i, path in enumerate(files, start=1):
            self.say(f"{i}: {path.name}")
        index = self._next_int()
        if index is None or not 1 <= index <= len(files):
            self.say("Operation aborted.")
            return
        chosen = files[index - 1]
        self.setGraph(load_from_json(chosen, self.graph.config))
        self.say(f"Loaded graph saved in file {chosen.name}.")

    def quit(self):
        self.running = False
