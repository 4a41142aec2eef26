# errors.py

from typing import Optional


class GraphError(Exception):
    """Base class for recoverable graph editing errors.

    Every subclass carries a fixed, user-facing message so drivers can
    print ``str(error)`` directly.
    """
    message = "Graph operation failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class NegativeLabelError(GraphError):
    """A label was zero or negative where a positive label is required."""
    message = "Label number is negative."


class DuplicateLabelError(GraphError):
    """A vertex with the requested label already exists."""
    message = "Label number has already existed in the graph."


UsedLabelError = DuplicateLabelError


class MissingLabelError(GraphError):
    """No vertex with the referenced label exists."""
    message = "No vertex with this label currently exists in the graph."


class GraphFileCorruptedError(GraphError):
    """A saved graph could not be read or rebuilt."""
    message = "This graph file is possibly corrupted."
