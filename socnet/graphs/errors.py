"""
Exceptions raised by graph operations.

``UnknownNodeError`` subclasses ``KeyError`` and ``InvalidGraphKindError``
subclasses ``ValueError`` so callers that already catch the builtin
exceptions keep working.
"""


class GraphError(Exception):
    """Base class for socnet graph errors."""


class UnknownNodeError(GraphError, KeyError):
    """A referenced node is not in the graph."""

    def __init__(self, node, message=None):
        self.node = node
        super().__init__(message or f"Node {node!r} not in graph")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class InvalidGraphKindError(GraphError, ValueError):
    """An undirected-only algorithm was given a directed graph."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"{algorithm} requires an undirected graph, got a directed graph")
