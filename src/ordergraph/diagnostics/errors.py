"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
Core graph operations raise GraphError subclasses; the task-file layer
raises FileAccessError.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DuplicateVertexError",
    "FileAccessError",
    "GraphError",
    "InvalidArgumentError",
    "LocaleError",
    "OrderGraphError",
    "SelfLoopError",
    "UnknownVertexError",
]


class OrderGraphError(Exception):
    """Base exception for all ordergraph errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize OrderGraphError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GraphError(OrderGraphError):
    """Failure signalled by the graph engine.

    Raised synchronously before any mutation takes place, so a graph that
    rejected an operation is unchanged.
    """


class InvalidArgumentError(GraphError):
    """Vertex label missing, empty or not a string.

    Also raised by the analyzer when handed something that is not a
    LabeledDigraph.
    """


class DuplicateVertexError(GraphError):
    """Vertex label already present in the graph."""


class UnknownVertexError(GraphError):
    """Reference to a vertex label that was never inserted."""


class SelfLoopError(GraphError):
    """Edge whose source and destination are the same vertex."""


class FileAccessError(OrderGraphError):
    """Task file missing or unreadable.

    Attributes:
        path: The path that could not be read
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize FileAccessError.

        Args:
            message: Error message string OR Diagnostic object
            path: The path that could not be read
        """
        super().__init__(message)
        self.path = path


class LocaleError(OrderGraphError):
    """Report locale not known to Babel's CLDR data.

    Attributes:
        locale_code: The rejected locale code
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The rejected locale code
        """
        super().__init__(message)
        self.locale_code = locale_code
