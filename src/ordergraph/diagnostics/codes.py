"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic record carried by every
ordergraph exception.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (malformed labels, wrong graph objects)
        2000-2999: Graph structure errors (duplicate, unknown, self-loop)
        3000-3999: Task source and report errors (files, command line, locales)
    """

    # Argument errors (1000-1999)
    INVALID_LABEL = 1001
    INVALID_GRAPH = 1002

    # Graph structure errors (2000-2999)
    DUPLICATE_VERTEX = 2001
    UNKNOWN_VERTEX = 2002
    SELF_LOOP = 2003

    # Task source errors (3000-3999)
    FILE_NOT_FOUND = 3001
    FILE_UNREADABLE = 3002
    MISSING_ARGUMENT = 3003
    UNKNOWN_LOCALE = 3004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans (console output) and
    tools (JSON output).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        vertex: Vertex label the error is about (graph errors)
        related_vertex: Second vertex label for edge errors
        source_path: Task file path (task source errors)
        line: 1-indexed line in source_path, when known
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    vertex: str | None = None
    related_vertex: str | None = None
    source_path: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[SELF_LOOP]: Cannot add an edge from 'build' to itself
              = vertex: build
              = help: Remove 'build' from its own prerequisite list

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
