"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(ErrorTemplate.unknown_vertex("deploy")))
        error[UNKNOWN_VERTEX]: Vertex 'deploy' does not exist
          = vertex: deploy
          = help: Insert both endpoints with add_vertex() before adding edges

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unknown_vertex("deploy")))
        UNKNOWN_VERTEX: Vertex 'deploy' does not exist
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[FILE_NOT_FOUND]: Couldn't open file "tasks.txt".
              --> tasks.txt
              = help: Check the path and working directory
        """
        label = "\033[1;31merror\033[0m" if self.color else "error"  # Bold red

        parts = [f"{label}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.source_path:
            if diagnostic.line is not None:
                parts.append(f"  --> {diagnostic.source_path}:{diagnostic.line}")
            else:
                parts.append(f"  --> {diagnostic.source_path}")

        if diagnostic.vertex:
            parts.append(f"  = vertex: {diagnostic.vertex}")

        if diagnostic.related_vertex and diagnostic.related_vertex != diagnostic.vertex:
            parts.append(f"  = related: {diagnostic.related_vertex}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            SELF_LOOP: Cannot add an edge from 'build' to itself
        """
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "SELF_LOOP", "code_value": 2003, "message": "..."}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
        }

        # Optional fields only when present
        if diagnostic.vertex:
            data["vertex"] = diagnostic.vertex

        if diagnostic.related_vertex:
            data["related_vertex"] = diagnostic.related_vertex

        if diagnostic.source_path:
            data["source_path"] = diagnostic.source_path

        if diagnostic.line is not None:
            data["line"] = diagnostic.line

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)
