"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable and documents all error cases in one place.
    """

    @staticmethod
    def invalid_label(label: object) -> Diagnostic:
        """Vertex label is None, empty, or not a string.

        Args:
            label: The rejected value

        Returns:
            Diagnostic for INVALID_LABEL
        """
        if label is None:
            msg = "Vertex name cannot be None"
        elif isinstance(label, str):
            msg = "Vertex name cannot be empty"
        else:
            msg = f"Vertex name must be a string, got {type(label).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LABEL,
            message=msg,
            hint="Vertex labels are non-empty strings",
        )

    @staticmethod
    def invalid_graph(graph: object) -> Diagnostic:
        """Analyzer received something other than a LabeledDigraph.

        Args:
            graph: The rejected value

        Returns:
            Diagnostic for INVALID_GRAPH
        """
        msg = f"Expected a LabeledDigraph, got {type(graph).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_GRAPH,
            message=msg,
            hint="Build the graph with LabeledDigraph before analyzing it",
        )

    @staticmethod
    def duplicate_vertex(label: str) -> Diagnostic:
        """Vertex inserted twice.

        Args:
            label: The vertex label already present

        Returns:
            Diagnostic for DUPLICATE_VERTEX
        """
        msg = f"Vertex '{label}' already exists"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_VERTEX,
            message=msg,
            hint="Check has_vertex() before inserting",
            vertex=label,
        )

    @staticmethod
    def unknown_vertex(label: str) -> Diagnostic:
        """Reference to a vertex that was never inserted.

        Args:
            label: The missing vertex label

        Returns:
            Diagnostic for UNKNOWN_VERTEX
        """
        msg = f"Vertex '{label}' does not exist"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_VERTEX,
            message=msg,
            hint="Insert both endpoints with add_vertex() before adding edges",
            vertex=label,
        )

    @staticmethod
    def self_loop(label: str) -> Diagnostic:
        """Edge from a vertex to itself.

        Args:
            label: The vertex used as both endpoints

        Returns:
            Diagnostic for SELF_LOOP
        """
        msg = f"Cannot add an edge from '{label}' to itself"
        return Diagnostic(
            code=DiagnosticCode.SELF_LOOP,
            message=msg,
            hint=f"Remove '{label}' from its own prerequisite list",
            vertex=label,
            related_vertex=label,
        )

    @staticmethod
    def file_not_found(path: str) -> Diagnostic:
        """Task file does not exist.

        Args:
            path: The path as given by the caller

        Returns:
            Diagnostic for FILE_NOT_FOUND
        """
        msg = f'Couldn\'t open file "{path}".'
        return Diagnostic(
            code=DiagnosticCode.FILE_NOT_FOUND,
            message=msg,
            hint="Check the path and working directory",
            source_path=path,
        )

    @staticmethod
    def file_unreadable(path: str, reason: str) -> Diagnostic:
        """Task file exists but could not be read or decoded.

        Args:
            path: The path as given by the caller
            reason: Underlying OS or decoding error text

        Returns:
            Diagnostic for FILE_UNREADABLE
        """
        msg = f'Couldn\'t open file "{path}".'
        return Diagnostic(
            code=DiagnosticCode.FILE_UNREADABLE,
            message=msg,
            hint=reason,
            source_path=path,
        )

    @staticmethod
    def missing_argument() -> Diagnostic:
        """No task file given on the command line.

        Returns:
            Diagnostic for MISSING_ARGUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_ARGUMENT,
            message="Please enter a file name!",
            hint="Usage: ordergraph TASK_FILE",
        )

    @staticmethod
    def unknown_locale(locale_code: str) -> Diagnostic:
        """Report locale not recognized by Babel.

        Args:
            locale_code: The locale code as given

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            hint="Use a CLDR locale identifier such as 'en_US' or 'de'",
        )
