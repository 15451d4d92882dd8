"""Diagnostic system for ordergraph errors.

Provides structured error diagnostics with codes, hints and vertex context.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DuplicateVertexError,
    FileAccessError,
    GraphError,
    InvalidArgumentError,
    LocaleError,
    OrderGraphError,
    SelfLoopError,
    UnknownVertexError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateVertexError",
    "ErrorTemplate",
    "FileAccessError",
    "GraphError",
    "InvalidArgumentError",
    "LocaleError",
    "OrderGraphError",
    "OutputFormat",
    "SelfLoopError",
    "UnknownVertexError",
]
