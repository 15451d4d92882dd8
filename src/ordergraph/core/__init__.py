"""Core utilities shared by the graph engine and the task layer.

Keeps the import graph acyclic:

    diagnostics <- core <- digraph <- analysis <- tasks

Exports:
    is_valid_label: Predicate for usable vertex labels
    require_label: Validate a vertex label or raise InvalidArgumentError

Python 3.13+.
"""

from .label_validation import is_valid_label, require_label

__all__ = ["is_valid_label", "require_label"]
