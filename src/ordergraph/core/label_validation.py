"""Vertex label validation.

Single source of truth for what counts as a usable vertex label, shared by
every LabeledDigraph operation that accepts one.

Label Grammar:
    Any non-empty ``str``. No trimming or character restrictions are
    applied here; task files are trimmed by the loader before labels reach
    the graph.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

from typing import TypeIs

from ordergraph.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = [
    "is_valid_label",
    "require_label",
]


def is_valid_label(label: object) -> TypeIs[str]:
    """Check whether a value can be used as a vertex label.

    Args:
        label: Candidate value

    Returns:
        True if label is a non-empty string
    """
    return isinstance(label, str) and label != ""


def require_label(label: object) -> str:
    """Return label unchanged, or raise if it is not a usable vertex label.

    Args:
        label: Candidate value

    Returns:
        The label, narrowed to ``str``

    Raises:
        InvalidArgumentError: If label is None, empty, or not a string
    """
    if not is_valid_label(label):
        raise InvalidArgumentError(ErrorTemplate.invalid_label(label))
    return label
