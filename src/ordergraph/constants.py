"""Shared constants for ordergraph.

Single source of truth for sizing and formatting constants used across the
core graph structure and the task-file collaborator layer. Placing them here
keeps ``digraph`` and ``tasks`` free of cross imports.

Constants are grouped by domain:
- Storage: adjacency slot allocation for LabeledDigraph
- Task files: line-oriented input format
- Reports: console output layout

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Storage
    "INITIAL_VERTEX_CAPACITY",
    "CAPACITY_GROWTH_FACTOR",
    # Task files
    "TASK_FIELD_DELIMITER",
    "DEFAULT_ENCODING",
    # Reports
    "COMPONENT_MEMBER_SEPARATOR",
    "REPORT_INDENT",
]

# ============================================================================
# STORAGE
# ============================================================================

# Adjacency slots allocated by an empty graph. Arbitrary but small; the slot
# array doubles whenever every slot is assigned to a vertex.
INITIAL_VERTEX_CAPACITY: int = 20

# Multiplier applied to the slot array when capacity is exhausted.
CAPACITY_GROWTH_FACTOR: int = 2

# ============================================================================
# TASK FILES
# ============================================================================

# Fields in a task line: task<TAB>prerequisite<TAB>prerequisite...
TASK_FIELD_DELIMITER: str = "\t"

DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# REPORTS
# ============================================================================

# Members of one strongly connected component are joined with this.
COMPONENT_MEMBER_SEPARATOR: str = ", "

# Leading whitespace for each numbered report step.
REPORT_INDENT: str = "  "
