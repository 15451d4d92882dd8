"""Task file loading.

A task file is line oriented. Each line holds TAB-separated fields; the first
field names a task and the remaining fields name its prerequisites:

    compile<TAB>fetch<TAB>configure
    test<TAB>compile

Every distinct field becomes a vertex (in order of first appearance) and each
prerequisite gets an edge prerequisite -> task, so a topological order lists
prerequisites before the tasks that need them.

Components:
    TaskRecord - Immutable parsed line
    parse_task_lines - Split and trim raw lines into TaskRecords
    build_task_graph - Turn TaskRecords into a LabeledDigraph
    load_task_graph - Read a file from disk and build its graph

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path

from ordergraph.constants import DEFAULT_ENCODING, TASK_FIELD_DELIMITER
from ordergraph.diagnostics import ErrorTemplate, FileAccessError, GraphError
from ordergraph.digraph import LabeledDigraph

__all__ = [
    "TaskRecord",
    "build_task_graph",
    "load_task_graph",
    "parse_task_lines",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskRecord:
    """One parsed task line.

    Attributes:
        task: Task named in the first field
        prerequisites: Remaining fields, in file order
        line: 1-indexed source line number
    """

    task: str
    prerequisites: tuple[str, ...] = ()
    line: int = 0

    @property
    def labels(self) -> tuple[str, ...]:
        """Task followed by its prerequisites."""
        return (self.task, *self.prerequisites)


def parse_task_lines(lines: Iterable[str]) -> list[TaskRecord]:
    """Split raw lines into TaskRecords.

    Fields are split on TAB and trimmed. Empty fields (doubled tabs,
    trailing tabs) are dropped, and lines with no fields left are skipped.

    Args:
        lines: Raw text lines, with or without trailing newlines

    Returns:
        One record per non-blank line
    """
    records: list[TaskRecord] = []
    for line_number, raw in enumerate(lines, start=1):
        fields = [field.strip() for field in raw.split(TASK_FIELD_DELIMITER)]
        fields = [field for field in fields if field]
        if not fields:
            continue
        records.append(
            TaskRecord(task=fields[0], prerequisites=tuple(fields[1:]), line=line_number)
        )
    return records


def build_task_graph(
    records: Iterable[TaskRecord],
    *,
    source_name: str | None = None,
) -> LabeledDigraph:
    """Build a dependency graph from parsed task records.

    Graph errors raised while adding a record's edges are re-raised with
    the record's line (and source_name, when given) on their diagnostic.

    Args:
        records: Parsed task lines
        source_name: Task file name for error locations

    Returns:
        Graph with an edge prerequisite -> task for every listed prerequisite

    Raises:
        SelfLoopError: If a task lists itself as a prerequisite
    """
    graph = LabeledDigraph()
    for record in records:
        for label in record.labels:
            if not graph.has_vertex(label):
                graph.add_vertex(label)
                logger.debug("Registered task: %s (line %d)", label, record.line)

        for prerequisite in record.prerequisites:
            try:
                graph.add_edge(prerequisite, record.task)
            except GraphError as e:
                if e.diagnostic is None:
                    raise
                located = replace(e.diagnostic, source_path=source_name, line=record.line)
                raise type(e)(located) from e

    return graph


def load_task_graph(path: str | Path) -> LabeledDigraph:
    """Read a task file and build its dependency graph.

    Args:
        path: Task file location

    Returns:
        Dependency graph for the file's tasks

    Raises:
        FileAccessError: If the file is missing or cannot be read/decoded
        SelfLoopError: If a task lists itself as a prerequisite
    """
    display = str(path)
    try:
        text = Path(path).read_text(encoding=DEFAULT_ENCODING)
    except FileNotFoundError as e:
        logger.error("Task file not found: %s", display)
        raise FileAccessError(ErrorTemplate.file_not_found(display), path=display) from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read task file %s: %s", display, e)
        raise FileAccessError(
            ErrorTemplate.file_unreadable(display, str(e)), path=display
        ) from e

    # Only newlines end a line; form feeds and other separators stay in the text.
    lines = text.split("\n")
    graph = build_task_graph(parse_task_lines(lines), source_name=display)
    logger.info(
        "Loaded %d tasks with %d dependencies from %s",
        graph.size(),
        graph.edge_count,
        display,
    )
    return graph
