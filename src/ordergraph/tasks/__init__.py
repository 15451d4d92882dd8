"""Task-file collaborator layer.

Reads line-oriented task files into a LabeledDigraph, chooses an ordering
strategy and renders the console report.

Components:
    load_task_graph - Read a task file into a dependency graph
    order_tasks - Topological order, or ordered components if cyclic
    render_report - Format a TaskOrdering for the console

Python 3.13+.
"""

from .loading import TaskRecord, build_task_graph, load_task_graph, parse_task_lines
from .ordering import TaskOrdering, order_tasks
from .report import ReportOptions, render_report, report_lines

__all__ = [
    "ReportOptions",
    "TaskOrdering",
    "TaskRecord",
    "build_task_graph",
    "load_task_graph",
    "order_tasks",
    "parse_task_lines",
    "render_report",
    "report_lines",
]
