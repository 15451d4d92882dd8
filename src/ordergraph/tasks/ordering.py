"""Task ordering strategy selection.

Chooses between a plain topological sort (acyclic task sets) and a
topologically ordered list of strongly connected components (task sets with
mutual dependencies).

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ordergraph.analysis import (
    has_cycle,
    strongly_connected_component_lists,
    topological_order,
)
from ordergraph.digraph import LabeledDigraph

__all__ = ["TaskOrdering", "order_tasks"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskOrdering:
    """Immutable result of ordering a task graph.

    Exactly one of order/components is populated, depending on has_cycle.

    Attributes:
        task_count: Number of tasks in the graph
        has_cycle: True if some tasks are mutually dependent
        order: Tasks in dependency order (acyclic case)
        components: Groups of mutually dependent tasks in dependency order
            (cyclic case)
    """

    task_count: int
    has_cycle: bool
    order: tuple[str, ...] = ()
    components: tuple[tuple[str, ...], ...] = ()

    @property
    def steps(self) -> tuple[tuple[str, ...], ...]:
        """Numbered report steps; singletons in the acyclic case."""
        if self.has_cycle:
            return self.components
        return tuple((task,) for task in self.order)


def order_tasks(graph: LabeledDigraph) -> TaskOrdering:
    """Order a task graph, grouping mutually dependent tasks when needed.

    Args:
        graph: Graph with edges prerequisite -> task

    Returns:
        TaskOrdering with either a flat order or ordered components
    """
    if has_cycle(graph):
        components = tuple(
            tuple(component) for component in strongly_connected_component_lists(graph)
        )
        logger.debug(
            "Cycle detected: %d tasks condensed into %d components",
            graph.size(),
            len(components),
        )
        return TaskOrdering(task_count=graph.size(), has_cycle=True, components=components)

    order = tuple(topological_order(graph))
    logger.debug("No cycles: topologically sorted %d tasks", len(order))
    return TaskOrdering(task_count=graph.size(), has_cycle=False, order=order)
