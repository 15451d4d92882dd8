"""Quickstart example for ordergraph.

This example demonstrates building a graph by hand, analyzing it, and
running the task-file pipeline the command line tool uses.

Run from the repository root:
    python examples/quickstart.py
"""

from pathlib import Path

from ordergraph import (
    LabeledDigraph,
    SelfLoopError,
    has_cycle,
    strongly_connected_components,
    topological_order,
)
from ordergraph.tasks import load_task_graph, order_tasks, render_report

DATA = Path(__file__).parent / "data"

# Example 1: Acyclic graph
print("=" * 50)
print("Example 1: Topological Order")
print("=" * 50)

graph = LabeledDigraph()
for name in ("fetch", "compile", "test"):
    graph.add_vertex(name)
graph.add_edge("fetch", "compile")
graph.add_edge("compile", "test")

print(has_cycle(graph))
# Output: False
print(topological_order(graph))
# Output: ['fetch', 'compile', 'test']

# Example 2: Mutual dependencies
print("\n" + "=" * 50)
print("Example 2: Strongly Connected Components")
print("=" * 50)

graph.add_vertex("lint")
graph.add_edge("test", "fetch")
graph.add_edge("test", "lint")

print(has_cycle(graph))
# Output: True
for component in strongly_connected_components(graph):
    print(sorted(component))
# Output:
# ['compile', 'fetch', 'test']
# ['lint']

# Example 3: Errors carry diagnostics
print("\n" + "=" * 50)
print("Example 3: Diagnostics")
print("=" * 50)

try:
    graph.add_edge("lint", "lint")
except SelfLoopError as e:
    assert e.diagnostic is not None
    print(e.diagnostic.format_error())
# Output:
# error[SELF_LOOP]: Cannot add an edge from 'lint' to itself
#   = vertex: lint
#   = help: Remove 'lint' from its own prerequisite list

# Example 4: Task files
print("\n" + "=" * 50)
print("Example 4: Task Files")
print("=" * 50)

for task_file in ("build.tasks", "laundry.tasks"):
    path = DATA / task_file
    print(render_report(path.name, order_tasks(load_task_graph(path))), end="")
