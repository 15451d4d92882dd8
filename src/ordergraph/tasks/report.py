"""Console report rendering for task orderings.

Output, acyclic case:

    The file "build.tasks" contains 3 tasks, with no cycles. You must:
      1. fetch
      2. compile
      3. test

Output, cyclic case (each step is one group of mutually dependent tasks):

    The file "loop.tasks" contains 4 tasks, some of which are mutually dependent. You must:
      1. a, b, c
      2. d

With ReportOptions.locale set, the task count and step numbers are rendered
with Babel's CLDR number formatting for that locale.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ordergraph.constants import COMPONENT_MEMBER_SEPARATOR, REPORT_INDENT
from ordergraph.core.babel_compat import get_babel_numbers, get_unknown_locale_error
from ordergraph.diagnostics import ErrorTemplate, LocaleError
from ordergraph.tasks.ordering import TaskOrdering

__all__ = ["ReportOptions", "render_report", "report_lines"]


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """Report layout options.

    Attributes:
        locale: Babel locale code for numerals (None = plain ASCII digits)
        indent: Prefix for each numbered step
        separator: Joins members of one mutually dependent group
    """

    locale: str | None = None
    indent: str = REPORT_INDENT
    separator: str = COMPONENT_MEMBER_SEPARATOR


def _number_formatter(locale: str | None) -> Callable[[int], str]:
    if locale is None:
        return str
    numbers = get_babel_numbers()
    unknown_locale_error = get_unknown_locale_error()
    try:
        numbers.format_decimal(0, locale=locale)
    except (unknown_locale_error, ValueError) as e:
        raise LocaleError(ErrorTemplate.unknown_locale(locale), locale_code=locale) from e
    return lambda value: numbers.format_decimal(value, locale=locale)


def report_lines(
    source_name: str,
    ordering: TaskOrdering,
    options: ReportOptions | None = None,
) -> list[str]:
    """Render a report as a list of lines (no trailing newlines).

    Args:
        source_name: File name shown in the headline
        ordering: Result of order_tasks()
        options: Layout options (defaults to ReportOptions())

    Returns:
        Headline followed by one numbered line per step

    Raises:
        BabelImportError: If options.locale is set and Babel is not installed
        LocaleError: If options.locale is not a locale Babel knows
    """
    options = options or ReportOptions()
    number = _number_formatter(options.locale)

    count = number(ordering.task_count)
    if ordering.has_cycle:
        headline = (
            f'The file "{source_name}" contains {count} tasks, '
            "some of which are mutually dependent. You must:"
        )
    else:
        headline = f'The file "{source_name}" contains {count} tasks, with no cycles. You must:'

    lines = [headline]
    for position, step in enumerate(ordering.steps, start=1):
        lines.append(f"{options.indent}{number(position)}. {options.separator.join(step)}")
    return lines


def render_report(
    source_name: str,
    ordering: TaskOrdering,
    options: ReportOptions | None = None,
) -> str:
    """Render a report as a single newline-terminated string."""
    return "\n".join(report_lines(source_name, ordering, options)) + "\n"
