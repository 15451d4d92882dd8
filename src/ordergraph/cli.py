"""Command line entry point.

Usage:
    ordergraph [-v] [--locale LOCALE] [--error-format {rust,simple,json}]
               [--color {auto,always,never}] TASK_FILE

Loads TASK_FILE, orders its tasks and prints the report on stdout. Errors
are written to stderr as formatted diagnostics.

Exit status:
    0 - report printed
    1 - missing argument, unreadable file, invalid task data or unknown locale

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ordergraph.core.babel_compat import BabelImportError
from ordergraph.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    OrderGraphError,
    OutputFormat,
)
from ordergraph.tasks import ReportOptions, load_task_graph, order_tasks, render_report

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ordergraph command."""
    from ordergraph import __version__  # noqa: PLC0415 - circular

    parser = argparse.ArgumentParser(
        prog="ordergraph",
        description=(
            "Order the tasks in a TAB-separated task file so that every task "
            "comes after its prerequisites. Mutually dependent tasks are grouped."
        ),
    )
    # Optional at parser level so a missing path gets the same diagnostic
    # treatment as every other failure.
    parser.add_argument("path", nargs="?", help="Task file (task<TAB>prerequisite...)")
    parser.add_argument(
        "--locale",
        default=None,
        help="Render numbers for this CLDR locale (requires ordergraph[babel])",
    )
    parser.add_argument(
        "--error-format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic style on stderr (default: rust)",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color error labels (default: auto, when stderr is a terminal)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _use_color(choice: str) -> bool:
    if choice == "auto":
        return sys.stderr.isatty()
    return choice == "always"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ordergraph command.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.error_format),
        color=_use_color(args.color),
    )

    if not args.path:
        print(formatter.format(ErrorTemplate.missing_argument()), file=sys.stderr)
        return EXIT_FAILURE

    try:
        graph = load_task_graph(args.path)
        ordering = order_tasks(graph)
        report = render_report(args.path, ordering, ReportOptions(locale=args.locale))
    except OrderGraphError as e:
        if e.diagnostic is not None:
            print(formatter.format(e.diagnostic), file=sys.stderr)
        else:
            print(str(e), file=sys.stderr)
        return EXIT_FAILURE
    except BabelImportError as e:
        print(str(e), file=sys.stderr)
        return EXIT_FAILURE

    sys.stdout.write(report)
    logger.info("Reported %d steps for %s", len(ordering.steps), args.path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
