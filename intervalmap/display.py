"""Rich terminal display helpers for interval map output."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from intervalmap.core import IntervalMap
from intervalmap.models import CanonicalityResult, FuzzReport

_console = Console()

# Mismatch rows shown before the table is truncated.
MAX_MISMATCH_ROWS = 20


def display_breakpoints(
    imap: IntervalMap, title: str = "Breakpoints", console: Console | None = None
) -> None:
    """Print a table of the map's breakpoints and the interval each one covers.

    Args:
        imap: Interval map to display.
        title: Table title.
        console: Optional console override for tests.
    """
    c = console or _console
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Interval")
    table.add_column("Value")

    pairs = imap.breakpoints
    for index, (key, value) in enumerate(pairs):
        upper = repr(pairs[index + 1][0]) if index + 1 < len(pairs) else "+inf"
        table.add_row(str(index), escape(f"[{key!r}, {upper})"), escape(repr(value)))
    c.print(table)


def display_lookups(
    lookups: list[tuple[Any, Any]], console: Console | None = None
) -> None:
    """Print looked-up values for probe keys.

    Args:
        lookups: ``(key, value)`` pairs from ``probe_lookups``.
        console: Optional console override for tests.
    """
    c = console or _console
    if not lookups:
        return
    table = Table(title="Lookups")
    table.add_column("Key", justify="right")
    table.add_column("Value")
    for key, value in lookups:
        table.add_row(escape(repr(key)), escape(repr(value)))
    c.print(table)


def display_check_result(
    result: CanonicalityResult, console: Console | None = None
) -> None:
    """Print a canonical-form check result with its violations.

    Args:
        result: Result from ``check_canonical``.
        console: Optional console override for tests.
    """
    c = console or _console
    count = result.metrics.get("breakpoints", 0)
    if result.passed:
        c.print(f"[green]Canonical: {count} breakpoints[/green]")
        return
    c.print(f"[bold red]Not canonical: {count} breakpoints[/bold red]")
    for violation in result.violations:
        c.print(f"[red]- {escape(violation)}[/red]")


def display_differences(differences: list[str], console: Console | None = None) -> None:
    """Print expected-versus-actual breakpoint differences.

    Args:
        differences: Messages from ``compare_expected``.
        console: Optional console override for tests.
    """
    c = console or _console
    if not differences:
        c.print("[green]Breakpoints match the expected sequence[/green]")
        return
    c.print("[bold red]Breakpoints differ from the expected sequence[/bold red]")
    for difference in differences:
        c.print(f"[red]- {escape(difference)}[/red]")


def display_fuzz_report(report: FuzzReport, console: Console | None = None) -> None:
    """Print a summary panel and any mismatches of a fuzz run.

    Args:
        report: Report from ``run_fuzz``.
        console: Optional console override for tests.
    """
    c = console or _console
    summary = (
        f"seed: {report.seed}\n"
        f"rounds: {report.rounds}\n"
        f"assigns: {report.assigns} (empty: {report.empty_assigns})\n"
        f"lookups checked: {report.checks}\n"
        f"max breakpoints: {report.max_breakpoints}"
    )
    border = "green" if report.passed else "red"
    c.print(Panel(summary, title="Fuzz Report", border_style=border))

    if report.mismatches:
        table = Table(title=f"Mismatches ({len(report.mismatches)})")
        table.add_column("Round", justify="right")
        table.add_column("Key", justify="right")
        table.add_column("Expected")
        table.add_column("Actual")
        for mismatch in report.mismatches[:MAX_MISMATCH_ROWS]:
            table.add_row(
                str(mismatch.round), str(mismatch.key),
                repr(mismatch.expected), repr(mismatch.actual),
            )
        c.print(table)

    for violation in report.canonicity_violations[:MAX_MISMATCH_ROWS]:
        c.print(f"[red]- {escape(violation)}[/red]")


def display_error(message: str, console: Console | None = None) -> None:
    """Print an error message in red.

    Args:
        message: Error message to display.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"[red]Error: {message}[/red]")


def display_spinner_context(message: str):
    """Return a spinner context manager for status output.

    Args:
        message: Status message shown while work is in progress.

    Returns:
        Rich status context manager.
    """
    return _console.status(message)
