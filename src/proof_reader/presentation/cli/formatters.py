"""Rich formatting utilities for the CLI.

Holds all terminal rendering so the engine knows nothing about Rich.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

if TYPE_CHECKING:
    from proof_reader.domain.models.outcome import RunResult

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "proof-reader") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# Run report
# ---------------------------------------------------------------------------


def failure_lines(result: RunResult) -> list[str]:
    """One message per failing file, in path order."""
    failures = sorted(result.failures, key=lambda o: str(o.path))
    return [str(o.error) for o in failures]


def report_run(result: RunResult) -> bool:
    """Print every failure and a closing summary.

    Failure lines are printed verbatim (no markup parsing, no wrapping)
    so their bracketed descriptions survive.  Returns ``True`` if the run
    passed.
    """
    for line in failure_lines(result):
        console.print(line, style="red", markup=False, highlight=False, soft_wrap=True)

    if result.ok:
        success_panel(f"✅ {result.total} files checked, no errors found")
        return True

    error_message(f"Errors were found in {result.failed} of {result.total} files")
    return False
