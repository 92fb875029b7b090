"""
ui.py

Console output for the largest-files tool, built on Rich:
  - Logging helpers: log_info (verbose only), log_warning, log_error.
  - A section context manager that prints a header and a footer with elapsed time.
  - A table helper for result listings.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

# ---------- Console + Theme ----------

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.warn": "yellow bold",
        "ui.error": "red bold",
        "ui.header": "bold blue",
        "ui.dim": "dim",
        "ui.elapsed": "magenta",
    }
)

console = Console(theme=_THEME, highlight=False)
err_console = Console(theme=_THEME, highlight=False, stderr=True)

VERBOSE = False


def set_verbose(verbose: bool) -> None:
    """Set global verbosity. If False, log_info is suppressed."""
    global VERBOSE
    VERBOSE = bool(verbose)


# ---------- Logging ----------


def log_info(message: str) -> None:
    """Info is suppressed unless VERBOSE is True."""
    if VERBOSE:
        err_console.print(f"[ui.info]ℹ  {escape(message)}[/]")


def log_warning(message: str) -> None:
    err_console.print(f"[ui.warn]⚠️  {escape(message)}[/]")


def log_error(message: str) -> None:
    err_console.print(f"[ui.error]❌ {escape(message)}[/]")


# ---------- Sections ----------


@contextmanager
def section(title: str, enabled: Optional[bool] = None):
    """
    Prints a header before the body and a footer with elapsed time after.
    Silent unless enabled (defaults to VERBOSE).
    """
    show = VERBOSE if enabled is None else enabled
    start = time.perf_counter()
    if show:
        err_console.rule(f"[ui.header]{escape(title)} - START[/]")
    try:
        yield
    finally:
        if show:
            elapsed = time.perf_counter() - start
            err_console.rule(
                f"[ui.header]{escape(title)} - END [ui.dim](Elapsed: [ui.elapsed]{elapsed:.2f}s[/ui.elapsed])[/]"
            )


# ---------- Tables ----------


def print_table(columns: List[str], rows: List[Iterable], *, title: Optional[str] = None, right_align: Iterable[str] = ()) -> None:
    aligned = set(right_align)
    table = Table(show_header=True, header_style="bold magenta", title=escape(title) if title else None)
    for c in columns:
        table.add_column(str(c), justify="right" if c in aligned else "left", overflow="fold")
    for r in rows:
        table.add_row(*[escape(str(x)) for x in r])
    console.print(table)
