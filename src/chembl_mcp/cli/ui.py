"""
CLI output components.

Design intent: auditable, readable output that stays meaningful in
grayscale. Results and tables go to stdout; notes and errors go to stderr so
`chembl-mcp call ... > out.json` captures only the payload.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

# =============================================================================
# COLOR PALETTE
# =============================================================================

COLORS = {
    "primary": "#5CC8FF",      # headers, tool names
    "secondary": "#7AA2F7",    # identifiers
    "muted": "#6B7280",        # secondary info
    "error": "#F7768E",
}

S_PRIMARY = f"bold {COLORS['primary']}"
S_SECONDARY = COLORS["secondary"]
S_MUTED = f"dim {COLORS['muted']}"
S_ERROR = COLORS["error"]

console = Console()
err_console = Console(stderr=True)

RULE_WIDTH = 44


def rule(target: Console = console) -> None:
    """Print a horizontal rule using box drawing characters."""
    target.print("─" * RULE_WIDTH, style=S_MUTED)


def print_header(title: str, subtitle: str | None = None, target: Console = console) -> None:
    """
    Print a section header.

    Headers are uppercase, minimal, and informational only.
    """
    target.print()
    target.print(title.upper(), style=S_PRIMARY)
    if subtitle:
        target.print(subtitle, style=S_MUTED)
    rule(target)


def print_info(message: str) -> None:
    err_console.print(f"  {message}", style=S_MUTED)


def print_error_block(error_name: str, message: str, resolution: str | None = None) -> None:
    """
    Print a structured error block to stderr.

    Error names are PascalCase. No stack traces.
    """
    err_console.print()
    err_console.print(f"[{S_ERROR}]Error:[/] {error_name}")
    err_console.print()
    err_console.print(message, markup=False)
    if resolution:
        err_console.print()
        err_console.print("Resolution:")
        err_console.print(f"  {resolution}")
    err_console.print()


def print_json(text: str) -> None:
    """Pretty-print a JSON document to stdout."""
    console.print_json(text)


def create_table(title: str | None = None) -> Table:
    """
    Create a minimal table.

    No decorative boxes. Clean alignment.
    """
    return Table(
        title=title,
        box=None,
        show_header=True,
        header_style=S_MUTED,
        padding=(0, 2),
        collapse_padding=True,
    )
