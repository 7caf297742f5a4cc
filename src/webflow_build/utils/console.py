"""Console utility functions for formatting and output."""

import click
from typing import Optional, Any

from colorama import Fore, Style, just_fix_windows_console
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

just_fix_windows_console()


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✓',
    'info': '•',
    'warning': '⚠️',
    'error': '✗',
}

BUILD_THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "muted": "dim white",
    "title": "bold cyan",
})

_console = None
_error_console = None


def _get_console(stderr: bool = False) -> Optional[Any]:
    """Get Rich console instance with lazy loading.

    Args:
        stderr: Return the console bound to standard error instead.
    """
    global _console, _error_console
    if stderr:
        if _error_console is None:
            try:
                _error_console = Console(theme=BUILD_THEME, highlight=False, stderr=True)
            except Exception:
                return None
        return _error_console
    if _console is None:
        try:
            _console = Console(theme=BUILD_THEME, highlight=False)
        except Exception:
            return None
    return _console


def _rich_echo(message: str, color: str = "white", style: str = None, bold: bool = False, symbol: str = None,
               err: bool = False):
    """Echo message with Rich formatting or colorama fallback."""
    if style is not None:
        color = style

    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_console(stderr=err)
    if console:
        try:
            style_str = f"bold {color}" if bold else color
            console.print(message, style=style_str, markup=False, soft_wrap=True)
            return
        except Exception:
            pass

    color_map = {
        'red': Fore.RED,
        'green': Fore.GREEN,
        'yellow': Fore.YELLOW,
        'blue': Fore.BLUE,
        'cyan': Fore.CYAN,
        'white': Fore.WHITE,
        'muted': Fore.WHITE,
    }
    color_code = color_map.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}", err=err)


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message on stderr with red color and bold styling."""
    _rich_echo(message, color="red", symbol=symbol, bold=True, err=True)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with cyan color."""
    _rich_echo(message, color="cyan", symbol=symbol)


def _rich_blank_line(err: bool = False):
    """Print a blank line with Rich if available, otherwise use click."""
    console = _get_console(stderr=err)
    if console:
        console.print()
    else:
        click.echo(err=err)


def _rich_rule(title: str, width: int = 60):
    """Print a titled separator block like the ones framing each build."""
    _rich_echo("=" * width, color="cyan")
    _rich_echo(title, color="cyan", bold=True)
    _rich_echo("=" * width, color="cyan")


def _rich_panel(content: str, title: str = None, style: str = "cyan"):
    """Display content in a Rich panel with fallback."""
    console = _get_console()
    if console:
        try:
            console.print(Panel(Text(content), title=title, border_style=style))
            return
        except Exception:
            pass

    if title:
        click.echo(f"\n--- {title} ---")
    click.echo(content)
    if title:
        click.echo("-" * (len(title) + 8))


def _create_table(title: str, columns: list, rows: list) -> Table:
    """Create a Rich table with a bold first column.

    Args:
        title: Table title.
        columns: Column headers.
        rows: Row tuples, already formatted as strings.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        table.add_column(column, style="bold white" if index == 0 else "white")
    for row in rows:
        table.add_row(*[str(cell) for cell in row])
    return table


def _print_table(table: Table, fallback_rows: list):
    """Print a table, or plain indented rows when no console is available."""
    console = _get_console()
    if console:
        try:
            console.print(table)
            return
        except Exception:
            pass
    for row in fallback_rows:
        click.echo("  " + "  ".join(str(cell) for cell in row))
