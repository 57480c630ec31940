"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that knows
nothing about domain logic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from cite_formatter.domain.models.settings import UserSettings

console = Console()
error_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Success / error output
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Cite Formatter") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str, details: list[str] | None = None) -> None:
    """Print a red error message, with optional bullet details."""
    error_console.print(f"[bold red]❌ {message}[/]")
    for detail in details or []:
        error_console.print(f"  • {detail}", markup=False)


# ---------------------------------------------------------------------------
# Citations
# ---------------------------------------------------------------------------


def citation_output(citation: str, style: str, highlight: bool = False) -> None:
    """Print a citation; BibTeX is syntax-highlighted when ``highlight`` is set."""
    if highlight and style == "bibtex":
        console.print(Syntax(citation, "bibtex", theme="monokai", word_wrap=True))
    else:
        # Brackets in citations ("[Online]") must not be read as Rich markup
        console.print(citation, markup=False, highlight=False, soft_wrap=True)


def styles_table(styles: list[str], source_types: list[str]) -> None:
    """Print the supported styles and source types."""
    table = Table(title="📚 Supported citation styles", show_header=True, border_style="blue")
    table.add_column("Style", style="cyan")
    table.add_column("Source types", style="green")
    for style in styles:
        table.add_row(style, ", ".join(source_types))
    console.print(table)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def settings_table(settings: UserSettings, path: str) -> None:
    """Print the active user settings."""
    table = Table(title="⚙️  Active settings", show_header=True, border_style="blue")
    table.add_column("Setting", style="cyan", width=22)
    table.add_column("Value", style="green")
    for name, value in settings.model_dump(mode="json").items():
        table.add_row(name, str(value))
    console.print(table)
    console.print(f"[dim]{path}[/]")
