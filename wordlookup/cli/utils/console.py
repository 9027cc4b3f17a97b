"""Rich console configuration and helpers."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from wordlookup.services.dictionary import Entry

custom_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "word": "magenta",
        "dim": "dim",
    }
)

# Main console for output
console = Console(theme=custom_theme)

# Error console for stderr
error_console = Console(theme=custom_theme, stderr=True)


def entries_table(entries: Sequence[Entry], title: str | None = None) -> Table:
    """Render entries as a two-column table."""
    table = Table(title=title, show_lines=False)
    table.add_column("Word", style="word")
    table.add_column("Definition")
    for entry in entries:
        # repr-quote the empty word so the row is not blank
        table.add_row(escape(entry.word) or '""', escape(entry.definition))
    return table
