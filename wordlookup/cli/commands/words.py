"""Word database commands: import and status."""

from pathlib import Path

import typer
from rich.panel import Panel
from rich.table import Table

from wordlookup.cli.utils.async_runner import run_async
from wordlookup.cli.utils.console import console, error_console
from wordlookup.config import settings
from wordlookup.database import async_session, init_db
from wordlookup.services.dictionary import Entry
from wordlookup.services.dictionary.loader import (
    SeedFileError,
    count_entries,
    import_entries,
    read_seed_file,
)


def import_file(
    path: Path = typer.Argument(..., help="JSON file: a list of {word, definition} or a word map"),
) -> None:
    """Import dictionary entries into the database."""
    try:
        entries = read_seed_file(path)
    except SeedFileError as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None

    written = run_async(_import(entries))
    console.print(f"[success]Imported {written} entries from {path}[/]")
    console.print("[dim]Restart the dictionary service to pick up the changes.[/]")


async def _import(entries: list[Entry]) -> int:
    await init_db()
    async with async_session() as session:
        written = await import_entries(session, entries)
        await session.commit()
    return written


def status() -> None:
    """Show the entry count and configured service addresses."""
    word_count = run_async(_count())

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Entries", str(word_count) if word_count else "[yellow]0[/]")
    table.add_row("Database", str(settings.db_path))
    table.add_row(
        "Dictionary service", f"{settings.dictionary_host}:{settings.dictionary_port}"
    )
    table.add_row("Aggregator", f"{settings.aggregator_host}:{settings.aggregator_port}")
    table.add_row("Aggregator upstream", settings.dictionary_service_url)

    console.print()
    console.print(Panel(table, title="[bold]WordLookup[/]", border_style="blue"))
    console.print()


async def _count() -> int:
    await init_db()
    async with async_session() as session:
        return await count_entries(session)
