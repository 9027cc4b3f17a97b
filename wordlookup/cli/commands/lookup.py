"""Commands that query the dictionary service through the aggregator client."""

from enum import Enum

import typer
from rich.markup import escape

from wordlookup.cli.utils.async_runner import run_async
from wordlookup.cli.utils.console import console, entries_table, error_console
from wordlookup.services.aggregator import (
    AggregatorClient,
    ContractViolationError,
    DictionaryTransportError,
)
from wordlookup.services.dictionary import Entry


class MatchKind(str, Enum):
    prefix = "prefix"
    suffix = "suffix"
    contains = "contains"
    double = "double"


def define(
    word: str = typer.Argument(..., help="Word to look up"),
    url: str = typer.Option(None, "--url", help="Dictionary service URL (default from settings)"),
) -> None:
    """Look up the definition of a word."""
    client = AggregatorClient(base_url=url)
    try:
        entry = run_async(client.get_definition_for(word))
    except (DictionaryTransportError, ContractViolationError) as e:
        error_console.print(f"[error]{escape(str(e))}[/]")
        raise typer.Exit(1) from None

    if entry is None:
        console.print(f"[warning]Unknown word:[/] [word]{escape(word)}[/]")
        raise typer.Exit(1)

    console.print(f"[word]{escape(entry.word)}[/]: {escape(entry.definition)}")


def match(
    kind: MatchKind = typer.Argument(..., help="Kind of pattern query"),
    pattern: str = typer.Argument("", help="Pattern (ignored for 'double')"),
    url: str = typer.Option(None, "--url", help="Dictionary service URL (default from settings)"),
) -> None:
    """Find words matching a pattern."""
    client = AggregatorClient(base_url=url)
    try:
        entries = run_async(_match(client, kind, pattern))
    except (DictionaryTransportError, ContractViolationError) as e:
        error_console.print(f"[error]{escape(str(e))}[/]")
        raise typer.Exit(1) from None

    if not entries:
        console.print("[dim]No matching words.[/]")
        return

    console.print(entries_table(entries, title=f"{len(entries)} matching words"))


async def _match(client: AggregatorClient, kind: MatchKind, pattern: str) -> list[Entry]:
    if kind is MatchKind.prefix:
        return await client.get_words_starting_with(pattern)
    if kind is MatchKind.suffix:
        return await client.get_words_ending_with(pattern)
    if kind is MatchKind.contains:
        return await client.get_words_that_contain(pattern)
    return await client.get_words_that_contain_consecutive_letters()
