"""CLI utility modules."""

from wordlookup.cli.utils.async_runner import run_async
from wordlookup.cli.utils.console import console, error_console, entries_table

__all__ = ["run_async", "console", "error_console", "entries_table"]
