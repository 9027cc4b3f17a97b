"""Main CLI application entry point."""

from enum import Enum

import typer

from wordlookup.cli.commands import lookup, serve, words
from wordlookup.logging_config import setup_logging


class LogLevelChoice(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


app = typer.Typer(
    name="wordlookup",
    help="Dictionary and aggregator word lookup services",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(
    log_level: LogLevelChoice = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Override the configured log level",
    ),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(log_level.value if log_level else None)


# Service commands
app.add_typer(serve.app, name="serve")

# Database commands
app.command(name="import", help="Import entries from a JSON file")(words.import_file)
app.command(name="status", help="Show entry count and service settings")(words.status)

# Query commands
app.command(name="define", help="Look up a word via the dictionary service")(lookup.define)
app.command(name="match", help="Run a pattern query via the dictionary service")(lookup.match)


if __name__ == "__main__":
    app()
