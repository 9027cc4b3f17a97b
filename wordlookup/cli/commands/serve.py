"""Commands that run the HTTP services."""

import typer

from wordlookup import aggregator_app, dictionary_app

app = typer.Typer(
    name="serve",
    help="Run one of the HTTP services",
    no_args_is_help=True,
)


@app.command(name="dictionary")
def serve_dictionary(
    host: str = typer.Option(None, "--host", help="Bind address (default from settings)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default from settings)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the dictionary service."""
    dictionary_app.run(reload=reload, host=host, port=port)


@app.command(name="aggregator")
def serve_aggregator(
    host: str = typer.Option(None, "--host", help="Bind address (default from settings)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default from settings)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the aggregator service."""
    aggregator_app.run(reload=reload, host=host, port=port)
