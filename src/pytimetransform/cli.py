"""Command-line collaborator for transform_time."""

from __future__ import annotations

import logging
from datetime import timezone

import typer

from pytimetransform import transform_time
from pytimetransform._types import Failure
from pytimetransform.engine import DateutilEngine


def cli() -> typer.Typer:
    """Create and configure the pytimetransform Typer app."""
    app = typer.Typer(
        name="pytimetransform",
        help="Convert between Unix timestamps and date strings",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def transform(
        text: str = typer.Argument(..., help="Timestamp or date string to convert"),
        utc: bool = typer.Option(False, "--utc", help="Use UTC instead of the local zone"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    ) -> None:
        """Convert TEXT to its timestamp or date-string counterpart."""
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(message)s")

        engine = DateutilEngine(tz=timezone.utc) if utc else None
        result = transform_time(text, engine=engine)
        if isinstance(result, Failure):
            typer.echo(result.error, err=True)
            raise typer.Exit(code=1)
        typer.echo(result.result)

    return app


def main() -> None:
    cli()()
