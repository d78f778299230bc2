"""
Main CLI entry point using Typer.

This module defines the command-line interface for schemadoc. It provides
two commands: convert and inspect.
"""

from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from schemadoc.utils import setup_logging

from .commands import convert_command, inspect_command
from .display import print_error


app = typer.Typer(
    name="schemadoc",
    help="schemadoc - Documentation models from schema definitions",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("convert")
def convert(
    modules: Annotated[
        List[str],
        typer.Option("--module", "-m", help="Dotted module path to load schema exports from (repeatable)")
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save the models JSON")
    ] = None,
    indent: Annotated[
        int,
        typer.Option("--indent", help="JSON indentation")
    ] = 2,
    include_private: Annotated[
        bool,
        typer.Option("--include-private", help="Also export names starting with an underscore")
    ] = False,
) -> None:
    """
    Convert schema exports into documentation models.

    Example:
        schemadoc convert \\
            --module myapp.models \\
            --output docs/models.json
    """
    try:
        convert_command(
            modules=modules,
            output_path=output,
            indent=indent,
            include_private=include_private
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("inspect")
def inspect(
    modules: Annotated[
        List[str],
        typer.Option("--module", "-m", help="Dotted module path to load schema exports from (repeatable)")
    ],
    include_private: Annotated[
        bool,
        typer.Option("--include-private", help="Also export names starting with an underscore")
    ] = False,
    show_models: Annotated[
        bool,
        typer.Option("--show-models", help="Print each converted model")
    ] = False,
) -> None:
    """
    Summarize schema exports in a table.

    Example:
        schemadoc inspect --module myapp.models --show-models
    """
    try:
        inspect_command(
            modules=modules,
            include_private=include_private,
            show_models=show_models
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """
    schemadoc - Documentation models from schema definitions.

    Converts exported schema definitions into serializable models.
    """
    if version:
        from schemadoc import __version__
        typer.echo(f"schemadoc version {__version__}")
        raise typer.Exit()

    setup_logging("DEBUG" if verbose else "WARNING")

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
