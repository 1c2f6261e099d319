"""Thin CLI wrapper around the CheckSite use case.

All engine objects are built through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from proof_reader import __version__
from proof_reader.presentation.cli.formatters import console, error_message, report_run

app = typer.Typer(
    name="proof-reader",
    help="🔎 Check a generated website for content and accessibility errors",
    rich_markup_mode="rich",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"proof-reader {__version__}")
        raise typer.Exit()


@app.command()
def check(
    root: Annotated[
        Optional[str],
        typer.Option("--root", "-r", help="Root of the website to check [default: ./public]"),
    ] = None,
    exclude: Annotated[
        Optional[str],
        typer.Option("--exclude", "-e", help="Glob pattern of paths to skip"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a JSON configuration file"),
    ] = None,
    workers: Annotated[
        Optional[int],
        typer.Option("--workers", "-j", min=1, help="Worker threads [default: CPU count]"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    """Check every page under the site root and report all violations."""
    from proof_reader.bootstrap import Container
    from proof_reader.config import load_config
    from proof_reader.domain.errors import ConfigurationError

    _configure_logging(verbose)

    try:
        settings = load_config(config)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    overrides = {
        key: value
        for key, value in (("root", root), ("exclude", exclude), ("workers", workers))
        if value is not None
    }
    settings = settings.model_copy(update=overrides)

    if not Path(settings.root).exists():
        error_message(f"Site root not found: {settings.root}")
        raise typer.Exit(code=1)

    container = Container(settings)
    result = container.check_site().execute(settings.root)

    if not report_run(result):
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
