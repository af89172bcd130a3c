# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for the ``gm`` launcher."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

import typer

from .. import __version__
from ..logging import build_logger
from ._launch_models import USAGE, LaunchOptions
from ._launch_services import launch, show_config
from .shared import CLIError

# Every token, including unknown options and ``--help``, belongs to the build tool.
CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
}

app = typer.Typer(add_completion=False, help="Project-aware Gradle and Maven launcher.")


@app.command(context_settings=CONTEXT_SETTINGS)
def main(ctx: typer.Context) -> None:
    """Run the build tool that matches the current project."""

    options = LaunchOptions.from_args(ctx.args)
    if options.help:
        typer.echo(USAGE)
        raise typer.Exit(code=0)
    if options.version:
        typer.echo(f"gm {__version__}")
        raise typer.Exit(code=0)

    logger = build_logger(quiet=options.quiet)
    cwd = Path.cwd()
    try:
        if options.show_config:
            show_config(cwd=cwd, logger=logger)
            raise typer.Exit(code=0)
        status = launch(options, cwd=cwd, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=status)


def run() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "run"]
