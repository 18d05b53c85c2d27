"""Command for validating an override source."""

import logging

import typer

from pref_overrides.cmd.common import describe, load_source

logger = logging.getLogger(__name__)


def check_command(
    source: str = typer.Argument(..., help="Override file path or http(s) URL"),
):
    """
    Parse an override source and list the overrides it declares.

    Example:
        pref-overrides check ./user-overrides.js
    """
    logger.info(f"Checking overrides from {source}")
    overrides = load_source(source)

    for override in overrides:
        typer.echo(f"{override.name} = {describe(override.value)}")

    typer.echo(f"{len(overrides)} overrides OK")
