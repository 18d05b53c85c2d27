"""Command for applying an override source to a browser profile."""

import logging
from typing import List, Optional

import typer

from pref_overrides.cmd.common import describe, load_source, open_profile_store
from pref_overrides.config import PREFS_FILENAME
from pref_overrides.lib.overrides import ApplyError, apply, diff

logger = logging.getLogger(__name__)


def apply_command(
    source: str = typer.Argument(..., help="Override file path or http(s) URL"),
    profile_dir: Optional[str] = typer.Option(
        None, help="Browser profile directory (default: discover the default profile)"
    ),
    prefs_file: str = typer.Option(PREFS_FILENAME, help="Prefs file inside the profile"),
    continue_on_error: bool = typer.Option(
        False, help="Keep applying the remaining overrides when one is rejected"
    ),
    dry_run: bool = typer.Option(
        False, help="Show the changes without writing the prefs file"
    ),
):
    """
    Apply preference overrides to a browser profile.

    Example:
        pref-overrides apply ./user-overrides.js --profile-dir ~/.mozilla/firefox/abcd.default
    """
    overrides = load_source(source)
    store = open_profile_store(profile_dir, prefs_file)

    changes = diff(store, overrides)
    for change in changes:
        typer.echo(f"{change.name}: {describe(change.old)} -> {describe(change.new)}")

    if dry_run:
        typer.echo(f"Dry run: {len(changes)} changes not written")
        return

    errors: List[ApplyError] = []
    try:
        apply(store, overrides, on_error=errors.append if continue_on_error else None)
    except ApplyError as e:
        logger.error(f"Aborted, nothing written: {e}")
        raise typer.Exit(code=1)

    if store.dirty:
        try:
            store.save()
        except OSError as e:
            logger.error(f"Failed to write {store.path}: {e}")
            raise typer.Exit(code=1)
    typer.echo(f"Applied {len(overrides) - len(errors)} overrides to {store.path}")

    if errors:
        for error in errors:
            logger.error(str(error))
        logger.error(f"{len(errors)} overrides were rejected")
        raise typer.Exit(code=1)
