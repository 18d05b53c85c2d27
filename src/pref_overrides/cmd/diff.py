"""Command for previewing the changes an override source would make."""

from typing import Optional

import typer

from pref_overrides.cmd.common import describe, load_source, open_profile_store
from pref_overrides.config import PREFS_FILENAME
from pref_overrides.lib.overrides import diff


def diff_command(
    source: str = typer.Argument(..., help="Override file path or http(s) URL"),
    profile_dir: Optional[str] = typer.Option(
        None, help="Browser profile directory (default: discover the default profile)"
    ),
    prefs_file: str = typer.Option(PREFS_FILENAME, help="Prefs file inside the profile"),
):
    """
    Show the preferences that 'apply' would change in a profile.

    Example:
        pref-overrides diff ./user-overrides.js --profile-dir ~/.mozilla/firefox/abcd.default
    """
    overrides = load_source(source)
    store = open_profile_store(profile_dir, prefs_file)

    changes = diff(store, overrides)
    if not changes:
        typer.echo("No changes")
        return

    for change in changes:
        typer.echo(f"{change.name}: {describe(change.old)} -> {describe(change.new)}")
    typer.echo(f"{len(changes)} of {len(overrides)} overrides would change")
