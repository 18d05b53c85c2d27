"""Main entry point for the pref-overrides CLI."""

import logging
import sys

import typer

from pref_overrides import __version__
from pref_overrides.cmd.apply import apply_command
from pref_overrides.cmd.check import check_command
from pref_overrides.cmd.diff import diff_command

# Create main Typer app
app = typer.Typer(
    name="pref-overrides",
    help="pref-overrides: apply user_pref override files to browser profiles.",
    add_completion=False,
)


@app.command()
def version():
    """Show version information."""
    typer.echo(f"pref-overrides v{__version__}")


# Add commands
app.command(name="check")(check_command)
app.command(name="diff")(diff_command)
app.command(name="apply")(apply_command)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress all output except errors"
    ),
):
    """
    pref-overrides: apply user_pref override files to browser profiles.

    Use the 'check' command to validate an override file.
    Use the 'diff' command to preview what would change in a profile.
    Use the 'apply' command to write the overrides into a profile.
    """
    # Configure logging
    log_level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    app()
