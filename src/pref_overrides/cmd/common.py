"""Helpers shared by the pref-overrides commands."""

import logging
from pathlib import Path
from typing import Optional

import typer

from pref_overrides.lib.network import SourceFetcher
from pref_overrides.lib.overrides import (
    OverrideSet,
    ParseError,
    PrefValue,
    ProfileError,
    SourceError,
    format_value,
    load,
)
from pref_overrides.lib.profiles import discover_profile
from pref_overrides.lib.store import ProfilePrefsStore

logger = logging.getLogger(__name__)


def load_source(source: str) -> OverrideSet:
    """Fetch and parse an override source, exiting with code 1 on failure."""
    try:
        with SourceFetcher() as fetcher:
            text = fetcher.fetch(source)
        overrides = load(text, source_name=source)
    except (SourceError, ParseError) as e:
        logger.error(f"Failed to load overrides: {e}")
        raise typer.Exit(code=1)

    for name in overrides.replaced:
        logger.warning(f"{name} is declared more than once, using the last value")
    return overrides


def open_profile_store(
    profile_dir: Optional[str], prefs_file: str
) -> ProfilePrefsStore:
    """Open the prefs file of the given or discovered profile, exiting with code 1 on failure."""
    try:
        directory = Path(profile_dir) if profile_dir else discover_profile()
        if not directory.is_dir():
            raise ProfileError(f"Profile directory {directory} does not exist")
        store = ProfilePrefsStore(directory / prefs_file)
    except (ProfileError, ParseError, OSError) as e:
        logger.error(f"Failed to open profile: {e}")
        raise typer.Exit(code=1)

    logger.info(f"Using prefs file: {store.path}")
    return store


def describe(value: Optional[PrefValue]) -> str:
    """Render a value for display, showing unset values explicitly."""
    return "(unset)" if value is None else format_value(value)
