"""Library components for pref-overrides."""

from pref_overrides.lib.network import SourceFetcher
from pref_overrides.lib.overrides import (
    ApplyError,
    OverrideError,
    OverrideSet,
    ParseError,
    PreferenceChange,
    PreferenceOverride,
    ProfileError,
    SourceError,
    apply,
    diff,
    dump,
    load,
    load_file,
)
from pref_overrides.lib.profiles import discover_profile, find_default_profile
from pref_overrides.lib.store import MemoryStore, PreferenceStore, ProfilePrefsStore

__all__ = [
    # Overrides
    "OverrideSet",
    "PreferenceOverride",
    "PreferenceChange",
    "load",
    "load_file",
    "dump",
    "apply",
    "diff",
    # Stores
    "PreferenceStore",
    "MemoryStore",
    "ProfilePrefsStore",
    # Sources and profiles
    "SourceFetcher",
    "discover_profile",
    "find_default_profile",
    # Errors
    "OverrideError",
    "ParseError",
    "ApplyError",
    "SourceError",
    "ProfileError",
]
