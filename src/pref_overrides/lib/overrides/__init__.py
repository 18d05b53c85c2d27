"""Preference override parsing and application."""

from pref_overrides.lib.overrides.errors import (
    ApplyError,
    OverrideError,
    ParseError,
    ProfileError,
    SourceError,
)
from pref_overrides.lib.overrides.loader import apply, diff
from pref_overrides.lib.overrides.models import (
    OverrideSet,
    PreferenceChange,
    PreferenceOverride,
    PrefValue,
)
from pref_overrides.lib.overrides.parser import (
    dump,
    format_value,
    load,
    load_file,
    parse_line,
    render,
)

__all__ = [
    # Model
    "OverrideSet",
    "PreferenceChange",
    "PreferenceOverride",
    "PrefValue",
    # Loading
    "load",
    "load_file",
    "parse_line",
    "dump",
    "render",
    "format_value",
    "apply",
    "diff",
    # Errors
    "OverrideError",
    "ParseError",
    "ApplyError",
    "SourceError",
    "ProfileError",
]
