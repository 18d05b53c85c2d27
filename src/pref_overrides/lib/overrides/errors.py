"""Exception hierarchy for pref-overrides."""

from typing import Optional


class OverrideError(Exception):
    """Base exception for all pref-overrides errors."""


class ParseError(OverrideError):
    """A directive line could not be parsed into a preference override."""

    def __init__(
        self, line_no: int, line: str, reason: str, source: Optional[str] = None
    ):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        self.source = source
        where = f"{source}:" if source else "line "
        super().__init__(f"{where}{line_no}: {reason}: {line.strip()!r}")


class ApplyError(OverrideError):
    """The host preference store rejected a write."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot set {name!r}: {reason}")


class SourceError(OverrideError):
    """An override source could not be read or downloaded."""


class ProfileError(OverrideError):
    """No usable browser profile could be located."""
