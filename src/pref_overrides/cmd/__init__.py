"""Command-line interface modules for pref-overrides."""

from pref_overrides.cmd.apply import apply_command
from pref_overrides.cmd.check import check_command
from pref_overrides.cmd.diff import diff_command

__all__ = ["apply_command", "check_command", "diff_command"]
