"""pref-overrides: load user_pref override files and apply them to browser profiles."""

__version__ = "0.1.0"
