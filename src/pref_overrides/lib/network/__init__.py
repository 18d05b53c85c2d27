"""Network handling module for pref-overrides."""

from pref_overrides.lib.network.fetcher import SourceFetcher

__all__ = ["SourceFetcher"]
