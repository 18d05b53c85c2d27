"""Preference store implementations for pref-overrides."""

from pref_overrides.lib.store.base import PreferenceStore
from pref_overrides.lib.store.memory_store import MemoryStore
from pref_overrides.lib.store.profile_store import ProfilePrefsStore

__all__ = ["PreferenceStore", "MemoryStore", "ProfilePrefsStore"]
