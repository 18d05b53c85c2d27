"""In-memory preference store."""

from typing import Dict, Iterable, Optional

from pref_overrides.lib.overrides.errors import ApplyError
from pref_overrides.lib.overrides.models import PrefValue
from pref_overrides.lib.store.base import PreferenceStore


class MemoryStore(PreferenceStore):
    """Preference store held in memory, with optional locked names and strict mode."""

    def __init__(
        self,
        initial: Optional[Dict[str, PrefValue]] = None,
        locked: Iterable[str] = (),
        allow_unknown: bool = True,
    ):
        """
        Initialize the memory store.

        Args:
            initial (Dict[str, PrefValue], optional): Values present before any write
            locked (Iterable[str]): Names that reject every write
            allow_unknown (bool): Whether writes may create names not already present
        """
        super().__init__(initial)
        self.locked = set(locked)
        self.allow_unknown = allow_unknown

    def check_write(self, name: str, value: PrefValue) -> None:
        """Reject writes to locked names and, in strict mode, to unknown names."""
        super().check_write(name, value)

        if name in self.locked:
            raise ApplyError(name, "preference is locked")
        if not self.allow_unknown and name not in self._values:
            raise ApplyError(name, "unknown preference")
