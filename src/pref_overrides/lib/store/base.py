"""Base preference store for pref-overrides."""

from typing import Dict, Iterator, Optional, Tuple

from pref_overrides.lib.overrides.errors import ApplyError
from pref_overrides.lib.overrides.models import PrefValue


class PreferenceStore:
    """Base class for preference stores with a standard dict-backed implementation."""

    def __init__(self, initial: Optional[Dict[str, PrefValue]] = None):
        """
        Initialize the store.

        Args:
            initial (Dict[str, PrefValue], optional): Values present before any write
        """
        self._values: Dict[str, PrefValue] = dict(initial or {})
        self._dirty = False

    def get(self, name: str) -> Optional[PrefValue]:
        """Return the current value of a preference, or None when unset."""
        return self._values.get(name)

    def set(self, name: str, value: PrefValue) -> None:
        """
        Write a preference value, overwriting any existing one.

        Args:
            name (str): Preference name
            value (PrefValue): Boolean, integer or string value

        Raises:
            ApplyError: If the store rejects the write
        """
        self.check_write(name, value)

        current = self._values.get(name)
        if current is not None and type(current) is type(value) and current == value:
            return

        self._values[name] = value
        self._dirty = True

    def check_write(self, name: str, value: PrefValue) -> None:
        """
        Validate a write before it happens. Subclasses add their own rules.

        Raises:
            ApplyError: If the write must be rejected
        """
        if not name:
            raise ApplyError(name, "empty preference name")
        if not isinstance(value, (bool, int, str)):
            raise ApplyError(name, f"unsupported value type {type(value).__name__}")

    def items(self) -> Iterator[Tuple[str, PrefValue]]:
        """Iterate over (name, value) pairs in insertion order."""
        return iter(list(self._values.items()))

    def as_dict(self) -> Dict[str, PrefValue]:
        """Return a copy of the stored values."""
        return dict(self._values)

    @property
    def dirty(self) -> bool:
        """Whether any write changed a value."""
        return self._dirty

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def close(self) -> None:
        """Release resources held by the store. Nothing to do for the base store."""

    def __enter__(self):
        """Context manager entry point."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit point."""
        self.close()
