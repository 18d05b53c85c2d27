"""Data model for preference overrides."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Union

PrefValue = Union[bool, int, str]


@dataclass(frozen=True)
class PreferenceOverride:
    """A single declared (name, value) pair."""

    name: str
    value: PrefValue
    line_no: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Preference name must be a non-empty string")
        if not isinstance(self.value, (bool, int, str)):
            raise ValueError(
                f"Unsupported value type for {self.name}: {type(self.value).__name__}"
            )


@dataclass(frozen=True)
class PreferenceChange:
    """A difference between a store's current value and an override."""

    name: str
    old: Optional[PrefValue]
    new: PrefValue


class OverrideSet:
    """
    Ordered collection of preference overrides with unique names.

    Entries keep the position of their first declaration. When a name is
    declared again, the later value replaces the earlier one and the name is
    recorded in ``replaced``.
    """

    def __init__(self, overrides: Iterable[PreferenceOverride] = ()):
        self._entries: Dict[str, PreferenceOverride] = {}
        self._replaced: List[str] = []
        for override in overrides:
            self._add(override)

    def _add(self, override: PreferenceOverride) -> None:
        if override.name in self._entries:
            self._replaced.append(override.name)
        self._entries[override.name] = override

    def __iter__(self) -> Iterator[PreferenceOverride]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OverrideSet):
            return NotImplemented
        return list(self._entries.values()) == list(other._entries.values())

    def __repr__(self) -> str:
        return f"OverrideSet({list(self._entries.values())!r})"

    def get(self, name: str) -> Optional[PreferenceOverride]:
        """Return the override declared for ``name``, if any."""
        return self._entries.get(name)

    @property
    def names(self) -> List[str]:
        """Preference names in declaration order."""
        return list(self._entries)

    @property
    def replaced(self) -> List[str]:
        """Names whose earlier declaration was overridden by a later one."""
        return list(self._replaced)

    def as_dict(self) -> Dict[str, PrefValue]:
        """Return a plain ``name -> value`` mapping in declaration order."""
        return {name: override.value for name, override in self._entries.items()}
