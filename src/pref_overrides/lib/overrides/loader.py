"""Apply override sets to a host preference store."""

import logging
from typing import Callable, List, Optional

from pref_overrides.lib.overrides.errors import ApplyError
from pref_overrides.lib.overrides.models import (
    OverrideSet,
    PreferenceChange,
    PreferenceOverride,
)

logger = logging.getLogger(__name__)


def _write(store, override: PreferenceOverride) -> None:
    """Write one override, reporting any rejection as an ApplyError."""
    try:
        store.set(override.name, override.value)
    except ApplyError:
        raise
    except Exception as e:
        raise ApplyError(override.name, str(e)) from e


def apply(
    store,
    override_set: OverrideSet,
    on_error: Optional[Callable[[ApplyError], None]] = None,
) -> None:
    """
    Write every override into the store in declaration order.

    Existing values are overwritten. Applying the same set twice leaves the
    store in the same state as applying it once.

    Args:
        store: Host preference store exposing ``get(name)`` and ``set(name, value)``
        override_set (OverrideSet): Overrides to write
        on_error (Callable, optional): Called with each ApplyError when given,
            after which the remaining overrides are still written. Without it
            the first ApplyError propagates.

    Raises:
        ApplyError: If the store rejects a write and no ``on_error`` is given
    """
    applied = 0
    for override in override_set:
        try:
            _write(store, override)
        except ApplyError as e:
            if on_error is None:
                raise
            logger.warning(f"Skipping {override.name}: {e.reason}")
            on_error(e)
            continue
        applied += 1
        logger.debug(f"Set {override.name} = {override.value!r}")

    logger.info(f"Applied {applied} of {len(override_set)} overrides")


def diff(store, override_set: OverrideSet) -> List[PreferenceChange]:
    """
    List the overrides whose value differs from the store's current value.

    Args:
        store: Host preference store exposing ``get(name)``
        override_set (OverrideSet): Overrides to compare

    Returns:
        List[PreferenceChange]: Changes in declaration order
    """
    changes = []
    for override in override_set:
        current = store.get(override.name)
        if current is None or type(current) is not type(override.value) or (
            current != override.value
        ):
            changes.append(PreferenceChange(override.name, current, override.value))
    return changes
