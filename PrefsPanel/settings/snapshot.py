"""Whole-registry backups of the preference store.

A :class:`Snapshot` captures the stored value of every registry key, rendered or not.
Loading it writes every key back, removing the ones that were absent. Loading is not
atomic across keys.
"""
import logging
from typing import Any, Dict, Optional

from . import lib
from .store import PreferenceStore, current_store
from ..ui.actions import signals


class Snapshot:
    """Point-in-time copy of every registry value, as persisted.

    Attributes:
        data (dict[str, Any]): Key strings mapped to their value, or None when absent.
    """

    def __init__(self, store: Optional[PreferenceStore] = None, data: Optional[Dict[str, Any]] = None) -> None:
        """Capture the store, or wrap existing data when ``data`` is given."""
        self.data: Dict[str, Any] = {}

        if data is not None:
            for k, v in data.items():
                self.data[lib.from_id(k).value] = v
            return

        store = store or current_store()
        for key in lib.PreferenceKey:
            self.data[key.value] = store.raw(key)
        logging.debug(f'Captured {len(self.data)} preferences from {store}')

    def __repr__(self) -> str:
        return f'<Snapshot keys={len(self.data)}>'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self.data == other.data

    def __bool__(self) -> bool:
        return bool(self.data)

    @classmethod
    def capture(cls, store: Optional[PreferenceStore] = None) -> 'Snapshot':
        return cls(store=store)

    def load(self, store: Optional[PreferenceStore] = None) -> None:
        """Write this snapshot back to the store. See :func:`load`."""
        load(self, store=store)


def load(snapshot: Snapshot, store: Optional[PreferenceStore] = None) -> None:
    """Restore the store from a snapshot.

    Does nothing if the snapshot is empty. Otherwise every registry key is written,
    and keys whose snapshot value is None are removed.
    """
    if not snapshot.data:
        logging.debug('Snapshot is empty, nothing to load.')
        return

    store = store or current_store()
    signals.snapshotAboutToBeLoaded.emit()
    for key in lib.PreferenceKey:
        store.set(key, snapshot.data.get(key.value))
    signals.snapshotLoaded.emit()


def reset_all(store: Optional[PreferenceStore] = None) -> None:
    """Remove every registry key from the store. Keys outside the registry are kept."""
    store = store or current_store()
    for key in lib.PreferenceKey:
        store.remove(key)
    signals.preferencesReset.emit()
