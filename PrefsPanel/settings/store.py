"""The persisted key-value store behind the preference registry.

:class:`PreferenceStore` wraps an INI-format :class:`QtCore.QSettings` file and emits
:attr:`PreferenceStore.valueChanged` whenever a key is written or removed. Bound controls
observe that signal to stay in sync with the store.

Which file is used is an explicit configuration value, :class:`StoreConfig`. The isolated
unit-test store lives in the temp directory so production preferences are never touched
by tests.

Provides:
    - StoreConfig: selects the production or the isolated unit-test store
    - PreferenceStore: get/set/remove/observe over the registry keys
    - current_store: the store selected by the environment
"""
import dataclasses
import logging
import os
import pathlib
import tempfile
from typing import Any, Dict, Optional

from PySide6 import QtCore

from . import lib
from ..status import status

UNIT_TESTS_ENV_KEY: str = 'PREFSPANEL_UNIT_TESTS'
UNIT_TESTS_SUITE_NAME: str = 'UnitTests'


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes')
    return bool(int(value))


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ('true', 'false'):
            return int(v == 'true')
        try:
            return int(v)
        except ValueError:
            return int(float(v))
    return int(value)


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ('true', 'false'):
            return float(v == 'true')
        return float(v)
    return float(value)


def _to_list(value: Any) -> list:
    # INI files read a single item list back as a plain string
    if isinstance(value, (str, bytes)):
        return [value]
    return list(value)


def coerce(kind: lib.DataKind, value: Any) -> Any:
    """Convert a raw value read from the store to the type of a data kind.

    Args:
        kind: The data kind of the key.
        value: The raw value. None is returned as-is.

    Returns:
        The converted value, or None if the value cannot be converted.
    """
    if value is None:
        return None

    try:
        if kind == lib.DataKind.String:
            return value if isinstance(value, str) else str(value)
        elif kind == lib.DataKind.Bool:
            return _to_bool(value)
        elif kind == lib.DataKind.Integer:
            return _to_int(value)
        elif kind == lib.DataKind.Double:
            return _to_float(value)
        elif kind == lib.DataKind.Collection:
            return _to_list(value)
        elif kind == lib.DataKind.Mapping:
            return dict(value)
    except (TypeError, ValueError) as ex:
        logging.error(f'Cannot convert {value!r} to {kind}: {ex}')
        return None
    return value


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Selects the file a :class:`PreferenceStore` persists to.

    Attributes:
        unit_tests: Use the isolated unit-test store.
        path: Explicit INI file path. Overrides ``unit_tests``.
    """
    unit_tests: bool = False
    path: Optional[pathlib.Path] = None

    @classmethod
    def from_env(cls) -> 'StoreConfig':
        """Read the configuration from the ``PREFSPANEL_UNIT_TESTS`` environment variable."""
        v = os.environ.get(UNIT_TESTS_ENV_KEY, '').lower() in ['1', 'true', 'yes']
        return cls(unit_tests=v)

    def resolve_path(self) -> pathlib.Path:
        if self.path is not None:
            return pathlib.Path(self.path)
        if self.unit_tests:
            return pathlib.Path(tempfile.gettempdir()) / lib.app_name / f'{UNIT_TESTS_SUITE_NAME}.ini'

        p = QtCore.QStandardPaths.writableLocation(QtCore.QStandardPaths.AppConfigLocation)
        if not p:
            p = str(pathlib.Path.home() / f'.{lib.app_name}')
        return pathlib.Path(p) / f'{lib.app_name}.ini'


class PreferenceStore(QtCore.QObject):
    """Key-value store for the preference registry, persisted to an INI file.

    Values are written as given and read back converted to the data kind of their key.
    Setting a key to None removes it.
    """
    #: Emitted with the key and its new value (None when removed)
    valueChanged = QtCore.Signal(str, object)

    def __init__(self, path: pathlib.Path, parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent=parent)
        self.path: pathlib.Path = pathlib.Path(path)

        if not self.path.parent.exists():
            logging.debug(f'Creating preferences directory: {self.path.parent}')
            self.path.parent.mkdir(parents=True, exist_ok=True)

        logging.debug(f'Using preferences file: {self.path}')
        self._settings = QtCore.QSettings(str(self.path), QtCore.QSettings.IniFormat, self)
        self._settings.setFallbacksEnabled(False)

    @classmethod
    def from_config(cls, config: StoreConfig) -> 'PreferenceStore':
        return cls(config.resolve_path())

    @classmethod
    def standard(cls) -> 'PreferenceStore':
        """The production store."""
        return cls.from_config(StoreConfig())

    @classmethod
    def unit_tests(cls) -> 'PreferenceStore':
        """The isolated store used by tests."""
        return cls.from_config(StoreConfig(unit_tests=True))

    def __repr__(self) -> str:
        return f'<PreferenceStore path={str(self.path)!r}>'

    def _key(self, key) -> lib.PreferenceKey:
        if isinstance(key, lib.PreferenceKey):
            return key
        return lib.from_id(key)

    def contains(self, key) -> bool:
        return self._settings.contains(self._key(key).value)

    def raw(self, key) -> Any:
        """Return the stored value as read from the file, without conversion."""
        return self._settings.value(self._key(key).value)

    def get(self, key) -> Any:
        """Return the stored value converted to the data kind of the key, or None if absent."""
        k = self._key(key)
        return coerce(k.data_kind, self._settings.value(k.value))

    def get_integer(self, key) -> int:
        """Return the stored value as an integer. Absent or unconvertible values return 0."""
        v = self._settings.value(self._key(key).value)
        if v is None:
            return 0
        try:
            return _to_int(v)
        except (TypeError, ValueError):
            return 0

    def get_double(self, key) -> float:
        """Return the stored value as a float. Absent or unconvertible values return 0.0."""
        v = self._settings.value(self._key(key).value)
        if v is None:
            return 0.0
        try:
            return _to_float(v)
        except (TypeError, ValueError):
            return 0.0

    def set(self, key, value: Any) -> None:
        """Write a value and notify observers. None removes the key."""
        k = self._key(key)
        if value is None:
            self.remove(k)
            return

        logging.debug(f'Setting {k.value} to {value!r}')
        self._settings.setValue(k.value, value)
        self.sync()
        self.valueChanged.emit(k.value, value)

    def remove(self, key) -> None:
        """Remove a key and notify observers."""
        k = self._key(key)
        logging.debug(f'Removing {k.value}')
        self._settings.remove(k.value)
        self.sync()
        self.valueChanged.emit(k.value, None)

    def sync(self) -> None:
        """Write pending changes to disk and reload changes made by other processes.

        Raises:
            status.StoreAccessException: If the file cannot be written.
            status.StoreFormatException: If the file cannot be parsed.
        """
        self._settings.sync()
        s = self._settings.status()
        if s == QtCore.QSettings.AccessError:
            raise status.StoreAccessException(f'"{self.path}"')
        if s == QtCore.QSettings.FormatError:
            raise status.StoreFormatException(f'"{self.path}"')

    def keys(self):
        """The registry keys currently present in the store, in registry order."""
        return [f for f in lib.PreferenceKey if self._settings.contains(f.value)]


_stores: Dict[pathlib.Path, PreferenceStore] = {}


def current_store(config: Optional[StoreConfig] = None) -> PreferenceStore:
    """Return the shared store for a configuration.

    Args:
        config: Defaults to :meth:`StoreConfig.from_env`.
    """
    config = config or StoreConfig.from_env()
    path = config.resolve_path()
    if path not in _stores:
        _stores[path] = PreferenceStore(path)
    return _stores[path]
