"""
Tests for PrefsPanel.settings.store: persistence, type conversion, notifications and configuration.

Run:
    python -m unittest tests.test_store
"""
import os
import pathlib
import tempfile

from PrefsPanel.settings import lib
from PrefsPanel.settings import store as store_module
from PrefsPanel.settings.store import PreferenceStore, StoreConfig
from PrefsPanel.status import status
from tests.base import BaseTestCase

Key = lib.PreferenceKey


class StoreTests(BaseTestCase):

    def reopen(self) -> PreferenceStore:
        """A second store on the same file, to check what was persisted."""
        return PreferenceStore(self.store.path)

    def test_missing_key(self):
        self.assertFalse(self.store.contains(Key.TestBool))
        self.assertIsNone(self.store.get(Key.TestBool))
        self.assertEqual(self.store.get_integer(Key.TestIntWithOptions), 0)
        self.assertEqual(self.store.get_double(Key.TestDoubleWithOptions), 0.0)

    def test_values_are_converted_to_their_data_kind(self):
        self.store.set(Key.TestBool, True)
        self.store.set(Key.TestIntWithOptions, 514)
        self.store.set(Key.TestDoubleWithOptions, 2.0)
        self.store.set(Key.TestStringSansOptions, 'hello')

        other = self.reopen()
        self.assertIs(other.get(Key.TestBool), True)
        self.assertEqual(other.get(Key.TestIntWithOptions), 514)
        self.assertIsInstance(other.get(Key.TestIntWithOptions), int)
        self.assertEqual(other.get(Key.TestDoubleWithOptions), 2.0)
        self.assertIsInstance(other.get(Key.TestDoubleWithOptions), float)
        self.assertEqual(other.get(Key.TestStringSansOptions), 'hello')

    def test_single_item_list_reads_back_as_list(self):
        self.store.set(Key.TestArray, ['only'])
        self.assertEqual(self.reopen().get(Key.TestArray), ['only'])

        self.store.set(Key.TestArray, ['a', 'b'])
        self.assertEqual(self.reopen().get(Key.TestArray), ['a', 'b'])

    def test_integer_and_double_accessors(self):
        self.store.set(Key.TestIntWithOptions, 1919)
        self.assertEqual(self.store.get_integer(Key.TestIntWithOptions), 1919)
        self.assertEqual(self.store.get_double(Key.TestIntWithOptions), 1919.0)

        self.store.set(Key.TestBool, True)
        self.assertEqual(self.reopen().get_integer(Key.TestBool), 1)

    def test_unconvertible_value_reads_as_none(self):
        self.store.set(Key.TestIntWithOptions, 'not a number')
        self.assertIsNone(self.reopen().get(Key.TestIntWithOptions))
        self.assertEqual(self.reopen().get_integer(Key.TestIntWithOptions), 0)

    def test_set_none_removes_the_key(self):
        self.store.set(Key.TestStringSansOptions, 'hello')
        self.assertTrue(self.store.contains(Key.TestStringSansOptions))
        self.store.set(Key.TestStringSansOptions, None)
        self.assertFalse(self.store.contains(Key.TestStringSansOptions))
        self.assertFalse(self.reopen().contains(Key.TestStringSansOptions))

    def test_value_changed_is_emitted(self):
        received = []
        self.store.valueChanged.connect(lambda k, v: received.append((k, v)))

        self.store.set(Key.TestIntWithOptions, 114)
        self.store.remove(Key.TestIntWithOptions)

        self.assertEqual(received, [('kIntWithOptions', 114), ('kIntWithOptions', None)])

    def test_keys_accept_strings(self):
        self.store.set('kBool', True)
        self.assertIs(self.store.get(Key.TestBool), True)

    def test_unknown_key_string_raises(self):
        with self.assertRaises(status.UnknownPreferenceKeyException):
            self.store.set('kMissing', 1)
        with self.assertRaises(status.UnknownPreferenceKeyException):
            self.store.get('kMissing')

    def test_keys_lists_present_registry_keys(self):
        self.assertEqual(self.store.keys(), [])
        self.store.set(Key.TestBool, False)
        self.store.set(Key.TestStringSansOptions, 'x')
        self.assertEqual(self.store.keys(), [Key.TestStringSansOptions, Key.TestBool])


class CoerceTests(BaseTestCase):

    def test_ini_strings(self):
        self.assertIs(store_module.coerce(lib.DataKind.Bool, 'true'), True)
        self.assertIs(store_module.coerce(lib.DataKind.Bool, 'false'), False)
        self.assertEqual(store_module.coerce(lib.DataKind.Integer, '810'), 810)
        self.assertEqual(store_module.coerce(lib.DataKind.Integer, '4.0'), 4)
        self.assertEqual(store_module.coerce(lib.DataKind.Double, '0.5'), 0.5)
        self.assertEqual(store_module.coerce(lib.DataKind.Collection, 'a'), ['a'])

    def test_none_passes_through(self):
        for kind in lib.DataKind:
            self.assertIsNone(store_module.coerce(kind, None))

    def test_other_kind_is_returned_unchanged(self):
        value = object()
        self.assertIs(store_module.coerce(lib.DataKind.Other, value), value)


class StoreConfigTests(BaseTestCase):

    def test_explicit_path_wins(self):
        path = pathlib.Path(self.temp_dir) / 'custom.ini'
        config = StoreConfig(unit_tests=True, path=path)
        self.assertEqual(config.resolve_path(), path)

    def test_unit_tests_store_lives_in_temp_dir(self):
        path = StoreConfig(unit_tests=True).resolve_path()
        self.assertEqual(path.name, f'{store_module.UNIT_TESTS_SUITE_NAME}.ini')
        self.assertTrue(str(path).startswith(tempfile.gettempdir()))

    def test_production_store_is_separate(self):
        self.assertNotEqual(
            StoreConfig(unit_tests=True).resolve_path(),
            StoreConfig(unit_tests=False).resolve_path()
        )

    def test_from_env(self):
        os.environ[store_module.UNIT_TESTS_ENV_KEY] = '1'
        self.assertTrue(StoreConfig.from_env().unit_tests)
        os.environ[store_module.UNIT_TESTS_ENV_KEY] = '0'
        try:
            self.assertFalse(StoreConfig.from_env().unit_tests)
        finally:
            os.environ[store_module.UNIT_TESTS_ENV_KEY] = '1'

    def test_current_store_is_shared(self):
        config = StoreConfig(path=pathlib.Path(self.temp_dir) / 'shared.ini')
        self.assertIs(store_module.current_store(config), store_module.current_store(config))

    def test_current_store_defaults_to_unit_tests(self):
        self.assertEqual(store_module.current_store().path, StoreConfig(unit_tests=True).resolve_path())


class StoreErrorTests(BaseTestCase):

    def test_status_exception_emits_error_signal(self):
        from PrefsPanel.ui.actions import signals

        messages = []

        def _slot(message: str) -> None:
            messages.append(message)

        signals.error.connect(_slot)
        try:
            with self.assertRaises(status.StoreAccessException):
                raise status.StoreAccessException('"somewhere.ini"')
        finally:
            signals.error.disconnect(_slot)
        self.assertEqual(messages, ['"somewhere.ini"'])

    def test_status_messages(self):
        for s in status.Status:
            self.assertTrue(status.get_message(s))
