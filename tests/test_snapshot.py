"""
Tests for PrefsPanel.settings.snapshot: capture, load and reset of every registry key.

Run:
    python -m unittest tests.test_snapshot
"""
from PySide6 import QtCore

from PrefsPanel.settings import lib
from PrefsPanel.settings import snapshot
from PrefsPanel.status import status
from PrefsPanel.ui.actions import signals
from tests.base import BaseTestCase

Key = lib.PreferenceKey


class SnapshotTests(BaseTestCase):

    def populate(self):
        self.store.set(Key.TestStringSansOptions, 'hello')
        self.store.set(Key.TestBool, True)
        self.store.set(Key.TestIntWithOptions, 514)
        self.store.set(Key.TestIntSansOptions, 7)
        self.store.set(Key.TestArray, ['a', 'b'])

    def test_captures_every_registry_key(self):
        self.populate()
        s = snapshot.Snapshot(store=self.store)
        self.assertEqual(set(s.data), {f.value for f in Key})
        # keys without metadata are captured too
        self.assertIsNotNone(s.data[Key.TestIntSansOptions.value])
        self.assertIsNone(s.data[Key.TestDictionary.value])

    def test_round_trip(self):
        self.populate()
        before = snapshot.Snapshot.capture(store=self.store)

        self.store.set(Key.TestStringSansOptions, 'changed')
        self.store.remove(Key.TestBool)
        self.store.set(Key.TestDoubleWithOptions, 4.0)

        before.load(store=self.store)
        after = snapshot.Snapshot(store=self.store)

        self.assertEqual(self.store.get(Key.TestStringSansOptions), 'hello')
        self.assertIs(self.store.get(Key.TestBool), True)
        self.assertFalse(self.store.contains(Key.TestDoubleWithOptions))
        self.assertEqual(set(after.data), set(before.data))
        for k in Key:
            self.assertEqual(after.data[k.value] is None, before.data[k.value] is None, k)

    def test_capture_then_load_leaves_store_unchanged(self):
        self.populate()
        values = {k: self.store.get(k) for k in Key}
        snapshot.load(snapshot.Snapshot(store=self.store), store=self.store)
        self.assertEqual({k: self.store.get(k) for k in Key}, values)

    def test_capture_then_load_leaves_file_bytes_unchanged(self):
        self.store.set(Key.TestArray, ['a', 'b'])
        self.store.set(Key.TestDictionary, {'x': 1, 'y': 'z'})
        self.store.set(Key.TestBool, True)
        self.store.set(Key.TestDoubleWithOptions, 2.5)
        self.store.set(Key.TestStringSansOptions, 'a, b')
        self.store.sync()
        before = self.store.path.read_bytes()

        snapshot.load(snapshot.Snapshot(store=self.store), store=self.store)
        self.store.sync()
        self.assertEqual(self.store.path.read_bytes(), before)

    def test_empty_snapshot_load_is_a_no_op(self):
        self.populate()
        received = []

        def _slot():
            received.append(True)

        signals.snapshotAboutToBeLoaded.connect(_slot)
        try:
            snapshot.load(snapshot.Snapshot(data={}), store=self.store)
        finally:
            signals.snapshotAboutToBeLoaded.disconnect(_slot)

        self.assertEqual(received, [])
        self.assertEqual(self.store.get(Key.TestStringSansOptions), 'hello')
        self.assertFalse(snapshot.Snapshot(data={}))

    def test_load_emits_lifecycle_signals(self):
        received = []

        def _about():
            received.append('about')

        def _loaded():
            received.append('loaded')

        signals.snapshotAboutToBeLoaded.connect(_about)
        signals.snapshotLoaded.connect(_loaded)
        try:
            snapshot.load(snapshot.Snapshot(store=self.store), store=self.store)
        finally:
            signals.snapshotAboutToBeLoaded.disconnect(_about)
            signals.snapshotLoaded.disconnect(_loaded)

        self.assertEqual(received, ['about', 'loaded'])

    def test_reset_all(self):
        self.populate()
        received = []

        def _slot():
            received.append(True)

        signals.preferencesReset.connect(_slot)
        try:
            snapshot.reset_all(store=self.store)
        finally:
            signals.preferencesReset.disconnect(_slot)

        s = snapshot.Snapshot(store=self.store)
        self.assertTrue(all(v is None for v in s.data.values()))
        self.assertEqual(self.store.keys(), [])
        self.assertEqual(received, [True])

    def test_reset_all_keeps_keys_outside_the_registry(self):
        self.populate()
        self.store.sync()
        foreign = QtCore.QSettings(str(self.store.path), QtCore.QSettings.IniFormat)
        foreign.setValue('foreignKey', 'keep me')
        foreign.sync()
        del foreign

        snapshot.reset_all(store=self.store)

        self.assertEqual(self.store.keys(), [])
        reread = QtCore.QSettings(str(self.store.path), QtCore.QSettings.IniFormat)
        self.assertEqual(reread.value('foreignKey'), 'keep me')
        for k in Key:
            self.assertFalse(reread.contains(k.value), k)

    def test_snapshot_from_data(self):
        s = snapshot.Snapshot(data={'kBool': True, 'kIntWithOptions': 810})
        s.load(store=self.store)
        self.assertIs(self.store.get(Key.TestBool), True)
        self.assertEqual(self.store.get(Key.TestIntWithOptions), 810)
        # keys absent from the snapshot are removed
        self.assertFalse(self.store.contains(Key.TestStringSansOptions))

    def test_snapshot_from_data_rejects_unknown_keys(self):
        with self.assertRaises(status.UnknownPreferenceKeyException):
            snapshot.Snapshot(data={'kMissing': 1})

    def test_equality(self):
        self.populate()
        self.assertEqual(snapshot.Snapshot(store=self.store), snapshot.Snapshot(store=self.store))
        self.assertNotEqual(snapshot.Snapshot(store=self.store), snapshot.Snapshot(data={}))
