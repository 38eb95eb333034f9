"""
Smoke tests for the settings view and the host window.

Run:
    python -m unittest tests.test_ui
"""
import pathlib

from PySide6 import QtWidgets

from PrefsPanel.settings import lib
from PrefsPanel.settings import settings
from PrefsPanel.ui import main
from PrefsPanel.ui import stack
from PrefsPanel.ui.actions import signals
from tests.base import BaseTestCase

Key = lib.PreferenceKey


class SettingsViewTests(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.view = settings.SampleSettingsView(store=self.store)

    def section_rows(self):
        return self.view.section.layout().itemAt(0).widget().views()

    def test_window_width(self):
        self.assertEqual(self.view.minimumWidth(), 577)
        self.assertEqual(self.view.maximumWidth(), 577)

    def test_body_layout(self):
        views = self.view.body.views()
        self.assertEqual(len(views), 4)
        self.assertIsInstance(views[1], QtWidgets.QGroupBox)
        self.assertIs(views[1], self.view.section)
        self.assertEqual(self.view.body.edge_insets, stack.EdgeInsets.new(all=14))

    def test_header_and_footer(self):
        views = self.view.body.views()
        self.assertEqual(views[0].views()[0].text(), settings.HEADER_TEXT)
        self.assertEqual(views[2].views()[0].text(), settings.FOOTER_TEXT)
        self.assertEqual(views[0].edge_insets, stack.EdgeInsets.new(all=0, left=16, right=16))

    def test_one_row_per_renderable_case(self):
        rows = self.section_rows()
        self.assertEqual(len(rows), len(lib.renderable_cases()))
        for row in rows:
            self.assertEqual(row.maximumWidth(), 512)

    def test_rows_are_bound_to_the_store(self):
        self.store.set(Key.TestStringSansOptions, 'shown')
        fields = self.view.findChildren(QtWidgets.QLineEdit)
        self.assertTrue(any(f.text() == 'shown' for f in fields))

    def test_array_row_clears_the_list(self):
        self.store.set(Key.TestArray, ['a', 'b'])
        buttons = [
            f for f in self.view.findChildren(QtWidgets.QPushButton)
            if f.toolTip() == Key.TestArray.meta_data.tooltip
        ]
        self.assertEqual(len(buttons), 1)

        buttons[0].click()
        self.assertFalse(self.store.contains(Key.TestArray))

    def test_settings_widget_scrolls_the_view(self):
        widget = settings.SettingsWidget(store=self.store)
        self.assertIsInstance(widget.view, settings.SampleSettingsView)
        self.assertIs(widget.view.store, self.store)


class MainWindowTests(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.window = main.MainWindow(store=self.store)

    def tearDown(self) -> None:
        self.window.deleteLater()
        self.window = None
        super().tearDown()

    def menu_texts(self):
        menu = self.window.menuBar().actions()[0].menu()
        return [f.text() for f in menu.actions()]

    def test_menu(self):
        self.assertEqual(self.menu_texts(), ['Snapshot', 'Reset All…', 'Quit'])
        self.assertFalse(self.window.restore_action.isEnabled())

    def test_back_up_and_restore(self):
        self.store.set(Key.TestIntWithOptions, 514)
        self.window.back_up()
        self.assertTrue(self.window.restore_action.isEnabled())

        self.store.set(Key.TestIntWithOptions, 810)
        self.store.set(Key.TestStringSansOptions, 'new')
        self.window.restore_action.trigger()

        self.assertEqual(self.store.get(Key.TestIntWithOptions), 514)
        self.assertFalse(self.store.contains(Key.TestStringSansOptions))

    def test_restore_without_backup_does_nothing(self):
        self.store.set(Key.TestIntWithOptions, 514)
        self.window.restore()
        self.assertEqual(self.store.get(Key.TestIntWithOptions), 514)

    def test_reset_all_confirmed(self):
        self.store.set(Key.TestIntWithOptions, 514)
        self.window.reset_all_confirmed(QtWidgets.QMessageBox.Cancel.value)
        self.assertTrue(self.store.contains(Key.TestIntWithOptions))

        self.window.reset_all_confirmed(QtWidgets.QMessageBox.Yes.value)
        self.assertEqual(self.store.keys(), [])

    def test_confirm_reset_all_opens_a_sheet(self):
        self.window.confirm_reset_all()
        boxes = self.window.findChildren(QtWidgets.QMessageBox)
        self.assertEqual(len(boxes), 1)
        boxes[0].done(QtWidgets.QMessageBox.Yes.value)
        self.assertEqual(self.store.keys(), [])

    def test_errors_are_shown_in_the_status_bar(self):
        signals.error.emit('Something went wrong')
        self.assertEqual(self.window.statusBar().currentMessage(), 'Something went wrong')

    def test_close_persists_geometry(self):
        self.window.close()
        path = pathlib.Path(self.temp_dir) / 'UnitTests.window.ini'
        self.assertTrue(path.exists())

        other = main.MainWindow(store=self.store)
        self.assertFalse(other.isMaximized())
