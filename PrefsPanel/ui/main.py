"""Host window of the settings view.

This module defines:
    - show(): initialize and display the main window
    - MainWindow: the settings view with snapshot actions and a status bar
"""
import logging
from typing import Optional

from PySide6 import QtWidgets, QtCore, QtGui

from . import ui
from . import widgets
from ..settings import snapshot
from ..settings.lib import app_name
from ..settings.locale import localize
from ..settings.settings import SettingsWidget
from ..settings.store import PreferenceStore, current_store
from ..ui.actions import signals

widget = None


def show():
    global widget

    if widget is None:
        widget = MainWindow()

    widget.show()


class MainWindow(QtWidgets.QMainWindow):
    """The settings view with Back Up, Restore and Reset All actions.

    Args:
        store: The preference store. Defaults to the current store.
    """

    def __init__(self, store: Optional[PreferenceStore] = None, parent=None):
        super().__init__(parent=parent)
        self.setWindowTitle(app_name)
        self.setObjectName('PrefsPanelMainWindow')

        self.store: PreferenceStore = store or current_store()
        self.backup: Optional[snapshot.Snapshot] = None

        self.settings_view: SettingsWidget
        self.backup_action: QtGui.QAction
        self.restore_action: QtGui.QAction
        self.reset_action: QtGui.QAction

        self._create_ui()
        self._init_actions()
        self._connect_signals()
        self.load_window_settings()

    def _create_ui(self) -> None:
        self.settings_view = SettingsWidget(store=self.store, parent=self)
        self.setCentralWidget(self.settings_view)
        self.setStatusBar(QtWidgets.QStatusBar(self))

    def _init_actions(self) -> None:
        self.backup_action = widgets.make_action('Back Up', parent=self)
        self.backup_action.setShortcut(QtGui.QKeySequence('Ctrl+B'))
        self.backup_action.triggered.connect(self.back_up)

        self.restore_action = widgets.make_action('Restore', parent=self)
        self.restore_action.setShortcut(QtGui.QKeySequence('Ctrl+R'))
        self.restore_action.setEnabled(False)
        self.restore_action.triggered.connect(self.restore)

        self.reset_action = widgets.make_action('Reset All…', parent=self)
        self.reset_action.triggered.connect(self.confirm_reset_all)

        quit_action = widgets.make_action('Quit', parent=self)
        quit_action.setShortcuts(QtGui.QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)

        def items():
            yield widgets.build_submenu(
                'Snapshot',
                items=[self.backup_action, self.restore_action],
                parent=self
            )
            yield self.reset_action
            yield quit_action

        menu = self.menuBar().addMenu(localize('Preferences'))
        widgets.append_items(menu, items)

    def _connect_signals(self) -> None:
        signals.error.connect(self.show_error)
        signals.snapshotLoaded.connect(self.on_snapshot_loaded)
        signals.preferencesReset.connect(self.on_preferences_reset)

    @QtCore.Slot(str)
    def show_error(self, message: str) -> None:
        self.statusBar().showMessage(message)

    @QtCore.Slot()
    def on_snapshot_loaded(self) -> None:
        self.statusBar().showMessage(localize('Preferences restored.'), 3000)

    @QtCore.Slot()
    def on_preferences_reset(self) -> None:
        self.statusBar().showMessage(localize('Preferences reset.'), 3000)

    @QtCore.Slot()
    def back_up(self) -> None:
        """Capture every preference into an in-memory snapshot."""
        self.backup = snapshot.Snapshot(store=self.store)
        self.restore_action.setEnabled(bool(self.backup))
        self.statusBar().showMessage(localize('Preferences backed up.'), 3000)

    @QtCore.Slot()
    def restore(self) -> None:
        """Load the last snapshot taken with :meth:`back_up`."""
        if self.backup is None:
            logging.debug('No backup to restore.')
            return
        snapshot.load(self.backup, store=self.store)

    @QtCore.Slot()
    def confirm_reset_all(self) -> None:
        box = QtWidgets.QMessageBox(
            QtWidgets.QMessageBox.Warning,
            localize('Reset All'),
            localize('Remove every stored preference?'),
            QtWidgets.QMessageBox.Yes | QtWidgets.QMessageBox.Cancel,
        )
        box.setDefaultButton(QtWidgets.QMessageBox.Cancel)
        widgets.begin_sheet_modal(box, self, self.reset_all_confirmed)

    @QtCore.Slot(int)
    def reset_all_confirmed(self, result: int) -> None:
        if result != QtWidgets.QMessageBox.Yes.value:
            return
        snapshot.reset_all(store=self.store)

    def sizeHint(self):
        return QtCore.QSize(
            ui.Size.DefaultWidth(1.1),
            ui.Size.DefaultHeight(1.5)
        )

    def window_settings(self) -> QtCore.QSettings:
        """Window state is kept beside the preferences file, outside of the registry keys."""
        path = self.store.path.with_name(f'{self.store.path.stem}.window.ini')
        return QtCore.QSettings(str(path), QtCore.QSettings.IniFormat)

    def closeEvent(self, event) -> None:
        """Persist window geometry on close."""
        settings = self.window_settings()
        settings.setValue('MainWindow/geometry', self.saveGeometry())
        settings.setValue('MainWindow/maximized', self.isMaximized())
        settings.sync()
        super().closeEvent(event)

    def load_window_settings(self) -> None:
        settings = self.window_settings()
        geom_data = settings.value('MainWindow/geometry')
        # INI files read booleans back as strings
        raw_max = settings.value('MainWindow/maximized', False)
        if isinstance(raw_max, bool):
            was_maximized = raw_max
        elif isinstance(raw_max, str):
            was_maximized = raw_max.lower() in ('true', '1')
        else:
            was_maximized = False

        if isinstance(geom_data, QtCore.QByteArray) and not was_maximized:
            self.restoreGeometry(geom_data)
            self.clamp_window_to_screens()
        else:
            self.resize(self.sizeHint())

        if was_maximized:
            self.showMaximized()

    def clamp_window_to_screens(self) -> None:
        primary = QtGui.QGuiApplication.primaryScreen()
        if primary is None:
            return
        frame = self.frameGeometry()
        screen = QtGui.QGuiApplication.screenAt(frame.center()) or primary
        avail = screen.availableGeometry()

        width = min(frame.width(), avail.width())
        height = min(frame.height(), avail.height())

        x = max(avail.left(), min(frame.x(), avail.right() - width))
        y = max(avail.top(), min(frame.y(), avail.bottom() - height))

        self.setGeometry(x, y, width, height)
