"""Unittest base class for creating a clean test environment."""
import logging
import os
import shutil
import tempfile
import unittest
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from PySide6 import QtWidgets, QtCore

from PrefsPanel.settings import locale
from PrefsPanel.settings import store as store_module
from PrefsPanel.settings.store import PreferenceStore, StoreConfig, UNIT_TESTS_ENV_KEY


@contextmanager
def mute_ui_signals():
    from PrefsPanel.ui.actions import signals
    blocker = QtCore.QSignalBlocker(signals)  # blocks every signal in `signals`
    try:
        yield
    finally:
        del blocker


class BaseTestCase(unittest.TestCase):
    """Base test case backed by an isolated preferences file in a temporary directory."""

    temp_dir: Optional[str]
    store: PreferenceStore

    def setUp(self) -> None:
        """Create a QApplication and a fresh preference store."""
        # Ensure headless Qt
        if 'QT_QPA_PLATFORM' not in os.environ:
            os.environ['QT_QPA_PLATFORM'] = 'offscreen'
            logging.debug('QT_QPA_PLATFORM set to offscreen for headless testing.')

        os.environ[UNIT_TESTS_ENV_KEY] = '1'

        # Ensure a QApplication is available
        if not QtWidgets.QApplication.instance():
            QtWidgets.QApplication([])  # type: ignore
            logging.debug('QtWidgets.QApplication initialized for tests.')

        self.temp_dir = tempfile.mkdtemp(prefix='prefspanel_test_')
        logging.debug(f'Created temporary directory at {self.temp_dir}')

        self.store = PreferenceStore.from_config(
            StoreConfig(unit_tests=True, path=Path(self.temp_dir) / 'UnitTests.ini')
        )
        locale.install_translations(None)

    def tearDown(self) -> None:
        """Remove the temporary preferences file and forget cached stores."""
        locale.install_translations(None)

        store_module._stores.clear()

        if self.temp_dir and os.path.isdir(self.temp_dir):
            shutil.rmtree(self.temp_dir, ignore_errors=True)
            logging.debug(f'Removed temporary directory {self.temp_dir}')

    @staticmethod
    def process_events() -> None:
        QtWidgets.QApplication.processEvents()
