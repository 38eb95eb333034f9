"""Application-wide Qt signals for PrefsPanel.

This module provides:
    - Signals: custom Qt signals for snapshot lifecycle, UI actions and errors.
    - signals: the shared :class:`Signals` instance.
"""
import logging

from PySide6 import QtCore


class Signals(QtCore.QObject):
    """Centralized Qt signals for preference snapshots and UI events."""
    snapshotAboutToBeLoaded = QtCore.Signal()
    snapshotLoaded = QtCore.Signal()
    preferencesReset = QtCore.Signal()

    error = QtCore.Signal(str)

    def __init__(self):
        super().__init__()
        self._connect_signals()

    def _connect_signals(self):
        self.snapshotLoaded.connect(lambda: logging.debug('Snapshot loaded.'))
        self.preferencesReset.connect(lambda: logging.debug('Preferences reset.'))


signals = Signals()
