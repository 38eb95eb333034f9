"""Application setup utilities and custom QApplication for PrefsPanel.

This module provides:
    - set_application_properties: high-DPI scale factor rounding
    - Application: subclass of QApplication configuring application metadata and translations
"""
import logging
import sys
from typing import Optional, Sequence

from PySide6 import QtCore, QtGui, QtWidgets

from .. import __version__


def set_application_properties() -> None:
    """Pass fractional screen scale factors through unrounded."""
    QtGui.QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        QtCore.Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )


class Application(QtWidgets.QApplication):
    """Custom QApplication setting the application metadata and installing translations."""

    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        set_application_properties()
        if argv is None:
            argv = sys.argv

        super().__init__(list(argv))

        from ..settings import lib
        self.setApplicationName(lib.app_name)
        self.setOrganizationName(lib.app_name)
        self.setApplicationVersion(__version__)
        self.setQuitOnLastWindowClosed(True)

        from ..settings import locale
        locale.load_translations()
        logging.debug(f'{lib.app_name} {__version__} started')
