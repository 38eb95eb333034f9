"""
PrefsPanel: renders a live, two-way-bound settings panel from a declarative registry of typed preferences.

This package provides:

- :mod:`PrefsPanel.settings` – The preference registry, the persisted store, snapshots, and the renderable adapters.
- :mod:`PrefsPanel.ui` – Declarative view composition (sequence builder, stacks, sections) and the host window.
- :mod:`PrefsPanel.status` – Status codes and exceptions.
- :mod:`PrefsPanel.log` – Logging setup and the Qt message bridge.

Use :func:`PrefsPanel.exec_` to launch the sample settings window.
"""

import sys

# Fail on Python < 3.11
if not (sys.version_info.major == 3 and sys.version_info.minor >= 11):
    raise RuntimeError('PrefsPanel requires Python 3.11 or higher.')

__version__ = '0.1.0'
__license__ = 'MIT'
__description__ = 'PrefsPanel: declarative, metadata-driven settings panels for PySide6.'

from .log import log

log.setup_logging()


def exec_() -> None:
    """Launch the sample settings window and enter the Qt event loop."""
    from .ui import app
    from .ui import main
    application = app.Application(sys.argv)
    main.show()

    sys.exit(application.exec())


if __name__ == '__main__':
    exec_()
