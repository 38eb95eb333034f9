"""
UI package: view composition, application setup, theming, and the host window.

This package provides:

- :mod:`PrefsPanel.ui.builder` – Declarative sequence building and de-duplication.
- :mod:`PrefsPanel.ui.stack` – Stacks, sections, boxes and labels with size constraints.
- :mod:`PrefsPanel.ui.widgets` – Tab pages, menu helpers and window-modal dialogs.
- :mod:`PrefsPanel.ui.actions` – Application-wide Qt signals.
- :mod:`PrefsPanel.ui.app` – QApplication subclass.
- :mod:`PrefsPanel.ui.main` – The host window.
- :mod:`PrefsPanel.ui.ui` – Sizes, colours and fonts.
"""
