"""
Settings package: the preference registry, its persisted store, and the rendered panel.

This package provides:

- :mod:`PrefsPanel.settings.lib` – The preference keys, their data kinds and rendering metadata.
- :mod:`PrefsPanel.settings.store` – The QSettings backed key-value store and its configuration.
- :mod:`PrefsPanel.settings.snapshot` – Capturing, restoring and resetting all preferences.
- :mod:`PrefsPanel.settings.locale` – Localization of user-facing strings.
- :mod:`PrefsPanel.settings.renderable` – Rendering a preference key as a bound control row.
- :mod:`PrefsPanel.settings.editors` – Qt controls bound to the store.
- :mod:`PrefsPanel.settings.settings` – The settings view.
"""
