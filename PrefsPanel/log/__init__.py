"""
Logging subsystem for PrefsPanel.

Modules:

- :mod:`PrefsPanel.log.log` – Root logger setup, the Qt message bridge, and the in-memory log tank.
"""
