"""UI styling utilities for PrefsPanel.

This module provides:
    - Theme: supported UI themes (light, dark)
    - Size: standardized size constants and scaling logic
    - Color: standardized color palette, resolved against the current theme
    - system_font: the application font at a given pixel size
"""
import enum
import math

from PySide6 import QtWidgets, QtGui


class Theme(enum.StrEnum):
    Light = 'light'
    Dark = 'dark'


class Size(enum.Enum):
    """Enumeration of size values used for UI scaling."""
    SmallText = 11.0
    MediumText = 12.0
    Separator = 1.0
    Indicator = 4.0
    Margin = 14.0
    RowHeight = 16.0
    TinyRowHeight = 14.0
    ControlWidth = 128.0
    ContentWidth = 512.0
    DefaultWidth = 577.0
    DefaultHeight = 480.0

    def __new__(cls, value):
        obj = object.__new__(cls)
        obj._value_ = float(value)
        return obj

    def __eq__(self, other):
        if isinstance(other, (float, int)):
            return self._value_ == float(other)
        return super().__eq__(other)

    def __hash__(self):
        return hash(self._name_)

    def __call__(self, multiplier=1.0, apply_scale=True):
        """
        Returns the scaled size value.

        Args:
            multiplier (float): A multiplier to apply to the size.
            apply_scale (bool): If True, applies UI scaling factors.

        Returns:
            int: The scaled size.
        """
        if apply_scale:
            return round(self.value * float(multiplier))
        return round(self._value_ * float(multiplier))

    @property
    def value(self):
        """float: The scaled size value."""
        return self.size(self._value_)

    @classmethod
    def size(cls, value, ui_scale_factor=1.0, dpi=72.0):
        """Scale a value by DPI and UI scale factor."""
        return math.ceil(float(value) * (float(dpi) / 72.0)) * float(ui_scale_factor)


class Color(enum.Enum):
    """Enumeration of colours used across the UI."""

    Separator = {
        Theme.Light.value: (128, 128, 128, 51),
        Theme.Dark.value: (128, 128, 128, 51),
    }
    SecondaryText = {
        Theme.Light.value: (70, 70, 70),
        Theme.Dark.value: (185, 185, 185),
    }

    @classmethod
    def _get_theme(cls):
        app = QtWidgets.QApplication.instance()
        if not app:
            return Theme.Light.value
        window = app.palette().color(QtGui.QPalette.Window)
        return Theme.Dark.value if window.lightness() < 128 else Theme.Light.value

    def __new__(cls, v):
        if not isinstance(v, dict):
            raise ValueError(f'Invalid color value: {v}. Must be a dictionary, got {type(v)}: {v}')
        obj = object.__new__(cls)
        obj._value_ = v
        return obj

    def __call__(self):
        """
        Returns the QColor for the current theme.

        Returns:
            QtGui.QColor: The themed color.
        """
        theme = self._get_theme()
        if theme not in self._value_:
            theme = Theme.Light.value

        return QtGui.QColor(*self._value_[theme])


def system_font(size):
    """Returns a copy of the application font with the given pixel size.

    Args:
        size (Size|float|int): The pixel size.

    Returns:
        QtGui.QFont: The font.
    """
    if isinstance(size, Size):
        size = size()
    if size <= 0:
        raise RuntimeError(f'Font size must be greater than 0, got {size}')

    app = QtWidgets.QApplication.instance()
    font = QtGui.QFont(app.font()) if app else QtGui.QFont()
    font.setPixelSize(int(size))
    return font
