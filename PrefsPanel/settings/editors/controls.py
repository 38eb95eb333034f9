"""
Qt controls bound to a preference store key.

Each editor is one half of an observer pair: it writes to the store when the user edits
it, and it refreshes itself from the store whenever
:attr:`PrefsPanel.settings.store.PreferenceStore.valueChanged` fires for its key. The
connection is dropped by Qt when the editor is destroyed.
"""
import logging
from typing import Any, Optional, Sequence, Tuple

from PySide6 import QtCore, QtWidgets

from .. import lib
from ..store import PreferenceStore


class TextFieldEditor(QtWidgets.QLineEdit):
    """Free-text editor bound to a string preference."""

    def __init__(self, key: lib.PreferenceKey, store: PreferenceStore, parent=None):
        super().__init__(parent=parent)
        self.key = key
        self.store = store

        self.init_data()
        self._connect_signals()

    def _connect_signals(self):
        self.textEdited.connect(self.save)
        self.store.valueChanged.connect(self.on_value_changed)

    @QtCore.Slot(str, object)
    def on_value_changed(self, key: str, value: Any) -> None:
        if key != self.key.value:
            return
        self.init_data()

    def init_data(self):
        v = self.store.get(self.key) or ''
        if v == self.text():
            return
        self.blockSignals(True)
        self.setText(v)
        self.blockSignals(False)

    @QtCore.Slot(str)
    def save(self, text):
        self.store.set(self.key, text)


class ComboBoxEditor(QtWidgets.QComboBox):
    """Editable combo-box bound to a string preference.

    The listed labels are suggestions: the stored value is the text of the edit field.
    """

    def __init__(self, key: lib.PreferenceKey, store: PreferenceStore, labels: Sequence[Optional[str]], parent=None):
        super().__init__(parent=parent)
        self.key = key
        self.store = store
        self.setEditable(True)
        self.setInsertPolicy(QtWidgets.QComboBox.NoInsert)
        self.setView(QtWidgets.QListView(self))

        for label in labels:
            if label is None:
                self.insertSeparator(self.count())
                continue
            self.addItem(label)

        self.init_data()
        self._connect_signals()

    def _connect_signals(self):
        self.currentTextChanged.connect(self.save)
        self.store.valueChanged.connect(self.on_value_changed)

    @QtCore.Slot(str, object)
    def on_value_changed(self, key: str, value: Any) -> None:
        if key != self.key.value:
            return
        self.init_data()

    def init_data(self):
        v = self.store.get(self.key) or ''
        if v == self.currentText():
            return
        self.blockSignals(True)
        self.setCurrentText(v)
        self.blockSignals(False)

    @QtCore.Slot(str)
    def save(self, text):
        self.store.set(self.key, text)


class PopupButtonEditor(QtWidgets.QComboBox):
    """Drop-down menu bound to a preference by option.

    With plain options the selected integer tag is stored. With representable options
    the represented value of the selected entry is stored. None options are separators.

    Args:
        key: The bound preference.
        store: The preference store.
        options: (tag, label) or (value, label) pairs, or None for separators.
        representable: True if ``options`` holds represented values rather than integer tags.
    """

    def __init__(
            self,
            key: lib.PreferenceKey,
            store: PreferenceStore,
            options: Sequence[Optional[Tuple[Any, str]]],
            representable: bool = False,
            parent=None
    ):
        super().__init__(parent=parent)
        self.key = key
        self.store = store
        self.representable = representable
        self.setView(QtWidgets.QListView(self))

        self.blockSignals(True)
        for entity in options:
            if entity is None:
                self.insertSeparator(self.count())
                continue
            obj, title = entity
            self.addItem(title, userData=obj)
        self.blockSignals(False)

        self.init_data()
        self._connect_signals()

    def _connect_signals(self):
        self.currentIndexChanged.connect(self.save)
        self.store.valueChanged.connect(self.on_value_changed)

    @QtCore.Slot(str, object)
    def on_value_changed(self, key: str, value: Any) -> None:
        if key != self.key.value:
            return
        self.init_data()

    def _option_indexes(self):
        for idx in range(self.count()):
            if self.itemData(idx, QtCore.Qt.AccessibleDescriptionRole) == 'separator':
                continue
            yield idx

    def item_should_be_chosen(self) -> int:
        """Return the index of the entry matching the stored value, or -1."""
        result = -1

        if self.representable:
            rhs = self.store.get(self.key)
            if rhs is None:
                return result
            for idx in self._option_indexes():
                obj = self.itemData(idx)
                try:
                    if obj == rhs:
                        result = idx
                except TypeError:
                    continue
            return result

        # The same options may back an integer or a double preference: both are checked
        int_value = self.store.get_integer(self.key)
        double_value = self.store.get_double(self.key)
        for idx in self._option_indexes():
            tag = self.itemData(idx)
            if tag == int_value:
                result = idx
            if float(tag) == double_value:
                result = idx
        return result

    def init_data(self):
        idx = self.item_should_be_chosen()
        if idx == self.currentIndex():
            return
        self.blockSignals(True)
        self.setCurrentIndex(idx)
        self.blockSignals(False)

    def value_for_index(self, index: int) -> Any:
        """Return the value written to the store when the entry at ``index`` is selected."""
        obj = self.itemData(index)
        if self.representable:
            return obj

        kind = self.key.data_kind
        if kind == lib.DataKind.Bool:
            return bool(obj)
        elif kind == lib.DataKind.Double:
            return float(obj)
        return int(obj)

    @QtCore.Slot(int)
    def save(self, index):
        if index == -1:
            return
        value = self.value_for_index(index)
        logging.debug(f'Selected "{self.itemText(index)}" for {self.key.value}')
        self.store.set(self.key, value)


class SwitchEditor(QtWidgets.QCheckBox):
    """Check-box editor bound to a boolean preference."""

    def __init__(self, key: lib.PreferenceKey, store: PreferenceStore, parent=None):
        super().__init__(parent=parent)
        self.key = key
        self.store = store
        self.setTristate(False)

        self.init_data()
        self._connect_signals()

    def _connect_signals(self):
        self.toggled.connect(self.save)
        self.store.valueChanged.connect(self.on_value_changed)

    @QtCore.Slot(str, object)
    def on_value_changed(self, key: str, value: Any) -> None:
        if key != self.key.value:
            return
        self.init_data()

    def init_data(self):
        v = bool(self.store.get(self.key) or False)
        if v == self.isChecked():
            return
        self.blockSignals(True)
        self.setChecked(v)
        self.blockSignals(False)

    @QtCore.Slot(bool)
    def save(self, checked):
        self.store.set(self.key, checked)
