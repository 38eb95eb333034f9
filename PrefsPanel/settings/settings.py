"""The settings view: every renderable preference as a bound row, in one boxed section.

Provides:
    - SettingsScrollArea: scroll area ensuring horizontal expansion without scrollbars.
    - SampleSettingsView: header, the boxed section of preference rows, and a footer.
    - SettingsWidget: the scrollable container hosting :class:`SampleSettingsView`.
"""
import logging
from typing import Optional

from PySide6 import QtWidgets, QtCore

from . import lib
from . import locale
from .renderable import RenderableAdapter
from .store import PreferenceStore, current_store
from ..ui import stack
from ..ui import ui

HEADER_TEXT: str = '隨便寫個抬頭文字介紹一下頁面。'
FOOTER_TEXT: str = '這是腳註文字。'


class SettingsScrollArea(QtWidgets.QScrollArea):
    """
    Custom QScrollArea ensuring the contained widget expands horizontally
    to fill available width, without horizontal scrolling.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWidgetResizable(True)

        self.setHorizontalScrollBarPolicy(QtCore.Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(QtCore.Qt.ScrollBarAsNeeded)

        self.setFrameShape(QtWidgets.QFrame.NoFrame)
        self.setFocusPolicy(QtCore.Qt.NoFocus)


class SampleSettingsView(QtWidgets.QWidget):
    """Renders every key of :func:`PrefsPanel.settings.lib.renderable_cases` as a bound row.

    Collection keys have no built-in control: :attr:`PreferenceKey.TestArray` is given a
    button that clears the stored list.

    Args:
        store: The store the rows are bound to. Defaults to the current store.
    """

    def __init__(self, store: Optional[PreferenceStore] = None, parent=None):
        super().__init__(parent=parent)
        self.setObjectName('SampleSettingsView')

        self.store: PreferenceStore = store or current_store()
        self.window_width = ui.Size.DefaultWidth()
        self.content_width = ui.Size.ContentWidth()

        self.section: Optional[QtWidgets.QGroupBox] = None
        self.body: Optional[stack.StackView] = None

        self._create_ui()

    def _create_ui(self):
        QtWidgets.QVBoxLayout(self)
        self.layout().setContentsMargins(0, 0, 0, 0)
        self.layout().setSpacing(0)

        self.body = self.build_body()
        if self.body is not None:
            self.layout().addWidget(self.body, 0, QtCore.Qt.AlignHCenter | QtCore.Qt.AlignTop)
        self.layout().addStretch(1)

        stack.make_simple_constraint(self, stack.Attribute.Width, stack.Relation.Equal, self.window_width)

    def _customize(self, renderable: RenderableAdapter) -> None:
        if renderable.key == lib.PreferenceKey.TestArray:
            renderable.main_view_override = lambda: self._array_editor(renderable)

    def _array_editor(self, renderable: RenderableAdapter) -> QtWidgets.QWidget:
        key = renderable.key
        meta_data = key.meta_data

        button = QtWidgets.QPushButton(locale.localize(meta_data.tooltip))
        button.setToolTip(locale.localize(meta_data.tooltip))

        def clear():
            logging.debug(f'Clearing {key.value}')
            self.store.remove(key)

        button.clicked.connect(clear)

        def views():
            yield stack.make_label(meta_data.short_title)
            yield stack.spacer()
            yield button

        return stack.build(stack.Orientation.Horizontal, views=views)

    def build_section(self) -> Optional[QtWidgets.QGroupBox]:
        """Render every renderable preference into a boxed section."""

        def views():
            for key in lib.renderable_cases():
                yield key.render(fix_width=self.content_width, extra_ops=self._customize, store=self.store)

        section = stack.build_section(width=self.content_width, views=views)
        if section is None:
            return None
        return stack.boxed(section)

    def build_body(self) -> Optional[stack.StackView]:

        def header():
            yield stack.make_label(HEADER_TEXT, fix_width=self.content_width)
            yield stack.spacer()

        def footer():
            yield stack.make_label(FOOTER_TEXT, descriptive=True, fix_width=self.content_width)
            yield stack.spacer()

        def views():
            yield stack.build(
                stack.Orientation.Horizontal,
                insets=stack.EdgeInsets.new(all=0, left=16, right=16),
                views=header
            )
            self.section = self.build_section()
            yield self.section
            yield stack.build(
                stack.Orientation.Horizontal,
                insets=stack.EdgeInsets.new(all=0, left=16, right=16),
                views=footer
            )
            yield stack.make_simple_constraint(
                QtWidgets.QWidget(), stack.Attribute.Height, stack.Relation.Equal, ui.Size.MediumText()
            )

        result = stack.build(
            stack.Orientation.Vertical,
            insets=stack.EdgeInsets.new(all=ui.Size.Margin()),
            views=views
        )
        if result is not None:
            result.layout().setAlignment(QtCore.Qt.AlignHCenter | QtCore.Qt.AlignTop)
        return result


class SettingsWidget(QtWidgets.QWidget):
    """Scrollable container of the settings view."""

    def __init__(self, store: Optional[PreferenceStore] = None, parent=None):
        super().__init__(parent)

        self.setObjectName('SettingsWidget')
        self.setWindowTitle(locale.localize('Settings'))

        self.store: PreferenceStore = store or current_store()
        self.view: Optional[SampleSettingsView] = None

        self.setMinimumWidth(ui.Size.DefaultWidth(1.0))

        self._create_ui()

    def _create_ui(self):
        QtWidgets.QVBoxLayout(self)
        self.layout().setContentsMargins(0, 0, 0, 0)
        self.layout().setSpacing(0)
        self.layout().setAlignment(QtCore.Qt.AlignTop)

        scroll_area = SettingsScrollArea(self)
        scroll_area.setMinimumWidth(ui.Size.DefaultWidth(1.0))
        self.layout().addWidget(scroll_area)

        self.view = SampleSettingsView(store=self.store)
        scroll_area.setFocusProxy(self.view)
        scroll_area.setWidget(self.view)

    def sizeHint(self):
        return QtCore.QSize(
            ui.Size.DefaultWidth(1.0),
            ui.Size.DefaultHeight(1.5)
        )
