"""
Rendering of a single preference as a live, bound row.

A :class:`RenderableAdapter` resolves the metadata of a :class:`~PrefsPanel.settings.lib.PreferenceKey`,
localizes its strings, picks a control from the data kind and the available options, and
composes the control, its title and its description with :mod:`PrefsPanel.ui.stack`.

Control dispatch:

    ============================================  ==========================
    Data kind and options                         Control
    ============================================  ==========================
    string, no options                            :class:`TextFieldEditor`
    string, plain options only                    :class:`ComboBoxEditor`
    string with representable options,            :class:`PopupButtonEditor`
    bool with options, integer, double
    bool, no options                              :class:`SwitchEditor`
    collection, mapping, other                    None, supply an override
    ============================================  ==========================

"""
import logging
from typing import Any, Callable, List, Optional, Tuple

from PySide6 import QtWidgets

from . import lib
from . import locale
from .editors import controls
from .store import PreferenceStore, current_store
from ..ui import stack
from ..ui import ui


class RenderableAdapter:
    """Turns one preference key into a bound UI fragment.

    Attributes:
        key (PreferenceKey): The rendered preference.
        store (PreferenceStore): The store the control is bound to.
        options_localized (list): Localized (tag, label) pairs; None entries are separators.
        options_localized_representable (list): Localized (value, label) pairs; None entries are separators.
        inline_description_localized (str | None): Inline prompt, description and version notice.
        hide_title (bool): Do not show the short title beside the control.
        main_view_override (callable | None): Returns the main line to use instead of the built-in one.
        current_control (QtWidgets.QWidget | None): The bound control.
        tiny_size (bool): Use the small font for the control and the description.
    """

    def __init__(self, key: lib.PreferenceKey, store: Optional[PreferenceStore] = None) -> None:
        self.key: lib.PreferenceKey = key
        self.store: PreferenceStore = store or current_store()

        self.options_localized: List[Optional[Tuple[int, str]]] = []
        self.options_localized_representable: List[Optional[Tuple[Any, str]]] = []
        self.inline_description_localized: Optional[str] = None
        self.hide_title: bool = False
        self.main_view_override: Optional[Callable[[], Optional[QtWidgets.QWidget]]] = None
        self.current_control: Optional[QtWidgets.QWidget] = None
        self.tiny_size: bool = False

        meta_data = key.meta_data
        if meta_data is None:
            return

        if meta_data.options:
            self.options_localized = [
                (f[0], locale.localize(f[1])) if f is not None else None for f in meta_data.options
            ]
        if meta_data.options_representable:
            self.options_localized_representable = [
                (f[0], locale.localize(f[1])) if f is not None else None for f in meta_data.options_representable
            ]

        string_stack = []
        prompt_text = locale.localize(meta_data.inline_prompt)
        if prompt_text:
            string_stack.append(prompt_text)
        desc_text = locale.localize(meta_data.description)
        if desc_text:
            string_stack.append(desc_text)
        if meta_data.minimum_version > lib.BASELINE_VERSION:
            string_stack.append(locale.version_notice(meta_data.minimum_version))

        self.current_control = self.render_function_control()

        if string_stack:
            self.inline_description_localized = '\n'.join(string_stack)

    def __repr__(self) -> str:
        return f'<RenderableAdapter key={self.key.value!r}>'

    @property
    def id(self) -> str:
        return self.key.value

    def render(self, fix_width: Optional[float] = None) -> Optional[QtWidgets.QWidget]:
        """Stack the main line above the description.

        Returns:
            The row, or None when it has neither a main line nor a description.
        """
        result = stack.build(
            stack.Orientation.Vertical,
            views=[
                self.render_main_line(fixed_width=fix_width),
                self.render_description(fixed_width=fix_width),
            ]
        )
        if result is not None:
            stack.make_simple_constraint(result, stack.Attribute.Width, stack.Relation.Equal, fix_width)
        return result

    def render_description(self, fixed_width: Optional[float] = None) -> Optional[QtWidgets.QLabel]:
        """Return the description label, or None when there is no description."""
        text = self.inline_description_localized
        if text is None:
            return None

        label = stack.make_label(text, descriptive=True, localized=False, fix_width=fixed_width)
        if self.tiny_size:
            label.setFont(ui.system_font(ui.Size.SmallText))
        return label

    def render_main_line(self, fixed_width: Optional[float] = None) -> Optional[QtWidgets.QWidget]:
        """Return the title and the control laid out horizontally.

        The override is used verbatim when set. Returns None when there is no control.
        """
        if self.main_view_override is not None:
            return self.main_view_override()

        control = self.current_control
        if control is None:
            control = self.render_function_control()
        if control is None:
            return None
        self.current_control = control
        if self.tiny_size:
            self._apply_control_size(control)

        meta_data = self.key.meta_data
        text_label = None
        if not self.hide_title and meta_data and meta_data.short_title:
            text_label = stack.make_label(meta_data.short_title)

        if fixed_width and text_label is not None:
            control_width = control.sizeHint().width()
            text_label.setWordWrap(True)
            stack.make_simple_constraint(
                text_label, stack.Attribute.Width, stack.Relation.LessThanOrEqual, fixed_width - control_width
            )

        def views():
            if text_label is not None:
                yield text_label
                yield stack.spacer()
            yield control

        return stack.build(stack.Orientation.Horizontal, views=views)

    def render_function_control(self) -> Optional[QtWidgets.QWidget]:
        """Build the bound control for the data kind of the key, or None for unsupported kinds."""
        kind = self.key.data_kind
        has_options = bool(self.options_localized)
        has_representable = bool(self.options_localized_representable)

        result = None
        if kind == lib.DataKind.String and not has_representable and not has_options:
            result = controls.TextFieldEditor(self.key, self.store)
            stack.make_simple_constraint(result, stack.Attribute.Width, stack.Relation.Equal, ui.Size.ControlWidth())
        elif kind == lib.DataKind.String and not has_representable and has_options:
            result = controls.ComboBoxEditor(
                self.key, self.store, [f[1] if f is not None else None for f in self.options_localized]
            )
            stack.make_simple_constraint(result, stack.Attribute.Width, stack.Relation.Equal, ui.Size.ControlWidth())
        elif kind == lib.DataKind.Bool and not has_options:
            result = controls.SwitchEditor(self.key, self.store)
        elif (
                kind in (lib.DataKind.Integer, lib.DataKind.Double)
                or (kind == lib.DataKind.Bool and has_options)
                or (kind == lib.DataKind.String and has_representable)
        ):
            if has_representable:
                result = controls.PopupButtonEditor(
                    self.key, self.store, self.options_localized_representable, representable=True
                )
            else:
                result = controls.PopupButtonEditor(self.key, self.store, self.options_localized)
        elif kind in (lib.DataKind.Collection, lib.DataKind.Mapping, lib.DataKind.Other):
            logging.debug(f'{self.key.value} is a {kind} preference and needs a custom control.')
            return None
        else:
            return None

        meta_data = self.key.meta_data
        if meta_data and meta_data.tooltip:
            result.setToolTip(locale.localize(meta_data.tooltip))

        self._apply_control_size(result)
        return result

    def _apply_control_size(self, control: QtWidgets.QWidget) -> None:
        if self.tiny_size:
            control.setFont(ui.system_font(ui.Size.SmallText))
            min_height = max(ui.Size.TinyRowHeight(), control.sizeHint().height())
        else:
            control.setFont(ui.system_font(ui.Size.MediumText))
            min_height = max(ui.Size.RowHeight(), control.sizeHint().height())
        stack.make_simple_constraint(control, stack.Attribute.Height, stack.Relation.GreaterThanOrEqual, min_height)
