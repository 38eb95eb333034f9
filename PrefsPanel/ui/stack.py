"""Container composition: stacks, sections, boxes and labels.

Ordered view lists, usually produced by :func:`PrefsPanel.ui.builder.build_array`,
are laid out in horizontal or vertical :class:`StackView` containers. ``None``
entries are skipped, and a container is never created for zero children: the
builders return ``None`` instead, which callers treat as "omit this region".

This module provides:
    - Orientation, Attribute, Relation: layout enumerations
    - EdgeInsets: per-side content margins
    - make_simple_constraint: fixed, minimum or maximum size constraints
    - StackView, stack, build, build_section: stacked containers with optional dividers
    - boxed: wrap a view in a group box that never shrinks below its content
    - make_label, spacer: leaf views
"""
import dataclasses
import enum
import logging
from typing import List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from . import ui
from .builder import build_array

#: Width of the area reserved for dividers in horizontal sections
SPLITTER_DELTA: float = 4.0
#: Margin subtracted from every item of a horizontal section
SECTION_ITEM_MARGIN: float = 6.0
#: Outer inset applied by :func:`build_section`
SECTION_INSET: float = 4.0
#: Extra room around the content of a :func:`boxed` view
BOX_PADDING_WIDTH: int = 12
BOX_PADDING_HEIGHT: int = 14


class Orientation(enum.Enum):
    Horizontal = enum.auto()
    Vertical = enum.auto()


class Attribute(enum.StrEnum):
    Width = enum.auto()
    Height = enum.auto()


class Relation(enum.StrEnum):
    Equal = enum.auto()
    GreaterThanOrEqual = enum.auto()
    LessThanOrEqual = enum.auto()


@dataclasses.dataclass(frozen=True)
class EdgeInsets:
    """Content margins of a container."""
    top: float = 0
    left: float = 0
    bottom: float = 0
    right: float = 0

    @classmethod
    def new(cls, all=None, top=None, bottom=None, left=None, right=None) -> 'EdgeInsets':
        """Create insets where each side falls back to ``all``, then to 0."""
        return cls(
            top=top if top is not None else all or 0,
            left=left if left is not None else all or 0,
            bottom=bottom if bottom is not None else all or 0,
            right=right if right is not None else all or 0,
        )

    def to_margins(self) -> QtCore.QMargins:
        return QtCore.QMargins(round(self.left), round(self.top), round(self.right), round(self.bottom))


def make_simple_constraint(
        view: QtWidgets.QWidget,
        attribute: Attribute,
        relation: Relation,
        value: Optional[float]
) -> QtWidgets.QWidget:
    """Constrain the width or height of a view.

    Args:
        view: The view to constrain.
        attribute: Width or height.
        relation: Equal sets a fixed size, greater-than-or-equal a minimum, less-than-or-equal a maximum.
        value: The size. None leaves the view untouched.

    Returns:
        The same view, so calls can be chained.
    """
    if value is None:
        return view

    v = max(0, round(value))
    if attribute == Attribute.Width:
        if relation == Relation.Equal:
            view.setFixedWidth(v)
        elif relation == Relation.GreaterThanOrEqual:
            view.setMinimumWidth(v)
        elif relation == Relation.LessThanOrEqual:
            view.setMaximumWidth(v)
    elif attribute == Attribute.Height:
        if relation == Relation.Equal:
            view.setFixedHeight(v)
        elif relation == Relation.GreaterThanOrEqual:
            view.setMinimumHeight(v)
        elif relation == Relation.LessThanOrEqual:
            view.setMaximumHeight(v)
    return view


class Divider(QtWidgets.QFrame):
    """A one unit thick separator line drawn between two stacked views."""

    def __init__(self, orientation: Orientation, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('StackDivider')
        self.setAutoFillBackground(True)

        palette = self.palette()
        palette.setColor(QtGui.QPalette.Window, ui.Color.Separator())
        self.setPalette(palette)

        if orientation == Orientation.Horizontal:
            make_simple_constraint(self, Attribute.Width, Relation.Equal, ui.Size.Separator())
        else:
            make_simple_constraint(self, Attribute.Height, Relation.Equal, ui.Size.Separator())


class StackView(QtWidgets.QWidget):
    """A horizontal or vertical container of views with equal spacing distribution.

    Horizontal stacks center their views on the cross axis, vertical stacks align them to
    the leading edge.
    """

    def __init__(self, orientation: Orientation, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.orientation = orientation

        self._views: List[QtWidgets.QWidget] = []
        self._dividers: List[Divider] = []
        self._edge_insets = EdgeInsets()

        if orientation == Orientation.Horizontal:
            QtWidgets.QHBoxLayout(self)
            self.alignment = QtCore.Qt.AlignVCenter
        else:
            QtWidgets.QVBoxLayout(self)
            self.alignment = QtCore.Qt.AlignLeft

        self.layout().setContentsMargins(0, 0, 0, 0)
        self.layout().setSpacing(ui.Size.Indicator(2.0))

    def _add_item(self, widget: QtWidgets.QWidget, alignment=None) -> None:
        # Extra space is shared equally between consecutive items
        if self.layout().count():
            self.layout().addStretch(1)
        if alignment is None:
            self.layout().addWidget(widget, 0)
        else:
            self.layout().addWidget(widget, 0, alignment)

    def add_view(self, view: QtWidgets.QWidget, divider: bool = False) -> None:
        """Append a view, preceded by a divider when requested and the stack is not empty."""
        if divider and self._views:
            d = Divider(self.orientation, parent=self)
            self._dividers.append(d)
            self._add_item(d)

        view.adjustSize()
        hint = view.sizeHint()
        if hint.isValid():
            min_width = min(hint.width(), view.maximumWidth())
            min_height = min(hint.height(), view.maximumHeight())
            make_simple_constraint(view, Attribute.Width, Relation.GreaterThanOrEqual,
                                   max(view.minimumWidth(), min_width))
            make_simple_constraint(view, Attribute.Height, Relation.GreaterThanOrEqual,
                                   max(view.minimumHeight(), min_height))

        self._views.append(view)
        self._add_item(view, self.alignment)

    def views(self) -> List[QtWidgets.QWidget]:
        """The stacked views in order, dividers excluded."""
        return list(self._views)

    def dividers(self) -> List[Divider]:
        return list(self._dividers)

    @property
    def edge_insets(self) -> EdgeInsets:
        return self._edge_insets

    def with_insets(self, insets: Optional[EdgeInsets]) -> 'StackView':
        """Apply new content margins. None keeps the current ones."""
        if insets is None:
            return self
        self._edge_insets = insets
        self.layout().setContentsMargins(insets.to_margins())
        return self


def stack(
        views: List[QtWidgets.QWidget],
        orientation: Orientation,
        divider: bool = False,
        insets: Optional[EdgeInsets] = None
) -> Optional[StackView]:
    """Stack the given views.

    Returns:
        StackView: The container, or None if ``views`` is empty.
    """
    if not views:
        return None

    result = StackView(orientation)
    for view in views:
        result.add_view(view, divider=divider)
    return result.with_insets(insets)


def build(
        orientation: Orientation,
        divider: bool = False,
        width: Optional[float] = None,
        height: Optional[float] = None,
        insets: Optional[EdgeInsets] = None,
        views=None
) -> Optional[StackView]:
    """Build a stack from a declarative block of optional views.

    Args:
        orientation: Stack direction.
        divider: Insert a divider between consecutive views.
        width: Fixed width applied to every view.
        height: Fixed height applied to every view.
        insets: Content margins. None keeps the defaults.
        views: A block accepted by :func:`PrefsPanel.ui.builder.build_array`.

    Returns:
        StackView: The container, or None if no view remains after dropping ``None`` entries.
    """
    result = []
    for view in build_array(views):
        if view is None:
            continue
        make_simple_constraint(view, Attribute.Width, Relation.Equal, width)
        make_simple_constraint(view, Attribute.Height, Relation.Equal, height)
        result.append(view)

    if not result:
        return None
    return stack(result, orientation, divider=divider).with_insets(insets)


def build_section(
        orientation: Orientation = Orientation.Vertical,
        width: Optional[float] = None,
        with_dividers: bool = True,
        views=None
) -> Optional[StackView]:
    """Build a section: a stack with dividers and a uniform outer inset.

    Horizontal sections with a fixed width share it equally between their views.

    Returns:
        StackView: The section, or None if no view remains after dropping ``None`` entries.
    """
    views_rendered = [v for v in build_array(views) if v is not None]
    if not views_rendered:
        return None

    item_width = width
    splitter_delta = SPLITTER_DELTA if with_dividers else 0.0
    if width is not None and orientation == Orientation.Horizontal:
        item_width = (width - splitter_delta) / len(views_rendered) - SECTION_ITEM_MARGIN

    logging.debug(f'Building section of {len(views_rendered)} views, item width: {item_width}')

    result = build(orientation, divider=with_dividers, width=item_width, views=views_rendered)
    return result.with_insets(EdgeInsets.new(all=SECTION_INSET))


def boxed(view: QtWidgets.QWidget, title: str = '') -> QtWidgets.QGroupBox:
    """Wrap a view in a group box.

    The box can grow with its content but never shrinks below the natural size of the view
    plus the box chrome.

    Args:
        view: The content.
        title: Localized before use. An empty title leaves the box untitled.
    """
    from ..settings.locale import localize

    view.adjustSize()
    max_dimension = view.sizeHint()

    result = QtWidgets.QGroupBox()
    result.setTitle(localize(title) if title else '')
    QtWidgets.QVBoxLayout(result)
    result.layout().setContentsMargins(0, 0, 0, 0)
    result.layout().addWidget(view)

    title_height = result.fontMetrics().height() if result.title() else 0
    intrinsic = result.sizeHint()

    min_width = max(max_dimension.width() + BOX_PADDING_WIDTH, intrinsic.width())
    min_height = max(max_dimension.height() + title_height + BOX_PADDING_HEIGHT, intrinsic.height())
    make_simple_constraint(result, Attribute.Width, Relation.GreaterThanOrEqual, min_width)
    make_simple_constraint(result, Attribute.Height, Relation.GreaterThanOrEqual, min_height)
    return result


def make_label(
        text: str,
        descriptive: bool = False,
        localized: bool = True,
        fix_width: Optional[float] = None
) -> QtWidgets.QLabel:
    """Create a read-only text label.

    Args:
        text: The label text.
        descriptive: Use the small font and the secondary text colour.
        localized: Pass the text through :func:`PrefsPanel.settings.locale.localize` first.
        fix_width: Wrap the text at this width.
    """
    from ..settings.locale import localize

    label = QtWidgets.QLabel(localize(text) if localized else text)
    label.setTextFormat(QtCore.Qt.PlainText)
    label.setTextInteractionFlags(QtCore.Qt.NoTextInteraction)

    if descriptive:
        palette = label.palette()
        palette.setColor(QtGui.QPalette.WindowText, ui.Color.SecondaryText())
        label.setPalette(palette)
        label.setFont(ui.system_font(ui.Size.SmallText))

    if fix_width:
        label.setWordWrap(True)
        make_simple_constraint(label, Attribute.Width, Relation.LessThanOrEqual, fix_width)
    return label


def spacer(parent: Optional[QtWidgets.QWidget] = None) -> QtWidgets.QWidget:
    """An empty view that takes up the available space of its stack."""
    widget = QtWidgets.QWidget(parent=parent)
    widget.setSizePolicy(QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Preferred)
    return widget
