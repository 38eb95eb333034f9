"""Composable tab, menu and dialog helpers.

This module provides:
    - TabPage, build_tabs: tab widgets assembled from declarative page blocks
    - make_action, build_submenu, append_items, propagate_target: menus assembled from declarative item blocks
    - begin_sheet_modal: run a dialog as a window-modal sheet, or application-modal when no window is available
"""
import logging
from typing import Any, Callable, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from . import stack
from .builder import build_array


class TabPage:
    """A titled page of a tab widget.

    Args:
        title: The tab label, localized when the tabs are built.
        view: The page content.
    """

    def __init__(self, title: str, view: QtWidgets.QWidget) -> None:
        self.title = title
        self.view = view

    @classmethod
    def new(cls, title: str, view: Optional[QtWidgets.QWidget]) -> Optional['TabPage']:
        """Create a page, or return None when there is no view."""
        if view is None:
            return None
        return cls(title, view)

    @classmethod
    def from_views(cls, title: str, views=None) -> Optional['TabPage']:
        """Create a page from a declarative block of views.

        Returns:
            TabPage: The page, or None when the block yields no view.
        """
        result = stack.build(
            stack.Orientation.Vertical,
            insets=stack.EdgeInsets.new(all=14, top=0),
            views=views
        )
        if result is None:
            return None
        return cls(title, result)

    def __repr__(self) -> str:
        return f'<TabPage title={self.title!r}>'


def build_tabs(pages=None) -> Optional[QtWidgets.QTabWidget]:
    """Build a tab widget from a declarative block of optional :class:`TabPage` items.

    Returns:
        QtWidgets.QTabWidget: The tab widget, or None when no page remains.
    """
    from ..settings.locale import localize

    tab_pages = [p for p in build_array(pages) if p is not None]
    if not tab_pages:
        return None

    result = QtWidgets.QTabWidget()
    for page in tab_pages:
        stacked = stack.build(stack.Orientation.Vertical, views=[page.view])
        stacked.layout().setAlignment(page.view, QtCore.Qt.AlignHCenter)
        result.addTab(stacked, localize(page.title))
    return result


def make_action(
        title: Optional[str],
        parent: Optional[QtCore.QObject] = None,
        localized: bool = True
) -> Optional[QtGui.QAction]:
    """Create a menu action, or return None when the title is empty."""
    from ..settings.locale import localize

    if not title:
        return None
    text = localize(title) if localized else title
    if not text:
        return None
    return QtGui.QAction(text, parent)


def propagate_target(menu: QtWidgets.QMenu, target: Optional[Callable[..., Any]]) -> QtWidgets.QMenu:
    """Connect ``target`` to the triggered signal of every action in ``menu`` and its submenus."""
    if target is None:
        return menu
    for action in menu.actions():
        if action.isSeparator():
            continue
        if action.menu():
            propagate_target(action.menu(), target)
            continue
        action.triggered.connect(target)
    return menu


def append_items(menu: QtWidgets.QMenu, items=None, target: Optional[Callable[..., Any]] = None) -> QtWidgets.QMenu:
    """Append a declarative block of optional actions to a menu.

    Args:
        menu: The menu to extend.
        items: A block of :class:`QtGui.QAction` or None items. None entries are skipped.
        target: Optional callable connected to the triggered signal of each appended action.

    Returns:
        The same menu.
    """
    for action in build_array(items):
        if action is None:
            continue
        menu.addAction(action)
        if target is None:
            continue
        if action.menu():
            propagate_target(action.menu(), target)
        else:
            action.triggered.connect(target)
    return menu


def build_submenu(
        title: Optional[str],
        items=None,
        localized: bool = True,
        parent: Optional[QtWidgets.QWidget] = None
) -> Optional[QtGui.QAction]:
    """Create a submenu action from a declarative block of items.

    The submenu is owned by ``parent``. Without a parent the caller must keep a reference
    to the menu, available from the data of the returned action.

    Returns:
        QtGui.QAction: The action carrying the submenu, or None when the title is empty.
    """
    from ..settings.locale import localize

    if not title:
        return None
    text = localize(title) if localized else title
    if not text:
        return None

    menu = QtWidgets.QMenu(text, parent)
    append_items(menu, items)
    action = menu.menuAction()
    action.setData(menu)
    return action


def begin_sheet_modal(
        dialog: QtWidgets.QDialog,
        window: Optional[QtWidgets.QWidget],
        handler: Callable[[int], Any]
) -> None:
    """Show a dialog attached to a window, falling back to a blocking modal loop.

    The dialog is shown window-modal on ``window`` or, when that is None, on the active
    window. When no window is available the dialog runs application-modal and ``handler``
    is called before this function returns.

    Args:
        dialog: The dialog to show.
        window: The preferred parent window.
        handler: Called with the dialog result code.
    """
    window = window or QtWidgets.QApplication.activeWindow()
    if window is not None:
        logging.debug(f'Showing {dialog.__class__.__name__} as a sheet of {window.objectName() or window}')
        dialog.setParent(window, dialog.windowFlags())
        dialog.setWindowModality(QtCore.Qt.WindowModal)
        dialog.finished.connect(handler)
        dialog.open()
        return

    logging.debug(f'No window available, running {dialog.__class__.__name__} modally')
    handler(dialog.exec())
