"""GUI entry point showing a grouped list in a tree view."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QAbstractItemView, QApplication, QTreeView

from ..config import TREE_INDENTATION_PX, WINDOW_DEFAULT_SIZE, WINDOW_TITLE
from ..errors.handler import ErrorHandler
from ..model import GroupedListModel
from .models import GroupedListItemModel


def build_view(model: GroupedListModel, error_handler: ErrorHandler | None = None) -> QTreeView:
    """Return a ``QTreeView`` bound to *model*; the caller owns the view."""

    view = QTreeView()
    view.setWindowTitle(WINDOW_TITLE)
    view.resize(*WINDOW_DEFAULT_SIZE)
    view.setHeaderHidden(True)
    view.setIndentation(TREE_INDENTATION_PX)
    view.setUniformRowHeights(True)
    view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
    view.setModel(GroupedListItemModel(model, view, error_handler=error_handler))
    return view


def main(model: GroupedListModel, argv: list[str] | None = None) -> int:
    """Launch the Qt application for *model* and return the exit code."""

    arguments = list(sys.argv if argv is None else argv)
    app = QApplication.instance() or QApplication(arguments)
    view = build_view(model)
    view.show()
    return app.exec()
