"""Qt item model exposing a :class:`GroupedListModel` as a two-level tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from PySide6.QtCore import QAbstractItemModel, QByteArray, QModelIndex, QObject, Qt, Signal
from PySide6.QtGui import QFont

from ...config import GROUP_FONT_BOLD
from ...errors import GroupListError
from ...errors.handler import ErrorHandler, ErrorSeverity
from ...model import GroupedListModel
from ...utils.logging import get_logger


class GroupedListRole(int, Enum):
    """Custom roles exposed by :class:`GroupedListItemModel`."""

    NODE_KIND = Qt.ItemDataRole.UserRole + 1
    IDENTITY = Qt.ItemDataRole.UserRole + 2


@dataclass(frozen=True, slots=True)
class _Anchor:
    """Stable object referenced by ``QModelIndex.internalPointer``.

    Group indices point at the root anchor; child indices point at the anchor
    of their group so :meth:`GroupedListItemModel.parent` can recover the row.
    """

    row: int


_ROOT = _Anchor(-1)


class GroupedListItemModel(QAbstractItemModel):
    """Tree model whose top-level rows are groups and second-level rows children.

    Errors raised by the source while a row is counted or read are reported
    through :class:`ErrorHandler` and :attr:`rowRejected`; the row is then left
    empty instead of taking the view down.
    """

    rowRejected = Signal(int, int, str)

    def __init__(
        self,
        source: GroupedListModel,
        parent: QObject | None = None,
        *,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        super().__init__(parent)
        self._source = source
        self._anchors: List[_Anchor] = []
        self._rejected: set[tuple[int, int]] = set()
        self._errors = error_handler or ErrorHandler(get_logger(__name__))
        self._rebuild_anchors()

    # ------------------------------------------------------------------
    # QAbstractItemModel API
    # ------------------------------------------------------------------
    def columnCount(self, _parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        return 1

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if not parent.isValid():
            return self._source.group_count()
        if self._anchor(parent) is not _ROOT:
            return 0
        try:
            return self._source.child_count(parent.row())
        except GroupListError as exc:
            self._reject(parent.row(), -1, exc)
            return 0

    def index(self, row: int, column: int, parent: QModelIndex = QModelIndex()):  # noqa: N802
        if column != 0 or row < 0:
            return QModelIndex()
        if not parent.isValid():
            if row >= self._source.group_count():
                return QModelIndex()
            return self.createIndex(row, column, _ROOT)
        if self._anchor(parent) is not _ROOT:
            return QModelIndex()
        if row >= self.rowCount(parent):
            return QModelIndex()
        return self.createIndex(row, column, self._anchors[parent.row()])

    def parent(self, index: QModelIndex) -> QModelIndex:  # noqa: N802
        if not index.isValid():
            return QModelIndex()
        anchor = self._anchor(index)
        if anchor is _ROOT:
            return QModelIndex()
        return self.createIndex(anchor.row, 0, _ROOT)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):  # noqa: N802
        if not index.isValid():
            return None
        group_row, child_row = self.item_position(index)
        is_group = child_row is None
        if role == Qt.ItemDataRole.DisplayRole:
            try:
                if is_group:
                    return self._source.group_label(group_row)
                return self._source.child_label(group_row, child_row)
            except GroupListError as exc:
                self._reject(group_row, -1 if is_group else child_row, exc)
                return None
        if role == Qt.ItemDataRole.FontRole and is_group and GROUP_FONT_BOLD:
            font = QFont()
            font.setBold(True)
            return font
        if role == GroupedListRole.NODE_KIND:
            return "GROUP" if is_group else "CHILD"
        if role == GroupedListRole.IDENTITY:
            if is_group:
                return self._source.group_identity(group_row)
            return self._source.child_identity(group_row, child_row)
        return None

    def roleNames(self) -> dict[int, QByteArray]:  # type: ignore[override]
        """Expose friendly role names for QML consumption."""

        return {
            int(Qt.ItemDataRole.DisplayRole): QByteArray(b"display"),
            int(GroupedListRole.NODE_KIND): QByteArray(b"nodeKind"),
            int(GroupedListRole.IDENTITY): QByteArray(b"identity"),
        }

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:  # noqa: N802
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        group_row, child_row = self.item_position(index)
        if child_row is None:
            return Qt.ItemFlag.ItemIsEnabled
        if self._source.is_child_selectable(group_row, child_row):
            return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        return Qt.ItemFlag.ItemIsEnabled

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def source_model(self) -> GroupedListModel:
        return self._source

    def set_source(self, source: GroupedListModel) -> None:
        """Replace the backing model and reset attached views."""

        self.beginResetModel()
        self._source = source
        self._rejected.clear()
        self._rebuild_anchors()
        self.endResetModel()

    def item_position(self, index: QModelIndex) -> tuple[int, Optional[int]]:
        """Return ``(group_row, child_row)``; ``child_row`` is ``None`` for groups."""

        anchor = self._anchor(index)
        if anchor is _ROOT:
            return index.row(), None
        return anchor.row, index.row()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _anchor(self, index: QModelIndex) -> _Anchor:
        pointer = index.internalPointer()
        if isinstance(pointer, _Anchor):
            return pointer
        return _ROOT

    def _rebuild_anchors(self) -> None:
        self._anchors = [_Anchor(row) for row in range(self._source.group_count())]

    def _reject(self, group_row: int, child_row: int, error: GroupListError) -> None:
        key = (group_row, child_row)
        if key in self._rejected:
            return
        self._rejected.add(key)
        self._errors.handle(
            error,
            ErrorSeverity.WARNING,
            {"group_row": group_row, "child_row": child_row},
        )
        self.rowRejected.emit(group_row, child_row, str(error))


__all__ = ["GroupedListItemModel", "GroupedListRole"]
