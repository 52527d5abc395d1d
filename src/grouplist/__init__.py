"""Positional access over two-level group/child label lists."""

from __future__ import annotations

from .errors import (
    DuplicateGroupLabelError,
    GroupListError,
    IndexOutOfRangeError,
    MissingGroupDataError,
    PayloadValidationError,
)
from .model import GroupedListModel

__all__ = [
    "DuplicateGroupLabelError",
    "GroupListError",
    "GroupedListModel",
    "IndexOutOfRangeError",
    "MissingGroupDataError",
    "PayloadValidationError",
]
