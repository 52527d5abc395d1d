"""Qt item models."""

from .grouped_list_model import GroupedListItemModel, GroupedListRole

__all__ = ["GroupedListItemModel", "GroupedListRole"]
