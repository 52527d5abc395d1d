"""Positional access over a two-level group/child label hierarchy."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence

from .errors import DuplicateGroupLabelError, IndexOutOfRangeError, MissingGroupDataError
from .schema import validate_payload

logger = logging.getLogger(__name__)


class GroupedListModel:
    """Read-only model answering the index queries of an expandable list.

    Groups are kept in display order. Each group's children are resolved by
    label through ``children_by_group``; labels must therefore be unique.
    Identity tokens are positional and only valid until the data changes,
    which is why :meth:`has_stable_identities` is always ``False``.

    A group without a children entry is accepted unless ``strict`` is set;
    querying its children then raises :class:`MissingGroupDataError`.
    """

    __slots__ = ("_groups", "_children")

    def __init__(
        self,
        groups: Sequence[str],
        children_by_group: Mapping[str, Sequence[str]],
        *,
        strict: bool = False,
    ) -> None:
        self._groups: tuple[str, ...] = tuple(groups)
        seen: set[str] = set()
        for label in self._groups:
            if label in seen:
                raise DuplicateGroupLabelError(label)
            seen.add(label)

        self._children: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {label: tuple(children) for label, children in children_by_group.items()}
        )

        missing = [label for label in self._groups if label not in self._children]
        if missing:
            if strict:
                raise MissingGroupDataError(missing[0])
            logger.warning("Groups without children data: %s", ", ".join(missing))
        orphans = [label for label in self._children if label not in seen]
        if orphans:
            logger.debug("Ignoring children for unknown groups: %s", ", ".join(orphans))

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, Sequence[str]]], *, strict: bool = False
    ) -> "GroupedListModel":
        """Build a model from ``(label, children)`` pairs in display order."""

        groups: list[str] = []
        children: dict[str, Sequence[str]] = {}
        for label, items in pairs:
            if label in children:
                raise DuplicateGroupLabelError(label)
            groups.append(label)
            children[label] = items
        return cls(groups, children, strict=strict)

    @classmethod
    def from_payload(cls, payload: Any, *, strict: bool = False) -> "GroupedListModel":
        """Validate a ``{"groups": [...], "children": {...}}`` dict and build a model."""

        validate_payload(payload)
        return cls(payload["groups"], payload["children"], strict=strict)

    # ------------------------------------------------------------------
    # Group queries
    # ------------------------------------------------------------------
    def group_count(self) -> int:
        return len(self._groups)

    def group_label(self, group_index: int) -> str:
        self._check_index("group", group_index, len(self._groups))
        return self._groups[group_index]

    def group_identity(self, group_index: int) -> int:
        return group_index

    # ------------------------------------------------------------------
    # Child queries
    # ------------------------------------------------------------------
    def children(self, group_index: int) -> tuple[str, ...]:
        """Return the children sequence of the group at *group_index*."""

        label = self.group_label(group_index)
        try:
            return self._children[label]
        except KeyError:
            raise MissingGroupDataError(label) from None

    def child_count(self, group_index: int) -> int:
        return len(self.children(group_index))

    def child_label(self, group_index: int, child_index: int) -> str:
        items = self.children(group_index)
        self._check_index("child", child_index, len(items))
        return items[child_index]

    def child_identity(self, group_index: int, child_index: int) -> int:
        return child_index

    def is_child_selectable(self, group_index: int, child_index: int) -> bool:
        return True

    def has_stable_identities(self) -> bool:
        return False

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------
    @property
    def groups(self) -> tuple[str, ...]:
        return self._groups

    @property
    def children_by_group(self) -> Mapping[str, tuple[str, ...]]:
        return self._children

    def iter_rows(self) -> Iterator[tuple[int, Optional[int], str]]:
        """Yield ``(group_index, child_index, label)`` in display order.

        Group rows carry ``None`` as their child index. Groups without
        children data raise :class:`MissingGroupDataError` when reached.
        """

        for group_index, label in enumerate(self._groups):
            yield group_index, None, label
            for child_index, child in enumerate(self.children(group_index)):
                yield group_index, child_index, child

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(groups={list(self._groups)!r})"

    @staticmethod
    def _check_index(kind: str, index: int, size: int) -> None:
        # bool is an int subclass but never a valid position
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
            raise IndexOutOfRangeError(kind, index, size)


__all__ = ["GroupedListModel"]
