"""Custom exception hierarchy for grouplist."""

from __future__ import annotations


class GroupListError(Exception):
    """Base class for all custom errors raised by grouplist."""


# --- 2-layer hierarchy ---

class DomainError(GroupListError):
    """Base class for errors raised by the grouped list model."""


class ApplicationError(GroupListError):
    """Base class for errors raised while building models from user input."""


# --- Domain errors ---

class IndexOutOfRangeError(DomainError, IndexError):
    """Raised when a group or child index falls outside the valid range."""

    def __init__(self, kind: str, index: object, size: int) -> None:
        super().__init__(f"{kind} index {index!r} out of range [0, {size})")
        self.kind = kind
        self.index = index
        self.size = size


class MissingGroupDataError(DomainError, LookupError):
    """Raised when a group label has no children sequence registered."""

    def __init__(self, label: str) -> None:
        super().__init__(f"no children registered for group {label!r}")
        self.label = label


class DuplicateGroupLabelError(DomainError, ValueError):
    """Raised when two groups share the same label."""

    def __init__(self, label: str) -> None:
        super().__init__(f"duplicate group label {label!r}")
        self.label = label


# --- Application errors ---

class PayloadValidationError(ApplicationError):
    """Raised when a model payload fails schema validation."""


class CliArgumentError(ApplicationError):
    """Raised when a ``--group`` option cannot be parsed."""
