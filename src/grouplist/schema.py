"""Schema helpers for grouped list payloads."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .errors import PayloadValidationError

PAYLOAD_SCHEMA: dict[str, Any] = {
    "$id": "grouplist/payload.schema.json",
    "type": "object",
    "required": ["groups", "children"],
    "properties": {
        "groups": {
            "type": "array",
            "items": {"type": "string"},
        },
        "children": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string"},
            },
        },
    },
    "additionalProperties": False,
}

_validator = Draft202012Validator(PAYLOAD_SCHEMA)


def validate_payload(data: Any) -> None:
    """Validate *data* against :data:`PAYLOAD_SCHEMA`.

    The first violation, ordered by location in the document, is reported so
    that repeated runs give the same message.
    """

    errors = sorted(_validator.iter_errors(data), key=lambda err: [str(part) for part in err.absolute_path])
    if not errors:
        return
    first: ValidationError = errors[0]
    location = "/".join(str(part) for part in first.absolute_path) or "<root>"
    raise PayloadValidationError(f"{location}: {first.message}")


__all__ = ["PAYLOAD_SCHEMA", "validate_payload"]
