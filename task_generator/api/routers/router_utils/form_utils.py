"""
Multipart form decoding.

The PDF upload form sends option lists as JSON-encoded arrays and flags as
"true"/"false" strings.

Dependencies: json, task_generator.core.exceptions
System role: Input normalizer for form fields
"""

import json

from task_generator.core.exceptions import InvalidRequest

_FIELD_LABELS = {
    "taskTypes": ("task types", "At least one task type must be selected"),
    "languages": ("languages", "At least one programming language must be selected"),
}


def decode_string_list(raw: str | None, field: str) -> list[str]:
    """
    Decode a JSON-encoded, non-empty list of non-empty strings.

    Args:
        raw: Form value, e.g. '["algorithm", "web"]'
        field: Form field name

    Returns:
        list[str]: Decoded values in their original order

    Raises:
        InvalidRequest: Malformed JSON, not a list, empty, or bad entries
    """
    label, empty_message = _FIELD_LABELS.get(field, (field, f"{field} must not be empty"))

    try:
        values = json.loads(raw) if raw is not None else None
    except (TypeError, ValueError) as e:
        raise InvalidRequest(f"Invalid {label} format", field=field) from e

    if not isinstance(values, list) or not values:
        raise InvalidRequest(empty_message, field=field)

    if not all(isinstance(value, str) and value.strip() for value in values):
        raise InvalidRequest(f"Invalid {label} format", field=field)

    return values


def parse_form_flag(raw: str | None) -> bool:
    """Only the literal "true" (any case) is truthy."""
    return raw is not None and raw.strip().lower() == "true"
