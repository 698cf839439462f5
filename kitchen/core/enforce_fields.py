"""Field Enforcement — pure checks shared by the record field types.

Invariants:
    - Every check either returns the value exactly as given or raises InvalidInputError
    - Blank means whitespace-only; a non-blank string is kept with its whitespace
    - Error messages name the offending field; no value echoing for non-strings
"""

from typing import Any

from kitchen.core.errors import InvalidInputError


def require_text(value: Any, field: str) -> str:
    """Non-blank string, returned unchanged."""
    if not isinstance(value, str):
        raise InvalidInputError(f"{field} must be a string", field)
    if not value.strip():
        raise InvalidInputError(f"{field} cannot be empty or whitespace", field)
    return value


def require_bool(value: Any, field: str) -> bool:
    # bool is checked by type: 0/1 and "true" are rejected
    if not isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a boolean", field)
    return value


def require_text_sequence(value: Any, field: str) -> tuple[str, ...]:
    """List or tuple of non-blank strings, order preserved."""
    if not isinstance(value, (list, tuple)):
        raise InvalidInputError(f"{field} must be a list of strings", field)
    return tuple(
        require_text(item, f"{field}[{index}]") for index, item in enumerate(value)
    )
