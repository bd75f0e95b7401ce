"""Validation functions for data models."""

from typing import Any, Optional


def to_str(value: Any) -> str:
    """Convert value to string and strip whitespace."""
    return str(value).strip()


def empty_to_none(value: Any) -> Optional[Any]:
    """Convert empty strings to None."""
    if isinstance(value, str) and value == "":
        return None
    return value


def normalize(value: Any) -> Optional[Any]:
    """Normalize strings.

    - Strip white spaces, tabs and new lines.
    - Replace tabs, new lines and multiple white spaces with one white space.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return " ".join(value.split())
    return value


def yes_no(value: Any) -> Any:
    """Turn the literals ``yes``/``no`` into booleans, keep anything else."""
    if isinstance(value, str):
        stripped = value.strip()
        if stripped == "yes":
            return True
        if stripped == "no":
            return False
        return stripped
    return value
