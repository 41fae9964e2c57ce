from typing import Optional

from inventory_api.core.exceptions import ValidationError

LIKE_ESCAPE = "\\"


def clean_name(value: Optional[str], label: str = "Name") -> str:
    """Strip surrounding whitespace; a name that is blank afterwards is rejected."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{label} is required")
    return cleaned


def contains_pattern(search: str) -> str:
    """``%search%`` for ``ilike(..., escape=LIKE_ESCAPE)``; ``%`` and ``_`` match literally."""
    escaped = (
        search.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


__all__ = ["LIKE_ESCAPE", "clean_name", "contains_pattern"]
