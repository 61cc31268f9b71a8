from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} tidak sah")
    return str(value).strip()


def require_positive_int(value: Any, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} tidak sah")
    if number <= 0:
        raise ValidationError(f"{field_name} tidak sah")
    return number


def optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def parse_id_list(value: Optional[str], field_name: str) -> list[int]:
    """Parse a comma-separated id list such as ``"1,2,3"``."""
    if not value or not value.strip():
        raise ValidationError(f"{field_name} tidak sah")
    ids: list[int] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        ids.append(require_positive_int(part, field_name))
    if not ids:
        raise ValidationError(f"{field_name} tidak sah")
    return ids
