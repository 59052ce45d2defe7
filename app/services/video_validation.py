"""
Field rules for video input, checked before anything touches the store.
- create: title, date and availableResolutions are required; description optional
- update: every field optional, but a field that is present must pass the same rule

All rules run on every call; errors come back in field order
(title, description, date, availableResolutions). Wrong types are reported as
messages, never raised.
"""
import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from app.schemas.video import RESOLUTION_VALUES

MSG_BODY_NOT_OBJECT = "Request body must be a JSON object"
MSG_TITLE = 'Invalid or missing "title"'
MSG_DESCRIPTION = 'Invalid "description"'
MSG_DATE = 'Invalid or missing "date", expected an ISO 8601 string'
MSG_RESOLUTIONS_NOT_LIST = '"availableResolutions" must be an array of strings'
MSG_RESOLUTIONS_MISSING = 'Missing "availableResolutions"'


class ValidationMode(str, enum.Enum):
    CREATE = "create"
    UPDATE = "update"


@dataclass
class ValidationResult:
    ok: bool
    errors: list[str] = field(default_factory=list)


def parse_date(value: Any) -> datetime | None:
    """Parse an ISO 8601 string to an aware UTC datetime. Values without an offset are UTC."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        # e.g. 0001-01-01T00:00:00+01:00 falls before datetime.min in UTC
        return None


def normalize_date(value: str) -> str:
    """Canonical form: UTC, millisecond precision, Z suffix (2023-01-01T00:00:00.000Z)."""
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"Not an ISO 8601 date: {value!r}")
    return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _resolution_errors(value: Any) -> list[str]:
    if not isinstance(value, list):
        return [MSG_RESOLUTIONS_NOT_LIST]
    return [
        f'Invalid "availableResolutions" value: {item}'
        for item in value
        if not (isinstance(item, str) and item in RESOLUTION_VALUES)
    ]


def validate_video_input(data: Any, mode: ValidationMode = ValidationMode.CREATE) -> ValidationResult:
    if not isinstance(data, dict):
        return ValidationResult(ok=False, errors=[MSG_BODY_NOT_OBJECT])

    required = mode == ValidationMode.CREATE
    errors: list[str] = []

    if required or "title" in data:
        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            errors.append(MSG_TITLE)

    if "description" in data and not isinstance(data["description"], str):
        errors.append(MSG_DESCRIPTION)

    if required or "date" in data:
        if parse_date(data.get("date")) is None:
            errors.append(MSG_DATE)

    if "availableResolutions" in data:
        errors.extend(_resolution_errors(data["availableResolutions"]))
    elif required:
        errors.append(MSG_RESOLUTIONS_MISSING)

    return ValidationResult(ok=not errors, errors=errors)
