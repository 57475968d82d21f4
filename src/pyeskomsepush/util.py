"""Shared utilities for validation and normalization."""

from __future__ import annotations

import math
import re
from datetime import UTC, date, datetime
from typing import Any

from .exceptions import ValidationError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(value: Any) -> int:
    """Parse an integer that may be sent as a string; unparseable values become 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        return int(value)
    return 0


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp with or without fractional seconds."""
    if not isinstance(value, str) or not value:
        raise ValidationError("Timestamp must be a non-empty string.")
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = f"{raw[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError("Timestamp is not a valid ISO 8601 value.") from exc
    if parsed.tzinfo is None:
        raise ValidationError("Timestamp must include timezone information.")
    return parsed


def parse_date(value: str) -> date:
    if not isinstance(value, str) or not value:
        raise ValidationError("Date must be a non-empty string.")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValidationError("Date is not a valid ISO 8601 value.") from exc


def utc_now() -> datetime:
    return datetime.now(UTC)


def require_text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string.")
    text = value.strip()
    if not text:
        raise ValidationError(f"{field} is required.")
    return text


def format_coordinate(value: Any, field: str, *, limit: float) -> str:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(f"{field} must be a number.")
    number = float(value)
    if not math.isfinite(number) or abs(number) > limit:
        raise ValidationError(f"{field} must be between -{limit:g} and {limit:g}.")
    return str(number)
