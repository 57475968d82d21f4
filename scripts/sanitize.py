"""Sanitize JSON payloads and headers for safe sharing."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

_SENSITIVE_KEYS = {
    "token",
    "authorization",
    "api_key",
    "apikey",
    "secret",
}
_PII_KEYS = {
    "body",
    "email",
    "username",
}


def mask_value(value: Any) -> Any:
    """Return a length-preserving mask for a value."""
    if value is None:
        return value
    if isinstance(value, bool):
        return value
    if isinstance(value, bytes):
        return "*" * len(value)
    if isinstance(value, str):
        return "*" * len(value)
    return "*" * len(str(value))


def mask_token(token: str) -> str:
    """Keep the first and last four characters of a token."""
    if not isinstance(token, str) or len(token) <= 8:
        return mask_value(token)
    return f"{token[:4]}{'*' * (len(token) - 8)}{token[-4:]}"


def _mask_container(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _mask_container(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_mask_container(item) for item in value]
    return mask_value(value)


def _mask_value_for_key(key: str, value: Any) -> Any:
    key_lower = key.lower()
    if any(fragment in key_lower for fragment in _SENSITIVE_KEYS):
        return _mask_container(value)
    if key_lower in _PII_KEYS:
        return _mask_container(value)
    return value


def sanitize_data(value: Any, *, key: str | None = None) -> Any:
    """Return a sanitized representation of a value."""
    if key is not None:
        masked = _mask_value_for_key(key, value)
        if masked is not value:
            return masked
    if isinstance(value, dict):
        return {str(k): sanitize_data(v, key=str(k)) for k, v in value.items()}
    if isinstance(value, list):
        return [sanitize_data(item) for item in value]
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return "<bytes>"
    if isinstance(value, Path):
        return str(value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def sanitize_headers(headers: Mapping[str, Any]) -> dict[str, Any]:
    """Return sanitized headers; the API token header is partially masked."""
    sanitized: dict[str, Any] = {}
    for key, value in headers.items():
        if key.lower() == "token":
            sanitized[key] = mask_token(value)
        else:
            sanitized[key] = sanitize_data(value, key=key)
    return sanitized


def sanitize_file(path: Path) -> Any:
    """Load and sanitize a JSON file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc}") from exc
    return sanitize_data(data)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sanitize a JSON file for sharing.")
    parser.add_argument("input", help="Path to the JSON file.")
    parser.add_argument(
        "--output",
        dest="output",
        help="Write sanitized JSON to this file (default: stdout).",
    )
    parser.add_argument(
        "--indent",
        dest="indent",
        type=int,
        default=2,
        help="Indent level for JSON output (default: 2).",
    )
    return parser.parse_args()


def main() -> int:
    """CLI entrypoint for sanitizing JSON files."""
    args = _parse_args()
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"File not found: {input_path}", file=sys.stderr)
        return 2
    try:
        output_data = sanitize_file(input_path)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    output_text = json.dumps(output_data, indent=args.indent, sort_keys=True, ensure_ascii=True)
    if args.output:
        Path(args.output).write_text(output_text, encoding="utf-8")
        return 0
    print(output_text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
