from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from typing import Any

EMPTY_VALUE = "—"
SENSITIVE_KEYS = {"token", "secret", "password", "access_token"}


def is_sensitive(key: str) -> bool:
    lower = key.lower()
    return any(token in lower for token in SENSITIVE_KEYS)


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, str):
        clean = value.strip()
        return clean or EMPTY_VALUE
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, datetime):
        return value.astimezone().strftime("%Y-%m-%d %H:%M:%S %z")
    if isinstance(value, (float, Decimal)):
        return f"{value:.2f}"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, sort_keys=True, default=str)
    return str(value)


def sanitize_row(row: dict[str, Any], headers: list[str]) -> dict[str, str]:
    sanitized: dict[str, str] = {}
    for header in headers:
        if is_sensitive(header):
            sanitized[header] = ""
            continue
        value = row.get(header)
        sanitized[header] = "" if value is None else normalize_value(value)
    return sanitized


def matches_query(row: dict[str, Any], query: str | None, keys: list[str]) -> bool:
    if not query or not query.strip():
        return True
    needle = query.strip().casefold()
    return any(needle in normalize_value(row.get(key)).casefold() for key in keys)
