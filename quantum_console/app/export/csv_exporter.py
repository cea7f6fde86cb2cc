from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path
from typing import Any

from quantum_console.app.ui.listing_view import sanitize_row


def resolve_headers(rows: list[dict[str, Any]], headers: list[str] | None = None) -> list[str]:
    if headers:
        return list(headers)
    if not rows:
        return []
    return list(rows[0].keys())


def export_rows(
    *,
    module: str,
    rows: list[dict[str, Any]],
    headers: list[str] | None = None,
    output_dir: str = "out/exports",
    filters: dict[str, str] | None = None,
) -> Path:
    """Write ``rows`` to a timestamped CSV file and return its path.

    Columns default to the keys of the first row. Nested values are written as
    JSON and sensitive columns (passwords, tokens) are left blank.
    """
    fieldnames = resolve_headers(rows, headers)
    destination = Path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)

    now = datetime.now().astimezone()
    timestamp = now.strftime("%Y%m%d_%H%M%S")
    path = destination / f"{module}_{timestamp}.csv"

    with path.open("w", newline="", encoding="utf-8-sig") as handle:
        handle.write(f"# timestamp_local: {now.isoformat()}\n")
        handle.write(f"# module: {module}\n")
        handle.write(f"# rows: {len(rows)}\n")
        handle.write(f"# filters: {filters or {}}\n")
        writer = csv.DictWriter(handle, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(sanitize_row(row, headers=fieldnames))

    return path
