"""Shared decoding helpers for the JSON-file repositories."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any

from pricing.domain.model.value_objects import to_decimal


def load_rows(file_path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of objects. A missing file reads as empty."""
    if not file_path.exists():
        return []
    return json.loads(file_path.read_text(encoding="utf-8"))


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    if value is None:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_decimal(value: str | int | float | None) -> Decimal | None:
    if value is None:
        return None
    return to_decimal(value)
