"""Entry list loading from a JSON document."""

from __future__ import annotations

import json
from pathlib import Path


class EntriesError(ValueError):
    """Raised when an entries document is not a list of integers or nulls."""


def parse_entries(raw: object) -> list[int | None]:
    if not isinstance(raw, list):
        raise EntriesError("entries document must be a JSON array")
    entries: list[int | None] = []
    for idx, value in enumerate(raw):
        if value is None:
            entries.append(None)
        elif isinstance(value, int) and not isinstance(value, bool):
            entries.append(value)
        else:
            raise EntriesError(f"entry {idx} must be an integer or null, got {value!r}")
    return entries


def load_entries(path: Path) -> list[int | None]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise EntriesError(f"invalid JSON in {path}: {exc}") from exc
    return parse_entries(raw)
