"""Shared helpers for the JSON-file stores."""

from __future__ import annotations

import json
from pathlib import Path

from bakery.domain.exceptions import StorageError


def load_records(file_path: Path) -> list:
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise StorageError(f"Cannot read {file_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise StorageError(f"Corrupt data file {file_path}: {exc}") from exc
    if not isinstance(raw, list):
        raise StorageError(f"Corrupt data file {file_path}: expected a JSON list")
    return raw


def persist_records(file_path: Path, records: list[dict]) -> None:
    try:
        file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
    except OSError as exc:
        raise StorageError(f"Cannot write {file_path}: {exc}") from exc


def ensure_file(file_path: Path) -> None:
    if not file_path.exists():
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("[]", encoding="utf-8")
