"""Shared file helpers for the JSON repositories.

Each repository file holds a JSON list of records.  Writes go to a
temporary file first and are then swapped in with ``os.replace``, so a
reader sees either the old list or the new one, never a partial write.
"""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path

from autorepair.domain.exceptions import PersistenceError


class JsonFile:

    def __init__(self, path: Path) -> None:
        self.path = path
        self._ensure_file()

    def load(self) -> list[dict]:
        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(records, list):
            raise PersistenceError(f"{self.path} does not contain a JSON list")
        return records

    def persist(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2) + "\n"
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write {self.path}: {exc}") from exc

    def upsert(self, record: dict, key: str = "id") -> None:
        """Replace the record with the same *key*, or append it."""
        records = self.load()
        for i, raw in enumerate(records):
            if raw[key] == record[key]:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def remove(self, value: str, key: str = "id") -> bool:
        """Drop the record whose *key* equals *value*; False if none matched."""
        records = self.load()
        kept = [raw for raw in records if raw[key] != value]
        if len(kept) == len(records):
            return False
        self.persist(kept)
        return True

    def _ensure_file(self) -> None:
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot create {self.path}: {exc}") from exc


def dump_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def load_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
