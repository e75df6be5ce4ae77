"""Adapter for saved ``GET /api/transactions`` responses."""

import json
from pathlib import Path

from pydantic import ValidationError

from kakeibo.exceptions import InputContractError
from kakeibo.ingestion.base import BaseAdapter
from kakeibo.models.entry import LedgerEntry


def load_entries(rows: object) -> list[LedgerEntry]:
    """Validate a decoded transaction listing into raw entries."""
    if not isinstance(rows, list):
        raise InputContractError(0, "expected a JSON array of transactions")

    entries: list[LedgerEntry] = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            kind = "null" if row is None else type(row).__name__
            raise InputContractError(index, f"expected an object, got {kind}")
        try:
            entries.append(LedgerEntry.model_validate(row))
        except ValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
            raise InputContractError(index, f"invalid fields: {fields}") from exc
    return entries


class SnapshotAdapter(BaseAdapter):
    """Loads a JSON array of transactions, as listed by the ledger service."""

    def parse(self, file_path: Path) -> list[LedgerEntry]:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            raw = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InputContractError(0, f"{file_path.name} is not valid JSON: {exc}") from exc
        return load_entries(raw)

    def validate(self, entries: list[LedgerEntry]) -> list[str]:
        warnings: list[str] = []
        seen_ids: set[int] = set()
        for entry in entries:
            if entry.id in seen_ids:
                warnings.append(f"Duplicate entry id {entry.id}")
            seen_ids.add(entry.id)
            if not (entry.category and entry.category.strip()):
                warnings.append(f"Entry {entry.id}: missing category")
            if entry.amount < 0:
                warnings.append(f"Entry {entry.id}: negative amount {entry.amount}")
            if entry.kind and entry.tag is None:
                warnings.append(f"Entry {entry.id}: unknown kind {entry.kind!r}")
        return warnings
