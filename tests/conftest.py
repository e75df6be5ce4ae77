"""Shared test fixtures for Kakeibo."""

import json
from datetime import date
from pathlib import Path

import pytest

from kakeibo.models.entry import LedgerEntry, NormalizedEntry
from kakeibo.models.enums import EntryKind


@pytest.fixture
def raw_listing() -> list[dict]:
    """A service listing mixing tagged and legacy (untagged) rows."""
    return [
        {"id": 1, "user_id": 7, "category": "食費", "amount": 1200, "date": "2025-04-01", "note": "ランチ", "type": "expense"},
        {"id": 2, "user_id": 7, "category": "給与", "amount": 250000, "date": "2025-04-25T00:00:00", "type": "income"},
        {"id": 3, "user_id": 7, "category": "交通費", "amount": 640, "date": "2025-04-02"},
        {"id": 4, "user_id": 7, "category": "副業", "amount": 30000, "date": "2025-04-10"},
        {"id": 5, "user_id": 7, "category": "食費", "amount": 800, "date": "2025-04-03", "note": None},
        {"id": 6, "user_id": 7, "category": "家賃", "amount": 80000, "date": "2025-04-27", "type": ""},
    ]


@pytest.fixture
def raw_entries(raw_listing: list[dict]) -> list[LedgerEntry]:
    return [LedgerEntry.model_validate(row) for row in raw_listing]


@pytest.fixture
def food_and_salary() -> list[NormalizedEntry]:
    return [
        NormalizedEntry(id=1, category="食費", amount=1000, date=date(2025, 5, 1), kind=EntryKind.EXPENSE),
        NormalizedEntry(id=2, category="給与", amount=50000, date=date(2025, 5, 25), kind=EntryKind.INCOME),
    ]


@pytest.fixture
def listing_file(tmp_path: Path, raw_listing: list[dict]) -> Path:
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps(raw_listing, ensure_ascii=False), encoding="utf-8")
    return path
