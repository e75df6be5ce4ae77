"""Aggregate and output models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from kakeibo.models.entry import NormalizedEntry


class LedgerSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_income: int = 0
    total_expense: int = 0
    balance: int = 0
    # Insertion order is first-occurrence order among expense entries.
    category_distribution: dict[str, int] = {}
    entry_count: int = 0
    malformed_count: int = 0


class ChartSlice(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    amount: int
    color: str
    share: Decimal  # percent of total expense, one decimal place


class LedgerSnapshot(BaseModel):
    """Everything the presentation shell needs for one refresh cycle."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[NormalizedEntry, ...] = ()
    summary: LedgerSummary = LedgerSummary()
    fetched_at: datetime


class ExportPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    media_type: str
    content: bytes
