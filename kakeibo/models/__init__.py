"""Data models for Kakeibo."""

from kakeibo.models.entry import EntryFields, LedgerEntry, NewEntry, NormalizedEntry
from kakeibo.models.enums import EntryKind
from kakeibo.models.reports import ChartSlice, ExportPayload, LedgerSnapshot, LedgerSummary

__all__ = [
    "ChartSlice",
    "EntryFields",
    "EntryKind",
    "ExportPayload",
    "LedgerEntry",
    "LedgerSnapshot",
    "LedgerSummary",
    "NewEntry",
    "NormalizedEntry",
]
