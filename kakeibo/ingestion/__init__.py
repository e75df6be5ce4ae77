"""Ingestion adapters for loading ledger entries from files."""

from kakeibo.ingestion.base import BaseAdapter
from kakeibo.ingestion.snapshot import SnapshotAdapter, load_entries

__all__ = ["BaseAdapter", "SnapshotAdapter", "load_entries"]
