"""Base adapter interface for loading ledger entries."""

from abc import ABC, abstractmethod
from pathlib import Path

from kakeibo.models.entry import LedgerEntry


class BaseAdapter(ABC):
    """Abstract base class for entry sources."""

    @abstractmethod
    def parse(self, file_path: Path) -> list[LedgerEntry]:
        """Read a file and return raw ledger entries."""
        ...

    @abstractmethod
    def validate(self, entries: list[LedgerEntry]) -> list[str]:
        """Check entries for problems. Returns a list of warning messages."""
        ...
