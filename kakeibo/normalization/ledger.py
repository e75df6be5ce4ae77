"""Ledger normalizer: resolve every entry's kind."""

import logging
from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from kakeibo.config import INCOME_CATEGORY_NAMES
from kakeibo.exceptions import InputContractError
from kakeibo.models.entry import EntryFields, LedgerEntry, NormalizedEntry
from kakeibo.models.enums import EntryKind

logger = logging.getLogger(__name__)


class LedgerNormalizer:
    """Classifies raw entries as income or expense.

    An explicit ``income``/``expense`` tag wins. Untagged legacy entries are
    classified by category name: members of the income set are income,
    everything else is expense. A non-empty tag other than those two is
    expense. Malformed entries (blank category or negative amount) are logged
    and, when untagged, classified as expense.
    """

    def __init__(self, income_categories: Iterable[str] = INCOME_CATEGORY_NAMES) -> None:
        self.income_categories = frozenset(income_categories)

    def normalize(self, raw_entries: Iterable[LedgerEntry | NormalizedEntry | Mapping]) -> list[NormalizedEntry]:
        """Return one normalized entry per input entry, in input order."""
        normalized: list[NormalizedEntry] = []
        for index, item in enumerate(raw_entries):
            entry = self._coerce(index, item)
            kind = self.classify(entry)
            normalized.append(
                NormalizedEntry(**entry.model_dump(exclude={"kind"}), kind=kind)
            )
        return normalized

    def classify(self, entry: LedgerEntry | NormalizedEntry) -> EntryKind:
        """Resolve the kind of a single entry."""
        if entry.is_malformed:
            logger.warning(
                "Entry %s is malformed (category=%r, amount=%s)",
                entry.id,
                entry.category,
                entry.amount,
            )

        if entry.tag is not None:
            return entry.tag
        # Unrecognised non-empty tags count as expense.
        if entry.kind and str(entry.kind).strip():
            return EntryKind.EXPENSE
        if entry.is_malformed:
            return EntryKind.EXPENSE

        if entry.category in self.income_categories:
            return EntryKind.INCOME
        return EntryKind.EXPENSE

    @staticmethod
    def _coerce(index: int, item: object) -> LedgerEntry | NormalizedEntry:
        """Accept model instances as-is and validate plain mappings."""
        if item is None:
            raise InputContractError(index, "entry is null")
        if isinstance(item, (LedgerEntry, NormalizedEntry)):
            return item
        if isinstance(item, EntryFields):
            raise InputContractError(index, f"unsupported entry model {type(item).__name__}")
        if not isinstance(item, Mapping):
            raise InputContractError(index, f"expected a mapping, got {type(item).__name__}")
        try:
            return LedgerEntry.model_validate(item)
        except ValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
            raise InputContractError(index, f"invalid fields: {fields}") from exc
