"""Refresh cycle: one immutable snapshot per fetch of the entry set."""

from collections.abc import Iterable, Mapping
from datetime import datetime

from kakeibo.engines.aggregator import LedgerAggregator
from kakeibo.models.entry import LedgerEntry, NormalizedEntry
from kakeibo.models.reports import LedgerSnapshot
from kakeibo.normalization.ledger import LedgerNormalizer


class LedgerRefresher:
    """Builds a LedgerSnapshot from a full listing of raw entries.

    The refresher keeps no state between calls; callers hold on to the
    returned snapshot and replace it on the next refresh.
    """

    def __init__(
        self,
        normalizer: LedgerNormalizer | None = None,
        aggregator: LedgerAggregator | None = None,
    ) -> None:
        self.normalizer = normalizer or LedgerNormalizer()
        self.aggregator = aggregator or LedgerAggregator()

    def refresh(
        self,
        raw_entries: Iterable[LedgerEntry | NormalizedEntry | Mapping],
        fetched_at: datetime | None = None,
    ) -> LedgerSnapshot:
        entries = self.normalizer.normalize(raw_entries)
        return LedgerSnapshot(
            entries=tuple(entries),
            summary=self.aggregator.summarize(entries),
            fetched_at=fetched_at or datetime.now(),
        )
