"""Ledger computation engines."""

from kakeibo.engines.aggregator import LedgerAggregator, build_chart
from kakeibo.engines.refresh import LedgerRefresher

__all__ = ["LedgerAggregator", "LedgerRefresher", "build_chart"]
