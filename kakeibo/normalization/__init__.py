"""Normalization layer: raw service entries to classified entries."""

from kakeibo.normalization.ledger import LedgerNormalizer

__all__ = ["LedgerNormalizer"]
