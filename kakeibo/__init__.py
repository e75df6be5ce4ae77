"""Kakeibo — household ledger client."""

__version__ = "0.1.0"
