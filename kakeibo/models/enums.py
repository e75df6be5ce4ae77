"""Enumerations for Kakeibo."""

from enum import StrEnum


class EntryKind(StrEnum):
    INCOME = "income"
    EXPENSE = "expense"
