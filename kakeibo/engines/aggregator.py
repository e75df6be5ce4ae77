"""Aggregation engine: totals, balance and expense distribution.

All sums are exact integer arithmetic over currency units. Percentages are
only computed for chart display, in ``build_chart``.
"""

from collections.abc import Iterable, Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal
from itertools import cycle

from kakeibo.config import CHART_PALETTE, UNCATEGORIZED_LABEL
from kakeibo.exceptions import InputContractError
from kakeibo.models.entry import NormalizedEntry
from kakeibo.models.enums import EntryKind
from kakeibo.models.reports import ChartSlice, LedgerSummary


class LedgerAggregator:
    """Computes the dashboard summary for a normalized entry set."""

    def summarize(self, entries: Iterable[NormalizedEntry]) -> LedgerSummary:
        """Compute totals, balance and the expense distribution."""
        checked = self._check(entries)

        total_income = 0
        total_expense = 0
        malformed = 0
        for entry in checked:
            if entry.kind == EntryKind.INCOME:
                total_income += entry.amount
            else:
                total_expense += entry.amount
            if entry.is_malformed:
                malformed += 1

        return LedgerSummary(
            total_income=total_income,
            total_expense=total_expense,
            balance=total_income - total_expense,
            category_distribution=self.category_distribution(checked),
            entry_count=len(checked),
            malformed_count=malformed,
        )

    def category_distribution(self, entries: Iterable[NormalizedEntry]) -> dict[str, int]:
        """Sum expense amounts per category, keyed in first-occurrence order."""
        distribution: dict[str, int] = {}
        for entry in self._check(entries):
            if entry.kind != EntryKind.EXPENSE:
                continue
            label = entry.category if entry.category and entry.category.strip() else UNCATEGORIZED_LABEL
            distribution[label] = distribution.get(label, 0) + entry.amount
        return distribution

    @staticmethod
    def _check(entries: Iterable[NormalizedEntry]) -> list[NormalizedEntry]:
        checked: list[NormalizedEntry] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, NormalizedEntry):
                kind = "null" if entry is None else type(entry).__name__
                raise InputContractError(index, f"expected a normalized entry, got {kind}")
            checked.append(entry)
        return checked


def build_chart(
    distribution: Mapping[str, int],
    palette: Sequence[str] = CHART_PALETTE,
) -> list[ChartSlice]:
    """Project a category distribution onto pie-chart slices.

    Colours cycle through the palette in distribution order, so an unchanged
    entry set always gets the same colours.
    """
    total = sum(distribution.values())
    colors = cycle(palette)
    slices: list[ChartSlice] = []
    for label, amount in distribution.items():
        if total:
            share = (Decimal(amount) * 100 / Decimal(total)).quantize(
                Decimal("0.1"), rounding=ROUND_HALF_UP
            )
        else:
            share = Decimal("0.0")
        slices.append(ChartSlice(label=label, amount=amount, color=next(colors), share=share))
    return slices
