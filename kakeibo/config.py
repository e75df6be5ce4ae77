"""Configuration constants for Kakeibo.

The category tables mirror the choices offered by the entry form. Only the
income table takes part in classification; the emoji are display-only.
"""

import os

EXPENSE_CATEGORIES: dict[str, str] = {
    "食費": "🍔",
    "交通費": "🚌",
    "光熱費": "💡",
    "家賃": "🏠",
    "遊び": "🎮",
    "その他": "📝",
}

INCOME_CATEGORIES: dict[str, str] = {
    "給与": "💰",
    "副業": "💻",
    "ボーナス": "🎁",
    "その他収入": "✨",
}

# Closed set used to classify legacy entries that carry no kind tag.
INCOME_CATEGORY_NAMES: frozenset[str] = frozenset(INCOME_CATEGORIES)

DEFAULT_INCOME_EMOJI = "✨"
DEFAULT_EXPENSE_EMOJI = "📝"

UNCATEGORIZED_LABEL = "未分類"

CHART_PALETTE: tuple[str, ...] = (
    "#B5E8C7",
    "#B5DEFF",
    "#E5D4FF",
    "#FFDEB5",
    "#FFD4E5",
    "#C7FFED",
)

CSV_HEADER: tuple[str, ...] = ("id", "date", "category", "kind", "amount", "note")
EXPORT_FILENAME = "transactions.csv"
EXPORT_MEDIA_TYPE = "text/csv; charset=utf-8"

DEFAULT_API_URL = os.environ.get("KAKEIBO_API_URL", "http://localhost:8000")
DEFAULT_TIMEOUT = 30.0


def category_emoji(category: str | None, kind: str) -> str:
    """Display emoji for a category, falling back per kind."""
    if kind == "income":
        return INCOME_CATEGORIES.get(category or "", DEFAULT_INCOME_EMOJI)
    return EXPENSE_CATEGORIES.get(category or "", DEFAULT_EXPENSE_EMOJI)
