"""Plain-text ledger summary report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from kakeibo.config import category_emoji
from kakeibo.engines.aggregator import build_chart
from kakeibo.models.entry import NormalizedEntry
from kakeibo.models.enums import EntryKind
from kakeibo.models.reports import LedgerSnapshot

TEMPLATE_DIR = Path(__file__).parent / "templates"


def format_yen(amount: int) -> str:
    return f"¥{amount:,}" if amount >= 0 else f"-¥{-amount:,}"


def format_signed(entry: NormalizedEntry) -> str:
    """Income as ``+¥1,000``, expense as ``-¥1,000``."""
    sign = "+" if entry.kind == EntryKind.INCOME else "-"
    return f"{sign}¥{entry.amount:,}"


class SummaryReportGenerator:
    """Generates the dashboard view of a snapshot as text."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))
        self.env.filters["yen"] = format_yen
        self.env.filters["signed"] = format_signed
        self.env.globals["emoji"] = category_emoji

    def render(self, snapshot: LedgerSnapshot) -> str:
        """Render the summary report."""
        template = self.env.get_template("summary.txt")
        return template.render(
            snapshot=snapshot,
            summary=snapshot.summary,
            slices=build_chart(snapshot.summary.category_distribution),
            entries=snapshot.entries,
        )
