"""CSV export of normalized ledger entries."""

import csv
import io
from collections.abc import Iterable

from pydantic import ValidationError

from kakeibo.config import CSV_HEADER, EXPORT_FILENAME, EXPORT_MEDIA_TYPE
from kakeibo.exceptions import ExportFormatError, InputContractError
from kakeibo.models.entry import NormalizedEntry
from kakeibo.models.reports import ExportPayload


class CsvExporter:
    """Serializes normalized entries to CSV and reads them back.

    Columns are ``id, date, category, kind, amount, note``. Fields holding a
    comma, quote or line break are quoted by the csv module, so any standard
    CSV reader recovers the original values.
    """

    def serialize(self, entries: Iterable[NormalizedEntry]) -> str:
        """Render entries as a CSV document, header first, one row per entry."""
        buffer = io.StringIO(newline="")
        writer = csv.writer(buffer)
        writer.writerow(CSV_HEADER)
        for index, entry in enumerate(entries):
            if not isinstance(entry, NormalizedEntry):
                kind = "null" if entry is None else type(entry).__name__
                raise InputContractError(index, f"expected a normalized entry, got {kind}")
            writer.writerow(self._row(entry))
        return buffer.getvalue()

    def to_payload(self, entries: Iterable[NormalizedEntry]) -> ExportPayload:
        """Bundle the CSV document as a downloadable file."""
        return ExportPayload(
            filename=EXPORT_FILENAME,
            media_type=EXPORT_MEDIA_TYPE,
            content=self.serialize(entries).encode("utf-8"),
        )

    def parse(self, text: str) -> list[NormalizedEntry]:
        """Read a document produced by ``serialize`` back into entries."""
        reader = csv.reader(io.StringIO(text, newline=""))
        header = next(reader, None)
        if header is None:
            raise ExportFormatError("document is empty")
        if tuple(header) != CSV_HEADER:
            raise ExportFormatError(f"unexpected header {header}", line=1)

        entries: list[NormalizedEntry] = []
        for row in reader:
            if not row:
                continue
            if len(row) != len(CSV_HEADER):
                raise ExportFormatError(
                    f"expected {len(CSV_HEADER)} fields, got {len(row)}", line=reader.line_num
                )
            entry_id, entry_date, category, kind, amount, note = row
            try:
                entries.append(
                    NormalizedEntry(
                        id=int(entry_id),
                        date=entry_date,
                        category=category or None,
                        kind=kind,
                        amount=int(amount),
                        note=note or None,
                    )
                )
            except (ValueError, ValidationError) as exc:
                raise ExportFormatError(str(exc), line=reader.line_num) from exc
        return entries

    @staticmethod
    def _row(entry: NormalizedEntry) -> list:
        return [
            entry.id,
            entry.date.isoformat(),
            entry.category or "",
            entry.kind.value,
            entry.amount,
            entry.note or "",
        ]
