"""Ledger entry models: raw entries from the service and their normalized form."""

from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kakeibo.models.enums import EntryKind


class EntryFields(BaseModel):
    """Fields shared by raw and normalized entries.

    Wire keys follow the ledger service (``user_id``, ``type``); Python code
    uses the field names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    owner_id: int | None = Field(default=None, alias="user_id")
    category: str | None = None
    amount: int
    date: date_type
    note: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def drop_time_of_day(cls, value: object) -> object:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and ("T" in value or " " in value.strip()):
            return datetime.fromisoformat(value.strip()).date()
        return value

    @property
    def is_malformed(self) -> bool:
        """True when the upstream service sent a blank category or a negative amount."""
        return not (self.category and self.category.strip()) or self.amount < 0


class LedgerEntry(EntryFields):
    """An entry as listed by the service. ``kind`` is absent on legacy rows."""

    kind: str | None = Field(default=None, alias="type")

    @property
    def tag(self) -> EntryKind | None:
        """The explicit kind tag, or None when missing or unrecognised."""
        if not self.kind:
            return None
        try:
            return EntryKind(self.kind.strip().lower())
        except ValueError:
            return None


class NormalizedEntry(EntryFields):
    """An entry whose kind has been resolved."""

    kind: EntryKind = Field(alias="type")

    @property
    def tag(self) -> EntryKind:
        return self.kind


class NewEntry(BaseModel):
    """A create request sent to the ledger service."""

    model_config = ConfigDict(str_strip_whitespace=True)

    category: str = Field(min_length=1, max_length=100)
    amount: int = Field(ge=0)
    date: date_type = Field(default_factory=date_type.today)
    note: str | None = None
    kind: EntryKind = EntryKind.EXPENSE

    def to_payload(self) -> dict:
        """JSON body for ``POST /api/transactions``."""
        return {
            "category": self.category,
            "amount": self.amount,
            "date": self.date.isoformat(),
            "note": self.note or "",
            "type": self.kind.value,
        }
