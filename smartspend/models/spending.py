"""
Core Data Models for SmartSpend

These models define the shape of everything the tracker persists:
1. SpendingEntry - one recorded expense
2. DayRecord - one calendar day's spending, the "current day" or an archived day
3. AppState - the session's current day plus its bounded history

DESIGN DECISION: Amounts are Decimal in memory (no float drift in totals)
but serialize as JSON numbers, so the stored payload keeps the
`{date, spendings, total, firstEntryTime}` layout existing data uses.
"""

import datetime as dt
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    TypeAdapter,
    model_validator,
)


# Decimal in memory, plain number on the wire
Amount = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]

# firstEntryTime value meaning "no entry recorded yet"
NO_ENTRY_TIME = 0


def to_millis(moment: dt.datetime) -> int:
    """Milliseconds since the epoch for a datetime."""
    return int(moment.timestamp()) * 1000 + moment.microsecond // 1000


def format_wall_clock(moment: dt.datetime) -> str:
    """12-hour wall-clock rendering, e.g. '09:05 PM'."""
    return moment.strftime("%I:%M %p")


class SpendingEntry(BaseModel):
    """
    One recorded expense.

    The amount is validated (> 0, finite) before an entry is built;
    the entry itself trusts its inputs.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Time-based identifier, unique within the day"
    )
    amount: Amount = Field(
        ...,
        description="Amount spent"
    )
    description: str = Field(
        ...,
        description="Free-text label"
    )
    category: str = Field(
        ...,
        description="Category label, case preserved"
    )
    timestamp: int = Field(
        ...,
        ge=0,
        description="Creation time in ms since epoch"
    )
    time: str = Field(
        default="",
        description="Wall-clock rendering of timestamp (display only)"
    )


class DayRecord(BaseModel):
    """
    One calendar day's spending activity.

    INVARIANT: total == sum(entry.amount for entry in spendings).
A stored total is a rounded float, so it is recomputed from the entries
whenever a record with entries is built or loaded.
    first_entry_time anchors the 24-hour rollover window and stays
    NO_ENTRY_TIME until the first entry is added.
    """
    model_config = ConfigDict(populate_by_name=True)

    date: dt.date = Field(
        ...,
        description="Calendar date this record covers"
    )
    spendings: list[SpendingEntry] = Field(default_factory=list)
    total: Amount = Field(
        default=Decimal("0"),
        description="Running total of the day's spendings"
    )
    first_entry_time: int = Field(
        default=NO_ENTRY_TIME,
        ge=0,
        alias="firstEntryTime",
        description="ms timestamp of the first entry, 0 if none"
    )

    @model_validator(mode="after")
    def reconcile_total(self) -> "DayRecord":
        """Derive total from the entries, whose amounts round-trip exactly."""
        if self.spendings:
            self.total = self.computed_total()
        return self

    @classmethod
    def new(cls, day: dt.date) -> "DayRecord":
        """Create an empty record for a day."""
        return cls(date=day)

    @property
    def has_entries(self) -> bool:
        return len(self.spendings) > 0

    @property
    def transaction_count(self) -> int:
        return len(self.spendings)

    @property
    def has_first_entry_time(self) -> bool:
        return self.first_entry_time != NO_ENTRY_TIME

    def find_spending(self, spending_id: str) -> Optional[SpendingEntry]:
        """Return the entry with this id, or None."""
        for entry in self.spendings:
            if entry.id == spending_id:
                return entry
        return None

    def computed_total(self) -> Decimal:
        """Sum of entry amounts (what `total` must always equal)."""
        return sum((entry.amount for entry in self.spendings), Decimal("0"))

    def to_json(self) -> str:
        """Serialize for the key-value store."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str) -> "DayRecord":
        """Parse a stored record. Raises pydantic.ValidationError if malformed."""
        return cls.model_validate_json(raw)


_HISTORY_ADAPTER = TypeAdapter(list[DayRecord])


def dump_history(history: list[DayRecord]) -> str:
    """Serialize a history list, most recent first."""
    return _HISTORY_ADAPTER.dump_json(history, by_alias=True).decode("utf-8")


def load_history(raw: str) -> list[DayRecord]:
    """Parse a stored history list. Raises pydantic.ValidationError if malformed."""
    return _HISTORY_ADAPTER.validate_json(raw)


class AppState(BaseModel):
    """
    Session state: exactly one current day plus the archived history.

    Not persisted as a whole. It is rebuilt from the store on startup and
    every mutation writes the affected part straight back.
    """

    current_day: DayRecord
    history: list[DayRecord] = Field(
        default_factory=list,
        description="Archived days, most recent first"
    )

    def find_history_day(self, day: dt.date) -> Optional[DayRecord]:
        """First (most recent) archived record for a date, if any."""
        for record in self.history:
            if record.date == day:
                return record
        return None
