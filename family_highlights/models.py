"""Data models for family-tree records and highlight results."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any

from .constants import UNKNOWN_NAME


def _nested_value(record: Any, *keys: str) -> Any:
    """Walk nested JSON objects, returning None as soon as a level is missing."""
    value = record
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def md_key(month: int, day: int) -> str:
    """Zero-padded "MM-DD" key used to compare dates irrespective of year."""
    return f"{month:02d}-{day:02d}"


@dataclass(frozen=True)
class ExactDate:
    """A fully specified day/month/year date."""

    month: int
    day: int
    year: int

    @property
    def key(self) -> str:
        return md_key(self.month, self.day)

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "day": self.day,
            "year": self.year,
        }


@dataclass
class Marriage:
    marriage_date: Any = None
    spouse_name: Any = None

    @classmethod
    def from_dict(cls, raw: dict) -> "Marriage":
        return cls(
            marriage_date=raw.get("marriageDate"),
            spouse_name=raw.get("spouseName"),
        )


@dataclass
class Person:
    id: Any = None
    first_name: Any = None
    middle_name: Any = None
    last_name: Any = None
    birth_date: Any = None  # raw birth.date
    death_date: Any = None  # raw death.date
    marriages: list[Marriage] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict) -> "Person":
        """Build a Person from a raw dataset record.

        Missing or null fields stay None; null marriage entries are dropped.
        """
        raw_marriages = raw.get("marriages")
        if not isinstance(raw_marriages, list):
            raw_marriages = []

        return cls(
            id=raw.get("id"),
            first_name=raw.get("firstName"),
            middle_name=raw.get("middleName"),
            last_name=raw.get("lastName"),
            birth_date=_nested_value(raw, "birth", "date"),
            death_date=_nested_value(raw, "death", "date"),
            marriages=[Marriage.from_dict(m) for m in raw_marriages if isinstance(m, dict)],
        )

    def display_name(self) -> str:
        parts = [str(p) for p in (self.first_name, self.middle_name, self.last_name) if p]
        name = " ".join(parts).strip()
        if name:
            return name
        return str(self.id) if self.id else UNKNOWN_NAME


@dataclass
class Highlights:
    """Event sentences matching a reference date and the day after it."""

    reference_date: date
    today: list[str] = field(default_factory=list)
    tomorrow: list[str] = field(default_factory=list)

    @property
    def next_date(self) -> date:
        return self.reference_date + timedelta(days=1)

    @property
    def is_empty(self) -> bool:
        return not self.today and not self.tomorrow

    def to_dict(self) -> dict:
        return {
            "today_date": self.reference_date.isoformat(),
            "tomorrow_date": self.next_date.isoformat(),
            "today": list(self.today),
            "tomorrow": list(self.tomorrow),
        }
