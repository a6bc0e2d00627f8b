"""Strict day/month/year date parsing and month/day match keys.

Only dates written as "<day> <month> <year>" (e.g. "14 Feb 1825") are accepted.
Approximate ("Abt. 1900"), partial ("May 1892") and year-only ("1894") values
are rejected, since they cannot be placed on a specific calendar day.

Day-of-month is only checked against 1..31, so "31 Feb 1900" is accepted.
"""

import re
from datetime import date

from .constants import APPROXIMATION_PREFIXES, MONTHS
from .models import ExactDate, md_key

_APPROXIMATE_RE = re.compile(
    r"^(" + "|".join(rf"{prefix}\.?" for prefix in APPROXIMATION_PREFIXES) + r")\b",
    re.IGNORECASE,
)
_MONTH_YEAR_RE = re.compile(r"^[A-Za-z]{3,9}\s+[0-9]{3,4}$")
_YEAR_ONLY_RE = re.compile(r"^[0-9]{3,4}$")
_EXACT_DMY_RE = re.compile(r"^([0-9]{1,2})\s+([A-Za-z]{3,9})\s+([0-9]{3,4})$")


def resolve_month(token: str) -> int | None:
    """Resolve an English month name or abbreviation to its number.

    Falls back to the first three letters, so "Febr" resolves to February.
    """
    token_lower = token.lower()
    month = MONTHS.get(token_lower)
    if month is None:
        month = MONTHS.get(token_lower[:3])
    return month


def parse_exact_date(raw) -> ExactDate | None:
    """Parse an exact "14 Feb 1825" style date, or return None."""
    if not raw:
        return None
    text = str(raw).strip()
    if not text:
        return None

    if _APPROXIMATE_RE.match(text):
        return None
    if _MONTH_YEAR_RE.match(text):
        return None
    if _YEAR_ONLY_RE.match(text):
        return None

    match = _EXACT_DMY_RE.match(text)
    if not match:
        return None

    day = int(match.group(1))
    month = resolve_month(match.group(2))
    year = int(match.group(3))

    if month is None or not 1 <= day <= 31 or year < 0:
        return None
    return ExactDate(month=month, day=day, year=year)


def date_key(value: date) -> str:
    return md_key(value.month, value.day)
