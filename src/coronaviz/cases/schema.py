"""Column conventions for the case-count dataset.

Single source of truth for column names, accepted source aliases and the
case type enumeration, so loader, processor and summaries stay consistent.
"""

from __future__ import annotations

from enum import Enum

DATE_COL = "date"
PROVINCE_COL = "province"
COUNTRY_COL = "country"
LAT_COL = "lat"
LONG_COL = "long"
CASES_COL = "cases"
TYPE_COL = "type"

REQUIRED_COLUMNS: tuple[str, ...] = (DATE_COL, COUNTRY_COL, CASES_COL, TYPE_COL)

# Canonical column order after normalization
CANONICAL_COLUMNS: tuple[str, ...] = (
    DATE_COL,
    PROVINCE_COL,
    COUNTRY_COL,
    LAT_COL,
    LONG_COL,
    CASES_COL,
    TYPE_COL,
)

# Source spellings seen in published copies of the dataset -> canonical name
COLUMN_ALIASES: dict[str, str] = {
    "Province.State": PROVINCE_COL,
    "Province/State": PROVINCE_COL,
    "province_state": PROVINCE_COL,
    "Country.Region": COUNTRY_COL,
    "Country/Region": COUNTRY_COL,
    "country_region": COUNTRY_COL,
    "Lat": LAT_COL,
    "Long": LONG_COL,
    "Long_": LONG_COL,
    "Date": DATE_COL,
    "Cases": CASES_COL,
    "Type": TYPE_COL,
}


class CaseType(str, Enum):
    """Case category of a single observation."""

    CONFIRMED = "confirmed"
    DEATH = "death"
    RECOVERED = "recovered"


# Display order for summaries and charts
CASE_TYPE_ORDER: tuple[str, ...] = tuple(t.value for t in CaseType)

TYPE_ALIASES: dict[str, str] = {
    "deaths": CaseType.DEATH.value,
    "dead": CaseType.DEATH.value,
    "confirm": CaseType.CONFIRMED.value,
    "recovery": CaseType.RECOVERED.value,
}


def normalize_case_type(value: object) -> str:
    """Return the canonical case type string for a raw source value.

    Raises:
        ValueError: If the value is not a known case type.
    """
    s = str(value).strip().lower()
    s = TYPE_ALIASES.get(s, s)
    if s not in CASE_TYPE_ORDER:
        raise ValueError(f"Unknown case type {value!r}; expected one of {list(CASE_TYPE_ORDER)}")
    return s
