"""Case data processing.

This module provides the CaseDataProcessor class for the row filters the
vignette sections are built from, keeping data selection separate from the
aggregation and rendering code.
"""

from __future__ import annotations

from typing import Optional, Union

import pandas as pd

from coronaviz.cases.schema import (
    CASE_TYPE_ORDER,
    COUNTRY_COL,
    DATE_COL,
    PROVINCE_COL,
    REQUIRED_COLUMNS,
    TYPE_COL,
    CaseType,
)


class CaseDataProcessor:
    """Filters a normalized case DataFrame.

    The source frame is treated as immutable: every filter returns a new
    DataFrame and a filter that matches nothing returns an empty one.

    Attributes:
        df: The normalized case DataFrame (see coronaviz.cases.loader).
    """

    def __init__(self, df: pd.DataFrame) -> None:
        """Initialize with a normalized case DataFrame.

        Args:
            df: Case DataFrame with the canonical columns.

        Raises:
            ValueError: If a required column is missing.
        """
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"df must contain required column(s) {missing}")
        self.df = df

    def get_case_types(self) -> list[str]:
        """Case types present in the data, in display order."""
        present = set(self.df[TYPE_COL].astype(str))
        return [t for t in CASE_TYPE_ORDER if t in present]

    def get_countries(self) -> list[str]:
        """Sorted unique country names."""
        return sorted(self.df[COUNTRY_COL].dropna().astype(str).unique().tolist())

    def get_provinces(self, country: str) -> list[str]:
        """Sorted unique province names for one country (empty labels skipped)."""
        df_c = self.filter_by_country(country)
        if PROVINCE_COL not in df_c.columns:
            return []
        s = df_c[PROVINCE_COL].fillna("").astype(str)
        return sorted(v for v in s.unique() if v)

    def filter_by_type(self, case_type: Union[str, CaseType]) -> pd.DataFrame:
        """Rows of a single case type."""
        value = case_type.value if isinstance(case_type, CaseType) else str(case_type)
        return self.df[self.df[TYPE_COL] == value].copy()

    def filter_by_country(self, country: str) -> pd.DataFrame:
        """Rows of a single country."""
        return self.df[self.df[COUNTRY_COL] == country].copy()

    def filter_by_date(
        self,
        start: Optional[Union[str, pd.Timestamp]] = None,
        end: Optional[Union[str, pd.Timestamp]] = None,
    ) -> pd.DataFrame:
        """Rows with start <= date <= end; either bound may be None (open)."""
        dates = pd.to_datetime(self.df[DATE_COL])
        mask = pd.Series(True, index=self.df.index)
        if start is not None:
            mask &= dates >= pd.Timestamp(start)
        if end is not None:
            mask &= dates <= pd.Timestamp(end)
        return self.df[mask].copy()

    def date_range(self) -> Optional[tuple[pd.Timestamp, pd.Timestamp]]:
        """(first, last) observation date, or None for an empty frame."""
        if self.df.empty:
            return None
        dates = pd.to_datetime(self.df[DATE_COL])
        return dates.min(), dates.max()
