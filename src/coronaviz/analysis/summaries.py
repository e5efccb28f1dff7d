"""
Vignette summaries: pure pandas transformations over the case frame.

Each function takes the normalized case DataFrame (see coronaviz.cases),
never modifies it, and returns a new DataFrame (or scalar) ready for a
chart or a table. Running any of them twice on the same input gives
identical output.

Sections
--------
- total_by_type / overall_death_rate : totals bar chart and headline rate
- daily_by_type                      : worldwide stacked-area series
- country_totals / top_countries     : top-countries table
- treemap_frame                      : country treemap
- country_death_rates                : per-country death-rate table
- province_totals                    : one country's provinces (pie chart)
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np
import pandas as pd

from coronaviz.analysis.aggregate import aggregate
from coronaviz.cases.processor import CaseDataProcessor
from coronaviz.cases.schema import (
    CASE_TYPE_ORDER,
    COUNTRY_COL,
    DATE_COL,
    PROVINCE_COL,
    TYPE_COL,
    CaseType,
)
from coronaviz.utils.logging import get_logger

logger = get_logger(__name__)

CONFIRMED = CaseType.CONFIRMED.value
DEATH = CaseType.DEATH.value

DEFAULT_TOP_N = 10
# Noise-reduction threshold for the per-country death rate table
DEFAULT_MIN_CONFIRMED = 25
# Placeholder region (e.g. cruise ships) left out of per-country rates
DEFAULT_EXCLUDED_REGIONS: tuple[str, ...] = ("Others",)
DEFAULT_PIE_COUNTRY = "China"
DEFAULT_TREEMAP_ROOT = "Confirmed"


# -----------------------------------------------------------------------------
# Total by type
# -----------------------------------------------------------------------------


def total_by_type(df: pd.DataFrame) -> pd.DataFrame:
    """Sum cases per case type.

    Returns:
        DataFrame with columns [type, total], one row per type present,
        ordered confirmed, death, recovered.
    """
    totals = aggregate(df, TYPE_COL)
    order = [t for t in CASE_TYPE_ORDER if t in totals.index]
    out = (
        totals.reindex(order)
        .astype("int64")
        .rename("total")
        .rename_axis(TYPE_COL)
        .reset_index()
    )
    logger.debug(f"total_by_type: {dict(zip(out[TYPE_COL], out['total']))}")
    return out


def overall_death_rate(totals: pd.DataFrame) -> float:
    """Deaths as a percentage of confirmed cases, rounded to 2 decimals.

    Args:
        totals: Output of total_by_type().

    Returns:
        100 * death / confirmed, or NaN when there are no confirmed cases.
    """
    by_type = dict(zip(totals[TYPE_COL], totals["total"]))
    confirmed = int(by_type.get(CONFIRMED, 0))
    death = int(by_type.get(DEATH, 0))
    if confirmed <= 0:
        logger.warning("overall_death_rate: no confirmed cases, rate is undefined")
        return float("nan")
    return round(100.0 * death / confirmed, 2)


# -----------------------------------------------------------------------------
# Daily worldwide series
# -----------------------------------------------------------------------------


def daily_by_type(df: pd.DataFrame, cumulative: bool = False) -> pd.DataFrame:
    """Worldwide daily totals, one column per case type.

    Args:
        df: Case frame.
        cumulative: If True, also add "<type>_cum" running totals.

    Returns:
        DataFrame indexed by date (sorted), integer columns per case type.
        Dates with no record for a type get 0.
    """
    if df.empty:
        return pd.DataFrame(index=pd.DatetimeIndex([], name=DATE_COL))

    daily = aggregate(df, [DATE_COL, TYPE_COL])
    wide = daily.unstack(TYPE_COL, fill_value=0)
    cols = [t for t in CASE_TYPE_ORDER if t in wide.columns]
    wide = wide[cols].sort_index().astype("int64")
    wide.columns.name = None

    if cumulative:
        for c in cols:
            wide[f"{c}_cum"] = wide[c].cumsum()
    return wide


# -----------------------------------------------------------------------------
# Country totals, top countries, treemap
# -----------------------------------------------------------------------------


def country_totals(df: pd.DataFrame, case_type: Union[str, CaseType] = CONFIRMED) -> pd.DataFrame:
    """Total cases of one type per country with each country's global share.

    Returns:
        DataFrame with columns [country, total_cases, perc], sorted by
        total_cases descending (ties by country name). perc is a fraction
        of the global total of that type, in [0, 1].
    """
    df_t = CaseDataProcessor(df).filter_by_type(case_type)
    totals = aggregate(df_t, COUNTRY_COL).astype("int64")
    out = totals.rename("total_cases").rename_axis(COUNTRY_COL).reset_index()

    grand_total = int(out["total_cases"].sum())
    if grand_total > 0:
        out["perc"] = out["total_cases"] / grand_total
    else:
        out["perc"] = 0.0

    out = out.sort_values(
        ["total_cases", COUNTRY_COL], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)
    return out


def top_countries(df: pd.DataFrame, n: int = DEFAULT_TOP_N, case_type: Union[str, CaseType] = CONFIRMED) -> pd.DataFrame:
    """The n countries with the most cases of case_type (see country_totals)."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return country_totals(df, case_type).head(n).reset_index(drop=True)


def treemap_frame(df: pd.DataFrame, root_label: str = DEFAULT_TREEMAP_ROOT) -> pd.DataFrame:
    """Confirmed totals for every country with a single synthetic parent.

    Returns:
        country_totals() frame plus a "parents" column equal to root_label.
    """
    out = country_totals(df, CONFIRMED)
    out["parents"] = root_label
    return out


# -----------------------------------------------------------------------------
# Per-country death rate
# -----------------------------------------------------------------------------


def country_death_rates(
    df: pd.DataFrame,
    min_confirmed: int = DEFAULT_MIN_CONFIRMED,
    exclude: Iterable[str] = DEFAULT_EXCLUDED_REGIONS,
) -> pd.DataFrame:
    """Deaths over confirmed cases per country.

    Args:
        df: Case frame.
        min_confirmed: Keep only countries with at least this many confirmed.
        exclude: Region labels to drop (placeholder regions).

    Returns:
        DataFrame with columns [country, confirmed, death, death_rate],
        death_rate as a fraction, largest outbreaks first (confirmed
        descending, ties by country name).
    """
    columns = [COUNTRY_COL, CONFIRMED, DEATH, "death_rate"]
    if df.empty:
        return pd.DataFrame(columns=columns)

    totals = aggregate(df, [COUNTRY_COL, TYPE_COL])
    wide = totals.unstack(TYPE_COL, fill_value=0)
    for col in (CONFIRMED, DEATH):
        if col not in wide.columns:
            wide[col] = 0
    wide = wide[[CONFIRMED, DEATH]].astype("int64")
    wide.columns.name = None

    excluded = list(exclude)
    wide = wide[~wide.index.isin(excluded)]
    wide = wide[wide[CONFIRMED] >= min_confirmed]

    confirmed = wide[CONFIRMED].where(wide[CONFIRMED] > 0, np.nan)
    wide = wide.assign(death_rate=wide[DEATH] / confirmed)

    out = wide.rename_axis(COUNTRY_COL).reset_index()
    out = out.sort_values(
        [CONFIRMED, COUNTRY_COL], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)
    logger.debug(f"country_death_rates: {len(out)} countries with confirmed >= {min_confirmed}")
    return out[columns]


# -----------------------------------------------------------------------------
# Provinces of one country
# -----------------------------------------------------------------------------


def province_totals(
    df: pd.DataFrame,
    country: str = DEFAULT_PIE_COUNTRY,
    case_type: Union[str, CaseType] = CONFIRMED,
) -> pd.DataFrame:
    """Total cases of one type per province of one country.

    Rows without a province label are counted under the country name, so the
    province totals always add up to the country's figure.

    Returns:
        DataFrame with columns [province, total_cases], sorted descending
        (ties by province name). Empty when the country has no rows.
    """
    df_country = CaseDataProcessor(df).filter_by_country(country)
    df_c = CaseDataProcessor(df_country).filter_by_type(case_type)
    if PROVINCE_COL in df_c.columns:
        prov = df_c[PROVINCE_COL].fillna("").astype(str)
    else:
        prov = pd.Series("", index=df_c.index)
    df_c[PROVINCE_COL] = prov.where(prov != "", country)

    totals = aggregate(df_c, PROVINCE_COL).astype("int64")
    out = totals.rename("total_cases").rename_axis(PROVINCE_COL).reset_index()
    out = out.sort_values(
        ["total_cases", PROVINCE_COL], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)
    return out
