"""Percentage-formatted tables for the vignette.

Pure pandas: formatting helpers, HTML rendering and the AG Grid column
definitions used by coronaviz.tables.aggrid_table.
"""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd


def format_percent(value: Any, digits: int = 2) -> str:
    """Format a fraction as a percentage string, e.g. 0.1234 -> '12.34%'.

    Missing values (None/NaN) format as an empty string.
    """
    if value is None or pd.isna(value):
        return ""
    return f"{float(value) * 100:.{digits}f}%"


def _check_columns(df: pd.DataFrame, columns: Iterable[str]) -> list[str]:
    cols = list(columns)
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"percent column(s) {missing} not found in dataframe columns")
    return cols


def percent_table(df: pd.DataFrame, columns: Iterable[str], digits: int = 2) -> pd.DataFrame:
    """Return a copy of df with the named fraction columns rendered as percentage strings."""
    cols = _check_columns(df, columns)
    out = df.copy()
    for c in cols:
        out[c] = out[c].map(lambda v: format_percent(v, digits))
    return out


def table_to_html(
    df: pd.DataFrame,
    percent_columns: Iterable[str] = (),
    *,
    digits: int = 2,
    classes: str = "coronaviz-table",
) -> str:
    """Render df as an HTML table, fraction columns shown as percentages."""
    cols = _check_columns(df, percent_columns)
    formatters = {c: (lambda v, _d=digits: format_percent(v, _d)) for c in cols}
    return df.to_html(
        index=False,
        formatters=formatters,
        classes=classes,
        border=0,
        na_rep="",
        justify="left",
    )


def js_percent_value_formatter(digits: int = 2) -> str:
    """AG Grid valueFormatter (JS) showing a fraction as a percentage."""
    return (
        "(params) => (params.value === null || params.value === undefined || Number.isNaN(params.value))"
        f" ? '' : (params.value * 100).toFixed({int(digits)}) + '%'"
    )


def build_column_defs(
    df: pd.DataFrame,
    percent_columns: Iterable[str] = (),
    *,
    digits: int = 2,
) -> list[dict[str, Any]]:
    """AG Grid columnDefs: every column sortable/resizable, percent columns formatted.

    Percent columns keep their numeric values so they still sort numerically.
    """
    percent_set = frozenset(_check_columns(df, percent_columns))
    column_defs: list[dict[str, Any]] = []
    for c in df.columns:
        col_def: dict[str, Any] = {
            "headerName": str(c),
            "field": str(c),
            "sortable": True,
            "resizable": True,
        }
        if c in percent_set:
            col_def[":valueFormatter"] = js_percent_value_formatter(digits)
        column_defs.append(col_def)
    return column_defs
