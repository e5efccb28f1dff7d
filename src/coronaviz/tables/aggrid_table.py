"""NiceGUI AG Grid rendering of vignette tables."""

from __future__ import annotations

from typing import Iterable

import pandas as pd
from nicegui import ui

from coronaviz.tables.case_tables import build_column_defs
from coronaviz.utils.logging import get_logger

logger = get_logger(__name__)


def case_table_aggrid(
    df: pd.DataFrame,
    percent_columns: Iterable[str] = (),
    *,
    digits: int = 2,
    height: str = "20rem",
) -> ui.aggrid:
    """Read-only AG Grid for a summary frame.

    Args:
        df: Summary frame (e.g. top_countries() or country_death_rates()).
        percent_columns: Fraction columns shown as percentages.
        digits: Decimals for percentages.
        height: CSS height of the grid.

    Returns:
        The ui.aggrid element.
    """
    column_defs = build_column_defs(df, percent_columns, digits=digits)
    aggrid = ui.aggrid.from_pandas(df).classes("w-full").style(f"height: {height}")
    aggrid.options["columnDefs"] = column_defs
    aggrid.update()
    logger.debug(f"case_table_aggrid: {len(df)} rows, percent columns={list(percent_columns)}")
    return aggrid
