"""Percentage-formatted vignette tables.

The NiceGUI grid lives in coronaviz.tables.aggrid_table and is not imported
here, so HTML export and notebooks do not pull in NiceGUI.
"""

from coronaviz.tables.case_tables import (
    build_column_defs,
    format_percent,
    percent_table,
    table_to_html,
)

__all__ = [
    "build_column_defs",
    "format_percent",
    "percent_table",
    "table_to_html",
]
