"""Plotly figure dicts for the vignette charts."""

from coronaviz.figures.case_figures import (
    daily_area_figure,
    province_pie_figure,
    treemap_figure,
    type_bar_figure,
)
from coronaviz.figures.theme import FigureStyle, ThemeMode, get_figure_style

__all__ = [
    "FigureStyle",
    "ThemeMode",
    "daily_area_figure",
    "get_figure_style",
    "province_pie_figure",
    "treemap_figure",
    "type_bar_figure",
]
