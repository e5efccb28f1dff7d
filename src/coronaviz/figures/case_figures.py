"""Plotly figures for the vignette sections.

Every function returns a Plotly figure dict (never go.Figure) so the result
can go straight into ui.plotly, plotly.io.to_html or a JSON file. Inputs are
the frames produced by coronaviz.analysis.summaries.
"""

from __future__ import annotations

from typing import Optional, Union

import pandas as pd
import plotly.graph_objects as go

from coronaviz.cases.schema import CASE_TYPE_ORDER, COUNTRY_COL, PROVINCE_COL, TYPE_COL
from coronaviz.figures.theme import FigureStyle, ThemeMode, get_figure_style
from coronaviz.utils.logging import get_logger

logger = get_logger(__name__)

def _apply_layout(fig: go.Figure, style: FigureStyle, **layout) -> None:
    """Theme colors, template and margins shared by all vignette figures."""
    fig.update_layout(
        template=style.template,
        paper_bgcolor=style.background,
        plot_bgcolor=style.background,
        font=dict(color=style.foreground),
        margin=dict(l=40, r=20, t=50, b=40),
        **layout,
    )


def type_bar_figure(totals: pd.DataFrame, *, theme: Optional[Union[str, ThemeMode]] = None) -> dict:
    """Bar chart of total cases per case type.

    Args:
        totals: Output of total_by_type() (columns type, total).
        theme: Theme mode, LIGHT by default.
    """
    style = get_figure_style(theme)
    fig = go.Figure()
    if not totals.empty:
        types = totals[TYPE_COL].astype(str).tolist()
        values = [int(v) for v in totals["total"]]
        fig.add_trace(
            go.Bar(
                x=types,
                y=values,
                marker_color=[style.case_color(t) for t in types],
                text=[f"{v:,}" for v in values],
                textposition="auto",
                name="Total",
            )
        )
    _apply_layout(
        fig,
        style,
        title="Total cases by type",
        xaxis=dict(title="Type"),
        yaxis=dict(title="Total cases"),
        showlegend=False,
    )
    return fig.to_dict()


def daily_area_figure(daily: pd.DataFrame, *, theme: Optional[Union[str, ThemeMode]] = None) -> dict:
    """Stacked area chart of worldwide daily cases.

    Args:
        daily: Output of daily_by_type() (date index, one column per type).
            Cumulative "_cum" columns are ignored.
        theme: Theme mode, LIGHT by default.
    """
    style = get_figure_style(theme)
    fig = go.Figure()
    cols = [t for t in CASE_TYPE_ORDER if t in daily.columns]
    x = [pd.Timestamp(d).strftime("%Y-%m-%d") for d in daily.index]
    for col in cols:
        fig.add_trace(
            go.Scatter(
                x=x,
                y=[int(v) for v in daily[col]],
                mode="lines",
                stackgroup="cases",
                name=col,
                line=dict(color=style.case_color(col)),
            )
        )
    _apply_layout(
        fig,
        style,
        title="Worldwide daily cases by type",
        xaxis=dict(title="Date"),
        yaxis=dict(title="Number of cases"),
        hovermode="x unified",
        legend=dict(x=0.05, y=0.95),
    )
    return fig.to_dict()


def treemap_figure(treemap_df: pd.DataFrame, *, theme: Optional[Union[str, ThemeMode]] = None) -> dict:
    """Treemap of confirmed cases per country under one synthetic root.

    Args:
        treemap_df: Output of treemap_frame() (country, total_cases, parents).
        theme: Theme mode, LIGHT by default.
    """
    style = get_figure_style(theme)
    fig = go.Figure()
    if not treemap_df.empty:
        roots = treemap_df["parents"].astype(str).unique().tolist()
        if len(roots) != 1:
            raise ValueError(f"treemap_df must have a single parents label, got {roots}")
        root = roots[0]
        labels = treemap_df[COUNTRY_COL].astype(str).tolist()
        values = [int(v) for v in treemap_df["total_cases"]]
        fig.add_trace(
            go.Treemap(
                labels=[root] + labels,
                parents=[""] + [root] * len(labels),
                values=[sum(values)] + values,
                branchvalues="total",
                textinfo="label+value+percent root",
            )
        )
    _apply_layout(fig, style, title="Confirmed cases by country")
    return fig.to_dict()


def province_pie_figure(
    provinces: pd.DataFrame,
    *,
    country: str = "",
    theme: Optional[Union[str, ThemeMode]] = None,
) -> dict:
    """Pie chart of confirmed cases per province of one country.

    Labels and percentages are drawn inside the slices; hover shows the count.

    Args:
        provinces: Output of province_totals() (province, total_cases).
        country: Country name used in the title.
        theme: Theme mode, LIGHT by default.
    """
    style = get_figure_style(theme)
    fig = go.Figure()
    if not provinces.empty:
        values = [int(v) for v in provinces["total_cases"]]
        fig.add_trace(
            go.Pie(
                labels=provinces[PROVINCE_COL].astype(str).tolist(),
                values=values,
                textposition="inside",
                textinfo="label+percent",
                insidetextfont=dict(color="#FFFFFF"),
                hoverinfo="text",
                text=[f"{v:,} cases" for v in values],
                showlegend=False,
            )
        )
    else:
        logger.info(f"province_pie_figure: no province rows for {country!r}")
    title = f"{country}: confirmed cases by province" if country else "Confirmed cases by province"
    _apply_layout(fig, style, title=title)
    return fig.to_dict()
