"""Aggregations behind the vignette sections.

Pure pandas/numpy: no Plotly, no NiceGUI. Each summary returns a new frame
that the figures and tables modules render.
"""

from coronaviz.analysis.aggregate import aggregate
from coronaviz.analysis.summaries import (
    country_death_rates,
    country_totals,
    daily_by_type,
    overall_death_rate,
    province_totals,
    top_countries,
    total_by_type,
    treemap_frame,
)

__all__ = [
    "aggregate",
    "country_death_rates",
    "country_totals",
    "daily_by_type",
    "overall_death_rate",
    "province_totals",
    "top_countries",
    "total_by_type",
    "treemap_frame",
]
