"""The coronavirus dataset vignette as an ordered list of sections.

build_vignette() turns the case frame into six sections (text plus a chart or
a table). The same sections feed the NiceGUI page (coronaviz.vignette_app) and
the standalone HTML export below.

Run:
    python -m coronaviz.report.vignette vignette.html
    python -m coronaviz.report.vignette vignette.html --dataset path/or/url.csv
"""

from __future__ import annotations

import argparse
import html
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd
import plotly.io as pio

from coronaviz.analysis.summaries import (
    country_death_rates,
    daily_by_type,
    overall_death_rate,
    province_totals,
    top_countries,
    total_by_type,
    treemap_frame,
)
from coronaviz.cases.loader import load_cases
from coronaviz.figures.case_figures import (
    daily_area_figure,
    province_pie_figure,
    treemap_figure,
    type_bar_figure,
)
from coronaviz.report.config import ReportConfig, ReportConfigData
from coronaviz.tables.case_tables import table_to_html
from coronaviz.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

DEFAULT_TITLE = "Coronavirus dataset vignette"


@dataclass
class VignetteSection:
    """One titled block of the vignette: text plus a figure and/or a table."""
    key: str
    title: str
    text: str = ""
    figure: Optional[dict] = None
    table: Optional[pd.DataFrame] = None
    percent_columns: tuple[str, ...] = field(default_factory=tuple)


def _death_rate_text(rate: float) -> str:
    if math.isnan(rate):
        return "The overall death rate is undefined: the data has no confirmed cases."
    return f"Overall death rate: {rate:.2f}% of confirmed cases."


def build_vignette(df: pd.DataFrame, config: Optional[ReportConfigData] = None) -> list[VignetteSection]:
    """Compute every vignette section from the case frame.

    Args:
        df: Normalized case frame (not modified).
        config: Section parameters; defaults when None.

    Returns:
        Sections in reading order: total_by_type, daily, top_countries,
        treemap, death_rates, province_pie.
    """
    cfg = config or ReportConfigData()
    theme = cfg.theme

    totals = total_by_type(df)
    rate = overall_death_rate(totals)
    top = top_countries(df, n=cfg.top_n)
    rates = country_death_rates(df, min_confirmed=cfg.min_confirmed, exclude=cfg.excluded_regions)
    provinces = province_totals(df, country=cfg.pie_country)

    excluded = ", ".join(cfg.excluded_regions) or "no regions"
    sections = [
        VignetteSection(
            key="total_by_type",
            title="Total cases by type",
            text=_death_rate_text(rate),
            figure=type_bar_figure(totals, theme=theme),
        ),
        VignetteSection(
            key="daily",
            title="Worldwide cases by day",
            text="Daily new cases summed over every country and province, stacked by type.",
            figure=daily_area_figure(daily_by_type(df), theme=theme),
        ),
        VignetteSection(
            key="top_countries",
            title=f"Top {cfg.top_n} countries by confirmed cases",
            text="perc is each country's share of the worldwide confirmed total.",
            table=top,
            percent_columns=("perc",),
        ),
        VignetteSection(
            key="treemap",
            title="Confirmed cases by country",
            figure=treemap_figure(treemap_frame(df, root_label=cfg.treemap_root), theme=theme),
        ),
        VignetteSection(
            key="death_rates",
            title="Death rate by country",
            text=(
                f"Deaths over confirmed cases for countries with at least {cfg.min_confirmed} "
                f"confirmed cases, excluding {excluded}. This is not an epidemiologically "
                "rigorous fatality rate: it ignores the lag between diagnosis and death and "
                "any demographic differences between countries."
            ),
            table=rates,
            percent_columns=("death_rate",),
        ),
        VignetteSection(
            key="province_pie",
            title=f"{cfg.pie_country}: confirmed cases by province",
            figure=province_pie_figure(provinces, country=cfg.pie_country, theme=theme),
        ),
    ]
    logger.info(f"Built {len(sections)} vignette sections from {len(df)} rows")
    return sections


# ---------------------------------------------------------------------------
# HTML export
# ---------------------------------------------------------------------------

_CSS = """
body { font-family: sans-serif; max-width: 60rem; margin: 2rem auto; padding: 0 1rem; }
.coronaviz-table { border-collapse: collapse; }
.coronaviz-table th, .coronaviz-table td { padding: 2px 10px; border-bottom: 1px solid #ddd; }
"""


def render_html(sections: Sequence[VignetteSection], *, title: str = DEFAULT_TITLE) -> str:
    """Render sections into one self-contained HTML page (plotly.js from CDN)."""
    parts = [
        "<!DOCTYPE html>",
        "<html><head><meta charset='utf-8'>",
        f"<title>{html.escape(title)}</title>",
        f"<style>{_CSS}</style>",
        "</head><body>",
        f"<h1>{html.escape(title)}</h1>",
    ]
    plotlyjs_included = False
    for section in sections:
        parts.append(f"<section id='{html.escape(section.key)}'>")
        parts.append(f"<h2>{html.escape(section.title)}</h2>")
        if section.text:
            parts.append(f"<p>{html.escape(section.text)}</p>")
        if section.figure is not None:
            parts.append(
                pio.to_html(
                    section.figure,
                    full_html=False,
                    include_plotlyjs=False if plotlyjs_included else "cdn",
                )
            )
            plotlyjs_included = True
        if section.table is not None:
            parts.append(table_to_html(section.table, section.percent_columns))
        parts.append("</section>")
    parts.append("</body></html>")
    return "\n".join(parts)


def export_html(sections: Sequence[VignetteSection], path: Path | str, *, title: str = DEFAULT_TITLE) -> Path:
    """Write render_html() output to path and return the resolved path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_html(sections, title=title), encoding="utf-8")
    logger.info(f"Wrote vignette to {out}")
    return out.resolve()


def main(argv: Optional[Sequence[str]] = None) -> Path:
    """Load the dataset, build the vignette and write it as HTML."""
    parser = argparse.ArgumentParser(description="Export the coronavirus dataset vignette as HTML.")
    parser.add_argument("output", nargs="?", default="vignette.html", help="output HTML path")
    parser.add_argument("--dataset", default=None, help="CSV path or URL (default: bundled sample)")
    parser.add_argument("--theme", choices=("light", "dark"), default=None)
    args = parser.parse_args(argv)

    configure_logging()

    cfg = ReportConfig.load().data
    if args.theme:
        cfg.theme = args.theme
    df = load_cases(args.dataset or cfg.dataset)
    return export_html(build_vignette(df, cfg), args.output)


if __name__ == "__main__":
    main()
