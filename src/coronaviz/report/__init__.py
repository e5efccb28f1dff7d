"""Vignette report: ordered sections, config persistence and HTML export."""

from coronaviz.report.config import ReportConfig, ReportConfigData
from coronaviz.report.vignette import VignetteSection, build_vignette, export_html, render_html

__all__ = [
    "ReportConfig",
    "ReportConfigData",
    "VignetteSection",
    "build_vignette",
    "export_html",
    "render_html",
]
