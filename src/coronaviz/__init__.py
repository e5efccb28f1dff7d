"""
coronaviz: the coronavirus case-count dataset vignette in Python.

This package provides:
- load_cases: load and normalize the daily confirmed/death case dataset
- analysis: group/aggregate summaries (totals by type, top countries,
  per-country death rates, provinces of one country, daily series)
- figures: Plotly figure dicts for the vignette charts
- tables: percentage-formatted tables (HTML and NiceGUI AG Grid)
- report: the vignette as ordered sections, with HTML export
- vignette_app: NiceGUI page showing the vignette

For logging configuration in scripts and notebooks:
    ```python
    from coronaviz.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

from coronaviz.utils.logging import configure_logging, get_logger, install_null_handler

from coronaviz.cases import CaseDataProcessor, CaseType, load_cases
from coronaviz.report import build_vignette, export_html

# records stay silent until an entry point calls configure_logging()
install_null_handler()

__all__ = [
    "CaseDataProcessor",
    "CaseType",
    "build_vignette",
    "configure_logging",
    "export_html",
    "get_logger",
    "load_cases",
]

__version__ = "0.1.0"
