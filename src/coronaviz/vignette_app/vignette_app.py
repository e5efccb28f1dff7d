"""Vignette app: standalone NiceGUI page showing the coronavirus vignette.

Runs in native or web mode via env vars. Uses @ui.page("/") pattern.

Run:
    python -m coronaviz.vignette_app.vignette_app

Env vars:
    CORONAVIZ_GUI_NATIVE: 1/0 (default 0)
    CORONAVIZ_GUI_RELOAD: 1/0 (default 0)
    HOST: bind host (default 127.0.0.1 native, 0.0.0.0 web)
    PORT: bind port (default find_open_port native, 8080 web)
    CORONAVIZ_LOG_LEVEL: log level (default INFO)
"""

from __future__ import annotations

import multiprocessing as mp
import os
from multiprocessing import freeze_support
from typing import Sequence

from nicegui import ui

from coronaviz.cases.loader import load_cases
from coronaviz.report.config import ReportConfig, ReportConfigData
from coronaviz.report.vignette import DEFAULT_TITLE, VignetteSection, build_vignette
from coronaviz.tables.aggrid_table import case_table_aggrid
from coronaviz.utils.logging import configure_logging, get_logger
from coronaviz.vignette_app import header
from coronaviz.vignette_app.gui_defaults import setUpGuiDefaults

logger = get_logger(__name__)

def _env_bool(name: str, default: bool) -> bool:
    """Parse env var as bool; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    """Parse env var as int; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def persist_theme(config: ReportConfig, dark: bool) -> None:
    """Store the toggled theme in the report config file.

    A failed save is logged and shown; the page keeps the new theme.
    """
    config.set_theme("dark" if dark else "light")
    try:
        config.save()
    except OSError as e:
        ui.notify(f"Could not save theme: {e}", type="warning")


def render_sections(sections: Sequence[VignetteSection]) -> None:
    """Build one card per section into the current NiceGUI context."""
    for section in sections:
        with ui.card():
            ui.label(section.title).classes("!text-lg font-bold")
            if section.text:
                ui.label(section.text)
            if section.figure is not None:
                ui.plotly(section.figure).classes("w-full h-96")
            if section.table is not None:
                case_table_aggrid(section.table, section.percent_columns)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

@ui.page("/")
def home() -> None:
    """Home page: header plus the vignette sections for the configured dataset."""
    setUpGuiDefaults("text-sm")
    ui.page_title(DEFAULT_TITLE)

    config = ReportConfig.load()
    cfg: ReportConfigData = config.data
    dataset_label = cfg.dataset or "bundled sample"

    content = ui.column().classes("w-full max-w-5xl mx-auto gap-4 p-4")

    def _rebuild() -> None:
        content.clear()
        with content:
            try:
                df = load_cases(cfg.dataset)
                render_sections(build_vignette(df, cfg))
            except FileNotFoundError as e:
                logger.error(f"Dataset not found: {e}")
                ui.label(f"Dataset not found: {dataset_label}").classes("text-negative")
            except Exception as e:
                logger.exception("Failed to build vignette from %s: %s", dataset_label, e)
                ui.label(f"Failed to load: {e}").classes("text-negative")

    def _on_theme_changed(dark: bool) -> None:
        persist_theme(config, dark)
        _rebuild()

    header.build_vignette_header(
        title=DEFAULT_TITLE,
        subtitle=dataset_label,
        dark=config.get_theme() == "dark",
        on_theme_changed=_on_theme_changed,
    )
    _rebuild()


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(*, reload: bool | None = None, native_bool: bool | None = None) -> None:
    """Start the vignette application.

    Env vars (used when arg is None):
      - CORONAVIZ_GUI_NATIVE: 1/0
      - CORONAVIZ_GUI_RELOAD: 1/0
      - HOST: bind host
      - PORT: bind port
    """
    native_bool = _env_bool("CORONAVIZ_GUI_NATIVE", False) if native_bool is None else native_bool
    reload = _env_bool("CORONAVIZ_GUI_RELOAD", False) if reload is None else reload

    from nicegui import native as native_module
    if native_bool:
        port = _env_int("PORT", native_module.find_open_port())
    else:
        port = _env_int("PORT", 8080)

    default_host = "127.0.0.1" if native_bool else "0.0.0.0"
    host = os.getenv("HOST", default_host)

    logger.info(
        "Starting vignette app: port=%s reload=%s native=%s",
        port,
        reload,
        native_bool,
    )

    run_kwargs: dict = {
        "host": host,
        "port": port,
        "reload": reload,
        "native": native_bool,
        "title": DEFAULT_TITLE,
    }
    if native_bool:
        run_kwargs["window_size"] = (1200, 900)
    ui.run(**run_kwargs)


if __name__ == "__main__":
    configure_logging()
    freeze_support()
    current_process = mp.current_process()
    if current_process.name == "MainProcess":
        main()
    else:
        logger.debug("Skipping GUI startup in worker process: %s", current_process.name)
