"""Header component for the vignette app.

Provides build_vignette_header() with title, dataset label and theme toggle.
"""

from __future__ import annotations

from typing import Callable, Optional

from nicegui import ui


def build_vignette_header(
    *,
    title: str = "Coronavirus vignette",
    subtitle: Optional[str] = None,
    dark: bool = False,
    on_theme_changed: Optional[Callable[[bool], None]] = None,
) -> ui.dark_mode:
    """Build header with title and a dark/light toggle.

    The header does not store the theme; the caller persists it from
    on_theme_changed (the page saves it in the report config).

    Args:
        title: Header title.
        subtitle: Optional text shown after the title (e.g. dataset name).
        dark: Initial dark-mode value.
        on_theme_changed: Called with the new dark-mode value after a toggle.

    Returns:
        Dark mode controller for the page.
    """
    dark_mode = ui.dark_mode(value=dark)

    def _toggle_theme() -> None:
        dark_mode.value = not dark_mode.value
        theme_btn.props(f"icon={'light_mode' if dark_mode.value else 'dark_mode'}")
        if on_theme_changed is not None:
            on_theme_changed(bool(dark_mode.value))

    with ui.header().classes("items-center justify-between").props("dense").style(
        "min-height: 36px; height: 36px; padding: 0 8px;"
    ):
        with ui.row().classes("items-center gap-2"):
            ui.label(title).classes("!text-lg font-bold text-white")
            if subtitle:
                ui.label(subtitle).classes("text-white opacity-70")

        theme_btn = ui.button(
            icon="light_mode" if dark else "dark_mode",
            on_click=_toggle_theme,
        ).props("flat round dense text-color=white").tooltip("Toggle dark / light mode")

    return dark_mode
