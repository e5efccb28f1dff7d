"""Default classes and props for the NiceGUI elements the vignette page uses."""

from __future__ import annotations

from nicegui import ui

from coronaviz.utils.logging import get_logger

logger = get_logger(__name__)

# tailwind text size -> quasar size
_QUASAR_SIZES = {
    "text-xs": "xs",
    "text-sm": "sm",
    "text-base": "md",
    "text-lg": "lg",
}


def setUpGuiDefaults(text_size: str = "text-sm") -> None:
    """Set default classes and props for labels, buttons and cards.

    Args:
        text_size: Tailwind CSS text size class ('text-xs', 'text-sm',
            'text-base' or 'text-lg').
    """
    if text_size not in _QUASAR_SIZES:
        raise ValueError(f"text_size must be one of {list(_QUASAR_SIZES)}, got {text_size!r}")

    logger.debug(f'using classes text_size:"{text_size}" text_size_quasar:{_QUASAR_SIZES[text_size]}')

    ui.label.default_classes(f"{text_size} select-text")
    ui.label.default_props("dense")
    ui.button.default_classes(text_size)
    ui.button.default_props("dense")
    ui.card.default_classes("w-full")
