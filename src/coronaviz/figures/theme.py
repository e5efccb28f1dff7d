"""Light and dark styling for the vignette figures.

Each theme carries its Plotly template, page colors and the color of every
case type, so a case type keeps a readable color on either background.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from coronaviz.cases.schema import CaseType


class ThemeMode(str, Enum):
    """Theme shared by the figures, the HTML export and the vignette page."""

    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class FigureStyle:
    template: str
    background: str
    foreground: str
    case_colors: dict[str, str] = field(default_factory=dict)
    # types missing from case_colors (and non-type traces)
    neutral_color: str = "#7f7f7f"

    def case_color(self, case_type: Union[str, CaseType]) -> str:
        key = case_type.value if isinstance(case_type, CaseType) else str(case_type)
        return self.case_colors.get(key, self.neutral_color)


_STYLES: dict[ThemeMode, FigureStyle] = {
    ThemeMode.LIGHT: FigureStyle(
        template="plotly_white",
        background="#ffffff",
        foreground="#000000",
        case_colors={
            CaseType.CONFIRMED.value: "#1f77b4",
            CaseType.DEATH.value: "#d62728",
            CaseType.RECOVERED.value: "#2ca02c",
        },
    ),
    ThemeMode.DARK: FigureStyle(
        template="plotly_dark",
        background="#000000",
        foreground="#ffffff",
        case_colors={
            CaseType.CONFIRMED.value: "#4da3ff",
            CaseType.DEATH.value: "#ff6b6b",
            CaseType.RECOVERED.value: "#5cd65c",
        },
        neutral_color="#bbbbbb",
    ),
}


def resolve_theme(theme: Optional[Union[str, ThemeMode]]) -> ThemeMode:
    """Convert str/None to ThemeMode. Anything unrecognized is LIGHT."""
    if isinstance(theme, ThemeMode):
        return theme
    if theme is None:
        return ThemeMode.LIGHT
    s = str(theme).strip().lower()
    if s in ("dark", "plotly_dark"):
        return ThemeMode.DARK
    return ThemeMode.LIGHT


def get_figure_style(theme: Optional[Union[str, ThemeMode]] = None) -> FigureStyle:
    """Style for a theme given as ThemeMode, its name, or None (light)."""
    return _STYLES[resolve_theme(theme)]
