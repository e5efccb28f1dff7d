"""Tests for the vignette header (ui mocked)."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

import coronaviz.vignette_app.header as header_mod


def _context_mock() -> MagicMock:
    m = MagicMock()
    m.classes = MagicMock(return_value=m)
    m.props = MagicMock(return_value=m)
    m.style = MagicMock(return_value=m)
    m.tooltip = MagicMock(return_value=m)
    m.__enter__ = MagicMock(return_value=m)
    m.__exit__ = MagicMock(return_value=None)
    return m


def _fake_ui(dark_mode: MagicMock, button: MagicMock, clicks: dict[str, Any]) -> MagicMock:
    def fake_button(*args: Any, on_click=None, **kwargs: Any) -> MagicMock:
        clicks["on_click"] = on_click
        clicks["icon"] = kwargs.get("icon")
        return button

    def fake_dark_mode(value: bool = False, **kwargs: Any) -> MagicMock:
        dark_mode.value = value
        return dark_mode

    fake_ui = MagicMock()
    fake_ui.dark_mode = fake_dark_mode
    fake_ui.header = MagicMock(return_value=_context_mock())
    fake_ui.row = MagicMock(return_value=_context_mock())
    fake_ui.button = fake_button
    return fake_ui


@pytest.mark.requires_nicegui
def test_header_starts_from_given_theme(monkeypatch: pytest.MonkeyPatch) -> None:
    """The initial dark value comes from the caller, not from session storage."""
    dark_mode = MagicMock()
    clicks: dict[str, Any] = {}
    monkeypatch.setattr(header_mod, "ui", _fake_ui(dark_mode, _context_mock(), clicks), raising=True)

    result = header_mod.build_vignette_header(title="T", dark=True)

    assert result is dark_mode
    assert dark_mode.value is True
    assert clicks["icon"] == "light_mode"
    assert not hasattr(header_mod, "app")


@pytest.mark.requires_nicegui
def test_header_toggle_notifies(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clicking the toggle flips dark mode, swaps the icon and calls on_theme_changed."""
    dark_mode = MagicMock()
    button = _context_mock()
    clicks: dict[str, Any] = {}
    monkeypatch.setattr(header_mod, "ui", _fake_ui(dark_mode, button, clicks), raising=True)

    seen: list[bool] = []
    header_mod.build_vignette_header(title="T", subtitle="sample", on_theme_changed=seen.append)
    assert dark_mode.value is False

    clicks["on_click"]()
    assert dark_mode.value is True
    assert seen == [True]
    button.props.assert_called_with("icon=light_mode")

    clicks["on_click"]()
    assert seen == [True, False]
    button.props.assert_called_with("icon=dark_mode")
