"""
Vignette report config persistence (platformdirs + JSON).

Persisted items (schema v1):
- top_n, min_confirmed, excluded_regions, pie_country, treemap_root:
  parameters of the vignette sections
- theme: "light" or "dark"
- dataset: optional CSV path or URL (None = bundled sample)

Behavior:
- If config file missing or unreadable -> defaults are used
- If schema_version mismatches:
  - default: reset to defaults
  - optional: keep loaded values but update version
- Unknown keys in loaded JSON are ignored with warnings

Design:
- ReportConfigData dataclass holds JSON-friendly data
- ReportConfig manager provides explicit API for load/save
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_config_dir

from coronaviz.analysis.summaries import (
    DEFAULT_EXCLUDED_REGIONS,
    DEFAULT_MIN_CONFIRMED,
    DEFAULT_PIE_COUNTRY,
    DEFAULT_TOP_N,
    DEFAULT_TREEMAP_ROOT,
)
from coronaviz.utils.logging import get_logger

logger = get_logger(__name__)

# Increment when you make a breaking change to the on-disk JSON schema.
SCHEMA_VERSION: int = 1

_THEMES = ("light", "dark")


@dataclass
class ReportConfigData:
    """
    JSON-serializable config payload.

    Keep fields JSON-friendly: primitives, lists, dicts.
    """
    schema_version: int = SCHEMA_VERSION
    top_n: int = DEFAULT_TOP_N
    min_confirmed: int = DEFAULT_MIN_CONFIRMED
    excluded_regions: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_REGIONS))
    pie_country: str = DEFAULT_PIE_COUNTRY
    treemap_root: str = DEFAULT_TREEMAP_ROOT
    theme: str = "light"
    dataset: Optional[str] = None

    def to_json_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "schema_version": self.schema_version,
            "top_n": self.top_n,
            "min_confirmed": self.min_confirmed,
            "excluded_regions": list(self.excluded_regions),
            "pie_country": self.pie_country,
            "treemap_root": self.treemap_root,
            "theme": self.theme,
            "dataset": self.dataset,
        }

    @classmethod
    def from_json_dict(cls, d: Dict[str, Any]) -> "ReportConfigData":
        """
        Tolerant loader:
        - ignores unknown keys (with a warning)
        - falls back to the default for missing or malformed values
        """
        defaults = cls()

        def _int(key: str, default: int, minimum: int = 0) -> int:
            if key not in d:
                return default
            try:
                return max(minimum, int(d[key]))
            except (TypeError, ValueError):
                logger.warning(f"{key}={d[key]!r} is not an int, using {default}")
                return default

        def _str(key: str, default: str) -> str:
            v = d.get(key, default)
            if isinstance(v, str) and v:
                return v
            logger.warning(f"{key}={v!r} is not a non-empty string, using {default!r}")
            return default

        excluded = d.get("excluded_regions", defaults.excluded_regions)
        if not isinstance(excluded, list):
            logger.warning("excluded_regions is not a list, using defaults")
            excluded = defaults.excluded_regions

        theme = str(d.get("theme", defaults.theme)).lower()
        if theme not in _THEMES:
            logger.warning(f"Unknown theme {theme!r}, using {defaults.theme!r}")
            theme = defaults.theme

        dataset = d.get("dataset")
        if dataset is not None and not isinstance(dataset, str):
            logger.warning("dataset is not a string, ignoring")
            dataset = None

        known_keys = set(defaults.to_json_dict().keys())
        for key in d.keys():
            if key not in known_keys:
                logger.warning(f"Unknown key '{key}' in report config, ignoring")

        return cls(
            schema_version=int(d.get("schema_version", -1)),
            top_n=_int("top_n", defaults.top_n),
            min_confirmed=_int("min_confirmed", defaults.min_confirmed),
            excluded_regions=[str(x) for x in excluded],
            pie_country=_str("pie_country", defaults.pie_country),
            treemap_root=_str("treemap_root", defaults.treemap_root),
            theme=theme,
            dataset=dataset or None,
        )


class ReportConfig:
    """
    Manager for loading/saving ReportConfigData to disk.
    """

    def __init__(self, *, path: Path, data: Optional[ReportConfigData] = None):
        self.path = path
        self.data = data if data is not None else ReportConfigData()

    # -----------------------------
    # Construction / persistence
    # -----------------------------
    @staticmethod
    def default_config_path(
        app_name: str = "coronaviz",
        filename: str = "report_config.json",
        app_author: str | None = None,
    ) -> Path:
        """
        Determine OS-appropriate per-user config path.

        macOS:   ~/Library/Application Support/coronaviz/report_config.json
        Linux:   ~/.config/coronaviz/report_config.json
        Windows: %APPDATA%\\coronaviz\\report_config.json
        """
        return Path(user_config_dir(app_name, app_author)) / filename

    @classmethod
    def load(
        cls,
        *,
        config_path: Optional[Path] = None,
        app_name: str = "coronaviz",
        filename: str = "report_config.json",
        app_author: str | None = None,
        schema_version: int = SCHEMA_VERSION,
        reset_on_version_mismatch: bool = True,
        create_if_missing: bool = False,
    ) -> "ReportConfig":
        """
        Load config from disk.

        If file doesn't exist or is unreadable -> defaults.
        If schema mismatch:
          - reset_on_version_mismatch=True -> defaults
          - else -> keep loaded but overwrite schema_version

        If create_if_missing=True and file is missing -> immediately write defaults.
        """
        path = config_path or cls.default_config_path(app_name=app_name, filename=filename, app_author=app_author)
        default_data = ReportConfigData(schema_version=schema_version)

        try:
            raw = path.read_text(encoding="utf-8")
            parsed = json.loads(raw)
            if not isinstance(parsed, dict):
                logger.warning(f"Report config file at {path} does not contain a dict, using defaults")
                return cls(path=path, data=default_data)

            loaded = ReportConfigData.from_json_dict(parsed)

            if int(loaded.schema_version) != int(schema_version):
                if reset_on_version_mismatch:
                    logger.warning(
                        f"Report config schema version mismatch: loaded={loaded.schema_version}, "
                        f"expected={schema_version}, resetting to defaults"
                    )
                    cfg = cls(path=path, data=default_data)
                    if create_if_missing:
                        cfg.save()
                    return cfg
                loaded.schema_version = int(schema_version)

            return cls(path=path, data=loaded)
        except FileNotFoundError:
            logger.debug(f"Report config file not found at {path}, using defaults")
            cfg = cls(path=path, data=default_data)
            if create_if_missing:
                cfg.save()
            return cfg
        except json.JSONDecodeError as e:
            logger.warning(f"Report config file at {path} is not valid JSON: {e}, using defaults")
            return cls(path=path, data=default_data)
        except OSError as e:
            logger.warning(f"Error reading report config from {path}: {e}, using defaults")
            return cls(path=path, data=default_data)

    def save(self) -> None:
        """Write config to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            json_str = json.dumps(self.data.to_json_dict(), indent=2)
            self.path.write_text(json_str, encoding="utf-8")
            logger.info(f"Saved report config to {self.path}")
        except OSError as e:
            logger.error(f"Error saving report config to {self.path}: {e}")
            raise

    def get_theme(self) -> str:
        """Get theme string ("light" or "dark")."""
        return self.data.theme

    def set_theme(self, theme: str) -> None:
        """Set theme; raises ValueError for anything but light/dark."""
        theme = str(theme).lower()
        if theme not in _THEMES:
            raise ValueError(f"theme must be one of {_THEMES}, got {theme!r}")
        self.data.theme = theme
