"""Dataset discovery and loading.

Reads the bundled sample, a local CSV, or the CSV published alongside the
R coronavirus package, and normalizes it to the canonical columns in
coronaviz.cases.schema.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pandas as pd

from coronaviz.cases.schema import (
    CANONICAL_COLUMNS,
    CASES_COL,
    COLUMN_ALIASES,
    COUNTRY_COL,
    DATE_COL,
    PROVINCE_COL,
    REQUIRED_COLUMNS,
    TYPE_COL,
    normalize_case_type,
)
from coronaviz.utils.logging import get_logger

logger = get_logger(__name__)

# Bundled excerpt loaded when no source is given
DEFAULT_CSV = "coronavirus_sample.csv"

UPSTREAM_CSV_URL = "https://raw.githubusercontent.com/RamiKrispin/coronavirus/master/csv/coronavirus.csv"


def get_data_dir() -> Path:
    """Resolve the bundled coronaviz/data/ directory."""
    # loader.py -> cases -> coronaviz
    return Path(__file__).resolve().parent.parent / "data"


def get_data_csv_files() -> list[str]:
    """List .csv filenames in the bundled data directory (sorted)."""
    data_dir = get_data_dir()
    if not data_dir.exists():
        return []
    return sorted(f.name for f in data_dir.iterdir() if f.suffix.lower() == ".csv")


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename source columns and coerce dtypes to the canonical schema.

    Args:
        df: Raw frame as read from CSV.

    Returns:
        New DataFrame with canonical columns first (extra source columns kept
        after them), parsed dates, integer cases and canonical case types.

    Raises:
        ValueError: If required columns are missing or a case type is unknown.
    """
    df = df.rename(columns={k: v for k, v in COLUMN_ALIASES.items() if k in df.columns})

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Case data is missing required column(s) {missing}")

    df = df.copy()
    df[DATE_COL] = pd.to_datetime(df[DATE_COL])
    if PROVINCE_COL not in df.columns:
        df[PROVINCE_COL] = ""
    df[PROVINCE_COL] = df[PROVINCE_COL].fillna("").astype(str)
    df[CASES_COL] = pd.to_numeric(df[CASES_COL], errors="coerce").fillna(0).astype("int64")
    df[TYPE_COL] = df[TYPE_COL].map(normalize_case_type)

    n_negative = int((df[CASES_COL] < 0).sum())
    if n_negative:
        logger.warning(f"{n_negative} rows carry negative case counts (source corrections), keeping them")

    ordered = [c for c in CANONICAL_COLUMNS if c in df.columns]
    extra = [c for c in df.columns if c not in ordered]
    return df[ordered + extra].reset_index(drop=True)


def load_cases(source: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Load and normalize the case dataset.

    Args:
        source: Local CSV path, http(s) URL, or None for the bundled DEFAULT_CSV.
            A bare filename that is not found locally is looked up in the
            bundled data directory.

    Returns:
        Normalized case DataFrame.

    Raises:
        FileNotFoundError: If a local source does not exist.
        ValueError: If the CSV does not have the required columns.
    """
    if source is None:
        source = get_data_dir() / DEFAULT_CSV

    if isinstance(source, str) and _is_url(source):
        logger.info(f"Reading case data from {source}")
        raw = pd.read_csv(source)
    else:
        path = Path(source)
        if not path.exists() and not path.is_absolute():
            bundled = get_data_dir() / path
            if bundled.exists():
                path = bundled
        if not path.exists():
            raise FileNotFoundError(f"Case data CSV not found: {path}")
        logger.info(f"Reading case data from {path}")
        raw = pd.read_csv(path)

    df = normalize_columns(raw)
    if df.empty:
        logger.warning("Case data is empty")
    else:
        logger.info(
            f"Loaded {len(df)} rows, {df[COUNTRY_COL].nunique()} countries, "
            f"{df[DATE_COL].min().date()} to {df[DATE_COL].max().date()}"
        )
    return df
