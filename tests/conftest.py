"""Shared fixtures: a small hand-built case frame and the bundled sample."""

from __future__ import annotations

import pandas as pd
import pytest

from coronaviz.cases.loader import load_cases


def _row(date: str, province: str, country: str, cases: int, type_: str) -> dict:
    return {
        "date": pd.Timestamp(date),
        "province": province,
        "country": country,
        "lat": 0.0,
        "long": 0.0,
        "cases": cases,
        "type": type_,
    }


@pytest.fixture
def small_df() -> pd.DataFrame:
    """Eight observations over two days and four regions.

    confirmed: Others 40, B 30, A 15 (P1 10, P2 5), C 3  -> 88
    death:     B 3, A 2 (P1), Others 1                   -> 6
    """
    rows = [
        _row("2020-01-01", "P1", "A", 10, "confirmed"),
        _row("2020-01-01", "P2", "A", 5, "confirmed"),
        _row("2020-01-01", "", "Others", 40, "confirmed"),
        _row("2020-01-01", "", "Others", 1, "death"),
        _row("2020-01-02", "", "B", 30, "confirmed"),
        _row("2020-01-02", "P1", "A", 2, "death"),
        _row("2020-01-02", "", "B", 3, "death"),
        _row("2020-01-02", "", "C", 3, "confirmed"),
    ]
    df = pd.DataFrame(rows)
    df["cases"] = df["cases"].astype("int64")
    return df


@pytest.fixture
def empty_df(small_df: pd.DataFrame) -> pd.DataFrame:
    """Same columns and dtypes as small_df, no rows."""
    return small_df.iloc[0:0].copy()


@pytest.fixture(scope="session")
def sample_df() -> pd.DataFrame:
    """The bundled coronavirus_sample.csv, normalized."""
    return load_cases()
