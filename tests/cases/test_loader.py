"""Unit tests for coronaviz.cases.loader."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import pytest

import coronaviz.cases.loader as loader_mod
from coronaviz.cases.loader import (
    DEFAULT_CSV,
    UPSTREAM_CSV_URL,
    get_data_csv_files,
    get_data_dir,
    load_cases,
    normalize_columns,
)
from coronaviz.cases.schema import CANONICAL_COLUMNS


def test_default_csv_constant():
    """DEFAULT_CSV is the bundled sample."""
    assert DEFAULT_CSV == "coronavirus_sample.csv"


def test_get_data_dir_returns_package_data_dir():
    """get_data_dir resolves to coronaviz/data/ and exists."""
    data_dir = get_data_dir()
    assert isinstance(data_dir, Path)
    assert data_dir.name == "data"
    assert data_dir.parent.name == "coronaviz"
    assert data_dir.exists()


def test_get_data_csv_files_includes_sample():
    """get_data_csv_files returns a sorted list containing the sample."""
    files = get_data_csv_files()
    assert files == sorted(files)
    assert DEFAULT_CSV in files


def test_load_cases_default_is_bundled_sample(sample_df):
    """With no source, the bundled sample loads with canonical columns and dtypes."""
    assert list(sample_df.columns) == list(CANONICAL_COLUMNS)
    assert len(sample_df) == 280
    assert pd.api.types.is_datetime64_any_dtype(sample_df["date"])
    assert sample_df["cases"].dtype == "int64"
    assert set(sample_df["type"]) == {"confirmed", "death"}


def test_load_cases_missing_province_becomes_empty_string(sample_df):
    """Blank Province.State cells load as '' rather than NaN."""
    japan = sample_df[sample_df["country"] == "Japan"]
    assert not japan.empty
    assert (japan["province"] == "").all()


def test_load_cases_quoted_country_name(sample_df):
    """A quoted country name containing a comma survives parsing."""
    assert "Korea, South" in set(sample_df["country"])


def test_load_cases_bare_name_resolves_in_data_dir():
    """A bare filename not found locally is looked up in the bundled data dir."""
    df = load_cases(DEFAULT_CSV)
    assert len(df) == 280


def test_load_cases_local_path(tmp_path):
    """A local CSV with R-style headers and plural death type is normalized."""
    csv = tmp_path / "cases.csv"
    csv.write_text(
        "Province.State,Country.Region,Lat,Long,date,cases,type\n"
        ",X,1.0,2.0,2020-02-01,4,confirmed\n"
        ",X,1.0,2.0,2020-02-01,1,deaths\n",
        encoding="utf-8",
    )
    df = load_cases(csv)
    assert df["type"].tolist() == ["confirmed", "death"]
    assert df["province"].tolist() == ["", ""]
    assert df["cases"].sum() == 5


def test_load_cases_upstream_type_spellings(tmp_path):
    """The upstream "recovery" spelling loads as the recovered case type."""
    csv = tmp_path / "upstream.csv"
    csv.write_text(
        "date,province,country,lat,long,type,cases\n"
        "2020-03-01,,Italy,41.9,12.6,confirmed,566\n"
        "2020-03-01,,Italy,41.9,12.6,death,12\n"
        "2020-03-01,,Italy,41.9,12.6,recovery,37\n",
        encoding="utf-8",
    )
    df = load_cases(csv)
    assert df["type"].tolist() == ["confirmed", "death", "recovered"]
    assert df["cases"].tolist() == [566, 12, 37]


def test_load_cases_url_reads_remote_csv(monkeypatch: pytest.MonkeyPatch):
    """An http(s) source is passed straight to pandas and normalized."""
    requested: list[str] = []

    def fake_read_csv(source, *args, **kwargs):
        requested.append(source)
        return pd.DataFrame(
            {
                "date": ["2020-03-01", "2020-03-01"],
                "province": [None, None],
                "country": ["Italy", "Italy"],
                "lat": [41.9, 41.9],
                "long": [12.6, 12.6],
                "type": ["confirmed", "recovery"],
                "cases": [566, 37],
            }
        )

    monkeypatch.setattr(loader_mod.pd, "read_csv", fake_read_csv)
    df = load_cases(UPSTREAM_CSV_URL)
    assert requested == [UPSTREAM_CSV_URL]
    assert df["type"].tolist() == ["confirmed", "recovered"]
    assert df["province"].tolist() == ["", ""]


def test_load_cases_missing_file_raises(tmp_path):
    """A missing local file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="Case data CSV not found"):
        load_cases(tmp_path / "nope.csv")


def test_normalize_columns_missing_required_raises():
    """A frame without the cases column is rejected."""
    raw = pd.DataFrame({"date": ["2020-01-01"], "Country.Region": ["X"], "type": ["confirmed"]})
    with pytest.raises(ValueError, match=r"missing required column\(s\) \['cases'\]"):
        normalize_columns(raw)


def test_normalize_columns_adds_province_and_keeps_extra_columns():
    """Missing province is filled with ''; unknown source columns are kept after the canonical ones."""
    raw = pd.DataFrame(
        {
            "source": ["jhu"],
            "date": ["2020-01-01"],
            "country": ["X"],
            "cases": [3],
            "type": ["confirmed"],
        }
    )
    df = normalize_columns(raw)
    assert df.columns[-1] == "source"
    assert df.loc[0, "province"] == ""
    assert list(df.columns[:4]) == ["date", "province", "country", "cases"]


def test_normalize_columns_non_numeric_cases_become_zero():
    """Unparseable case counts become 0."""
    raw = pd.DataFrame(
        {"date": ["2020-01-01", "2020-01-01"], "country": ["X", "X"], "cases": ["3", "n/a"], "type": ["confirmed"] * 2}
    )
    df = normalize_columns(raw)
    assert df["cases"].tolist() == [3, 0]


def test_normalize_columns_negative_counts_kept_with_warning(caplog):
    """Negative counts (source corrections) are kept and logged as a warning."""
    raw = pd.DataFrame({"date": ["2020-01-01"], "country": ["X"], "cases": [-2], "type": ["confirmed"]})
    with caplog.at_level(logging.WARNING, logger="coronaviz"):
        df = normalize_columns(raw)
    assert df["cases"].tolist() == [-2]
    assert "negative case counts" in caplog.text


def test_normalize_columns_unknown_type_raises():
    """An unknown case type in the data is an error."""
    raw = pd.DataFrame({"date": ["2020-01-01"], "country": ["X"], "cases": [1], "type": ["active"]})
    with pytest.raises(ValueError, match="Unknown case type"):
        normalize_columns(raw)


def test_normalize_columns_does_not_modify_input():
    """The raw frame keeps its original columns."""
    raw = pd.DataFrame({"date": ["2020-01-01"], "Country.Region": ["X"], "cases": [1], "type": ["confirmed"]})
    normalize_columns(raw)
    assert list(raw.columns) == ["date", "Country.Region", "cases", "type"]
