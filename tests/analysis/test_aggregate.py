"""Unit tests for the aggregate() group-and-combine primitive."""

from __future__ import annotations

import pandas as pd
import pytest

from coronaviz.analysis.aggregate import aggregate


def test_single_key_sum_sorted_by_key(small_df):
    """One key column sums cases per key, keys sorted."""
    out = aggregate(small_df, "country")
    assert out.index.tolist() == ["A", "B", "C", "Others"]
    assert out.tolist() == [17, 33, 3, 41]


def test_multi_key_gives_multiindex(small_df):
    """Several key columns give a MultiIndex Series."""
    out = aggregate(small_df, ["country", "type"])
    assert isinstance(out.index, pd.MultiIndex)
    assert out.loc[("A", "confirmed")] == 15
    assert out.loc[("B", "death")] == 3


def test_callable_key(small_df):
    """A row function can compute the key."""
    out = aggregate(small_df, lambda row: row["date"].day)
    assert out.to_dict() == {1: 56, 2: 38}


def test_callable_key_on_empty_frame(empty_df):
    """A row function on an empty frame gives an empty Series."""
    out = aggregate(empty_df, lambda row: row["country"])
    assert out.empty


def test_combine_reduction_name_and_callable(small_df):
    """combine takes a pandas reduction name or a Series -> scalar function."""
    assert aggregate(small_df, "type", combine="max").to_dict() == {"confirmed": 40, "death": 3}
    assert aggregate(small_df, "type", combine=lambda s: int((s > 5).sum())).to_dict() == {
        "confirmed": 3,
        "death": 0,
    }


def test_other_value_column(small_df):
    """A value column other than cases can be combined."""
    out = aggregate(small_df, "type", value="country", combine="nunique")
    assert out.to_dict() == {"confirmed": 4, "death": 3}


def test_totals_are_preserved(small_df):
    """Summing per-key totals gives the grand total."""
    assert aggregate(small_df, ["date", "country", "type"]).sum() == small_df["cases"].sum()


def test_input_not_modified(small_df):
    """aggregate does not change the input frame."""
    before = small_df.copy()
    aggregate(small_df, lambda row: row["country"].lower())
    pd.testing.assert_frame_equal(small_df, before)


def test_missing_value_column_raises(small_df):
    """An unknown value column raises ValueError."""
    with pytest.raises(ValueError, match="value column 'count'"):
        aggregate(small_df, "country", value="count")


def test_missing_key_column_raises(small_df):
    """An unknown key column raises ValueError naming it."""
    with pytest.raises(ValueError, match=r"key column\(s\) \['region'\]"):
        aggregate(small_df, ["country", "region"])
