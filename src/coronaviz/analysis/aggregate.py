"""
Group-and-combine primitive used by every vignette summary.

Grouping is explicit: the caller passes the key (one column, several columns,
or a row -> key function) and the combining step (a pandas reduction name or
a Series -> scalar function). The result is a Series mapping key to
aggregate, sorted by key.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Sequence, Union

import pandas as pd

from coronaviz.cases.schema import CASES_COL

KeySpec = Union[str, Sequence[str], Callable[[pd.Series], Hashable]]
CombineSpec = Union[str, Callable[[pd.Series], Any]]


def aggregate(
    df: pd.DataFrame,
    keys: KeySpec,
    value: str = CASES_COL,
    combine: CombineSpec = "sum",
) -> pd.Series:
    """
    Group df by keys and combine the value column within each group.

    Args:
        df: Source frame (not modified).
        keys: Column name, list of column names, or a function applied to
            each row to produce its key.
        value: Column to combine.
        combine: Pandas reduction name ("sum", "mean", "max", ...) or a
            function taking the group's value Series.

    Returns:
        Series indexed by key (MultiIndex for several columns), sorted by key.
        Empty input gives an empty Series.

    Raises:
        ValueError: If a key column or the value column is missing.
    """
    if value not in df.columns:
        raise ValueError(f"df must contain value column {value!r}")

    if callable(keys):
        if df.empty:
            return pd.Series(dtype=df[value].dtype, name=value)
        by: Any = df.apply(keys, axis=1).rename("key")
    else:
        by = [keys] if isinstance(keys, str) else list(keys)
        missing = [c for c in by if c not in df.columns]
        if missing:
            raise ValueError(f"df must contain key column(s) {missing}")

    return df.groupby(by, sort=True)[value].agg(combine)
