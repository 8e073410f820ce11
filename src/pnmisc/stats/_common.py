"""Helpers shared by the panel-level statistics."""

from __future__ import annotations

import pandas as pd

NO_GROUP = -1


def add_constant_columns(new: pd.DataFrame, old: pd.DataFrame) -> pd.DataFrame:
    """Carry over the columns of *old* that hold a single value (e.g. ``PANEL``).

    Columns already present in *new* are left untouched. ``group`` is set
    to ``NO_GROUP`` when the panel spans several groups.
    """
    new = new.reset_index(drop=True)
    if len(old):
        for col in old.columns:
            if col in new.columns:
                continue
            values = old[col]
            if values.nunique(dropna=False) == 1:
                new[col] = values.iloc[0]
    if "group" not in new.columns:
        new["group"] = NO_GROUP
    return new
