"""Loading observation tables from CSV files."""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def load_table(
    path: str | Path,
    x: str,
    y: str,
    group: str | None = None,
) -> pd.DataFrame:
    """Read a CSV file and rename the chosen columns to ``x``, ``y`` and ``group``.

    Parameters
    ----------
    path : str | Path
        CSV file with a header row.
    x, y : str
        Columns holding the coordinates.
    group : str | None
        Optional grouping column.

    Returns
    -------
    pd.DataFrame
        Table with numeric ``x`` and ``y`` columns, plus ``group`` if requested.
    """
    path = Path(path)
    if path.suffix != ".csv":
        raise ValueError(f"Unsupported file format: {path.suffix}. Use .csv.")

    df = pd.read_csv(path)
    wanted = [x, y] + ([group] if group else [])
    missing = [c for c in wanted if c not in df.columns]
    if missing:
        raise ValueError(
            f"Columns {missing} not found in {path.name}. Available: {df.columns.tolist()}"
        )

    renames = {x: "x", y: "y"}
    if group:
        renames[group] = "group"
    out = df[wanted].rename(columns=renames)
    out["x"] = pd.to_numeric(out["x"], errors="coerce")
    out["y"] = pd.to_numeric(out["y"], errors="coerce")
    return out
