"""Export of computed tables and the parameters that produced them."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd


def _jsonable(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if hasattr(value, "item"):  # numpy scalar
        return value.item()
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if callable(value):
        return getattr(value, "__name__", repr(value))
    return value


def save_results(results: pd.DataFrame, path: str | Path) -> None:
    """Save a computed table to CSV, without the row index."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    results.to_csv(path, index=False)


def save_parameters(params: dict[str, Any], path: str | Path) -> None:
    """Save parameters to JSON; functions are stored by name."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    clean = {k: _jsonable(v) for k, v in params.items()}
    with open(path, "w") as f:
        json.dump(clean, f, indent=2)
