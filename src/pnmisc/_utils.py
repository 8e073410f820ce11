"""Shared utility functions."""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any

import numpy as np

NPCX_TOKENS: dict[str, float] = {"left": 0.0, "centre": 0.5, "center": 0.5, "middle": 0.5, "right": 1.0}
NPCY_TOKENS: dict[str, float] = {"bottom": 0.0, "centre": 0.5, "center": 0.5, "middle": 0.5, "top": 1.0}


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (str, Real)):
        return [value]
    if isinstance(value, np.ndarray):
        return value.ravel().tolist()
    if isinstance(value, Sequence):
        return list(value)
    raise TypeError(
        f"Label position must be numeric or a position token, got {type(value).__name__}"
    )


def _compute_npc(
    value: Any,
    tokens: dict[str, float],
    group: int,
    step: float,
    margin_npc: float,
) -> np.ndarray:
    out = []
    for v in _as_list(value):
        if isinstance(v, str):
            if v not in tokens:
                raise ValueError(
                    f"Unknown position token {v!r}. Expected one of {sorted(tokens)}"
                )
            base = tokens[v]
            # tokens at the edges move inwards by the margin
            base = base + margin_npc * np.sign(0.5 - base)
            # successive groups move towards the centre
            base = base + step * (abs(group) - 1) * np.sign(0.5 - base)
        elif isinstance(v, (Real, np.number)) and not isinstance(v, bool):
            base = float(v)
            if not 0.0 <= base <= 1.0:
                raise ValueError(f"npc coordinates must be within [0, 1], got {base}")
        else:
            raise TypeError(
                f"Label position must be numeric or a position token, got {type(v).__name__}"
            )
        out.append(base)
    return np.clip(np.asarray(out, dtype=np.float64), 0.0, 1.0)


def compute_npcx(
    x: Any,
    group: int = 1,
    h_step: float = 0.0,
    margin_npc: float = 0.0,
) -> np.ndarray:
    """Resolve horizontal label anchors to npc values.

    Parameters
    ----------
    x : float | str | sequence
        Values in [0, 1] or tokens ``left``, ``right``, ``centre``,
        ``center``, ``middle``.
    group : int
        Group number; groups after the first are shifted by *h_step*.
    h_step : float
        Shift per group towards the centre.
    margin_npc : float
        Margin kept by the edge tokens.

    Returns
    -------
    np.ndarray
        npc values clipped to [0, 1].
    """
    return _compute_npc(x, NPCX_TOKENS, group, h_step, margin_npc)


def compute_npcy(
    y: Any,
    group: int = 1,
    v_step: float = 0.0,
    margin_npc: float = 0.0,
) -> np.ndarray:
    """Resolve vertical label anchors to npc values.

    Same as :func:`compute_npcx` with tokens ``bottom``, ``top``,
    ``centre``, ``center``, ``middle``.
    """
    return _compute_npc(y, NPCY_TOKENS, group, v_step, margin_npc)


def fill_to_length(values: Any, nrow: int) -> np.ndarray:
    """Pad *values* with NaN at the end so that its length is *nrow*."""
    arr = np.asarray(values, dtype=np.float64).ravel()
    if len(arr) > nrow:
        raise ValueError(
            f"Applied function returned {len(arr)} values for {nrow} rows; "
            "results longer than the input are not supported"
        )
    if len(arr) < nrow:
        arr = np.concatenate([arr, np.full(nrow - len(arr), np.nan)])
    return arr


def is_scalar_number(value: Any) -> bool:
    """True for a single real number (numpy scalars and length-one arrays included)."""
    if isinstance(value, (bool, np.bool_, str, bytes)):
        return False
    if isinstance(value, (Real, np.number)):
        return True
    # 0-d arrays and any length-one array-like (list, tuple, Series)
    if isinstance(value, np.ndarray) or hasattr(value, "__len__"):
        arr = np.asarray(value)
        return arr.size == 1 and arr.dtype.kind in "iuf"
    return False


def check_columns(data: Any, required: Sequence[str], name: str) -> None:
    """Raise ``ValueError`` when *data* lacks any of the *required* columns."""
    missing = [c for c in required if c not in data.columns]
    if missing:
        raise ValueError(f"{name} requires columns {list(required)}; missing {missing}")
