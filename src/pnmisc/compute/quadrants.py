"""Quadrant assignment and per-quadrant counts.

Quadrants are numbered clockwise from the upper right:

    4 | 1
    --+--
    3 | 2

A point lying exactly on a dividing line belongs to the non-negative side,
so a point at the origin is always counted in quadrant 1.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from pnmisc._utils import check_columns, compute_npcx, compute_npcy, is_scalar_number
from pnmisc.config import POOL_ALONG_CHOICES, LabelConfig

logger = logging.getLogger(__name__)

QUADRANT_COLUMNS = ["quadrant", "count", "count_label", "npcx", "npcy", "x", "y"]


def which_quadrant(
    x: np.ndarray,
    y: np.ndarray,
    xintercept: float = 0.0,
    yintercept: float = 0.0,
    pool_along: str = "none",
) -> np.ndarray:
    """Quadrant number for each point.

    Parameters
    ----------
    x, y : np.ndarray
        Point coordinates.
    xintercept, yintercept : float
        Origin of the quadrants.
    pool_along : str
        ``"x"`` merges quadrants {1, 4} into 1 and {2, 3} into 2;
        ``"y"`` merges {1, 2} into 1 and {3, 4} into 4.

    Returns
    -------
    np.ndarray
        Integer quadrant per point.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    right = x >= xintercept
    upper = y >= yintercept

    z = np.select(
        [right & upper, right & ~upper, ~right & ~upper],
        [1, 2, 3],
        default=4,
    )

    if pool_along == "x":
        z = np.where(np.isin(z, (1, 4)), 1, 2)
    elif pool_along == "y":
        z = np.where(np.isin(z, (1, 2)), 1, 4)
    return z.astype(np.int64)


def default_quadrants(
    x_range: tuple[float, float],
    y_range: tuple[float, float],
    xintercept: float = 0.0,
    yintercept: float = 0.0,
) -> list[int]:
    """Quadrants spanned by the data range."""
    x_pos = all(v >= xintercept for v in x_range)
    y_pos = all(v >= yintercept for v in y_range)

    if x_pos and y_pos:
        return [1]
    if all(v < xintercept for v in x_range) and all(v < yintercept for v in y_range):
        return [3]
    if x_pos:
        return [1, 2]
    if y_pos:
        return [1, 4]
    return [1, 2, 3, 4]


def _check_params(
    quadrants: Any,
    pool_along: str,
    xintercept: Any,
    yintercept: Any,
) -> list[int] | None:
    if pool_along not in POOL_ALONG_CHOICES:
        raise ValueError(
            f"pool_along must be one of {POOL_ALONG_CHOICES}, got {pool_along!r}"
        )
    if not is_scalar_number(xintercept) or not is_scalar_number(yintercept):
        raise ValueError("xintercept and yintercept must be single numbers")

    if quadrants is None:
        return None
    quadrants = [int(q) for q in np.atleast_1d(quadrants).ravel()]
    if len(quadrants) > 4:
        raise ValueError(f"At most four quadrants can be requested, got {len(quadrants)}")
    bad = [q for q in quadrants if q not in (0, 1, 2, 3, 4)]
    if bad:
        raise ValueError(f"Quadrants must be 0 (whole panel) or 1-4, got {bad}")
    return quadrants or None


def _label_anchors(
    label_x: Any,
    label_y: Any,
    pool_along: str,
    labels: LabelConfig,
) -> tuple[tuple[float, float], tuple[float, float]]:
    if label_x is None:
        label_x = "centre" if pool_along == "x" else ["left", "right"]
    if label_y is None:
        label_y = "centre" if pool_along == "y" else ["bottom", "top"]

    npcx = compute_npcx(label_x, margin_npc=labels.margin_npc)
    npcy = compute_npcy(label_y, margin_npc=labels.margin_npc)
    # always a (low, high) pair, even from a single value
    return (float(npcx.min()), float(npcx.max())), (float(npcy.min()), float(npcy.max()))


def _scalar(value: Any) -> float:
    return float(np.asarray(value, dtype=np.float64).ravel()[0])


def quadrant_counts(
    data: pd.DataFrame,
    quadrants: Any = None,
    pool_along: str = "none",
    xintercept: Any = 0.0,
    yintercept: Any = 0.0,
    label_x: Any = None,
    label_y: Any = None,
    labels: LabelConfig | None = None,
) -> pd.DataFrame:
    """Count observations in each quadrant of one panel.

    Parameters
    ----------
    data : pd.DataFrame
        Must contain numeric ``x`` and ``y``.
    quadrants : int | list[int] | None
        Quadrants to report. ``None`` derives them from the data range;
        a set containing ``0``, or one left empty by pooling, reports the
        total for the whole panel.
    pool_along : str
        ``"none"``, ``"x"`` or ``"y"``.
    xintercept, yintercept : float
        Origin of the quadrants.
    label_x, label_y : float | str | list | None
        Label anchors in npc units or as tokens.
    labels : LabelConfig | None
        Margin used when resolving anchor tokens.

    Returns
    -------
    pd.DataFrame
        One row per reported quadrant with columns ``quadrant``, ``count``,
        ``count_label``, ``npcx``, ``npcy``, ``x``, ``y``.
    """
    requested = _check_params(quadrants, pool_along, xintercept, yintercept)
    check_columns(data, ("x", "y"), "quadrant_counts")
    labels = labels if labels is not None else LabelConfig()
    (npcx_lo, npcx_hi), (npcy_lo, npcy_hi) = _label_anchors(
        label_x, label_y, pool_along, labels
    )
    xintercept = _scalar(xintercept)
    yintercept = _scalar(yintercept)

    x = data["x"].to_numpy(dtype=np.float64)
    y = data["y"].to_numpy(dtype=np.float64)
    finite = np.isfinite(x) & np.isfinite(y)
    if not finite.all():
        logger.warning("Ignoring %d rows with non-finite x or y", int((~finite).sum()))
        x, y = x[finite], y[finite]

    if len(x):
        x_range = (float(x.min()), float(x.max()))
        y_range = (float(y.min()), float(y.max()))
    else:
        x_range = y_range = (np.nan, np.nan)

    if requested is None:
        requested = default_quadrants(x_range, y_range, xintercept, yintercept)
        logger.debug("Quadrants derived from data range: %s", requested)

    if pool_along == "x":
        requested = [q for q in requested if q in (1, 2)]
    elif pool_along == "y":
        requested = [q for q in requested if q in (1, 4)]

    # nothing left after pooling also means the whole panel
    if not requested or 0 in requested:
        count = len(x)
        return pd.DataFrame(
            {
                "quadrant": [0],
                "count": [count],
                "count_label": [f"n={count}"],
                "npcx": [npcx_hi],
                "npcy": [npcy_hi],
                "x": [x_range[1]],
                "y": [y_range[1]],
            }
        )

    requested = sorted(set(requested))

    z = which_quadrant(x, y, xintercept, yintercept, pool_along)
    counts = pd.Series(z).value_counts()
    # zero-count quadrants still get a row
    count = counts.reindex(requested, fill_value=0).astype(np.int64).to_numpy()

    q = np.asarray(requested, dtype=np.int64)
    right = np.isin(q, (1, 2))
    upper = np.isin(q, (1, 4))

    return pd.DataFrame(
        {
            "quadrant": q,
            "count": count,
            "count_label": [f"n={c}" for c in count],
            "npcx": np.where(right, npcx_hi, npcx_lo),
            "npcy": np.where(upper, npcy_hi, npcy_lo),
            "x": np.where(right, x_range[1], x_range[0]),
            "y": np.where(upper, y_range[1], y_range[0]),
        },
        columns=QUADRANT_COLUMNS,
    )
