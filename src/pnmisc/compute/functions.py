"""Built-in transforms for the apply statistics.

All transforms follow the interface::

    def transform(values: np.ndarray, **kwargs) -> np.ndarray:
        ...  # same length as values, or shorter

Importing this module registers them with
:class:`~pnmisc.compute.registry.ApplyFunctionRegistry`.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from pnmisc.compute.registry import register_apply_function


# ---------------------------------------------------------------------------
# Cumulative summaries
# ---------------------------------------------------------------------------
@register_apply_function("cumsum")
def cumsum(values: np.ndarray) -> np.ndarray:
    """Cumulative sum."""
    return np.cumsum(np.asarray(values, dtype=np.float64))


@register_apply_function("cumprod")
def cumprod(values: np.ndarray) -> np.ndarray:
    """Cumulative product."""
    return np.cumprod(np.asarray(values, dtype=np.float64))


@register_apply_function("cummax")
def cummax(values: np.ndarray) -> np.ndarray:
    """Running maximum."""
    return np.maximum.accumulate(np.asarray(values, dtype=np.float64))


@register_apply_function("cummin")
def cummin(values: np.ndarray) -> np.ndarray:
    """Running minimum."""
    return np.minimum.accumulate(np.asarray(values, dtype=np.float64))


# ---------------------------------------------------------------------------
# Differences and smoothing
# ---------------------------------------------------------------------------
@register_apply_function("diff")
def diff(values: np.ndarray, *, lag: int = 1) -> np.ndarray:
    """Lagged differences; *lag* values shorter than the input."""
    values = np.asarray(values, dtype=np.float64)
    if lag < 1:
        raise ValueError(f"lag must be a positive integer, got {lag}")
    return values[lag:] - values[:-lag]


@register_apply_function("runmed")
def runmed(values: np.ndarray, *, k: int = 3) -> np.ndarray:
    """Running median over a centred window of odd width *k*."""
    if k < 1 or k % 2 == 0:
        raise ValueError(f"k must be a positive odd integer, got {k}")
    s = pd.Series(np.asarray(values, dtype=np.float64))
    return s.rolling(window=k, center=True, min_periods=1).median().to_numpy()


# ---------------------------------------------------------------------------
# Rescaling
# ---------------------------------------------------------------------------
@register_apply_function("rescale")
def rescale(values: np.ndarray) -> np.ndarray:
    """Rescale to [0, 1]; constant input maps to 0."""
    values = np.asarray(values, dtype=np.float64)
    lo, hi = np.nanmin(values), np.nanmax(values)
    if hi - lo < 1e-12:
        return np.zeros_like(values)
    return (values - lo) / (hi - lo)


@register_apply_function("scale")
def scale(values: np.ndarray, *, center: bool = True, scale: bool = True) -> np.ndarray:
    """Centre on the mean and divide by the sample standard deviation."""
    values = np.asarray(values, dtype=np.float64)
    if center:
        values = values - np.nanmean(values)
    if scale:
        sd = np.nanstd(values, ddof=1) if np.sum(np.isfinite(values)) > 1 else 0.0
        values = values / sd if sd > 1e-12 else np.zeros_like(values)
    return values


@register_apply_function("normalize")
def normalize(values: np.ndarray, *, by: str = "max") -> np.ndarray:
    """Divide by the maximum (``by="max"``) or by the total (``by="sum"``)."""
    values = np.asarray(values, dtype=np.float64)
    if by == "max":
        denom = np.nanmax(values)
    elif by == "sum":
        denom = np.nansum(values)
    else:
        raise ValueError(f"by must be 'max' or 'sum', got {by!r}")
    return values / denom
