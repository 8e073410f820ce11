"""Transforms, limits and label formatters for the volcano-plot scales."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import numpy as np
from mizani.transforms import trans


class reverse_log10_trans(trans):
    """``-log10(x)``: small values map to large ones.

    Used for P-values, so that the most significant ones lie at the top
    or right of the plot.
    """

    domain = (np.finfo(np.float64).tiny, np.inf)

    def transform(self, x):
        return -np.log10(np.asarray(x, dtype=np.float64))

    def inverse(self, x):
        return 10.0 ** -np.asarray(x, dtype=np.float64)


def symmetric_limits(limits: Sequence[float]) -> tuple[float, float]:
    """Limits symmetric around zero that include *limits*."""
    bound = max(abs(v) for v in limits)
    return (-bound, bound)


def decade_breaks(limits: Sequence[float]) -> list[float]:
    """Powers of ten spanning positive *limits*."""
    lo, hi = sorted(float(v) for v in limits)
    if lo <= 0:
        raise ValueError(f"Limits of a log scale must be positive, got {tuple(limits)}")
    return [10.0**e for e in range(math.floor(math.log10(lo)), math.ceil(math.log10(hi)) + 1)]


def format_pvalue(breaks: Sequence[float]) -> list[str]:
    """Plain decimals down to 0.001, scientific notation below."""
    return [f"{b:g}" if b >= 1e-3 else f"{b:.0e}" for b in breaks]


def format_fold_change(
    log_base_data: float = 2,
    log_base_labels: bool = False,
    digits: int = 3,
) -> Callable[[Sequence[float]], list[str]]:
    """Label formatter for log-fold-change breaks.

    Parameters
    ----------
    log_base_data : float
        Base of the logarithm applied to the data.
    log_base_labels : bool
        Show the breaks as powers of the base (e.g. ``2^-1``) instead of the
        fold change (``0.5``).
    digits : int
        Significant digits of the fold change.
    """

    def formatter(breaks: Sequence[float]) -> list[str]:
        if log_base_labels:
            return [f"{log_base_data:g}^{b:g}" for b in breaks]
        return [f"{log_base_data ** b:.{digits}g}" for b in breaks]

    return formatter
