"""Local maxima and minima of a series."""

from __future__ import annotations

import logging

import numpy as np
from scipy import ndimage

logger = logging.getLogger(__name__)


def _check_span(span: int | None) -> int | None:
    if span is None:
        return None
    span = int(span)
    if span < 1:
        raise ValueError(f"span must be a positive odd integer, got {span}")
    if span % 2 == 0:
        logger.warning("span must be odd; using %d instead of %d", span + 1, span)
        span += 1
    return span


def find_peaks(
    y: np.ndarray,
    span: int | None = 5,
    ignore_threshold: float = 0.0,
    strict: bool = False,
) -> np.ndarray:
    """Flag local maxima.

    Parameters
    ----------
    y : np.ndarray
        Values, in the order in which the window slides.
    span : int | None
        Width of the centred window. ``None`` flags only the global maximum.
    ignore_threshold : float
        In [-1, 1]. Positive values drop peaks lower than this fraction of
        the range above the minimum; negative values drop peaks whose depth
        below the maximum is less than the fraction of the range.
    strict : bool
        Require the peak to be the only value reaching the window maximum.

    Returns
    -------
    np.ndarray
        Boolean mask of peaks.
    """
    if not -1.0 <= ignore_threshold <= 1.0:
        raise ValueError(f"ignore_threshold must be within [-1, 1], got {ignore_threshold}")
    span = _check_span(span)

    y = np.asarray(y, dtype=np.float64)
    if len(y) == 0:
        return np.zeros(0, dtype=bool)
    finite = np.isfinite(y)
    if not finite.any():
        return np.zeros(len(y), dtype=bool)
    y_min, y_max = y[finite].min(), y[finite].max()
    y = np.where(finite, y, y_min)

    if span is None:
        peaks = np.zeros(len(y), dtype=bool)
        peaks[np.argmax(y)] = True
    else:
        half = span // 2
        if half == 0:
            peaks = np.ones(len(y), dtype=bool)
        else:
            # window without its centre; outside the series counts as -inf
            footprint = np.ones(span, dtype=bool)
            footprint[half] = False
            neighbours = ndimage.maximum_filter(
                y, footprint=footprint, mode="constant", cval=-np.inf
            )
            peaks = y > neighbours if strict else y >= neighbours

    if abs(ignore_threshold) < 1e-5:
        return peaks
    scaled = (y_max - y_min) * abs(ignore_threshold)
    if ignore_threshold > 0:
        return peaks & (y - y_min > scaled)
    return peaks & (y_max - y > scaled)


def find_valleys(
    y: np.ndarray,
    span: int | None = 5,
    ignore_threshold: float = 0.0,
    strict: bool = False,
) -> np.ndarray:
    """Flag local minima; see :func:`find_peaks`."""
    return find_peaks(-np.asarray(y, dtype=np.float64), span, ignore_threshold, strict)
