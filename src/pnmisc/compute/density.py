"""Select observations by local 2D density."""

from __future__ import annotations

import logging
import math

import numpy as np
from scipy.stats import gaussian_kde

logger = logging.getLogger(__name__)


def n_to_keep(n: int, keep_fraction: float = 0.10, keep_number: int | None = None) -> int:
    """Number of observations kept out of *n*."""
    if not 0.0 <= keep_fraction <= 1.0:
        raise ValueError(f"keep_fraction must be within [0, 1], got {keep_fraction}")
    if keep_number is not None and keep_number < 0:
        raise ValueError(f"keep_number must be non-negative, got {keep_number}")

    keep = math.floor(n * keep_fraction)
    if keep_number is not None:
        keep = min(keep, int(keep_number))
    return keep


def density_at_points(
    x: np.ndarray,
    y: np.ndarray,
    bw_method: str | float | None = None,
) -> np.ndarray:
    """Gaussian kernel density estimate evaluated at each observation.

    Parameters
    ----------
    x, y : np.ndarray
        Coordinates of the observations.
    bw_method : str | float | None
        Passed to :class:`scipy.stats.gaussian_kde` (``"scott"`` when None).
        When the points are collinear, or an axis is constant, the density
        is the product of per-axis 1D estimates, skipping constant axes.

    Returns
    -------
    np.ndarray
        Density per observation.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    xy = np.vstack([x, y])
    try:
        return gaussian_kde(xy, bw_method=bw_method)(xy)
    except np.linalg.LinAlgError:
        logger.debug("Singular 2D covariance; using a product of 1D densities")

    # collinear points or a constant axis: one bandwidth per axis
    density = np.ones(len(x))
    for values in (x, y):
        if np.ptp(values) > 0:
            density *= gaussian_kde(values, bw_method=bw_method)(values)
    return density


def dens2d_keep(
    x: np.ndarray,
    y: np.ndarray,
    keep_fraction: float = 0.10,
    keep_number: int | None = None,
    keep_sparse: bool = True,
    invert_selection: bool = False,
    bw_method: str | float | None = None,
) -> np.ndarray:
    """Boolean mask of the observations to keep.

    Parameters
    ----------
    x, y : np.ndarray
        Coordinates of the observations.
    keep_fraction : float
        Fraction of observations to keep.
    keep_number : int | None
        Upper limit on the number kept.
    keep_sparse : bool
        Keep observations in the sparsest regions if True, in the densest
        regions otherwise.
    invert_selection : bool
        Negate the returned mask.
    bw_method : str | float | None
        KDE bandwidth.

    Returns
    -------
    np.ndarray
        Boolean mask, True for kept observations.
    """
    n = len(x)
    keep_n = n_to_keep(n, keep_fraction, keep_number)

    if keep_n == 0:
        keep = np.zeros(n, dtype=bool)
    elif keep_n >= n:
        keep = np.ones(n, dtype=bool)
    else:
        density = density_at_points(x, y, bw_method=bw_method)
        order = np.argsort(density if keep_sparse else -density, kind="stable")
        keep = np.zeros(n, dtype=bool)
        keep[order[:keep_n]] = True

    logger.debug("Keeping %d of %d observations (sparse=%s)", int(keep.sum()), n, keep_sparse)
    return ~keep if invert_selection else keep
