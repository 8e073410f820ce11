"""Lines dividing a panel into quadrants."""

from __future__ import annotations

from typing import Any

from plotnine import geom_hline, geom_vline

from pnmisc.config import POOL_ALONG_CHOICES


def geom_quadrant_lines(
    xintercept: float = 0,
    yintercept: float = 0,
    pool_along: str = "none",
    linetype: str = "dashed",
    **kwargs: Any,
) -> list:
    """Reference lines matching ``stat_quadrant_counts``.

    Parameters
    ----------
    xintercept, yintercept : float
        Origin of the quadrants.
    pool_along : str
        ``"x"`` draws only the horizontal line, ``"y"`` only the vertical one.
    linetype : str
        Line type of both lines.
    **kwargs
        Passed to :func:`plotnine.geom_hline` and :func:`plotnine.geom_vline`.

    Returns
    -------
    list
        Layers to add to a ggplot.
    """
    if pool_along not in POOL_ALONG_CHOICES:
        raise ValueError(
            f"pool_along must be one of {POOL_ALONG_CHOICES}, got {pool_along!r}"
        )

    layers = []
    if pool_along != "y":
        layers.append(geom_hline(yintercept=yintercept, linetype=linetype, **kwargs))
    if pool_along != "x":
        layers.append(geom_vline(xintercept=xintercept, linetype=linetype, **kwargs))
    return layers
