"""plotnine statistic counting observations per quadrant."""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd
from plotnine import after_stat
from plotnine.stats.stat import stat

from pnmisc.compute.quadrants import quadrant_counts
from pnmisc.stats._common import add_constant_columns

logger = logging.getLogger(__name__)


class stat_quadrant_counts(stat):
    """Number of observations in each quadrant of a panel.

    Grouping is ignored: a single count is computed per quadrant and panel.
    By default the counts are drawn as text in the far corner of each
    quadrant, positioned in npc units so that labels sit in the same place
    in every facet. Pass ``geom="text"`` to position them in data units.

    Parameters
    ----------
    quadrants : int | list[int] | None
        Quadrants of interest; ``0`` requests the whole-panel total.
        ``None`` reports the quadrants spanned by the data.
    pool_along : str
        ``"none"``, ``"x"`` or ``"y"``; which pairs of quadrants to pool.
    xintercept, yintercept : float
        Origin of the quadrants.
    label_x, label_y : float | str | list | None
        Label position in npc units, or ``left``/``right``/``centre`` and
        ``bottom``/``top``/``centre`` tokens.

    Computed variables: ``quadrant``, ``count``, ``count_label``,
    ``npcx``, ``npcy``, ``x``, ``y``.
    """

    REQUIRED_AES = {"x", "y"}
    DEFAULT_AES = {"label": after_stat("count_label")}
    DEFAULT_PARAMS = {
        "geom": "text_npc",
        "position": "identity",
        "na_rm": False,
        "quadrants": None,
        "pool_along": "none",
        "xintercept": 0,
        "yintercept": 0,
        "label_x": None,
        "label_y": None,
    }
    CREATES = {"quadrant", "count", "count_label", "npcx", "npcy"}

    def compute_panel(self, data: pd.DataFrame, scales: Any) -> pd.DataFrame:
        params = self.params
        counts = quadrant_counts(
            data,
            quadrants=params["quadrants"],
            pool_along=params["pool_along"],
            xintercept=params["xintercept"],
            yintercept=params["yintercept"],
            label_x=params["label_x"],
            label_y=params["label_y"],
        )
        return add_constant_columns(counts, data)
