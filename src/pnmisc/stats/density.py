"""plotnine statistics filtering or labelling observations by 2D density."""

from __future__ import annotations

from typing import Any

import pandas as pd
from plotnine.stats.stat import stat

from pnmisc.compute.density import dens2d_keep

_DENS2D_PARAMS = {
    "position": "identity",
    "na_rm": True,
    "keep_fraction": 0.10,
    "keep_number": None,
    "keep_sparse": True,
    "invert_selection": False,
    "bw_method": None,
}


class _stat_dens2d(stat):
    REQUIRED_AES = {"x", "y"}

    def _keep(self, data: pd.DataFrame):
        params = self.params
        return dens2d_keep(
            data["x"].to_numpy(dtype=float),
            data["y"].to_numpy(dtype=float),
            keep_fraction=params["keep_fraction"],
            keep_number=params["keep_number"],
            keep_sparse=params["keep_sparse"],
            invert_selection=params["invert_selection"],
            bw_method=params["bw_method"],
        )


class stat_dens2d_filter(_stat_dens2d):
    """Keep only the observations in low (or high) density regions of a panel.

    The density at each observation is estimated with a 2D Gaussian
    kernel. By default the 10% of observations in the sparsest regions are
    kept, e.g. to highlight or label outliers in a scatter plot.

    Parameters
    ----------
    keep_fraction : float
        Fraction of the observations to keep.
    keep_number : int | None
        Upper limit on the number of observations kept.
    keep_sparse : bool
        Keep observations in sparse regions if True, dense ones otherwise.
    invert_selection : bool
        Keep the complement of the selection.
    bw_method : str | float | None
        Bandwidth passed to :class:`scipy.stats.gaussian_kde`.
    """

    DEFAULT_PARAMS = {"geom": "point", **_DENS2D_PARAMS}

    def compute_panel(self, data: pd.DataFrame, scales: Any) -> pd.DataFrame:
        return data[self._keep(data)].reset_index(drop=True)


class stat_dens2d_labels(_stat_dens2d):
    """Blank the labels of observations in high (or low) density regions.

    All observations are returned, so that text repelling algorithms can
    avoid every point, but only the selected ones keep their ``label``;
    the others get *label_fill*.

    Parameters
    ----------
    label_fill : str
        Replacement label for observations not kept.

    Other parameters as in :class:`stat_dens2d_filter`.
    """

    REQUIRED_AES = {"x", "y", "label"}
    DEFAULT_PARAMS = {"geom": "text", "label_fill": "", **_DENS2D_PARAMS}

    def compute_panel(self, data: pd.DataFrame, scales: Any) -> pd.DataFrame:
        keep = self._keep(data)
        out = data.reset_index(drop=True)
        out["label"] = out["label"].astype(object).where(keep, self.params["label_fill"])
        return out
