"""plotnine statistics marking peaks and valleys."""

from __future__ import annotations

from typing import Any

import pandas as pd
from plotnine.stats.stat import stat

from pnmisc.compute.peaks import find_peaks, find_valleys

_EXTREMA_PARAMS = {
    "geom": "point",
    "position": "identity",
    "na_rm": False,
    "span": 5,
    "ignore_threshold": 0.0,
    "strict": False,
    "x_label_fmt": "{:g}",
    "y_label_fmt": "{:g}",
}


class _stat_extrema(stat):
    REQUIRED_AES = {"x", "y"}
    DEFAULT_PARAMS = _EXTREMA_PARAMS
    CREATES = {"x_label", "y_label"}

    _finder = staticmethod(find_peaks)

    def compute_group(self, data: pd.DataFrame, scales: Any) -> pd.DataFrame:
        params = self.params
        data = data.sort_values("x", kind="stable").reset_index(drop=True)
        flags = self._finder(
            data["y"].to_numpy(dtype=float),
            span=params["span"],
            ignore_threshold=params["ignore_threshold"],
            strict=params["strict"],
        )
        out = data[flags].reset_index(drop=True)
        out["x_label"] = [params["x_label_fmt"].format(v) for v in out["x"]]
        out["y_label"] = [params["y_label_fmt"].format(v) for v in out["y"]]
        return out


class stat_peaks(_stat_extrema):
    """Local maxima of y along x, per group.

    Parameters
    ----------
    span : int | None
        Width of the window in which a peak must be the maximum; odd.
        ``None`` keeps only the global maximum.
    ignore_threshold : float
        Fraction of the y range below which peaks are ignored.
    strict : bool
        Ignore peaks tied with a neighbour.
    x_label_fmt, y_label_fmt : str
        ``str.format`` templates for the ``x_label``/``y_label`` variables.

    Computed variables: ``x_label`` and ``y_label``; only the peak rows
    are returned.
    """

    _finder = staticmethod(find_peaks)


class stat_valleys(_stat_extrema):
    """Local minima of y along x, per group; see :class:`stat_peaks`."""

    _finder = staticmethod(find_valleys)
