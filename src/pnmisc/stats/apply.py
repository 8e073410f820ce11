"""plotnine statistics applying functions to x and/or y values."""

from __future__ import annotations

from typing import Any

import pandas as pd
from plotnine.stats.stat import stat

from pnmisc.compute.apply import apply_fun

_APPLY_PARAMS = {
    "geom": "line",
    "position": "identity",
    "na_rm": False,
    "fun_x": None,
    "fun_x_args": None,
    "fun_y": None,
    "fun_y_args": None,
}


class _stat_apply(stat):
    REQUIRED_AES = {"x", "y"}
    DEFAULT_PARAMS = _APPLY_PARAMS

    def setup_params(self, data: pd.DataFrame) -> Any:
        # reject the layer before any group is computed
        if self.params["fun_x"] is None and self.params["fun_y"] is None:
            raise ValueError("At least one of fun_x or fun_y must be supplied")
        return self.params

    def _apply(self, data: pd.DataFrame) -> pd.DataFrame:
        params = self.params
        return apply_fun(
            data,
            fun_x=params["fun_x"],
            fun_x_args=params["fun_x_args"],
            fun_y=params["fun_y"],
            fun_y_args=params["fun_y_args"],
        )


class stat_apply_group(_stat_apply):
    """Apply functions to the x and/or y values of each group.

    Useful for computations that are neither scale transformations nor
    summaries: cumulative sums, running medians, per-group rescaling.
    Different functions can be applied to x and y at the same time.

    Parameters
    ----------
    fun_x, fun_y : callable | str | None
        Vectorised function, or the name of a registered one, receiving the
        whole column as first argument. At least one is required.
    fun_x_args, fun_y_args : dict | None
        Extra keyword arguments for the functions.

    Functions returning fewer values than rows (e.g. ``diff``) are padded
    with NaN; use ``na_rm=True`` in the geom to drop them silently.

    Computed variables: ``x`` and/or ``y`` as returned by the functions.
    """

    def compute_group(self, data: pd.DataFrame, scales: Any) -> pd.DataFrame:
        return self._apply(data)


class stat_apply_panel(_stat_apply):
    """Apply functions to the x and/or y values of the whole panel.

    Same as :class:`stat_apply_group` but the functions see all the
    observations of the panel at once, e.g. for joint rescaling.
    """

    def compute_panel(self, data: pd.DataFrame, scales: Any) -> pd.DataFrame:
        return self._apply(data).reset_index(drop=True)
