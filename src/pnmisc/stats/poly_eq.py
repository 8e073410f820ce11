"""plotnine statistic annotating a polynomial fit."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from plotnine import after_stat
from plotnine.stats.stat import stat

from pnmisc._utils import compute_npcx, compute_npcy
from pnmisc.compute.fitting import poly_fit_summary
from pnmisc.config import LabelConfig

_LABELS = LabelConfig()


class stat_poly_eq(stat):
    """Equation and goodness of fit of a polynomial, per group.

    Fits ``y ~ poly(x, degree)`` by least squares and returns one row per
    group with the fitted equation and summary statistics, positioned in
    npc units. Labels of successive groups are stacked *vstep* apart.

    Parameters
    ----------
    degree : int
        Polynomial degree.
    label_x, label_y : float | str
        Label anchor in npc units or as a token.
    hstep, vstep : float
        Shift per group along x and y, towards the panel centre.
        Defaults come from :class:`~pnmisc.config.LabelConfig`.
    margin_npc : float
        Distance kept from the panel edge by position tokens.
    coef_digits, rr_digits, p_digits : int
        Digits used in the text labels.

    Computed variables: ``eq_label``, ``rr_label``, ``adj_rr_label``,
    ``p_value_label``, ``n_label``, ``rr``, ``adj_rr``, ``f_value``,
    ``p_value``, ``AIC``, ``BIC``, ``n``, ``npcx``, ``npcy``.
    """

    REQUIRED_AES = {"x", "y"}
    DEFAULT_AES = {"label": after_stat("rr_label")}
    DEFAULT_PARAMS = {
        "geom": "text_npc",
        "position": "identity",
        "na_rm": False,
        "degree": 1,
        "label_x": "left",
        "label_y": "top",
        "hstep": _LABELS.h_step,
        "vstep": _LABELS.v_step,
        "margin_npc": _LABELS.margin_npc,
        "coef_digits": 3,
        "rr_digits": 2,
        "p_digits": 3,
    }
    CREATES = {
        "eq_label",
        "rr_label",
        "adj_rr_label",
        "p_value_label",
        "n_label",
        "rr",
        "adj_rr",
        "f_value",
        "p_value",
        "AIC",
        "BIC",
        "n",
        "npcx",
        "npcy",
    }

    def compute_group(self, data: pd.DataFrame, scales: Any) -> pd.DataFrame:
        params = self.params
        x = data["x"].to_numpy(dtype=float)
        y = data["y"].to_numpy(dtype=float)
        summary = poly_fit_summary(
            x,
            y,
            degree=params["degree"],
            coef_digits=params["coef_digits"],
            rr_digits=params["rr_digits"],
            p_digits=params["p_digits"],
        )
        summary.pop("coefs")

        group = int(data["group"].iloc[0]) if "group" in data.columns else 1
        group = max(abs(group), 1)
        margin = params["margin_npc"]
        npcx = compute_npcx(params["label_x"], group=group, h_step=params["hstep"], margin_npc=margin)
        npcy = compute_npcy(params["label_y"], group=group, v_step=params["vstep"], margin_npc=margin)
        npcx, npcy = float(npcx[0]), float(npcy[0])

        x_lo, x_hi = np.nanmin(x), np.nanmax(x)
        y_lo, y_hi = np.nanmin(y), np.nanmax(y)
        row = {
            **summary,
            "npcx": npcx,
            "npcy": npcy,
            "x": x_lo + npcx * (x_hi - x_lo),
            "y": y_lo + npcy * (y_hi - y_lo),
        }
        return pd.DataFrame([row])
