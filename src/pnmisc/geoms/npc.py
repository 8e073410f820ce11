"""Text and label geoms positioned in npc (normalised parent coordinates).

``npcx = 0`` is the left edge of the plotting area and ``npcx = 1`` the
right edge, whatever the scale limits of the panel.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from plotnine import geom_label, geom_text

INWARD = "inward"


def inward_ha(npcx: pd.Series) -> np.ndarray:
    """Horizontal alignment keeping text inside the panel."""
    return np.select([npcx < 0.5, npcx > 0.5], ["left", "right"], default="center")


def inward_va(npcy: pd.Series) -> np.ndarray:
    """Vertical alignment keeping text inside the panel."""
    return np.select([npcy < 0.5, npcy > 0.5], ["bottom", "top"], default="center")


def npc_to_data(data: pd.DataFrame, x_range: tuple, y_range: tuple) -> pd.DataFrame:
    """Replace ``x``/``y`` by the positions that ``npcx``/``npcy`` denote in the given ranges.

    ``ha``/``va`` set to ``"inward"`` are resolved from the npc values.
    """
    data = data.copy()
    npcx = data["npcx"].astype(float)
    npcy = data["npcy"].astype(float)
    data["x"] = x_range[0] + npcx * (x_range[1] - x_range[0])
    data["y"] = y_range[0] + npcy * (y_range[1] - y_range[0])

    if "ha" in data.columns:
        data["ha"] = np.where(data["ha"] == INWARD, inward_ha(npcx), data["ha"])
    if "va" in data.columns:
        data["va"] = np.where(data["va"] == INWARD, inward_va(npcy), data["va"])
    return data


class geom_text_npc(geom_text):
    """Text positioned with ``npcx``/``npcy`` in [0, 1].

    Labels keep the same position relative to the plotting area in every
    panel, even with free scales. ``ha``/``va`` default to ``"inward"``.
    """

    REQUIRED_AES = {"npcx", "npcy", "label"}
    DEFAULT_AES = {**geom_text.DEFAULT_AES, "ha": INWARD, "va": INWARD}

    def draw_panel(self, data: pd.DataFrame, panel_params: Any, coord: Any, ax: Any, *args: Any, **kwargs: Any):
        data = npc_to_data(data, panel_params.x.range, panel_params.y.range)
        return super().draw_panel(data, panel_params, coord, ax, *args, **kwargs)


class geom_label_npc(geom_label):
    """Boxed label positioned with ``npcx``/``npcy``; see :class:`geom_text_npc`."""

    REQUIRED_AES = {"npcx", "npcy", "label"}
    DEFAULT_AES = {**geom_label.DEFAULT_AES, "ha": INWARD, "va": INWARD}

    def draw_panel(self, data: pd.DataFrame, panel_params: Any, coord: Any, ax: Any, *args: Any, **kwargs: Any):
        data = npc_to_data(data, panel_params.x.range, panel_params.y.range)
        return super().draw_panel(data, panel_params, coord, ax, *args, **kwargs)
