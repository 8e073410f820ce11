"""Inset tables positioned in npc units."""

from __future__ import annotations

from typing import Any

import pandas as pd
from plotnine.geoms.geom import geom

from pnmisc._utils import compute_npcx, compute_npcy


def _inward_offset(npc: float) -> float:
    if npc < 0.5:
        return 0.0
    if npc > 0.5:
        return 1.0
    return 0.5


def table_bbox(
    npcx: Any = "right",
    npcy: Any = "top",
    width: float = 0.3,
    height: float = 0.2,
) -> list[float]:
    """Bounding box ``[x0, y0, width, height]`` in axes fraction.

    The box extends inwards from its anchor: an anchor right of the centre
    is the box's right edge, one left of it the left edge, and the centre
    anchors the middle of the box. Same for the vertical direction.
    """
    x = float(compute_npcx(npcx)[0])
    y = float(compute_npcy(npcy)[0])
    return [x - _inward_offset(x) * width, y - _inward_offset(y) * height, width, height]


class geom_table_npc(geom):
    """A data frame drawn as a table inside each panel.

    The table is a parameter of the layer, not an aesthetic, so the same
    table is drawn once in every panel that holds data for the layer.

    Parameters
    ----------
    table : pd.DataFrame
        Table to draw; values are shown with ``str``.
    npcx, npcy : float | str
        Anchor in npc units or as a position token.
    width : float
        Width of the table in npc units.
    row_height : float
        Height of each row (header included) in npc units.
    fontsize : float
        Font size of the cells.
    """

    REQUIRED_AES: set[str] = set()
    DEFAULT_AES: dict[str, Any] = {}
    DEFAULT_PARAMS = {
        "stat": "identity",
        "position": "identity",
        "na_rm": False,
        "table": None,
        "npcx": "right",
        "npcy": "top",
        "width": 0.3,
        "row_height": 0.06,
        "fontsize": 8,
    }

    def __init__(self, mapping: Any = None, data: Any = None, **kwargs: Any):
        table = kwargs.get("table")
        if not isinstance(table, pd.DataFrame):
            raise TypeError(f"table must be a pandas DataFrame, got {type(table).__name__}")
        if table.empty:
            raise ValueError("table must have at least one row and one column")
        super().__init__(mapping, data, **kwargs)

    def draw_panel(self, data: pd.DataFrame, panel_params: Any, coord: Any, ax: Any, *args: Any, **kwargs: Any):
        params = self.params
        table = params["table"]
        height = params["row_height"] * (len(table) + 1)
        tbl = ax.table(
            cellText=table.astype(str).to_numpy().tolist(),
            colLabels=[str(c) for c in table.columns],
            bbox=table_bbox(params["npcx"], params["npcy"], params["width"], height),
            zorder=10,
        )
        tbl.auto_set_font_size(False)
        tbl.set_fontsize(params["fontsize"])
