"""Geoms: npc-positioned text, inset tables and quadrant lines."""

from pnmisc.geoms.npc import geom_label_npc, geom_text_npc, npc_to_data
from pnmisc.geoms.quadrant_lines import geom_quadrant_lines
from pnmisc.geoms.table import geom_table_npc, table_bbox

__all__ = [
    "geom_label_npc",
    "geom_quadrant_lines",
    "geom_table_npc",
    "geom_text_npc",
    "npc_to_data",
    "table_bbox",
]
