"""pnmisc: quadrant counts, apply statistics and more for plotnine."""

import logging

from pnmisc.compute import ApplyFunctionRegistry, register_apply_function
from pnmisc.config import LabelConfig, QuadrantConfig
from pnmisc.geoms import geom_label_npc, geom_quadrant_lines, geom_table_npc, geom_text_npc
from pnmisc.scales import scale_x_logFC, scale_x_Pvalue, scale_y_logFC, scale_y_Pvalue
from pnmisc.stats import (
    stat_apply_group,
    stat_apply_panel,
    stat_dens2d_filter,
    stat_dens2d_labels,
    stat_peaks,
    stat_poly_eq,
    stat_quadrant_counts,
    stat_valleys,
)

# handlers are configured by applications and the CLI
logging.getLogger("pnmisc").addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "ApplyFunctionRegistry",
    "LabelConfig",
    "QuadrantConfig",
    "geom_label_npc",
    "geom_quadrant_lines",
    "geom_table_npc",
    "geom_text_npc",
    "register_apply_function",
    "scale_x_Pvalue",
    "scale_x_logFC",
    "scale_y_Pvalue",
    "scale_y_logFC",
    "stat_apply_group",
    "stat_apply_panel",
    "stat_dens2d_filter",
    "stat_dens2d_labels",
    "stat_peaks",
    "stat_poly_eq",
    "stat_quadrant_counts",
    "stat_valleys",
    "__version__",
]
