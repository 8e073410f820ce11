"""plotnine statistics."""

from pnmisc.stats.apply import stat_apply_group, stat_apply_panel
from pnmisc.stats.density import stat_dens2d_filter, stat_dens2d_labels
from pnmisc.stats.peaks import stat_peaks, stat_valleys
from pnmisc.stats.poly_eq import stat_poly_eq
from pnmisc.stats.quadrants import stat_quadrant_counts

__all__ = [
    "stat_apply_group",
    "stat_apply_panel",
    "stat_dens2d_filter",
    "stat_dens2d_labels",
    "stat_peaks",
    "stat_poly_eq",
    "stat_quadrant_counts",
    "stat_valleys",
]
