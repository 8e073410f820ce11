"""Compute layer: pure pandas/numpy algorithms behind the statistics."""

# Importing functions registers all built-in transforms.
from pnmisc.compute import functions as _functions  # noqa: F401
from pnmisc.compute.apply import apply_by_group, apply_by_panel, apply_fun
from pnmisc.compute.density import dens2d_keep, density_at_points
from pnmisc.compute.fitting import poly_fit_summary
from pnmisc.compute.peaks import find_peaks, find_valleys
from pnmisc.compute.quadrants import quadrant_counts, which_quadrant
from pnmisc.compute.registry import ApplyFunctionRegistry, register_apply_function

__all__ = [
    "ApplyFunctionRegistry",
    "register_apply_function",
    "apply_fun",
    "apply_by_group",
    "apply_by_panel",
    "dens2d_keep",
    "density_at_points",
    "find_peaks",
    "find_valleys",
    "poly_fit_summary",
    "quadrant_counts",
    "which_quadrant",
]
