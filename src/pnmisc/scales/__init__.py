"""Scales for volcano and quadrant plots."""

from pnmisc.scales.transforms import (
    decade_breaks,
    format_fold_change,
    format_pvalue,
    reverse_log10_trans,
    symmetric_limits,
)
from pnmisc.scales.volcano import scale_x_logFC, scale_x_Pvalue, scale_y_logFC, scale_y_Pvalue

__all__ = [
    "decade_breaks",
    "format_fold_change",
    "format_pvalue",
    "reverse_log10_trans",
    "scale_x_logFC",
    "scale_x_Pvalue",
    "scale_y_logFC",
    "scale_y_Pvalue",
    "symmetric_limits",
]
