"""Input/output utilities."""

from pnmisc.io.exporters import save_parameters, save_results
from pnmisc.io.loaders import load_table

__all__ = [
    "load_table",
    "save_results",
    "save_parameters",
]
