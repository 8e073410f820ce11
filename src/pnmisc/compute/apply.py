"""Apply transforms to the x and/or y column of a group or a panel.

The number of rows never decreases: a transform returning a shorter vector
(e.g. ``diff``) is padded with NaN at the end.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import numpy as np
import pandas as pd

from pnmisc._utils import check_columns, fill_to_length
from pnmisc.compute.registry import ApplyFunctionRegistry

logger = logging.getLogger(__name__)


def _call(fun: Callable, column: pd.Series, args: Mapping[str, Any] | None, nrow: int):
    kwargs = dict(args) if args else {}
    return fill_to_length(fun(column.to_numpy(), **kwargs), nrow)


def apply_fun(
    data: pd.DataFrame,
    fun_x: str | Callable | None = None,
    fun_x_args: Mapping[str, Any] | None = None,
    fun_y: str | Callable | None = None,
    fun_y_args: Mapping[str, Any] | None = None,
) -> pd.DataFrame:
    """Replace ``x`` and/or ``y`` by the result of a vectorised function.

    Parameters
    ----------
    data : pd.DataFrame
        Must contain ``x`` and ``y``. Not modified.
    fun_x, fun_y : str | Callable | None
        Function, or name of a registered function, applied to the whole
        column. At least one is required.
    fun_x_args, fun_y_args : Mapping | None
        Extra keyword arguments for the functions.

    Returns
    -------
    pd.DataFrame
        Copy of *data* with the transformed column(s), same row count.
    """
    if fun_x is None and fun_y is None:
        raise ValueError("At least one of fun_x or fun_y must be supplied")
    fun_x = ApplyFunctionRegistry.resolve(fun_x)
    fun_y = ApplyFunctionRegistry.resolve(fun_y)
    check_columns(data, ("x", "y"), "apply_fun")

    nrow = len(data)
    out = data.copy()
    if fun_x is not None:
        out["x"] = _call(fun_x, data["x"], fun_x_args, nrow)
    if fun_y is not None:
        out["y"] = _call(fun_y, data["y"], fun_y_args, nrow)
    return out


def apply_by_group(
    data: pd.DataFrame,
    group_col: str = "group",
    **kwargs: Any,
) -> pd.DataFrame:
    """Run :func:`apply_fun` separately on each group.

    Rows keep their original order. Without *group_col* in *data* the
    whole frame is treated as a single group.
    """
    if kwargs.get("fun_x") is None and kwargs.get("fun_y") is None:
        raise ValueError("At least one of fun_x or fun_y must be supplied")
    if group_col not in data.columns:
        logger.debug("No %r column; applying to the whole frame", group_col)
        return apply_fun(data, **kwargs)

    indices = data.groupby(group_col, sort=False, dropna=False).indices
    if not indices:
        return data.copy()

    parts, positions = [], []
    for idx in indices.values():
        parts.append(apply_fun(data.iloc[idx], **kwargs))
        positions.append(idx)
    order = np.argsort(np.concatenate(positions), kind="stable")
    return pd.concat(parts).iloc[order]


def apply_by_panel(data: pd.DataFrame, **kwargs: Any) -> pd.DataFrame:
    """Run :func:`apply_fun` once on the whole panel, ignoring groups."""
    return apply_fun(data, **kwargs)
