"""Continuous scales for log-fold-change and P-value axes of volcano plots."""

from __future__ import annotations

from typing import Any

from plotnine import scale_x_continuous, scale_y_continuous

from pnmisc.scales.transforms import (
    decade_breaks,
    format_fold_change,
    format_pvalue,
    reverse_log10_trans,
    symmetric_limits,
)


def _logfc_kwargs(
    name: str,
    log_base_data: float,
    log_base_labels: bool,
    symmetric: bool,
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    kwargs.setdefault("labels", format_fold_change(log_base_data, log_base_labels))
    if symmetric:
        kwargs.setdefault("limits", symmetric_limits)
    return {"name": name, **kwargs}


def scale_x_logFC(
    name: str = "Fold change",
    log_base_data: float = 2,
    log_base_labels: bool = False,
    symmetric: bool = True,
    **kwargs: Any,
):
    """x scale for data already expressed as log fold change.

    Parameters
    ----------
    name : str
        Axis title.
    log_base_data : float
        Base of the logarithm applied to the data.
    log_base_labels : bool
        Label breaks as powers of the base instead of fold changes.
    symmetric : bool
        Make the limits symmetric around zero.
    **kwargs
        Passed to :func:`plotnine.scale_x_continuous`.
    """
    return scale_x_continuous(
        **_logfc_kwargs(name, log_base_data, log_base_labels, symmetric, kwargs)
    )


def scale_y_logFC(
    name: str = "Fold change",
    log_base_data: float = 2,
    log_base_labels: bool = False,
    symmetric: bool = True,
    **kwargs: Any,
):
    """y scale for log fold change; see :func:`scale_x_logFC`."""
    return scale_y_continuous(
        **_logfc_kwargs(name, log_base_data, log_base_labels, symmetric, kwargs)
    )


def _pvalue_kwargs(name: str, kwargs: dict[str, Any]) -> dict[str, Any]:
    kwargs.setdefault("breaks", decade_breaks)
    kwargs.setdefault("labels", format_pvalue)
    return {"name": name, "trans": reverse_log10_trans(), **kwargs}


def scale_x_Pvalue(name: str = "P-value", **kwargs: Any):
    """x scale for P-values on a reversed log10 axis."""
    return scale_x_continuous(**_pvalue_kwargs(name, kwargs))


def scale_y_Pvalue(name: str = "P-value", **kwargs: Any):
    """y scale for P-values on a reversed log10 axis; most significant at the top."""
    return scale_y_continuous(**_pvalue_kwargs(name, kwargs))
