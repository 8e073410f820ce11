"""Polynomial least-squares fit summaries."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from scipy import stats
from sklearn.linear_model import LinearRegression
from sklearn.metrics import r2_score
from sklearn.preprocessing import PolynomialFeatures

logger = logging.getLogger(__name__)


def format_poly_equation(
    coefs: np.ndarray,
    coef_digits: int = 3,
    lhs: str = "y",
    var: str = "x",
) -> str:
    """Text of a polynomial equation from coefficients in ascending powers."""
    terms = []
    for power, coef in enumerate(coefs):
        value = f"{abs(coef):.{coef_digits}g}"
        if power == 0:
            term = value
        elif power == 1:
            term = f"{value}{var}"
        else:
            term = f"{value}{var}^{power}"
        sign = "-" if coef < 0 else "+"
        if not terms:
            terms.append(f"-{term}" if coef < 0 else term)
        else:
            terms.append(f"{sign} {term}")
    rhs = " ".join(terms)
    return f"{lhs} = {rhs}" if lhs else rhs


def _format_p(p_value: float, digits: int) -> str:
    threshold = 10.0 ** -digits
    if p_value < threshold:
        return f"P < {threshold:.{digits}f}"
    return f"P = {p_value:.{digits}f}"


def poly_fit_summary(
    x: np.ndarray,
    y: np.ndarray,
    degree: int = 1,
    coef_digits: int = 3,
    rr_digits: int = 2,
    p_digits: int = 3,
) -> dict[str, Any]:
    """Fit ``y ~ poly(x, degree)`` and summarise the fit.

    Parameters
    ----------
    x, y : np.ndarray
        Observations; non-finite pairs are dropped.
    degree : int
        Polynomial degree.
    coef_digits, rr_digits, p_digits : int
        Digits used in the text labels.

    Returns
    -------
    dict
        ``coefs``, ``rr``, ``adj_rr``, ``f_value``, ``f_df1``, ``f_df2``,
        ``p_value``, ``AIC``, ``BIC``, ``n`` and the labels ``eq_label``,
        ``rr_label``, ``adj_rr_label``, ``p_value_label``, ``n_label``.
    """
    if degree < 1:
        raise ValueError(f"degree must be at least 1, got {degree}")

    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    finite = np.isfinite(x) & np.isfinite(y)
    if not finite.all():
        logger.warning("Dropping %d non-finite observations before fitting", int((~finite).sum()))
    x, y = x[finite], y[finite]

    n = len(x)
    if n < degree + 2:
        raise ValueError(
            f"At least {degree + 2} observations are needed for a degree {degree} fit, got {n}"
        )

    X = PolynomialFeatures(degree=degree, include_bias=False).fit_transform(x[:, None])
    reg = LinearRegression().fit(X, y)
    fitted = reg.predict(X)
    coefs = np.concatenate([[reg.intercept_], reg.coef_])

    rss = float(np.sum((y - fitted) ** 2))
    tss = float(np.sum((y - y.mean()) ** 2))
    df1 = degree
    df2 = n - degree - 1
    rr = float(r2_score(y, fitted)) if tss > 0 else float("nan")
    adj_rr = 1.0 - (1.0 - rr) * (n - 1) / df2

    if rss > 0:
        f_value = ((tss - rss) / df1) / (rss / df2)
        p_value = float(stats.f.sf(f_value, df1, df2))
    else:
        f_value, p_value = float("inf"), 0.0

    # Gaussian log-likelihood with the ML variance estimate; k counts sigma
    k = degree + 2
    sigma2 = max(rss / n, np.finfo(np.float64).tiny)
    loglik = -0.5 * n * (np.log(2.0 * np.pi * sigma2) + 1.0)
    aic = 2.0 * k - 2.0 * loglik
    bic = k * np.log(n) - 2.0 * loglik

    return {
        "coefs": coefs,
        "rr": rr,
        "adj_rr": adj_rr,
        "f_value": float(f_value),
        "f_df1": df1,
        "f_df2": df2,
        "p_value": p_value,
        "AIC": float(aic),
        "BIC": float(bic),
        "n": n,
        "eq_label": format_poly_equation(coefs, coef_digits),
        "rr_label": f"R^2 = {rr:.{rr_digits}f}",
        "adj_rr_label": f"R^2_adj = {adj_rr:.{rr_digits}f}",
        "p_value_label": _format_p(p_value, p_digits),
        "n_label": f"n = {n}",
    }
