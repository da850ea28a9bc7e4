"""
Closed-form Gaussian fitting of peak cores.

A Gaussian ``y = area / sqrt(2 pi sigma^2) * exp(-(x - mu)^2 / (2 sigma^2))``
is a parabola in the log domain, so its parameters can be computed exactly
from three points.

Functions
---------
compute_tpg
compute_tpg_peaks
compute_scaled_gaussian

"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .core.models import GaussianFit, Peak


def compute_tpg(x: Sequence[float], y: Sequence[float]) -> GaussianFit:
    r"""
    Fit a Gaussian using three points.

    Parameters
    ----------
    x : Sequence[float]
        m/z of the three points, in ascending order.
    y : Sequence[float]
        intensity of the three points. Must be positive.

    Returns
    -------
    GaussianFit

    Notes
    -----
    If :math:`(x_1, y_1), (x_2, y_2), (x_3, y_3)` are the three points, the
    Gaussian parameters are computed as:

    .. math::

        d = \log(y_1^{x_3 - x_2} y_2^{x_1 - x_3} y_3^{x_2 - x_1})

        \mu = \frac{1}{2d}\log(y_1^{x_3^2 - x_2^2} y_2^{x_1^2 - x_3^2} y_3^{x_2^2 - x_1^2})

        \sigma = \sqrt{\frac{(x_1 - x_3)(x_2 - x_1)(x_3 - x_2)}{2d}}

        A = \sqrt{2 \pi \sigma^2} \sqrt[3]{y_1 y_2 y_3}
            \exp\left(\frac{\sum_i (x_i - \mu)^2}{6 \sigma^2}\right)

    Computations follow IEEE 754 semantics: a zero denominator or a negative
    radicand produce infinite or NaN values instead of raising an exception.

    """
    x1, x2, x3 = (np.float64(v) for v in x)
    y1, y2, y3 = (np.float64(v) for v in y)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
        denom = np.log(
            np.power(y1, x3 - x2) * np.power(y2, x1 - x3) * np.power(y3, x2 - x1)
        )
        mu = 0.5 * (
            np.log(
                np.power(y1, x3 * x3 - x2 * x2)
                * np.power(y2, x1 * x1 - x3 * x3)
                * np.power(y3, x2 * x2 - x1 * x1)
            )
            / denom
        )
        sigma = np.sqrt(0.5 * ((x1 - x3) * (x2 - x1) * (x3 - x2)) / denom)
        sq_dist = (x1 - mu) ** 2 + (x2 - mu) ** 2 + (x3 - mu) ** 2
        area = (
            np.sqrt(2 * np.pi * sigma * sigma)
            * np.power(y1 * y2 * y3, 1.0 / 3.0)
            * np.exp(sq_dist / (6 * sigma * sigma))
        )
    return GaussianFit(float(mu), float(sigma), float(area))


def compute_tpg_peaks(p1: Peak, p2: Peak, p3: Peak) -> GaussianFit:
    """Fit a Gaussian using three consecutive peaks. See :func:`compute_tpg`."""
    return compute_tpg((p1.mz, p2.mz, p3.mz), (p1.intensity, p2.intensity, p3.intensity))


def compute_scaled_gaussian(x: float, mu: float, sigma: float, area: float) -> float:
    """
    Evaluate a Gaussian with integrated area `area`.

    Parameters
    ----------
    x : float
    mu : float
        Gaussian mean.
    sigma : float
        Gaussian standard deviation.
    area : float
        Gaussian area.

    Returns
    -------
    float

    """
    x, mu, sigma, area = np.float64(x), np.float64(mu), np.float64(sigma), np.float64(area)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
        height = area / np.sqrt(2 * np.pi * sigma * sigma)
        value = height * np.exp(-((x - mu) * (x - mu)) / (2 * sigma * sigma))
    return float(value)
