"""Utility functions used across rapidms."""

from __future__ import annotations

import json

import numpy as np


def gauss(x: np.ndarray, mu: float, sigma: float, amp: float) -> np.ndarray:
    """
    Gaussian function with apex height `amp`.

    Parameters
    ----------
    x : array
    mu : float
        Gaussian mean.
    sigma : positive number
        Gaussian standard deviation.
    amp : float
        Height of the gaussian at its apex.

    Returns
    -------
    array

    """
    return amp * np.power(np.e, -0.5 * ((x - mu) / sigma) ** 2)


def gaussian_mixture(
    x: np.ndarray, params: np.ndarray | list[tuple[float, float, float]]
) -> np.ndarray:
    """
    Compute the sum of several gaussians.

    Parameters
    ----------
    x : array
    params : array with shape (n, 3)
        Mean, standard deviation and height of each gaussian.

    Returns
    -------
    array

    """
    y = np.zeros_like(x, dtype=float)
    for mu, sigma, amp in params:
        y += gauss(x, mu, sigma, amp)
    return y


def array_to_json_str(x: np.ndarray) -> str:
    """Serialize a 1D numpy array into a JSON string."""
    return json.dumps(x.tolist())


def json_str_to_array(s: str) -> np.ndarray:
    """Create a float numpy array from a string created with `array_to_json_str`."""
    return np.array(json.loads(s), dtype=float)
