"""Functions to create simulated profile data."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from .core import constants as c
from .core.models import MSExperiment, MSSpectrum
from .utils import gaussian_mixture


def simulate_spectrum(
    mz: np.ndarray,
    mean: Sequence[float],
    sigma: Sequence[float] | float,
    height: Sequence[float] | float,
    noise: Optional[float] = None,
    seed: Optional[int] = None,
    **kwargs: Any,
) -> MSSpectrum:
    """
    Create a profile spectrum as a sum of gaussian peaks.

    Parameters
    ----------
    mz : array
        m/z values where the spectrum is sampled. Must be sorted.
    mean : Sequence[float]
        m/z of each peak.
    sigma : float or Sequence[float]
        width of each peak. If a single value is used, it is used for all
        peaks.
    height : float or Sequence[float]
        apex intensity of each peak.
    noise : float or None, default=None
        Standard deviation of an additive normal noise. Negative values after
        adding noise are set to zero.
    seed : int or None, default=None
        Seed used to create the noise.
    kwargs :
        Metadata passed to the MSSpectrum constructor.

    Returns
    -------
    MSSpectrum

    """
    n_peaks = len(mean)
    sigma = np.broadcast_to(np.asarray(sigma, dtype=float), (n_peaks,))
    height = np.broadcast_to(np.asarray(height, dtype=float), (n_peaks,))
    params = list(zip(mean, sigma, height))
    spint = gaussian_mixture(mz, params)

    if noise is not None:
        rng = np.random.default_rng(seed)
        spint = np.maximum(spint + rng.normal(size=spint.size, scale=noise), 0.0)

    kwargs.setdefault("mode", c.MSDataMode.PROFILE)
    return MSSpectrum(mz, spint, **kwargs)


def simulate_experiment(
    mz: np.ndarray,
    mean: Sequence[float],
    sigma: Sequence[float] | float,
    height: Sequence[float] | float,
    n_spectra: int = 10,
    msn_every: int = 0,
    scan_time: float = 1.0,
    settings: Optional[dict[str, Any]] = None,
) -> MSExperiment:
    """
    Create an experiment where all spectra contain the same peaks.

    Parameters
    ----------
    mz : array
        m/z values where each spectrum is sampled.
    mean : Sequence[float]
        m/z of each peak.
    sigma : float or Sequence[float]
        width of each peak.
    height : float or Sequence[float]
        apex intensity of each peak.
    n_spectra : int, default=10
        Number of spectra in the experiment.
    msn_every : int, default=0
        If greater than zero, every `msn_every`-th spectrum is set as an MS2
        scan.
    scan_time : float, default=1.0
        Time between consecutive scans.
    settings : dict or None, default=None
        Experiment metadata.

    Returns
    -------
    MSExperiment

    """
    spectra = list()
    for k in range(n_spectra):
        is_msn = msn_every > 0 and (k + 1) % msn_every == 0
        ms_level = 2 if is_msn else 1
        sp = simulate_spectrum(
            mz,
            mean,
            sigma,
            height,
            time=k * scan_time,
            ms_level=ms_level,
            index=k,
            name=f"scan={k}",
        )
        spectra.append(sp)
    return MSExperiment(spectra, settings)
