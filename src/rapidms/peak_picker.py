"""
Fast peak picking for high resolution MS data.

In high resolution data (FT-ICR-MS, Orbitrap), signals of ions with similar
m/z show little or no overlap and have well-defined, narrow peak shapes. The
peak picker looks for local maxima in profile data and reconstructs each peak
by fitting a Gaussian to the three most intense points. The m/z of the picked
peak is the Gaussian mean and its intensity is either the Gaussian height or
its area.

Objects
-------
PeakPickerRapid

Functions
---------
find_peak_cores

"""

from __future__ import annotations

import logging
import math
from typing import Any, Generator, Optional, Sequence

import numpy as np

from .core import constants as c
from .core import exceptions
from .core.models import MSExperiment, MSSpectrum
from .core.params import ParameterProvider, Parameters, PeakPickerParameters
from .core.progress import NullProgressLogger, ProgressLogger
from .fitting import compute_scaled_gaussian, compute_tpg

logger = logging.getLogger(__file__)


class PeakPickerRapid:
    """
    Peak picker for high resolution MS data.

    Spectra must be sorted by ascending m/z. This is not checked.

    Parameters
    ----------
    parameters : ParameterProvider or None, default=None
        Provides the ``intensity_type`` and ``ms1_only`` parameters and,
        optionally, ``strict_fit`` (``False`` if the provider does not define
        it). If ``None``, a :class:`PeakPickerParameters` instance with
        default values is used. Parameters are read each time a spectrum or an
        experiment is processed.
    progress : ProgressLogger or None, default=None
        Reports progress when processing experiments. If ``None``, progress
        is not reported.

    See Also
    --------
    PeakPickerParameters : description of each parameter.

    """

    def __init__(
        self,
        parameters: Optional[ParameterProvider] = None,
        progress: Optional[ProgressLogger] = None,
    ):
        self.parameters = PeakPickerParameters() if parameters is None else parameters
        self.progress = NullProgressLogger() if progress is None else progress
        subscribe = getattr(self.parameters, "subscribe", None)
        if callable(subscribe):
            subscribe(self._update_members)
        self._update_members()

    def get_parameters(self) -> dict[str, Any]:
        """Get the current parameter values."""
        if not isinstance(self.parameters, Parameters):
            msg = f"Cannot list parameters from a {self.parameters.__class__.__name__} provider."
            raise TypeError(msg)
        return self.parameters.to_dict()

    def set_parameters(self, **kwargs) -> None:
        """
        Set parameter values.

        Raises
        ------
        TypeError
            If the parameter provider does not support updates.

        """
        if not isinstance(self.parameters, Parameters):
            msg = f"Cannot set parameters in a {self.parameters.__class__.__name__} provider."
            raise TypeError(msg)
        self.parameters.update(**kwargs)

    def _update_members(self) -> None:
        """Update values derived from parameters. Called after each parameter update."""

    def _get_strict_fit(self) -> bool:
        # optional parameter, providers that do not define it keep the default behavior
        try:
            return bool(self.parameters.get_value(c.STRICT_FIT))
        except (exceptions.ParameterNotFound, KeyError):
            return False

    def pick(self, spectrum: MSSpectrum) -> MSSpectrum:
        """
        Pick peaks in a profile spectrum.

        Parameters
        ----------
        spectrum : MSSpectrum
            Profile data sorted by m/z.

        Returns
        -------
        MSSpectrum
            A new spectrum in centroid mode with the same metadata as the
            input spectrum. Picked peaks are not sorted again, so the fitted
            m/z of consecutive peaks may be out of order.

        """
        use_area = self.parameters.get_value(c.INTENSITY_TYPE) == c.IntensityType.PEAK_AREA.value
        strict = self._get_strict_fit()

        mz, spint = spectrum.mz, spectrum.spint
        centroid_mz = list()
        centroid_int = list()
        for k in find_peak_cores(mz, spint):
            # outer points of the window are only used to check the peak shape
            fit = compute_tpg(mz[k - 1 : k + 2], spint[k - 1 : k + 2])
            if not fit.is_valid(strict=strict):
                logger.debug(f"Discarded fit {fit} in spectrum {spectrum.name}, index={k}.")
                continue

            if not strict and not all(math.isfinite(v) for v in fit):
                logger.debug(f"Non-finite fit {fit} in spectrum {spectrum.name}, index={k}.")

            if use_area:
                intensity = fit.area
            else:
                intensity = compute_scaled_gaussian(fit.mu, fit.mu, fit.sigma, fit.area)
            centroid_mz.append(fit.mu)
            centroid_int.append(intensity)

        picked = spectrum.copy_metadata(
            np.array(centroid_mz, dtype=float), np.array(centroid_int, dtype=float)
        )
        picked.mode = c.MSDataMode.CENTROID
        logger.debug(f"Picked {len(picked)} peaks from {len(spectrum)} points in spectrum {spectrum.name}.")
        return picked

    def pick_experiment(self, experiment: MSExperiment) -> MSExperiment:
        """
        Pick peaks in each spectrum of an experiment.

        If the ``ms1_only`` parameter is ``True``, spectra with MS level
        greater than one are copied without changes.

        Parameters
        ----------
        experiment : MSExperiment

        Returns
        -------
        MSExperiment
            A new experiment with the same size and settings as the input.

        """
        ms1_only = bool(self.parameters.get_value(c.MS1_ONLY))
        n_spectra = len(experiment)
        logger.info(f"Picking peaks in {n_spectra} spectra with ms1_only={ms1_only}.")

        spectra = list()
        n_picked = 0
        self.progress.start(0, n_spectra, c.PICK_PROGRESS_LABEL)
        for spectrum in experiment:
            if ms1_only and spectrum.ms_level != 1:
                spectra.append(spectrum.copy())
            else:
                spectra.append(self.pick(spectrum))
                n_picked += 1
            self.progress.advance()
        self.progress.end()

        logger.info(f"Picked {n_picked} spectra. Copied {n_spectra - n_picked} spectra without changes.")
        return MSExperiment(spectra, experiment.copy_settings())


def find_peak_cores(
    mz: np.ndarray | Sequence[float], spint: np.ndarray | Sequence[float]
) -> Generator[int, None, None]:
    """
    Find the apex of candidate peaks in profile data.

    A point ``k`` is a candidate apex if, in the window of five points centered
    at ``k``:

    - all intensities are greater than 1.0.
    - the m/z distance between consecutive points is lower than 1.5 times the
      distance between ``k`` and its closest neighbor.
    - intensity strictly increases from both ends of the window towards ``k``.

    After a candidate is found, the search continues two points to the right,
    as the point next to the apex belongs to the same peak.

    Parameters
    ----------
    mz : array
        m/z values, sorted.
    spint : array
        intensity values.

    Yields
    ------
    int
        Index of the apex of each candidate peak, in ascending order.

    """
    mz = np.asarray(mz, dtype=float).tolist()
    spint = np.asarray(spint, dtype=float).tolist()
    half = c.WINDOW_HALF_SIZE
    k = half
    while k < len(mz) - half:
        if _is_peak_core(mz, spint, k):
            yield k
            k += 2
        else:
            k += 1


def _is_peak_core(mz: list[float], spint: list[float], k: int) -> bool:
    """Check the shape of the window of five points centered at `k`. Aux function of find_peak_cores."""
    l2_int, l1_int, central_int, r1_int, r2_int = spint[k - 2 : k + 3]
    min_int = c.MIN_PEAK_INTENSITY
    is_above_min_int = (
        central_int > min_int
        and l1_int > min_int
        and l2_int > min_int
        and r1_int > min_int
        and r2_int > min_int
    )
    if not is_above_min_int:
        return False

    l1_to_central = abs(mz[k] - mz[k - 1])
    l2_to_l1 = abs(mz[k - 1] - mz[k - 2])
    central_to_r1 = abs(mz[k + 1] - mz[k])
    r1_to_r2 = abs(mz[k + 2] - mz[k + 1])
    min_spacing = l1_to_central if l1_to_central < central_to_r1 else central_to_r1
    max_spacing = c.MAX_SPACING_RATIO * min_spacing
    is_evenly_spaced = (
        l1_to_central < max_spacing
        and l2_to_l1 < max_spacing
        and central_to_r1 < max_spacing
        and r1_to_r2 < max_spacing
    )

    is_left_increasing = l2_int < l1_int < central_int
    is_right_decreasing = r2_int < r1_int < central_int
    return is_evenly_spaced and is_left_increasing and is_right_decreasing
