"""
Core classes used by rapidms.

GaussianFit : Parameters of a Gaussian fitted to a peak.
MSExperiment : An ordered collection of spectra.
MSSpectrum : Representation of a Mass Spectrum.
Parameters : Base class for validated parameter sets.
Peak : A single (m/z, intensity) pair.
PeakPickerParameters : Parameters used by the peak picker.
ProgressLogger : Interface to report progress of long running tasks.

"""

from .models import GaussianFit, MSExperiment, MSSpectrum, Peak
from .params import ParameterProvider, Parameters, PeakPickerParameters
from .progress import (
    LoggingProgressLogger,
    NullProgressLogger,
    ProgressLogger,
    TqdmProgressLogger,
    create_progress_logger,
)

__all__ = [
    "GaussianFit",
    "LoggingProgressLogger",
    "MSExperiment",
    "MSSpectrum",
    "NullProgressLogger",
    "ParameterProvider",
    "Parameters",
    "Peak",
    "PeakPickerParameters",
    "ProgressLogger",
    "TqdmProgressLogger",
    "create_progress_logger",
]
