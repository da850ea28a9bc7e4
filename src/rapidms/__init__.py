"""
rapidms
=======

Fast peak picking for high resolution Mass Spectrometry data.

Provides
    1. The MSSpectrum and MSExperiment objects to store raw data.
    2. The PeakPickerRapid object to convert profile data into centroids.
    3. Closed-form Gaussian fitting of peak cores.

"""

__version__ = "0.1.0"

from . import fitting
from . import peak_picker
from . import simulation
from . import utils
from .core import (
    MSExperiment,
    MSSpectrum,
    Peak,
    PeakPickerParameters,
    create_progress_logger,
)
from .peak_picker import PeakPickerRapid

__all__ = [
    "MSExperiment",
    "MSSpectrum",
    "Peak",
    "PeakPickerParameters",
    "PeakPickerRapid",
    "create_progress_logger",
    "fitting",
    "peak_picker",
    "simulation",
    "utils",
]
