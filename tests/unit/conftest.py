from typing import Any

import numpy as np
import pytest

from rapidms.core import constants as c
from rapidms.core.models import MSExperiment, MSSpectrum
from rapidms.simulation import simulate_experiment, simulate_spectrum


class DictParameterProvider:
    """Parameter provider backed by a dictionary. Has no update support."""

    def __init__(self, values: dict[str, Any]):
        self.values = values

    def get_value(self, key: str) -> Any:
        return self.values[key]


class RecordingProgressLogger:
    """Store each call made to the progress logger."""

    def __init__(self):
        self.calls = list()

    def start(self, begin: int, end: int, label: str) -> None:
        self.calls.append(("start", begin, end, label))

    def advance(self) -> None:
        self.calls.append(("advance",))

    def end(self) -> None:
        self.calls.append(("end",))


@pytest.fixture
def dict_provider():
    values = {
        c.SIGNAL_TO_NOISE: 1.0,
        c.INTENSITY_TYPE: "peakheight",
        c.MS1_ONLY: False,
        c.STRICT_FIT: False,
    }
    return DictParameterProvider(values)


@pytest.fixture
def recording_progress():
    return RecordingProgressLogger()


@pytest.fixture
def five_point_spectrum() -> MSSpectrum:
    mz = [500.0, 500.01, 500.02, 500.03, 500.04]
    spint = [2.0, 5.0, 20.0, 5.0, 2.0]
    return MSSpectrum(mz, spint, time=12.5, name="scan=1", index=1)


@pytest.fixture
def single_peak_spectrum() -> MSSpectrum:
    # one gaussian with mean between two samples
    mz = np.linspace(99.98, 100.02, 9)
    metadata = {"filter string": "FTMS + p ESI Full ms", "injection time": [10.0, 12.0]}
    return simulate_spectrum(
        mz,
        [100.001],
        0.005,
        1000.0,
        time=30.0,
        ms_level=1,
        name="scan=10",
        index=10,
        polarity=c.Polarity.NEGATIVE,
        metadata=metadata,
    )


@pytest.fixture
def two_peak_mz() -> np.ndarray:
    return np.linspace(99.95, 100.15, 41)


@pytest.fixture
def two_peak_spectrum(two_peak_mz) -> MSSpectrum:
    return simulate_spectrum(two_peak_mz, [100.0, 100.1], 0.01, 1000.0)


@pytest.fixture
def experiment(two_peak_mz) -> MSExperiment:
    settings = {"instrument": {"model": "Orbitrap Exploris"}, "sample": "QC-1"}
    return simulate_experiment(
        two_peak_mz, [100.0, 100.1], 0.01, 1000.0, n_spectra=6, msn_every=3, settings=settings
    )
