import numpy as np
import pytest

from rapidms import simulation
from rapidms.core import constants as c
from rapidms.utils import gauss


@pytest.fixture
def mz():
    return np.linspace(99.9, 100.1, 201)


def test_simulate_spectrum_single_peak(mz):
    sp = simulation.simulate_spectrum(mz, [100.0], 0.01, 500.0)
    assert np.allclose(sp.spint, gauss(mz, 100.0, 0.01, 500.0))
    assert sp.mode == c.MSDataMode.PROFILE


def test_simulate_spectrum_multiple_peaks_with_different_parameters(mz):
    sp = simulation.simulate_spectrum(mz, [99.95, 100.05], [0.01, 0.02], [100.0, 200.0])
    expected = gauss(mz, 99.95, 0.01, 100.0) + gauss(mz, 100.05, 0.02, 200.0)
    assert np.allclose(sp.spint, expected)


def test_simulate_spectrum_metadata(mz):
    sp = simulation.simulate_spectrum(
        mz, [100.0], 0.01, 500.0, time=10.0, ms_level=2, name="scan=4", mode=c.MSDataMode.CENTROID
    )
    assert sp.time == 10.0
    assert sp.ms_level == 2
    assert sp.name == "scan=4"
    assert sp.mode == c.MSDataMode.CENTROID


def test_simulate_spectrum_noise_is_reproducible(mz):
    sp1 = simulation.simulate_spectrum(mz, [100.0], 0.01, 500.0, noise=5.0, seed=1234)
    sp2 = simulation.simulate_spectrum(mz, [100.0], 0.01, 500.0, noise=5.0, seed=1234)
    assert np.array_equal(sp1.spint, sp2.spint)
    assert np.all(sp1.spint >= 0.0)


def test_simulate_experiment(mz):
    exp = simulation.simulate_experiment(mz, [100.0], 0.01, 500.0, n_spectra=4, scan_time=0.5)
    assert len(exp) == 4
    assert exp.get_ms_levels() == [1, 1, 1, 1]
    assert [sp.time for sp in exp] == [0.0, 0.5, 1.0, 1.5]
    assert [sp.index for sp in exp] == [0, 1, 2, 3]
    assert exp.settings == dict()


def test_simulate_experiment_msn_scans(mz):
    exp = simulation.simulate_experiment(mz, [100.0], 0.01, 500.0, n_spectra=6, msn_every=3)
    assert exp.get_ms_levels() == [1, 1, 2, 1, 1, 2]
