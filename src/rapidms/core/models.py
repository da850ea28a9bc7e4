"""Data models used by rapidms.

Peak : A single (m/z, intensity) pair.
GaussianFit : Parameters of a Gaussian fitted to a peak.
MSSpectrum : Representation of a Mass Spectrum.
MSExperiment : An ordered collection of spectra and experiment metadata.

"""

from __future__ import annotations

import copy
import json
from math import inf, isfinite
from typing import Any, Iterator, NamedTuple, Sequence, overload

import numpy as np
import pydantic

from . import constants as c
from . import exceptions
from ..utils import array_to_json_str, json_str_to_array


class Peak(pydantic.BaseModel):
    """
    Store a single peak from a spectrum.

    Peaks are immutable and compared by value.

    Attributes
    ----------
    mz : float
        The peak m/z.
    intensity : float
        The peak intensity.

    """

    model_config = pydantic.ConfigDict(frozen=True)
    mz: float
    intensity: float


class GaussianFit(NamedTuple):
    """
    Parameters of a Gaussian fitted to a peak.

    Attributes
    ----------
    mu : float
        Centroid position.
    sigma : float
        Gaussian width.
    area : float
        Integrated area of the Gaussian.

    """

    mu: float
    sigma: float
    area: float

    def is_valid(self, strict: bool = False) -> bool:
        """
        Check if the fit can be used to build a peak.

        Parameters
        ----------
        strict : bool, default=False
            If ``False``, only fits with an infinite area are rejected, which
            lets NaN values through. If ``True``, all parameters must be finite.

        """
        if strict:
            return isfinite(self.mu) and isfinite(self.sigma) and isfinite(self.area)
        return self.area != inf


class MSSpectrum:
    """
    Representation of a Mass Spectrum.

    Attributes
    ----------
    mz : array
        m/z data. Sorted in ascending order.
    spint : array
        Intensity data
    time : float
        Time at which the spectrum was acquired
    ms_level : int
        MS level of the scan
    name : str
        Spectrum name or native id.
    index : int
        Position of the spectrum in the experiment it was acquired.
    polarity : Polarity
        Polarity used to acquire the data.
    instrument : MSInstrument, default=MSInstrument.ORBITRAP
        MS instrument type.
    mode : MSDataMode
        Raw data mode.
    metadata : dict
        Any other spectrum information, copied verbatim by processors.

    """

    def __init__(
        self,
        mz: np.ndarray | Sequence[float],
        spint: np.ndarray | Sequence[float],
        time: float = 0.0,
        ms_level: int = 1,
        name: str = "",
        index: int = 0,
        polarity: c.Polarity = c.Polarity.POSITIVE,
        instrument: c.MSInstrument | str = c.MSInstrument.ORBITRAP,
        mode: c.MSDataMode = c.MSDataMode.PROFILE,
        metadata: dict[str, Any] | None = None,
    ):
        mz = np.asarray(mz, dtype=float)
        spint = np.asarray(spint, dtype=float)
        if mz.shape != spint.shape or mz.ndim != 1:
            msg = f"mz and spint must be 1D arrays with the same size. Got {mz.shape} and {spint.shape}."
            raise exceptions.InvalidSpectrumData(msg)
        self.mz = mz
        self.spint = spint
        self.time = time
        self.ms_level = ms_level
        self.name = name
        self.index = index
        self.polarity = polarity
        self.instrument = instrument
        self.mode = mode
        self.metadata = dict() if metadata is None else metadata

    def __len__(self) -> int:
        return self.mz.size

    def __repr__(self) -> str:
        return f"MSSpectrum(name={self.name!r}, ms_level={self.ms_level}, size={len(self)})"

    @property
    def instrument(self) -> c.MSInstrument:
        """Get the instrument type used to measure the data."""
        return self._instrument

    @instrument.setter
    def instrument(self, value: c.MSInstrument | str):
        try:
            self._instrument = c.MSInstrument(value)
        except ValueError as e:
            valid_values = [x.value for x in c.MSInstrument]
            msg = f"{value} is not a valid instrument. Valid values are: {valid_values}."
            raise ValueError(msg) from e

    @property
    def ms_level(self) -> int:
        """Get the MS level of the scan."""
        return self._ms_level

    @ms_level.setter
    def ms_level(self, value: int):
        if value < 1:
            msg = f"MS level must be a positive integer. Got {value}."
            raise ValueError(msg)
        self._ms_level = int(value)

    @property
    def is_centroid(self) -> bool:
        """Check if the data is in centroid mode."""
        return self.mode == c.MSDataMode.CENTROID

    @property
    def peaks(self) -> list[Peak]:
        """Create a list of peaks from the spectrum data."""
        return [Peak(mz=mz, intensity=spint) for mz, spint in zip(self.mz.tolist(), self.spint.tolist())]

    def get_peak(self, index: int) -> Peak:
        """Retrieve a peak by index."""
        return Peak(mz=float(self.mz[index]), intensity=float(self.spint[index]))

    def is_sorted(self) -> bool:
        """Check if m/z values are sorted in ascending order."""
        return bool(np.all(np.diff(self.mz) >= 0.0))

    def copy(self) -> MSSpectrum:
        """Create an independent copy of the spectrum."""
        return self.copy_metadata(self.mz.copy(), self.spint.copy())

    def copy_metadata(
        self, mz: np.ndarray | Sequence[float], spint: np.ndarray | Sequence[float]
    ) -> MSSpectrum:
        """
        Create a new spectrum with new data and the same metadata.

        Parameters
        ----------
        mz : array
            m/z data of the new spectrum.
        spint : array
            Intensity data of the new spectrum.

        Returns
        -------
        MSSpectrum

        """
        return MSSpectrum(
            mz,
            spint,
            time=self.time,
            ms_level=self.ms_level,
            name=self.name,
            index=self.index,
            polarity=self.polarity,
            instrument=self.instrument,
            mode=self.mode,
            metadata=copy.deepcopy(self.metadata),
        )

    def sort_by_mz(self) -> MSSpectrum:
        """Create a copy of the spectrum with peaks sorted by ascending m/z."""
        order = np.argsort(self.mz, kind="stable")
        return self.copy_metadata(self.mz[order], self.spint[order])

    def sort_by_intensity(self) -> MSSpectrum:
        """Create a copy of the spectrum with peaks sorted by decreasing intensity."""
        order = np.argsort(-self.spint, kind="stable")
        return self.copy_metadata(self.mz[order], self.spint[order])

    def to_dict(self) -> dict[str, Any]:
        """Convert the spectrum into a JSON serializable dictionary."""
        d: dict[str, Any] = dict()
        d[c.MZ] = array_to_json_str(self.mz)
        d[c.SPINT] = array_to_json_str(self.spint)
        d[c.TIME] = self.time
        d[c.MS_LEVEL] = self.ms_level
        d[c.NAME] = self.name
        d[c.INDEX] = self.index
        d[c.POLARITY] = self.polarity.value
        d[c.INSTRUMENT] = self.instrument.value
        d[c.MODE] = self.mode.value
        d[c.METADATA] = self.metadata
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MSSpectrum:
        """Create a spectrum from a dictionary created with `to_dict`."""
        d = dict(d)
        mz = json_str_to_array(d.pop(c.MZ))
        spint = json_str_to_array(d.pop(c.SPINT))
        d[c.POLARITY] = c.Polarity(d[c.POLARITY])
        d[c.MODE] = c.MSDataMode(d[c.MODE])
        return cls(mz, spint, **d)

    def to_str(self) -> str:
        """
        Serialize the spectrum into a JSON str.

        Returns
        -------
        str

        """
        return json.dumps(self.to_dict())

    @classmethod
    def from_str(cls, s: str) -> MSSpectrum:
        """
        Create a spectrum from a JSON string.

        Parameters
        ----------
        s : str
            A serialized spectrum obtained using the `to_str` method.

        Returns
        -------
        MSSpectrum

        """
        return cls.from_dict(json.loads(s))


class MSExperiment:
    """
    An ordered collection of spectra.

    Attributes
    ----------
    spectra : list[MSSpectrum]
    settings : dict
        Experiment level metadata, e.g. instrument settings or sample
        information. Copied verbatim by processors.

    """

    def __init__(
        self,
        spectra: Sequence[MSSpectrum] | None = None,
        settings: dict[str, Any] | None = None,
    ):
        self.spectra = list() if spectra is None else list(spectra)
        self.settings = dict() if settings is None else settings

    def __len__(self) -> int:
        return len(self.spectra)

    @overload
    def __getitem__(self, index: int) -> MSSpectrum:
        ...

    @overload
    def __getitem__(self, index: slice) -> list[MSSpectrum]:
        ...

    def __getitem__(self, index):
        return self.spectra[index]

    def __iter__(self) -> Iterator[MSSpectrum]:
        return iter(self.spectra)

    def __repr__(self) -> str:
        return f"MSExperiment(n_spectra={len(self)})"

    def append(self, spectrum: MSSpectrum) -> None:
        """Add a spectrum at the end of the experiment."""
        self.spectra.append(spectrum)

    def get_ms_levels(self) -> list[int]:
        """Retrieve the MS level of each spectrum."""
        return [sp.ms_level for sp in self.spectra]

    def copy_settings(self) -> dict[str, Any]:
        """Create an independent copy of the experiment settings."""
        return copy.deepcopy(self.settings)

    def copy(self) -> MSExperiment:
        """Create an independent copy of the experiment."""
        return MSExperiment([sp.copy() for sp in self.spectra], self.copy_settings())

    def to_str(self) -> str:
        """Serialize the experiment into a JSON str."""
        d = {c.SPECTRA: [sp.to_dict() for sp in self.spectra], c.SETTINGS: self.settings}
        return json.dumps(d)

    @classmethod
    def from_str(cls, s: str) -> MSExperiment:
        """Create an experiment from a string created with `to_str`."""
        d = json.loads(s)
        spectra = [MSSpectrum.from_dict(x) for x in d[c.SPECTRA]]
        return cls(spectra, d[c.SETTINGS])
