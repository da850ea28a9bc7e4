"""
Parameter management for processors.

ParameterProvider : Interface to retrieve named parameters.
Parameters : Base class for validated parameter sets.
PeakPickerParameters : Parameters used by the peak picker.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

import pydantic

from . import constants as c
from . import exceptions

logger = logging.getLogger(__file__)


class ParameterProvider(Protocol):
    """Interface for read-only access to named parameters."""

    def get_value(self, key: str) -> Any:
        """Retrieve a parameter value."""
        ...


class Parameters(pydantic.BaseModel):
    """
    Base class for parameter sets.

    Parameters are defined as fields using Pydantic's standard approach and
    are validated on assignment. Objects interested in parameter changes can
    register a callback using `subscribe`. Callbacks are called after each
    successful call to `set_value` or `update`.

    """

    model_config = pydantic.ConfigDict(validate_assignment=True, extra="forbid")
    _subscribers: list[Callable[[], None]] = pydantic.PrivateAttr(default_factory=list)

    def get_value(self, key: str) -> Any:
        """
        Retrieve a parameter value.

        Parameters
        ----------
        key : str
            The parameter name.

        Raises
        ------
        ParameterNotFound
            If `key` is not a valid parameter name.

        """
        self._check_keys([key])
        return getattr(self, key)

    def set_value(self, key: str, value: Any) -> None:
        """Set a single parameter value. See `update`."""
        self.update(**{key: value})

    def update(self, **kwargs) -> None:
        """
        Set parameter values.

        Values are validated before any parameter is modified.

        Raises
        ------
        ParameterNotFound
            If an invalid parameter name is passed.
        pydantic.ValidationError
            If an invalid value is passed.

        """
        self._check_keys(kwargs)
        validated = self.model_validate(self.model_dump() | kwargs)
        for key in kwargs:
            setattr(self, key, getattr(validated, key))
        logger.debug(f"Updated parameters {kwargs} in {self.__class__.__name__}.")
        for callback in self._subscribers:
            callback()

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Register a function that is called each time parameters are updated."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        """Remove a function registered with `subscribe`."""
        self._subscribers.remove(callback)

    def to_dict(self) -> dict[str, Any]:
        """Create a dictionary with parameter values."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, d: dict[str, Any]):
        """Create a new instance from a dictionary of parameters."""
        return cls.model_validate(d)

    def to_json(self) -> str:
        """Serialize parameters into a JSON string."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, s: str):
        """Create a new instance from a JSON string."""
        return cls.model_validate_json(s)

    @classmethod
    def get_defaults(cls) -> dict[str, Any]:
        """Retrieve the default value of each parameter."""
        return cls().to_dict()

    def _check_keys(self, keys) -> None:
        fields = type(self).model_fields
        for key in keys:
            if key not in fields:
                msg = f"{key} is not a valid parameter for {self.__class__.__name__}. Valid parameters are: {list(fields)}."
                raise exceptions.ParameterNotFound(msg)


class PeakPickerParameters(Parameters):
    """
    Parameters of the peak picker.

    Attributes
    ----------
    signal_to_noise : non-negative float, default=1.0
        Minimum signal-to-noise ratio of peaks. Reserved for future use; it
        currently has no effect on peak picking.
    intensity_type : {"peakheight", "peakarea"}, default="peakheight"
        Intensity reported for each picked peak. ``"peakheight"`` uses the
        height of the fitted Gaussian at its apex, ``"peakarea"`` uses its
        integrated area.
    ms1_only : bool, default=False
        If ``True``, only MS1 spectra are picked when processing an
        experiment. Other spectra are copied without changes.
    strict_fit : bool, default=False
        If ``True``, Gaussian fits with any non-finite parameter are
        discarded. If ``False``, only fits with an infinite area are
        discarded and NaN values may be reported.

    """

    signal_to_noise: pydantic.NonNegativeFloat = 1.0
    intensity_type: c.IntensityType = c.IntensityType.PEAK_HEIGHT
    ms1_only: bool = False
    strict_fit: bool = False
