import pydantic
import pytest

from rapidms.core import constants as c
from rapidms.core import exceptions
from rapidms.core.params import PeakPickerParameters


@pytest.fixture
def params():
    return PeakPickerParameters()


def test_default_values(params):
    assert params.get_value(c.SIGNAL_TO_NOISE) == 1.0
    assert params.get_value(c.INTENSITY_TYPE) == c.IntensityType.PEAK_HEIGHT
    assert params.get_value(c.MS1_ONLY) is False
    assert params.get_value(c.STRICT_FIT) is False


def test_get_defaults():
    expected = {
        c.SIGNAL_TO_NOISE: 1.0,
        c.INTENSITY_TYPE: "peakheight",
        c.MS1_ONLY: False,
        c.STRICT_FIT: False,
    }
    assert PeakPickerParameters.get_defaults() == expected


def test_get_value_invalid_key_raises_error(params):
    with pytest.raises(exceptions.ParameterNotFound):
        params.get_value("invalid_parameter")


def test_intensity_type_from_str():
    params = PeakPickerParameters(intensity_type="peakarea")
    assert params.intensity_type == c.IntensityType.PEAK_AREA
    assert params.get_value(c.INTENSITY_TYPE) == "peakarea"


def test_invalid_intensity_type_raises_error():
    with pytest.raises(pydantic.ValidationError):
        PeakPickerParameters(intensity_type="foo")


def test_negative_signal_to_noise_raises_error():
    with pytest.raises(pydantic.ValidationError):
        PeakPickerParameters(signal_to_noise=-1.0)


def test_unknown_field_raises_error():
    with pytest.raises(pydantic.ValidationError):
        PeakPickerParameters(invalid_parameter=1)


def test_set_value(params):
    params.set_value(c.MS1_ONLY, True)
    assert params.ms1_only is True


def test_set_value_invalid_key_raises_error(params):
    with pytest.raises(exceptions.ParameterNotFound):
        params.set_value("invalid_parameter", 1)


def test_assignment_is_validated(params):
    with pytest.raises(pydantic.ValidationError):
        params.signal_to_noise = -5.0


def test_update(params):
    params.update(intensity_type="peakarea", strict_fit=True)
    assert params.intensity_type == c.IntensityType.PEAK_AREA
    assert params.strict_fit is True


def test_update_does_not_modify_parameters_if_a_value_is_invalid(params):
    with pytest.raises(pydantic.ValidationError):
        params.update(ms1_only=True, intensity_type="foo")
    assert params.ms1_only is False
    assert params.intensity_type == c.IntensityType.PEAK_HEIGHT


def test_subscribers_are_called_after_update(params):
    calls = list()

    def callback():
        calls.append(params.get_value(c.MS1_ONLY))

    params.subscribe(callback)
    params.set_value(c.MS1_ONLY, True)
    params.update(strict_fit=True)
    assert calls == [True, True]


def test_subscribers_are_not_called_after_failed_update(params):
    calls = list()
    params.subscribe(lambda: calls.append(1))
    with pytest.raises(pydantic.ValidationError):
        params.update(signal_to_noise=-1.0)
    assert calls == list()


def test_unsubscribe(params):
    calls = list()

    def callback():
        calls.append(1)

    params.subscribe(callback)
    params.unsubscribe(callback)
    params.set_value(c.MS1_ONLY, True)
    assert calls == list()


def test_dict_serialization(params):
    params.update(intensity_type="peakarea", ms1_only=True)
    actual = PeakPickerParameters.from_dict(params.to_dict())
    assert actual.to_dict() == params.to_dict()


def test_json_serialization(params):
    params.update(signal_to_noise=3.0, strict_fit=True)
    actual = PeakPickerParameters.from_json(params.to_json())
    assert actual.signal_to_noise == 3.0
    assert actual.strict_fit is True
