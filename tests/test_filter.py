import math

import pytest

from kickfilter.filter import (
    Coefficients,
    Filter,
    FilterError,
    FilterParams,
    FilterType,
    FrequencyOverNyquistError,
    NegativeFrequencyError,
    NegativeQualityError,
)


def _sine(freq, rate, n):
    return [math.sin(2 * math.pi * freq * i / rate) for i in range(n)]


def test_default_params():
    p = FilterParams()
    assert (p.frequency, p.quality, p.gain) == (440.0, 0.71, 0.0)


def test_filter_defaults():
    f = Filter()
    assert f.filter_type is FilterType.LOWPASS
    assert f.sample_rate == 48000.0
    assert f.params == FilterParams()


def test_frequency_over_nyquist():
    with pytest.raises(FrequencyOverNyquistError):
        Coefficients.compute(FilterType.LOWPASS, 48000.0, FilterParams(frequency=24000.5))


def test_frequency_at_nyquist_allowed():
    c = Coefficients.compute(FilterType.LOWPASS, 48000.0, FilterParams(frequency=24000.0))
    assert c.m2 == 1.0


@pytest.mark.parametrize("freq", [-1.0, -0.0])
def test_negative_frequency(freq):
    with pytest.raises(NegativeFrequencyError):
        Coefficients.compute(FilterType.BELL, 48000.0, FilterParams(frequency=freq))


def test_negative_quality():
    with pytest.raises(NegativeQualityError):
        Coefficients.compute(FilterType.LOWPASS, 48000.0, FilterParams(quality=-0.5))


@pytest.mark.parametrize(
    "params",
    [
        FilterParams(frequency=30000.0),
        FilterParams(frequency=-5.0),
        FilterParams(quality=-1.0),
    ],
)
def test_errors_share_base(params):
    with pytest.raises(FilterError):
        Filter(FilterType.LOWPASS, 48000.0, params)
    with pytest.raises(ValueError):
        Filter(FilterType.BELL, 48000.0, params)


def test_lowpass_output_mix():
    c = Coefficients.compute(FilterType.LOWPASS, 48000.0, FilterParams())
    assert (c.m0, c.m1, c.m2) == (0.0, 0.0, 1.0)


def test_bell_output_mix_with_zero_gain():
    c = Coefficients.compute(FilterType.BELL, 48000.0, FilterParams())
    assert (c.m0, c.m1, c.m2) == (1.0, 0.0, 0.0)


def test_bell_zero_gain_is_identity():
    f = Filter(FilterType.BELL)
    samples = _sine(1000.0, 48000.0, 64)
    assert f.process(samples) == samples


def test_lowpass_passes_dc():
    f = Filter()
    out = f.process([1.0] * 4000)
    assert out[-1] == pytest.approx(1.0, abs=1e-6)


def test_lowpass_blocks_nyquist():
    f = Filter(params=FilterParams(frequency=1000.0))
    out = f.process([1.0 if i % 2 == 0 else -1.0 for i in range(2000)])
    assert max(abs(x) for x in out[-100:]) < 0.01


def test_bell_boosts_and_cuts_at_center():
    samples = _sine(1000.0, 48000.0, 9600)
    boost = Filter(FilterType.BELL, params=FilterParams(1000.0, 1.0, 12.0))
    cut = Filter(FilterType.BELL, params=FilterParams(1000.0, 1.0, -12.0))
    boosted = max(abs(x) for x in boost.process(samples)[-960:])
    attenuated = max(abs(x) for x in cut.process(samples)[-960:])
    assert boosted > 1.0
    assert attenuated < 1.0


def test_process_matches_tick():
    samples = _sine(300.0, 48000.0, 50)
    a = Filter()
    b = Filter()
    assert a.process(samples) == [b.tick(x) for x in samples]


def test_reset_restores_initial_state():
    samples = _sine(500.0, 48000.0, 40)
    f = Filter()
    first = f.process(samples)
    f.reset()
    assert f.process(samples) == first


def test_state_carries_between_calls():
    samples = _sine(500.0, 48000.0, 40)
    f = Filter()
    first = f.process(samples)
    assert f.process(samples) != first


def test_params_setter_updates_coefficients():
    f = Filter()
    params = FilterParams(frequency=2000.0, quality=2.0)
    f.params = params
    assert f.params == params
    assert f.coefficients == Coefficients.compute(FilterType.LOWPASS, 48000.0, params)


def test_invalid_params_leave_filter_unchanged():
    f = Filter()
    before = f.coefficients
    with pytest.raises(FrequencyOverNyquistError):
        f.params = FilterParams(frequency=30000.0)
    assert f.params == FilterParams()
    assert f.coefficients == before


def test_sample_rate_setter_validates():
    f = Filter(params=FilterParams(frequency=10000.0))
    with pytest.raises(FrequencyOverNyquistError):
        f.sample_rate = 16000.0
    assert f.sample_rate == 48000.0


def test_sample_rate_setter_updates_coefficients():
    f = Filter()
    f.sample_rate = 96000.0
    assert f.coefficients == Coefficients.compute(
        FilterType.LOWPASS, 96000.0, FilterParams()
    )


def test_filter_type_setter():
    f = Filter()
    f.filter_type = FilterType.BELL
    assert f.filter_type is FilterType.BELL
    assert f.coefficients == Coefficients.compute(FilterType.BELL, 48000.0, FilterParams())