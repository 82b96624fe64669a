"""State-variable filter with trapezoidal integration (lowpass and bell)."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable


class FilterError(ValueError):
    """Raised when filter settings cannot produce valid coefficients."""


class FrequencyOverNyquistError(FilterError):
    """The cutoff frequency lies above half the sample rate."""


class NegativeFrequencyError(FilterError):
    """The cutoff frequency is negative."""


class NegativeQualityError(FilterError):
    """The quality factor is negative."""


class FilterType(enum.Enum):
    """Response shape of the filter."""

    LOWPASS = "lowpass"
    BELL = "bell"


@dataclass(frozen=True)
class FilterParams:
    """Cutoff frequency in Hz, quality factor and gain in dB."""

    frequency: float = 440.0
    quality: float = 0.71
    gain: float = 0.0


def _is_sign_negative(value: float) -> bool:
    return math.copysign(1.0, value) < 0.0


def _reciprocal(value: float) -> float:
    return 1.0 / value if value else math.inf


@dataclass(frozen=True)
class Coefficients:
    """Integrator gains (a1..a3) and output mix (m0..m2) of the filter."""

    a1: float = 0.0
    a2: float = 0.0
    a3: float = 0.0
    m0: float = 0.0
    m1: float = 0.0
    m2: float = 0.0

    @classmethod
    def compute(
        cls, filter_type: FilterType, sample_rate: float, params: FilterParams
    ) -> "Coefficients":
        """Derive coefficients, raising a FilterError for invalid settings."""
        if params.frequency > sample_rate / 2.0:
            raise FrequencyOverNyquistError(
                f"frequency {params.frequency} Hz is above Nyquist "
                f"for sample rate {sample_rate} Hz"
            )
        if _is_sign_negative(params.frequency):
            raise NegativeFrequencyError(f"frequency {params.frequency} is negative")
        if _is_sign_negative(params.quality):
            raise NegativeQualityError(f"quality {params.quality} is negative")

        g = math.tan(math.pi * params.frequency / sample_rate)
        if filter_type is FilterType.LOWPASS:
            k = _reciprocal(params.quality)
            a1 = 1.0 / (1.0 + g * (g + k))
            a2 = g * a1
            a3 = g * a2
            return cls(a1, a2, a3, 0.0, 0.0, 1.0)

        a = 10.0 ** (params.gain / 40.0)
        k = _reciprocal(params.quality * a)
        a1 = 1.0 / (1.0 + g * (g + k))
        a2 = g * a1
        a3 = g * a2
        return cls(a1, a2, a3, 1.0, k * (a * a - 1.0), 0.0)


class Filter:
    """A single-channel filter that keeps its integrator state between samples."""

    def __init__(
        self,
        filter_type: FilterType = FilterType.LOWPASS,
        sample_rate: float = 48_000.0,
        params: FilterParams | None = None,
    ) -> None:
        params = FilterParams() if params is None else params
        self._coeffs = Coefficients.compute(filter_type, sample_rate, params)
        self._filter_type = filter_type
        self._sample_rate = sample_rate
        self._params = params
        self._ic1eq = 0.0
        self._ic2eq = 0.0

    @property
    def coefficients(self) -> Coefficients:
        return self._coeffs

    @property
    def filter_type(self) -> FilterType:
        return self._filter_type

    @filter_type.setter
    def filter_type(self, value: FilterType) -> None:
        if value != self._filter_type:
            self._coeffs = Coefficients.compute(value, self._sample_rate, self._params)
            self._filter_type = value

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, value: float) -> None:
        if value != self._sample_rate:
            self._coeffs = Coefficients.compute(self._filter_type, value, self._params)
            self._sample_rate = value

    @property
    def params(self) -> FilterParams:
        return self._params

    @params.setter
    def params(self, value: FilterParams) -> None:
        if value != self._params:
            self._coeffs = Coefficients.compute(
                self._filter_type, self._sample_rate, value
            )
            self._params = value

    def tick(self, sample: float) -> float:
        """Filter one sample."""
        c = self._coeffs
        v0 = sample
        v3 = v0 - self._ic2eq
        v1 = c.a1 * self._ic1eq + c.a2 * v3
        v2 = self._ic2eq + c.a2 * self._ic1eq + c.a3 * v3
        self._ic1eq = 2.0 * v1 - self._ic1eq
        self._ic2eq = 2.0 * v2 - self._ic2eq
        return c.m0 * v0 + c.m1 * v1 + c.m2 * v2

    def process(self, samples: Iterable[float]) -> list[float]:
        """Filter a sequence of samples in order."""
        return [self.tick(sample) for sample in samples]

    def reset(self) -> None:
        """Clear the integrator state."""
        self._ic1eq = 0.0
        self._ic2eq = 0.0