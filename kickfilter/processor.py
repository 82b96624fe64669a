"""Stereo processor running one lowpass filter per channel."""

from __future__ import annotations

from typing import Iterable

from kickfilter.filter import Filter, FilterParams, FilterType

__all__ = ["BLOCK_LENGTH", "DEFAULT_SAMPLE_RATE", "FilterParams", "Processor"]

DEFAULT_SAMPLE_RATE = 48_000.0
BLOCK_LENGTH = 32


class Processor:
    """Filters blocks of (left, right) frames, keeping state across blocks."""

    def __init__(self, sample_rate: float = DEFAULT_SAMPLE_RATE) -> None:
        self._left = Filter(FilterType.LOWPASS, sample_rate)
        self._right = Filter(FilterType.LOWPASS, sample_rate)

    def update(self, params: FilterParams) -> None:
        """Apply new parameters to both channels."""
        self._left.params = params
        self._right.params = params

    def process(self, block: Iterable[tuple[float, float]]) -> list[tuple[float, float]]:
        """Return the filtered frames of a block."""
        return [(self._left.tick(left), self._right.tick(right)) for left, right in block]