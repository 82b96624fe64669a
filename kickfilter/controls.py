"""Knob handling and the audio loop that feeds parameter updates to the processor."""

from __future__ import annotations

import contextlib
from collections import deque
from typing import Iterable

from kickfilter.filter import FilterParams
from kickfilter.processor import DEFAULT_SAMPLE_RATE, Processor

__all__ = [
    "ADC_MAX",
    "AudioEngine",
    "MAX_FREQUENCY",
    "MAX_QUALITY",
    "MIN_FREQUENCY",
    "MIN_QUALITY",
    "ParamQueue",
    "ParamQueueFullError",
    "filter_params_from_knobs",
    "normalize_adc",
]

ADC_MAX = 65_535
MIN_FREQUENCY = 20.0
MAX_FREQUENCY = 20_000.0
MIN_QUALITY = 0.1
MAX_QUALITY = 6.0

QUEUE_SLOTS = 8


def normalize_adc(raw: int) -> float:
    """Map a 16-bit ADC reading (0..65535) onto 0.0..1.0."""
    if raw < 0:
        raise ValueError(f"ADC reading must not be negative, got {raw}")
    return raw / ADC_MAX


def filter_params_from_knobs(knob1_raw: int, knob2_raw: int) -> FilterParams:
    """Turn two raw knob readings into filter parameters.

    The first knob sweeps the cutoff exponentially from 20 Hz to 20 kHz,
    the second sweeps the quality linearly from 0.1 to 6.0.
    """
    knob1 = normalize_adc(knob1_raw)
    frequency = MIN_FREQUENCY * (MAX_FREQUENCY / MIN_FREQUENCY) ** knob1
    knob2 = normalize_adc(knob2_raw)
    quality = MIN_QUALITY + (MAX_QUALITY - MIN_QUALITY) * knob2
    return FilterParams(frequency=frequency, quality=quality, gain=0.0)


class ParamQueueFullError(Exception):
    """Raised when a parameter set is offered to a full queue."""


class ParamQueue:
    """Bounded first-in first-out queue of parameter sets.

    With the default eight slots, one is kept free, so seven sets fit.
    """

    def __init__(self, slots: int = QUEUE_SLOTS) -> None:
        if slots < 2:
            raise ValueError(f"a queue needs at least two slots, got {slots}")
        self._capacity = slots - 1
        self._items: deque[FilterParams] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, params: FilterParams) -> None:
        """Append a parameter set, raising ParamQueueFullError when full."""
        if len(self._items) >= self._capacity:
            raise ParamQueueFullError(f"queue already holds {self._capacity} items")
        self._items.append(params)

    def drain_latest(self) -> FilterParams | None:
        """Empty the queue and return the newest entry, or None if it was empty."""
        latest = None
        while self._items:
            latest = self._items.popleft()
        return latest


class AudioEngine:
    """Reads knobs into a queue and applies the newest settings per audio block."""

    def __init__(
        self, sample_rate: float = DEFAULT_SAMPLE_RATE, queue_slots: int = QUEUE_SLOTS
    ) -> None:
        self._processor = Processor(sample_rate)
        self._queue = ParamQueue(queue_slots)

    @property
    def queue(self) -> ParamQueue:
        return self._queue

    def set_knobs(self, knob1_raw: int, knob2_raw: int) -> None:
        """Queue parameters from raw knob readings; drop them if the queue is full."""
        params = filter_params_from_knobs(knob1_raw, knob2_raw)
        with contextlib.suppress(ParamQueueFullError):
            self._queue.enqueue(params)

    def handle_block(
        self, block: Iterable[tuple[float, float]]
    ) -> list[tuple[float, float]]:
        """Apply the newest queued parameters, then filter one block of frames."""
        params = self._queue.drain_latest()
        if params is not None:
            self._processor.update(params)
        return self._processor.process(block)