# kickfilter

A small audio filtering toolkit. It provides a state-variable filter with
trapezoidal integration that has lowpass and bell (peaking) responses, a stereo
processor that filters blocks of `(left, right)` frames, helpers that turn
raw knob readings into filter settings, and a benchmark command.

Pure Python, no runtime dependencies.

## Install

```
pip install .
pip install .[test]   # adds pytest for the test suite
```

## Filters (`kickfilter.filter`)

```python
from kickfilter.filter import Filter, FilterType, FilterParams

lowpass = Filter(FilterType.LOWPASS)          # 48 kHz, default params
lowpass.sample_rate = 44100.0
lowpass.params = FilterParams(frequency=1000.0, quality=0.71, gain=0.0)

out = lowpass.tick(1.0)                   # one sample
block = lowpass.process([0.5, 0.25, 0.0]) # a list of filtered samples
lowpass.reset()                           # clear the integrator state
```

`Filter(filter_type=FilterType.LOWPASS, sample_rate=48000.0, params=None)`
can be built with all three settings directly. `filter_type`, `sample_rate`
and `params` are properties. Setting one to a new value recomputes the
coefficients, and `coefficients` returns the current `Coefficients`.

`FilterParams` is a frozen dataclass. It defaults to 440 Hz, Q 0.71 and
0 dB gain. The gain only affects `FilterType.BELL`.

An invalid setting raises a subclass of `FilterError`, which is itself a
`ValueError`. When this happens the filter keeps its previous settings.

- `FrequencyOverNyquistError`: the frequency is above half the sample rate
- `NegativeFrequencyError`: the frequency is negative
- `NegativeQualityError`: Q is negative

You can also compute coefficients directly with
`Coefficients.compute(filter_type, sample_rate, params)`.

## Stereo processing (`kickfilter.processor`)

`Processor(sample_rate=48000.0)` holds one lowpass filter per channel. The
filter state carries over from one block to the next.

```python
from kickfilter.processor import Processor, BLOCK_LENGTH
from kickfilter.filter import FilterParams

processor = Processor()
processor.update(FilterParams(frequency=2000.0, quality=1.0))
out = processor.process([(1.0, 1.0)] * BLOCK_LENGTH)   # list of (left, right)
```

`BLOCK_LENGTH` is 32 frames and `DEFAULT_SAMPLE_RATE` is 48000.0.

## Knob control (`kickfilter.controls`)

- `normalize_adc(raw)` maps a 16-bit reading (0..65535) onto 0.0..1.0. A
  negative reading raises `ValueError`.
- `filter_params_from_knobs(knob1_raw, knob2_raw)` turns two readings into
  settings. Knob 1 sweeps the cutoff exponentially from 20 Hz to 20 kHz.
  Knob 2 sets Q linearly from 0.1 to 6.0. The gain is always 0 dB.
- `ParamQueue(slots=8)` is a bounded FIFO that keeps one slot free, so it
  holds `slots - 1` entries. `enqueue` raises `ParamQueueFullError` when the
  queue is full. `drain_latest()` empties the queue and returns the newest
  entry, or `None` if the queue was empty.
- `AudioEngine(sample_rate=48000.0, queue_slots=8)` combines these pieces:
  - `set_knobs(knob1_raw, knob2_raw)` queues new settings and silently drops them if the queue is full.
  - `handle_block(block)` applies the newest queued settings and then filters the block.

```python
from kickfilter.controls import AudioEngine

engine = AudioEngine()
engine.set_knobs(32768, 10000)
out = engine.handle_block([(0.0, 0.0)] * 32)
```

## Benchmark (`kickfilter.bench`)

This command times one block of constant frames through a new processor and
prints that time next to the time the block covers in real time:

```
kickfilter-bench
kickfilter-bench --block-length 64 --sample-rate 96000
```

From Python:

- `run_benchmark(block_length=32, sample_rate=48000.0)` returns a
  `BenchmarkResult`, whose `execution_time` and `available_time` are in
  seconds.
- `bench_time(func)` calls `func` once and returns the elapsed seconds.

## What it does not do

The package processes samples and readings that you pass to it. It does not
open audio devices, capture or play sound, or read physical knobs or ADCs.
Your own code has to supply the sample blocks and the raw knob values.

## Tests

```
pytest
```