# maec

Modular audio engine components in pure Python. Audio is produced and
processed by chains of modules. A source sits at the back of a chain, any
number of processing modules sit in between, and a sink sits at the front.
Processing the sink pulls buffers through the chain.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `maec.chrono`
  - `get_time()` returns a monotonic time in nanoseconds. It is meant for measuring intervals.
  - `ChainTimer` keeps chain time in nanoseconds, worked out from the count of processed samples, the channel count and the nanoseconds per frame (`npf`).
  - Its `samplerate` property sets `npf` from a sample rate.
  - `time`, `time_for(sample, channels)`, `inc_sample()`, `add_sample(val)` and `reset()` read and move that count.
- `maec.base_module`
  - `State` and `BaseModule` hold a module's lifecycle state: created, started, stopped, finishing or finished.
- `maec.audio_buffer`
  - `AudioBuffer` is a multi-channel list of float samples, stored one whole channel after another.
  - It has `fill`, `copy`, `channel(index)` and `interleaved()`.
  - `create_buffer()` makes a new, zero-filled buffer.
  - Conversions between normalised samples and integer formats: `mf_int16`, `int16_mf`, `mf_uint16`, `uint16_mf`, `mf_char`, `char_mf`, `mf_uchar`, `uchar_mf`, `mf_float` and `mf_null`.
- `maec.audio_module`
  - `AudioInfo` and `ChainInfo` describe a module's audio and the chain it belongs to.
  - `AudioModule` is the base of a chain. It has `bind`, `meta_process`, `meta_start`, `meta_stop`, `meta_finish` and `meta_info_sync`.
  - `SourceModule` and `SinkModule` are the two ends of a chain.
  - `PeriodSink` processes the chain `period` times per call.
  - `ConstModule` emits a constant value.
  - `Counter` passes buffers through and counts samples and buffers.
- `maec.module_param`
  - `ModuleParam` is a parameter fed either by a constant or by another module.
  - `ParamModule`, `ParamSink` and `ParamSource` start, stop and sync their parameters together with themselves.
- `maec.mixer`
  - `ModuleMixDown` joins many inputs into one by adding their samples.
  - `ModuleMixUp` hands a copy of its buffer to each module in front of it.
  - `MultiMix` does both.
- `maec.oscillator`
  - `SineOscillator`, `SquareOscillator`, `SawtoothOscillator` and `TriangleOscillator` run at a fixed frequency.
  - `ModSineOscillator`, `ModSquareOscillator`, `ModSawtoothOscillator` and `ModTriangleOscillator` take their frequency from a `ModuleParam`.
- `maec.envelope`
  - `ConstantEnvelope`, `SetValue`, `LinearRamp` and `ExponentialRamp`.
  - `DurationEnvelope` runs another envelope for a set time.
  - `ChainEnvelope` plays envelopes one after another and fills the gaps between them.
  - `ADSREnvelope` builds attack, decay and sustain stages.
- `maec.dsp.window`
  - `window_rectangle`, `window_hann`, `window_hamming`, `window_blackmanc` and `window_blackman`.
- `maec.dsp.util`
  - `sinc`.
- `maec.dsp.ft`
  - `cos_basis`, `sin_basis`, `length_ft` and `length_ift`.
- `maec.dsp.conv`
  - `length_conv`, `input_conv` and `output_conv` compute full convolution.
- `maec.dsp.iir`
  - `IIRFilter` is a recursive filter that keeps its own input and output history.
  - It filters in place with `process` or returns a new list with `filter`.
  - `iir_recursive_single` computes one step.
  - `SinglePole` computes coefficients for a low pass or high pass filter.
- `maec.io.mstream`
  - `CharIStream` and `CharOStream` read and write bytes in memory.
  - `FIStream` and `FOStream` read and write bytes in files.
  - All four are context managers: entering starts the stream and leaving stops it.

## Example

```python
from maec.audio_module import ConstModule, Counter, PeriodSink

sink = PeriodSink()
counter = Counter()
source = ConstModule(5)

sink.bind(counter).bind(source)
sink.meta_process()

print(counter.samples(), counter.processed())  # 440 1
```

Generating a sine wave:

```python
from maec.oscillator import SineOscillator

osc = SineOscillator(frequency=440.0)
osc.meta_process()
samples = osc.get_buffer()
```

## What it does not do

- It does not play audio on a sound device.
- It does not record audio from a sound device.
- It does not decode or encode audio file formats.
- The streams in `maec.io.mstream` move raw bytes only.
- There are no filter modules to place in a chain. IIR filtering and convolution are available as functions and classes that work on plain sequences of samples.
- There is no command-line program.