# therum

A compact synthesizer engine in pure Python with no third-party dependencies.
It renders polyphonic wavetable voices through a one-pole low-pass filter, a
simple drive-and-clip FX stage and an ADSR amplitude envelope. It also provides
plugin-style parameter state, preset records and filtering, XML state files,
and the state machines for a splash screen and a mascot animation.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `therum.oscillators`: `WavetableBank`, `WavetableOscillator`, `NoiseOscillator`,
  `SampleOscillator`, `GranularOscillator`, `SpectralOscillator`
- `therum.filters`: `SimpleLPF`, `DualFilter`, `FilterRouting`, `FilterType`
- `therum.modulation`: `EnvelopeGenerator`, `EnvelopeStage`, `LfoGenerator`,
  `MacroBank`, `ModRoute`, `ModMatrix`, `ModMatrixEvaluator`, `ModSourceType`, `ModTarget`
- `therum.fx`: `FxRack`
- `therum.voice`: `midi_to_hz`, `TherumVoice`, `VoiceManager`
- `therum.params`: `ParamId`, `ParameterSpec`, `ParameterTree`, `Diagnostics`,
  `create_parameter_layout`
- `therum.processor`: `TherumProcessor`, `MidiMessage`, `MidiKind`
- `therum.presets`: `PresetState`, `PresetBrowserModel`, `PresetTagEntry`,
  `PresetTagModel`, `PresetBrowserFilter`, `save_state_to_file`, `load_state_from_file`
- `therum.mascot`: `MascotAnimator`, `MascotAnimState`, `PunchState`,
  `SplashState`, `SplashMascotController`

## Rendering a block

```python
from therum.processor import TherumProcessor, MidiMessage

proc = TherumProcessor()
proc.prepare_to_play(44100.0, 512)
left, right = proc.process_block(512, 2, [MidiMessage.note_on(60, 0.8)])
```

`process_block` handles the MIDI messages first, then returns `num_channels`
lists of `num_samples` floats; every channel carries the same mono signal.
A note-on with velocity 0 counts as a note-off. `ALL_NOTES_OFF` and
`ALL_SOUND_OFF` release every active voice.

After `prepare_to_play` the processor holds 16 voices sharing a 2048-point sine
wavetable. Note-on takes the first free voice, or the first voice in the pool
when every voice is busy. Each voice mixes two oscillators (the second detuned
by a factor of 1.005), low-passes them at the `filter1_cutoff` parameter scaled
by `macro1`, runs them through `FxRack` and the amplitude envelope. The output
is the sum of all voices scaled by `masterGain`, given in decibels.

`proc.diagnostics` reports the active voice count and the quality mode index.

## Parameters and state

`create_parameter_layout()` returns a `ParameterSpec` for every `ParamId`, with
its range and default. `qualityMode` is a choice of `Eco`, `Standard` or
`Ultra`, stored as an index. `ParameterTree` holds the current values, indexed
by `ParamId` or its string value, and clamps each assignment to the range;
unknown ids raise `KeyError`.

`get_state_information()` returns the parameters as XML bytes (a `THERUM_STATE`
element of `PARAM` children) and `set_state_information()` restores them.
Data that is not XML is ignored, as are unknown parameter ids.

## Presets

```python
from therum.presets import PresetTagEntry, PresetBrowserFilter

entries = [PresetTagEntry("Neon Pad", "Pad", ["warm", "wide"])]
PresetBrowserFilter().filter(entries, "", "wide")
```

The category must match exactly unless it is empty. The text match ignores case
and looks in the name, the category and the space-joined tags; empty text
matches everything.

`save_state_to_file(element, path)` writes an XML element as a document;
`load_state_from_file(path)` reads it back, raising `FileNotFoundError` for a
missing file and `ValueError` for a file that is not XML.

## What it does not do

- There is no audio output, plugin host interface or graphical editor; the
  processor only returns sample lists.
- `FxRack` drives and hard-clips the signal and scales it down by the delay and
  reverb mixes; it has no actual delay line or reverb.
- `GranularOscillator` and `SpectralOscillator` hold settings but produce
  silence.
- The voices use only the amplitude envelope and macro 1. `LfoGenerator`,
  `NoiseOscillator`, `SampleOscillator`, `DualFilter` and the modulation matrix
  are available on their own but are not wired into the voices, and most
  parameters (oscillator levels, detune, envelope times, resonance) are stored
  without affecting the sound.