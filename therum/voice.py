"""Synth voices and the polyphonic voice pool."""

from __future__ import annotations

from .filters import SimpleLPF
from .fx import FxRack
from .modulation import EnvelopeGenerator
from .oscillators import WavetableBank, WavetableOscillator

TABLE_SIZE = 2048
DETUNE_RATIO = 1.005
OSC_A_GAIN = 0.62
OSC_B_GAIN = 0.38
VOICE_GAIN = 0.2


def midi_to_hz(note: int) -> float:
    """Convert a MIDI note number to a frequency in hertz (A4 = 440 Hz)."""
    return 440.0 * 2.0 ** ((note - 69) / 12.0)


class TherumVoice:
    """Two detuned wavetable oscillators through a low-pass, FX and an amp envelope."""

    def __init__(self) -> None:
        self.osc_a = WavetableOscillator()
        self.osc_b = WavetableOscillator()
        self.amp_env = EnvelopeGenerator()
        self.lpf = SimpleLPF()
        self.fx = FxRack()
        self.active = False
        self.midi_note = -1
        self.velocity = 0.0

    def prepare(self, sample_rate: float, shared_bank: WavetableBank | None) -> None:
        for osc in (self.osc_a, self.osc_b):
            osc.prepare(sample_rate)
            osc.bank = shared_bank
        self.amp_env.prepare(sample_rate)
        self.amp_env.set_adsr(10.0, 120.0, 0.75, 220.0)
        self.lpf.prepare(sample_rate)

    def start(self, midi_note: int, velocity: float) -> None:
        self.midi_note = midi_note
        self.velocity = velocity
        frequency = midi_to_hz(midi_note)
        self.osc_a.frequency = frequency
        self.osc_b.frequency = frequency * DETUNE_RATIO
        self.amp_env.note_on()
        self.active = True

    def stop(self) -> None:
        self.amp_env.note_off()
        self.active = False
        self.midi_note = -1

    def render(
        self,
        filter_cutoff: float,
        macro_amount: float,
        delay_mix: float,
        reverb_mix: float,
        dist_mix: float,
    ) -> float:
        """Return the next sample of this voice, or silence when it is inactive."""
        if not self.active:
            return 0.0

        self.lpf.set_cutoff(filter_cutoff * (0.5 + macro_amount * 0.5))
        raw = self.osc_a.process() * OSC_A_GAIN + self.osc_b.process() * OSC_B_GAIN
        filtered = self.lpf.process(raw)

        self.fx.delay_mix = delay_mix
        self.fx.reverb_mix = reverb_mix
        self.fx.dist_mix = dist_mix

        return self.fx.process(filtered) * self.amp_env.process() * self.velocity * VOICE_GAIN


class VoiceManager:
    """A fixed pool of voices sharing one wavetable, with simple voice stealing."""

    def __init__(self) -> None:
        self.bank = WavetableBank()
        self.pool: list[TherumVoice] = []

    def prepare(self, sample_rate: float, voices: int) -> None:
        if voices < 0:
            raise ValueError("voice count must not be negative")
        self.bank.build_default_sine_table(TABLE_SIZE)
        kept = self.pool[:voices]
        self.pool = kept + [TherumVoice() for _ in range(voices - len(kept))]
        for voice in self.pool:
            voice.prepare(sample_rate, self.bank)

    def _find_free_voice(self) -> TherumVoice | None:
        free = next((v for v in self.pool if not v.active), None)
        if free is not None:
            return free
        return self.pool[0] if self.pool else None

    def _find_voice_by_note(self, midi_note: int) -> TherumVoice | None:
        return next((v for v in self.pool if v.active and v.midi_note == midi_note), None)

    def note_on(self, midi_note: int, velocity: float) -> None:
        voice = self._find_free_voice()
        if voice is not None:
            voice.start(midi_note, velocity)

    def note_off(self, midi_note: int) -> None:
        voice = self._find_voice_by_note(midi_note)
        if voice is not None:
            voice.stop()

    def all_notes_off(self) -> None:
        for voice in self.pool:
            if voice.active:
                voice.stop()

    def render_mixed(
        self,
        filter_cutoff: float,
        macro_amount: float,
        delay_mix: float,
        reverb_mix: float,
        dist_mix: float,
    ) -> float:
        """Return the sum of one sample from every voice."""
        return sum(
            v.render(filter_cutoff, macro_amount, delay_mix, reverb_mix, dist_mix)
            for v in self.pool
        )

    @property
    def active_voice_count(self) -> int:
        return sum(1 for v in self.pool if v.active)