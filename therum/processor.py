"""The synth processor: MIDI handling, block rendering and state."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from .params import Diagnostics, ParameterTree, ParamId
from .voice import VoiceManager

MAX_VOICES = 16
MINUS_INFINITY_DB = -100.0


class MidiKind(Enum):
    NOTE_ON = auto()
    NOTE_OFF = auto()
    ALL_NOTES_OFF = auto()
    ALL_SOUND_OFF = auto()
    OTHER = auto()


@dataclass(frozen=True)
class MidiMessage:
    kind: MidiKind
    note: int = 0
    velocity: float = 0.0

    @classmethod
    def note_on(cls, note: int, velocity: float) -> MidiMessage:
        return cls(MidiKind.NOTE_ON, note, velocity)

    @classmethod
    def note_off(cls, note: int) -> MidiMessage:
        return cls(MidiKind.NOTE_OFF, note)


def _decibels_to_gain(db: float) -> float:
    return 10.0 ** (db / 20.0) if db > MINUS_INFINITY_DB else 0.0


class TherumProcessor:
    """Renders the voice pool into blocks of audio, driven by MIDI and parameters."""

    name = "THERUM"
    accepts_midi = True
    produces_midi = False

    def __init__(self) -> None:
        self.parameters = ParameterTree()
        self.voice_manager = VoiceManager()
        self.sample_rate = 44100.0

    def prepare_to_play(self, sample_rate: float, samples_per_block: int) -> None:
        self.sample_rate = sample_rate
        self.voice_manager.prepare(sample_rate, MAX_VOICES)

    def _handle_midi(self, midi_messages: Iterable[MidiMessage]) -> None:
        for msg in midi_messages:
            if msg.kind is MidiKind.NOTE_ON and msg.velocity > 0.0:
                self.voice_manager.note_on(msg.note, msg.velocity)
            elif msg.kind in (MidiKind.NOTE_ON, MidiKind.NOTE_OFF):
                self.voice_manager.note_off(msg.note)
            elif msg.kind in (MidiKind.ALL_NOTES_OFF, MidiKind.ALL_SOUND_OFF):
                self.voice_manager.all_notes_off()

    def process_block(
        self,
        num_samples: int,
        num_channels: int,
        midi_messages: Iterable[MidiMessage] = (),
    ) -> list[list[float]]:
        """Handle the MIDI and return ``num_channels`` lists of ``num_samples`` samples."""
        self._handle_midi(midi_messages)

        p = self.parameters
        master = _decibels_to_gain(p[ParamId.MASTER_GAIN])
        args = (
            p[ParamId.FILTER1_CUTOFF],
            p[ParamId.MACRO1],
            p[ParamId.FX_DELAY_MIX],
            p[ParamId.FX_REVERB_MIX],
            p[ParamId.FX_DIST_MIX],
        )
        mono = [self.voice_manager.render_mixed(*args) * master for _ in range(num_samples)]
        return [list(mono) for _ in range(num_channels)]

    @property
    def diagnostics(self) -> Diagnostics:
        return Diagnostics(
            active_voices=self.voice_manager.active_voice_count,
            route_count=0,
            quality_mode_index=int(self.parameters[ParamId.QUALITY_MODE]),
        )

    def get_state_information(self) -> bytes:
        return ET.tostring(self.parameters.to_xml(), encoding="utf-8")

    def set_state_information(self, data: bytes) -> None:
        """Restore parameters from saved state; data that is not XML is ignored."""
        try:
            element = ET.fromstring(data)
        except ET.ParseError:
            return
        self.parameters.load_xml(element)