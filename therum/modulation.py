"""Envelopes, LFOs, macros and the modulation matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

TWO_PI = 6.28318530718
MACRO_COUNT = 8


class EnvelopeStage(IntEnum):
    IDLE = 0
    ATTACK = 1
    DECAY = 2
    SUSTAIN = 3
    RELEASE = 4


class EnvelopeGenerator:
    """A linear ADSR envelope with times in milliseconds."""

    def __init__(self) -> None:
        self.sample_rate = 44100.0
        self.attack_ms = 10.0
        self.decay_ms = 120.0
        self.sustain = 0.75
        self.release_ms = 220.0
        self.stage = EnvelopeStage.IDLE
        self.value = 0.0

    def prepare(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate

    def set_adsr(
        self, attack_ms: float, decay_ms: float, sustain: float, release_ms: float
    ) -> None:
        """Set all four stages; times are floored at 1 ms and sustain kept in [0, 1]."""
        self.attack_ms = max(1.0, attack_ms)
        self.decay_ms = max(1.0, decay_ms)
        self.sustain = min(max(sustain, 0.0), 1.0)
        self.release_ms = max(1.0, release_ms)

    def note_on(self) -> None:
        self.stage = EnvelopeStage.ATTACK

    def note_off(self) -> None:
        self.stage = EnvelopeStage.RELEASE

    def process(self) -> float:
        """Advance one sample and return the envelope level."""
        per_ms = 0.001 * self.sample_rate
        attack_step = 1.0 / (self.attack_ms * per_ms)
        decay_step = (1.0 - self.sustain) / (self.decay_ms * per_ms)
        release_step = 1.0 / (self.release_ms * per_ms)

        if self.stage is EnvelopeStage.ATTACK:
            self.value += attack_step
            if self.value >= 1.0:
                self.value = 1.0
                self.stage = EnvelopeStage.DECAY
        elif self.stage is EnvelopeStage.DECAY:
            self.value -= decay_step
            if self.value <= self.sustain:
                self.value = self.sustain
                self.stage = EnvelopeStage.SUSTAIN
        elif self.stage is EnvelopeStage.SUSTAIN:
            self.value = self.sustain
        elif self.stage is EnvelopeStage.RELEASE:
            self.value -= release_step
            if self.value <= 0.0:
                self.value = 0.0
                self.stage = EnvelopeStage.IDLE
        else:
            self.value = 0.0
        return self.value


class LfoGenerator:
    """A unipolar sine LFO in the range [0, 1]."""

    def __init__(self, rate: float = 2.0) -> None:
        self.sample_rate = 44100.0
        self.rate = rate
        self.phase = 0.0

    def prepare(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate

    def process(self) -> float:
        out = 0.5 + 0.5 * math.sin(self.phase * TWO_PI)
        self.phase += self.rate / self.sample_rate
        if self.phase >= 1.0:
            self.phase -= 1.0
        return out


@dataclass
class MacroBank:
    values: list[float] = field(default_factory=lambda: [0.0] * MACRO_COUNT)


class ModSourceType(Enum):
    LFO = auto()
    ENVELOPE = auto()
    MACRO = auto()
    RANDOM = auto()
    VELOCITY = auto()
    KEYTRACK = auto()
    AFTERTOUCH = auto()


class ModTarget(IntEnum):
    FILTER1_CUTOFF = 1
    FILTER1_RESO = 2
    OSC_A_WT_POS = 3
    DELAY_MIX = 4


@dataclass
class ModRoute:
    source_type: ModSourceType = ModSourceType.LFO
    source_index: int = 0
    target_id: int = 0
    amount: float = 0.0
    bipolar: bool = False


@dataclass
class ModMatrix:
    routes: list[ModRoute] = field(default_factory=list)

    def add_route(self, route: ModRoute) -> None:
        self.routes.append(route)


class ModMatrixEvaluator:
    """Applies macro routes of a matrix to a target value."""

    MIN_VALUE = 0.0
    MAX_VALUE = 20000.0

    def apply_macro_to_target(
        self,
        matrix: ModMatrix,
        target_id: int,
        base_value: float,
        macro1: float,
        macro2: float,
    ) -> float:
        """Return ``base_value`` plus every macro route aimed at ``target_id``, clamped."""
        out = base_value
        for route in matrix.routes:
            if route.target_id != target_id:
                continue
            source = 0.0
            if route.source_type is ModSourceType.MACRO:
                if route.source_index == 0:
                    source = macro1
                elif route.source_index == 1:
                    source = macro2
            if route.bipolar:
                source = source * 2.0 - 1.0
            out += source * route.amount
        return min(max(out, self.MIN_VALUE), self.MAX_VALUE)