"""One-pole low-pass filter and a two-filter router."""

from __future__ import annotations

import math
from enum import Enum, auto

TWO_PI = 6.28318530718


class FilterType(Enum):
    LOW_PASS = auto()
    HIGH_PASS = auto()
    BAND_PASS = auto()
    NOTCH = auto()
    COMB = auto()
    FORMANT = auto()
    LADDER = auto()


class FilterRouting(Enum):
    SERIAL = auto()
    PARALLEL = auto()
    SPLIT = auto()


class SimpleLPF:
    """A one-pole low-pass filter."""

    def __init__(self) -> None:
        self.sample_rate = 44100.0
        self.cutoff = 18000.0
        self.coefficient = 0.99
        self.z1 = 0.0

    def prepare(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate

    def set_cutoff(self, hz: float) -> None:
        self.cutoff = hz
        self.coefficient = math.exp(-TWO_PI * hz / self.sample_rate)

    def process(self, x: float) -> float:
        self.z1 = (1.0 - self.coefficient) * x + self.coefficient * self.z1
        return self.z1


class DualFilter:
    """Two low-pass filters combined in series, in parallel or split."""

    def __init__(self, routing: FilterRouting = FilterRouting.SERIAL) -> None:
        self.routing = routing
        self.a = SimpleLPF()
        self.b = SimpleLPF()

    def prepare(self, sample_rate: float) -> None:
        self.a.prepare(sample_rate)
        self.b.prepare(sample_rate)

    def set_cutoff_a(self, hz: float) -> None:
        self.a.set_cutoff(hz)

    def set_cutoff_b(self, hz: float) -> None:
        self.b.set_cutoff(hz)

    def process(self, x: float) -> float:
        if self.routing is FilterRouting.SERIAL:
            return self.b.process(self.a.process(x))
        if self.routing is FilterRouting.PARALLEL:
            return 0.5 * (self.a.process(x) + self.b.process(x))
        if self.routing is FilterRouting.SPLIT:
            return self.a.process(x)
        return x