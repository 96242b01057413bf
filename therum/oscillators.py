"""Sound sources: wavetable, noise, sample playback and placeholder engines."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

TWO_PI = 6.28318530718
DEFAULT_TABLE_SIZE = 2048


class WavetableBank:
    """A single-cycle waveform table shared between oscillators."""

    def __init__(self) -> None:
        self.table: list[float] = []

    def build_default_sine_table(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        """Fill the table with one cycle of a sine wave of ``size`` points."""
        if size < 0:
            raise ValueError("table size must not be negative")
        self.table = [math.sin(i / size * TWO_PI) for i in range(size)]

    @property
    def is_ready(self) -> bool:
        return bool(self.table)


class WavetableOscillator:
    """Reads a wavetable with linear interpolation, or a pure sine without one."""

    def __init__(
        self,
        bank: WavetableBank | None = None,
        frequency: float = 220.0,
        sample_rate: float = 44100.0,
    ) -> None:
        self.bank = bank
        self.frequency = frequency
        self.sample_rate = sample_rate
        self.position = 0.0
        self.phase = 0.0

    def prepare(self, sample_rate: float) -> None:
        self.sample_rate = sample_rate

    def _advance(self) -> None:
        self.phase += self.frequency / self.sample_rate
        if self.phase >= 1.0:
            self.phase -= 1.0

    def process(self) -> float:
        """Return the next sample and advance the phase."""
        if self.bank is None or not self.bank.is_ready:
            out = math.sin(self.phase * TWO_PI)
            self._advance()
            return out

        table = self.bank.table
        size = len(table)
        idx = self.phase * size
        i0 = int(idx) % size
        i1 = (i0 + 1) % size
        frac = idx - i0
        out = table[i0] + (table[i1] - table[i0]) * frac
        self._advance()
        return out


class NoiseOscillator:
    """White noise from a 32-bit linear congruential generator."""

    def __init__(self, seed: int = 22222) -> None:
        self.state = seed & 0xFFFFFFFF

    def process(self) -> float:
        self.state = (self.state * 1664525 + 1013904223) & 0xFFFFFFFF
        return ((self.state >> 8) & 0xFFFF) / 32768.0 - 1.0


class SampleOscillator:
    """Plays back a block of sample data at a given rate, looping at the end."""

    def __init__(
        self,
        data: Sequence[float] | None = None,
        rate: float = 1.0,
        position: float = 0.0,
    ) -> None:
        self.data = data
        self.rate = rate
        self.position = position

    def process(self) -> float:
        if not self.data:
            return 0.0

        size = len(self.data)
        index = min(max(int(self.position), 0), size - 1)
        out = self.data[index]
        self.position += self.rate
        if self.position >= size:
            self.position = 0.0
        return out


@dataclass
class GranularOscillator:
    """Granular engine settings; produces silence for now."""

    grain_size_ms: float = 40.0
    density: float = 0.5

    def process(self) -> float:
        return 0.0


@dataclass
class SpectralOscillator:
    """Spectral engine settings; produces silence for now."""

    brightness: float = 0.5
    tilt: float = 0.0

    def process(self) -> float:
        return 0.0