"""Hybrid synthesizer engine: oscillators, filters, modulation, FX, voices, parameters, presets and splash/mascot state."""

__version__ = "0.1.0"

__all__ = [
    "oscillators",
    "filters",
    "modulation",
    "fx",
    "voice",
    "params",
    "processor",
    "presets",
    "mascot",
]