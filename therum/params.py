"""Parameter identifiers, their layout and the saved parameter tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

STATE_TYPE = "THERUM_STATE"
PARAM_TAG = "PARAM"


class ParamId(str, Enum):
    MASTER_GAIN = "masterGain"
    QUALITY_MODE = "qualityMode"
    OSC_A_WT_POS = "oscA_wtPos"
    OSC_A_LEVEL = "oscA_level"
    OSC_A_DETUNE = "oscA_detune"
    OSC_B_WT_POS = "oscB_wtPos"
    OSC_B_LEVEL = "oscB_level"
    OSC_B_DETUNE = "oscB_detune"
    SUB_LEVEL = "sub_level"
    NOISE_LEVEL = "noise_level"
    FILTER1_CUTOFF = "filter1_cutoff"
    FILTER1_RESO = "filter1_reso"
    FILTER1_DRIVE = "filter1_drive"
    ENV1_ATTACK = "env1_attack"
    ENV1_DECAY = "env1_decay"
    ENV1_SUSTAIN = "env1_sustain"
    ENV1_RELEASE = "env1_release"
    MACRO1 = "macro1"
    MACRO2 = "macro2"
    FX_REVERB_MIX = "fx_reverbMix"
    FX_DELAY_MIX = "fx_delayMix"
    FX_DIST_MIX = "fx_distMix"


@dataclass(frozen=True)
class ParameterSpec:
    """A ranged parameter; with ``choices`` its value is a choice index."""

    id: ParamId
    name: str
    minimum: float
    maximum: float
    default: float
    choices: tuple[str, ...] = ()

    def clamp(self, value: float) -> float:
        if self.choices:
            return float(min(max(round(value), 0), len(self.choices) - 1))
        return min(max(float(value), self.minimum), self.maximum)


@dataclass
class Diagnostics:
    active_voices: int = 0
    route_count: int = 0
    quality_mode_index: int = 1


def _ranged(param_id: ParamId, name: str, lo: float, hi: float, default: float) -> ParameterSpec:
    return ParameterSpec(param_id, name, lo, hi, default)


def create_parameter_layout() -> list[ParameterSpec]:
    """Return every parameter of the synth with its range and default."""
    quality = ("Eco", "Standard", "Ultra")
    return [
        _ranged(ParamId.MASTER_GAIN, "Master Gain", -48.0, 12.0, 0.0),
        ParameterSpec(ParamId.QUALITY_MODE, "Quality Mode", 0.0, float(len(quality) - 1), 1.0, quality),
        _ranged(ParamId.OSC_A_WT_POS, "Osc A WT Pos", 0.0, 1.0, 0.25),
        _ranged(ParamId.OSC_A_LEVEL, "Osc A Level", 0.0, 1.0, 0.80),
        _ranged(ParamId.OSC_A_DETUNE, "Osc A Detune", 0.0, 1.0, 0.10),
        _ranged(ParamId.OSC_B_WT_POS, "Osc B WT Pos", 0.0, 1.0, 0.50),
        _ranged(ParamId.OSC_B_LEVEL, "Osc B Level", 0.0, 1.0, 0.60),
        _ranged(ParamId.OSC_B_DETUNE, "Osc B Detune", 0.0, 1.0, 0.10),
        _ranged(ParamId.SUB_LEVEL, "Sub Level", 0.0, 1.0, 0.35),
        _ranged(ParamId.NOISE_LEVEL, "Noise Level", 0.0, 1.0, 0.0),
        _ranged(ParamId.FILTER1_CUTOFF, "Filter 1 Cutoff", 20.0, 20000.0, 18000.0),
        _ranged(ParamId.FILTER1_RESO, "Filter 1 Resonance", 0.1, 1.0, 0.15),
        _ranged(ParamId.FILTER1_DRIVE, "Filter 1 Drive", 0.0, 1.0, 0.0),
        _ranged(ParamId.ENV1_ATTACK, "Env 1 Attack", 1.0, 5000.0, 10.0),
        _ranged(ParamId.ENV1_DECAY, "Env 1 Decay", 1.0, 5000.0, 120.0),
        _ranged(ParamId.ENV1_SUSTAIN, "Env 1 Sustain", 0.0, 1.0, 0.75),
        _ranged(ParamId.ENV1_RELEASE, "Env 1 Release", 1.0, 5000.0, 220.0),
        _ranged(ParamId.MACRO1, "Macro 1", 0.0, 1.0, 0.0),
        _ranged(ParamId.MACRO2, "Macro 2", 0.0, 1.0, 0.0),
        _ranged(ParamId.FX_REVERB_MIX, "Reverb Mix", 0.0, 1.0, 0.15),
        _ranged(ParamId.FX_DELAY_MIX, "Delay Mix", 0.0, 1.0, 0.10),
        _ranged(ParamId.FX_DIST_MIX, "Dist Mix", 0.0, 1.0, 0.10),
    ]


def _key(param_id: ParamId | str) -> str:
    try:
        return ParamId(param_id).value
    except ValueError:
        raise KeyError(param_id) from None


class ParameterTree:
    """Current values of all parameters, kept within their ranges."""

    def __init__(self, layout: Iterable[ParameterSpec] | None = None) -> None:
        specs = create_parameter_layout() if layout is None else list(layout)
        self._specs = {spec.id.value: spec for spec in specs}
        self._values = {key: spec.default for key, spec in self._specs.items()}

    def spec(self, param_id: ParamId | str) -> ParameterSpec:
        key = _key(param_id)
        if key not in self._specs:
            raise KeyError(param_id)
        return self._specs[key]

    def __getitem__(self, param_id: ParamId | str) -> float:
        key = _key(param_id)
        if key not in self._values:
            raise KeyError(param_id)
        return self._values[key]

    def __setitem__(self, param_id: ParamId | str, value: float) -> None:
        self._values[self.spec(param_id).id.value] = self.spec(param_id).clamp(value)

    def __contains__(self, param_id: object) -> bool:
        try:
            return _key(param_id) in self._values  # type: ignore[arg-type]
        except KeyError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def to_xml(self) -> ET.Element:
        """Return the state as a THERUM_STATE element of PARAM children."""
        root = ET.Element(STATE_TYPE)
        for key, value in self._values.items():
            ET.SubElement(root, PARAM_TAG, id=key, value=repr(value))
        return root

    def load_xml(self, element: ET.Element) -> None:
        """Take values from the PARAM children of ``element``; unknown ids are ignored."""
        for child in element.findall(PARAM_TAG):
            param_id = child.get("id")
            raw = child.get("value")
            if param_id is None or raw is None or param_id not in self:
                continue
            self[param_id] = float(raw)