"""A simple distortion and mix-attenuation stage."""

from __future__ import annotations


def _unit(x: float) -> float:
    return min(max(x, 0.0), 1.0)


class FxRack:
    """Drive, hard clip, then scale by the delay and reverb mixes."""

    def __init__(
        self, delay_mix: float = 0.0, reverb_mix: float = 0.0, dist_mix: float = 0.0
    ) -> None:
        self.delay_mix = delay_mix
        self.reverb_mix = reverb_mix
        self.dist_mix = dist_mix

    @property
    def delay_mix(self) -> float:
        return self._delay_mix

    @delay_mix.setter
    def delay_mix(self, value: float) -> None:
        self._delay_mix = _unit(value)

    @property
    def reverb_mix(self) -> float:
        return self._reverb_mix

    @reverb_mix.setter
    def reverb_mix(self, value: float) -> None:
        self._reverb_mix = _unit(value)

    @property
    def dist_mix(self) -> float:
        return self._dist_mix

    @dist_mix.setter
    def dist_mix(self, value: float) -> None:
        self._dist_mix = _unit(value)

    def process(self, x: float) -> float:
        driven = x * (1.0 + self.dist_mix * 2.0)
        clipped = min(max(driven, -1.0), 1.0)
        return clipped * (1.0 - 0.25 * self.delay_mix - 0.15 * self.reverb_mix)