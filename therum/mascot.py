"""Mascot animation states and the splash screen sequence."""

from __future__ import annotations

from enum import Enum, auto

PULSE_AFTER_TICKS = 20
FADE_AFTER_TICKS = 72
FADE_STEP = 0.06


class MascotAnimState(Enum):
    IDLE = auto()
    SPLASH = auto()
    JAB = auto()
    UPPERCUT = auto()
    GUARD = auto()
    POWER = auto()


class MascotAnimator:
    """Tracks the current animation and the frame within it."""

    def __init__(self) -> None:
        self.state = MascotAnimState.IDLE
        self.frame = 0

    def set_state(self, state: MascotAnimState) -> None:
        self.state = state
        self.frame = 0

    def tick(self) -> None:
        self.frame += 1


class PunchState(Enum):
    IDLE = auto()
    JAB = auto()
    UPPERCUT = auto()
    POWER = auto()
    GUARD = auto()


class SplashState(Enum):
    SPLASH_IDLE = auto()
    SPLASH_PULSE = auto()
    SPLASH_FADE_OUT = auto()
    MAIN_UI_READY = auto()


class SplashMascotController:
    """Idles, pulses, then fades the splash out until the main UI is ready."""

    def __init__(self) -> None:
        self.state = SplashState.SPLASH_IDLE
        self.ticks = 0
        self.alpha = 1.0

    def tick(self) -> None:
        self.ticks += 1
        if self.ticks > PULSE_AFTER_TICKS:
            self.state = SplashState.SPLASH_PULSE
        if self.ticks > FADE_AFTER_TICKS:
            self.state = SplashState.SPLASH_FADE_OUT

        if self.state is SplashState.SPLASH_FADE_OUT:
            self.alpha -= FADE_STEP
            if self.alpha <= 0.0:
                self.alpha = 0.0
                self.state = SplashState.MAIN_UI_READY