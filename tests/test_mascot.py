from therum.mascot import (
    MascotAnimator,
    MascotAnimState,
    SplashMascotController,
    SplashState,
)


def test_animator_starts_idle():
    animator = MascotAnimator()
    assert animator.state is MascotAnimState.IDLE
    assert animator.frame == 0


def test_animator_ticks_and_resets_on_state_change():
    animator = MascotAnimator()
    for _ in range(5):
        animator.tick()
    assert animator.frame == 5
    animator.set_state(MascotAnimState.JAB)
    assert animator.state is MascotAnimState.JAB
    assert animator.frame == 0


def _ticked(n):
    controller = SplashMascotController()
    for _ in range(n):
        controller.tick()
    return controller


def test_splash_idles_first():
    controller = _ticked(20)
    assert controller.state is SplashState.SPLASH_IDLE
    assert controller.alpha == 1.0


def test_splash_pulses_after_twenty_ticks():
    controller = _ticked(21)
    assert controller.state is SplashState.SPLASH_PULSE
    assert _ticked(72).state is SplashState.SPLASH_PULSE
    assert _ticked(72).alpha == 1.0


def test_splash_starts_fading():
    controller = _ticked(73)
    assert controller.state is SplashState.SPLASH_FADE_OUT
    assert 0.0 < controller.alpha < 1.0


def test_alpha_decreases_while_fading():
    controller = _ticked(73)
    previous = controller.alpha
    controller.tick()
    assert controller.alpha < previous


def test_splash_reaches_main_ui():
    controller = SplashMascotController()
    while controller.state is not SplashState.MAIN_UI_READY:
        controller.tick()
        assert controller.ticks < 1000
    assert controller.alpha == 0.0
    assert controller.ticks > 72
    controller.tick()
    assert controller.state is SplashState.MAIN_UI_READY
    assert controller.alpha == 0.0