import pytest

from therum.filters import DualFilter, FilterRouting, SimpleLPF


def _step(filt, n, value=1.0):
    return [filt.process(value) for _ in range(n)]


def test_default_coefficient_first_sample():
    lpf = SimpleLPF()
    assert lpf.process(1.0) == pytest.approx(0.01)


def test_step_response_rises_and_converges():
    lpf = SimpleLPF()
    lpf.prepare(48000.0)
    lpf.set_cutoff(1000.0)
    out = _step(lpf, 2000)
    assert all(b >= a for a, b in zip(out, out[1:]))
    assert all(0.0 <= v <= 1.0 for v in out)
    assert out[-1] == pytest.approx(1.0, abs=1e-6)


def test_lower_cutoff_responds_slower():
    slow = SimpleLPF()
    fast = SimpleLPF()
    slow.set_cutoff(100.0)
    fast.set_cutoff(5000.0)
    assert _step(slow, 20)[-1] < _step(fast, 20)[-1]


def test_set_cutoff_keeps_coefficient_in_unit_interval():
    lpf = SimpleLPF()
    for hz in (20.0, 1000.0, 20000.0):
        lpf.set_cutoff(hz)
        assert 0.0 < lpf.coefficient < 1.0
        assert lpf.cutoff == hz


def _pair(cut_a, cut_b):
    a, b = SimpleLPF(), SimpleLPF()
    a.set_cutoff(cut_a)
    b.set_cutoff(cut_b)
    return a, b


def test_dual_serial_chains_filters():
    dual = DualFilter()
    dual.set_cutoff_a(800.0)
    dual.set_cutoff_b(3000.0)
    a, b = _pair(800.0, 3000.0)
    for x in (1.0, -0.5, 0.25, 0.0, 0.75):
        assert dual.process(x) == pytest.approx(b.process(a.process(x)))


def test_dual_parallel_averages():
    dual = DualFilter(FilterRouting.PARALLEL)
    dual.set_cutoff_a(500.0)
    dual.set_cutoff_b(4000.0)
    a, b = _pair(500.0, 4000.0)
    for x in (1.0, 1.0, -1.0, 0.3):
        assert dual.process(x) == pytest.approx(0.5 * (a.process(x) + b.process(x)))


def test_dual_split_uses_first_filter_only():
    dual = DualFilter(FilterRouting.SPLIT)
    dual.set_cutoff_a(1200.0)
    dual.set_cutoff_b(50.0)
    a, _ = _pair(1200.0, 50.0)
    for x in (0.2, 0.9, -0.4):
        assert dual.process(x) == pytest.approx(a.process(x))


def test_dual_prepare_sets_both_rates():
    dual = DualFilter()
    dual.prepare(96000.0)
    assert dual.a.sample_rate == 96000.0
    assert dual.b.sample_rate == 96000.0