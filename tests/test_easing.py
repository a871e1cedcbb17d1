import pytest

from rarl import easing

SAMPLES = [i / 20 for i in range(21)]


def test_endpoints():
    assert easing.linear(0.0) == pytest.approx(0.0)
    assert easing.linear(1.0) == pytest.approx(1.0)
    assert easing.cubic_in(0.0) == pytest.approx(0.0)
    assert easing.cubic_in(1.0) == pytest.approx(1.0)
    assert easing.cubic_out(0.0) == pytest.approx(0.0)
    assert easing.cubic_out(1.0) == pytest.approx(1.0)
    assert easing.cubic_inout(0.0) == pytest.approx(0.0)
    assert easing.cubic_inout(1.0) == pytest.approx(1.0)


def test_monotonic():
    linear = [easing.linear(t) for t in SAMPLES]
    cubic_in = [easing.cubic_in(t) for t in SAMPLES]
    cubic_out = [easing.cubic_out(t) for t in SAMPLES]
    cubic_inout = [easing.cubic_inout(t) for t in SAMPLES]
    assert linear == sorted(linear)
    assert cubic_in == sorted(cubic_in)
    assert cubic_out == sorted(cubic_out)
    assert cubic_inout == sorted(cubic_inout)


def test_linear_is_identity():
    assert [easing.linear(t) for t in SAMPLES] == SAMPLES


def test_cubic_out_mirrors_cubic_in():
    for t in SAMPLES:
        assert easing.cubic_out(t) == pytest.approx(1.0 - easing.cubic_in(1.0 - t))


def test_cubic_inout_is_point_symmetric():
    for t in SAMPLES:
        assert easing.cubic_inout(1.0 - t) == pytest.approx(1.0 - easing.cubic_inout(t))


def test_cubic_inout_midpoint():
    assert easing.cubic_inout(0.5) == pytest.approx(0.5)


def test_cubic_in_below_linear_and_out_above():
    for t in SAMPLES[1:-1]:
        assert easing.cubic_in(t) < t < easing.cubic_out(t)