from roulette.easing import cubic_bezier, spin_ease


def test_endpoints_are_clamped():
    assert spin_ease(0) == 0
    assert spin_ease(1) == 1
    assert spin_ease(-0.5) == 0
    assert spin_ease(2) == 1


def test_spin_curve_is_monotonic_ease_out():
    samples = [spin_ease(i / 50) for i in range(51)]
    assert all(a <= b + 1e-9 for a, b in zip(samples, samples[1:]))
    # most of the travel happens early
    assert spin_ease(0.5) > 0.8


def test_linear_curve_is_identity():
    linear = cubic_bezier(0.0, 0.0, 1.0, 1.0)
    for x in (0.1, 0.25, 0.5, 0.9):
        assert abs(linear(x) - x) < 1e-5
