"""Tests for easing functions."""

from just_breathe import EASINGS
from just_breathe.easing import ease_in_out_cubic, lerp


class TestLerp:
    """Test lerp()."""

    def test_endpoints_are_exact(self):
        """lerp returns a at t=0 and b at t=1."""
        assert lerp(0.0, 10.0, 100.0) == 10.0
        assert lerp(1.0, 10.0, 100.0) == 100.0

    def test_midpoint(self):
        """lerp at 0.5 is the average."""
        assert lerp(0.5, 10.0, 100.0) == 55.0

    def test_descending(self):
        """lerp works when b < a."""
        assert lerp(0.5, 100.0, 10.0) == 55.0
        assert lerp(1.0, 100.0, 10.0) == 10.0


class TestEaseInOutCubic:
    """Test the cubic ease used for both radius and hue."""

    def test_known_values(self):
        """Cubic ease at the quarter points."""
        assert ease_in_out_cubic(0.0) == 0.0
        assert ease_in_out_cubic(0.25) == 0.0625
        assert ease_in_out_cubic(0.5) == 0.5
        assert ease_in_out_cubic(0.75) == 0.9375
        assert ease_in_out_cubic(1.0) == 1.0

    def test_monotonic(self):
        """Cubic ease never decreases over [0, 1]."""
        samples = [ease_in_out_cubic(i / 200) for i in range(201)]
        assert all(a <= b for a, b in zip(samples, samples[1:]))


def test_registry_contents():
    """Both curves are registered by name."""
    assert set(EASINGS) == {"linear", "ease_in_out_cubic"}
    assert EASINGS["linear"](0.3) == 0.3
    assert EASINGS["ease_in_out_cubic"] is ease_in_out_cubic


def test_all_easings_stay_in_unit_range():
    """Every registered curve maps [0, 1] into [0, 1]."""
    for fn in EASINGS.values():
        for i in range(101):
            assert 0.0 <= fn(i / 100) <= 1.0
