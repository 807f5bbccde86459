"""Tests for playfield geometry and color helpers."""

import random

import pytest

from campo import FieldRect, clamp, field_center, field_rect
from cores import hex_to_rgb, inverse_color, random_color, random_dark_color, rgb_to_hex, transition_color


class TestFieldRect:
    def test_default_field_is_centered(self):
        f = field_rect(800, 480, 0.9, 0.9)
        assert f.width == pytest.approx(720)
        assert f.height == pytest.approx(432)
        assert f.x == pytest.approx(40)
        assert f.y == pytest.approx(24)
        assert field_center(f) == pytest.approx((400, 240))

    def test_full_ratio_covers_canvas(self):
        assert field_rect(640, 360, 1, 1) == FieldRect(0, 0, 640, 360)

    def test_out_of_range_ratio_does_not_raise(self):
        f = field_rect(100, 100, 1.5, -1)
        assert f.x == pytest.approx(-25)
        assert f.height == pytest.approx(-100)

    def test_unpacks_like_a_rect_tuple(self):
        x, y, w, h = field_rect(200, 100, 0.5, 0.5)
        assert (x, y, w, h) == (50, 25, 100, 50)


class TestClamp:
    def test_inside(self):
        assert clamp(5, 0, 10) == 5

    def test_bounds(self):
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10

    def test_inverted_range_prefers_lower_bound(self):
        assert clamp(5, 10, 0) == 10


class TestColors:
    def test_hex_round_trip_sample(self):
        assert hex_to_rgb("#ff00aa") == (255, 0, 170)
        assert rgb_to_hex(255, 0, 170) == "#ff00aa"

    def test_invalid_hex_falls_back_to_white(self):
        assert hex_to_rgb("not a color") == (255, 255, 255)

    def test_transition_moves_two_percent(self):
        assert transition_color("#000000", "#ffffff", 0.02) == "#050505"

    def test_transition_reaches_target_eventually(self):
        color = "#ffffff"
        for _ in range(1000):
            color = transition_color(color, "#000000", 0.02)
        assert color == "#000000"

    def test_inverse(self):
        assert inverse_color("#0a0a12") == "#f5f5ed"

    def test_random_colors_are_valid_hex(self):
        rng = random.Random(3)
        for _ in range(200):
            c = random_color(rng)
            assert len(c) == 7 and c.startswith("#")
            hex_to_rgb(c)

    def test_dark_colors_stay_dark(self):
        rng = random.Random(4)
        for _ in range(500):
            assert int(random_dark_color(rng)[1:], 16) < 0x404040
