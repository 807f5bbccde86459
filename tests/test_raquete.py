"""Tests for paddle movement and input folding."""

import pytest

from caos import default_params
from campo import field_rect
from raquete import DOWN, LEFT, NONE, RIGHT, UP, Paddle, intent_from_keys

FIELD = field_rect(800, 480, 0.9, 0.9)  # x=40 y=24 w=720 h=432


def make_paddle(side=LEFT, y=200):
    return Paddle(0, y, side, default_params())


class TestIntent:
    def test_plain_keys(self):
        assert intent_from_keys(True, False) == UP
        assert intent_from_keys(False, True) == DOWN
        assert intent_from_keys(False, False) == NONE

    def test_both_keys_cancel(self):
        assert intent_from_keys(True, True) == NONE
        assert intent_from_keys(True, True, invert=True) == NONE

    def test_inversion_swaps(self):
        assert intent_from_keys(True, False, invert=True) == DOWN
        assert intent_from_keys(False, True, invert=True) == UP


class TestManualMove:
    def test_up_and_down(self):
        p = make_paddle()
        p.move_by_intent(UP, 8, FIELD)
        assert p.y == 192
        p.move_by_intent(DOWN, 8, FIELD)
        assert p.y == 200

    def test_unknown_intent_is_noop(self):
        p = make_paddle()
        p.move_by_intent("sideways", 8, FIELD)
        assert p.y == 200

    def test_clamped_to_field(self):
        p = make_paddle(y=30)
        p.move_by_intent(UP, 50, FIELD)
        assert p.y == pytest.approx(FIELD.y)
        p = make_paddle(y=350)
        p.move_by_intent(DOWN, 50, FIELD)
        assert p.y == pytest.approx(FIELD.y + FIELD.height - p.height)


class TestAIMove:
    def test_moves_fixed_step_toward_target(self):
        p = make_paddle(y=100)  # centro em 150
        p.move_by_ai(400, FIELD, 8)
        assert p.y == pytest.approx(100 + 8 * 0.8)
        p.move_by_ai(0, FIELD, 8)
        assert p.y == pytest.approx(100)

    def test_overshoots_near_target(self):
        p = make_paddle(y=100)
        p.move_by_ai(151, FIELD, 8)
        assert p.center_y == pytest.approx(156.4)
        p.move_by_ai(151, FIELD, 8)
        assert p.center_y == pytest.approx(150)

    def test_stays_when_centered(self):
        p = make_paddle(y=100)
        p.move_by_ai(150, FIELD, 8)
        assert p.y == 100

    def test_clamped(self):
        p = make_paddle(y=FIELD.y)
        p.move_by_ai(-1000, FIELD, 8)
        assert p.y == pytest.approx(FIELD.y)


class TestDimensions:
    def test_sync_follows_snapshot(self):
        p = make_paddle()
        p.sync_dimensions(default_params(paddle_width=20, paddle_size=60, paddle_color="#123456"))
        assert (p.width, p.height, p.color) == (20, 60, "#123456")

    def test_place_on_each_side(self):
        left = make_paddle(LEFT)
        right = make_paddle(RIGHT)
        left.place(FIELD)
        right.place(FIELD)
        assert left.x == pytest.approx(FIELD.x + 10)
        assert right.x == pytest.approx(FIELD.x + FIELD.width - 10 - right.width)

    def test_growing_paddle_is_pulled_back_inside(self):
        p = make_paddle(y=FIELD.y + FIELD.height - 100)
        p.sync_dimensions(default_params(paddle_size=130))
        p.clamp_to_field(FIELD)
        assert p.y + p.height == pytest.approx(FIELD.y + FIELD.height)
