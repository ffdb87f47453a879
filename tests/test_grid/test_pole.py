"""Tests for poles."""

import pytest

from mazeraster.grid import Pole, opposite


@pytest.mark.parametrize(
    "pole, expected",
    [(Pole.N, Pole.S), (Pole.S, Pole.N), (Pole.E, Pole.W), (Pole.W, Pole.E)],
)
def test_opposite(pole, expected):
    assert opposite(pole) is expected
    assert pole.opposite is expected


def test_opposite_is_involution():
    for pole in Pole:
        assert opposite(opposite(pole)) is pole


def test_offsets_point_north_up():
    assert Pole.N.offset == (0, -1)
    assert Pole.S.offset == (0, 1)
    assert Pole.E.offset == (1, 0)
    assert Pole.W.offset == (-1, 0)


def test_opposite_offsets_cancel():
    for pole in Pole:
        dx, dy = pole.offset
        ox, oy = pole.opposite.offset
        assert (dx + ox, dy + oy) == (0, 0)


def test_bits_are_distinct():
    bits = [p.bit for p in Pole]
    assert len(set(bits)) == 4
    assert sum(bits) == 0b1111
