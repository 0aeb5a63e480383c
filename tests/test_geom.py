import dataclasses

import pytest

from patience.geom import Pos


@pytest.mark.parametrize(
    "start, dx, dy",
    [(Pos(0, 0), 3, 4), (Pos(10.5, -2.0), -1.5, 7.25), (Pos(-5, 5), 0, 0)],
)
def test_translate_matches_addition(start, dx, dy):
    assert start.translate(dx, dy) == start + Pos(dx, dy)


@pytest.mark.parametrize(
    "p, q",
    [(Pos(1, 2), Pos(3, 4)), (Pos(-7, 0), Pos(7, 9)), (Pos(2.5, 1.25), Pos(0.5, 0.75))],
)
def test_subtraction_undoes_addition(p, q):
    assert (p + q) - q == p


def test_translate_difference_is_offset():
    p = Pos(12, 30)
    moved = p.translate(5, -8)
    assert moved - p == Pos(5, -8)


def test_translate_leaves_original_unchanged():
    p = Pos(1, 1)
    p.translate(10, 10)
    assert p == Pos(1, 1)


def test_pos_is_immutable():
    p = Pos(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5  # type: ignore[misc]
    assert p.as_tuple() == (1, 2)


def test_add_with_non_pos_raises():
    with pytest.raises(TypeError):
        Pos(1, 2) + (1, 2)  # type: ignore[operator]


def test_almost_eq_within_epsilon():
    assert Pos(0.0, 0.0).almost_eq(Pos(0.005, -0.005), 0.01)


def test_almost_eq_is_strict_at_epsilon():
    assert not Pos(0.0, 0.0).almost_eq(Pos(0.01, 0.0), 0.01)


def test_almost_eq_checks_both_axes():
    assert not Pos(0.0, 0.0).almost_eq(Pos(0.0, 1.0), 0.01)


def test_to_int_truncates_toward_zero():
    assert Pos(1.9, -1.9).to_int() == Pos(1, -1)


def test_to_float_gives_floats():
    converted = Pos(3, 4).to_float()
    assert converted.as_tuple() == (3.0, 4.0)
    assert all(isinstance(v, float) for v in converted.as_tuple())


def test_int_float_round_trip():
    p = Pos(42, -17)
    assert p.to_float().to_int() == p


def test_as_tuple():
    assert Pos(5, 6).as_tuple() == (5, 6)