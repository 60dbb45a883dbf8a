import pytest

from driftsim.vector import Vector2D


def test_default_is_origin():
    assert Vector2D() == Vector2D(0.0, 0.0)


def test_add_then_subtract_round_trip():
    a = Vector2D(1.5, -2.25)
    b = Vector2D(0.75, 3.5)
    assert (a + b) - b == a


def test_addition_is_commutative():
    a = Vector2D(1.5, -2.25)
    b = Vector2D(0.75, 3.5)
    assert a + b == b + a


def test_addition_pins_components():
    assert Vector2D(1.5, -2.25) + Vector2D(0.75, 3.5) == Vector2D(2.25, 1.25)


def test_subtract_self_gives_origin():
    a = Vector2D(1.5, -2.25)
    assert a - a == Vector2D()


def test_scalar_multiplication_scales_components():
    a = Vector2D(1.5, -2.25)
    scaled = a * 2.0
    assert scaled == Vector2D(3.0, -4.5)


def test_multiply_by_one_is_identity():
    a = Vector2D(1.5, -2.25)
    assert a * 1.0 == a


def test_right_multiplication_matches_left():
    a = Vector2D(1.5, -2.25)
    assert 3.0 * a == a * 3.0


def test_vector_is_immutable():
    a = Vector2D(1.0, 2.0)
    with pytest.raises(AttributeError):
        a.x = 5.0  # type: ignore[misc]
    assert a.x == 1.0
    assert a == Vector2D(1.0, 2.0)


def test_adding_non_vector_raises():
    with pytest.raises(TypeError):
        Vector2D(1.0, 2.0) + 3.0  # type: ignore[operator]