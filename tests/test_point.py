import dataclasses

import pytest

from splinelab.point import Point


def test_defaults_are_origin():
    p = Point()
    assert (p.x, p.y, p.z) == (0.0, 0.0, 0.0)


def test_coordinates_are_kept():
    p = Point(1.5, -2.0, 3.25)
    assert (p.x, p.y, p.z) == (1.5, -2.0, 3.25)


def test_partial_arguments_default_the_rest():
    p = Point(7.0)
    assert p.y == 0.0
    assert p.z == 0.0


def test_equality_by_value():
    assert Point(1.0, 2.0, 3.0) == Point(1.0, 2.0, 3.0)
    assert Point(1.0, 2.0, 3.0) != Point(1.0, 2.0, 4.0)


def test_point_is_immutable():
    p = Point(1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 2.0  # type: ignore[misc]
    assert p.x == 1.0
    assert p == Point(1.0, 0.0, 0.0)