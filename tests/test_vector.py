from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from ch06.geometry import Vector2D


def test_plus_and_minus() -> None:
    assert Vector2D(1, 2).plus(Vector2D(2, 3)) == Vector2D(3, 5)
    assert Vector2D(1, 2).minus(Vector2D(2, 3)) == Vector2D(-1, -1)
    assert Vector2D(1, 2) + Vector2D(2, 3) == Vector2D(3, 5)
    assert Vector2D(1, 2) - Vector2D(2, 3) == Vector2D(-1, -1)


def test_operations_do_not_mutate_operands() -> None:
    v = Vector2D(1, 2)
    w = Vector2D(2, 3)
    v.plus(w)
    v.minus(w)

    assert v == Vector2D(1, 2)
    assert w == Vector2D(2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 10  # type: ignore[misc]


def test_length() -> None:
    assert Vector2D(3, 4).length() == 5
    assert abs(Vector2D(-3, -4)) == 5
    assert Vector2D(0, 0).length() == 0
    assert Vector2D(1e-200, 0).length() > 0


def test_plus_minus_round_trip() -> None:
    rng = np.random.default_rng(0)
    for x1, y1, x2, y2 in rng.normal(size=(20, 4)):
        v = Vector2D(float(x1), float(y1))
        w = Vector2D(float(x2), float(y2))
        back = v.plus(w).minus(w)
        assert np.allclose(back.as_array(), v.as_array())
        assert v.length() >= 0


def test_nan_propagates() -> None:
    v = Vector2D(float("nan"), 1).plus(Vector2D(1, 1))

    assert np.isnan(v.x)
    assert v.y == 2
    assert np.isnan(v.length())


def test_array_conversion() -> None:
    v = Vector2D(1.5, -2.0)
    arr = v.as_array()

    assert arr.shape == (2,)
    assert np.allclose(arr, [1.5, -2.0])
    assert Vector2D.from_array(arr) == v
    assert tuple(v) == (1.5, -2.0)

    with pytest.raises(ValueError):
        Vector2D.from_array([1.0, 2.0, 3.0])
