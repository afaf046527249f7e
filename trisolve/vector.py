from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .numbers import Real, real


@dataclass(frozen=True)
class Vec2:
    """Point or vector in the plane with extended-precision coordinates."""

    x: Real
    y: Real

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", real(self.x))
        object.__setattr__(self, "y", real(self.y))

    def __iter__(self):
        yield self.x
        yield self.y


def subtract(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(a.x - b.x, a.y - b.y)


def dot(a: Vec2, b: Vec2) -> Real:
    return a.x * b.x + a.y * b.y


def magnitude(v: Vec2) -> Real:
    return np.sqrt(v.x * v.x + v.y * v.y)


def angle(a: Vec2, b: Vec2, c: Vec2) -> Real:
    """Return the angle at ``b`` between the rays towards ``a`` and ``c`` (radians).

    A zero-length arm, or rounding that pushes the cosine outside ``[-1, 1]``,
    yields NaN rather than an error.
    """

    ab = subtract(b, a)
    cb = subtract(b, c)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.arccos(dot(ab, cb) / (magnitude(ab) * magnitude(cb)))
