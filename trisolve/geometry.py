"""Closed-form construction of the isosceles triangle for a given BK slope.

The construction lives on the unit circle centred at ``B = (1, 0)``::

    K circle : x^2 + y^2 = 2x
    BK       : y = m(1 - x)
    CA       : y = ((sqrt(m^2 + 1) + 1)/m) x
    BA       : y = ((sqrt(m^2 + 1) + 1)/m)(1 - x)

``C`` is the origin and ``K`` the second intersection of ``BK`` with the
circle, so ``|BC| = |BK| = 1``.  ``A`` is the apex of the isosceles triangle
``ABC`` (on ``x = 1/2``) and ``L`` lies on ``BA`` at distance ``|AK|`` from
``B``.  The constraint under study is the angle ``BKL``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from .logging_utils import debug_log_call
from .numbers import Real, RealLike, real
from .vector import Vec2, angle, magnitude

logger = logging.getLogger(__name__)

B = Vec2(1.0, 0.0)
C = Vec2(0.0, 0.0)


@dataclass(frozen=True)
class Construction:
    """Every intermediate of the construction for one slope value."""

    m: Real
    msqrt: Real
    slope_k: Real
    j: Real
    magnitude_a: Real
    i: Real
    K: Vec2
    A: Vec2
    L: Vec2

    @property
    def B(self) -> Vec2:
        return B

    @property
    def C(self) -> Vec2:
        return C

    def points(self) -> Dict[str, Tuple[Real, Real]]:
        return {name: tuple(getattr(self, name)) for name in ("B", "C", "K", "A", "L")}

    @property
    def angle_bkl(self) -> Real:
        return angle(B, self.K, self.L)


def _construct(m: Real) -> Construction:
    msqrt = np.sqrt(m * m + 1.0)
    K = Vec2(1.0 - 1.0 / msqrt, m / msqrt)
    slope_k = (msqrt + 1.0) / m
    j = np.sqrt(2.0 * K.x)

    # A sits on the perpendicular bisector of BC; |CA| - |CK| is the length i.
    A = Vec2(0.5, slope_k * 0.5)
    magnitude_a = magnitude(A)
    i = magnitude_a - j

    # |BA| == |A|, so stepping i along BA from B needs no second norm.
    L = Vec2(1.0 - i * 0.5 / magnitude_a, i * A.y / magnitude_a)
    return Construction(
        m=m,
        msqrt=msqrt,
        slope_k=slope_k,
        j=j,
        magnitude_a=magnitude_a,
        i=i,
        K=K,
        A=A,
        L=L,
    )


@debug_log_call(logger)
def construct(m: RealLike) -> Construction:
    """Build the construction for slope ``m``.

    ``m = 0`` is a singularity of the formulas; the result then carries NaN
    or infinite coordinates instead of raising.
    """

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _construct(real(m))


@debug_log_call(logger)
def constraint_angle(m: RealLike) -> Real:
    """Return the angle BKL (radians) for slope ``m``."""

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _construct(real(m)).angle_bkl
