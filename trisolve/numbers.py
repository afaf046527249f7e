from __future__ import annotations

import math
from typing import Union

import numpy as np

Real = np.longdouble
RealLike = Union[float, int, np.floating]

# Computed in double precision, then widened to Real.
RADIANS_TO_DEGREES = Real(180 / math.pi)
FIFTY_DEGREES_AS_RADIANS = Real(50 * math.pi / 180)


def real(value: RealLike) -> Real:
    """Return ``value`` as an extended-precision scalar."""

    return Real(value)


def has_extended_precision() -> bool:
    """Return ``True`` when ``Real`` carries more mantissa bits than float64."""

    return np.finfo(Real).nmant > np.finfo(np.float64).nmant


def format_real(value: RealLike, digits: int = 20) -> str:
    """Render ``value`` in fixed-point notation with exactly ``digits`` decimals."""

    value = real(value)
    if not np.isfinite(value):
        return str(float(value))
    return np.format_float_positional(
        value,
        precision=digits,
        unique=False,
        fractional=True,
        trim="k",
    )
