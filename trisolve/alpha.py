from __future__ import annotations

import logging

import numpy as np

from .logging_utils import debug_log_call
from .numbers import RADIANS_TO_DEGREES, Real, RealLike, real

logger = logging.getLogger(__name__)


@debug_log_call(logger)
def alpha(m: RealLike) -> Real:
    """Return the apex angle CBK of triangle BCK in degrees for slope ``m``.

    ``j = |CK|`` follows from the side lengths ``|BC| = |BK| = 1``, the base
    angle is ``arccos(j/2)`` and the angle sum of the triangle gives the rest.
    """

    m = real(m)
    with np.errstate(divide="ignore", invalid="ignore"):
        j = np.sqrt(2.0 - 2.0 / np.sqrt(m * m + 1.0))
        angle_bck = np.arccos(j * 0.5) * RADIANS_TO_DEGREES
    return 180.0 - 2.0 * angle_bck
