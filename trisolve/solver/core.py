from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..alpha import alpha
from ..geometry import constraint_angle
from ..numbers import Real, real
from .config import get_solve_options, validate_solve_options
from .model import Solution, SolveOptions, SolveStatus

logger = logging.getLogger(__name__)


def solve(options: Optional[SolveOptions] = None) -> Solution:
    """Drive the BK slope until the angle BKL meets the target.

    Each step evaluates the construction, and either stops when the error is
    within ``threshold`` or nudges the slope by ``error * gain``.  Running out
    of iterations is a normal stop.  The reported error is the last one
    evaluated; it is not recomputed for the final slope.
    """

    if options is None:
        options = get_solve_options()
    else:
        validate_solve_options(options)

    m = real(options.initial_slope)
    target = real(options.target)
    threshold = real(options.threshold)
    gain = real(options.gain)
    remaining = options.max_iterations
    error: Real = real(np.nan)
    status: SolveStatus = "exhausted"

    logger.info(
        "Solving for BK slope: initial=%s target=%s threshold=%s gain=%s budget=%d",
        m,
        target,
        threshold,
        gain,
        remaining,
    )

    with np.errstate(invalid="ignore", over="ignore"):
        while remaining > 0:
            theta = constraint_angle(m)
            error = theta - target
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Iteration %d: slope=%s theta=%s error=%s",
                    options.max_iterations - remaining + 1,
                    m,
                    theta,
                    error,
                )
            if abs(error) <= threshold:
                status = "converged"
                break
            m += error * gain
            remaining -= 1

    iterations = options.max_iterations - remaining
    solution = Solution(
        iterations=iterations,
        slope=m,
        error=error,
        alpha=alpha(m),
        status=status,
    )

    if solution.converged:
        logger.info("Converged after %d iteration(s): slope=%s error=%s", iterations, m, error)
    elif not np.isfinite(m):
        logger.warning("Slope left the valid domain after %d iteration(s): slope=%s", iterations, m)
    else:
        logger.warning(
            "Iteration budget of %d exhausted without convergence: slope=%s error=%s",
            options.max_iterations,
            m,
            error,
        )
    return solution
