"""Process-wide defaults for the solver."""

from __future__ import annotations

import copy
import numbers

import numpy as np

from .model import SolveOptions, SolveOptionsError

_SOLVE_OPTIONS = SolveOptions()


def validate_solve_options(options: SolveOptions) -> None:
    """Reject option values that cannot describe an iteration.

    Only the shape of the configuration is checked. NaN or infinite values
    are accepted and propagate through the run like any other arithmetic.
    """

    iterations = options.max_iterations
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral):
        raise SolveOptionsError("max_iterations", f"expected an integer, got {iterations!r}")
    if iterations < 0:
        raise SolveOptionsError("max_iterations", f"must be non-negative, got {iterations}")

    for name in ("initial_slope", "gain", "threshold", "target"):
        value = getattr(options, name)
        if isinstance(value, bool) or not isinstance(value, (numbers.Real, np.floating)):
            raise SolveOptionsError(name, f"expected a number, got {value!r}")

    if options.threshold < 0:
        raise SolveOptionsError("threshold", f"must be non-negative, got {options.threshold!r}")


def get_solve_options() -> SolveOptions:
    return copy.deepcopy(_SOLVE_OPTIONS)


def set_solve_options(options: SolveOptions) -> None:
    global _SOLVE_OPTIONS
    validate_solve_options(options)
    _SOLVE_OPTIONS = copy.deepcopy(options)


def reset_solve_options() -> None:
    global _SOLVE_OPTIONS
    _SOLVE_OPTIONS = SolveOptions()
