"""Solver façade for the BK slope iteration."""

from __future__ import annotations

from .config import get_solve_options, reset_solve_options, set_solve_options, validate_solve_options
from .core import solve
from .model import Solution, SolveOptions, SolveOptionsError, SolveStatus

__all__ = [
    "Solution",
    "SolveOptions",
    "SolveOptionsError",
    "SolveStatus",
    "get_solve_options",
    "reset_solve_options",
    "set_solve_options",
    "solve",
    "validate_solve_options",
]
