"""Core data structures for the slope solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..numbers import FIFTY_DEGREES_AS_RADIANS, Real

SolveStatus = Literal["converged", "exhausted"]


class SolveOptionsError(ValueError):
    """Raised when solver options cannot drive the iteration."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name


@dataclass(frozen=True)
class SolveOptions:
    """Constants of the feedback iteration.

    The gain and the iteration cap are empirical; changing any default
    changes the reported digits.
    """

    initial_slope: float = 1.0
    max_iterations: int = 1000
    gain: float = 0.1
    threshold: float = 1e-10
    target: Real = FIFTY_DEGREES_AS_RADIANS


@dataclass
class Solution:
    iterations: int
    slope: Real
    error: Real
    alpha: Real
    status: SolveStatus

    @property
    def converged(self) -> bool:
        return self.status == "converged"
