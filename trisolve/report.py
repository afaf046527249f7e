from __future__ import annotations

from typing import List

from .geometry import Construction
from .numbers import format_real
from .solver.model import Solution


def format_report(solution: Solution, digits: int = 20) -> str:
    """Return the four-line summary of a solve."""

    lines = [
        f"Total iterations = {solution.iterations}",
        f"Slope of Line Segment BK = {format_real(solution.slope, digits)}",
        f"Angle BKL Error = {format_real(solution.error, digits)}",
        f"Alpha = {format_real(solution.alpha, digits)}",
    ]
    return "\n".join(lines)


def format_construction(construction: Construction, digits: int = 20) -> str:
    """List the points of ``construction`` and the curves that produce them.

    The equations are written with the solved slope substituted, ready to be
    pasted into a graphing tool.
    """

    m = format_real(construction.m, digits)
    slope_k = format_real(construction.slope_k, digits)

    lines: List[str] = ["Points:"]
    for name, (x, y) in construction.points().items():
        lines.append(f"  {name}: ({format_real(x, digits)}, {format_real(y, digits)})")
    lines.append("Lengths:")
    lines.append(f"  i = |AK| = |BL| = {format_real(construction.i, digits)}")
    lines.append(f"  j = |CK| = {format_real(construction.j, digits)}")
    lines.append("  k = |BC| = |BK| = 1")
    lines.append("Equations:")
    lines.append("  K circle: x^2 + y^2 = 2x")
    lines.append(f"  BK: y = {m}(1 - x)")
    lines.append(f"  CA: y = {slope_k}x")
    lines.append(f"  BA: y = {slope_k}(1 - x)")
    return "\n".join(lines)
