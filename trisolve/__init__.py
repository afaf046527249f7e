from .numbers import (
    FIFTY_DEGREES_AS_RADIANS,
    RADIANS_TO_DEGREES,
    Real,
    format_real,
    has_extended_precision,
    real,
)
from .vector import Vec2, subtract, dot, magnitude, angle
from .geometry import Construction, construct, constraint_angle
from .alpha import alpha
from .solver import (
    solve,
    Solution,
    SolveOptions,
    SolveOptionsError,
    get_solve_options,
    set_solve_options,
    reset_solve_options,
)
from .report import format_report, format_construction

__all__ = [
    'FIFTY_DEGREES_AS_RADIANS',
    'RADIANS_TO_DEGREES',
    'Real',
    'format_real',
    'has_extended_precision',
    'real',
    'Vec2',
    'subtract',
    'dot',
    'magnitude',
    'angle',
    'Construction',
    'construct',
    'constraint_angle',
    'alpha',
    'solve',
    'Solution',
    'SolveOptions',
    'SolveOptionsError',
    'get_solve_options',
    'set_solve_options',
    'reset_solve_options',
    'format_report',
    'format_construction',
]
