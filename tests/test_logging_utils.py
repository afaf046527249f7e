import logging

import numpy as np

from trisolve import constraint_angle, construct
from trisolve.logging_utils import debug_log_call


def test_debug_log_call_renders_extended_scalars(caplog):
    logger = logging.getLogger("trisolve.tests.debug")

    @debug_log_call(logger)
    def halve(value):
        return value / 2

    with caplog.at_level(logging.DEBUG, logger="trisolve.tests.debug"):
        assert halve(np.longdouble(1)) == 0.5

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Entering test_debug_log_call_renders_extended_scalars.<locals>.halve "
        "(args=[1.00000000000000000000])",
        "Exiting test_debug_log_call_renders_extended_scalars.<locals>.halve "
        "-> 0.50000000000000000000",
    ]


def test_debug_log_call_is_silent_above_debug(caplog):
    with caplog.at_level(logging.INFO, logger="trisolve"):
        constraint_angle(1.0)
    assert not caplog.records


def test_debug_log_call_wraps_once():
    logger = logging.getLogger("trisolve.tests.debug")
    wrapped = debug_log_call(logger)(constraint_angle)
    assert wrapped is constraint_angle


def test_construction_is_logged_field_by_field(caplog):
    with caplog.at_level(logging.DEBUG, logger="trisolve.geometry"):
        construct(1.0)

    exit_messages = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Exiting")]
    assert len(exit_messages) == 1
    assert "Construction(m=1.00000000000000000000" in exit_messages[0]
    assert "K=Vec2(x=0.29289321881345" in exit_messages[0]
