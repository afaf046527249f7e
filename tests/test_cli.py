import re

import numpy as np
import pytest

import trisolve.__main__ as cli
from trisolve import has_extended_precision
from trisolve.solver import Solution

_REPORT_RE = re.compile(
    r"^Total iterations = (\d+)\n"
    r"Slope of Line Segment BK = (-?\d+\.\d{20})\n"
    r"Angle BKL Error = (-?\d+\.\d{20})\n"
    r"Alpha = (-?\d+\.\d{20})\n$"
)

GOLDEN_REPORT = (
    "Total iterations = 52\n"
    "Slope of Line Segment BK = 0.83909963119542603543\n"
    "Angle BKL Error = -0.00000000006513924740\n"
    "Alpha = 40.00000000061011061481\n"
)


def test_main_prints_four_line_report(capsys):
    cli.main([])

    out = capsys.readouterr().out
    match = _REPORT_RE.match(out)
    assert match, out
    iterations, slope, error, alpha = match.groups()
    assert 0 < int(iterations) < 1000
    assert float(slope) == pytest.approx(0.8390996311772800, abs=1e-9)
    assert abs(float(error)) <= 1e-10
    assert float(alpha) == pytest.approx(40.0, abs=1e-7)


@pytest.mark.skipif(not has_extended_precision(), reason="numpy.longdouble is float64 here")
def test_main_matches_extended_precision_golden_output(capsys):
    cli.main([])

    assert capsys.readouterr().out == GOLDEN_REPORT


def test_main_output_is_reproducible(capsys):
    cli.main([])
    first = capsys.readouterr().out
    cli.main([])
    second = capsys.readouterr().out
    assert first == second


def test_main_prints_given_solution(monkeypatch, capsys):
    solution = Solution(
        iterations=7,
        slope=np.longdouble(0.5),
        error=np.longdouble(-0.25),
        alpha=np.longdouble(12),
        status="exhausted",
    )
    monkeypatch.setattr(cli, "solve", lambda: solution)

    cli.main([])

    assert capsys.readouterr().out == (
        "Total iterations = 7\n"
        "Slope of Line Segment BK = 0.50000000000000000000\n"
        "Angle BKL Error = -0.25000000000000000000\n"
        "Alpha = 12.00000000000000000000\n"
    )


def test_main_shows_construction(capsys):
    cli.main(["--show-construction"])

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0].startswith("Total iterations = ")
    assert "Points:" in lines
    assert "  B: (1.00000000000000000000, 0.00000000000000000000)" in lines
    assert "  C: (0.00000000000000000000, 0.00000000000000000000)" in lines
    assert any(line.startswith("  BK: y = 0.8390996") for line in lines)


def test_main_keeps_logging_off_stdout(capsys):
    cli.main(["--log-level", "DEBUG"])

    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 4
