import argparse
import logging
import sys
from typing import Optional, Sequence

from trisolve import (
    construct,
    format_construction,
    format_report,
    has_extended_precision,
    solve,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Solve for the BK slope that makes angle BKL equal 50 degrees"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--show-construction",
        action="store_true",
        help="Print the solved construction's points and equations after the report",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if not has_extended_precision():
        logger.warning(
            "numpy.longdouble is no wider than float64 on this platform; "
            "trailing digits may differ from an extended-precision run"
        )

    solution = solve()
    print(format_report(solution))

    if args.show_construction:
        print(format_construction(construct(solution.slope)))


if __name__ == "__main__":
    main(sys.argv[1:])
