"""Santa Pairing entry point."""

# Santa Pairing
# Copyright (C) 2025  Santa Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import sys
from typing import List, Optional

from santapairing.constants import MAX_GENERATION_ATTEMPTS
from santapairing.generator import generate_pairings
from santapairing.models import (
    CycleOperator,
    EqualCycles,
    Hamiltonian,
    InequalityCycles,
    Pairing,
    Shape,
    Unconstrained,
)
from santapairing.utils import format_cycles, format_pairings, setup_logger
from santapairing.validation import detect_duplicates

logger = setup_logger(__name__)


def parse_constraint(text: str) -> Pairing:
    """Parse "giver:receiver" into a Pairing.

    Raises
    ------
    argparse.ArgumentTypeError
        When either side is missing
    """
    giver, sep, receiver = text.partition(":")
    if not sep or not giver.strip() or not receiver.strip():
        raise argparse.ArgumentTypeError(
            f"expected GIVER:RECEIVER, got {text!r}"
        )
    return Pairing(giver.strip(), receiver.strip())


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="santa-pairing",
        description="Generate Secret Santa pairings with cycle constraints.",
    )
    parser.add_argument("participants", nargs="+", help="Participant names")

    shape = parser.add_mutually_exclusive_group()
    shape.add_argument(
        "--hamiltonian",
        action="store_true",
        help="One cycle through every participant",
    )
    shape.add_argument(
        "--equal", type=int, metavar="N", help="Cycles of exactly N participants"
    )
    shape.add_argument(
        "--greater", type=int, metavar="N", help="Cycles longer than N"
    )
    shape.add_argument("--less", type=int, metavar="N", help="Cycles shorter than N")

    parser.add_argument(
        "--ban",
        type=parse_constraint,
        action="append",
        default=[],
        metavar="GIVER:RECEIVER",
        help="Pairing to avoid, may be repeated",
    )
    parser.add_argument(
        "--force",
        type=parse_constraint,
        action="append",
        default=[],
        metavar="GIVER:RECEIVER",
        help="Pairing that must be included, may be repeated",
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible pairings")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=MAX_GENERATION_ATTEMPTS,
        help="Attempt budget (default: %(default)s)",
    )
    parser.add_argument(
        "--show-cycles", action="store_true", help="Also print the cycles"
    )
    return parser


def shape_from_args(args: argparse.Namespace) -> Shape:
    """Pick the shape constraint selected on the command line."""
    if args.hamiltonian:
        return Hamiltonian()
    if args.equal is not None:
        return EqualCycles(args.equal)
    if args.greater is not None:
        return InequalityCycles(args.greater, CycleOperator.GREATER)
    if args.less is not None:
        return InequalityCycles(args.less, CycleOperator.LESS)
    return Unconstrained()


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Run the command line.

    Returns
    -------
    int
        0 when a perfect assignment was found, 1 otherwise
    """
    args = build_parser().parse_args(argv)

    for duplicate in detect_duplicates(args.participants):
        logger.warning(
            "%s duplicate participant: %s at %s",
            "Exact" if duplicate.is_exact else "Near",
            duplicate.value,
            duplicate.indices,
        )

    result = generate_pairings(
        args.participants,
        shape_from_args(args),
        banned_pairings=args.ban,
        forced_pairings=args.force,
        max_attempts=args.max_attempts,
        seed=args.seed,
    )

    if result.pairings:
        print(format_pairings(result))
    if args.show_cycles and result.cycles:
        print()
        print(format_cycles(result, args.participants))
    if result.warning:
        print(f"Warning: {result.warning}")

    return 0 if result.success else 1


def main():
    """Entry point."""
    exit_code = run_cli()
    logger.info("run_cli() exited with code: %s", exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
