#!/usr/bin/env python3
# sudoku.py
# Solve a 9x9 Sudoku read from a file as a graph-coloring problem.
#
# Usage:
#   python sudoku.py puzzle.txt [--check] [--encoding pairwise|seq|cardnet] [-v]
#   cat puzzle.txt | python sudoku.py -

import argparse
import logging
import sys
from typing import List, Optional

from sudoku_color import color_puzzle
from sudoku_graph import CELLS, Grid
from sudoku_io import read_puzzle, read_puzzle_file, print_grid
from sudoku_pysat import ENCODINGS, check_coloring, count_solutions

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_BAD_INPUT = 1
EXIT_NO_SOLUTION = 2


def _banner(title: str, grid: Grid) -> None:
    print(f"\n{title}:")
    print("-" * 30)
    print_grid(grid)
    print()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Solve a Sudoku puzzle by 9-coloring its constraint graph. "
                    "Digits 1-9 are clues, '-' is a blank, all other characters are ignored.")
    ap.add_argument("puzzle", help="puzzle file ('-' reads stdin)")
    ap.add_argument("--check", action="store_true",
                    help="cross-check the coloring against a SAT solver")
    ap.add_argument("--encoding", default="pairwise", choices=ENCODINGS,
                    help="at-most-one CNF encoding used by --check")
    ap.add_argument("-v", "--verbose", action="store_true", help="trace the search")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    grid = Grid()
    try:
        if args.puzzle == "-":
            result = read_puzzle(sys.stdin, grid)
        else:
            result = read_puzzle_file(args.puzzle, grid)
    except OSError as e:
        log.error("Cannot read %s: %s", args.puzzle, e)
        return EXIT_BAD_INPUT
    if not result:
        log.error("Expected %d cells (digits 1-9 or '-'), found %d", CELLS, result.cells_read)
        return EXIT_BAD_INPUT
    if result.rejected:
        log.warning("%d conflicting clue(s) were dropped while reading", len(result.rejected))

    puzzle = grid.rows()
    _banner("PUZZLE", grid)

    outcome = color_puzzle(grid)

    _banner("SOLUTION", grid)
    if not outcome.solved:
        log.warning("No coloring found (%d of %d cells colored)", outcome.colored, CELLS)

    if args.check:
        n = count_solutions(puzzle, limit=2, encoding=args.encoding)
        log.info("SAT: %s", {0: "UNSAT (no solution)", 1: "unique solution"}.get(n, "multiple solutions"))
        if outcome.solved and n == 1:
            agrees = check_coloring(puzzle, grid.rows(), encoding=args.encoding)
            log.info("SAT cross-check: %s", "coloring agrees" if agrees else "MISMATCH")

    return EXIT_SUCCESS if outcome.solved else EXIT_NO_SOLUTION


if __name__ == "__main__":
    sys.exit(main())
