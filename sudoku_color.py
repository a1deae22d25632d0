# sudoku_color.py
# 9-coloring of the Sudoku graph: quick-color propagation + backtracking.

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from sudoku_graph import (
    BOX,
    CELLS,
    EMPTY,
    SIZE,
    Cell,
    Grid,
    find_dead_cell,
    legal_colors,
    peer_colors,
    saved_state,
)

log = logging.getLogger(__name__)


@dataclass
class SolveResult:
    status: str  # 'solved' | 'no-solution'
    colored: int
    clues: int
    duration_ms: int

    @property
    def solved(self) -> bool:
        return self.status == "solved"


# ---------- vertex selection ----------
def select_next(grid: Grid, after: Optional[Cell] = None) -> Optional[Cell]:
    """
    Next vertex to branch on, scanning row-major strictly after `after`
    (None = from the top). The first empty cell whose number of legal colors
    improves on the running best, which starts at 0, wins. That is the first
    empty cell with any legal color; dead cells are never returned.

    solve() always branches on the first cell, so `after` only serves callers
    that want to scan on from a given position.
    """
    start = -1 if after is None else after[0] * SIZE + after[1]
    for i in range(start + 1, CELLS):
        row, col = divmod(i, SIZE)
        if grid.get(row, col) != EMPTY:
            continue
        options = SIZE - sum(peer_colors(grid, row, col))
        if options > 0:
            return row, col
    return None


# ---------- propagation ----------
def quick_color(grid: Grid) -> int:
    """
    Block-wise hidden singles, repeated to a fixed point.

    For each 3x3 block and each digit we count the empty cells of the block
    that can still take the digit. A digit with exactly one such cell is
    forced there. Returns the colored count after the last productive pass,
    or 0 if nothing was colored.
    """
    progress = 0
    while True:
        # counts[block][d - 1], where[block][d - 1] -> last candidate cell
        counts = [[0] * SIZE for _ in range(SIZE)]
        where: List[List[Tuple[int, int]]] = [[(0, 0)] * SIZE for _ in range(SIZE)]

        for row in range(SIZE):
            for col in range(SIZE):
                if grid.get(row, col) != EMPTY:
                    continue
                block = (row // BOX) * BOX + col // BOX
                for d in legal_colors(grid, row, col):
                    counts[block][d - 1] += 1
                    where[block][d - 1] = (row, col)

        placed = 0
        for block in range(SIZE):
            for k in range(SIZE):
                if counts[block][k] == 1:
                    row, col = where[block][k]
                    # may be refused if an earlier placement in this pass took the cell or the digit
                    if grid.set(row, col, k + 1):
                        placed += 1

        if not placed:
            break
        progress = grid.colored
    return progress


# ---------- search ----------
def is_dead_end(grid: Grid) -> bool:
    """
    True when the grid can no longer be completed: two peers already share a
    color, an empty cell has no legal color, or a block is missing a digit none
    of its empty cells can take. Colorings only accumulate below this point and
    set() never adds a conflict, so none of these recovers.
    """
    clash = grid.conflicts()
    if clash:
        log.debug("%d cells already conflict", len(clash))
        return True

    dead = find_dead_cell(grid)
    if dead is not None:
        log.debug("r%dc%d has no legal color", dead[0] + 1, dead[1] + 1)
        return True

    for block in range(SIZE):
        base_r, base_c = (block // BOX) * BOX, (block % BOX) * BOX
        seen = set()
        for row in range(base_r, base_r + BOX):
            for col in range(base_c, base_c + BOX):
                v = grid.get(row, col)
                if v != EMPTY:
                    seen.add(v)
                else:
                    seen.update(legal_colors(grid, row, col))
        if len(seen) < SIZE:
            log.debug("block %d cannot place %s", block + 1,
                      sorted(set(range(1, SIZE + 1)) - seen))
            return True
    return False


def solve(grid: Grid, depth: int = 0) -> int:
    """
    Color `grid` in place. Returns 81 on success, 0 on failure.

    Propagation is speculative work, so every call runs inside saved_state():
    a failed call leaves the grid exactly as it found it, a successful one
    leaves the finished coloring.
    """
    with saved_state(grid):
        quick_color(grid)
        if grid.is_complete():
            return grid.colored

        if is_dead_end(grid):
            log.debug("%sdead end", "  " * depth)
            return 0

        cell = select_next(grid)
        if cell is None:
            return 0
        row, col = cell

        # Any coloring of this state gives (row, col) one of these digits,
        # so once they are all exhausted the state has no coloring at all.
        for d in legal_colors(grid, row, col):
            if grid.set(row, col, d):
                log.debug("%sguess r%dc%d = %d", "  " * depth, row + 1, col + 1, d)
                if solve(grid, depth + 1):
                    return grid.colored
            log.debug("%sbacktrack r%dc%d != %d", "  " * depth, row + 1, col + 1, d)
            grid.set(row, col, EMPTY)
        return 0


def color_puzzle(grid: Grid) -> SolveResult:
    clues = grid.colored
    start = time.perf_counter()
    log.info("coloring start; %d/%d cells given", clues, CELLS)
    colored = solve(grid)
    duration_ms = int((time.perf_counter() - start) * 1000)
    status = "solved" if colored == CELLS else "no-solution"
    log.info("coloring end in %d ms; %s", duration_ms, status)
    return SolveResult(status=status, colored=grid.colored, clues=clues, duration_ms=duration_ms)
