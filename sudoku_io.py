# sudoku_io.py
# Puzzle text <-> Grid. A puzzle is the first 81 characters that are a digit
# 1-9 or '-' (blank); everything else (spaces, newlines, '|', ...) is ignored.

import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator, List, Tuple

from sudoku_graph import CELLS, EMPTY, SIZE, Grid

log = logging.getLogger(__name__)

EMPTY_MARK = "-"
DIGITS = "123456789"


@dataclass
class ReadResult:
    cells_read: int = 0
    rejected: List[Tuple[int, int, int]] = field(default_factory=list)  # (row, col, digit)

    @property
    def ok(self) -> bool:
        return self.cells_read == CELLS

    def __bool__(self) -> bool:
        return self.ok


def _qualifying(source: Iterable[str]) -> Iterator[str]:
    # source may yield single characters or whole lines
    for chunk in source:
        for ch in chunk:
            if ch == EMPTY_MARK or ch in DIGITS:
                yield ch


def read_puzzle(source: Iterable[str], grid: Grid) -> ReadResult:
    """
    Fill a fresh `grid` row-major from `source`.

    Cells go through Grid.set, so a clue that clashes with an earlier one is
    refused and the cell stays blank; such clues are logged and listed in
    ReadResult.rejected. Qualifying characters past the 81st are ignored.
    """
    result = ReadResult()
    for n, ch in enumerate(islice(_qualifying(source), CELLS)):
        row, col = divmod(n, SIZE)
        value = EMPTY if ch == EMPTY_MARK else int(ch)
        if not grid.set(row, col, value) and value != EMPTY:
            log.warning("clue %d at r%dc%d conflicts with an earlier clue; dropped",
                        value, row + 1, col + 1)
            result.rejected.append((row, col, value))
        result.cells_read = n + 1
    return result


def read_puzzle_file(path: str, grid: Grid) -> ReadResult:
    with open(path, encoding="utf-8") as f:
        return read_puzzle(f, grid)


def format_grid(grid: Grid) -> str:
    lines = []
    for r in range(SIZE):
        row = []
        for c in range(SIZE):
            v = grid.get(r, c)
            row.append(EMPTY_MARK if v == EMPTY else str(v))
        lines.append(" ".join(row))
    return "\n".join(lines)


def print_grid(grid: Grid) -> None:
    print(format_grid(grid))
