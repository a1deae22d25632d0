# sudoku_graph.py
# A 9x9 Sudoku as a graph of 81 vertices to be 9-colored.
# Two vertices are adjacent when they share a row, a column or a 3x3 box.

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
EMPTY = 0  # uncolored vertex; digits 1..9 are the colors

Cell = Tuple[int, int]


# ----- indexing: (row, col) in 0..8 x 0..8 -> vertex index 0..80
def idx(row: int, col: int) -> int:
    return row * SIZE + col

def box_origin(row: int, col: int) -> Cell:
    """Top-left cell of the 3x3 box holding (row, col)."""
    return (row // BOX) * BOX, (col // BOX) * BOX

def _peers(row: int, col: int) -> Tuple[int, ...]:
    base_r, base_c = box_origin(row, col)
    found = set()
    for i in range(SIZE):
        found.add(idx(row, i))
        found.add(idx(i, col))
    for r in range(base_r, base_r + BOX):
        for c in range(base_c, base_c + BOX):
            found.add(idx(r, c))
    found.discard(idx(row, col))
    return tuple(sorted(found))

# PEERS[i] = the 20 vertices adjacent to vertex i (never i itself)
PEERS: List[Tuple[int, ...]] = [_peers(r, c) for r in range(SIZE) for c in range(SIZE)]


class Grid:
    """
    The coloring state: 81 cells (EMPTY or a digit) and the number of
    colored cells. `colored` only stays in sync when cells are changed
    through set(), from_rows() or restore().
    """

    def __init__(self) -> None:
        self.cells: List[int] = [EMPTY] * CELLS
        self.colored = 0

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """
        Load a 9x9 matrix (0 = blank) as-is, without any legality check.
        Contradictory clues are kept; see conflicts().
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Expected a 9x9 grid")
        grid = cls()
        for r, row in enumerate(rows):
            for c, v in enumerate(row):
                if not (v == EMPTY or 1 <= v <= SIZE):
                    raise ValueError(f"Cell ({r},{c}) value {v} out of range 1..{SIZE}")
                grid.cells[idx(r, c)] = v
        grid.colored = sum(1 for v in grid.cells if v != EMPTY)
        return grid

    def rows(self) -> List[List[int]]:
        return [self.cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def get(self, row: int, col: int) -> int:
        return self.cells[idx(row, col)]

    def set(self, row: int, col: int, value: int) -> bool:
        """
        Color or uncolor a vertex. Returns True only for a new, legal coloring.

        - EMPTY over a digit uncolors the cell (returns False).
        - A digit over EMPTY colors the cell unless a peer already holds
          that digit, in which case the cell is left empty.
        - Anything else (same value, digit over digit) is a no-op.
        """
        i = idx(row, col)
        old = self.cells[i]

        if value == EMPTY and old != EMPTY:
            self.cells[i] = EMPTY
            self.colored -= 1
            return False

        if value != EMPTY and old == EMPTY:
            self.cells[i] = value
            if interferes(self, row, col):
                self.cells[i] = old
                return False
            self.colored += 1
            return True

        return False

    def is_complete(self) -> bool:
        return self.colored == CELLS

    def conflicts(self) -> List[Cell]:
        """Colored cells whose digit is also held by one of their peers."""
        return [(r, c) for r in range(SIZE) for c in range(SIZE) if interferes(self, r, c)]

    # ----- state save/restore
    def snapshot(self) -> "Grid":
        copy = Grid()
        copy.cells = self.cells[:]
        copy.colored = self.colored
        return copy

    def restore(self, snapshot: "Grid") -> None:
        self.cells[:] = snapshot.cells
        self.colored = snapshot.colored


@contextmanager
def saved_state(grid: Grid) -> Iterator[Grid]:
    """
    Snapshot `grid` for the duration of the block. On exit the snapshot is
    written back unless the grid has been fully colored in the meantime.
    """
    top = grid.snapshot()
    try:
        yield top
    finally:
        if not grid.is_complete():
            grid.restore(top)


# ----- adjacency
def peer_colors(grid: Grid, row: int, col: int) -> List[bool]:
    """used[d - 1] is True when some peer of (row, col) is colored d."""
    used = [False] * SIZE
    cells = grid.cells
    for p in PEERS[idx(row, col)]:
        v = cells[p]
        if v != EMPTY:
            used[v - 1] = True
    return used

def legal_colors(grid: Grid, row: int, col: int) -> List[int]:
    used = peer_colors(grid, row, col)
    return [d for d in range(1, SIZE + 1) if not used[d - 1]]

def interferes(grid: Grid, row: int, col: int) -> bool:
    v = grid.get(row, col)
    if v == EMPTY:
        return False
    return peer_colors(grid, row, col)[v - 1]

def find_dead_cell(grid: Grid) -> Optional[Cell]:
    """First empty cell (row-major) whose peers already use all 9 colors."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid.get(r, c) == EMPTY and all(peer_colors(grid, r, c)):
                return r, c
    return None
