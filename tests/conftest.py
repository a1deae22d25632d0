import pytest

# Well-known puzzle with a unique solution ('-' = blank)
CLASSIC = """
53- -7- ---
6-- 195 ---
-98 --- -6-

8-- -6- --3
4-- 8-3 --1
7-- -2- --6

-6- --- 28-
--- 419 --5
--- -8- -79
"""

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# 17 clues (the minimum for a unique solution)
SEVENTEEN = "-------1-4---------2-----------5-4-7--8---3----1-9----3--4--2---5-1--------8-6---"


@pytest.fixture
def classic_text():
    return CLASSIC


@pytest.fixture
def classic_rows():
    rows = [[0] * 9 for _ in range(9)]
    cells = [ch for ch in CLASSIC if ch == "-" or ch.isdigit()]
    for i, ch in enumerate(cells):
        if ch != "-":
            rows[i // 9][i % 9] = int(ch)
    return rows


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def seventeen_text():
    return SEVENTEEN


@pytest.fixture
def contradictory_rows():
    """The classic solution with a second 5 in row 1 and a blank that can no longer be colored."""
    rows = [row[:] for row in CLASSIC_SOLUTION]
    rows[0][2] = 5
    rows[8][2] = 0
    return rows
