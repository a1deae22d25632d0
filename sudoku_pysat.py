# sudoku_pysat.py
# Independent check of the coloring engine: encode the puzzle to CNF and let
# PySAT find (and count) its solutions.
# Requires: pip install python-sat

import logging
from typing import List, Optional, Sequence

from pysat.card import CardEnc, EncType
from pysat.formula import CNF
from pysat.solvers import Solver

log = logging.getLogger(__name__)

Rows = List[List[int]]

# ----- core mapping: (row, col, digit) -> SAT var id in [1..729]
def vid(r: int, c: int, d: int) -> int:
    # r,c,d are 1-based (1..9)
    return (r - 1) * 81 + (c - 1) * 9 + d

N_PRIMARY = 9 * 9 * 9

# friendly name -> pysat's EncType for the at-most-one half of "exactly one"
_ENC_MAP = {
    "pairwise": EncType.pairwise,     # O(n^2) binary AMO, no aux vars
    "seq": EncType.seqcounter,        # sequential/ladder AMO, linear size + aux vars
    "cardnet": EncType.cardnetwrk,    # cardinality/sorting networks, strong + aux vars
}
ENCODINGS = sorted(_ENC_MAP)

def _exactly_one(cnf: CNF, lits: List[int], enc: int) -> None:
    """Add CNF for sum(lits) == 1: one ALO clause plus the chosen AMO encoding."""
    cnf.append(lits[:])
    if enc == EncType.pairwise:
        for i in range(len(lits)):
            for j in range(i + 1, len(lits)):
                cnf.append([-lits[i], -lits[j]])
    else:
        # aux vars must not collide with the 729 primary ones
        amo = CardEnc.atmost(lits=lits, bound=1, top_id=max(cnf.nv, N_PRIMARY), encoding=enc)
        cnf.extend(amo.clauses)

def puzzle_cnf(rows: Sequence[Sequence[int]], encoding: str = "pairwise") -> CNF:
    """
    Standard Sudoku CNF for a 9x9 grid (0 = blank, 1..9 = clue).
    Clues become unit clauses, so contradictory clues make the formula UNSAT.
    """
    if encoding not in _ENC_MAP:
        raise ValueError(f"Unknown encoding: {encoding}")
    enc = _ENC_MAP[encoding]
    cnf = CNF()

    # 1) Exactly one digit per cell
    for r in range(1, 10):
        for c in range(1, 10):
            _exactly_one(cnf, [vid(r, c, d) for d in range(1, 10)], enc)

    # 2) For each row r and digit d, exactly one column c
    for r in range(1, 10):
        for d in range(1, 10):
            _exactly_one(cnf, [vid(r, c, d) for c in range(1, 10)], enc)

    # 3) For each column c and digit d, exactly one row r
    for c in range(1, 10):
        for d in range(1, 10):
            _exactly_one(cnf, [vid(r, c, d) for r in range(1, 10)], enc)

    # 4) For each 3x3 box and digit d, exactly one cell
    for br in range(0, 3):
        for bc in range(0, 3):
            box_rows = range(3 * br + 1, 3 * br + 4)
            box_cols = range(3 * bc + 1, 3 * bc + 4)
            for d in range(1, 10):
                _exactly_one(cnf, [vid(r, c, d) for r in box_rows for c in box_cols], enc)

    # 5) Clues as unit clauses
    for r0 in range(9):
        for c0 in range(9):
            d = rows[r0][c0]
            if d:
                cnf.append([vid(r0 + 1, c0 + 1, d)])

    log.debug("CNF (%s): %d vars, %d clauses", encoding, cnf.nv, len(cnf.clauses))
    return cnf

def decode_model(model_pos) -> Rows:
    """Turn a model (set of positive ints) into a 9x9 grid."""
    out = [[0] * 9 for _ in range(9)]
    for r in range(1, 10):
        for c in range(1, 10):
            for d in range(1, 10):
                if vid(r, c, d) in model_pos:
                    out[r - 1][c - 1] = d
                    break
    return out

def sat_solutions(
    rows: Sequence[Sequence[int]],
    *,
    max_solutions: Optional[int] = 2,
    encoding: str = "pairwise",
) -> List[Rows]:
    """
    Enumerate solutions (up to max_solutions; None = no cap).
    An empty list means the puzzle is UNSAT.
    """
    cnf = puzzle_cnf(rows, encoding)
    solutions: List[Rows] = []
    with Solver(name="g3", bootstrap_with=cnf.clauses) as s:
        while s.solve():
            model = s.get_model()
            model_pos = {l for l in model if 0 < l <= N_PRIMARY}
            solutions.append(decode_model(model_pos))

            # Block only the primary vars that are True so aux vars can't
            # make the same Sudoku solution show up twice.
            s.add_clause([-l for l in model_pos])

            if max_solutions is not None and len(solutions) >= max_solutions:
                break
    log.debug("SAT: %d solution(s) found", len(solutions))
    return solutions

def count_solutions(rows: Sequence[Sequence[int]], limit: int = 2, encoding: str = "pairwise") -> int:
    """0 (UNSAT), 1 (unique) or `limit` meaning "at least that many"."""
    return len(sat_solutions(rows, max_solutions=limit, encoding=encoding))

def check_coloring(puzzle: Sequence[Sequence[int]], colored: Sequence[Sequence[int]],
                   encoding: str = "pairwise") -> bool:
    """True iff the puzzle has a unique solution and `colored` is it."""
    sols = sat_solutions(puzzle, max_solutions=2, encoding=encoding)
    if len(sols) != 1:
        return False
    return [list(row) for row in colored] == sols[0]
