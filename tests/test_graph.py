# tests/test_graph.py
import pytest

from sudoku_graph import (
    EMPTY,
    PEERS,
    Grid,
    find_dead_cell,
    idx,
    interferes,
    legal_colors,
    peer_colors,
    saved_state,
)


def test_new_grid_is_blank():
    g = Grid()
    assert g.colored == 0
    assert all(g.get(r, c) == EMPTY for r in range(9) for c in range(9))
    assert not g.is_complete()


def test_every_vertex_has_twenty_peers_and_never_itself():
    for i, peers in enumerate(PEERS):
        assert len(peers) == 20
        assert i not in peers
    # r5c5 sees its row, its column and the middle box
    peers = set(PEERS[idx(4, 4)])
    assert idx(4, 0) in peers and idx(0, 4) in peers and idx(3, 5) in peers
    assert idx(0, 0) not in peers


def test_set_colors_and_uncolors():
    g = Grid()
    assert g.set(0, 0, 5) is True
    assert g.get(0, 0) == 5
    assert g.colored == 1

    assert g.set(0, 0, EMPTY) is False
    assert g.get(0, 0) == EMPTY
    assert g.colored == 0


def test_set_rejects_digit_already_used_by_a_peer():
    g = Grid()
    assert g.set(0, 0, 5)
    assert g.set(0, 7, 5) is False  # same row
    assert g.set(6, 0, 5) is False  # same column
    assert g.set(2, 2, 5) is False  # same box
    assert g.get(0, 7) == g.get(6, 0) == g.get(2, 2) == EMPTY
    assert g.colored == 1
    assert g.set(4, 4, 5) is True


def test_same_state_and_overwrite_are_no_ops():
    g = Grid()
    assert g.set(3, 3, 7)
    assert g.set(3, 3, 7) is False
    assert g.set(3, 3, 8) is False
    assert g.get(3, 3) == 7
    assert g.colored == 1

    assert g.set(4, 4, EMPTY) is False
    assert g.colored == 1


def test_color_then_uncolor_restores_count():
    g = Grid()
    for col, d in enumerate([1, 2, 3]):
        g.set(0, col, d)
    before = g.colored
    assert g.set(5, 5, 9)
    g.set(5, 5, EMPTY)
    assert g.colored == before


def test_peer_colors_sees_row_col_and_box_only():
    g = Grid()
    assert g.set(0, 0, 7)  # the cell itself
    assert g.set(0, 1, 1)  # box + row
    assert g.set(1, 0, 2)  # box + column
    assert g.set(2, 2, 3)  # box
    assert g.set(0, 8, 4)  # row
    assert g.set(8, 0, 5)  # column
    assert g.set(8, 8, 6)  # not a peer

    used = peer_colors(g, 0, 0)
    assert used == [True, True, True, True, True, False, False, False, False]
    assert legal_colors(g, 0, 0) == [6, 7, 8, 9]
    assert not interferes(g, 0, 0)
    assert not interferes(g, 4, 4)  # empty cells never interfere


def test_from_rows_keeps_contradictions(contradictory_rows):
    g = Grid.from_rows(contradictory_rows)
    assert g.colored == 80
    assert g.get(0, 0) == g.get(0, 2) == 5
    assert interferes(g, 0, 2)
    assert g.conflicts() == [(0, 0), (0, 2)]
    assert g.rows() == contradictory_rows


def test_from_rows_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Grid.from_rows([[0] * 9] * 8)
    with pytest.raises(ValueError):
        Grid.from_rows([[10] + [0] * 8] + [[0] * 9] * 8)


def test_solved_grid_has_no_conflicts(classic_solution):
    g = Grid.from_rows(classic_solution)
    assert g.is_complete()
    assert g.conflicts() == []


def test_find_dead_cell():
    rows = [[0] * 9 for _ in range(9)]
    rows[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    rows[1][0] = 9
    g = Grid.from_rows(rows)
    assert find_dead_cell(g) == (0, 0)
    assert find_dead_cell(Grid()) is None


def test_snapshot_is_independent():
    g = Grid()
    g.set(0, 0, 1)
    snap = g.snapshot()
    g.set(0, 1, 2)
    assert snap.get(0, 1) == EMPTY
    assert snap.colored == 1

    g.restore(snap)
    assert g.get(0, 1) == EMPTY
    assert g.colored == 1


def test_saved_state_rolls_back_incomplete_grid():
    g = Grid()
    g.set(0, 0, 1)
    with saved_state(g):
        g.set(0, 1, 2)
        g.set(4, 4, 3)
    assert g.rows() == Grid.from_rows([[1] + [0] * 8] + [[0] * 9] * 8).rows()
    assert g.colored == 1


def test_saved_state_keeps_completed_grid(classic_solution):
    rows = [row[:] for row in classic_solution]
    rows[8][8] = 0
    g = Grid.from_rows(rows)
    with saved_state(g):
        assert g.set(8, 8, 9)
    assert g.is_complete()
    assert g.rows() == classic_solution


def test_saved_state_rolls_back_on_error():
    g = Grid()
    with pytest.raises(RuntimeError):
        with saved_state(g):
            g.set(0, 0, 1)
            raise RuntimeError("boom")
    assert g.colored == 0
    assert g.get(0, 0) == EMPTY
