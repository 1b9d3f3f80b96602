import pytest

from tetris_controller import ActivePieceController
from tetris_piece import Piece, colored_shape, rotate_cw


def make(t, x=3, y=0):
    return Piece(t, colored_shape(t), x, y)


@pytest.fixture
def ctl(board):
    return ActivePieceController(board)


def cells(piece):
    return sorted((x, y) for x, y, _ in piece.cells())


def test_spawn_into_occupied_region_fails(board, ctl):
    for y in range(4):
        for x in range(board.width):
            board.fix_square(x, y, "red")
    for t in "IJLOSTZ":
        assert not ctl.spawn(make(t))
    assert ctl.piece is None


def test_spawn_fails_on_single_overlap(board, ctl):
    board.fix_square(4, 0, "red")
    assert not ctl.spawn(make("T"))
    assert ctl.spawn(make("O"))


def test_gravity_moves_piece_down(ctl):
    ctl.spawn(make("T"))
    assert ctl.gravity_step() is False
    assert ctl.piece.y == 1


def test_piece_lands_at_floor(board, ctl):
    ctl.spawn(make("O", y=18))
    assert ctl.gravity_step() is False
    assert cells(ctl.piece) == [(4, 20), (4, 21), (5, 20), (5, 21)]

    assert ctl.gravity_step() is True
    assert ctl.piece is None
    assert sorted((s.x, s.y) for s in board.fixed_squares()) == [(4, 20), (4, 21), (5, 20), (5, 21)]
    assert all(s.color == "yellow" for s in board.fixed_squares())
    for x, y in [(4, 20), (4, 21), (5, 20), (5, 21)]:
        assert board.is_fixed(x, y)


def test_piece_lands_on_fixed_square(board, ctl):
    board.fix_square(4, 3, "red")
    ctl.spawn(make("T"))
    ctl.gravity_step()
    assert ctl.piece.y == 1
    # bottom row of the T is at y=2, right above (4, 3)
    assert ctl.gravity_step() is True
    assert (4, 2) in [(s.x, s.y) for s in board.fixed_squares()]


def test_gravity_without_piece_is_noop(ctl):
    assert ctl.gravity_step() is False


def test_sideways_move(ctl):
    ctl.spawn(make("T"))
    assert ctl.move_sideways(-1)
    assert ctl.piece.x == 2
    assert ctl.move_sideways(1)
    assert ctl.move_sideways(1)
    assert ctl.piece.x == 4


def test_sideways_move_is_all_or_nothing(board, ctl):
    # T cells: (4, 0), (3, 1), (4, 1), (5, 1); the top cell could move left, (3, 1) cannot
    board.fix_square(2, 1, "red")
    ctl.spawn(make("T"))
    before = cells(ctl.piece)
    assert not ctl.move_sideways(-1)
    assert ctl.piece.x == 3
    assert cells(ctl.piece) == before


def test_sideways_move_stops_at_walls(ctl):
    ctl.spawn(make("I", x=0))
    assert not ctl.move_sideways(-1)
    assert ctl.piece.x == 0
    for _ in range(6):
        assert ctl.move_sideways(1)
    assert not ctl.move_sideways(1)
    assert max(x for x, _ in cells(ctl.piece)) == 9


def test_rotate_replaces_shape(ctl):
    piece = make("T")
    ctl.spawn(piece)
    original = piece.shape
    assert ctl.rotate()
    assert piece.shape == rotate_cw(original)
    for _ in range(3):
        ctl.rotate()
    assert piece.shape == original


def test_rotate_may_overlap_fixed_squares(board, ctl):
    board.fix_square(4, 2, "red")
    ctl.spawn(make("T"))
    assert ctl.rotate()
    assert (4, 2) in cells(ctl.piece)


def test_rotate_refuses_to_leave_board(ctl):
    piece = make("I", y=19)
    ctl.spawn(piece)
    shape = piece.shape
    # the vertical I would reach row 22
    assert not ctl.rotate()
    assert piece.shape == shape


def test_rotate_without_piece(ctl):
    assert not ctl.rotate()
    assert not ctl.move_sideways(1)
    assert ctl.squares() == []
