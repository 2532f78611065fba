from itertools import product

import pytest

from blockengine.pieces import (
    NUM_KINDS,
    NUM_ROTATIONS,
    PIECE_BLOCKS,
    Piece,
    block_type,
    x_initial_position,
    y_initial_position,
)


def _cells(piece, rotation):
    return [
        block_type(piece, rotation, x, y)
        for x, y in product(range(PIECE_BLOCKS), repeat=2)
    ]


@pytest.mark.parametrize(
    "piece,rotation", list(product(range(NUM_KINDS), range(NUM_ROTATIONS)))
)
def test_every_shape_has_four_blocks_and_one_pivot(piece, rotation):
    cells = _cells(piece, rotation)
    assert sum(1 for c in cells if c != 0) == 4
    assert cells.count(2) == 1


@pytest.mark.parametrize(
    "piece,rotation", list(product(range(NUM_KINDS), range(NUM_ROTATIONS)))
)
def test_pivot_is_at_centre(piece, rotation):
    assert block_type(piece, rotation, 2, 2) == 2


def test_square_shape():
    assert block_type(0, 0, 2, 3) == 1
    assert block_type(0, 0, 3, 2) == 1
    assert block_type(0, 0, 3, 3) == 1
    assert block_type(0, 0, 1, 2) == 0


def test_square_rotations_are_identical():
    assert _cells(0, 0) == _cells(0, 1) == _cells(0, 2) == _cells(0, 3)


def test_i_piece_horizontal_row():
    assert [block_type(1, 0, 2, y) for y in range(PIECE_BLOCKS)] == [0, 1, 2, 1, 1]


def test_initial_positions():
    assert all(
        x_initial_position(p, r) == -2
        for p, r in product(range(NUM_KINDS), range(NUM_ROTATIONS))
    )
    assert y_initial_position(1, 0) == 15
    assert y_initial_position(1, 1) == 16
    assert y_initial_position(6, 3) == 15


@pytest.mark.parametrize(
    "args", [(7, 0, 0, 0), (0, 4, 0, 0), (0, 0, 5, 0), (0, 0, 0, -1), (-1, 0, 0, 0)]
)
def test_block_type_out_of_range(args):
    with pytest.raises(IndexError):
        block_type(*args)


def test_initial_position_out_of_range():
    with pytest.raises(IndexError):
        x_initial_position(0, 4)
    with pytest.raises(IndexError):
        y_initial_position(7, 0)


def test_piece_holds_its_fields():
    piece = Piece(x=3, y=16, kind=2, rotation=1)
    piece.y -= 1
    assert (piece.x, piece.y, piece.kind, piece.rotation) == (3, 15, 2, 1)