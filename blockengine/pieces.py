"""The seven block-puzzle pieces, their rotations and spawn offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

PIECE_BLOCKS = 5
NUM_KINDS = 7
NUM_ROTATIONS = 4

# 0: no block, 1: normal block, 2: pivot block.
# Indexed as kind / rotation / row / column.
_SHAPES_TEXT: Tuple[Tuple[Tuple[str, ...], ...], ...] = (
    # Square
    (
        ("00000", "00000", "00210", "00110", "00000"),
        ("00000", "00000", "00210", "00110", "00000"),
        ("00000", "00000", "00210", "00110", "00000"),
        ("00000", "00000", "00210", "00110", "00000"),
    ),
    # I
    (
        ("00000", "00000", "01211", "00000", "00000"),
        ("00000", "00100", "00200", "00100", "00100"),
        ("00000", "00000", "11210", "00000", "00000"),
        ("00100", "00100", "00200", "00100", "00000"),
    ),
    # L
    (
        ("00000", "00100", "00200", "00110", "00000"),
        ("00000", "00000", "01210", "01000", "00000"),
        ("00000", "01100", "00200", "00100", "00000"),
        ("00000", "00010", "01210", "00000", "00000"),
    ),
    # L mirrored
    (
        ("00000", "00100", "00200", "01100", "00000"),
        ("00000", "01000", "01210", "00000", "00000"),
        ("00000", "00110", "00200", "00100", "00000"),
        ("00000", "00000", "01210", "00010", "00000"),
    ),
    # N
    (
        ("00000", "00010", "00210", "00100", "00000"),
        ("00000", "00000", "01200", "00110", "00000"),
        ("00000", "00100", "01200", "01000", "00000"),
        ("00000", "01100", "00210", "00000", "00000"),
    ),
    # N mirrored
    (
        ("00000", "00100", "00210", "00010", "00000"),
        ("00000", "00000", "00210", "01100", "00000"),
        ("00000", "01000", "01200", "00100", "00000"),
        ("00000", "00110", "01200", "00000", "00000"),
    ),
    # T
    (
        ("00000", "00100", "00210", "00100", "00000"),
        ("00000", "00000", "01210", "00100", "00000"),
        ("00000", "00100", "01200", "00100", "00000"),
        ("00000", "00100", "01210", "00000", "00000"),
    ),
)

_SHAPES: Tuple[Tuple[Tuple[Tuple[int, ...], ...], ...], ...] = tuple(
    tuple(tuple(tuple(int(ch) for ch in row) for row in rotation) for rotation in kind)
    for kind in _SHAPES_TEXT
)

# Spawn offsets: kind / rotation / (x, y).
_INITIAL_POSITIONS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((-2, 16), (-2, 16), (-2, 16), (-2, 16)),  # Square
    ((-2, 15), (-2, 16), (-2, 15), (-2, 16)),  # I
    ((-2, 16), (-2, 16), (-2, 16), (-2, 15)),  # L
    ((-2, 16), (-2, 15), (-2, 16), (-2, 16)),  # L mirrored
    ((-2, 16), (-2, 16), (-2, 16), (-2, 15)),  # N
    ((-2, 16), (-2, 16), (-2, 16), (-2, 15)),  # N mirrored
    ((-2, 16), (-2, 16), (-2, 16), (-2, 15)),  # T
)


@dataclass
class Piece:
    """A piece in play: its board position, kind and rotation."""

    x: int = 0
    y: int = 0
    kind: int = 0
    rotation: int = 0


def _check_index(name: str, value: int, limit: int) -> None:
    if not 0 <= value < limit:
        raise IndexError(f"{name} {value} out of range 0..{limit - 1}")


def _check_piece(piece: int, rotation: int) -> None:
    _check_index("piece", piece, NUM_KINDS)
    _check_index("rotation", rotation, NUM_ROTATIONS)


def block_type(piece: int, rotation: int, x: int, y: int) -> int:
    """Block at row ``x``, column ``y`` of a piece: 0 empty, 1 block, 2 pivot."""
    _check_piece(piece, rotation)
    _check_index("x", x, PIECE_BLOCKS)
    _check_index("y", y, PIECE_BLOCKS)
    return _SHAPES[piece][rotation][x][y]


def x_initial_position(piece: int, rotation: int) -> int:
    """Horizontal spawn offset of a piece."""
    _check_piece(piece, rotation)
    return _INITIAL_POSITIONS[piece][rotation][0]


def y_initial_position(piece: int, rotation: int) -> int:
    """Vertical spawn offset of a piece."""
    _check_piece(piece, rotation)
    return _INITIAL_POSITIONS[piece][rotation][1]