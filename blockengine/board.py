"""The playing field: which cells hold settled blocks."""

from __future__ import annotations

from itertools import product
from typing import Iterator, List, Tuple

from blockengine.pieces import PIECE_BLOCKS, block_type

BOARD_LINE_WIDTH = 6
BLOCK_SIZE = 25
BOARD_POSITION = 225
BOARD_WIDTH = 10
BOARD_HEIGHT = 20
MIN_VERTICAL_MARGIN = 25
MIN_HORIZONTAL_MARGIN = 25


def _piece_blocks(x: int, y: int, piece: int, rotation: int) -> Iterator[Tuple[int, int]]:
    """Board coordinates of the filled blocks of a piece placed at (x, y)."""
    for i2, j2 in product(range(PIECE_BLOCKS), repeat=2):
        if block_type(piece, rotation, j2, i2) != 0:
            yield x + i2, y + j2


class Board:
    """Grid of BOARD_WIDTH columns by BOARD_HEIGHT rows; row 0 is the bottom."""

    def __init__(self, screen_height: int = 0) -> None:
        self.screen_height = screen_height
        self._cells: List[List[bool]] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self._cells = [[False] * BOARD_HEIGHT for _ in range(BOARD_WIDTH)]

    def x_pos_in_pixels(self, pos: int) -> int:
        """Horizontal pixel coordinate of a column."""
        return BOARD_POSITION - BLOCK_SIZE * (BOARD_WIDTH // 2) + pos * BLOCK_SIZE

    def y_pos_in_pixels(self, pos: int) -> int:
        """Vertical pixel coordinate of a row."""
        return pos * BLOCK_SIZE

    def is_free_block(self, x: int, y: int) -> bool:
        """True when the cell at (x, y) holds no block."""
        if not (0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT):
            raise IndexError(f"cell ({x}, {y}) is outside the board")
        return not self._cells[x][y]

    def is_possible_movement(self, x: int, y: int, piece: int, rotation: int) -> bool:
        """True when the piece fits at (x, y) within the walls and floor."""
        for i1, j1 in _piece_blocks(x, y, piece, rotation):
            if i1 < 0 or i1 > BOARD_WIDTH - 1 or j1 < 0:
                return False
            # The top row is deliberately left out of the collision check.
            if j1 < BOARD_HEIGHT - 1 and self._cells[i1][j1]:
                return False
        return True

    def store_piece(self, x: int, y: int, piece: int, rotation: int) -> None:
        """Settle the piece's blocks into the board."""
        blocks = list(_piece_blocks(x, y, piece, rotation))
        for i1, j1 in blocks:
            if not (0 <= i1 < BOARD_WIDTH and 0 <= j1 < BOARD_HEIGHT):
                raise IndexError(f"block ({i1}, {j1}) is outside the board")
        for i1, j1 in blocks:
            self._cells[i1][j1] = True

    def _delete_line(self, y: int) -> None:
        # Rows above move down by one; the top row keeps its content.
        for column in self._cells:
            column[y : BOARD_HEIGHT - 1] = column[y + 1 : BOARD_HEIGHT]

    def delete_possible_lines(self) -> None:
        """Remove every complete row, top to bottom."""
        for y in range(BOARD_HEIGHT - 1, -1, -1):
            if all(column[y] for column in self._cells):
                self._delete_line(y)

    def is_game_over(self) -> bool:
        """True when any block reaches the top row."""
        return any(column[BOARD_HEIGHT - 1] for column in self._cells)