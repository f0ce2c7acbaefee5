import numpy as np
from typing import Optional, Tuple

from .logic import check_position

SIZE = 4

Snapshot = Tuple[Tuple[Optional[int], ...], ...]


class Board:
    """
    Square grid of tile values plus a counter of occupied cells.

    The board only knows how to slide a row to the left. Every other
    direction is built on top of it by the controller with transpose()
    and reverse_row().
    """

    def __init__(self, size: int = SIZE):
        self.size = size
        self.tiles = np.zeros((size, size), dtype=int)
        self.filled = 0

    def get_tiles(self) -> np.ndarray:
        return self.tiles

    def get_tile(self, x: int, y: int) -> Optional[int]:
        """Tile value at row x, column y; None if empty or off the board."""
        if not check_position(x, y, self.size):
            return None
        value = int(self.tiles[x, y])
        return value if value != 0 else None

    def set_tile(self, x: int, y: int, val: int):
        # A full board refuses writes so a spawn can never go past capacity
        if self.is_full():
            return
        if not check_position(x, y, self.size):
            return
        previous = self.tiles[x, y]
        if previous == 0 and val != 0:
            self.filled += 1
        elif previous != 0 and val == 0:
            self.filled -= 1
        self.tiles[x, y] = val

    def clear(self):
        self.filled = 0
        self.tiles.fill(0)

    def occupancy(self) -> int:
        return self.filled

    def set_occupancy(self, val: int):
        self.filled = max(0, min(val, self.size * self.size))

    def recount(self) -> int:
        """Recompute the occupied-cell counter from the grid."""
        self.filled = int(np.count_nonzero(self.tiles))
        return self.filled

    def is_full(self) -> bool:
        return self.filled == self.size * self.size

    def has_any_legal_move(self) -> bool:
        """
        True if some row still has an empty cell, or two orthogonal
        neighbours hold the same value.
        """
        if np.any(np.count_nonzero(self.tiles, axis=1) != self.size):
            return True
        if np.any(self.tiles[:, :-1] == self.tiles[:, 1:]):
            return True
        if np.any(self.tiles[:-1, :] == self.tiles[1:, :]):
            return True
        return False

    def transpose(self):
        # after transposing and reversing, every slide becomes a slide left
        self.tiles[:] = self.tiles.T.copy()

    def reverse_row(self, idx: int):
        if 0 <= idx < self.size:
            self.tiles[idx] = self.tiles[idx, ::-1].copy()

    def slide_row_left(self, idx: int) -> int:
        """Slide and merge row idx to the left, return the score gained."""
        if not 0 <= idx < self.size:
            return 0

        line = [int(v) for v in self.tiles[idx] if v != 0]
        score_gain = 0

        # single pass: a freshly merged tile is not compared again
        for i in range(len(line) - 1):
            if line[i] == line[i + 1]:
                line[i] *= 2
                line[i + 1] = 0
                score_gain += line[i]

        line = [v for v in line if v != 0]
        while len(line) < self.size:
            line.append(0)

        self.tiles[idx] = line
        return score_gain

    def snapshot(self) -> Snapshot:
        return tuple(
            tuple(int(v) if v != 0 else None for v in row)
            for row in self.tiles
        )
