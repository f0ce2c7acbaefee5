import random
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .board import SIZE, Board, Snapshot
from .logic import new_tile, random_position


class Direction(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


class Command(Enum):
    """Abstract player commands, delivered one at a time by the input layer."""
    SLIDE_UP = 'slide_up'
    SLIDE_DOWN = 'slide_down'
    SLIDE_LEFT = 'slide_left'
    SLIDE_RIGHT = 'slide_right'
    RESTART = 'restart'
    QUIT = 'quit'

    @property
    def direction(self) -> Optional[Direction]:
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS = {
    Command.SLIDE_UP: Direction.UP,
    Command.SLIDE_DOWN: Direction.DOWN,
    Command.SLIDE_LEFT: Direction.LEFT,
    Command.SLIDE_RIGHT: Direction.RIGHT,
}

# Every direction is reduced to sliding rows left.
# 'reverse' and 'slide' are applied to every row of the board.
PIPELINES: Dict[Direction, Tuple[str, ...]] = {
    Direction.LEFT: ('slide',),
    Direction.RIGHT: ('reverse', 'slide', 'reverse'),
    Direction.UP: ('transpose', 'slide', 'transpose'),
    Direction.DOWN: ('transpose', 'reverse', 'slide', 'reverse', 'transpose'),
}


class Game:
    """
    One game session: a board, the running score and the move counter.

    The session is a plain object handed to whatever drives it (the terminal
    loop in play.py or the gym environment); nothing here is global.
    """

    def __init__(self, size: int = SIZE, rng: Optional[random.Random] = None):
        self.n = size
        self.board = Board(size)
        self.score = 0
        self.move_count = 0
        self.rng = rng if rng is not None else random.Random()

    def start(self) -> Snapshot:
        """Place the opening tile and return the first snapshot to draw."""
        self.spawn_tile()
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        return self.board.snapshot()

    def _run_pipeline(self, direction: Direction) -> int:
        gained = 0
        for step in PIPELINES[direction]:
            if step == 'transpose':
                self.board.transpose()
            elif step == 'reverse':
                for i in range(self.n):
                    self.board.reverse_row(i)
            else:
                for i in range(self.n):
                    gained += self.board.slide_row_left(i)
        return gained

    def apply_direction(self, direction: Union[Direction, str]) -> int:
        """
        Slide the whole board in the given direction.
        Returns the score gained by merges during this move.
        """
        direction = Direction(direction)

        gained = self._run_pipeline(direction)
        self.score += gained
        self.move_count += 1

        # the spawn write bumps the counter itself, so only the recount is needed
        self.board.recount()
        if not self.board.is_full():
            self.spawn_tile()

        return gained

    def spawn_tile(self) -> Optional[Tuple[int, int, int]]:
        """Add a random tile and return (row, col, value) or None if no space."""
        if self.board.is_full():
            return None
        while True:
            x, y = random_position(self.n, self.rng)
            if self.board.get_tile(x, y) is None:
                val = new_tile(self.rng)
                self.board.set_tile(x, y, val)
                return x, y, val

    def is_over(self) -> bool:
        return self.board.is_full() and not self.board.has_any_legal_move()

    def reset(self):
        """Reset the game to initial state."""
        self.board.clear()
        self.score = 0
        self.move_count = 0
        self.spawn_tile()

    def handle(self, command: Command) -> bool:
        """Apply one command. Returns False once the session should stop."""
        if command is Command.QUIT:
            return False
        if command is Command.RESTART:
            self.reset()
            return True
        self.apply_direction(command.direction)
        return not self.is_over()

    def get_state(self):
        """Get current board state as numpy array."""
        return self.board.get_tiles().copy()
