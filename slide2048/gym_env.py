import random

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .board import SIZE
from .game import Direction, Game
from .display import draw_table

ACTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


class Slide2048Env(gym.Env):
    """Headless driver for a Game: one action is one directional command."""

    metadata = {"render_modes": ["human"]}

    def __init__(self, size: int = SIZE):
        super().__init__()
        self.n = size
        self.action_space = spaces.Discrete(len(ACTIONS))
        self.observation_space = spaces.Box(low=0, high=1, shape=(size * size,), dtype=np.float32)
        self.game = Game(size)

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng = random.Random(seed)
        self.game.reset()
        return self._get_obs(), {}

    def step(self, action):
        gained = self.game.apply_direction(ACTIONS[int(action)])
        terminated = self.game.is_over()
        board = self.game.get_state()
        info = {
            "score": self.game.score,
            "max_tile": int(np.max(board)),
            "empty_tiles": int(np.count_nonzero(board == 0)),
            "moves": self.game.move_count,
        }
        return self._get_obs(), float(gained), terminated, False, info

    def _get_obs(self):
        board = self.game.get_state()
        with np.errstate(divide='ignore'):
            obs = np.where(board > 0, np.log2(board) / 11, 0)
        return np.clip(obs.flatten(), 0, 1).astype(np.float32)

    def render(self):
        print(f"Score: {self.game.score}")
        print("\n".join(draw_table(self.game.snapshot())))

    def close(self):
        pass
