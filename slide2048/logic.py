import random
from typing import Tuple

SPAWN_FOUR_PROBABILITY = 0.1


def check_position(x: int, y: int, size: int) -> bool:
    return 0 <= x < size and 0 <= y < size


def random_position(size: int, rng=random) -> Tuple[int, int]:
    """Uniformly pick a (row, col) on a size x size grid."""
    idx = rng.randrange(size * size)
    return idx // size, idx % size


def new_tile(rng=random) -> int:
    return 4 if rng.random() < SPAWN_FOUR_PROBABILITY else 2
