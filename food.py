"""
Размещение еды на свободной клетке.
"""
import numpy as np

from direction import Coordinate


class BoardFull(Exception):
    """Свободных клеток не осталось - еду поставить некуда"""

    def __init__(self, board_size):
        super().__init__(f"no free cell left on a {board_size}x{board_size} board")
        self.board_size = board_size


def place_food(forbidden, board_size, rng=None):
    """
    Случайная свободная клетка (rejection sampling).

    forbidden: клетки, занятые змейкой
    rng: numpy Generator, по умолчанию новый np.random.default_rng()
    """
    if rng is None:
        rng = np.random.default_rng()

    taken = {
        (x, y) for x, y in forbidden
        if 0 <= x < board_size and 0 <= y < board_size
    }
    # Свободных клеток нет - выборка ниже не завершится
    if len(taken) >= board_size * board_size:
        raise BoardFull(board_size)

    while True:
        x, y = rng.integers(0, board_size, size=2)
        cell = (int(x), int(y))
        if cell not in taken:
            return Coordinate(*cell)
