"""
Клетки, направления и арбитр поворотов.

Heading хранит два поля:
  committed - направление, в котором змейка движется в текущем тике
  pending   - последний принятый поворот, применяется на границе тика
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)


class Coordinate(NamedTuple):
    x: int
    y: int

    def moved(self, direction):
        return Coordinate(self.x + direction.dx, self.y + direction.dy)

    def in_bounds(self, board_size):
        return 0 <= self.x < board_size and 0 <= self.y < board_size


class Direction(Enum):
    # Единичные векторы (dx, dy), y растёт вниз
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return _OPPOSITES[self]

    def is_opposite(self, other):
        return self.opposite is other


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Heading:
    committed: Direction = Direction.RIGHT
    pending: Direction = Direction.RIGHT

    def request(self, requested):
        """
        Запрос поворота. Возвращает (новый Heading, принят ли запрос).

        Разворот проверяется относительно committed, а не pending:
        иначе два быстрых поворота за один тик развернут змейку в шею.
        """
        if requested.is_opposite(self.committed):
            logger.debug("turn %s rejected: reverse of %s", requested.name, self.committed.name)
            return self, False
        if requested is self.pending:
            return self, False
        return replace(self, pending=requested), True

    def commit(self):
        """Граница тика: pending становится committed"""
        if self.committed is self.pending:
            return self
        return Heading(committed=self.pending, pending=self.pending)
