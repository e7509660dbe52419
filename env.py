"""
Среда змейки: движение, столкновения, еда.

Состояние мира неизменяемое (SnakeWorld), каждый тик возвращает новый мир.

Матрица мира (world_grid):
  0 = пусто
  1 = тело змейки
  2 = еда
  7 = голова
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

import numpy as np

import scoring
from config import GameConfig
from direction import Coordinate, Direction, Heading
from food import BoardFull, place_food

logger = logging.getLogger(__name__)

EMPTY = 0
BODY = 1
FOOD = 2
HEAD = 7


class TickOutcome(Enum):
    CONTINUED = "continued"
    ATE = "ate"
    COLLIDED = "collided"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class SnakeWorld:
    snake: tuple            # Coordinate, голова первая
    heading: Heading
    food: Optional[Coordinate]
    score: int = 0
    speed_level: int = 0
    steps: int = 0

    def __post_init__(self):
        object.__setattr__(self, "snake", tuple(Coordinate(*cell) for cell in self.snake))
        if self.food is not None:
            object.__setattr__(self, "food", Coordinate(*self.food))

    @property
    def head(self):
        return self.snake[0]

    @property
    def length(self):
        return len(self.snake)


@dataclass(frozen=True)
class TickResult:
    world: SnakeWorld
    outcome: TickOutcome
    collision: Optional[str] = None   # "wall" | "self"


def initial_snake(config):
    """Горизонтальная змейка в центре, голова справа: [(9,10),(8,10),(7,10)] для 20x20"""
    head_x = config.board_size // 2 - 1
    head_y = config.board_size // 2
    return tuple(Coordinate(head_x - i, head_y) for i in range(config.initial_length))


def new_world(config=None, rng=None):
    """Сброс игры"""
    config = config or GameConfig()
    snake = initial_snake(config)
    return SnakeWorld(
        snake=snake,
        heading=Heading(Direction.RIGHT, Direction.RIGHT),
        food=place_food(snake, config.board_size, rng),
    )


def request_turn(world, requested):
    """Поворот не трогает змейку, меняется только pending"""
    heading, accepted = world.heading.request(requested)
    if not accepted:
        return world, False
    return replace(world, heading=heading), True


def tick(world, config=None, rng=None):
    """
    Один шаг симуляции.

    Порядок: фиксация поворота -> новая голова -> стена/тело -> еда -> сдвиг.
    Тело проверяется до сдвига, поэтому клетка хвоста тоже запрещена,
    хотя в этом тике она освободится.
    """
    config = config or GameConfig()

    heading = world.heading.commit()
    new_head = world.head.moved(heading.committed)

    # Проверка столкновения
    if not new_head.in_bounds(config.board_size):
        return TickResult(replace(world, heading=heading), TickOutcome.COLLIDED, "wall")
    if new_head in world.snake:
        return TickResult(replace(world, heading=heading), TickOutcome.COLLIDED, "self")

    ate = new_head == world.food
    if ate:
        snake = (new_head,) + world.snake
    else:
        # Убираем хвост
        snake = (new_head,) + world.snake[:-1]

    moved = replace(world, snake=snake, heading=heading, steps=world.steps + 1)
    if not ate:
        return TickResult(moved, TickOutcome.CONTINUED)

    result = scoring.on_eat(world.score, world.speed_level, config)
    moved = replace(moved, score=result.score, speed_level=result.speed_level)

    # Новая еда
    try:
        food = place_food(snake, config.board_size, rng)
    except BoardFull:
        logger.warning("board is full at length %d, no room for food", len(snake))
        return TickResult(replace(moved, food=None), TickOutcome.BOARD_FULL)
    return TickResult(replace(moved, food=food), TickOutcome.ATE)


def world_grid(world, board_size):
    """Матрица мира [y, x] для отрисовки"""
    grid = np.zeros((board_size, board_size), dtype=np.int8)
    for x, y in world.snake[1:]:
        grid[y, x] = BODY
    if world.food is not None:
        grid[world.food.y, world.food.x] = FOOD
    head_x, head_y = world.head
    grid[head_y, head_x] = HEAD
    return grid
