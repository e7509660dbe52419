# Настройки игры
# Поле 20x20, ось y направлена вниз (как на экране)
from dataclasses import dataclass

# Поле
BOARD_SIZE = 20

# Скорость (миллисекунды на один тик)
BASE_TICK_MS = 160
SPEED_STEP_MS = 6
MIN_TICK_MS = 60     # жёсткий нижний предел
MAX_SPEED_LEVEL = 12

# Начальная длина змейки
INITIAL_SNAKE_LENGTH = 3

# Очки за еду
SCORE_FOR_FOOD = 10

# Рекорд
HIGH_SCORE_KEY = "snake-high-score"
DB_PATH = "snake_scores.db"


@dataclass(frozen=True)
class GameConfig:
    """Параметры игры. По умолчанию - константы выше."""

    board_size: int = BOARD_SIZE
    base_tick_ms: int = BASE_TICK_MS
    speed_step_ms: int = SPEED_STEP_MS
    min_tick_ms: int = MIN_TICK_MS
    max_speed_level: int = MAX_SPEED_LEVEL
    score_for_food: int = SCORE_FOR_FOOD
    initial_length: int = INITIAL_SNAKE_LENGTH

    def __post_init__(self):
        if self.board_size < 2:
            raise ValueError(f"board_size must be at least 2, got {self.board_size}")
        if self.min_tick_ms <= 0 or self.base_tick_ms < self.min_tick_ms:
            raise ValueError(
                f"invalid tick range: base={self.base_tick_ms}ms, min={self.min_tick_ms}ms"
            )
        if self.speed_step_ms < 0 or self.max_speed_level < 0 or self.score_for_food < 0:
            raise ValueError("speed step, max speed level and food reward must be non-negative")
        # Змейка растёт влево от головы, голова на board_size // 2 - 1
        if self.initial_length < 1 or self.initial_length > self.board_size // 2:
            raise ValueError(
                f"initial snake of length {self.initial_length} does not fit "
                f"a {self.board_size}x{self.board_size} board"
            )

    @property
    def cells(self):
        return self.board_size * self.board_size
