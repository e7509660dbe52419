"""
Очки и скорость.

Интервал тика: max(MIN_TICK, BASE_TICK - level * STEP), level <= MAX_SPEED_LEVEL.
"""
from dataclasses import dataclass

from config import GameConfig

DEFAULT_CONFIG = GameConfig()


@dataclass(frozen=True)
class EatResult:
    score: int
    speed_level: int
    tick_interval_ms: int


def tick_interval_ms(speed_level, config=DEFAULT_CONFIG):
    """Интервал тика для уровня скорости"""
    level = min(max(0, speed_level), config.max_speed_level)
    return max(config.min_tick_ms, config.base_tick_ms - level * config.speed_step_ms)


def on_eat(score, speed_level, config=DEFAULT_CONFIG):
    """Змейка съела еду: +очки, +1 уровень (не выше максимума)"""
    new_level = min(speed_level + 1, config.max_speed_level)
    return EatResult(
        score=score + config.score_for_food,
        speed_level=new_level,
        tick_interval_ms=tick_interval_ms(new_level, config),
    )


def display_speed(speed_level):
    # Скорость для HUD начинается с 1
    return 1 + speed_level
