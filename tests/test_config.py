from __future__ import annotations

import pytest

import config
from config import GameConfig


def test_defaults_match_module_constants() -> None:
    cfg = GameConfig()
    assert cfg.board_size == config.BOARD_SIZE == 20
    assert cfg.base_tick_ms == 160
    assert cfg.speed_step_ms == 6
    assert cfg.min_tick_ms == 60
    assert cfg.max_speed_level == 12
    assert cfg.score_for_food == 10
    assert cfg.initial_length == 3
    assert cfg.cells == 400


@pytest.mark.parametrize(
    "kwargs",
    [
        {"board_size": 1},
        {"min_tick_ms": 0},
        {"base_tick_ms": 50, "min_tick_ms": 60},
        {"speed_step_ms": -1},
        {"initial_length": 0},
        {"board_size": 4, "initial_length": 3},
    ],
)
def test_invalid_config_is_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)
