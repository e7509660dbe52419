"""
Игровая сессия: состояния idle/running/paused/over и жизненный цикл таймера.

Только GameSession меняет состояние игры и запускает/останавливает таймер.
Отрисовка получает Snapshot после каждого тика и каждого перехода.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

import env
import scoring
from config import GameConfig
from direction import Coordinate, Direction
from env import TickOutcome
from highscore import HighScoreTracker
from scheduler import ManualTickScheduler

logger = logging.getLogger(__name__)


class GameState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass(frozen=True)
class Snapshot:
    state: GameState
    snake: tuple
    food: Optional[Coordinate]
    heading: Direction
    score: int
    high_score: int
    speed_level: int
    display_speed: int
    tick_interval_ms: int
    steps: int
    ended_by: Optional[str] = None


class GameSession:
    def __init__(self, config=None, scheduler=None, tracker=None, rng=None, seed=None):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.scheduler = scheduler if scheduler is not None else ManualTickScheduler()
        self.tracker = tracker if tracker is not None else HighScoreTracker()

        self._state = GameState.IDLE
        self.world = env.new_world(self.config, self.rng)
        self.ended_by = None
        self._listeners = []

    @property
    def state(self):
        return self._state

    @property
    def high_score(self):
        return self.tracker.high_score

    @property
    def tick_interval_ms(self):
        return scoring.tick_interval_ms(self.world.speed_level, self.config)

    def subscribe(self, listener):
        """listener(snapshot) вызывается после каждого тика и перехода"""
        self._listeners.append(listener)
        return listener

    def snapshot(self):
        world = self.world
        return Snapshot(
            state=self._state,
            snake=world.snake,
            food=world.food,
            heading=world.heading.committed,
            score=world.score,
            high_score=self.tracker.high_score,
            speed_level=world.speed_level,
            display_speed=scoring.display_speed(world.speed_level),
            tick_interval_ms=self.tick_interval_ms,
            steps=world.steps,
            ended_by=self.ended_by,
        )

    # --- переходы ---

    def start(self):
        """
        idle/over/paused -> running с новой игрой.

        Из паузы это перезапуск, а не продолжение (продолжение - resume()).
        """
        if self._state is GameState.RUNNING:
            return False
        self.scheduler.stop()
        self.world = env.new_world(self.config, self.rng)
        self.ended_by = None
        self._state = GameState.RUNNING
        self.scheduler.start(self.tick_interval_ms, self.tick)
        logger.info("game started")
        self._notify()
        return True

    def pause(self):
        if self._state is not GameState.RUNNING:
            return False
        self.scheduler.stop()
        self._state = GameState.PAUSED
        self.tracker.flush()
        self._notify()
        return True

    def resume(self):
        if self._state is not GameState.PAUSED:
            return False
        self._state = GameState.RUNNING
        self.scheduler.start(self.tick_interval_ms, self.tick)
        self._notify()
        return True

    def toggle_pause(self):
        """Кнопка Start/Pause/Resume"""
        if self._state is GameState.RUNNING:
            return self.pause()
        if self._state is GameState.PAUSED:
            return self.resume()
        return self.start()

    def request_turn(self, direction):
        # В паузе состояние симуляции не меняется, поворот тоже
        if self._state is not GameState.RUNNING:
            return False
        self.world, accepted = env.request_turn(self.world, direction)
        return accepted

    def tick(self):
        """
        Один тик. Вне running ничего не делает и возвращает None:
        тик, пришедший после паузы, игнорируется.
        """
        if self._state is not GameState.RUNNING:
            return None

        result = env.tick(self.world, self.config, self.rng)
        previous_interval = self.tick_interval_ms
        self.world = result.world

        if result.outcome is TickOutcome.COLLIDED:
            self._finish(result.collision)
        elif result.outcome is TickOutcome.BOARD_FULL:
            self._finish("board_full")
        else:
            if result.outcome is TickOutcome.ATE:
                # Сохранение рекорда откладывается до паузы или конца игры
                self.tracker.consider_score(self.world.score, persist=False)
                if self.tick_interval_ms != previous_interval:
                    self.scheduler.start(self.tick_interval_ms, self.tick)
            self._notify()
        return result.outcome

    def _finish(self, reason):
        self.scheduler.stop()
        self._state = GameState.OVER
        self.ended_by = reason
        self.tracker.consider_score(self.world.score, persist=False)
        self.tracker.flush()
        logger.info(
            "game over (%s): score %d, length %d, steps %d",
            reason, self.world.score, self.world.length, self.world.steps,
        )
        self._notify()

    def _notify(self):
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("snapshot listener %r failed", listener)
