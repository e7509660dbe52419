"""
Автопилот змейки без графики: жадно идёт к еде, считает статистику.

Использование:
    python autoplay.py          # 100 игр
    python autoplay.py 500      # 500 игр
"""
import logging
import sys

from config import DB_PATH, GameConfig
from database import SnakeDatabase
from direction import Direction
from highscore import HighScoreTracker
from scheduler import ManualTickScheduler
from session import GameSession, GameState


def greedy_direction(world, board_size):
    """Безопасный ход, ближайший к еде (манхэттен). Нет безопасных - прямо"""
    committed = world.heading.committed
    body = set(world.snake)

    best = None
    best_dist = None
    for direction in Direction:
        if direction.is_opposite(committed):
            continue
        cell = world.head.moved(direction)
        if not cell.in_bounds(board_size) or cell in body:
            continue
        if world.food is None:
            dist = 0
        else:
            dist = abs(cell.x - world.food.x) + abs(cell.y - world.food.y)
        # При равенстве предпочитаем не поворачивать
        if best is None or dist < best_dist or (dist == best_dist and direction is committed):
            best = direction
            best_dist = dist

    return best or committed


class SnakeAutoplay:
    def __init__(self, db_path=DB_PATH, seed=None, config=None):
        self.config = config or GameConfig()
        self.db = SnakeDatabase(db_path)
        self.scheduler = ManualTickScheduler()
        self.session = GameSession(
            config=self.config,
            scheduler=self.scheduler,
            tracker=HighScoreTracker(self.db),
            seed=seed,
        )

        # Ограничение на длину одной игры (жадная змейка может ходить по кругу)
        self.max_steps = self.config.cells * 4

        self.games = 0
        self.total_score = 0
        self.best = 0
        self.wins = 0

    def play_game(self):
        """Одна игра до конца. Возвращает финальный Snapshot"""
        session = self.session
        session.start()

        while session.state is GameState.RUNNING:
            if session.world.steps >= self.max_steps:
                # Из паузы следующий start() начнёт новую игру
                session.pause()
                break
            session.request_turn(greedy_direction(session.world, self.config.board_size))
            self.scheduler.fire()

        snapshot = session.snapshot()
        self.games += 1
        self.total_score += snapshot.score
        self.best = max(self.best, snapshot.score)
        if snapshot.ended_by == "board_full":
            self.wins += 1

        self.db.record_game(
            snapshot.score,
            len(snapshot.snake),
            snapshot.steps,
            snapshot.speed_level,
            snapshot.ended_by or "step_limit",
        )
        return snapshot

    def play(self, num_games=100):
        for _ in range(num_games):
            snapshot = self.play_game()
            if snapshot.ended_by == "board_full":
                print(f"Game {self.games}: WIN!")
            else:
                print(f"Game {self.games}: Score {snapshot.score} "
                      f"({snapshot.ended_by or 'step limit'})")

        if self.games > 0:
            win_rate = (self.wins / self.games) * 100
            print(f"\nResults: {self.games} games")
            print(f"Avg: {self.total_score / self.games:.1f}")
            print(f"Best: {self.best}")
            print(f"High score: {self.session.high_score}")
            print(f"Wins: {self.wins} ({win_rate:.1f}%)")

    def close(self):
        """Сохранить несохранённый рекорд и закрыть базу"""
        self.session.tracker.flush()
        self.db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    games = int(sys.argv[1]) if len(sys.argv) > 1 else 100

    player = SnakeAutoplay()
    try:
        player.play(games)
    finally:
        player.close()
