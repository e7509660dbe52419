"""
Рекорд: сравнение текущего счёта с сохранённым максимумом.

Хранилище - любой объект с load() -> int и save(int), например SnakeDatabase.
Ошибки хранилища только логируются, игра из-за них не останавливается.
"""
import logging

logger = logging.getLogger(__name__)


class MemoryHighScoreStore:
    """Хранилище в памяти (на время процесса)"""

    def __init__(self, value=0):
        self.value = value
        self.saves = 0

    def load(self):
        return self.value

    def save(self, score):
        self.value = score
        self.saves += 1


class HighScoreTracker:
    def __init__(self, store=None):
        self.store = store if store is not None else MemoryHighScoreStore()
        self.high_score = self._load()
        self._unsaved = False

    def _load(self):
        try:
            value = int(self.store.load() or 0)
        except Exception as e:
            logger.warning("could not load high score, starting from 0: %s", e)
            return 0
        return max(0, value)

    def consider_score(self, current, persist=True):
        """
        Возвращает (обновлён ли рекорд, рекорд).

        Значение в памяти обновляется сразу. С persist=False сохранение
        откладывается до flush(). Повторный вызов с тем же счётом ничего не делает.
        """
        if current <= self.high_score:
            return False, self.high_score

        self.high_score = current
        self._unsaved = True
        if persist:
            self.flush()
        return True, self.high_score

    def flush(self):
        """Сохранить рекорд, если он ещё не сохранён. Ошибка остаётся несохранённой"""
        if not self._unsaved:
            return False
        try:
            self.store.save(self.high_score)
        except Exception as e:
            logger.warning("could not persist high score %d: %s", self.high_score, e)
            return False
        self._unsaved = False
        logger.info("new high score: %d", self.high_score)
        return True
