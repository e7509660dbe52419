"""
Таймер тиков.

В каждый момент активен не больше одного таймера: start() всегда сначала
отменяет предыдущий. Тики не перекрываются - следующий взводится только
после того, как текущий callback отработал.

Интерфейс таймера: start(interval_ms, callback), stop(), running, interval_ms.
"""
import asyncio
import logging

logger = logging.getLogger(__name__)


class AsyncioTickScheduler:
    """Периодический таймер на event loop (loop.call_later)"""

    def __init__(self, loop=None):
        self._loop = loop
        self._handle = None
        self._callback = None
        self._generation = 0
        self.interval_ms = None

    @property
    def running(self):
        return self._callback is not None

    def start(self, interval_ms, callback):
        self.stop()
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self.interval_ms = interval_ms
        self._callback = callback
        self._arm(self._generation)

    def stop(self):
        # Новое поколение: уже запланированный _fire станет устаревшим
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._callback = None

    def _arm(self, generation):
        self._handle = self._loop.call_later(self.interval_ms / 1000, self._fire, generation)

    def _fire(self, generation):
        if generation != self._generation:
            logger.debug("dropping stale tick (generation %d)", generation)
            return
        self._handle = None
        try:
            self._callback()
        finally:
            # callback мог вызвать stop() или start() - тогда поколение сменилось.
            # Упавший callback тоже перевзводит таймер
            if generation == self._generation:
                self._arm(generation)


class ManualTickScheduler:
    """Таймер без часов: тик происходит только по fire()"""

    def __init__(self):
        self._callback = None
        self.interval_ms = None
        self.starts = 0

    @property
    def running(self):
        return self._callback is not None

    def start(self, interval_ms, callback):
        self.stop()
        self.interval_ms = interval_ms
        self._callback = callback
        self.starts += 1

    def stop(self):
        self._callback = None

    def fire(self):
        """Один тик, если таймер запущен. Возвращает результат callback или None"""
        if self._callback is None:
            return None
        return self._callback()
