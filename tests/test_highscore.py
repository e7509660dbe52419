from __future__ import annotations

import logging

import pytest

from highscore import HighScoreTracker, MemoryHighScoreStore


class BrokenStore:
    def __init__(self, value: int = 0, fail_load: bool = False) -> None:
        self.value = value
        self.fail_load = fail_load
        self.attempts = 0

    def load(self) -> int:
        if self.fail_load:
            raise OSError("storage unavailable")
        return self.value

    def save(self, score: int) -> None:
        self.attempts += 1
        raise OSError("disk full")


def test_seeded_from_store() -> None:
    tracker = HighScoreTracker(MemoryHighScoreStore(70))
    assert tracker.high_score == 70


def test_improvement_updates_and_persists() -> None:
    store = MemoryHighScoreStore(30)
    tracker = HighScoreTracker(store)
    assert tracker.consider_score(50) == (True, 50)
    assert store.value == 50
    assert store.saves == 1


def test_lower_or_equal_score_is_noop() -> None:
    store = MemoryHighScoreStore(30)
    tracker = HighScoreTracker(store)
    assert tracker.consider_score(20) == (False, 30)
    assert tracker.consider_score(30) == (False, 30)
    assert store.saves == 0


def test_repeated_calls_save_once() -> None:
    store = MemoryHighScoreStore()
    tracker = HighScoreTracker(store)
    tracker.consider_score(40)
    tracker.consider_score(40)
    tracker.consider_score(40)
    assert store.saves == 1
    assert tracker.high_score == 40


def test_save_failure_keeps_memory_value(caplog: pytest.LogCaptureFixture) -> None:
    store = BrokenStore(10)
    tracker = HighScoreTracker(store)
    with caplog.at_level(logging.WARNING, logger="highscore"):
        assert tracker.consider_score(60) == (True, 60)
    assert tracker.high_score == 60
    assert store.attempts == 1
    assert "could not persist high score 60" in caplog.text


def test_load_failure_starts_from_zero() -> None:
    tracker = HighScoreTracker(BrokenStore(fail_load=True))
    assert tracker.high_score == 0


def test_default_store_is_in_memory() -> None:
    tracker = HighScoreTracker()
    assert tracker.high_score == 0
    assert tracker.consider_score(10) == (True, 10)


def test_deferred_save_waits_for_flush() -> None:
    store = MemoryHighScoreStore()
    tracker = HighScoreTracker(store)
    assert tracker.consider_score(30, persist=False) == (True, 30)
    assert store.saves == 0

    assert tracker.flush() is True
    assert store.value == 30
    assert tracker.flush() is False
    assert store.saves == 1


def test_failed_flush_is_retried() -> None:
    class FlakyStore(MemoryHighScoreStore):
        def __init__(self) -> None:
            super().__init__()
            self.fail = True

        def save(self, score: int) -> None:
            if self.fail:
                raise OSError("locked")
            super().save(score)

    store = FlakyStore()
    tracker = HighScoreTracker(store)
    tracker.consider_score(50)
    assert store.saves == 0

    store.fail = False
    assert tracker.flush() is True
    assert store.value == 50
