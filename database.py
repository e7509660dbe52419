"""
SQLite база данных для рекорда и истории игр.
"""
import sqlite3

from config import DB_PATH, HIGH_SCORE_KEY


class SnakeDatabase:
    def __init__(self, db_path=DB_PATH, key=HIGH_SCORE_KEY):
        self.db_path = db_path
        self.key = key
        self.conn = None
        self._init_db()

    def _init_db(self):
        """Инициализация базы данных"""
        self.conn = sqlite3.connect(self.db_path)
        cursor = self.conn.cursor()

        # Ключ-значение (рекорд)
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS scores (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL
            )
        ''')

        # Таблица сыгранных игр
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS games (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                score INTEGER,
                length INTEGER,
                steps INTEGER,
                speed_level INTEGER,
                ended_by TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        self.conn.commit()

    def load(self):
        """Рекорд (0, если ещё не сохранялся)"""
        cursor = self.conn.cursor()
        cursor.execute('SELECT value FROM scores WHERE key = ?', (self.key,))
        row = cursor.fetchone()
        if row:
            return int(row[0])
        return 0

    def save(self, score):
        """Сохранить рекорд"""
        cursor = self.conn.cursor()
        cursor.execute('''
            INSERT INTO scores (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
        ''', (self.key, int(score)))
        self.conn.commit()

    def record_game(self, score, length, steps, speed_level, ended_by):
        """Сохранить итог игры"""
        cursor = self.conn.cursor()
        cursor.execute('''
            INSERT INTO games (score, length, steps, speed_level, ended_by)
            VALUES (?, ?, ?, ?, ?)
        ''', (score, length, steps, speed_level, ended_by))
        self.conn.commit()
        return cursor.lastrowid

    def get_game_stats(self):
        """(число игр, лучший счёт, средний счёт)"""
        cursor = self.conn.cursor()
        cursor.execute('SELECT COUNT(*), MAX(score), AVG(score) FROM games')
        games, best, avg = cursor.fetchone()
        return games, best or 0, avg or 0.0

    def get_recent_games(self, limit=10):
        """Последние игры, новые первыми"""
        cursor = self.conn.cursor()
        cursor.execute('''
            SELECT score, length, steps, speed_level, ended_by
            FROM games
            ORDER BY id DESC
            LIMIT ?
        ''', (limit,))
        return cursor.fetchall()

    def close(self):
        """Закрыть соединение"""
        if self.conn:
            self.conn.close()
            self.conn = None
