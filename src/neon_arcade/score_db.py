"""
score_db.py: Durable key/value storage and the Star Catcher high-score record.
"""

import logging
import sqlite3
from typing import Optional, Protocol

from .constants import DB_FILE, HIGH_SCORE_KEY, HIGH_SCORE_NAME_KEY, NO_RECORD_NAME
from .data_models import HighScoreRecord

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String-keyed durable storage, the only persistence the games need."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class Database:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS KeyValue (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def get(self, key: str) -> Optional[str]:
        self.cur.execute("SELECT value FROM KeyValue WHERE key=?", (key,))
        row = self.cur.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str):
        self.cur.execute(
            "INSERT OR REPLACE INTO KeyValue (key, value) VALUES (?, ?)", (key, value))
        self.conn.commit()

    def close(self):
        self.conn.close()


def load_high_score(store: KeyValueStore) -> HighScoreRecord:
    """
    Reads the stored record. Anything missing or unreadable means there is
    no record yet.
    """
    try:
        saved_score = store.get(HIGH_SCORE_KEY)
        saved_name = store.get(HIGH_SCORE_NAME_KEY)
    except sqlite3.Error as e:
        logger.warning("Could not read high score, starting fresh: %s", e)
        return HighScoreRecord()

    if not saved_score:
        return HighScoreRecord()

    try:
        score = int(saved_score)
    except ValueError:
        logger.warning("Ignoring corrupt high score %r", saved_score)
        return HighScoreRecord()

    if score < 0:
        logger.warning("Ignoring negative high score %d", score)
        return HighScoreRecord()

    return HighScoreRecord(score=score, name=saved_name or NO_RECORD_NAME)


def submit_score(store: KeyValueStore, record: HighScoreRecord, name: str, score: int) -> bool:
    """
    Updates the record and storage when score strictly beats the best.
    Returns whether it did.
    """
    if score <= record.score:
        return False

    record.score = score
    record.name = name
    try:
        store.set(HIGH_SCORE_KEY, str(score))
        store.set(HIGH_SCORE_NAME_KEY, name)
    except sqlite3.Error as e:
        logger.error("Could not save high score %d for %s: %s", score, name, e)
    return True
