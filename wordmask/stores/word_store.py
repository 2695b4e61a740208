from __future__ import annotations
import sqlite3, asyncio, logging
from typing import Any, List
from ..config import settings
from ..utils.textguards import MODES

logger = logging.getLogger(__name__)

INIT_SQL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS mask_words(
  client_id TEXT NOT NULL,
  position  INTEGER NOT NULL,   -- orden de inserción: fija los números de campo
  word      TEXT NOT NULL,
  PRIMARY KEY (client_id, position)
);

CREATE TABLE IF NOT EXISTS client_prefs(
  client_id TEXT PRIMARY KEY,
  mask_mode TEXT NOT NULL
);
"""

def sanitize_words(value: Any, max_words: int | None = None, max_len: int | None = None) -> List[str]:
    """
    Strips entries, drops non-strings, blanks, over-long words and exact
    duplicates, keeps the first `max_words`. Order is preserved.
    """
    if not isinstance(value, (list, tuple)):
        return []
    max_words = settings.max_words if max_words is None else max_words
    max_len = settings.max_word_length if max_len is None else max_len
    seen = set()
    words: List[str] = []
    for entry in value:
        if not isinstance(entry, str):
            continue
        word = entry.strip()
        if not word or len(word) > max_len or word in seen:
            continue
        seen.add(word)
        words.append(word)
        if len(words) >= max_words:
            break
    return words

class WordStore:
    def __init__(self, path: str | None = None):
        self.path = path or settings.db_path
        with sqlite3.connect(self.path) as c:
            c.executescript(INIT_SQL)

    async def save_words(self, client_id: str, words: List[str]) -> List[str]:
        """Replaces the client's list with its sanitized form and returns it."""
        clean = sanitize_words(words)
        if len(clean) != len(words or []):
            logger.info("word list sanitized: %d -> %d", len(words or []), len(clean),
                        extra={"client_id": client_id})
        def _t():
            with sqlite3.connect(self.path) as c:
                c.execute("DELETE FROM mask_words WHERE client_id=?", (client_id,))
                c.executemany(
                    "INSERT INTO mask_words(client_id,position,word) VALUES(?,?,?)",
                    [(client_id, i, w) for i, w in enumerate(clean)]
                )
        await asyncio.to_thread(_t)
        return clean

    async def load_words(self, client_id: str) -> List[str]:
        def _t():
            with sqlite3.connect(self.path) as c:
                rows = c.execute(
                    "SELECT word FROM mask_words WHERE client_id=? ORDER BY position",
                    (client_id,)
                ).fetchall()
                return [r[0] for r in rows]
        return await asyncio.to_thread(_t)

    async def clear_words(self, client_id: str):
        def _t():
            with sqlite3.connect(self.path) as c:
                c.execute("DELETE FROM mask_words WHERE client_id=?", (client_id,))
        await asyncio.to_thread(_t)

    async def get_mode(self, client_id: str) -> str:
        def _t():
            with sqlite3.connect(self.path) as c:
                return c.execute("SELECT mask_mode FROM client_prefs WHERE client_id=?",
                                 (client_id,)).fetchone()
        row = await asyncio.to_thread(_t)
        if row and row[0] in MODES:
            return row[0]
        return settings.default_mode

    async def set_mode(self, client_id: str, mode: str):
        if mode not in MODES:
            raise ValueError(f"unknown masking mode {mode!r}")
        def _t():
            with sqlite3.connect(self.path) as c:
                c.execute("INSERT OR REPLACE INTO client_prefs(client_id,mask_mode) VALUES(?,?)",
                          (client_id, mode))
        await asyncio.to_thread(_t)
