"""
Storage layer for dictionary entries.

``WordStore`` owns every SQL statement touching the ``words`` table.
All lookups go through the normalized form of the word (surrounding
whitespace trimmed, lowercased), so ``" Cat"``, ``"CAT"`` and ``"cat"``
address the same row.  The ``UNIQUE`` constraint on ``words.word`` is
the authoritative duplicate guard: a violation is reported as
``ConflictError`` and the existing row is left untouched.

Any other ``sqlite3.Error`` is logged and re‑raised as
``StorageUnavailableError``.  Absence is not an error here; point
lookups return ``None`` and deletes return ``False``.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from dictionary_api.app.core.config import settings
from dictionary_api.app.core.db import get_connection
from dictionary_api.app.core.errors import (
    ConflictError,
    InvalidInputError,
    StorageUnavailableError,
)
from dictionary_api.app.schemas.word import WordCreate, WordRead, WordUpdate

# GLOB metacharacters; each is matched literally when wrapped in brackets.
_GLOB_SPECIAL = "*?["

_COLUMNS = "word, meaning, language, added_by, created_at, updated_at"


def normalize_word(word: Optional[str]) -> str:
    """Return the storage key for ``word``: trimmed and lowercased."""
    if word is None:
        return ""
    return word.strip().lower()


def _glob_prefix(prefix: str) -> str:
    """Build a GLOB pattern matching words that start with ``prefix``."""
    escaped = "".join(f"[{ch}]" if ch in _GLOB_SPECIAL else ch for ch in prefix)
    return escaped + "*"


class WordStore:
    """Keyed storage for dictionary entries."""

    @classmethod
    async def insert(cls, data: WordCreate) -> WordRead:
        """Insert a new entry and return the stored record.

        ``language`` and ``added_by`` fall back to the configured
        defaults when omitted or blank.  Raises ``InvalidInputError``
        if the word or meaning is blank and ``ConflictError`` if the
        normalized word is already stored.
        """
        logger = logging.getLogger(__name__)
        word = normalize_word(data.word)
        meaning = (data.meaning or "").strip()
        if not word or not meaning:
            raise InvalidInputError("Word and meaning are required")
        language = (data.language or "").strip() or settings.default_language
        added_by = (data.added_by or "").strip() or settings.default_added_by

        conn = cls._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO words (word, meaning, language, added_by) VALUES (?, ?, ?, ?)",
                (word, meaning, language, added_by),
            )
            conn.commit()
            logger.info("Added word %r (%s) by %s", word, language, added_by)
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM words WHERE word = ?",
                (word,),
            ).fetchone()
            return cls._row_to_word_read(row)
        except sqlite3.IntegrityError:
            logger.warning("Rejected duplicate word %r", word)
            raise ConflictError(f"Word '{word}' already exists")
        except sqlite3.Error as exc:
            raise cls._unavailable(exc) from exc
        finally:
            conn.close()

    @classmethod
    async def find_by_word(cls, word: str) -> Optional[WordRead]:
        """Retrieve a single entry by word, or ``None`` if absent."""
        key = normalize_word(word)
        conn = cls._connect()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM words WHERE word = ?",
                (key,),
            ).fetchone()
            if not row:
                return None
            return cls._row_to_word_read(row)
        except sqlite3.Error as exc:
            raise cls._unavailable(exc) from exc
        finally:
            conn.close()

    @classmethod
    async def update(cls, word: str, data: WordUpdate) -> Optional[WordRead]:
        """Update an existing entry.

        Only fields provided (not ``None``) in ``data`` are written.
        Values are trimmed; a blank value raises ``InvalidInputError``
        so an entry can never lose its meaning.  Returns the updated
        entry or ``None`` if the word does not exist; a missing word is
        never created.
        """
        logger = logging.getLogger(__name__)
        key = normalize_word(word)
        changes = {}
        for column, value in (
            ("meaning", data.meaning),
            ("language", data.language),
            ("added_by", data.added_by),
        ):
            if value is None:
                continue
            value = value.strip()
            if not value:
                raise InvalidInputError(f"Field '{column}' must not be blank")
            changes[column] = value
        conn = cls._connect()
        try:
            cursor = conn.cursor()
            row = cursor.execute("SELECT id FROM words WHERE word = ?", (key,)).fetchone()
            if not row:
                return None
            updates = [f"{column} = ?" for column in changes]
            values = list(changes.values())
            if updates:
                updates.append("updated_at = CURRENT_TIMESTAMP")
                values.append(key)
                cursor.execute(
                    f"UPDATE words SET {', '.join(updates)} WHERE word = ?",
                    tuple(values),
                )
                conn.commit()
                logger.info("Updated word %r", key)
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM words WHERE word = ?",
                (key,),
            ).fetchone()
            return cls._row_to_word_read(row)
        except sqlite3.Error as exc:
            raise cls._unavailable(exc) from exc
        finally:
            conn.close()

    @classmethod
    async def delete(cls, word: str) -> bool:
        """Delete an entry by word.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        logger = logging.getLogger(__name__)
        key = normalize_word(word)
        conn = cls._connect()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM words WHERE word = ?", (key,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted word %r", key)
            return affected > 0
        except sqlite3.Error as exc:
            raise cls._unavailable(exc) from exc
        finally:
            conn.close()

    @classmethod
    async def search_by_prefix(cls, prefix: str, limit: int) -> List[str]:
        """Return up to ``limit`` stored words starting with ``prefix``.

        The prefix is normalized the same way as stored words and
        matched with a case sensitive ``GLOB``, which SQLite answers with
        a range scan of the index on the ``word`` column.
        Results are ordered alphabetically.
        """
        key = normalize_word(prefix)
        conn = cls._connect()
        try:
            rows = conn.execute(
                "SELECT word FROM words WHERE word GLOB ? ORDER BY word LIMIT ?",
                (_glob_prefix(key), limit),
            ).fetchall()
            return [row["word"] for row in rows]
        except sqlite3.Error as exc:
            raise cls._unavailable(exc) from exc
        finally:
            conn.close()

    @classmethod
    async def count(cls) -> int:
        conn = cls._connect()
        try:
            row = conn.execute("SELECT COUNT(*) AS total FROM words").fetchone()
            return row["total"]
        except sqlite3.Error as exc:
            raise cls._unavailable(exc) from exc
        finally:
            conn.close()

    @classmethod
    def _connect(cls) -> sqlite3.Connection:
        try:
            return get_connection()
        except sqlite3.Error as exc:
            raise cls._unavailable(exc) from exc

    @staticmethod
    def _unavailable(exc: sqlite3.Error) -> StorageUnavailableError:
        logging.getLogger(__name__).error("Storage error: %s", exc)
        return StorageUnavailableError("Storage is unavailable, try again later")

    @staticmethod
    def _row_to_word_read(row: sqlite3.Row) -> WordRead:
        """Convert a database row to a WordRead schema instance."""
        return WordRead(
            word=row["word"],
            meaning=row["meaning"],
            language=row["language"],
            added_by=row["added_by"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
