"""
Service layer for dictionary lookups and contributions.

``LookupService`` is the contract the API handlers rely on.  It checks
required fields before any database access, normalizes the word used
as key and delegates to ``WordStore``:

* ``add_word`` raises ``InvalidInputError`` for a blank word or
  meaning and ``ConflictError`` if the normalized word exists.  An
  existing entry is never overwritten.
* ``define``, ``update_word`` and ``delete_word`` signal absence with
  ``None``/``False``; a missing word is an expected outcome.
* ``suggest`` never raises.  Queries shorter than
  ``settings.suggest_min_length`` return ``[]`` without a database
  round trip, and storage failures degrade to ``[]``.

The existence check in ``add_word`` and the insert are separate
statements.  Two concurrent adds of the same word can both pass the
check; the UNIQUE constraint then rejects the second insert, which is
reported as a conflict as well.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from dictionary_api.app.core.config import settings
from dictionary_api.app.core.errors import (
    ConflictError,
    InvalidInputError,
    StorageUnavailableError,
)
from dictionary_api.app.schemas.word import WordCreate, WordRead, WordUpdate
from dictionary_api.app.services.word_store import WordStore, normalize_word


class LookupService:
    """Validation and orchestration around ``WordStore``."""

    @classmethod
    async def add_word(cls, data: WordCreate) -> WordRead:
        """Create a new entry and return it."""
        logger = logging.getLogger(__name__)
        word = normalize_word(data.word)
        meaning = (data.meaning or "").strip()
        if not word or not meaning:
            raise InvalidInputError("Word and meaning are required")
        existing = await WordStore.find_by_word(word)
        if existing is not None:
            logger.warning("Word %r already exists, not overwriting", word)
            raise ConflictError(f"Word '{word}' already exists")
        return await WordStore.insert(
            WordCreate(
                word=word,
                meaning=meaning,
                language=data.language,
                added_by=data.added_by,
            )
        )

    @classmethod
    async def define(cls, word: str) -> Optional[WordRead]:
        """Look up a single entry.  Returns ``None`` if it does not exist."""
        key = normalize_word(word)
        if not key:
            return None
        return await WordStore.find_by_word(key)

    @classmethod
    async def update_word(cls, word: str, data: WordUpdate) -> Optional[WordRead]:
        """Apply the supplied fields to an existing entry.

        Blank values are rejected rather than stored, so an entry can
        never lose its meaning through an update.  Returns ``None`` if
        no entry exists for ``word``.
        """
        key = normalize_word(word)
        changes = {}
        for field, value in data.model_dump(exclude_none=True).items():
            value = value.strip()
            if not value:
                raise InvalidInputError(f"Field '{field}' must not be blank")
            changes[field] = value
        if not key:
            return None
        return await WordStore.update(key, WordUpdate(**changes))

    @classmethod
    async def delete_word(cls, word: str) -> bool:
        key = normalize_word(word)
        if not key:
            return False
        return await WordStore.delete(key)

    @classmethod
    async def suggest(cls, q: Optional[str]) -> List[str]:
        """Return up to ``settings.suggest_limit`` words starting with ``q``."""
        prefix = normalize_word(q)
        if len(prefix) < max(settings.suggest_min_length, 1):
            return []
        try:
            return await WordStore.search_by_prefix(prefix, settings.suggest_limit)
        except StorageUnavailableError as exc:
            logging.getLogger(__name__).warning("Suggest for %r degraded to empty: %s", prefix, exc.message)
            return []

    @classmethod
    async def count_words(cls) -> int:
        return await WordStore.count()
