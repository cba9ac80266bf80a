"""
Dictionary endpoints for API v1.

These routes expose create, read, update and delete operations for
dictionary entries.  Autosuggest lives in ``suggest.py`` so that every
word, including "suggest", is reachable under ``/words/{word}``.
Words in the path are matched case‑insensitively and ignoring
surrounding whitespace.  Failures are rendered by the
``DictionaryError`` handler as ``{"error": ..., "kind": ...}``.
"""

from fastapi import APIRouter, status

from dictionary_api.app.core.errors import NotFoundError
from dictionary_api.app.schemas.word import (
    WordCreate,
    WordCreated,
    WordDeleted,
    WordRead,
    WordUpdate,
)
from dictionary_api.app.services.lookup_service import LookupService
from dictionary_api.app.services.word_store import normalize_word

router = APIRouter()


@router.post("/", response_model=WordCreated, status_code=status.HTTP_201_CREATED)
async def create_word(word_in: WordCreate) -> WordCreated:
    """Contribute a new word.

    Returns HTTP 400 if ``word`` or ``meaning`` is missing or blank and
    HTTP 409 if the word is already in the dictionary.
    """
    entry = await LookupService.add_word(word_in)
    return WordCreated(word=entry)


@router.get("/{word}", response_model=WordRead)
async def define_word(word: str) -> WordRead:
    """Retrieve the definition of a word.

    Returns HTTP 404 if the word is not found.
    """
    entry = await LookupService.define(word)
    if entry is None:
        raise NotFoundError("Word not found")
    return entry


@router.put("/{word}", response_model=WordRead)
async def update_word(word: str, word_in: WordUpdate) -> WordRead:
    """Update meaning, language or contributor of an existing word."""
    entry = await LookupService.update_word(word, word_in)
    if entry is None:
        raise NotFoundError("Word not found")
    return entry


@router.delete("/{word}", response_model=WordDeleted)
async def delete_word(word: str) -> WordDeleted:
    deleted = await LookupService.delete_word(word)
    if not deleted:
        raise NotFoundError("Word not found")
    return WordDeleted(word=normalize_word(word))
