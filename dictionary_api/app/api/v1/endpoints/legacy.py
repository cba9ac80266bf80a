"""
Un‑versioned routes kept for existing web clients.

The first web client called ``POST /add``, ``GET /define/{word}`` and
``GET /suggest`` at the server root.  These paths are bound to the same
handlers as the versioned ``/api/v1/words`` routes, so both surfaces
behave identically.
"""

from typing import List

from fastapi import APIRouter, status

from dictionary_api.app.schemas.word import WordCreated, WordRead
from . import suggest, words

router = APIRouter()

router.add_api_route(
    "/add",
    words.create_word,
    methods=["POST"],
    response_model=WordCreated,
    status_code=status.HTTP_201_CREATED,
)
router.add_api_route("/define/{word}", words.define_word, methods=["GET"], response_model=WordRead)
router.add_api_route("/suggest", suggest.suggest_words, methods=["GET"], response_model=List[str])
