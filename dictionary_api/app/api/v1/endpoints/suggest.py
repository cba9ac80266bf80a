"""
Autosuggest endpoint for API v1.

Mounted at ``/suggest`` rather than under ``/words`` so the query
cannot collide with a word path parameter.
"""

from typing import List

from fastapi import APIRouter, Query

from dictionary_api.app.services.lookup_service import LookupService

router = APIRouter()


@router.get("", response_model=List[str])
async def suggest_words(q: str = Query("", description="Prefix typed so far")) -> List[str]:
    """Return up to five words starting with ``q``.

    Never fails: short or blank queries and storage errors yield an
    empty list.
    """
    return await LookupService.suggest(q)
