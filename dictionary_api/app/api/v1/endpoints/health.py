"""
Health endpoint for API v1.

Reports whether the database answers and how many entries it holds.
Returns HTTP 503 when the database cannot be queried.
"""

from fastapi import APIRouter

from dictionary_api.app.schemas.word import HealthRead
from dictionary_api.app.services.lookup_service import LookupService

router = APIRouter()


@router.get("/", response_model=HealthRead)
async def health() -> HealthRead:
    total = await LookupService.count_words()
    return HealthRead(status="ok", words=total)
