"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import health, suggest, words

router = APIRouter()

router.include_router(words.router, prefix="/words", tags=["words"])
router.include_router(suggest.router, prefix="/suggest", tags=["words"])
router.include_router(health.router, prefix="/health", tags=["health"])
