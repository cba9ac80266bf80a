"""
Pydantic schemas for dictionary entries.

An entry is addressed by its normalized ``word`` and carries the
``meaning`` text, a ``language`` label and the name of the contributor
(``addedBy``).  JSON payloads use the camelCase names of the original
web client; the Python attributes are snake_case.

Required fields are declared optional on the request models so that
missing and blank values are rejected by ``LookupService`` with a
uniform ``invalid_input`` error instead of a framework validation
error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class WordCreate(BaseModel):
    """Schema for contributing a new entry."""

    word: Optional[str] = Field(None, examples=["serendipity"])
    meaning: Optional[str] = Field(None, examples=["A happy accident"])
    language: Optional[str] = Field(None, examples=["English"], description="Defaults to 'unknown'")
    added_by: Optional[str] = Field(None, alias="addedBy", description="Defaults to 'anonymous'")

    model_config = {"populate_by_name": True}


class WordUpdate(BaseModel):
    """Schema for updating an existing entry.

    All fields are optional; only provided values will be updated.  The
    word itself is the key and cannot be changed.
    """

    meaning: Optional[str] = None
    language: Optional[str] = None
    added_by: Optional[str] = Field(None, alias="addedBy")

    model_config = {"populate_by_name": True}


class WordRead(BaseModel):
    """Schema for reading an entry."""

    word: str
    meaning: str
    language: str
    added_by: str = Field(..., alias="addedBy")
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True}


class WordCreated(BaseModel):
    message: str = "Word added!"
    word: WordRead


class WordDeleted(BaseModel):
    message: str = "Word deleted"
    word: str


class HealthRead(BaseModel):
    status: str
    words: int
