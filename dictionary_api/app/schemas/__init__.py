"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage layer to decouple the API
representation (camelCase ``addedBy``, ``createdAt``) from the column
names used in SQLite.
"""
