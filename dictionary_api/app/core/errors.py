"""
Error taxonomy shared by the store, the service and the API layer.

Every error carries a machine readable ``kind`` and the HTTP status
code the API responds with.  The exception handler registered in
``main.create_app`` renders them as ``{"error": message, "kind": kind}``.
"""

from fastapi import status


class DictionaryError(Exception):
    """Base class for all errors surfaced to API callers."""

    kind = "error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind}


class InvalidInputError(DictionaryError):
    """Missing or blank required field.  Not retried."""

    kind = "invalid_input"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(DictionaryError):
    """An entry already exists for the normalized word."""

    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(DictionaryError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class StorageUnavailableError(DictionaryError):
    """The database could not be reached or failed the statement."""

    kind = "storage_unavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
