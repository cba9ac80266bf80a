"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment override
them via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Dictionary API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  If a relative path is provided,
    # it will be resolved relative to the project root by the ``db``
    # module.
    database_url: str = os.getenv("DATABASE_URL", "dictionary.db")

    # Values stored when a contributor omits ``language`` or ``addedBy``.
    default_language: str = os.getenv("DEFAULT_LANGUAGE", "unknown")
    default_added_by: str = os.getenv("DEFAULT_ADDED_BY", "anonymous")

    # Suggest queries shorter than this (after trimming) return an empty
    # list without hitting the database.
    suggest_min_length: int = int(os.getenv("SUGGEST_MIN_LENGTH", "2"))
    suggest_limit: int = int(os.getenv("SUGGEST_LIMIT", "5"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
