"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Storage access lives in ``services.word_store``, the
validation and normalization policy in ``services.lookup_service``
and the HTTP surface in ``api/v1/endpoints``.  Versioning is handled
by grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
