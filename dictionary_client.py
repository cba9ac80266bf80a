"""Dictionary API client.

A thin wrapper around the REST API served by ``dictionary_api`` for
front ends such as a chat bot or a terminal UI.  The client uses the
``requests`` library internally and exposes one method per operation:

* :meth:`DictionaryAPI.add_word` – contribute a new word.
* :meth:`DictionaryAPI.define` – look up a word's definition.
* :meth:`DictionaryAPI.update_word` – change meaning, language or contributor.
* :meth:`DictionaryAPI.delete_word` – remove a word.
* :meth:`DictionaryAPI.suggest` – autosuggest words for a typed prefix.

Methods never raise for HTTP or network failures.  Except for
``suggest`` they return a tuple ``(result, error)`` where ``error`` is
``None`` on success or a dictionary with the keys ``status_code``,
``kind`` and ``message``.

:class:`SuggestDebouncer` batches keystrokes so that only the text
typed after a short pause is sent to :meth:`DictionaryAPI.suggest`.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

# Mirrors the server's SUGGEST_MIN_LENGTH default; shorter queries are
# answered locally.
SUGGEST_MIN_LENGTH = 2


class DictionaryAPI:
    """Client for interacting with the dictionary API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
        api_prefix: str = "/api/v1",
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
            api_prefix: Path prefix of the versioned routes.
        """
        self.base_url = base_url.rstrip("/") + api_prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the versioned base URL (e.g. ``/words/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            kind = None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    kind = err_json.get("kind")
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "kind": kind, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "kind": "network_error", "message": str(exc)}

    @staticmethod
    def _word_path(word: str) -> str:
        return "/words/" + quote(word.strip(), safe="")

    # ------------------------------------------------------------------
    # Word operations
    # ------------------------------------------------------------------
    def add_word(
        self,
        word: str,
        meaning: str,
        language: Optional[str] = None,
        added_by: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Contribute a new word.

        Blank ``word`` or ``meaning`` is rejected locally without a
        request, the same way the server would reject it.

        Returns:
            A tuple ``(entry, error)``.  ``error["kind"]`` is
            ``"conflict"`` when the word already exists.
        """
        if not (word or "").strip() or not (meaning or "").strip():
            return None, {"status_code": None, "kind": "invalid_input", "message": "Word and meaning are required"}
        payload: Dict[str, Any] = {"word": word, "meaning": meaning}
        if language is not None:
            payload["language"] = language
        if added_by is not None:
            payload["addedBy"] = added_by
        data, error = self._request("POST", "/words/", json_body=payload)
        if error:
            return None, error
        return data.get("word") if isinstance(data, dict) else None, None

    def define(self, word: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the entry for ``word``.

        Returns:
            A tuple ``(entry, error)``.  A word that is not in the
            dictionary yields an error of kind ``"not_found"``.
        """
        if not (word or "").strip():
            return None, {"status_code": None, "kind": "invalid_input", "message": "Word is required"}
        return self._request("GET", self._word_path(word))

    def update_word(self, word: str, **fields: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Update ``meaning``, ``language`` and/or ``added_by`` of a word."""
        if not (word or "").strip():
            return None, {"status_code": None, "kind": "invalid_input", "message": "Word is required"}
        payload = {}
        for name, value in fields.items():
            if value is None:
                continue
            payload["addedBy" if name == "added_by" else name] = value
        return self._request("PUT", self._word_path(word), json_body=payload)

    def delete_word(self, word: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Remove a word.

        Returns:
            A tuple ``(success, error)``.
        """
        if not (word or "").strip():
            return False, {"status_code": None, "kind": "invalid_input", "message": "Word is required"}
        _, error = self._request("DELETE", self._word_path(word))
        if error:
            return False, error
        return True, None

    def suggest(self, q: str) -> List[str]:
        """Return words starting with ``q``.

        Short or blank queries return ``[]`` without a request.  Any
        failure also yields ``[]``.
        """
        if len((q or "").strip()) < SUGGEST_MIN_LENGTH:
            return []
        data, error = self._request("GET", "/suggest", params={"q": q})
        if error or not isinstance(data, list):
            return []
        return [w for w in data if isinstance(w, str)]


class SuggestDebouncer:
    """Run a suggest lookup only after typing has paused.

    Each call to :meth:`update` cancels the pending lookup and schedules
    a new one ``delay`` seconds later.  Blank text clears the
    suggestions immediately without a lookup.  Results of a lookup that
    was superseded while in flight are dropped.
    """

    def __init__(
        self,
        fetch: Callable[[str], List[str]],
        on_result: Callable[[List[str]], None],
        delay: float = 0.3,
    ) -> None:
        self._fetch = fetch
        self._on_result = on_result
        self._delay = delay
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    def update(self, text: str) -> None:
        with self._lock:
            self._cancel_locked()
            if not (text or "").strip():
                clear = True
            else:
                clear = False
                generation = self._generation
                self._timer = threading.Timer(self._delay, self._run, args=(text, generation))
                self._timer.daemon = True
                self._timer.start()
        if clear:
            self._on_result([])

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _run(self, text: str, generation: int) -> None:
        suggestions = self._fetch(text)
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
        self._on_result(suggestions)
