"""Blocking HTTP transport exposed to the event loop through worker threads."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import requests

from ..config import REQUEST_TIMEOUT_SEC
from ..errors import MalformedResponseError, NetworkError

_logger = logging.getLogger(__name__)


class RequestsTransport:
    """POST JSON to the dataset server.

    ``requests`` is synchronous, so every call is pushed onto a worker thread
    with :func:`asyncio.to_thread`; several calls awaited together therefore
    really are in flight at the same time.  The session is shared between
    those threads, which ``requests`` tolerates for plain request/response
    use like ours.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = REQUEST_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def post_json(self, endpoint: str, payload: dict[str, Any]) -> Any:
        """POST *payload* and return the decoded JSON body (``None`` when empty)."""
        return await asyncio.to_thread(self._post_json_blocking, endpoint, payload)

    def _post_json_blocking(self, endpoint: str, payload: dict[str, Any]) -> Any:
        url = self.url_for(endpoint)
        try:
            response = self._session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"POST {endpoint} failed: {exc}", endpoint=endpoint) from exc

        if not 200 <= response.status_code < 300:
            raise NetworkError(
                f"POST {endpoint} returned HTTP {response.status_code}",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"POST {endpoint} returned a non-JSON body",
                endpoint=endpoint,
                status_code=response.status_code,
            ) from exc

    def close(self) -> None:
        self._session.close()
