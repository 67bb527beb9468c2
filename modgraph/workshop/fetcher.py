"""Page fetching for the resolver.

The resolver only depends on the :class:`Fetcher` protocol; :class:`HttpxFetcher`
is the production implementation.  Tests substitute an in-memory fetcher.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from modgraph.config import settings
from modgraph.workshop.errors import FetchError

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch_text(self, url: str) -> str:
        """Return the body of *url* or raise :class:`FetchError`."""
        ...


class HttpxFetcher:
    """Fetch pages over HTTP with a shared ``httpx.Client``.

    Redirects are followed and every request is bounded by *timeout*
    (``settings.request_timeout`` by default).  There are no retries: one
    failed attempt is reported as a :class:`FetchError`.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers={"User-Agent": user_agent or settings.user_agent},
            timeout=timeout if timeout is not None else settings.request_timeout,
            follow_redirects=True,
        )

    def fetch_text(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(url, f"request failed: {exc}") from exc

        if not response.is_success:
            raise FetchError(url, f"request failed: status {response.status_code}")

        try:
            return response.text
        except (UnicodeDecodeError, httpx.HTTPError) as exc:
            raise FetchError(url, f"failed to read response: {exc}") from exc

    def close(self) -> None:
        """Release the underlying client if this fetcher created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
