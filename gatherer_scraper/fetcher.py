"""Gatherer page fetcher with timeout and bounded retry.

Only transport lives here; extraction is a pure function of the markup
and never retries.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from gatherer_scraper.errors import TransportError
from gatherer_scraper.extractor import extract_card
from gatherer_scraper.identifier import extract_multiverse_id
from gatherer_scraper.models import CardRecord

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "GathererScraper/0.1"
MAX_RETRIES = 3
BACKOFF_BASE = 1.0  # seconds — exponential backoff: 1, 2, 4


def _is_transient(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


class GathererFetcher:
    """Fetches card-detail page markup over HTTP."""

    def __init__(
        self,
        timeout: float = 30.0,
        max_retries: int = MAX_RETRIES,
        backoff_base: float = BACKOFF_BASE,
        user_agent: str = DEFAULT_USER_AGENT,
        rate_limit_ms: int = 0,
    ) -> None:
        self._timeout = timeout
        self._max_retries = max_retries
        self._backoff_base = backoff_base
        self._user_agent = user_agent
        self._rate_limit = rate_limit_ms / 1000.0
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                headers={"User-Agent": self._user_agent},
            )
        return self._client

    async def _throttle(self) -> None:
        if self._rate_limit > 0:
            await asyncio.sleep(self._rate_limit)

    async def fetch(self, url: str) -> str:
        """Return the page markup for *url*.

        Connection errors, timeouts, 429 and 5xx responses are retried
        with exponential backoff.  Raises TransportError once retries are
        exhausted, on any other HTTP error, or on a request error such
        as a redirect loop.
        """
        client = self._get_client()
        await self._throttle()
        last_error = "no attempts made"
        for attempt in range(1, self._max_retries + 1):
            try:
                resp = await client.get(url)
                if _is_transient(resp.status_code):
                    last_error = f"HTTP {resp.status_code}"
                else:
                    resp.raise_for_status()
                    return resp.text
            except httpx.HTTPStatusError as exc:
                raise TransportError(url, f"HTTP {exc.response.status_code}") from exc
            except httpx.TransportError as exc:
                last_error = f"{type(exc).__name__}: {exc}"
            except httpx.RequestError as exc:
                raise TransportError(url, f"{type(exc).__name__}: {exc}") from exc

            if attempt < self._max_retries:
                delay = self._backoff_base * (2 ** (attempt - 1))
                logger.warning(
                    "Retry %d/%d for %s in %.1fs: %s",
                    attempt, self._max_retries, url, delay, last_error,
                )
                await asyncio.sleep(delay)

        raise TransportError(
            url, f"Failed after {self._max_retries} attempts: {last_error}"
        )

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GathererFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


async def scrape_card(url: str, fetcher: GathererFetcher) -> CardRecord:
    """Fetch *url* and extract its card record.

    A URL without a multiverse id fails before any request is made.
    TransportError from the fetcher propagates unchanged and no
    extraction is attempted.
    """
    extract_multiverse_id(url)
    markup = await fetcher.fetch(url)
    return extract_card(url, markup)
