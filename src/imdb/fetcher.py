"""Document source for IMDb pages.

Fetches raw HTML over HTTP with httpx. Any transport failure or
non-success status is reported as a FetchError, nothing is retried.
"""

from typing import Protocol

import httpx

from src.imdb.utils import setup_logger
from src.settings import IMDBSettings, settings

logger = setup_logger("imdb.fetcher")


class ImdbError(Exception):
    """Base exception for scraper errors."""

    pass


class FetchError(ImdbError):
    """Raised when a page could not be retrieved.

    Attributes:
        url: Requested URL.
        reason: Short description of the failure.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch {url}: {reason}")


class DocumentSource(Protocol):
    """Anything able to turn a URL into page markup."""

    def fetch(self, url: str) -> str:
        """Return the raw markup at ``url`` or raise FetchError."""
        ...


class HttpDocumentSource:
    """Fetches pages with httpx.

    One client is opened per fetch, so an instance carries no connection
    state and can be shared by any number of movies.

    Attributes:
        config: IMDb settings (timeout, headers).
    """

    def __init__(
        self,
        config: IMDBSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            config: IMDb settings, defaults to the global settings.
            transport: Optional httpx transport (tests use MockTransport).
        """
        self.config = config or settings.imdb
        self._transport = transport

    def _create_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.config.timeout,
            headers=self.config.headers,
            follow_redirects=True,
            transport=self._transport,
        )

    def fetch(self, url: str) -> str:
        """GET a page and return its decoded body.

        Args:
            url: Absolute page URL.

        Returns:
            Page markup.

        Raises:
            FetchError: On timeout, network error or non-2xx status.
        """
        logger.debug(f"GET {url}")
        try:
            with self._create_client() as client:
                response = client.get(url)
        except httpx.TimeoutException as e:
            logger.warning(f"Request timeout: {url}")
            raise FetchError(url, "timeout") from e
        except httpx.HTTPError as e:
            logger.warning(f"Request failed: {url}: {e}")
            raise FetchError(url, str(e) or type(e).__name__) from e

        return self._handle_response(response, url)

    def _handle_response(self, response: httpx.Response, url: str) -> str:
        """Return the body of a successful response.

        Raises:
            FetchError: When the status is not 2xx.
        """
        if response.is_success:
            return response.text

        logger.warning(f"HTTP {response.status_code} for {url}")
        raise FetchError(url, f"HTTP {response.status_code}")
