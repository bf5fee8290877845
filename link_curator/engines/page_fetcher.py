"""HTTP page fetcher for scrapable sources."""

import logging
import threading

import requests
from bs4.dammit import EncodingDetector

from link_curator.config.settings import Settings


logger = logging.getLogger(__name__)


# Used when neither the Content-Type header nor the document declares a charset
DEFAULT_ENCODING = "utf-8"


class FetchError(Exception):
    """Raised when a source page cannot be retrieved.

    Covers network failures, timeouts and non-success status codes.
    """

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class PageFetcher:
    """Retrieves raw document text for a source URL.

    One GET per call and no retries. A failed call raises FetchError so the
    caller can drop that source and keep going.

    Sources are fetched from worker threads, so unless a session is passed
    in, each thread gets its own requests session.

    Attributes:
        settings: Configuration settings (timeout, user agent)
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        """Initialize the fetcher.

        Args:
            settings: Configuration settings including the fetch timeout
            session: Optional pre-built session, mainly for tests
        """
        self.settings = settings
        self._session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        """Return the injected session, or the calling thread's own session."""
        if self._session is not None:
            return self._session
        if not hasattr(self._local, "session"):
            self._local.session = requests.Session()
        return self._local.session

    def fetch(self, url: str) -> str:
        """Fetch a page and return its body as text.

        When the Content-Type header carries no charset, the charset declared
        in the document (<meta charset>, XML declaration) is used, and UTF-8
        otherwise.

        Args:
            url: Absolute http(s) URL to fetch

        Returns:
            Response body decoded as text

        Raises:
            FetchError: On network errors, timeouts, or non-2xx responses
        """
        headers = {
            "User-Agent": self.settings.user_agent,
            "Accept": "text/html, application/xhtml+xml",
        }

        try:
            response = self.session.get(
                url,
                headers=headers,
                timeout=self.settings.fetch_timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        if not 200 <= response.status_code < 300:
            raise FetchError(url, f"unexpected status {response.status_code}")

        content_type = response.headers.get("Content-Type", "")
        if "charset" not in content_type.lower():
            declared = EncodingDetector.find_declared_encoding(response.content, is_html=True)
            response.encoding = declared or DEFAULT_ENCODING

        logger.debug(f"Fetched {len(response.text)} characters from {url} ({response.encoding})")
        return response.text
