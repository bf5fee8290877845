"""Lightweight liveness check for candidate links."""

import logging

import requests

from link_curator.config.settings import Settings


logger = logging.getLogger(__name__)


class LinkValidator:
    """Reports whether a URL currently resolves, using a HEAD request.

    No body is transferred. Redirects are followed up to settings.max_redirects
    hops and each check is bounded by settings.validate_timeout_seconds.
    Every failure collapses to False.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self.settings = settings
        self.session = session or requests.Session()
        self.session.max_redirects = settings.max_redirects

    def is_live(self, url: str) -> bool:
        """Return True iff the final response status is in 200-399.

        Args:
            url: Link to check

        Returns:
            True for a live link, False for 4xx/5xx, timeouts, DNS errors,
            refused connections, redirect loops and malformed URLs
        """
        headers = {"User-Agent": self.settings.user_agent}
        try:
            response = self.session.head(
                url,
                headers=headers,
                allow_redirects=True,
                timeout=self.settings.validate_timeout_seconds,
            )
        except requests.RequestException as e:
            logger.debug(f"HEAD {url} failed: {e}")
            return False

        return 200 <= response.status_code < 400
