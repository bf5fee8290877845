"""Selector-driven extraction of candidate links from a source page."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from link_curator.engines.models import CandidateLink


logger = logging.getLogger(__name__)


# Number of article nodes read per source page
MAX_ITEMS_PER_SOURCE = 5

DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class SelectorRules:
    """CSS selectors identifying the article, its link and its date.

    Attributes:
        article_selector: Container node of one article
        link_selector: Anchor inside the container (href and title)
        date_selector: Node inside the container holding the date text
        max_items: Number of leading article containers to read
    """
    article_selector: str
    link_selector: str
    date_selector: str
    max_items: int = MAX_ITEMS_PER_SOURCE


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends.

    Example:
        >>> normalize_whitespace("  New   design\\n system  ")
        'New design system'
    """
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def today_utc() -> str:
    """Return the current UTC calendar date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def origin(scheme: str, host: str | None, port: int | None) -> str:
    """Build scheme://host[:port] with any userinfo left out.

    The port is omitted when it is the scheme's default.

    Example:
        >>> origin("https", "x.example", 8443)
        'https://x.example:8443'
        >>> origin("https", "x.example", 443)
        'https://x.example'
    """
    host = host or ""
    if ":" in host:
        host = f"[{host}]"
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        return f"{scheme}://{host}:{port}"
    return f"{scheme}://{host}"


def resolve_link(href: str, base_url: str) -> str:
    """Make a root-relative or protocol-relative href absolute.

    Root-relative paths are joined to the origin (scheme and host) of the
    source page. Any other href is returned unchanged.

    Example:
        >>> resolve_link("/foo", "https://x.example/bar")
        'https://x.example/foo'
        >>> resolve_link("https://other.example/a", "https://x.example/bar")
        'https://other.example/a'
    """
    if not href.startswith("/"):
        return href

    parsed = urlparse(base_url)
    if href.startswith("//"):
        return f"{parsed.scheme}:{href}"
    return f"{origin(parsed.scheme, parsed.hostname, parsed.port)}{href}"


def extract_links(
    document: str,
    source_name: str,
    base_url: str,
    rules: SelectorRules,
    today: str | None = None,
) -> list[CandidateLink]:
    """Apply selector rules to a page and return up to max_items candidates.

    Article containers are taken in document order and capped before any
    field is read. Within a container only the first link match and the
    first date match count. Containers without a usable link or title are
    skipped without error.

    Args:
        document: Raw HTML of the source page
        source_name: Name recorded on each candidate
        base_url: URL the page was fetched from, used to resolve hrefs
        rules: Selectors for this source
        today: Fallback date; defaults to the current UTC date

    Returns:
        List of CandidateLink objects, at most rules.max_items items
    """
    soup = BeautifulSoup(document, "lxml")
    fallback_date = today or today_utc()

    containers = soup.select(rules.article_selector)[:rules.max_items]

    links: list[CandidateLink] = []
    for container in containers:
        candidate = _parse_container(container, source_name, base_url, rules, fallback_date)
        if candidate:
            links.append(candidate)

    logger.debug(
        f"{source_name}: {len(containers)} article nodes, {len(links)} candidates"
    )
    return links


def _parse_container(
    container: Any,
    source_name: str,
    base_url: str,
    rules: SelectorRules,
    fallback_date: str,
) -> CandidateLink | None:
    """Read link, title and date from one article container."""
    link_elem = container.select_one(rules.link_selector)
    if link_elem is None:
        return None

    href = link_elem.get("href") or ""
    link = resolve_link(href.strip(), base_url)
    title = normalize_whitespace(link_elem.get_text())

    if not link or not title:
        return None

    date_elem = container.select_one(rules.date_selector)
    date_text = date_elem.get_text().strip() if date_elem is not None else ""

    return CandidateLink(
        date=date_text or fallback_date,
        link=link,
        source=source_name,
        title=title,
    )
