"""Deduplication engine for removing repeated links."""

import logging
from dataclasses import dataclass

from link_curator.engines.models import CandidateLink


logger = logging.getLogger(__name__)


@dataclass
class DeduplicationResult:
    """Result of deduplication operation.

    Attributes:
        links: Deduplicated links in first-seen order
        removed_count: Number of entries dropped as duplicates
    """
    links: list[CandidateLink]
    removed_count: int


def deduplicate(links: list[CandidateLink]) -> DeduplicationResult:
    """Keep exactly one entry per distinct link.

    The entry kept is the first one encountered in the input, and the
    relative order of kept entries is the input order.

    Args:
        links: Candidate links as merged from all sources

    Returns:
        DeduplicationResult containing the unique links and removal count

    Example:
        >>> a = CandidateLink("2024-01-15", "https://a.com/1", "A", "First")
        >>> b = CandidateLink("2024-01-20", "https://a.com/1", "B", "Second")
        >>> deduplicate([a, b]).links[0].source
        'A'
    """
    seen: set[str] = set()
    unique: list[CandidateLink] = []

    for link in links:
        if link.link in seen:
            continue
        seen.add(link.link)
        unique.append(link)

    removed_count = len(links) - len(unique)
    if removed_count > 0:
        logger.info(f"Removed {removed_count} entries with duplicate links")

    return DeduplicationResult(links=unique, removed_count=removed_count)
