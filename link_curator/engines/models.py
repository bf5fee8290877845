"""Link data models shared across the pipeline stages."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CandidateLink:
    """An extracted or literal entry, before or after liveness validation.

    Attributes:
        date: Date text as found on the page, or today's UTC date (YYYY-MM-DD)
        link: Absolute article URL
        source: Name of the source that produced the entry
        title: Whitespace-normalized, non-empty title
        trusted: True for operator-supplied entries that skip validation
    """
    date: str
    link: str
    source: str
    title: str
    trusted: bool = field(default=False, compare=False)

    def to_dict(self) -> dict[str, str]:
        """Return the published record, keys in output order.

        Example:
            >>> CandidateLink("2025-11-01", "https://y", "S", "T").to_dict()
            {'date': '2025-11-01', 'link': 'https://y', 'source': 'S', 'title': 'T'}
        """
        return {
            "date": self.date,
            "link": self.link,
            "source": self.source,
            "title": self.title,
        }
