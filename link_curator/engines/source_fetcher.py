"""Source protocol and the two source variants: scraped and manual."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from link_curator.engines.extractor import (
    MAX_ITEMS_PER_SOURCE,
    SelectorRules,
    extract_links,
)
from link_curator.engines.models import CandidateLink


@runtime_checkable
class DocumentFetcher(Protocol):
    """Anything that can turn a URL into document text."""

    def fetch(self, url: str) -> str:
        ...


@runtime_checkable
class LinkSource(Protocol):
    """Protocol defining the interface for link sources.

    All sources must implement this protocol to be used in the pipeline.

    Attributes:
        name: Identifier for the source (e.g., "Growth Design")
        url: Absolute URL of the source
    """

    @property
    def name(self) -> str:
        """Return the source identifier."""
        ...

    @property
    def url(self) -> str:
        """Return the source URL."""
        ...

    def extract(self, document: str | None) -> list[CandidateLink]:
        """Turn a source document into candidate links."""
        ...

    def collect(self, fetcher: DocumentFetcher) -> list[CandidateLink]:
        """Retrieve whatever the source needs and return its candidates.

        Raises:
            May raise FetchError on network errors, which should be
            handled by the caller.
        """
        ...


@dataclass(frozen=True)
class ScrapableSource:
    """A site whose listing page is fetched and read with CSS selectors."""

    name: str
    url: str
    article_selector: str
    link_selector: str
    date_selector: str
    max_items: int = MAX_ITEMS_PER_SOURCE

    @property
    def rules(self) -> SelectorRules:
        return SelectorRules(
            article_selector=self.article_selector,
            link_selector=self.link_selector,
            date_selector=self.date_selector,
            max_items=self.max_items,
        )

    def extract(self, document: str | None) -> list[CandidateLink]:
        if not document:
            return []
        return extract_links(document, self.name, self.url, self.rules)

    def collect(self, fetcher: DocumentFetcher) -> list[CandidateLink]:
        return self.extract(fetcher.fetch(self.url))


@dataclass(frozen=True)
class ManualSource:
    """A source the operator vouches for with one literal entry.

    Nothing is fetched; the source URL doubles as the link and the entry
    is never checked by the validator.
    """

    name: str
    url: str
    date: str
    title: str

    def extract(self, document: str | None = None) -> list[CandidateLink]:
        return [
            CandidateLink(
                date=self.date,
                link=self.url,
                source=self.name,
                title=self.title,
                trusted=True,
            )
        ]

    def collect(self, fetcher: DocumentFetcher) -> list[CandidateLink]:
        return self.extract()
