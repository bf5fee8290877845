"""Property-based tests for link sources.

Covers the scraped and manual source variants behind the shared protocol.
"""

from hypothesis import given, settings, strategies as st

from link_curator.config.sources import MANUAL_SOURCES, SCRAPABLE_SOURCES, SOURCES
from link_curator.engines.models import CandidateLink
from link_curator.engines.page_fetcher import FetchError
from link_curator.engines.source_fetcher import LinkSource, ManualSource, ScrapableSource


class MockDocumentFetcher:
    """Mock fetcher that serves canned pages and records requested URLs."""

    def __init__(self, pages: dict[str, str]):
        self._pages = pages
        self.requested: list[str] = []

    def fetch(self, url: str) -> str:
        self.requested.append(url)
        if url not in self._pages:
            raise FetchError(url, "404 Client Error")
        return self._pages[url]


def _listing_page(count: int) -> str:
    items = "".join(
        f'<li class="card"><a href="/p/{i}">Post {i}</a><time>2025-03-{i + 1:02d}</time></li>'
        for i in range(count)
    )
    return f"<html><body><ul>{items}</ul></body></html>"


SCRAPED = ScrapableSource(
    name="Example Blog",
    url="https://blog.example/articles",
    article_selector=".card",
    link_selector="a",
    date_selector="time",
)

MANUAL = ManualSource(
    name="Manual Source",
    url="https://www.youtube.com/@channel/videos",
    date="2025-11-01",
    title="Latest videos",
)


class TestSourceProtocol:
    """Both source variants SHALL satisfy the LinkSource protocol."""

    def test_scrapable_source_is_link_source(self):
        assert isinstance(SCRAPED, LinkSource)

    def test_manual_source_is_link_source(self):
        assert isinstance(MANUAL, LinkSource)

    def test_configured_sources_satisfy_protocol(self):
        assert SOURCES
        assert all(isinstance(source, LinkSource) for source in SOURCES)

    def test_configured_source_names_are_unique(self):
        names = [source.name for source in SOURCES]
        assert len(names) == len(set(names))

    def test_configured_urls_are_absolute(self):
        for source in [*SCRAPABLE_SOURCES, *MANUAL_SOURCES]:
            assert source.url.startswith(("http://", "https://"))


class TestScrapableSource:
    """Tests for the scraped source variant."""

    @given(count=st.integers(min_value=0, max_value=15))
    @settings(max_examples=50)
    def test_collect_returns_at_most_max_items(self, count: int):
        """For any page size, collect SHALL return at most five candidates."""
        fetcher = MockDocumentFetcher({SCRAPED.url: _listing_page(count)})

        links = SCRAPED.collect(fetcher)

        assert len(links) == min(count, 5)
        assert fetcher.requested == [SCRAPED.url]

    def test_collect_resolves_links_against_source_origin(self):
        fetcher = MockDocumentFetcher({SCRAPED.url: _listing_page(1)})

        links = SCRAPED.collect(fetcher)

        assert links[0] == CandidateLink(
            date="2025-03-01",
            link="https://blog.example/p/0",
            source="Example Blog",
            title="Post 0",
        )

    def test_collect_propagates_fetch_error(self):
        """A failed fetch SHALL surface to the caller as FetchError."""
        fetcher = MockDocumentFetcher({})

        try:
            SCRAPED.collect(fetcher)
        except FetchError as e:
            assert e.url == SCRAPED.url
        else:
            raise AssertionError("FetchError not raised")

    def test_extract_empty_document_returns_empty(self):
        assert SCRAPED.extract("") == []
        assert SCRAPED.extract(None) == []


class TestManualSource:
    """Tests for the manual source variant."""

    def test_collect_does_not_fetch(self):
        fetcher = MockDocumentFetcher({})

        links = MANUAL.collect(fetcher)

        assert fetcher.requested == []
        assert len(links) == 1

    def test_literal_entry_uses_source_url_as_link(self):
        (link,) = MANUAL.extract()

        assert link.to_dict() == {
            "date": "2025-11-01",
            "link": "https://www.youtube.com/@channel/videos",
            "source": "Manual Source",
            "title": "Latest videos",
        }

    def test_literal_entry_is_trusted(self):
        (link,) = MANUAL.extract()

        assert link.trusted is True

    @given(document=st.one_of(st.none(), st.text(max_size=200)))
    @settings(max_examples=50)
    def test_extract_ignores_document(self, document):
        """For any document, a manual source SHALL return its literal entry."""
        assert MANUAL.extract(document) == MANUAL.extract()
