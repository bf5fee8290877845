"""Property-based tests for link deduplication."""

from hypothesis import given, settings, strategies as st

from link_curator.engines.deduplication import DeduplicationResult, deduplicate
from link_curator.engines.models import CandidateLink


# Strategy for generating CandidateLink instances
@st.composite
def candidate_link_strategy(draw, link=None):
    """Generate a CandidateLink with an optional fixed link."""
    sources = ["The Design System Guide", "Growth Design", "Test Source"]

    return CandidateLink(
        date=draw(st.dates().map(lambda d: d.isoformat())),
        link=link if link is not None else f"https://example.com/{draw(st.integers(0, 10000))}",
        source=draw(st.sampled_from(sources)),
        title=draw(st.text(min_size=1, max_size=50).filter(lambda t: t.strip())),
        trusted=draw(st.booleans()),
    )


@st.composite
def links_with_duplicates(draw):
    """Generate a list of candidates drawn from a small pool of links."""
    num_unique = draw(st.integers(min_value=1, max_value=8))
    urls = [f"https://example.com/post/{i}" for i in range(num_unique)]

    count = draw(st.integers(min_value=0, max_value=num_unique * 3))
    return [draw(candidate_link_strategy(link=draw(st.sampled_from(urls)))) for _ in range(count)]


class TestDeduplicationUniqueness:
    """Property tests for link uniqueness after deduplication."""

    @given(links=links_with_duplicates())
    @settings(max_examples=100)
    def test_no_two_entries_share_a_link(self, links: list[CandidateLink]):
        """For any candidate list, the output SHALL contain no repeated link."""
        result = deduplicate(links)

        urls = [link.link for link in result.links]
        assert len(urls) == len(set(urls))

    @given(links=links_with_duplicates())
    @settings(max_examples=100)
    def test_every_distinct_link_survives(self, links: list[CandidateLink]):
        """Every distinct input link SHALL appear exactly once."""
        result = deduplicate(links)

        assert {l.link for l in result.links} == {l.link for l in links}

    @given(links=links_with_duplicates())
    @settings(max_examples=100)
    def test_removed_count_matches(self, links: list[CandidateLink]):
        result = deduplicate(links)

        assert result.removed_count == len(links) - len(result.links)


class TestDeduplicationFirstOccurrence:
    """Property tests for first-occurrence semantics."""

    @given(links=links_with_duplicates())
    @settings(max_examples=100)
    def test_kept_entry_is_first_seen(self, links: list[CandidateLink]):
        """For each link, the kept entry SHALL be the first one in the input."""
        result = deduplicate(links)

        for kept in result.links:
            first = next(l for l in links if l.link == kept.link)
            assert kept is first

    @given(links=links_with_duplicates())
    @settings(max_examples=100)
    def test_order_of_first_occurrences_preserved(self, links: list[CandidateLink]):
        result = deduplicate(links)

        expected: list[str] = []
        for link in links:
            if link.link not in expected:
                expected.append(link.link)
        assert [l.link for l in result.links] == expected

    def test_duplicate_across_sources_keeps_first_fields(self):
        """Two sources yielding one link SHALL produce the first source's entry."""
        first = CandidateLink("2025-01-01", "https://shared.example/a", "Source A", "From A")
        second = CandidateLink("2025-06-01", "https://shared.example/a", "Source B", "From B")

        result = deduplicate([first, second])

        assert result.links == [first]
        assert result.links[0].title == "From A"
        assert result.removed_count == 1

    def test_empty_input(self):
        assert deduplicate([]) == DeduplicationResult(links=[], removed_count=0)
