"""
Central source table for the link curator.

This is the ONLY place where source URLs and selectors should be defined.
Add new sources here; no other file needs to change.
"""

from link_curator.engines.source_fetcher import LinkSource, ManualSource, ScrapableSource


# ---------------------------------------------------------------------------
# Scraped sources
# Each entry names the listing page plus the CSS selectors for the article
# container, the link inside it and the date inside it.
# ---------------------------------------------------------------------------

SCRAPABLE_SOURCES: list[ScrapableSource] = [
    ScrapableSource(
        name="The Design System Guide",
        url="https://learn.thedesignsystem.guide/",
        article_selector=".post-card",
        link_selector=".post-card-content a",
        date_selector=".post-card-date",
    ),
    ScrapableSource(
        name="Built For Mars UX Bites",
        url="https://builtformars.com/ux-bites",
        article_selector=".post-card-item",
        link_selector="a",
        date_selector=".post-date",
    ),
    ScrapableSource(
        name="Growth Design",
        url="https://growth.design/case-studies",
        article_selector=".case-study-card",
        link_selector="a",
        date_selector=".date",
    ),
]

# ---------------------------------------------------------------------------
# Manual sources
# Sites too awkward to scrape (e.g. YouTube). The entry is published as-is.
# ---------------------------------------------------------------------------

MANUAL_SOURCES: list[ManualSource] = [
    ManualSource(
        name="Sneak Peek Design (Manual)",
        url="https://www.youtube.com/@sneakpeekdesign/videos",
        date="2025-11-01",
        title="Check the latest AI videos on Sneak Peek Design",
    ),
]

SOURCES: list[LinkSource] = [*SCRAPABLE_SOURCES, *MANUAL_SOURCES]
