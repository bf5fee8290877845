"""Link Curator - scrapes a fixed set of sources into a curated links feed."""
