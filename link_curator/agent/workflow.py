"""Workflow orchestrator for the link curation pipeline.

Runs one linear pass: fetch and extract every source concurrently, merge,
deduplicate, validate, sort newest first, and write the JSON feed.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime

from link_curator.config.settings import Settings
from link_curator.config.sources import SOURCES
from link_curator.engines.deduplication import deduplicate
from link_curator.engines.json_writer import PersistError, write_links
from link_curator.engines.link_validator import LinkValidator
from link_curator.engines.models import CandidateLink
from link_curator.engines.observability import RunMetrics, log_stage_counts
from link_curator.engines.ordering import sort_by_date
from link_curator.engines.page_fetcher import PageFetcher
from link_curator.engines.source_fetcher import DocumentFetcher, LinkSource


logger = logging.getLogger(__name__)


@dataclass
class WorkflowResult:
    """Result of a pipeline workflow execution.

    Attributes:
        success: Whether the output file was written
        output_path: Path to the written JSON file, or None if the write failed
        links: Links published (or that would have been published)
        metrics: Run metrics collected during execution
    """
    success: bool
    output_path: str | None
    links: list[CandidateLink]
    metrics: RunMetrics


async def _collect_from_sources(
    sources: list[LinkSource],
    fetcher: DocumentFetcher,
) -> tuple[list[CandidateLink], dict[str, int], list[str]]:
    """Collect candidates from all sources concurrently.

    Each source runs as its own task and returns its own list. Results are
    merged in source order only after every task has settled, and a failing
    source contributes nothing.

    Args:
        sources: Configured sources
        fetcher: Fetcher handed to every source

    Returns:
        Tuple of (all_candidates, counts_by_source, errors)
    """
    results = await asyncio.gather(
        *(asyncio.to_thread(source.collect, fetcher) for source in sources),
        return_exceptions=True,
    )

    all_candidates: list[CandidateLink] = []
    counts_by_source: dict[str, int] = {}
    errors: list[str] = []

    for source, result in zip(sources, results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            error_msg = f"Error scraping {source.name}: {result}"
            logger.error(error_msg)
            errors.append(error_msg)
            counts_by_source[source.name] = 0
            continue

        all_candidates.extend(result)
        counts_by_source[source.name] = len(result)
        logger.info(f"Collected {len(result)} links from {source.name}")

    return all_candidates, counts_by_source, errors


async def _validate_links(
    links: list[CandidateLink],
    validator: LinkValidator,
) -> tuple[list[CandidateLink], list[str]]:
    """Check links one at a time, in list order.

    Trusted entries skip the check.

    Returns:
        Tuple of (valid_links, discarded_urls)
    """
    valid: list[CandidateLink] = []
    discarded: list[str] = []

    for link in links:
        if link.trusted or await asyncio.to_thread(validator.is_live, link.link):
            valid.append(link)
        else:
            logger.info(f"Invalid link discarded: {link.link}")
            discarded.append(link.link)

    return valid, discarded


async def run_pipeline(
    settings: Settings,
    sources: list[LinkSource] | None = None,
    fetcher: DocumentFetcher | None = None,
    validator: LinkValidator | None = None,
) -> WorkflowResult:
    """Execute the full link curation pipeline.

    Stages:
    1. Fetch and extract from every source concurrently
    2. Deduplicate by link, first occurrence wins
    3. Validate each unique link sequentially
    4. Sort by date, most recent first
    5. Write the JSON feed

    Per-source and per-link failures are logged and contained. Only a
    failed write marks the run as unsuccessful.

    Args:
        settings: Configuration settings for the pipeline
        sources: Sources to read; defaults to the in-code source table
        fetcher: Page fetcher; defaults to a PageFetcher built from settings
        validator: Link validator; defaults to a LinkValidator built from settings

    Returns:
        WorkflowResult containing success status, path, links and metrics
    """
    metrics = RunMetrics(run_timestamp=datetime.now())
    sources = SOURCES if sources is None else sources
    fetcher = fetcher or PageFetcher(settings)
    validator = validator or LinkValidator(settings)

    logger.info("Starting web scraping and validation...")

    # Stage 1: Fetch and extract
    candidates, metrics.fetched_count_by_source, fetch_errors = (
        await _collect_from_sources(sources, fetcher)
    )
    metrics.errors.extend(fetch_errors)
    metrics.candidate_count = len(candidates)
    log_stage_counts("collected", len(candidates))

    # Stage 2: Deduplicate
    unique = deduplicate(candidates).links
    metrics.unique_count = len(unique)
    log_stage_counts("deduped", len(unique))

    # Stage 3: Validate
    valid, metrics.discarded_links = await _validate_links(unique, validator)
    metrics.valid_count = len(valid)
    log_stage_counts("validated", len(valid))

    # Stage 4: Sort
    ordered = sort_by_date(valid)

    # Stage 5: Persist
    output_path: str | None = None
    try:
        output_path = await asyncio.to_thread(write_links, ordered, settings.output_path)
        logger.info(f"Successfully wrote {len(ordered)} valid links to {output_path}")
    except PersistError as e:
        error_msg = str(e)
        logger.error(error_msg)
        metrics.errors.append(error_msg)

    metrics.output_path = output_path

    return WorkflowResult(
        success=output_path is not None,
        output_path=output_path,
        links=ordered,
        metrics=metrics,
    )
