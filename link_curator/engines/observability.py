"""Run metrics and stage logging for the link curation pipeline."""

import logging
from dataclasses import dataclass, field
from datetime import datetime


logger = logging.getLogger(__name__)


@dataclass
class RunMetrics:
    """Metrics collected during a pipeline run.

    Attributes:
        fetched_count_by_source: Candidates contributed per source
        candidate_count: Candidates merged from all sources
        unique_count: Candidates left after deduplication
        valid_count: Links that passed (or bypassed) validation
        discarded_links: Links dropped by the validator
        output_path: Path of the written file, None if the write failed
        errors: Error messages encountered during the run
        run_timestamp: Timestamp when the run started
    """
    fetched_count_by_source: dict[str, int] = field(default_factory=dict)
    candidate_count: int = 0
    unique_count: int = 0
    valid_count: int = 0
    discarded_links: list[str] = field(default_factory=list)
    output_path: str | None = None
    errors: list[str] = field(default_factory=list)
    run_timestamp: datetime = field(default_factory=datetime.now)


def log_stage_counts(stage: str, count: int) -> None:
    """Log the count for a pipeline stage.

    Example:
        >>> log_stage_counts("deduped", 12)
        # Logs: "Pipeline stage 'deduped': 12 links"
    """
    logger.info(f"Pipeline stage '{stage}': {count} links")


def log_run_summary(metrics: RunMetrics) -> None:
    """Log a one-line summary of a finished run.

    Example:
        >>> log_run_summary(RunMetrics(candidate_count=9, unique_count=8, valid_count=7))
        # Logs: "Run summary: sources=0 errors=0 collected=9 unique=8 valid=7 discarded=0 output=None"
    """
    logger.info(
        f"Run summary: sources={len(metrics.fetched_count_by_source)} "
        f"errors={len(metrics.errors)} "
        f"collected={metrics.candidate_count} unique={metrics.unique_count} "
        f"valid={metrics.valid_count} discarded={len(metrics.discarded_links)} "
        f"output={metrics.output_path}"
    )
