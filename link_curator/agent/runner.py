"""Runner module for the link curation pipeline.

This module wires together settings, logging and the workflow.
"""

import asyncio
import logging
import sys

from link_curator.agent.workflow import run_pipeline
from link_curator.config.settings import ConfigurationError, load_settings
from link_curator.engines.observability import log_run_summary


# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_PIPELINE_ERROR = 2


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise INFO.
    """
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def run(verbose: bool = False) -> int:
    """Run the link curation pipeline.

    Args:
        verbose: If True, enable verbose/debug logging.

    Returns:
        Exit code:
        - 0: Success
        - 1: Configuration error
        - 2: Output write failed or unexpected pipeline error
    """
    _setup_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(validate=True)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    try:
        result = asyncio.run(run_pipeline(settings))
    except Exception as e:
        logger.exception(f"Pipeline failed with unexpected error: {e}")
        return EXIT_PIPELINE_ERROR

    log_run_summary(result.metrics)

    if not result.success:
        logger.warning("Pipeline finished without writing the links file")
        return EXIT_PIPELINE_ERROR

    return EXIT_SUCCESS
