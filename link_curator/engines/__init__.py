"""Engines module - core processing components."""

from link_curator.engines.json_writer import PersistError
from link_curator.engines.models import CandidateLink
from link_curator.engines.page_fetcher import FetchError

__all__ = [
    "CandidateLink",
    # Exceptions
    "FetchError",
    "PersistError",
]
