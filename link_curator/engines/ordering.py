"""Calendar-date ordering for the published feed."""

from datetime import date

from dateutil import parser as date_parser
from dateutil.parser import ParserError

from link_curator.engines.models import CandidateLink


def parse_calendar_date(value: str) -> date | None:
    """Parse date text scraped from a page into a calendar date.

    Accepts ISO dates as well as the free-form forms listing pages tend to
    use ("Nov 1, 2025", "1 November 2025"). Returns None when the text is
    not a date.

    Example:
        >>> parse_calendar_date("2025-11-01")
        datetime.date(2025, 11, 1)
        >>> parse_calendar_date("Nov 1, 2025")
        datetime.date(2025, 11, 1)
        >>> parse_calendar_date("last week") is None
        True
    """
    if not value or not value.strip():
        return None

    try:
        return date_parser.parse(value.strip()).date()
    except (ParserError, ValueError, OverflowError):
        return None


def sort_by_date(links: list[CandidateLink]) -> list[CandidateLink]:
    """Return links ordered most recent first.

    The sort is stable: entries with equal dates keep their input order.
    Entries whose date cannot be parsed go after every dated entry.
    """
    return sorted(
        links,
        key=lambda link: parse_calendar_date(link.date) or date.min,
        reverse=True,
    )
