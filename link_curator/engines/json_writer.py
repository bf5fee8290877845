"""JSON writer for the curated links file.

The whole document is serialized in memory before the file is opened, so a
serialization problem never leaves a half-written file behind.
"""

import json
import logging
from pathlib import Path

from link_curator.engines.models import CandidateLink


logger = logging.getLogger(__name__)


class PersistError(Exception):
    """Raised when the output file cannot be written."""

    pass


def serialize_links(links: list[CandidateLink]) -> str:
    """Render links as a pretty-printed JSON array.

    Each object carries exactly date, link, source and title, in that order.

    Example:
        >>> print(serialize_links([CandidateLink("2025-11-01", "https://y", "S", "T")]))
        [
          {
            "date": "2025-11-01",
            "link": "https://y",
            "source": "S",
            "title": "T"
          }
        ]
    """
    return json.dumps([link.to_dict() for link in links], indent=2, ensure_ascii=False)


def write_links(links: list[CandidateLink], output_path: str | Path) -> str:
    """Write links to output_path as UTF-8 JSON, replacing prior content.

    Args:
        links: Validated, sorted links to publish
        output_path: Destination file; parent directories are created

    Returns:
        The filepath of the written JSON file

    Raises:
        PersistError: If the directory cannot be created or the file written
    """
    content = serialize_links(links)
    filepath = Path(output_path)

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise PersistError(f"Error writing {filepath}: {e}") from e

    return str(filepath)
