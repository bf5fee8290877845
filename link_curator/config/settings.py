"""Configuration settings for the link curation pipeline."""

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv


DEFAULT_OUTPUT_PATH = str(Path("public") / "links.json")
DEFAULT_USER_AGENT = "LinkCurator/1.0 (Link Scraper)"


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class Settings:
    """Configuration settings for the link curation pipeline.

    Attributes:
        output_path: Where the curated links JSON file is written
        fetch_timeout_seconds: Timeout for each source page GET
        validate_timeout_seconds: Timeout for each link HEAD check
        max_redirects: Maximum redirect hops followed during validation
        user_agent: User-Agent header sent with every request
    """

    output_path: str = DEFAULT_OUTPUT_PATH
    fetch_timeout_seconds: float = 30.0
    validate_timeout_seconds: float = 5.0
    max_redirects: int = 5
    user_agent: str = DEFAULT_USER_AGENT

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid.
        """
        errors: list[str] = []

        if not self.output_path.strip():
            errors.append("output_path must not be empty")

        if self.fetch_timeout_seconds <= 0.0:
            errors.append("fetch_timeout_seconds must be positive")

        if self.validate_timeout_seconds <= 0.0:
            errors.append("validate_timeout_seconds must be positive")

        if self.max_redirects < 0:
            errors.append("max_redirects must be non-negative")

        if not self.user_agent.strip():
            errors.append("user_agent must not be empty")

        if errors:
            raise ConfigurationError("; ".join(errors))


def _parse_float(value: str | None, default: float) -> float:
    """Parse a string to float, returning default if None or invalid."""
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _parse_int(value: str | None, default: int) -> int:
    """Parse a string to int, returning default if None or invalid."""
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def load_settings(env_path: str | Path | None = None, validate: bool = True) -> Settings:
    """Load settings from environment variables and .env file.

    Args:
        env_path: Optional path to .env file. If None, searches for .env
                  in current directory and parent directories.
        validate: If True, validate settings after loading.

    Returns:
        Settings instance with loaded configuration.

    Raises:
        ConfigurationError: If validate=True and configuration is invalid.
    """
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    settings = Settings(
        output_path=os.getenv("LINKS_OUTPUT_PATH", DEFAULT_OUTPUT_PATH),
        fetch_timeout_seconds=_parse_float(
            os.getenv("FETCH_TIMEOUT_SECONDS"), 30.0
        ),
        validate_timeout_seconds=_parse_float(
            os.getenv("VALIDATE_TIMEOUT_SECONDS"), 5.0
        ),
        max_redirects=_parse_int(
            os.getenv("VALIDATE_MAX_REDIRECTS"), 5
        ),
        user_agent=os.getenv("LINKS_USER_AGENT", DEFAULT_USER_AGENT),
    )

    if validate:
        settings.validate()

    return settings
