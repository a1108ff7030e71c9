"""
Configuration for the comparison report engine.

Settings are read from the environment (prefix ``COMPARE_``) and an optional
``.env`` file.
"""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

from shared.config import DEFAULT_MAX_GROUP_CHARS

load_dotenv()


class Settings(BaseSettings):
    """Essential settings for fetching and rendering comparison reports."""

    model_config = SettingsConfigDict(env_prefix="COMPARE_", extra="ignore")

    # Environment + logging
    log_level: str = "INFO"

    # Backend access
    backend_url: str = "http://localhost:8000"
    request_timeout_seconds: float = 30.0

    # Rendering
    max_group_chars: int = DEFAULT_MAX_GROUP_CHARS


settings = Settings()


def configure_structlog() -> None:
    """Initialize structlog with clean, readable logging."""
    import logging
    import sys

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        stream=sys.stdout,
        force=True,
        format="%(message)s",  # Only show the structured message
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(
                colors=True,
                pad_event=20,
                level_styles={
                    "debug": "\033[36m",  # cyan
                    "info": "\033[32m",  # green
                    "warning": "\033[33m",  # yellow
                    "error": "\033[31m",  # red
                },
            ),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
