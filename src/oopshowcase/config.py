"""
Configuration Management for the Showcase

Dataclass configuration for the page directory, the web server, logging and
the demo mail transport, built per environment or from ``SHOWCASE_*``
environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from .registry import PAGE_EXTENSION
from .shell import DEFAULT_TITLE


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class MailConfig:
    """Mail transport used by the email demos. No host means nothing is sent."""
    smtp_host: Optional[str] = None
    smtp_port: int = 25
    sender: str = "sender@example.com"
    timeout: float = 10.0


@dataclass
class ShowcaseConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    pages_dir: Path = Path("app/pages")
    static_dir: Path = Path("app/assets")
    default_title: str = DEFAULT_TITLE
    page_extension: str = PAGE_EXTENSION
    sort_pages: bool = True

    host: str = "localhost"
    port: int = 5001
    live: bool = False

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    mail: MailConfig = field(default_factory=MailConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> "ShowcaseConfig":
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.live = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.live = False
            config.host = "0.0.0.0"
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 pages_dir: Optional[Path] = None,
                 static_dir: Optional[Path] = None) -> "ShowcaseConfig":
        """
        Build configuration from ``SHOWCASE_*`` variables.

        Args:
            environ: Variables to read, ``os.environ`` by default
            pages_dir: Page directory used when ``SHOWCASE_PAGES_DIR`` is unset
            static_dir: Stylesheet directory used when ``SHOWCASE_STATIC_DIR`` is unset

        Raises:
            ValueError: For an unknown environment name or a non-numeric port
        """
        env = os.environ if environ is None else environ

        config = cls.for_environment(Environment(env.get("SHOWCASE_ENV", "development").lower()))

        if "SHOWCASE_PAGES_DIR" in env:
            config.pages_dir = Path(env["SHOWCASE_PAGES_DIR"])
        elif pages_dir is not None:
            config.pages_dir = Path(pages_dir)

        if "SHOWCASE_STATIC_DIR" in env:
            config.static_dir = Path(env["SHOWCASE_STATIC_DIR"])
        elif static_dir is not None:
            config.static_dir = Path(static_dir)

        if "SHOWCASE_SORT_PAGES" in env:
            config.sort_pages = _as_bool(env["SHOWCASE_SORT_PAGES"])
        if "SHOWCASE_TITLE" in env:
            config.default_title = env["SHOWCASE_TITLE"]
        if "SHOWCASE_HOST" in env:
            config.host = env["SHOWCASE_HOST"]
        if "SHOWCASE_PORT" in env:
            config.port = int(env["SHOWCASE_PORT"])
        if "SHOWCASE_LOG_LEVEL" in env:
            config.logging.level = env["SHOWCASE_LOG_LEVEL"].upper()

        if "SHOWCASE_SMTP_HOST" in env:
            config.mail.smtp_host = env["SHOWCASE_SMTP_HOST"] or None
        if "SHOWCASE_SMTP_PORT" in env:
            config.mail.smtp_port = int(env["SHOWCASE_SMTP_PORT"])
        if "SHOWCASE_MAIL_SENDER" in env:
            config.mail.sender = env["SHOWCASE_MAIL_SENDER"]

        return config


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def configure_logging(config: LoggingConfig) -> None:
    """Install a root handler if none exists and set the package log level."""
    logging.basicConfig(format=config.format)
    logging.getLogger("oopshowcase").setLevel(config.level)
