"""Package configuration using pydantic-settings."""

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file: check working directory first, then project root
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = Path(".env") if Path(".env").exists() else _PROJECT_ROOT / ".env"

PACKAGE_LOGGER = "fhirext"


class Settings(BaseSettings):
    """Settings loaded from ``FHIREXT_``-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FHIREXT_",
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base for extension urls built with extension_url()
    extension_base_url: str = "http://example.org/fhir/StructureDefinition"

    # Level applied by configure_logging()
    log_level: str = "WARNING"

    # Validate Coding/Quantity/... values against their models before storing
    validate_structured_values: bool = True


settings = Settings()


def extension_url(suffix: str, base_url: str | None = None) -> str:
    """Build full extension URL from suffix."""
    base = (base_url or settings.extension_base_url).rstrip("/")
    return f"{base}/{suffix.lstrip('/')}"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply a log level to the package logger.

    The library never installs handlers; applications that want fhirext
    debug output call this once at startup.

    Args:
        level: Level name or number. Defaults to ``settings.log_level``.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = level if level is not None else settings.log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)
    return logger
