"""
Configuration management for Smart Recipe Ideas.

This module centralizes environment variable loading from the .env file at project root.
It should be imported early by the Streamlit entry point (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

When no .env exists (e.g. in production), load_dotenv() is safe to call and will no-op.
Platform environment variables are used instead.

Environment Variables:
- MEALDB_API_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1/1"
- MEALDB_SITE_URL: Optional, defaults to "https://www.themealdb.com" (used for recipe detail links)
- MEALDB_TIMEOUT_SECONDS: Optional, defaults to 10
- LOG_LEVEL: Optional, defaults to "INFO"
"""

import logging
import math
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MEALDB_API_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_MEALDB_SITE_URL = "https://www.themealdb.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    This function locates the project root by going up from this file's location
    (recipe_search/config.py -> project root) and loads .env if it exists.

    Safe to call multiple times. Existing environment variables take precedence.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class MealDBConfig:
    """Configuration for the TheMealDB connector."""

    @staticmethod
    def get_api_url() -> str:
        """
        Get the base URL of the recipe JSON API.

        Returns:
            API base URL with trailing slash removed
        """
        return os.getenv("MEALDB_API_URL", DEFAULT_MEALDB_API_URL).rstrip("/")

    @staticmethod
    def get_site_url() -> str:
        """
        Get the base URL of the public recipe website, used to build detail links.

        Returns:
            Site base URL with trailing slash removed
        """
        return os.getenv("MEALDB_SITE_URL", DEFAULT_MEALDB_SITE_URL).rstrip("/")

    @staticmethod
    def get_timeout_seconds() -> float:
        """
        Get the HTTP timeout for recipe lookups.

        Returns:
            Timeout in seconds. Falls back to the default when the variable
            is missing, not a finite number, or not positive.
        """
        raw = os.getenv("MEALDB_TIMEOUT_SECONDS")
        if raw is None or raw.strip() == "":
            return DEFAULT_TIMEOUT_SECONDS
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Invalid MEALDB_TIMEOUT_SECONDS=%r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        if not math.isfinite(value):
            logger.warning("Non-finite MEALDB_TIMEOUT_SECONDS=%r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        if value <= 0:
            logger.warning("Non-positive MEALDB_TIMEOUT_SECONDS=%r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        return value


def get_log_level() -> str:
    """Get the configured log level name (upper-cased)."""
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def configure_logging() -> None:
    """
    Configure root logging for the app.

    Unknown level names fall back to INFO. basicConfig is a no-op when the root
    logger already has handlers, so repeated Streamlit reruns don't stack handlers.
    """
    level_name = get_log_level()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
