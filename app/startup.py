"""Startup validation and configuration checks."""

from deps import logging

from .config import ENV_FILE, get_ai_api_key, get_ai_model

logger = logging.getLogger(__name__)


def validate_config() -> None:
    """Warn at startup if .env or AI_API_KEY is missing."""
    if get_ai_api_key():
        logger.info("AI optimization enabled (model %s)", get_ai_model())
    elif not ENV_FILE.exists():
        logger.warning(".env file not found. AI optimization will be disabled.")
        logger.warning("Create .env and set AI_API_KEY to enable /optimize.")
    else:
        logger.warning("AI_API_KEY not set in .env. AI optimization will be disabled.")
