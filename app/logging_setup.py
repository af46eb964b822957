"""Logging configuration with rich console output."""

from deps import Optional, logging
from rich.console import Console
from rich.logging import RichHandler

from .config import get_log_level


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Install a RichHandler on the root logger and return the project logger."""
    level_name = level or get_log_level()
    numeric = getattr(logging, level_name, logging.INFO)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=numeric <= logging.DEBUG,
    )
    logging.basicConfig(level=numeric, format="%(message)s", datefmt="[%X]", handlers=[handler])

    logger = logging.getLogger("skript_analyzer")
    logger.setLevel(numeric)
    logging.getLogger("app").setLevel(numeric)
    return logger
