import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .normalize_log_level import normalize_log_level

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str | None = None) -> None:
    """Configure unified contentops logging.

    Call once from the application entry point; importing contentops never does.

    Args:
        home: Directory holding contentops.log. If None, derived from environment.
        level: Logging level name. If None, read from CONTENTOPS_LOG_LEVEL.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("CONTENTOPS_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".contentops"

    if level is None:
        level = os.environ.get("CONTENTOPS_LOG_LEVEL")

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "contentops.log"

    root_logger = logging.getLogger("contentops")
    root_logger.setLevel(normalize_log_level(level))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
