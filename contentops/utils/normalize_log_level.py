"""Normalize user-supplied log level names."""

_LEVELS = {
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARN": "WARNING",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
}


def normalize_log_level(level: str | None) -> str:
    """Map a level name to a standard logging level name.

    Unknown or empty values fall back to INFO.
    """
    if not level:
        return "INFO"
    return _LEVELS.get(str(level).strip().upper(), "INFO")
