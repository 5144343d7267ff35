import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Does not configure handlers; the application entry point calls configure_logging().
    """
    return logging.getLogger(f"contentops.{name}")
