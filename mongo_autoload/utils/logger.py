import logging
import sys

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the ``mongo_autoload`` logger.

    Attaches one stderr handler. Records still propagate so the host's own
    handlers see them too.

    Args:
        level: Logging level for the ``mongo_autoload`` logger (default INFO)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("mongo_autoload")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"mongo_autoload.{name}")
