###############################################################################
# Logging  – idempotent, Streamlit reruns this on every interaction
###############################################################################
import logging
import sys

_HANDLER_NAME = "banana_editor"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stdout handler to the package logger."""
    logger = logging.getLogger("banana_editor")
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    for noisy in ("httpx", "httpcore", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get configured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(name)
