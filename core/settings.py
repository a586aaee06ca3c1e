import logging
import os
from dotenv import load_dotenv

load_dotenv()

# one 1500x1500 alignment stays under a second
DEFAULT_MAX_TEXT_LENGTH = 1500
DEFAULT_MAX_ATTEMPTS = 200
# alignment table cells summed over every alignment in one request
DEFAULT_MAX_BATCH_CELLS = 6_000_000


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", name, raw)
        return default


def get_max_text_length() -> int:
    return _int_env("RECALL_MAX_TEXT_LENGTH", DEFAULT_MAX_TEXT_LENGTH)


def get_max_attempts() -> int:
    return _int_env("RECALL_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)


def get_max_batch_cells() -> int:
    return _int_env("RECALL_MAX_BATCH_CELLS", DEFAULT_MAX_BATCH_CELLS)


def configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
