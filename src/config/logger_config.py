import os
from pathlib import Path

from loguru import logger

DEFAULT_LOG_DIR = Path(os.getenv("SITEMAP_LOG_DIR", "logs"))
DEFAULT_LOG_LEVEL = os.getenv("SITEMAP_LOG_LEVEL", "DEBUG").upper()


def configure_logging(log_dir: str | Path = DEFAULT_LOG_DIR, level: str = DEFAULT_LOG_LEVEL) -> Path:
    """Send all records to a rotating file under ``log_dir``; return the file name pattern."""
    log_file = Path(log_dir) / "sitemap_{time}.log"
    logger.remove()
    logger.add(
        log_file,
        rotation="64 MB",
        retention="10 days",
        compression="zip",
        encoding="utf-8",
        level=level,
        delay=True,  # no file until the first record
    )
    return log_file


log_file = configure_logging()

if __name__ == "__main__":
    logger.info("logger configured: {}", log_file)
