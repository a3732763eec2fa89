import logging
import sys
from logging.handlers import RotatingFileHandler
from . import settings

# pandas reports ambiguous date formats through the warnings module.
WARNINGS_LOGGER = "py.warnings"


def setup_logger(name: str = None, log_level: int | str = None) -> logging.Logger:
    """
    Configures the report logger: short messages on the console, full records in a
    rotating file under settings.LOG_DIR. Warnings raised while parsing uploads
    (e.g. pandas date inference) are sent to the same file.
    Called once by the entry point; library modules only use logging.getLogger(__name__).
    """
    log_level = log_level or settings.LOG_LEVEL
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Only this logger's own handlers count; pytest and others attach to root.
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        settings.LOG_DIR / settings.LOG_FILENAME,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    logging.captureWarnings(True)
    logging.getLogger(WARNINGS_LOGGER).addHandler(file_handler)

    return logger
