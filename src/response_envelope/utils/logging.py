import logging
import sys
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that drown the envelope debug output at DEBUG level.
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


# =============================================================================
#   setup_logging
# =============================================================================
def setup_logging(
    log_dir: Path,
    log_level: str,
    main_function_name: str,
    file_log_level: str,
    file_log_file_size_mb: int,
    file_log_max_files: int,
) -> Path:
    """Configure root logger with a console handler and a rotating file handler.

    Calling it again replaces (and closes) the handlers of the previous call.

    Args:
        log_dir: Directory where log files will be written.
        log_level: Console handler log level (e.g. "INFO").
        main_function_name: Used as the log file stem.
        file_log_level: File handler log level (e.g. "DEBUG").
        file_log_file_size_mb: Maximum size of each log file in MB.
        file_log_max_files: Number of rotated log files to keep.

    Returns:
        Path of the active log file.
    """
    logger: Logger = logging.getLogger()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    for old in logger.handlers:
        old.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging._nameToLevel[log_level])
    console_handler.setFormatter(formatter)

    # Rotating file handler
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{main_function_name}.log"
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1024 * 1024 * file_log_file_size_mb,
        backupCount=file_log_max_files,
        encoding="utf-8",
    )
    file_handler.setLevel(logging._nameToLevel[file_log_level])
    file_handler.setFormatter(formatter)

    logger.handlers = [console_handler, file_handler]
    logger.setLevel(logging.NOTSET)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    def _handle_uncaught(exc_type: Any, exc_value: Any, exc_traceback: Any) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = _handle_uncaught
    return log_file
