import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.core.config import Settings

# Include the function name so handler output points at the failing step
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s"
LOG_LEVEL = logging.INFO

# Names handed out by setup_logger, rebuilt by configure_logging
_logger_names = set()


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def _apply_handlers(logger: logging.Logger, level, log_dir: Path = None):
    logger.setLevel(level)

    # Clear any existing handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    file_name = logger.name.replace('.', '_')

    # File handler with DEBUG level for more detailed logging
    logger.addHandler(_rotating_handler(log_dir / f"{file_name}.log", logging.DEBUG, formatter))
    logger.addHandler(_rotating_handler(log_dir / f"{file_name}_error.log", logging.ERROR, formatter))


def setup_logger(name: str, level: int = None) -> logging.Logger:
    """
    Console-only logger; file handlers are attached by ``configure_logging``.
    """
    logger = logging.getLogger(name)
    _logger_names.add(name)
    _apply_handlers(logger, level or LOG_LEVEL)
    return logger


def configure_logging(settings: Settings):
    """
    Rebuild the handlers of every logger from ``setup_logger`` with the
    level, directory and file switch of ``settings``.
    """
    log_dir = Path(settings.LOG_DIR) if settings.LOG_TO_FILE else None
    for name in sorted(_logger_names):
        _apply_handlers(logging.getLogger(name), settings.LOG_LEVEL, log_dir)
