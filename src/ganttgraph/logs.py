import logging
import os
import sys
from pathlib import Path

DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "ganttgraph" / "logs"

def _resolve_level() -> tuple:
    env_level = os.getenv('GANTTGRAPH_LOG_LEVEL', '').upper()
    is_debug = os.getenv('GANTTGRAPH_DEBUG', '').lower() in ('1', 'true', 'yes')

    if is_debug:
        return logging.DEBUG, True
    if env_level:
        return getattr(logging, env_level, logging.WARNING), False
    return logging.WARNING, False

def _file_handler(formatter: logging.Formatter):
    log_dir = Path(os.getenv('GANTTGRAPH_LOG_DIR', '') or DEFAULT_LOG_DIR)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / "ganttgraph.log")
    except OSError as e:
        # Read-only home directories still get console logging
        sys.stderr.write(f"ganttgraph: file logging disabled ({e})\n")
        return None
    handler.setFormatter(formatter)
    handler.setLevel(logging.DEBUG)
    return handler

def setup_logging():
    """Set up logging for the ganttgraph package with environment-based levels."""
    level, is_debug = _resolve_level()

    log_format = '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    detailed_formatter = logging.Formatter(log_format, date_format)
    console_formatter = logging.Formatter(
        '%(levelname)-8s [%(name)s] %(message)s' if is_debug
        else '%(levelname)s: %(message)s'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    logger = logging.getLogger('ganttgraph')
    logger.setLevel(logging.DEBUG)  # Logger accepts all, handlers filter
    logger.handlers.clear()
    logger.addHandler(console_handler)

    file_handler = _file_handler(detailed_formatter)
    if file_handler is not None:
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger

# Initialize logging when package is imported
setup_logging()

def get_logger(name: str = None):
    """Get a logger instance for a specific module."""
    if name:
        return logging.getLogger(f'ganttgraph.{name}')
    return logging.getLogger('ganttgraph')
