import logging
import os

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that are too chatty at DEBUG
NOISY_LOGGERS = ('urllib3', 'charset_normalizer', 'asyncio')


def setup_logging(log_file=None, log_level=None):
    """
    Setup logging configuration for the catalog, its CLI and its REST server

    Args:
        log_file: Log file path (optional), defaults to ``LOG_FILE`` from config.py
        log_level: Log level name (optional), defaults to ``LOG_LEVEL`` from config.py

    Returns:
        The configured root logger
    """
    try:
        from config import LOG_LEVEL
    except ImportError:
        LOG_LEVEL = 'INFO'
    try:
        from config import LOG_FILE
    except ImportError:
        LOG_FILE = None

    if log_level is None:
        log_level = LOG_LEVEL
    if log_file is None:
        log_file = LOG_FILE

    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    formatter = logging.Formatter(DEFAULT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return root_logger


def get_logger(name):
    """
    Get a logger with the specified name

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
