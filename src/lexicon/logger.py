"""Structured query logging (query kind, timing, result count, etc.)."""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/lexicon.log"
LOGGER_NAME = "lexicon"
_LOG_LEVEL = logging.INFO

_file_handler: Union[logging.handlers.RotatingFileHandler, None] = None

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(
    log_file_path: Path = LOG_FILE_PATH,
    level: int = _LOG_LEVEL,
) -> logging.Logger:
    """Attach a rotating file handler to the engine's logger.

    Calling this again with the same path keeps the existing handler;
    calling it with a new path replaces the handler.

    Args:
        log_file_path (Path): The file the records are written to.
        level (int): The minimum level of the records to keep.

    Returns:
        logging.Logger: The configured engine logger.

    """
    global _file_handler

    if _file_handler is not None:
        if Path(_file_handler.baseFilename) == log_file_path.absolute():
            logger.setLevel(level)
            return logger
        stop_logging()

    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(
        "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
        "thread=%(thread)d | module=%(module)s | funcName=%(funcName)s | "
        "lineno=%(lineno)d | message=%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(formatter)

    logger.setLevel(level)
    logger.addHandler(file_handler)
    _file_handler = file_handler

    return logger


def stop_logging() -> None:
    """Detach and close the file handler installed by `setup_logging`."""
    global _file_handler
    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
        logger.setLevel(logging.NOTSET)


def log(
    query_kind: str,
    query: str,
    result_count: int,
    execution_time_ms: float,
) -> None:
    """Log the details of a query execution.

    Args:
        query_kind (str): The operation that ran (e.g. "autocomplete").
        query (str): The word, prefix or pattern that was queried.
        result_count (int): How many results the query produced.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logger.info(
        "Query: %s, Input: '%s', Results: %d, Execution Time: %.2f ms",
        query_kind,
        query,
        result_count,
        execution_time_ms,
    )
