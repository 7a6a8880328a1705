"""
Centralized logging configuration for wiki_walk.

The CLI and the HTTP backend both call setup_logging() once at startup; library
modules only ever ask for a logger via logging.getLogger(__name__).
"""

import logging
import sys
from rich.logging import RichHandler
from rich.console import Console

# Third-party loggers that are chatty at INFO (one line per HTTP request)
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "uvicorn.access")


def _build_rich_handler(numeric_level: int) -> logging.Handler:
    handler = RichHandler(
        console=Console(file=sys.stderr),
        level=numeric_level,
        show_time=True,
        show_level=True,
        show_path=True,
        rich_tracebacks=True,
        markup=False,  # article titles may contain [brackets]
        log_time_format="[%H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    return handler


def _build_plain_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))
    return handler


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Configure the root logger for a wiki_walk process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        use_rich: Colored Rich output for terminals; plain text otherwise
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = _build_rich_handler(numeric_level) if use_rich else _build_plain_handler()
    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging configured: level={level}, rich={use_rich}")
