"""
Structured logging for the books API using structlog.

Application events and the uvicorn server/access loggers share one
structlog processor chain, so every line on stdout (and in the optional
log file) has the same JSON or console shape.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union
import structlog

# Handlers installed by setup_logging carry this name prefix
HANDLER_NAME = "books-api"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _shared_processors() -> List:
    """Processors applied to both structlog and plain stdlib records."""
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _build_formatter(log_format: str) -> structlog.stdlib.ProcessorFormatter:
    if log_format == "json":
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        # ConsoleRenderer formats exceptions itself
        renderers = [structlog.dev.ConsoleRenderer(colors=True)]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta] + renderers,
    )


def _install_handler(handler: logging.Handler, name: str, level: int, formatter: logging.Formatter) -> None:
    handler.set_name(f"{HANDLER_NAME}-{name}")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logging.getLogger().addHandler(handler)


def remove_handlers() -> None:
    """Detach and close every handler installed by ``setup_logging``."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[Union[str, Path]] = None,
    debug: bool = False
) -> None:
    """
    Set up structured logging for the API and the server running it.

    Calling it again replaces the handlers from the previous call.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        log_file: Optional log file path, parent directories are created
        debug: Add call site information (module, function, line) to application events
    """
    level = getattr(logging, log_level.upper())

    processors = [structlog.stdlib.filter_by_level] + _shared_processors() + [
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if debug:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                }
            )
        )
    processors.append(structlog.stdlib.ProcessorFormatter.wrap_for_formatter)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    remove_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = _build_formatter(log_format)

    _install_handler(logging.StreamHandler(sys.stdout), "stdout", level, formatter)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _install_handler(logging.FileHandler(log_path), "file", level, formatter)

    # uvicorn's own handlers would print a second, unstructured copy
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging system initialized",
        level=log_level,
        format=log_format,
        file=str(log_file) if log_file else None,
        debug=debug
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
