"""Structured logging configuration using structlog."""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

# Libraries that log every request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore")


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            [
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _formatter(renderer, pre_chain) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(json_mode: bool = False, level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        json_mode: JSON lines on stderr instead of the console renderer.
        level: Log level name; unknown names fall back to INFO.
        log_file: Optional file that always receives JSON lines.

    Records from plain stdlib loggers (tenacity, httpx) run through the same
    pre-chain so they carry level and timestamp too.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(renderer, shared))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer(), shared))
        root.addHandler(file_handler)

    root.setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
