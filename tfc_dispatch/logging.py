# -*- coding: utf-8 -*-

# Copyright: (c) 2025, tfc-dispatch contributors
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

"""Structured logging configuration for tfc-dispatch.

Usage:
    from tfc_dispatch.logging import configure_logging, get_logger

    configure_logging(json_output=False, level=logging.INFO)

    log = get_logger(__name__)
    log.info('workspace_matched', workspace='baseline-a')
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.types import Processor

__all__ = [
    'configure_logging',
    'get_logger',
]


def _get_shared_processors() -> List[Processor]:
    """Get processors shared between stdlib and structlog."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_renderer(json_output: bool) -> Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, json_output: bool = False, level: int = logging.INFO) -> None:
    """Configure structlog and the root stdlib logger.

    Called once at CLI start. Output goes to stderr so stdout stays free
    for command output.

    Args:
        json_output: Render events as JSON lines instead of console text.
        level: Root log level.
    """
    structlog.configure(
        processors=[
            *_get_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                _get_renderer(json_output),
            ],
            foreign_pre_chain=_get_shared_processors(),
        )
    )
    root_logger.addHandler(handler)

    # pytfe's HTTP stack is noisy at DEBUG
    logging.getLogger('httpx').setLevel(max(level, logging.WARNING))
    logging.getLogger('httpcore').setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
