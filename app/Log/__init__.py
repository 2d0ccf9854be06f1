from __future__ import annotations

from .LogManager import (
    LogManager,
    LogChannel,
    ChannelFormatter,
    JsonFormatter,
    get_log_manager,
    logger,
)

__all__ = [
    'LogManager',
    'LogChannel',
    'ChannelFormatter',
    'JsonFormatter',
    'get_log_manager',
    'logger',
]
