from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union
from datetime import datetime
import json
import sys


class LogChannel:
    """Laravel-style log channel."""

    def __init__(
        self,
        name: str,
        handler: logging.Handler,
        level: Union[str, int] = logging.INFO,
        propagate: bool = False
    ) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_resolve_level(level))
        self.logger.handlers = [handler]
        self.logger.propagate = propagate

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log info message."""
        self._log(logging.INFO, message, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, context)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, context)

    def log(self, level: Union[str, int], message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log message at specified level."""
        self._log(_resolve_level(level), message, context)

    def is_enabled_for(self, level: Union[str, int]) -> bool:
        """Check whether a message at the given level would be emitted."""
        return self.logger.isEnabledFor(_resolve_level(level))

    def _log(self, level: int, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Internal log method."""
        extra = {'context': context} if context else {}
        self.logger.log(level, message, extra=extra)


def _resolve_level(level: Union[str, int]) -> int:
    """Translate a configured level name into a logging level number."""
    if isinstance(level, int):
        return level
    return int(getattr(logging, level.upper(), logging.INFO))


class ChannelFormatter(logging.Formatter):
    """Laravel-style log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        log_line = f"[{timestamp}] {record.name}.{record.levelname}: {record.getMessage()}"

        context = getattr(record, 'context', {})
        if context:
            log_line += f" {json.dumps(context, default=str)}"

        if record.exc_info:
            log_line += f"\n{self.formatException(record.exc_info)}"

        return log_line


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'channel': record.name,
            'message': record.getMessage(),
            'context': getattr(record, 'context', {}),
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class LogManager:
    """Laravel-style log manager."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self._config = config if config is not None else _load_config()
        self._channels: Dict[str, LogChannel] = {}
        self._default_channel = self._config.get('default', 'model')

    def channel(self, name: Optional[str] = None) -> LogChannel:
        """Get a log channel."""
        if name is None:
            name = self._default_channel

        if name not in self._channels:
            self._create_channel(name)

        return self._channels[name]

    def _create_channel(self, name: str) -> None:
        """Create a new log channel."""
        config = self._config.get('channels', {}).get(name, {})
        driver = config.get('driver', 'stderr')

        if driver == 'null':
            self._create_null_channel(name, config)
        else:
            # Fallback to stderr
            self._create_stderr_channel(name, config)

    def _create_stderr_channel(self, name: str, config: Dict[str, Any]) -> None:
        """Create a stderr log channel."""
        level = config.get('level', logging.WARNING)

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._get_formatter(config))

        self._channels[name] = LogChannel(name, handler, level, config.get('propagate', False))

    def _create_null_channel(self, name: str, config: Dict[str, Any]) -> None:
        """Create a channel that discards every record."""
        self._channels[name] = LogChannel(name, logging.NullHandler(), logging.CRITICAL)

    def _get_formatter(self, config: Dict[str, Any]) -> logging.Formatter:
        """Get formatter based on configuration."""
        if config.get('formatter', 'channel') == 'json':
            return JsonFormatter()
        return ChannelFormatter()

    def get_default_driver(self) -> str:
        """Get the default log channel name."""
        return str(self._default_channel)

    def set_default_driver(self, name: str) -> None:
        """Set the default log channel name."""
        self._default_channel = name

    def get_channels(self) -> Dict[str, LogChannel]:
        """Get all channels."""
        return self._channels

    def forget_channel(self, name: str) -> None:
        """Remove a channel."""
        if name in self._channels:
            del self._channels[name]


def _load_config() -> Dict[str, Any]:
    """Read channel definitions from config/logging.py."""
    from config import logging as logging_config

    return {
        'default': logging_config.default,
        'channels': logging_config.channels,
    }


# Global log manager instance
log_manager_instance: Optional[LogManager] = None


def get_log_manager() -> LogManager:
    """Get the global log manager instance."""
    global log_manager_instance
    if log_manager_instance is None:
        log_manager_instance = LogManager()
    return log_manager_instance


def logger(channel: Optional[str] = None) -> LogChannel:
    """Get a log channel."""
    return get_log_manager().channel(channel)
