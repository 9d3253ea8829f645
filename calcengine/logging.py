"""
Structured logging configuration.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_BASE_RECORD_KEYS = frozenset(logging.LogRecord('', 0, '', 0, '', (), None).__dict__) | {'args', 'message'}


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON, capturing custom "extra" fields.

        Keys passed through ``extra=`` end up as plain attributes on the
        LogRecord, so anything that is not a standard attribute is copied
        into the payload.
        """
        log_data: dict[str, object] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _BASE_RECORD_KEYS:
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def configure_logger(name: str, level: str = 'INFO', structured: bool = False) -> logging.Logger:
    """
    Configure a logger instance.

    Args:
        name: Logger name, usually ``'calcengine'`` to cover the whole package
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Use JSON structured logging

    Returns:
        Configured logger instance
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f'Unknown log level: {level}')

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Reconfiguring replaces handlers instead of stacking duplicates
    logger.handlers = []

    handler = logging.StreamHandler()
    handler.setLevel(numeric_level)

    if structured:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
