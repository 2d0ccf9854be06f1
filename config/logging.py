from __future__ import annotations

import os
from typing import Dict, Any

# Default logging configuration
default = os.getenv('LOG_CHANNEL', 'model')

channels: Dict[str, Dict[str, Any]] = {
    'model': {
        'driver': 'stderr',
        'level': os.getenv('LOG_LEVEL', 'warning'),
        'formatter': 'channel',
        'propagate': True,
    },

    'stderr': {
        'driver': 'stderr',
        'level': os.getenv('LOG_LEVEL', 'warning'),
        'formatter': 'channel',
    },

    'json': {
        'driver': 'stderr',
        'level': os.getenv('LOG_LEVEL', 'warning'),
        'formatter': 'json',
    },

    'null': {
        'driver': 'null',
    },
}
