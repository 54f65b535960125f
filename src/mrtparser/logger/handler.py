"""handler.py

Named stdlib loggers, configured once through logging.config.dictConfig.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import os
import sys
import logging
import logging.config
from typing import Any, Dict

CLEAR: str = '%(levelname)s %(asctime)s %(filename)s: %(message)s'

levels: Dict[str, int] = {
    'FATAL': logging.FATAL,
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
    'NOTSET': logging.NOTSET,
}

ROTATE_SIZE: int = 1024 * 1024
ROTATE_KEEP: int = 3

# loggers can not be configured twice
_configured: Dict[str, logging.Logger] = {}


def syslog_address() -> str:
    if sys.platform == 'darwin':
        return '/var/run/syslog'
    if sys.platform.startswith(('freebsd', 'netbsd')):
        return '/var/run/log'
    return '/dev/log'


def _handlers(name: str, level: str, options: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    handlers: Dict[str, Dict[str, Any]] = {}
    common = {'level': level, 'formatter': 'mrtparser'}

    stream = options.get('stream')
    if stream is not None:
        handlers['stream'] = dict(
            common,
            **{'class': 'logging.StreamHandler', 'stream': 'ext://sys.stderr' if stream is sys.stderr else 'ext://sys.stdout'},
        )

    address = options.get('address')
    if address is not None:
        handlers['syslog'] = dict(common, **{'class': 'logging.handlers.SysLogHandler', 'address': address, 'facility': 'user'})

    filename = options.get('filename')
    if filename is not None:
        handlers['file'] = dict(
            common,
            **{
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': os.path.abspath(filename),
                'maxBytes': options.get('maxBytes', ROTATE_SIZE),
                'backupCount': options.get('backupCount', ROTATE_KEEP),
            },
        )

    # dictConfig handler ids are global, keep them unique per logger
    return {f'{name} {kind}': handler for kind, handler in handlers.items()}


def get_logger(name: str, **options: Any) -> logging.Logger:
    """Return the logger called `name`, configuring it on first use.

    options: level, format, stream (sys.stdout or sys.stderr), address
    (syslog socket), filename (rotated file), maxBytes, backupCount
    """
    if name in _configured:
        if options:
            raise ValueError(f'a logger with the name "{name}" already exists')
        return _configured[name]

    level = options.get('level', 'DEBUG')
    handlers = _handlers(name, level, options)

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'mrtparser': {'format': options.get('format', CLEAR)}},
            'handlers': handlers,
            'loggers': {name: {'level': level, 'handlers': list(handlers), 'propagate': False}},
        }
    )

    logger = logging.getLogger(name)
    _configured[name] = logger
    return logger
