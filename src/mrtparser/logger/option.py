"""option.py

Which sources and levels are logged, and where to.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import sys
import time
import logging
from typing import Any, ClassVar, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from mrtparser.environment.config import Environment

from mrtparser.logger.handler import get_logger, levels, syslog_address
from mrtparser.logger.format import formater as get_formater, FormatterFunc

SOURCES = ('reader', 'parser', 'startup', 'cli')


def echo(message: str, source: str, level: str, timestamp: time.struct_time) -> str:
    return message


def _target(destination: str) -> Dict[str, Any]:
    if destination == 'stdout':
        return {'stream': sys.stdout}
    if destination == 'stderr':
        return {'stream': sys.stderr}
    if destination == 'syslog':
        return {'address': syslog_address()}
    return {'filename': destination}


class option:
    logger: ClassVar[logging.Logger | None] = None
    formater: ClassVar[FormatterFunc] = echo

    short: ClassVar[bool] = True
    level: ClassVar[str] = 'WARNING'
    logit: ClassVar[Dict[str, bool]] = {}

    # stdout, stderr, syslog or a filename
    destination: ClassVar[str] = ''

    enabled: ClassVar[Dict[str, bool]] = {source: False for source in SOURCES}

    @classmethod
    def _set_level(cls, level: str) -> None:
        cls.level = level
        threshold = levels[level]
        cls.logit = {name: value >= threshold for name, value in levels.items()}

    @classmethod
    def log_enabled(cls, source: str, level: str) -> bool:
        return cls.enabled.get(source, True) and cls.logit.get(level, False)

    @classmethod
    def load(cls, env: 'Environment') -> None:
        section = env.log
        cls.short = section.short
        cls._set_level(section.level)

        cls.enabled = {
            'reader': section.enable and (section.all or section.reader),
            'parser': section.enable and (section.all or section.parser),
            'startup': section.enable,
            'cli': section.enable,
        }

        destination = section.destination
        if destination.startswith('file:'):
            destination = destination[5:]
        elif destination not in ('stdout', 'stderr', 'syslog'):
            destination = 'stdout'
        cls.destination = destination

    @classmethod
    def setup(cls, env: 'Environment') -> None:
        cls.load(env)

        # get_logger refuses to reconfigure a known name, so each setup gets its own
        name = f'mrtparser {cls.destination} {time.time()}'
        cls.logger = get_logger(name, format='%(message)s', level=cls.level, **_target(cls.destination))
        cls.formater = get_formater(cls.short, cls.destination)
