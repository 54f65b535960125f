"""logger/__init__.py

Lazy logging front end. Messages are zero argument callables so that the
formatting work is only done for the sources and levels which are enabled:

    log.debug(lazymsg('rib prefix={prefix}', prefix=prefix), 'parser')

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import time
from typing import Callable, ClassVar, TYPE_CHECKING

if TYPE_CHECKING:
    from mrtparser.environment.config import Environment

from mrtparser.logger.option import option
from mrtparser.logger.handler import get_logger  # noqa: F401,E261
from mrtparser.logger.format import formater  # noqa: F401,E261
from mrtparser.logger.format import lazyformat  # noqa: F401,E261
from mrtparser.logger.format import lazyattribute  # noqa: F401,E261
from mrtparser.logger.format import lazymsg  # noqa: F401,E261
from mrtparser.logger.history import history  # noqa: F401,E261
from mrtparser.logger.history import record  # noqa: F401,E261

__all__ = [
    'get_logger',
    'formater',
    'lazyformat',
    'lazyattribute',
    'lazymsg',
    'history',
    'option',
    'record',
    'LogMessage',
    'log',
]

LogMessage = Callable[[], str]

# (logging.Logger method, message, source, level)
Emitter = Callable[[Callable[[str], None], LogMessage, str, str], None]


def _discard(write: Callable[[str], None], message: LogMessage, source: str, level: str) -> None:
    pass


def _emit(write: Callable[[str], None], message: LogMessage, source: str, level: str) -> None:
    if not option.log_enabled(source, level):
        return

    text = message()
    now = time.time()
    localtime = time.localtime(now)
    for line in text.split('\n'):
        write(option.formater(line, source, level, localtime))
        record(line, source, level, now)


class log:
    emitter: ClassVar[Emitter] = _emit

    @staticmethod
    def init(env: 'Environment') -> None:
        option.setup(env)

    @classmethod
    def disable(cls) -> None:
        cls.emitter = _discard
        option.logger = None

    @classmethod
    def silence(cls) -> None:
        loud = cls.emitter

        def quiet(write: Callable[[str], None], message: LogMessage, source: str, level: str) -> None:
            if level in ('CRITICAL', 'FATAL'):
                loud(write, message, source, level)

        cls.emitter = quiet

    @classmethod
    def _log(cls, method: str, level: str, message: LogMessage, source: str) -> None:
        if option.logger is None:
            return
        cls.emitter(getattr(option.logger, method), message, source, level)

    @classmethod
    def debug(cls, message: LogMessage, source: str = '') -> None:
        cls._log('debug', 'DEBUG', message, source)

    @classmethod
    def info(cls, message: LogMessage, source: str = '') -> None:
        cls._log('info', 'INFO', message, source)

    @classmethod
    def warning(cls, message: LogMessage, source: str = '') -> None:
        cls._log('warning', 'WARNING', message, source)

    @classmethod
    def error(cls, message: LogMessage, source: str = '') -> None:
        cls._log('error', 'ERROR', message, source)

    @classmethod
    def critical(cls, message: LogMessage, source: str = '') -> None:
        cls._log('critical', 'CRITICAL', message, source)

    @classmethod
    def fatal(cls, message: LogMessage, source: str = '') -> None:
        cls._log('critical', 'FATAL', message, source)
