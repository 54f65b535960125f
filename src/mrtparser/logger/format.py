from __future__ import annotations

import os
import sys
import time
from typing import Any, Callable

from mrtparser.util import od
from mrtparser.util.types import Buffer

# (message, source, level, local time) -> line
FormatterFunc = Callable[[str, str, str, time.struct_time], str]

_SOURCE_COLOR: dict[str, str] = {
    'FATAL': '\033[00;31m',
    'CRITICAL': '\033[00;31m',
    'ERROR': '\033[01;31m',
    'WARNING': '\033[01;33m',
    'INFO': '\033[01;32m',
    'DEBUG': '',
    'NOTSET': '\033[01;34m',
}

_MESSAGE_BOLD: tuple[str, ...] = ('FATAL', 'ERROR', 'WARNING', 'INFO')

_END: str = '\033[0m'


def color_source(level: str, source: str) -> str:
    color = _SOURCE_COLOR.get(level, '')
    if color:
        return f'{color}{source:<15}{_END}'
    return source


def color_message(level: str, message: str) -> str:
    if level in _MESSAGE_BOLD:
        return f'\033[1m{message:<8}{_END}'
    return message


def istty(destination: str) -> bool:
    std: Any = sys.stderr if destination == 'stderr' else sys.stdout
    try:
        return bool(std.isatty())
    except (AttributeError, ValueError):
        return False


def _short_formater(message: str, source: str, level: str, timestamp: time.struct_time) -> str:
    return f'{source:<15} {message}'


def _long_formater(message: str, source: str, level: str, timestamp: time.struct_time) -> str:
    now = time.strftime('%H:%M:%S', timestamp)
    return f'{now} {os.getpid():<6} {level:<8} {source:<15} {message}'


def _short_color_formater(message: str, source: str, level: str, timestamp: time.struct_time) -> str:
    return f'\r{color_source(level, source):<15} {color_message(level, message)}'


def _long_color_formater(message: str, source: str, level: str, timestamp: time.struct_time) -> str:
    now = time.strftime('%H:%M:%S', timestamp)
    return f'\r{now} {os.getpid():<6} {color_source(level, source):<15} {color_message(level, message)}'


def formater(short: bool, destination: str) -> FormatterFunc:
    if destination == 'syslog':
        return _short_formater
    if destination not in ('stdout', 'stderr'):
        return _long_formater
    if istty(destination):
        return _short_color_formater if short else _long_color_formater
    return _short_formater if short else _long_formater


# NOTE: keep % formatting in the lazy helpers, they run inside the logger
def lazyattribute(flag: int, code: int, length: int, data: Buffer) -> Callable[[], str]:
    def _lazy() -> str:
        return 'attribute %-18s flag 0x%02x type 0x%02x len 0x%04x%s' % (
            str(code),
            flag,
            int(code),
            length,
            ' payload {}'.format(od(data)) if data else '',
        )

    return _lazy


def lazyformat(prefix: str, message: bytes, formater: Callable[[bytes], str] = od) -> Callable[[], str]:
    def _lazy() -> str:
        return '%s (%4d) %s' % (prefix, len(message), formater(message))

    return _lazy


def lazymsg(template: str, **kwargs: object) -> Callable[[], str]:
    """str.format the template with kwargs, only when the message is logged"""

    def _format() -> str:
        return template.format(**kwargs)

    return _format
