"""parsing.py

Readers and writers converting configuration strings to typed values.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import Any

from mrtparser.logger.handler import levels


def integer(_: Any) -> int:
    return int(_)


def real(_: Any) -> float:
    return float(_)


def unquote(_: str) -> str:
    return _.strip().strip('\'"')


def quote(_: Any) -> str:
    return f"'{_!s}'"


def boolean(_: str) -> bool:
    return _.lower() in ('1', 'yes', 'on', 'enable', 'true')


def lower(_: Any) -> str:
    return str(_).lower()


def positive(_: str) -> int:
    value = int(_)
    if value < 0:
        raise TypeError(f'{_} is not a positive integer')
    return value


def seconds(_: str) -> float:
    value = float(_)
    if value < 0:
        raise TypeError(f'{_} is not a valid duration')
    return value


def errors(_: str) -> str:
    policy = unquote(_).lower()
    if policy not in ('strict', 'skip'):
        raise TypeError('invalid error policy')
    return policy


def syslog_value(log: str) -> str:
    log = unquote(log).upper()
    if log not in levels:
        raise TypeError(f'invalid log level {log}')
    return log
