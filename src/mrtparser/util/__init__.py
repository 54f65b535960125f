"""__init__.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from mrtparser.util.types import Buffer


def hexstring(value: Buffer) -> str:
    return '0x' + bytes(value).hex().upper()


def od(value: Buffer) -> str:
    """hex dump grouped by two bytes: '0102 03'"""
    digits = bytes(value).hex().upper()
    return ' '.join(digits[start : start + 4] for start in range(0, len(digits), 4))
