"""Decoding error types.

Every read from the wire is fallible. Failures are reported with one of the
exceptions below, all deriving from MRTError so callers can catch them as a
group.

Key classes:
    EndOfInput: the stream ended on a record boundary (internal to Reader)
    TruncatedInput: a declared length runs past the available bytes
    MalformedInput: a field holds a value the format does not allow
    OversizedRecord: a record declares a body above the configured limit
    DecodeCancelled, DecodeTimeout: iteration aborted by the caller

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

__all__ = [
    'MRTError',
    'EndOfInput',
    'TruncatedInput',
    'MalformedInput',
    'OversizedRecord',
    'DecodeCancelled',
    'DecodeTimeout',
]


class MRTError(Exception):
    def __init__(self, message: str, offset: int | None = None) -> None:
        Exception.__init__(self, message)
        self.offset: int | None = offset

    def __str__(self) -> str:
        message = Exception.__str__(self)
        if self.offset is None:
            return message
        return f'{message} (at offset {self.offset})'


class EndOfInput(MRTError):
    pass


class TruncatedInput(MRTError):
    def __init__(self, what: str, needed: int, available: int, offset: int | None = None) -> None:
        MRTError.__init__(self, f'truncated {what}: needed {needed} bytes, {available} available', offset)
        self.what: str = what
        self.needed: int = needed
        self.available: int = available


class MalformedInput(MRTError):
    pass


class OversizedRecord(MRTError):
    def __init__(self, length: int, limit: int, offset: int | None = None) -> None:
        MRTError.__init__(self, f'record declares {length} bytes, above the {limit} bytes limit', offset)
        self.length: int = length
        self.limit: int = limit


class DecodeCancelled(MRTError):
    pass


class DecodeTimeout(MRTError):
    pass
