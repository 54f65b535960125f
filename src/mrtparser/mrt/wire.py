"""wire.py

Bounds-checked big-endian reads over an in-memory byte run.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from struct import unpack_from

from mrtparser.mrt.error import TruncatedInput
from mrtparser.util.types import Buffer


class Cursor:
    """Read position over a byte run.

    Reads never go past the end of the run: asking for more bytes than are
    left raises TruncatedInput naming the field being read. The offset
    reported is relative to `base`, the position of the run in the
    enclosing record, so nested cursors point at the right byte.
    """

    __slots__ = ('_data', '_offset', 'base')

    def __init__(self, data: Buffer, base: int = 0) -> None:
        self._data: memoryview = memoryview(data)
        self._offset: int = 0
        self.base: int = base

    @property
    def offset(self) -> int:
        return self.base + self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def exhausted(self) -> bool:
        return self._offset >= len(self._data)

    def _need(self, size: int, what: str) -> None:
        if size > self.remaining:
            raise TruncatedInput(what, size, self.remaining, self.offset)

    def take(self, size: int, what: str) -> memoryview:
        self._need(size, what)
        chunk = self._data[self._offset : self._offset + size]
        self._offset += size
        return chunk

    def u8(self, what: str) -> int:
        self._need(1, what)
        value: int = self._data[self._offset]
        self._offset += 1
        return value

    def u16(self, what: str) -> int:
        self._need(2, what)
        value: int = unpack_from('!H', self._data, self._offset)[0]
        self._offset += 2
        return value

    def u32(self, what: str) -> int:
        self._need(4, what)
        value: int = unpack_from('!L', self._data, self._offset)[0]
        self._offset += 4
        return value

    def uint(self, size: int, what: str) -> int:
        return int.from_bytes(self.take(size, what), 'big')
