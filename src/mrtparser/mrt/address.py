"""address.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import socket
from typing import Any, ClassVar

from mrtparser.util.types import Buffer

# =================================================================== Address
#
# IPv4 and IPv6 addresses share one representation: a 16 bytes buffer,
# zero padded after the significant bytes, and a family telling how many
# of those bytes are significant.


class AFI(int):
    IPv4: ClassVar[int] = 1
    IPv6: ClassVar[int] = 2

    names: ClassVar[dict[int, str]] = {
        IPv4: 'ipv4',
        IPv6: 'ipv6',
    }

    _size: ClassVar[dict[int, int]] = {
        IPv4: 4,
        IPv6: 16,
    }

    _family: ClassVar[dict[int, socket.AddressFamily]] = {
        IPv4: socket.AF_INET,
        IPv6: socket.AF_INET6,
    }

    def __str__(self) -> str:
        return self.names.get(self, 'unknown afi {}'.format(int(self)))

    def __repr__(self) -> str:
        return str(self)

    def size(self) -> int:
        return self._size[self]

    def family(self) -> socket.AddressFamily:
        return self._family[self]


class Address:
    SIZE: ClassVar[int] = 16

    __slots__ = ('_buffer', 'afi')

    def __init__(self, afi: int, packed: Buffer) -> None:
        self.afi: AFI = AFI(afi)
        data = bytes(packed)
        if len(data) > self.afi.size():
            raise ValueError('{} bytes can not fit in an {} address'.format(len(data), self.afi))
        self._buffer: bytes = data + bytes(self.SIZE - len(data))

    @classmethod
    def ipv4(cls, packed: Buffer) -> Address:
        return cls(AFI.IPv4, packed)

    @classmethod
    def ipv6(cls, packed: Buffer) -> Address:
        return cls(AFI.IPv6, packed)

    @property
    def buffer(self) -> bytes:
        return self._buffer

    @property
    def packed(self) -> bytes:
        return self._buffer[: self.afi.size()]

    def top(self) -> str:
        return socket.inet_ntop(self.afi.family(), self.packed)

    def json(self) -> str:
        return '"{}"'.format(self.top())

    def __str__(self) -> str:
        return self.top()

    def __repr__(self) -> str:
        return 'Address({}, {})'.format(self.afi, self.top())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.afi == other.afi and self._buffer == other._buffer

    def __hash__(self) -> int:
        return hash((int(self.afi), self._buffer))
