"""attribute.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Tuple

from mrtparser.logger import lazyattribute, log
from mrtparser.mrt.wire import Cursor
from mrtparser.util import hexstring
from mrtparser.util.types import Buffer

# Path attributes inside a RIB entry use the BGP UPDATE encoding (RFC 4271 4.3)
#
# 0                   1
# 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |  Attr. Flags  |Attr. Type Code|
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | Attr. Length (1 or 2 octets)  |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |  Attr. Value (variable)  ...
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+


class Flag(int):
    EXTENDED_LENGTH: ClassVar[int] = 0x10
    PARTIAL: ClassVar[int] = 0x20
    TRANSITIVE: ClassVar[int] = 0x40
    OPTIONAL: ClassVar[int] = 0x80

    # most significant bit first
    _BITS: ClassVar[Tuple[Tuple[int, str], ...]] = (
        (OPTIONAL, 'OPTIONAL'),
        (TRANSITIVE, 'TRANSITIVE'),
        (PARTIAL, 'PARTIAL'),
        (EXTENDED_LENGTH, 'EXTENDED_LENGTH'),
    )

    def __str__(self) -> str:
        parts = [name for bit, name in self._BITS if self & bit]
        if self & 0x0F:
            parts.append(f'UNKNOWN {hex(self & 0x0F)}')
        return ' '.join(parts)


class CODE(int):
    ORIGIN: ClassVar[int] = 0x01  # RFC 4271
    AS_PATH: ClassVar[int] = 0x02
    NEXT_HOP: ClassVar[int] = 0x03
    MED: ClassVar[int] = 0x04
    LOCAL_PREF: ClassVar[int] = 0x05
    ATOMIC_AGGREGATE: ClassVar[int] = 0x06
    AGGREGATOR: ClassVar[int] = 0x07
    COMMUNITY: ClassVar[int] = 0x08  # RFC 1997
    ORIGINATOR_ID: ClassVar[int] = 0x09  # RFC 4456
    CLUSTER_LIST: ClassVar[int] = 0x0A
    MP_REACH_NLRI: ClassVar[int] = 0x0E  # RFC 4760
    MP_UNREACH_NLRI: ClassVar[int] = 0x0F
    EXTENDED_COMMUNITY: ClassVar[int] = 0x10  # RFC 4360
    AS4_PATH: ClassVar[int] = 0x11  # RFC 6793
    AS4_AGGREGATOR: ClassVar[int] = 0x12
    PMSI_TUNNEL: ClassVar[int] = 0x16  # RFC 6514
    TUNNEL_ENCAP: ClassVar[int] = 0x17  # RFC 5512
    TRAFFIC_ENGINEERING: ClassVar[int] = 0x18  # RFC 5543
    IPV6_EXTENDED_COMMUNITY: ClassVar[int] = 0x19  # RFC 5701
    AIGP: ClassVar[int] = 0x1A  # RFC 7311
    PE_DISTINGUISHER_LABELS: ClassVar[int] = 0x1B  # RFC 6514
    BGP_LS: ClassVar[int] = 0x1D  # RFC 7752
    LARGE_COMMUNITY: ClassVar[int] = 0x20  # RFC 8092
    BGPSEC_PATH: ClassVar[int] = 0x21  # RFC 8205
    SFP: ClassVar[int] = 0x25  # RFC 9015
    BGP_PREFIX_SID: ClassVar[int] = 0x28  # RFC 8669

    # the name is the lowercased constant with dashes, except for these
    _SPELLING: ClassVar[Dict[str, str]] = {
        'LOCAL_PREF': 'local-preference',
        'TUNNEL_ENCAP': 'tunnel-encaps',
        'IPV6_EXTENDED_COMMUNITY': 'extended-community-ipv6',
    }

    names: ClassVar[Dict[int, str]] = {}

    def __repr__(self) -> str:
        return self.name(self)

    def __str__(self) -> str:
        return self.name(self)

    @classmethod
    def name(cls, code: int) -> str:
        return cls.names.get(code, f'unknown-attribute-{hex(code)}')


CODE.names = {
    value: CODE._SPELLING.get(key, key.lower().replace('_', '-'))
    for key, value in vars(CODE).items()
    if key.isupper() and not key.startswith('_')
}


# ================================================================ BGPAttribute
#


class BGPAttribute:
    """One path attribute, kept opaque.

    The flag byte is exposed bit by bit; the value is never interpreted.
    """

    __slots__ = ('flag', 'code', 'data')

    def __init__(self, flag: int, code: int, data: Buffer) -> None:
        self.flag: Flag = Flag(flag)
        self.code: CODE = CODE(code)
        self.data: bytes = bytes(data)

    @property
    def optional(self) -> bool:
        return bool(self.flag & Flag.OPTIONAL)

    @property
    def transitive(self) -> bool:
        return bool(self.flag & Flag.TRANSITIVE)

    @property
    def partial(self) -> bool:
        return bool(self.flag & Flag.PARTIAL)

    @property
    def extended(self) -> bool:
        return bool(self.flag & Flag.EXTENDED_LENGTH)

    @property
    def length(self) -> int:
        return len(self.data)

    def header_size(self) -> int:
        return 4 if self.extended else 3

    def __len__(self) -> int:
        # bytes used on the wire, header included
        return self.header_size() + self.length

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BGPAttribute):
            return NotImplemented
        return self.flag == other.flag and self.code == other.code and self.data == other.data

    def __hash__(self) -> int:
        return hash((int(self.flag), int(self.code), self.data))

    def __repr__(self) -> str:
        return 'BGPAttribute(flag=0x{:02X}, code={}, length={})'.format(self.flag, int(self.code), self.length)

    def __str__(self) -> str:
        return '{} flag 0x{:02X} [{}] payload {}'.format(self.code, self.flag, self.flag, hexstring(self.data))

    def json(self) -> str:
        return (
            '{{ "code": {}, "name": "{}", "flag": {}, "optional": {}, "transitive": {}, '
            '"partial": {}, "extended": {}, "length": {}, "data": "{}" }}'.format(
                int(self.code),
                self.code,
                int(self.flag),
                'true' if self.optional else 'false',
                'true' if self.transitive else 'false',
                'true' if self.partial else 'false',
                'true' if self.extended else 'false',
                self.length,
                hexstring(self.data),
            )
        )

    @classmethod
    def unpack_attribute(cls, cursor: Cursor) -> BGPAttribute:
        flag = cursor.u8('attribute flag')
        code = cursor.u8('attribute type')

        # the extended length bit switches to a two bytes length (RFC 4271 4.3)
        if flag & Flag.EXTENDED_LENGTH:
            length = cursor.u16('attribute extended length')
        else:
            length = cursor.u8('attribute length')

        data = cursor.take(length, 'attribute {} payload'.format(CODE.name(code)))
        log.debug(lazyattribute(flag, CODE(code), length, data), 'parser')
        return cls(flag, code, data)

    @classmethod
    def unpack_attributes(cls, data: Buffer, base: int = 0) -> tuple[BGPAttribute, ...]:
        cursor = Cursor(data, base)
        attributes: List[BGPAttribute] = []
        while not cursor.exhausted():
            attributes.append(cls.unpack_attribute(cursor))
        return tuple(attributes)
