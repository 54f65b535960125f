"""tabledump.py

TABLE_DUMP_V2 bodies (RFC 6396 section 4.3) and the subtype dispatch.

A record body is exactly one of PeerIndexTable, RIBTable or Unsupported.
The decoders register against the subtypes they handle; any subtype
without a registered decoder is returned as Unsupported with its raw
bytes, so unknown records can be skipped or logged by the caller.

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional, Type

from mrtparser.logger import lazymsg, log
from mrtparser.mrt.wire import Cursor
from mrtparser.util import hexstring
from mrtparser.util.types import Buffer

# called between entries, raises to abort the decoding
Checkpoint = Optional[Callable[[], None]]


class SUBTYPE(int):
    PEER_INDEX_TABLE: ClassVar[int] = 1
    RIB_IPV4_UNICAST: ClassVar[int] = 2
    RIB_IPV4_MULTICAST: ClassVar[int] = 3
    RIB_IPV6_UNICAST: ClassVar[int] = 4
    RIB_IPV6_MULTICAST: ClassVar[int] = 5
    RIB_GENERIC: ClassVar[int] = 6
    # RFC 6397
    GEO_PEER_TABLE: ClassVar[int] = 7
    # RFC 8050
    RIB_IPV4_UNICAST_ADDPATH: ClassVar[int] = 8
    RIB_IPV4_MULTICAST_ADDPATH: ClassVar[int] = 9
    RIB_IPV6_UNICAST_ADDPATH: ClassVar[int] = 10
    RIB_IPV6_MULTICAST_ADDPATH: ClassVar[int] = 11
    RIB_GENERIC_ADDPATH: ClassVar[int] = 12

    names: ClassVar[Dict[int, str]] = {
        PEER_INDEX_TABLE: 'peer-index-table',
        RIB_IPV4_UNICAST: 'rib-ipv4-unicast',
        RIB_IPV4_MULTICAST: 'rib-ipv4-multicast',
        RIB_IPV6_UNICAST: 'rib-ipv6-unicast',
        RIB_IPV6_MULTICAST: 'rib-ipv6-multicast',
        RIB_GENERIC: 'rib-generic',
        GEO_PEER_TABLE: 'geo-peer-table',
        RIB_IPV4_UNICAST_ADDPATH: 'rib-ipv4-unicast-addpath',
        RIB_IPV4_MULTICAST_ADDPATH: 'rib-ipv4-multicast-addpath',
        RIB_IPV6_UNICAST_ADDPATH: 'rib-ipv6-unicast-addpath',
        RIB_IPV6_MULTICAST_ADDPATH: 'rib-ipv6-multicast-addpath',
        RIB_GENERIC_ADDPATH: 'rib-generic-addpath',
    }

    def __repr__(self) -> str:
        return self.names.get(self, 'unknown-subtype-{}'.format(int(self)))

    def __str__(self) -> str:
        return repr(self)

    @classmethod
    def name(cls, subtype: int) -> str:
        return cls.names.get(subtype, 'unknown-subtype-{}'.format(subtype))


class TableDump:
    # subtypes a decoder handles, set by the subclasses
    SUBTYPES: ClassVar[tuple[int, ...]] = ()

    __slots__ = ()

    # a decoded body is present even when it holds no peer or entry
    def __bool__(self) -> bool:
        return True

    @classmethod
    def unpack_table(cls, subtype: int, cursor: Cursor, checkpoint: Checkpoint = None) -> TableDump:
        raise NotImplementedError('unpack_table not implemented in subclass')

    def json(self) -> str:
        raise NotImplementedError('json not implemented in subclass')


class Unsupported(TableDump):
    """Body of a record this library does not decode, kept as raw bytes."""

    __slots__ = ('type', 'subtype', 'raw')

    def __init__(self, kind: int, subtype: int, raw: Buffer) -> None:
        self.type: int = kind
        self.subtype: int = subtype
        self.raw: bytes = bytes(raw)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Unsupported):
            return NotImplemented
        return self.type == other.type and self.subtype == other.subtype and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((self.type, self.subtype, self.raw))

    def __repr__(self) -> str:
        return 'Unsupported(type={}, subtype={}, length={})'.format(self.type, self.subtype, len(self.raw))

    def __str__(self) -> str:
        return 'unsupported type {} subtype {} ({} bytes)'.format(self.type, self.subtype, len(self.raw))

    def json(self) -> str:
        return '{{ "unsupported": {{ "type": {}, "subtype": {}, "length": {}, "data": "{}" }} }}'.format(
            self.type, self.subtype, len(self.raw), hexstring(self.raw)
        )


class TableDumpV2:
    TYPE: ClassVar[int] = 13

    registered_table: ClassVar[Dict[int, Type[TableDump]]] = {}

    def __init__(self) -> None:
        raise RuntimeError('This class can not be instantiated')

    @classmethod
    def register(cls, klass: Type[TableDump]) -> Type[TableDump]:
        for subtype in klass.SUBTYPES:
            if subtype in cls.registered_table:
                raise RuntimeError('only one class can be registered per subtype')
            cls.registered_table[subtype] = klass
        return klass

    @classmethod
    def klass(cls, subtype: int) -> Optional[Type[TableDump]]:
        return cls.registered_table.get(subtype, None)

    @classmethod
    def unpack(cls, subtype: int, data: Buffer, checkpoint: Checkpoint = None, base: int = 0) -> TableDump:
        klass = cls.klass(subtype)
        if klass is None:
            log.debug(
                lazymsg('table-dump-v2 subtype={name} action=unsupported', name=SUBTYPE.name(subtype)),
                'parser',
            )
            return Unsupported(cls.TYPE, subtype, data)

        cursor = Cursor(data, base)
        table = klass.unpack_table(subtype, cursor, checkpoint)
        if not cursor.exhausted():
            log.debug(
                lazymsg(
                    'table-dump-v2 subtype={name} trailing={left} bytes ignored',
                    name=SUBTYPE.name(subtype),
                    left=cursor.remaining,
                ),
                'parser',
            )
        return table
