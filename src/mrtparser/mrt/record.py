"""record.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from datetime import datetime, timezone
from struct import unpack
from typing import Any, ClassVar, Dict, NamedTuple

from mrtparser.mrt.tabledump import SUBTYPE, Checkpoint, TableDump, TableDumpV2, Unsupported
from mrtparser.util.types import Buffer

# ================================================================== MRTHeader
# RFC 6396 section 2
#
#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                           Timestamp                           |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |             Type              |            Subtype            |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                             Length                            |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                      Message... (variable)
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+


class TYPE(int):
    OSPFv2: ClassVar[int] = 11
    TABLE_DUMP: ClassVar[int] = 12
    TABLE_DUMP_V2: ClassVar[int] = 13
    BGP4MP: ClassVar[int] = 16
    BGP4MP_ET: ClassVar[int] = 17
    ISIS: ClassVar[int] = 32
    ISIS_ET: ClassVar[int] = 33
    OSPFv3: ClassVar[int] = 48
    OSPFv3_ET: ClassVar[int] = 49

    names: ClassVar[Dict[int, str]] = {
        OSPFv2: 'ospfv2',
        TABLE_DUMP: 'table-dump',
        TABLE_DUMP_V2: 'table-dump-v2',
        BGP4MP: 'bgp4mp',
        BGP4MP_ET: 'bgp4mp-et',
        ISIS: 'isis',
        ISIS_ET: 'isis-et',
        OSPFv3: 'ospfv3',
        OSPFv3_ET: 'ospfv3-et',
    }

    def __repr__(self) -> str:
        return self.names.get(self, 'unknown-type-{}'.format(int(self)))

    def __str__(self) -> str:
        return repr(self)

    @classmethod
    def name(cls, kind: int) -> str:
        return cls.names.get(kind, 'unknown-type-{}'.format(kind))


class MRTHeader(NamedTuple):
    timestamp: int
    type: int
    subtype: int
    length: int

    SIZE = 12

    @classmethod
    def unpack_header(cls, data: Buffer) -> MRTHeader:
        return cls(*unpack('!LHHL', data))

    def __str__(self) -> str:
        return 'header timestamp {} type {} subtype {} length {}'.format(
            self.timestamp, TYPE.name(self.type), self.subtype, self.length
        )


# ================================================================== MRTRecord
#


class MRTRecord:
    __slots__ = ('timestamp', 'type', 'subtype', 'body')

    def __init__(self, timestamp: datetime, kind: int, subtype: int, body: TableDump) -> None:
        self.timestamp: datetime = timestamp
        self.type: int = kind
        self.subtype: int = subtype
        self.body: TableDump = body

    @classmethod
    def unpack_record(
        cls, header: MRTHeader, data: Buffer, checkpoint: Checkpoint = None, base: int = 0
    ) -> MRTRecord:
        timestamp = datetime.fromtimestamp(header.timestamp, tz=timezone.utc)
        body: TableDump
        if header.type == TableDumpV2.TYPE:
            body = TableDumpV2.unpack(header.subtype, data, checkpoint, base)
        else:
            body = Unsupported(header.type, header.subtype, data)
        return cls(timestamp, header.type, header.subtype, body)

    def subtype_name(self) -> str:
        if self.type == TableDumpV2.TYPE:
            return SUBTYPE.name(self.subtype)
        return str(self.subtype)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MRTRecord):
            return NotImplemented
        return (
            self.timestamp == other.timestamp
            and self.type == other.type
            and self.subtype == other.subtype
            and self.body == other.body
        )

    def __hash__(self) -> int:
        return hash((self.timestamp, self.type, self.subtype, self.body))

    def __repr__(self) -> str:
        return 'MRTRecord(type={}, subtype={}, body={!r})'.format(TYPE.name(self.type), self.subtype_name(), self.body)

    def __str__(self) -> str:
        return '{} {} {}\n{}'.format(
            self.timestamp.isoformat(), TYPE.name(self.type), self.subtype_name(), self.body
        )

    def json(self) -> str:
        return '{{ "timestamp": {}, "type": {}, "type-name": "{}", "subtype": {}, "subtype-name": "{}", "body": {} }}'.format(
            int(self.timestamp.timestamp()),
            self.type,
            TYPE.name(self.type),
            self.subtype,
            self.subtype_name(),
            self.body.json(),
        )
