"""rib.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, ClassVar, List

from mrtparser.logger import lazymsg, log
from mrtparser.mrt.address import Address
from mrtparser.mrt.attribute import BGPAttribute
from mrtparser.mrt.error import MalformedInput
from mrtparser.mrt.tabledump import SUBTYPE, Checkpoint, TableDump, TableDumpV2
from mrtparser.mrt.wire import Cursor

# ==================================================================== RIBTable
# RFC 6396 section 4.3.2, AFI/SAFI specific RIB subtypes
#
#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                         Sequence Number                       |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# | Prefix Length |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                        Prefix (variable)                      |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |         Entry Count           |  RIB Entries (variable)
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
#
# RIB Entry
#
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |         Peer Index            |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                         Originated Time                       |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |      Attribute Length         |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                    BGP Attributes... (variable)
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+


def utc(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class RIBEntry:
    __slots__ = ('peer_index', 'originated', 'attributes')

    def __init__(self, peer_index: int, originated: datetime, attributes: tuple[BGPAttribute, ...]) -> None:
        self.peer_index: int = peer_index
        self.originated: datetime = originated
        self.attributes: tuple[BGPAttribute, ...] = attributes

    @classmethod
    def unpack_entry(cls, cursor: Cursor) -> RIBEntry:
        peer_index = cursor.u16('rib entry peer index')
        originated = cursor.u32('rib entry originated time')
        length = cursor.u16('rib entry attribute length')

        base = cursor.offset
        data = cursor.take(length, 'rib entry attributes')
        attributes = BGPAttribute.unpack_attributes(data, base)

        return cls(peer_index, utc(originated), attributes)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RIBEntry):
            return NotImplemented
        return (
            self.peer_index == other.peer_index
            and self.originated == other.originated
            and self.attributes == other.attributes
        )

    def __hash__(self) -> int:
        return hash((self.peer_index, self.originated, self.attributes))

    def __repr__(self) -> str:
        return 'RIBEntry(peer={}, attributes={})'.format(self.peer_index, len(self.attributes))

    def __str__(self) -> str:
        lines = ['entry peer {} originated {}'.format(self.peer_index, self.originated.isoformat())]
        lines.extend('  {}'.format(attribute) for attribute in self.attributes)
        return '\n'.join(lines)

    def json(self) -> str:
        return '{{ "peer-index": {}, "originated": {}, "attributes": [ {} ] }}'.format(
            self.peer_index,
            int(self.originated.timestamp()),
            ', '.join(attribute.json() for attribute in self.attributes),
        )


@TableDumpV2.register
class RIBTable(TableDump):
    SUBTYPES: ClassVar[tuple[int, ...]] = (SUBTYPE.RIB_IPV6_UNICAST, SUBTYPE.RIB_IPV6_MULTICAST)

    MAX_PREFIX_LENGTH: ClassVar[int] = 128

    __slots__ = ('sequence', 'prefix_length', 'prefix', 'entries')

    def __init__(self, sequence: int, prefix_length: int, prefix: Address, entries: tuple[RIBEntry, ...]) -> None:
        self.sequence: int = sequence
        self.prefix_length: int = prefix_length
        self.prefix: Address = prefix
        self.entries: tuple[RIBEntry, ...] = entries

    @property
    def network(self) -> str:
        return '{}/{}'.format(self.prefix, self.prefix_length)

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def unpack_table(cls, subtype: int, cursor: Cursor, checkpoint: Checkpoint = None) -> RIBTable:
        sequence = cursor.u32('rib sequence number')

        offset = cursor.offset
        prefix_length = cursor.u8('rib prefix length')
        if prefix_length > cls.MAX_PREFIX_LENGTH:
            raise MalformedInput('invalid ipv6 prefix length {}'.format(prefix_length), offset)

        # Address zero pads past the significant bytes
        prefix = Address.ipv6(cursor.take((prefix_length + 7) // 8, 'rib prefix'))

        count = cursor.u16('rib entry count')
        entries: List[RIBEntry] = []
        for _ in range(count):
            if checkpoint is not None:
                checkpoint()
            entries.append(RIBEntry.unpack_entry(cursor))

        log.debug(
            lazymsg(
                'rib {name} sequence={sequence} prefix={prefix}/{length} entries={count}',
                name=SUBTYPE.name(subtype),
                sequence=sequence,
                prefix=prefix,
                length=prefix_length,
                count=count,
            ),
            'parser',
        )
        return cls(sequence, prefix_length, prefix, tuple(entries))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RIBTable):
            return NotImplemented
        return (
            self.sequence == other.sequence
            and self.prefix_length == other.prefix_length
            and self.prefix == other.prefix
            and self.entries == other.entries
        )

    def __hash__(self) -> int:
        return hash((self.sequence, self.prefix_length, self.prefix, self.entries))

    def __repr__(self) -> str:
        return 'RIBTable(sequence={}, prefix={}, entries={})'.format(self.sequence, self.network, len(self.entries))

    def __str__(self) -> str:
        lines = ['rib sequence {} prefix {}'.format(self.sequence, self.network)]
        lines.extend(' {}'.format(entry) for entry in self.entries)
        return '\n'.join(lines)

    def json(self) -> str:
        return '{{ "sequence": {}, "prefix": "{}", "entries": [ {} ] }}'.format(
            self.sequence,
            self.network,
            ', '.join(entry.json() for entry in self.entries),
        )
