"""peer.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import json
from typing import Any, ClassVar, List

from mrtparser.logger import lazymsg, log
from mrtparser.mrt.address import AFI, Address
from mrtparser.mrt.tabledump import SUBTYPE, Checkpoint, TableDump, TableDumpV2
from mrtparser.mrt.wire import Cursor
from mrtparser.util import hexstring

# =============================================================== PeerIndexTable
# RFC 6396 section 4.3.1
#
#  0                   1                   2                   3
#  0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                      Collector BGP ID                         |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |       View Name Length        |     View Name (variable)      |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |          Peer Count           |    Peer Entries (variable)
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
#
# Peer Entry
#
# +-+-+-+-+-+-+-+-+
# |   Peer Type   |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                         Peer BGP ID                           |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                   Peer IP Address (variable)                  |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
# |                        Peer AS (variable)                     |
# +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+


class PeerEntry:
    # Peer Type bits
    IPV6: ClassVar[int] = 0x01
    AS4: ClassVar[int] = 0x02

    __slots__ = ('index', 'peer_type', 'peer_id', 'peer_address', 'peer_as')

    def __init__(self, index: int, peer_type: int, peer_id: Address, peer_address: Address, peer_as: int) -> None:
        self.index: int = index
        self.peer_type: int = peer_type
        self.peer_id: Address = peer_id
        self.peer_address: Address = peer_address
        self.peer_as: int = peer_as

    @property
    def ipv6(self) -> bool:
        return bool(self.peer_type & self.IPV6)

    @property
    def asn4(self) -> bool:
        return bool(self.peer_type & self.AS4)

    @classmethod
    def unpack_entry(cls, index: int, cursor: Cursor) -> PeerEntry:
        peer_type = cursor.u8('peer type')
        peer_id = Address.ipv4(cursor.take(4, 'peer bgp id'))

        afi = AFI.IPv6 if peer_type & cls.IPV6 else AFI.IPv4
        peer_address = Address(afi, cursor.take(AFI(afi).size(), 'peer ip address'))

        asn_size = 4 if peer_type & cls.AS4 else 2
        peer_as = cursor.uint(asn_size, 'peer as')

        return cls(index, peer_type, peer_id, peer_address, peer_as)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PeerEntry):
            return NotImplemented
        return (
            self.index == other.index
            and self.peer_type == other.peer_type
            and self.peer_id == other.peer_id
            and self.peer_address == other.peer_address
            and self.peer_as == other.peer_as
        )

    def __hash__(self) -> int:
        return hash((self.index, self.peer_type, self.peer_id, self.peer_address, self.peer_as))

    def __repr__(self) -> str:
        return 'PeerEntry(index={}, address={}, as={})'.format(self.index, self.peer_address, self.peer_as)

    def __str__(self) -> str:
        return 'peer {} type {} bgp-id {} address {} as {}'.format(
            self.index, self.peer_type, self.peer_id, self.peer_address, self.peer_as
        )

    def json(self) -> str:
        return '{{ "index": {}, "type": {}, "bgp-id": {}, "address": {}, "as": {} }}'.format(
            self.index,
            self.peer_type,
            self.peer_id.json(),
            self.peer_address.json(),
            self.peer_as,
        )


@TableDumpV2.register
class PeerIndexTable(TableDump):
    SUBTYPES: ClassVar[tuple[int, ...]] = (SUBTYPE.PEER_INDEX_TABLE,)

    __slots__ = ('collector_id', 'view_raw', 'peers')

    def __init__(self, collector_id: Address, view_raw: bytes, peers: tuple[PeerEntry, ...]) -> None:
        self.collector_id: Address = collector_id
        self.view_raw: bytes = view_raw
        self.peers: tuple[PeerEntry, ...] = peers

    @property
    def view_name(self) -> str:
        """The view name, undecodable UTF-8 bytes shown as U+FFFD (view_raw keeps them)."""
        return self.view_raw.decode('utf-8', errors='replace')

    def utf8_view(self) -> bool:
        try:
            self.view_raw.decode('utf-8')
        except UnicodeDecodeError:
            return False
        return True

    def peer(self, index: int) -> PeerEntry:
        """Return the peer a RIB entry refers to, IndexError if unknown."""
        if index < 0:
            raise IndexError(f'invalid peer index {index}')
        return self.peers[index]

    def __len__(self) -> int:
        return len(self.peers)

    @classmethod
    def unpack_table(cls, subtype: int, cursor: Cursor, checkpoint: Checkpoint = None) -> PeerIndexTable:
        collector_id = Address.ipv4(cursor.take(4, 'collector bgp id'))

        view_length = cursor.u16('view name length')
        view_raw = bytes(cursor.take(view_length, 'view name'))

        count = cursor.u16('peer count')
        peers: List[PeerEntry] = []
        for index in range(count):
            if checkpoint is not None:
                checkpoint()
            peers.append(PeerEntry.unpack_entry(index, cursor))

        table = cls(collector_id, view_raw, tuple(peers))
        log.debug(lazymsg('peer-index-table {table!r}', table=table), 'parser')
        if not table.utf8_view():
            log.warning(lazymsg('peer-index-table view name {view!r} is not valid utf-8', view=view_raw), 'parser')
        return table

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PeerIndexTable):
            return NotImplemented
        return self.collector_id == other.collector_id and self.view_raw == other.view_raw and self.peers == other.peers

    def __hash__(self) -> int:
        return hash((self.collector_id, self.view_raw, self.peers))

    def __repr__(self) -> str:
        return 'PeerIndexTable(collector={}, view={!r}, peers={})'.format(
            self.collector_id, self.view_name, len(self.peers)
        )

    def __str__(self) -> str:
        lines = ['peer-index-table collector {} view {!r}'.format(self.collector_id, self.view_name)]
        lines.extend(' {}'.format(peer) for peer in self.peers)
        return '\n'.join(lines)

    def json(self) -> str:
        raw = '' if self.utf8_view() else '"view-raw": "{}", '.format(hexstring(self.view_raw))
        return '{{ "collector-bgp-id": {}, "view-name": {}, {}"peers": [ {} ] }}'.format(
            self.collector_id.json(),
            json.dumps(self.view_name),
            raw,
            ', '.join(peer.json() for peer in self.peers),
        )
