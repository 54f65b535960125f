"""test_peer.py

Unit tests for the PEER_INDEX_TABLE decoder (RFC 6396 section 4.3.1).
"""

import json
import socket
import struct
from unittest.mock import Mock, patch

import pytest

from mrtparser.mrt.address import AFI, Address
from mrtparser.mrt.error import DecodeCancelled, TruncatedInput
from mrtparser.mrt.peer import PeerEntry, PeerIndexTable
from mrtparser.mrt.tabledump import SUBTYPE, TableDumpV2
from mrtparser.mrt.wire import Cursor


def create_peer(peer_type: int, bgp_id: str, address: str, asn: int) -> bytes:
    family = socket.AF_INET6 if peer_type & 0x01 else socket.AF_INET
    data = bytes([peer_type]) + socket.inet_aton(bgp_id) + socket.inet_pton(family, address)
    data += struct.pack('!L' if peer_type & 0x02 else '!H', asn)
    return data


def create_peer_index_table(collector: str, view: bytes, peers: list[bytes]) -> bytes:
    data = socket.inet_aton(collector) + struct.pack('!H', len(view)) + view
    data += struct.pack('!H', len(peers))
    return data + b''.join(peers)


class TestPeerEntry:
    def test_ipv4_as2(self) -> None:
        entry = PeerEntry.unpack_entry(0, Cursor(create_peer(0x00, '10.0.0.1', '192.0.2.1', 65000)))
        assert entry.peer_type == 0
        assert not entry.ipv6
        assert not entry.asn4
        assert str(entry.peer_id) == '10.0.0.1'
        assert entry.peer_address.afi == AFI.IPv4
        assert str(entry.peer_address) == '192.0.2.1'
        assert entry.peer_as == 65000

    def test_ipv6_as4(self) -> None:
        entry = PeerEntry.unpack_entry(3, Cursor(create_peer(0x03, '10.0.0.2', '2001:db8::1', 4200000000)))
        assert entry.index == 3
        assert entry.ipv6
        assert entry.asn4
        assert entry.peer_address.afi == AFI.IPv6
        assert str(entry.peer_address) == '2001:db8::1'
        assert entry.peer_as == 4200000000

    def test_ipv6_as2(self) -> None:
        cursor = Cursor(create_peer(0x01, '10.0.0.4', '2001:db8::4', 64512))
        entry = PeerEntry.unpack_entry(1, cursor)
        assert entry.ipv6
        assert not entry.asn4
        assert entry.peer_address.afi == AFI.IPv6
        assert str(entry.peer_address) == '2001:db8::4'
        assert entry.peer_as == 64512
        assert cursor.exhausted()

    def test_ipv4_as4(self) -> None:
        entry = PeerEntry.unpack_entry(0, Cursor(create_peer(0x02, '10.0.0.3', '198.51.100.7', 131072)))
        assert str(entry.peer_address) == '198.51.100.7'
        assert entry.peer_as == 131072

    def test_ipv4_address_is_four_bytes(self) -> None:
        cursor = Cursor(create_peer(0x00, '10.0.0.1', '192.0.2.1', 65000) + b'\xff')
        PeerEntry.unpack_entry(0, cursor)
        assert cursor.remaining == 1

    def test_truncated_address(self) -> None:
        data = create_peer(0x01, '10.0.0.1', '2001:db8::1', 65000)[:12]
        with pytest.raises(TruncatedInput):
            PeerEntry.unpack_entry(0, Cursor(data))


class TestPeerIndexTable:
    def test_decode(self) -> None:
        data = create_peer_index_table(
            '192.0.2.254',
            b'rrc00',
            [
                create_peer(0x00, '10.0.0.1', '192.0.2.1', 65001),
                create_peer(0x03, '10.0.0.2', '2001:db8::2', 4200000002),
            ],
        )
        table = TableDumpV2.unpack(SUBTYPE.PEER_INDEX_TABLE, data)
        assert isinstance(table, PeerIndexTable)
        assert str(table.collector_id) == '192.0.2.254'
        assert table.view_name == 'rrc00'
        assert len(table) == 2
        assert [peer.index for peer in table.peers] == [0, 1]
        assert table.peers[1].peer_as == 4200000002

    def test_empty(self) -> None:
        data = create_peer_index_table('0.0.0.0', b'', [])
        table = PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(data))
        assert table.view_name == ''
        assert table.peers == ()
        assert table

    def test_view_name_not_utf8(self) -> None:
        data = create_peer_index_table('192.0.2.254', b'view\xff', [])
        with patch('mrtparser.mrt.peer.log') as log:
            table = PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(data))
        assert table.view_name == 'view\ufffd'
        assert table.view_raw == b'view\xff'
        assert not table.utf8_view()
        assert json.loads(table.json())['view-raw'] == '0x76696577FF'
        log.warning.assert_called_once()

    def test_view_name_utf8(self) -> None:
        data = create_peer_index_table('192.0.2.254', 'vue \u00e9t\u00e9'.encode(), [])
        table = PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(data))
        assert table.view_name == 'vue \u00e9t\u00e9'
        assert 'view-raw' not in json.loads(table.json())

    def test_view_name_truncated(self) -> None:
        data = socket.inet_aton('192.0.2.254') + struct.pack('!H', 10) + b'abc'
        with pytest.raises(TruncatedInput) as exc:
            PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(data))
        assert exc.value.what == 'view name'

    def test_missing_peer(self) -> None:
        # two peers announced, one present
        data = socket.inet_aton('192.0.2.254') + struct.pack('!HH', 0, 2) + create_peer(0x00, '10.0.0.1', '192.0.2.1', 1)
        with pytest.raises(TruncatedInput):
            PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(data))

    def test_idempotent(self) -> None:
        data = create_peer_index_table('192.0.2.254', b'rrc', [create_peer(0x02, '10.0.0.1', '192.0.2.1', 70000)])
        assert TableDumpV2.unpack(SUBTYPE.PEER_INDEX_TABLE, data) == TableDumpV2.unpack(SUBTYPE.PEER_INDEX_TABLE, data)

    def test_checkpoint_called_per_peer(self) -> None:
        peers = [create_peer(0x00, '10.0.0.1', '192.0.2.1', n) for n in range(3)]
        checkpoint = Mock()
        PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(create_peer_index_table('0.0.0.0', b'', peers)), checkpoint)
        assert checkpoint.call_count == 3

    def test_checkpoint_aborts(self) -> None:
        peers = [create_peer(0x00, '10.0.0.1', '192.0.2.1', 1)]
        checkpoint = Mock(side_effect=DecodeCancelled('stop'))
        with pytest.raises(DecodeCancelled):
            PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(create_peer_index_table('0.0.0.0', b'', peers)), checkpoint)

    def test_peer_lookup(self) -> None:
        data = create_peer_index_table('192.0.2.254', b'', [create_peer(0x00, '10.0.0.1', '192.0.2.1', 65001)])
        table = PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(data))
        assert table.peer(0).peer_as == 65001
        with pytest.raises(IndexError):
            table.peer(1)
        with pytest.raises(IndexError):
            table.peer(-1)

    def test_json(self) -> None:
        data = create_peer_index_table('192.0.2.254', b'rrc "00"', [create_peer(0x01, '10.0.0.1', '2001:db8::1', 65001)])
        table = PeerIndexTable.unpack_table(SUBTYPE.PEER_INDEX_TABLE, Cursor(data))
        decoded = json.loads(table.json())
        assert decoded['collector-bgp-id'] == '192.0.2.254'
        assert decoded['view-name'] == 'rrc "00"'
        assert decoded['peers'][0]['address'] == '2001:db8::1'
        assert decoded['peers'][0]['as'] == 65001


class TestAddress:
    def test_zero_padding(self) -> None:
        address = Address.ipv4(socket.inet_aton('192.0.2.1'))
        assert address.buffer == socket.inet_aton('192.0.2.1') + bytes(12)
        assert address.packed == socket.inet_aton('192.0.2.1')

    def test_too_long(self) -> None:
        with pytest.raises(ValueError):
            Address.ipv4(bytes(5))

    def test_family_in_equality(self) -> None:
        assert Address.ipv4(bytes(4)) != Address.ipv6(bytes(4))
