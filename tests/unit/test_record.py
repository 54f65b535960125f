"""test_record.py

Unit tests for the MRT common header and record dispatch.
"""

import json
import struct
from datetime import datetime, timezone

import pytest

from mrtparser.mrt.error import TruncatedInput
from mrtparser.mrt.peer import PeerIndexTable
from mrtparser.mrt.record import TYPE, MRTHeader, MRTRecord
from mrtparser.mrt.tabledump import SUBTYPE, Unsupported

EMPTY_PEER_INDEX_TABLE = bytes(4) + struct.pack('!HH', 0, 0)


class TestMRTHeader:
    def test_unpack(self) -> None:
        header = MRTHeader.unpack_header(struct.pack('!LHHL', 1700000000, 13, 1, 8))
        assert header.timestamp == 1700000000
        assert header.type == 13
        assert header.subtype == 1
        assert header.length == 8
        assert MRTHeader.SIZE == 12

    def test_str(self) -> None:
        header = MRTHeader(0, 13, 4, 100)
        assert 'table-dump-v2' in str(header)
        assert 'length 100' in str(header)


class TestType:
    def test_names(self) -> None:
        assert TYPE.name(13) == 'table-dump-v2'
        assert TYPE.name(16) == 'bgp4mp'
        assert TYPE.name(1) == 'unknown-type-1'


class TestMRTRecord:
    def test_table_dump_v2(self) -> None:
        header = MRTHeader(1700000000, TYPE.TABLE_DUMP_V2, SUBTYPE.PEER_INDEX_TABLE, len(EMPTY_PEER_INDEX_TABLE))
        record = MRTRecord.unpack_record(header, EMPTY_PEER_INDEX_TABLE)
        assert record.timestamp == datetime.fromtimestamp(1700000000, tz=timezone.utc)
        assert record.type == 13
        assert record.subtype == 1
        assert isinstance(record.body, PeerIndexTable)

    def test_other_type_is_unsupported(self) -> None:
        header = MRTHeader(0, TYPE.BGP4MP, 4, 3)
        record = MRTRecord.unpack_record(header, b'abc')
        assert isinstance(record.body, Unsupported)
        assert record.body.type == TYPE.BGP4MP
        assert record.body.raw == b'abc'

    def test_other_type_is_never_parsed(self) -> None:
        # same subtype number as a peer index table, garbage body
        record = MRTRecord.unpack_record(MRTHeader(0, TYPE.TABLE_DUMP, 1, 1), b'\x00')
        assert isinstance(record.body, Unsupported)

    def test_body_error_reports_record_offset(self) -> None:
        header = MRTHeader(0, TYPE.TABLE_DUMP_V2, SUBTYPE.PEER_INDEX_TABLE, 2)
        with pytest.raises(TruncatedInput) as exc:
            MRTRecord.unpack_record(header, b'\x00\x00', base=512)
        assert exc.value.offset == 512

    def test_json(self) -> None:
        header = MRTHeader(1700000000, TYPE.TABLE_DUMP_V2, SUBTYPE.PEER_INDEX_TABLE, len(EMPTY_PEER_INDEX_TABLE))
        decoded = json.loads(MRTRecord.unpack_record(header, EMPTY_PEER_INDEX_TABLE).json())
        assert decoded['timestamp'] == 1700000000
        assert decoded['type-name'] == 'table-dump-v2'
        assert decoded['subtype-name'] == 'peer-index-table'
        assert decoded['body']['peers'] == []

    def test_equality(self) -> None:
        header = MRTHeader(1, TYPE.BGP4MP, 1, 1)
        assert MRTRecord.unpack_record(header, b'\x01') == MRTRecord.unpack_record(header, b'\x01')
        assert MRTRecord.unpack_record(header, b'\x01') != MRTRecord.unpack_record(header, b'\x02')
