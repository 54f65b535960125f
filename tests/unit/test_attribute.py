"""test_attribute.py

Unit tests for the path attribute TLV decoder.

Attribute Header Format:
- Flags (1 byte): Optional, Transitive, Partial, Extended Length
- Type Code (1 byte)
- Length (1 byte, or 2 bytes when Extended Length is set)
- Value (variable, kept opaque)
"""

import struct
from unittest.mock import patch

import pytest

from mrtparser.mrt.attribute import CODE, BGPAttribute, Flag
from mrtparser.mrt.error import TruncatedInput
from mrtparser.mrt.wire import Cursor


def create_attribute(flag: int, code: int, value: bytes) -> bytes:
    if flag & Flag.EXTENDED_LENGTH:
        return bytes([flag, code]) + struct.pack('!H', len(value)) + value
    return bytes([flag, code, len(value)]) + value


class TestFlag:
    def test_flag_names(self) -> None:
        assert str(Flag(0x40)) == 'TRANSITIVE'
        assert str(Flag(0xD0)) == 'OPTIONAL TRANSITIVE EXTENDED_LENGTH'

    def test_flag_low_bits(self) -> None:
        assert 'UNKNOWN 0x3' in str(Flag(0x83))


class TestCode:
    def test_known_names(self) -> None:
        assert CODE.name(CODE.ORIGIN) == 'origin'
        assert CODE.name(CODE.MP_REACH_NLRI) == 'mp-reach-nlri'
        assert CODE.MP_REACH_NLRI == 14
        assert str(CODE(CODE.LARGE_COMMUNITY)) == 'large-community'

    def test_unknown_name(self) -> None:
        assert CODE.name(0xFE) == 'unknown-attribute-0xfe'


class TestBGPAttribute:
    def test_log_payload_not_copied(self) -> None:
        with patch('mrtparser.mrt.attribute.lazyattribute') as lazy:
            BGPAttribute.unpack_attribute(Cursor(create_attribute(0x40, CODE.ORIGIN, b'\x02')))
        flag, code, length, data = lazy.call_args.args
        assert (flag, code, length) == (0x40, CODE.ORIGIN, 1)
        assert isinstance(data, memoryview)
        assert bytes(data) == b'\x02'

    def test_origin(self) -> None:
        attribute = BGPAttribute.unpack_attribute(Cursor(create_attribute(0x40, CODE.ORIGIN, b'\x00')))
        assert attribute.code == CODE.ORIGIN
        assert attribute.transitive
        assert not attribute.optional
        assert not attribute.partial
        assert not attribute.extended
        assert attribute.data == b'\x00'
        assert attribute.length == 1
        assert len(attribute) == 4

    def test_flag_bits(self) -> None:
        attribute = BGPAttribute(0xF0, CODE.COMMUNITY, b'')
        assert attribute.optional
        assert attribute.transitive
        assert attribute.partial
        assert attribute.extended

    def test_extended_length_is_two_bytes(self) -> None:
        value = bytes(range(256)) + bytes(44)
        data = create_attribute(0x90, CODE.AS_PATH, value)
        attribute = BGPAttribute.unpack_attribute(Cursor(data))
        assert attribute.extended
        assert attribute.length == 300
        assert attribute.data == value
        assert attribute.header_size() == 4
        assert len(attribute) == len(data)

    def test_extended_length_small_value(self) -> None:
        data = bytes([0x50, CODE.AS_PATH, 0x00, 0x02, 0xAA, 0xBB])
        attributes = BGPAttribute.unpack_attributes(data)
        assert len(attributes) == 1
        assert attributes[0].data == b'\xaa\xbb'

    def test_zero_length(self) -> None:
        attribute = BGPAttribute.unpack_attribute(Cursor(create_attribute(0x40, CODE.ATOMIC_AGGREGATE, b'')))
        assert attribute.data == b''
        assert len(attribute) == 3

    def test_sequence(self) -> None:
        data = (
            create_attribute(0x40, CODE.ORIGIN, b'\x00')
            + create_attribute(0x50, CODE.AS_PATH, b'\x02\x01\x00\x00\xfd\xe8')
            + create_attribute(0x80, CODE.MED, struct.pack('!L', 100))
        )
        attributes = BGPAttribute.unpack_attributes(data)
        assert [attribute.code for attribute in attributes] == [CODE.ORIGIN, CODE.AS_PATH, CODE.MED]
        assert sum(len(attribute) for attribute in attributes) == len(data)

    def test_empty_run(self) -> None:
        assert BGPAttribute.unpack_attributes(b'') == ()

    def test_unknown_code_is_kept(self) -> None:
        attributes = BGPAttribute.unpack_attributes(create_attribute(0xC0, 0xEE, b'\x01\x02'))
        assert attributes[0].code == 0xEE
        assert attributes[0].data == b'\x01\x02'

    def test_partial_header(self) -> None:
        with pytest.raises(TruncatedInput):
            BGPAttribute.unpack_attributes(b'\x40')

    def test_missing_extended_length_byte(self) -> None:
        with pytest.raises(TruncatedInput):
            BGPAttribute.unpack_attributes(b'\x50\x02\x00')

    def test_payload_past_end(self) -> None:
        with pytest.raises(TruncatedInput) as exc:
            BGPAttribute.unpack_attributes(bytes([0x40, 0x02, 0x05, 0x01, 0x02]), base=40)
        assert exc.value.needed == 5
        assert exc.value.available == 2
        assert exc.value.offset == 43

    def test_data_is_copied(self) -> None:
        buffer = bytearray(create_attribute(0x40, CODE.ORIGIN, b'\x01'))
        attribute = BGPAttribute.unpack_attributes(buffer)[0]
        buffer[3] = 0x02
        assert attribute.data == b'\x01'
        assert isinstance(attribute.data, bytes)

    def test_equality(self) -> None:
        assert BGPAttribute(0x40, 1, b'\x00') == BGPAttribute(0x40, 1, b'\x00')
        assert BGPAttribute(0x40, 1, b'\x00') != BGPAttribute(0x40, 1, b'\x01')
        assert hash(BGPAttribute(0x40, 1, b'\x00')) == hash(BGPAttribute(0x40, 1, b'\x00'))

    def test_json(self) -> None:
        text = BGPAttribute(0x40, CODE.ORIGIN, b'\x00').json()
        assert '"code": 1' in text
        assert '"name": "origin"' in text
        assert '"transitive": true' in text
        assert '"optional": false' in text
        assert '"data": "0x00"' in text
