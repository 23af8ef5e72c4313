import struct

import pytest

from pescope.buffer import INVALID_ADDR, AddrType, ByteBuffer, ExeBits
from pescope.errors import ExeError
from pescope.tls import TlsDirectory, TlsField

BASE = 0x400000


def _tls32(start, end, index, callbacks, zero_fill, charact):
    return struct.pack("<IIIIII", start, end, index, callbacks, zero_fill, charact)


def _tls64(start, end, index, callbacks, zero_fill, charact):
    return struct.pack("<QQQQII", start, end, index, callbacks, zero_fill, charact)


def _to_raw(va):
    return va - BASE


def test_parse_32_bit_fields():
    record = _tls32(BASE + 0x100, BASE + 0x200, BASE + 0x300, BASE + 0x40, 7, 0x300000)
    d = TlsDirectory.parse(ByteBuffer(record), 0, ExeBits.BITS_32)
    assert d.start_address == BASE + 0x100
    assert d.end_address == BASE + 0x200
    assert d.index_address == BASE + 0x300
    assert d.callbacks_address == BASE + 0x40
    assert d.size_of_zero_fill == 7
    assert d.characteristics == 0x300000
    assert d.size() == len(record)


def test_parse_64_bit_fields():
    big = 0x140000000
    record = _tls64(big + 1, big + 2, big + 3, big + 4, 5, 6)
    d = TlsDirectory.parse(ByteBuffer(b"\0" * 8 + record), 8, ExeBits.BITS_64)
    assert d.callbacks_address == big + 4
    assert d.start_address == big + 1
    assert d.size() == len(record)
    assert d.address_size == 8


def test_unsupported_bits_raise():
    with pytest.raises(ExeError):
        TlsDirectory.parse(ByteBuffer(b"\0" * 64), 0, ExeBits.BITS_16)


def test_short_buffer_raises():
    with pytest.raises(ExeError):
        TlsDirectory.parse(ByteBuffer(b"\0" * 10), 0, ExeBits.BITS_32)


def test_callbacks_32_bit_until_zero():
    callback_vas = [BASE + 0x1000, BASE + 0x1010, BASE + 0x1020]
    record = _tls32(0, 0, 0, BASE + 0x40, 0, 0)
    table = b"".join(struct.pack("<I", va) for va in callback_vas) + b"\0" * 4
    content = record.ljust(0x40, b"\0") + table + struct.pack("<I", BASE + 0x9999)
    buf = ByteBuffer(content)
    d = TlsDirectory.parse(buf, 0, ExeBits.BITS_32)
    assert d.callbacks(buf, _to_raw) == callback_vas


def test_callbacks_64_bit():
    base64 = 0x140000000
    callback_vas = [base64 + 0x2000, base64 + 0x3000]
    record = _tls64(0, 0, 0, base64 + 0x40, 0, 0)
    table = b"".join(struct.pack("<Q", va) for va in callback_vas) + b"\0" * 8
    buf = ByteBuffer(record.ljust(0x40, b"\0") + table)
    d = TlsDirectory.parse(buf, 0, ExeBits.BITS_64)
    assert d.callbacks(buf, lambda va: va - base64) == callback_vas


def test_callbacks_stop_at_end_of_buffer():
    callback_vas = [BASE + 0x1000, BASE + 0x2000]
    record = _tls32(0, 0, 0, BASE + 0x40, 0, 0)
    table = b"".join(struct.pack("<I", va) for va in callback_vas)
    buf = ByteBuffer(record.ljust(0x40, b"\0") + table)
    d = TlsDirectory.parse(buf, 0, ExeBits.BITS_32)
    assert d.callbacks(buf, _to_raw) == callback_vas


def test_callbacks_unmapped_address_gives_empty_list():
    record = _tls32(0, 0, 0, BASE + 0x40, 0, 0)
    buf = ByteBuffer(record + struct.pack("<I", BASE + 0x1000))
    d = TlsDirectory.parse(buf, 0, ExeBits.BITS_32)
    assert d.callbacks(buf, lambda va: INVALID_ADDR) == []
    assert d.callbacks(buf, lambda va: None) == []


def test_field_names():
    d = TlsDirectory.parse(ByteBuffer(_tls32(0, 0, 0, 0, 0, 0)), 0, ExeBits.BITS_32)
    assert d.field_name(TlsField.START_ADDR) == "StartAddressOfRawData"
    assert d.field_name(TlsField.END_ADDR) == "EndAddressOfRawData"
    assert d.field_name(TlsField.INDEX_ADDR) == "AddressOfIndex"
    assert d.field_name(TlsField.CALLBACKS_ADDR) == "AddressOfCallBacks"
    assert d.field_name(TlsField.ZEROF_SIZE) == "SizeOfZeroFill"
    assert d.field_name(TlsField.CHARACT) == "Characteristics"
    assert d.field_name(99) == "TLS"


def test_field_addr_types():
    d = TlsDirectory.parse(ByteBuffer(_tls32(0, 0, 0, 0, 0, 0)), 0, ExeBits.BITS_32)
    for field in (TlsField.START_ADDR, TlsField.END_ADDR, TlsField.INDEX_ADDR, TlsField.CALLBACKS_ADDR):
        assert d.field_addr_type(field) == AddrType.VA
    assert d.field_addr_type(TlsField.ZEROF_SIZE) == AddrType.NOT_ADDR
    assert d.field_addr_type(TlsField.CHARACT) == AddrType.NOT_ADDR