import pytest

from pescope.buffer import INVALID_ADDR, AddrType, ByteBuffer
from pescope.errors import ExeError
from pescope.sections import (
    HEADER_SIZE,
    ImageLayout,
    SectionFlag,
    SectionHeader,
    SectionTable,
    access_rights_desc,
    split_characteristics,
    translate_characteristic,
)

FILE_ALIGN = 0x200
SEC_ALIGN = 0x1000
IMAGE_SIZE = 0x3000
HDR_OFFSET = 0x10


def _build(headers, file_size, count=None):
    data = bytearray(file_size)
    for i, hdr in enumerate(headers):
        start = HDR_OFFSET + i * HEADER_SIZE
        data[start:start + HEADER_SIZE] = hdr.to_bytes()
    layout = ImageLayout(FILE_ALIGN, SEC_ALIGN, IMAGE_SIZE)
    return SectionTable(layout, ByteBuffer(bytes(data)), HDR_OFFSET,
                        len(headers) if count is None else count)


@pytest.fixture
def table():
    text = SectionHeader(b".text", 0x100, 0x1000, 0x200, 0x200,
                         characteristics=0x60000020)
    data = SectionHeader(b".data", 0x80, 0x2000, 0x200, 0x400,
                         characteristics=0xC0000040)
    return _build([text, data], 0x600)


def test_access_rights():
    assert access_rights_desc(0x60000020) == "r-x"
    assert access_rights_desc(0) == "---"


def test_split_and_translate():
    flags = split_characteristics(0xC0000040)
    assert flags == [SectionFlag.CNT_INITIALIZED_DATA, SectionFlag.MEM_READ,
                     SectionFlag.MEM_WRITE]
    assert translate_characteristic(SectionFlag.MEM_WRITE) == "writeable"
    assert translate_characteristic(0x3) == ""


def test_header_too_short():
    with pytest.raises(ExeError):
        SectionHeader.from_bytes(b"\0" * 10)


def test_empty_name_is_numbered():
    hdr = SectionHeader(b"", index=1)
    assert hdr.mapped_name == "#1"
    assert hdr.decoded_name == ""


def test_table_loading(table):
    assert len(table) == 2
    assert [h.decoded_name for h in table] == [".text", ".data"]
    assert table.field_name(1) == ".data"
    assert table.mapped_name(0) == ".text"
    assert table.size() == 2 * HEADER_SIZE
    with pytest.raises(IndexError):
        table.field_name(5)


def test_truncated_table_stops():
    hdr = SectionHeader(b"a", 0x10, 0x1000, 0x10, 0x0)
    t = _build([hdr], HDR_OFFSET + HEADER_SIZE + 4, count=3)
    assert len(t) == 1


def test_mapped_sizes(table):
    assert table.mapped_raw_size(0) == FILE_ALIGN
    assert table.mapped_virtual_size(0) == SEC_ALIGN
    assert table.content_size(0, AddrType.RVA, False) == 0x100
    assert table.content_size(0, AddrType.RAW, True) == table.mapped_raw_size(0)


def test_raw_offset_rounded_down():
    hdr = SectionHeader(b"x", 0x100, 0x1000, 0x100, 0x210)
    t = _build([hdr], 0x600)
    assert t.content_offset(0, AddrType.RAW, False) == 0x210
    assert t.content_offset(0, AddrType.RAW, True) == FILE_ALIGN


def test_raw_offset_beyond_file_invalid():
    hdr = SectionHeader(b"x", 0x100, 0x1000, 0x100, 0x800)
    t = _build([hdr], 0x600)
    assert t.content_offset(0, AddrType.RAW) == INVALID_ADDR
    assert t.mapped_raw_size(0) == 0
    assert t.content_end_offset(0, AddrType.RAW, True) == INVALID_ADDR


def test_raw_size_trimmed_to_file():
    hdr = SectionHeader(b"x", 0, 0x1000, 0x400, 0x400)
    t = _build([hdr], 0x500)
    assert t.mapped_raw_size(0) == len(t.buffer) - hdr.pointer_to_raw_data


def test_section_at_offset_virtual(table):
    assert table.section_at_offset(0x1050, AddrType.RVA).index == 0
    assert table.section_at_offset(0x1500, AddrType.RVA) is None
    assert table.section_at_offset(0x1500, AddrType.RVA, recalculate=True).index == 0
    assert table.section_at_offset(0x2010, AddrType.VA).index == 1


def test_section_at_offset_raw(table):
    assert table.section_at_offset(0x250, AddrType.RAW).index == 0
    assert table.section_at_offset(0x450, AddrType.RAW).index == 1
    assert table.section_at_offset(0x10, AddrType.RAW) is None
    assert table.section_at_offset(0x10, AddrType.NOT_ADDR) is None


def test_mapping_lines(table):
    lines = table.mapping_lines(AddrType.RAW)
    assert len(lines) == 2
    assert ".text" in lines[0] and ".data" in lines[1]
    assert table.mapping_lines(AddrType.NOT_ADDR) == []


def test_reload_mapping_is_stable(table):
    before = table.mapping_lines(AddrType.RVA)
    table.reload_mapping()
    assert table.mapping_lines(AddrType.RVA) == before