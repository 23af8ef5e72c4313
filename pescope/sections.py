"""Section headers of a PE image and the mapping of addresses to sections."""

import bisect
import logging
import struct
from dataclasses import dataclass
from enum import IntFlag

from .buffer import INVALID_ADDR, AddrType
from .errors import ExeError
from .util import round_up_to_unit, units_count

_log = logging.getLogger(__name__)

SECNAME_LEN = 8
HEADER_SIZE = 40
SECT_COUNT_MAX = 0x2000

_HEADER = struct.Struct("<8sIIIIIIHHI")


class SectionFlag(IntFlag):
    """Characteristics bits of a section header."""

    CNT_CODE = 0x00000020
    CNT_INITIALIZED_DATA = 0x00000040
    CNT_UNINITIALIZED_DATA = 0x00000080
    LNK_NRELOC_OVFL = 0x01000000
    MEM_DISCARDABLE = 0x02000000
    MEM_NOT_CACHED = 0x04000000
    MEM_NOT_PAGED = 0x08000000
    MEM_SHARED = 0x10000000
    MEM_EXECUTE = 0x20000000
    MEM_READ = 0x40000000
    MEM_WRITE = 0x80000000


_CHARACTERISTIC_NAMES = {
    SectionFlag.MEM_READ: "readable",
    SectionFlag.MEM_WRITE: "writeable",
    SectionFlag.MEM_EXECUTE: "executable",
    SectionFlag.LNK_NRELOC_OVFL: "contains extended relocations",
    SectionFlag.MEM_DISCARDABLE: "discardable",
    SectionFlag.MEM_NOT_CACHED: "not cachable",
    SectionFlag.MEM_NOT_PAGED: "non-pageable",
    SectionFlag.MEM_SHARED: "shareable",
    SectionFlag.CNT_CODE: "code",
    SectionFlag.CNT_INITIALIZED_DATA: "initialized data",
    SectionFlag.CNT_UNINITIALIZED_DATA: "uninitialized data",
}


def access_rights_desc(characteristics):
    """Return an 'rwx'-style description of the section's memory rights."""
    return "".join(
        letter if characteristics & flag else "-"
        for letter, flag in (
            ("r", SectionFlag.MEM_READ),
            ("w", SectionFlag.MEM_WRITE),
            ("x", SectionFlag.MEM_EXECUTE),
        )
    )


def split_characteristics(characteristics):
    """Return the known flags set in ``characteristics``, in ascending order."""
    return [flag for flag in sorted(_CHARACTERISTIC_NAMES) if characteristics & flag]


def translate_characteristic(characteristic):
    """Describe a single flag; unknown values give an empty string."""
    return _CHARACTERISTIC_NAMES.get(characteristic, "")


@dataclass(frozen=True)
class ImageLayout:
    """Image-wide values that section mapping depends on."""

    file_alignment: int = 0
    section_alignment: int = 0
    image_size: int = 0

    def alignment(self, addr_type):
        if addr_type == AddrType.RAW:
            return self.file_alignment
        if addr_type in (AddrType.RVA, AddrType.VA):
            return self.section_alignment
        return 0


@dataclass
class SectionHeader:
    """One IMAGE_SECTION_HEADER record."""

    name: bytes = b""
    virtual_size: int = 0
    virtual_address: int = 0
    size_of_raw_data: int = 0
    pointer_to_raw_data: int = 0
    pointer_to_relocations: int = 0
    pointer_to_linenumbers: int = 0
    number_of_relocations: int = 0
    number_of_linenumbers: int = 0
    characteristics: int = 0
    index: int = 0

    @classmethod
    def from_bytes(cls, data, index=0):
        """Decode a header from at least 40 bytes."""
        if len(data) < HEADER_SIZE:
            raise ExeError(f"Section header needs {HEADER_SIZE} bytes, got {len(data)}")
        fields = _HEADER.unpack_from(bytes(data[:HEADER_SIZE]))
        return cls(*fields, index=index)

    def to_bytes(self):
        """Encode the header as its 40 on-disk bytes."""
        name = bytes(self.name[:SECNAME_LEN]).ljust(SECNAME_LEN, b"\0")
        return _HEADER.pack(
            name,
            self.virtual_size,
            self.virtual_address,
            self.size_of_raw_data,
            self.pointer_to_raw_data,
            self.pointer_to_relocations,
            self.pointer_to_linenumbers,
            self.number_of_relocations,
            self.number_of_linenumbers,
            self.characteristics,
        )

    @property
    def decoded_name(self):
        """The name as stored, up to the first NUL byte."""
        raw = bytes(self.name[:SECNAME_LEN]).split(b"\0", 1)[0]
        return raw.decode("utf-8", errors="replace")

    @property
    def mapped_name(self):
        """The name, or '#<index>' when the header holds none."""
        return self.decoded_name or f"#{self.index}"


class SectionTable:
    """The section header table of an image, with address-to-section lookup."""

    def __init__(self, layout, buffer, headers_offset, count):
        self.layout = layout
        self.buffer = buffer
        self.headers_offset = headers_offset
        self.count = count
        self._headers = []
        self._raw_map = {}
        self._virtual_map = {}
        self.wrap()

    def __len__(self):
        return len(self._headers)

    def __iter__(self):
        return iter(self._headers)

    def __getitem__(self, index):
        return self._headers[index]

    # --- loading -----------------------------------------------------------

    def wrap(self):
        """Reload all headers from the buffer and rebuild the mapping."""
        self._headers = []
        self._raw_map.clear()
        self._virtual_map.clear()
        for i in range(min(self.count, SECT_COUNT_MAX)):
            data = self.buffer.content_at(self.headers_offset + i * HEADER_SIZE, HEADER_SIZE)
            if data is None:
                _log.warning("Deleting invalid section...")
                break
            self._headers.append(SectionHeader.from_bytes(data, i))
        self.reload_mapping()
        return True

    def reload_mapping(self):
        """Rebuild the end-offset maps used by :meth:`section_at_offset`."""
        self._raw_map.clear()
        self._virtual_map.clear()
        for index in range(len(self._headers)):
            self._add_mapping(index)

    def _add_mapping(self, index):
        if self.content_size(index, AddrType.RAW, True) == 0:
            return
        end_rva = self.content_end_offset(index, AddrType.RVA, True)
        end_raw = self.content_end_offset(index, AddrType.RAW, True)
        prev = self._raw_map.get(end_raw)
        if prev is not None:
            # keep the bigger one (with the lower start address)
            if self.content_offset(prev, AddrType.RAW) < self.content_offset(index, AddrType.RAW):
                return
        prev = self._virtual_map.get(end_rva)
        if prev is not None:
            if self.content_offset(prev, AddrType.RVA) < self.content_offset(index, AddrType.RVA):
                return
        self._virtual_map[end_rva] = index
        self._raw_map[end_raw] = index

    # --- table-level -------------------------------------------------------

    def size(self):
        """Bytes of the header table that lie within the file."""
        if not self._headers:
            return 0
        file_size = len(self.buffer)
        end = self.headers_offset + len(self._headers) * HEADER_SIZE
        if end > file_size:
            return file_size - self.headers_offset
        return end - self.headers_offset

    def field_name(self, index):
        """The stored name of the section at ``index``."""
        return self._headers[index].decoded_name

    def mapped_name(self, index):
        """The display name of the section at ``index``."""
        return self._headers[index].mapped_name

    # --- offsets and sizes -------------------------------------------------

    def _declared_offset(self, index, addr_type):
        header = self._headers[index]
        if addr_type == AddrType.RAW:
            return header.pointer_to_raw_data
        if addr_type in (AddrType.RVA, AddrType.VA):
            return header.virtual_address
        return INVALID_ADDR

    def content_offset(self, index, addr_type, use_mapped=True):
        """Start of the section's content, optionally as the loader maps it."""
        offset = self._declared_offset(index, addr_type)
        if not use_mapped:
            return offset
        if addr_type == AddrType.RAW:
            align = self.layout.alignment(AddrType.RAW)
            rounded = units_count(offset, align, False) * align
            if rounded != 0:
                offset = rounded
            if offset > len(self.buffer):
                offset = INVALID_ADDR
        return offset

    def content_end_offset(self, index, addr_type, recalculate=False):
        """End of the section's mapped content, or INVALID_ADDR."""
        start = self.content_offset(index, addr_type, True)
        if start == INVALID_ADDR:
            return INVALID_ADDR
        return start + self.content_size(index, addr_type, recalculate)

    def declared_size(self, index, addr_type):
        """Size written in the header for the given address type."""
        header = self._headers[index]
        if addr_type == AddrType.RAW:
            return header.size_of_raw_data
        if addr_type in (AddrType.RVA, AddrType.VA):
            return header.virtual_size
        return 0

    def mapped_raw_size(self, index):
        """Raw size that actually gets mapped from the file."""
        sec_offset = self.content_offset(index, AddrType.RAW)
        if sec_offset == INVALID_ADDR:
            return 0
        pe_size = len(self.buffer)
        if sec_offset > pe_size:
            return 0
        raw_size = self.declared_size(index, AddrType.RAW)
        if raw_size == 0:
            return 0
        virtual_size = self.declared_size(index, AddrType.RVA) or raw_size
        if virtual_size < raw_size:
            raw_size = virtual_size
        raw_size = round_up_to_unit(raw_size, self.layout.alignment(AddrType.RAW))
        if sec_offset + raw_size > pe_size:
            trimmed = pe_size - sec_offset
            virtual_size = round_up_to_unit(virtual_size, self.layout.alignment(AddrType.RVA))
            if virtual_size and trimmed > virtual_size:
                return virtual_size
            return trimmed
        return raw_size

    def mapped_virtual_size(self, index):
        """Virtual size that the section really occupies in the image."""
        start = self.content_offset(index, AddrType.RVA)
        if start == INVALID_ADDR:
            return 0
        declared = self.declared_size(index, AddrType.RVA) or self.declared_size(index, AddrType.RAW)
        size = max(declared, self.mapped_raw_size(index))
        size = round_up_to_unit(size, self.layout.alignment(AddrType.RVA))
        sec_end = start + size
        image_size = self.layout.image_size
        if image_size < start:
            return 0
        for other in range(len(self._headers)):
            other_start = self.content_offset(other, AddrType.RVA, True)
            if other_start == INVALID_ADDR:
                continue
            if start < other_start < sec_end:
                sec_end = other_start
        if sec_end > image_size:
            return image_size - start
        return sec_end - start

    def content_size(self, index, addr_type, recalculate=False):
        """Declared size, or the really mapped size when ``recalculate``."""
        if not recalculate:
            return self.declared_size(index, addr_type)
        if addr_type == AddrType.RAW:
            return self.mapped_raw_size(index)
        if addr_type in (AddrType.RVA, AddrType.VA):
            return self.mapped_virtual_size(index)
        return 0

    # --- lookup ------------------------------------------------------------

    def _map_for(self, addr_type):
        if addr_type == AddrType.RAW:
            return self._raw_map
        if addr_type in (AddrType.RVA, AddrType.VA):
            return self._virtual_map
        return None

    def section_at_offset(self, offset, addr_type, recalculate=False):
        """Return the section containing ``offset``, or None."""
        sec_map = self._map_for(addr_type)
        if not sec_map:
            return None
        keys = sorted(sec_map)
        for key in keys[bisect.bisect_left(keys, offset):]:
            index = sec_map[key]
            start = self.content_offset(index, addr_type)
            if start == INVALID_ADDR:
                continue
            end = self.content_end_offset(index, addr_type, recalculate)
            if start <= offset < end:
                return self._headers[index]
            if offset < start:
                break
        return None

    def mapping_lines(self, addr_type):
        """Describe the end-offset map, one line per mapped section."""
        sec_map = self._map_for(addr_type)
        if sec_map is None:
            return []
        return [
            f"[{end:X}] {self._headers[index].decoded_name} "
            f"{self.content_offset(index, addr_type):X} "
            f"{self.content_end_offset(index, addr_type, True):X}"
            for end, index in sorted(sec_map.items())
        ]