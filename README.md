# pescope

`pescope` reads the structures of Portable Executable (PE) files using only
the standard library. It provides:

- `pescope.buffer`: `ByteBuffer`, a bounds-checked byte buffer with
  little-endian number reads and writes (`num_value`, `set_num_value`),
  `BufferView`, a window onto part of a buffer, and the `AddrType` and
  `ExeBits` enums.
- `pescope.sections`: `SectionHeader` (decode and encode the 40-byte
  header), `SectionTable` (the header table, with the loader's rules for
  mapped raw and virtual sizes and `section_at_offset` to find the section
  that holds a raw or virtual address), `ImageLayout` (the alignments and
  image size that mapping depends on), and `access_rights_desc`,
  `split_characteristics` and `translate_characteristic` for section
  characteristics.
- `pescope.security`: `WinCertificate`, the `WIN_CERTIFICATE` record of the
  security directory, and `translate_cert_type`.
- `pescope.tls`: `TlsDirectory`, the 32- or 64-bit TLS directory, with
  `callbacks` to read its list of callback addresses.
- `pescope.ordinals`: `CommonOrdinalsLookup`, names of functions imported by
  ordinal from `ws2_32`, `wsock32` and `oleaut32`.
- `pescope.util`: small rounding and clamping helpers.
- `pescope.errors`: `ParserError` and its subclasses `BufferAccessError`
  and `ExeError`.

## Installation

```
pip install .
```

## Examples

Find the name behind an ordinal import:

```python
from pescope.ordinals import CommonOrdinalsLookup

lookup = CommonOrdinalsLookup()
lookup.find_func_name("WS2_32", 115)   # "WSAStartup"
lookup.find_func_name("kernel32", 1)   # None (no table for that library)
```

Describe a section's characteristics:

```python
from pescope.sections import access_rights_desc, split_characteristics

access_rights_desc(0x60000020)      # "r-x"
split_characteristics(0x60000020)   # the known flags that are set, ascending
```

Read numbers out of a buffer:

```python
from pescope.buffer import ByteBuffer

buf = ByteBuffer(b"MZ\x90\x00")
buf.num_value(0, 2)   # 0x5A4D
```

Map addresses to sections, given where the header table lies and how many
headers it holds:

```python
from pescope.buffer import AddrType
from pescope.sections import ImageLayout, SectionTable

layout = ImageLayout(file_alignment=0x200, section_alignment=0x1000, image_size=0x3000)
table = SectionTable(layout, buf, headers_offset, count)
section = table.section_at_offset(0x1234, AddrType.RVA)   # a SectionHeader or None
```

Reads outside a buffer return `None`, or raise `BufferAccessError` when
asked to be strict; records that cannot be read raise `ExeError`.

## What it does not do

`pescope` does not open or identify a PE file as a whole: it does not parse
the DOS, file or optional headers or the data directory table. The caller
supplies the header table's offset and section count, the alignments and
image size, raw offsets of the security and TLS directories, and a function
that turns a VA into a raw offset. There is no command-line tool, and
imports, exports, relocations and resources are not covered.

## Running the tests

```
pip install .[test]
pytest
```