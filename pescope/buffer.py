"""Byte buffers with bounds-checked access and address-type enums."""

from enum import IntEnum

from .errors import BufferAccessError

INVALID_ADDR = (1 << 64) - 1
_NUM_SIZES = (1, 2, 4, 8)


class AddrType(IntEnum):
    """Kinds of address inside an executable."""

    NOT_ADDR = 0
    RAW = 1
    RVA = 2
    VA = 3


class ExeBits(IntEnum):
    """Bitness of an executable."""

    UNKNOWN = 0
    BITS_16 = 16
    BITS_32 = 32
    BITS_64 = 64


class ByteBuffer:
    """A resizable, bounds-checked byte buffer."""

    def __init__(self, content=b""):
        if isinstance(content, int):
            content = bytes(content)
        self._data = bytearray(content)
        self._original_size = len(self._data)

    def __len__(self):
        return len(self._data)

    @property
    def content(self):
        """The whole buffer as bytes."""
        return bytes(self._data)

    @property
    def is_resized(self):
        return len(self._data) != self._original_size

    def resize(self, new_size):
        """Grow with zeros or truncate to ``new_size`` bytes."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        if new_size < len(self._data):
            del self._data[new_size:]
        else:
            self._data.extend(bytes(new_size - len(self._data)))

    def contains_block(self, offset, size):
        """True if ``size`` bytes starting at ``offset`` lie within the buffer."""
        if offset < 0 or size <= 0 or offset == INVALID_ADDR:
            return False
        return offset + size <= len(self._data)

    def max_size_from_offset(self, offset):
        """Bytes available from ``offset`` to the end of the buffer."""
        if offset < 0 or offset >= len(self._data):
            return 0
        return len(self._data) - offset

    def content_at(self, offset, size, strict=False):
        """Return ``size`` bytes at ``offset``, or None (or raise if ``strict``)."""
        if not self.contains_block(offset, size):
            if strict:
                raise BufferAccessError(f"Block {offset:#x}+{size:#x} is outside the buffer")
            return None
        return bytes(self._data[offset:offset + size])

    def num_value(self, offset, size):
        """Read a little-endian unsigned integer of 1, 2, 4 or 8 bytes."""
        if size not in _NUM_SIZES:
            raise ValueError(f"unsupported value size: {size}")
        data = self.content_at(offset, size, strict=True)
        return int.from_bytes(data, "little")

    def set_num_value(self, offset, size, value):
        """Write ``value`` as a little-endian integer, truncated to ``size`` bytes."""
        if size not in _NUM_SIZES:
            raise ValueError(f"unsupported value size: {size}")
        if not self.contains_block(offset, size):
            raise BufferAccessError(f"Block {offset:#x}+{size:#x} is outside the buffer")
        masked = value & ((1 << (8 * size)) - 1)
        self._data[offset:offset + size] = masked.to_bytes(size, "little")

    def is_area_empty(self, offset, size):
        """True if the block lies inside the buffer and holds only zero bytes."""
        data = self.content_at(offset, size)
        if data is None:
            return False
        return not any(data)


class BufferView:
    """A window onto part of another buffer, clipped to its end."""

    def __init__(self, parent, offset, size):
        self.parent = parent
        self.offset = offset
        self.requested_size = size

    def __len__(self):
        return min(self.requested_size, self.parent.max_size_from_offset(self.offset))

    def content(self):
        """The bytes visible through the view."""
        size = len(self)
        if size == 0:
            return b""
        return self.parent.content_at(self.offset, size)