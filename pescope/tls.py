"""The TLS data directory of a PE image and its callback list."""

import struct
from dataclasses import dataclass
from enum import IntEnum

from .buffer import INVALID_ADDR, AddrType, ExeBits
from .errors import ExeError

_TLS32 = struct.Struct("<IIIIII")
_TLS64 = struct.Struct("<QQQQII")

DIRECTORY_NAME = "TLS"


class TlsField(IntEnum):
    """Fields of an IMAGE_TLS_DIRECTORY record."""

    NONE = -1
    START_ADDR = 0
    END_ADDR = 1
    INDEX_ADDR = 2
    CALLBACKS_ADDR = 3
    ZEROF_SIZE = 4
    CHARACT = 5


_FIELD_NAMES = {
    TlsField.START_ADDR: "StartAddressOfRawData",
    TlsField.END_ADDR: "EndAddressOfRawData",
    TlsField.INDEX_ADDR: "AddressOfIndex",
    TlsField.CALLBACKS_ADDR: "AddressOfCallBacks",
    TlsField.ZEROF_SIZE: "SizeOfZeroFill",
    TlsField.CHARACT: "Characteristics",
}

_VA_FIELDS = frozenset(
    {TlsField.START_ADDR, TlsField.END_ADDR, TlsField.INDEX_ADDR, TlsField.CALLBACKS_ADDR}
)


def _layout(bits):
    if bits == ExeBits.BITS_32:
        return _TLS32
    if bits == ExeBits.BITS_64:
        return _TLS64
    raise ExeError(f"Unsupported bit mode for a TLS directory: {int(bits)}")


@dataclass(frozen=True)
class TlsDirectory:
    """An IMAGE_TLS_DIRECTORY32 or IMAGE_TLS_DIRECTORY64 record."""

    bits: ExeBits
    start_address: int
    end_address: int
    index_address: int
    callbacks_address: int
    size_of_zero_fill: int
    characteristics: int

    @classmethod
    def parse(cls, buffer, offset, bits):
        """Read the directory at raw ``offset`` for a 32- or 64-bit image."""
        layout = _layout(bits)
        if offset == INVALID_ADDR:
            raise ExeError("Invalid TLS directory offset")
        data = buffer.content_at(offset, layout.size)
        if data is None:
            raise ExeError(f"Cannot read the TLS directory at {offset:#x}")
        return cls(ExeBits(bits), *layout.unpack(data))

    def size(self):
        """Size in bytes of the on-disk record."""
        return _layout(self.bits).size

    @property
    def address_size(self):
        """Size in bytes of one callback address."""
        return 4 if self.bits == ExeBits.BITS_32 else 8

    def field_name(self, field):
        """Display name of ``field``; unknown fields give the directory name."""
        try:
            return _FIELD_NAMES[TlsField(field)]
        except (ValueError, KeyError):
            return DIRECTORY_NAME

    def field_addr_type(self, field):
        """The kind of address ``field`` holds."""
        return AddrType.VA if field in _VA_FIELDS else AddrType.NOT_ADDR

    def callbacks(self, buffer, va_to_raw):
        """Return the callback VAs, read until a zero or unreadable entry.

        ``va_to_raw`` converts a VA to a raw offset, giving None or
        INVALID_ADDR when the VA does not map into the file.
        """
        first_raw = va_to_raw(self.callbacks_address)
        if first_raw is None or first_raw == INVALID_ADDR:
            return []
        size = self.address_size
        found = []
        entry_raw = first_raw
        while True:
            data = buffer.content_at(entry_raw, size)
            if data is None:
                break
            value = int.from_bytes(data, "little")
            if value == 0:
                break
            found.append(value)
            entry_raw += size
        return found