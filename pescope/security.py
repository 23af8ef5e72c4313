"""The security (certificate) data directory of a PE image."""

import struct
from dataclasses import dataclass
from enum import IntEnum

from .buffer import INVALID_ADDR
from .errors import ExeError

_HEADER = struct.Struct("<IHH")
HEADER_SIZE = _HEADER.size

# Bytes of the record that are counted as not belonging to the content.
_FIELDS_SIZE = 4 + 2 + 4

DIRECTORY_NAME = "Security"


class CertificateType(IntEnum):
    """Values of WIN_CERTIFICATE.wCertificateType."""

    X509 = 0x0001
    PKCS_SIGNED_DATA = 0x0002
    RESERVED_1 = 0x0003
    PKCS1_SIGN = 0x0009


class SecurityField(IntEnum):
    """Fields of a WIN_CERTIFICATE record."""

    NONE = -1
    CERT_LEN = 0
    REVISION = 1
    TYPE = 2
    CERT_CONTENT = 3


_TYPE_NAMES = {
    CertificateType.X509: "X.509 certificate",
    CertificateType.PKCS_SIGNED_DATA: "PKCS Signed Data",
    CertificateType.RESERVED_1: "Reserved",
    CertificateType.PKCS1_SIGN: "PKCS1 Module Sign Fields",
}

_FIELD_NAMES = {
    SecurityField.CERT_LEN: "Length",
    SecurityField.REVISION: "Revision",
    SecurityField.TYPE: "Type",
    SecurityField.CERT_CONTENT: "Cert. Content",
}


def translate_cert_type(cert_type):
    """Describe a certificate type; unknown values give an empty string."""
    return _TYPE_NAMES.get(cert_type, "")


@dataclass(frozen=True)
class WinCertificate:
    """A WIN_CERTIFICATE record read from a raw file offset."""

    offset: int
    length: int
    revision: int
    certificate_type: int
    content: bytes = b""
    size_ok: bool = False

    @classmethod
    def parse(cls, buffer, offset):
        """Read the record at raw ``offset``; raise ExeError if its header is missing."""
        if offset == INVALID_ADDR:
            raise ExeError("Invalid security directory offset")
        header = buffer.content_at(offset, HEADER_SIZE)
        if header is None:
            raise ExeError(f"Cannot read the certificate header at {offset:#x}")
        length, revision, cert_type = _HEADER.unpack(header)

        content = None
        cert_size = length - _FIELDS_SIZE
        if cert_size > 0:
            content = buffer.content_at(offset + HEADER_SIZE, cert_size)
        return cls(
            offset=offset,
            length=length,
            revision=revision,
            certificate_type=cert_type,
            content=content if content is not None else b"",
            size_ok=content is not None,
        )

    def size(self):
        """Size of the record: the declared length if its content is readable."""
        if self.size_ok:
            return self.length
        return HEADER_SIZE

    def field_name(self, field):
        """Display name of ``field``; unknown fields give the directory name."""
        try:
            return _FIELD_NAMES[SecurityField(field)]
        except (ValueError, KeyError):
            return DIRECTORY_NAME

    def translate_field(self, field):
        """Describe the value of ``field``; only the type field has a description."""
        if field != SecurityField.TYPE:
            return ""
        return translate_cert_type(self.certificate_type)