from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .constants import BOM, CHECKSUM_LINE_LENGTH, CHECKSUM_SIZE, CRLF, SIGNATURE
from .errors import CorruptChecksumError, NotRecognizedFormatError
from .linereader import LineReader
from .size import ByteOrder, decode_size, encode_size


def has_bom(line: bytes) -> Tuple[bool, int]:
    """Return whether ``line`` starts with the UTF-8 BOM and the text offset."""
    if not line or len(line) < len(BOM):
        return False, 0
    if line[: len(BOM)] == BOM:
        return True, len(BOM)
    return False, 0


def has_dos_line_endings(line: bytes) -> bool:
    if not line or len(line) < len(CRLF):
        return False
    return line[-len(CRLF) :] == CRLF


@dataclass
class NSHeader:
    byte_order: ByteOrder = ByteOrder.LITTLE
    has_unicode_bom: bool = False
    uses_dos_line_endings: bool = False
    checksum_offset: int = 0
    siebel_version: str = ""
    nsfile_version: str = ""

    def verify_checksum_format(self, line: bytes) -> None:
        """Reject a checksum line whose length was changed by hand."""
        if len(line) != CHECKSUM_LINE_LENGTH[self.uses_dos_line_endings]:
            raise CorruptChecksumError()

    def read_encoded_size(self, handle) -> int:
        """Read the stored size at the checksum offset.

        The byte order guessed while decoding replaces ``byte_order``.
        """
        data = handle.read_at(self.checksum_offset, CHECKSUM_SIZE)
        size, byte_order = decode_size(data)
        self.byte_order = byte_order
        return size

    def write_encoded_size(self, handle, size: int) -> int:
        data = encode_size(size, self.byte_order)
        return handle.write_at(self.checksum_offset, data)


def read_header(handle) -> NSHeader:
    """Parse the fixed header lines of a name server file.

    The handle is rewound and read line by line: signature, two version lines
    and the checksum line. Only the signature and the checksum line are checked.
    """
    handle.seek(0)
    rd = LineReader(handle)

    sig_line = rd.readline()
    is_unicode, text_offset = has_bom(sig_line)
    if sig_line[text_offset : text_offset + len(SIGNATURE)] != SIGNATURE:
        raise NotRecognizedFormatError()

    hdr = NSHeader(
        has_unicode_bom=is_unicode,
        uses_dos_line_endings=has_dos_line_endings(sig_line),
    )
    hdr.siebel_version = rd.readstring()
    hdr.nsfile_version = rd.readstring()

    hdr.checksum_offset = rd.position
    checksum_line = rd.readline()
    hdr.verify_checksum_format(checksum_line)
    _, hdr.byte_order = decode_size(checksum_line)
    return hdr
