from __future__ import annotations

import unittest

from siebns.errors import (
    CorruptChecksumError,
    DecodeError,
    NotRecognizedFormatError,
    TruncatedHeaderError,
)
from siebns.handle import BufferHandle
from siebns.header import NSHeader, has_bom, has_dos_line_endings, read_header
from siebns.linereader import LineReader
from siebns.size import ByteOrder


SAMPLE = (
    b"Siebel Name Server Backing File\n"
    b"16.0.0.0 [23057] ENU\n"
    b"1.2\n"
    b"DAMAAAAAAAA=             \n"
    b"\n"
    b"[/]\n"
    b"\tPersistence=partial\n"
    b"\tType=empty\n"
)
SAMPLE_CORRUPT = (
    b"Siebel Name Server Backing File\n16.0.0.0 [23057] ENU\n1.2\nDA=     \n\n[/]\n\tPersistence=partial\n\tType=empty"
)
BOM = b"\xef\xbb\xbf"


def _dos(data: bytes) -> bytes:
    return data.replace(b"\n", b"\r\n")


class LineHelperTests(unittest.TestCase):
    def test_has_bom(self):
        self.assertEqual(has_bom(BOM + b"Siebel"), (True, 3))
        self.assertEqual(has_bom(b"Siebel no BOM"), (False, 0))
        self.assertEqual(has_bom(b"\xef\xbb"), (False, 0))
        self.assertEqual(has_bom(b""), (False, 0))
        self.assertEqual(has_bom(None), (False, 0))

    def test_has_dos_line_endings(self):
        self.assertTrue(has_dos_line_endings(b"C:\\>command.com\r\n"))
        self.assertFalse(has_dos_line_endings(b"/bin/bash\n"))
        self.assertFalse(has_dos_line_endings(b"/bin/bash"))
        self.assertFalse(has_dos_line_endings(b""))
        self.assertFalse(has_dos_line_endings(None))

    def test_line_reader_position(self):
        rd = LineReader(BufferHandle(b"ab\r\ncd\nef"))
        self.assertEqual(rd.readline(), b"ab\r\n")
        self.assertEqual(rd.position, 4)
        self.assertEqual(rd.readstring(), "cd")
        self.assertEqual(rd.position, 7)
        with self.assertRaises(TruncatedHeaderError):
            rd.readline()
        self.assertEqual(rd.position, 7)


class ReadHeaderTests(unittest.TestCase):
    def test_sample(self):
        hdr = read_header(BufferHandle(SAMPLE))
        self.assertEqual(
            hdr,
            NSHeader(
                byte_order=ByteOrder.LITTLE,
                has_unicode_bom=False,
                uses_dos_line_endings=False,
                checksum_offset=57,
                siebel_version="16.0.0.0 [23057] ENU",
                nsfile_version="1.2",
            ),
        )

    def test_rewinds_before_parsing(self):
        handle = BufferHandle(SAMPLE)
        handle.read_at(40, 10)
        self.assertEqual(read_header(handle).checksum_offset, 57)

    def test_dos_line_endings(self):
        hdr = read_header(BufferHandle(_dos(SAMPLE)))
        self.assertTrue(hdr.uses_dos_line_endings)
        self.assertFalse(hdr.has_unicode_bom)
        self.assertEqual(hdr.checksum_offset, 60)
        self.assertEqual(hdr.siebel_version, "16.0.0.0 [23057] ENU")
        self.assertEqual(hdr.nsfile_version, "1.2")

    def test_unicode_bom(self):
        hdr = read_header(BufferHandle(BOM + SAMPLE))
        self.assertTrue(hdr.has_unicode_bom)
        self.assertFalse(hdr.uses_dos_line_endings)
        self.assertEqual(hdr.checksum_offset, 60)

        hdr = read_header(BufferHandle(BOM + _dos(SAMPLE)))
        self.assertTrue(hdr.has_unicode_bom)
        self.assertTrue(hdr.uses_dos_line_endings)
        self.assertEqual(hdr.checksum_offset, 63)

    def test_big_endian_checksum(self):
        data = SAMPLE.replace(b"DAMAAAAAAAA=", b"AAAAAAAAAww=")
        self.assertEqual(read_header(BufferHandle(data)).byte_order, ByteOrder.BIG)

    def test_corrupt_checksum_line(self):
        with self.assertRaises(CorruptChecksumError) as ctx:
            read_header(BufferHandle(SAMPLE_CORRUPT))
        self.assertIn("Checksum part is corrupt", str(ctx.exception))

    def test_checksum_length_follows_line_endings(self):
        # A 26-byte checksum line is wrong when the file uses CRLF.
        data = _dos(SAMPLE).replace(b"DAMAAAAAAAA=             \r\n", b"DAMAAAAAAAA=            \r\n")
        with self.assertRaises(CorruptChecksumError):
            read_header(BufferHandle(data))

    def test_undecodable_checksum(self):
        data = SAMPLE.replace(b"DAMAAAAAAAA=", b"DAMAAAA!AAA=")
        with self.assertRaises(DecodeError):
            read_header(BufferHandle(data))

    def test_not_recognized(self):
        with self.assertRaises(NotRecognizedFormatError):
            read_header(BufferHandle(SAMPLE.replace(b"Siebel Name", b"Oracle Name")))
        with self.assertRaises(NotRecognizedFormatError):
            read_header(BufferHandle(b"\n" + SAMPLE))

    def test_truncated(self):
        for cut in (10, 40, 57, 70):
            with self.subTest(cut=cut):
                with self.assertRaises(TruncatedHeaderError):
                    read_header(BufferHandle(SAMPLE[:cut]))


class EncodedSizeIOTests(unittest.TestCase):
    def test_read_encoded_size(self):
        hdr = NSHeader(byte_order=ByteOrder.LITTLE, checksum_offset=3)
        got = hdr.read_encoded_size(BufferHandle(b"\x00\x00\x00" + b"BwYFBAMCAQA="))
        self.assertEqual(got, 0x0706050403020100)
        self.assertEqual(hdr.byte_order, ByteOrder.BIG)

    def test_read_encoded_size_errors(self):
        hdr = NSHeader(checksum_offset=3)
        with self.assertRaises(DecodeError):
            hdr.read_encoded_size(BufferHandle(bytes(18)))
        with self.assertRaises(DecodeError):
            hdr.read_encoded_size(BufferHandle(b"\x00"))

    def test_write_encoded_size(self):
        handle = BufferHandle(b"xx" + b" " * 12 + b"yy")
        hdr = NSHeader(byte_order=ByteOrder.LITTLE, checksum_offset=2)
        self.assertEqual(hdr.write_encoded_size(handle, 500), 12)
        self.assertEqual(handle.getvalue(), b"xx9AEAAAAAAAA=yy")

    def test_write_uses_current_byte_order(self):
        handle = BufferHandle(b" " * 12)
        hdr = NSHeader(byte_order=ByteOrder.BIG, checksum_offset=0)
        hdr.write_encoded_size(handle, 780)
        self.assertEqual(handle.getvalue(), b"AAAAAAAAAww=")

    def test_write_on_closed_handle(self):
        handle = BufferHandle(b" " * 12)
        handle.close()
        with self.assertRaises(ValueError):
            NSHeader().write_encoded_size(handle, 500)


if __name__ == "__main__":
    unittest.main()
