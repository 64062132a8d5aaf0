# Header literals
SIGNATURE = b"Siebel Name Server Backing File"
BOM = b"\xef\xbb\xbf"   # UTF-8 byte order mark
CRLF = b"\r\n"
LF = b"\n"

# A file shorter than this cannot hold the fixed header lines
HEADER_SIZE = 82

# Encoded size: 8 bytes -> 12 base64 characters
SIZE_BYTES = 8
CHECKSUM_SIZE = 12

# Checksum line length including padding spaces and terminator, keyed by
# "uses DOS line endings"
CHECKSUM_LINE_LENGTH = {
    False: 26,
    True: 27,
}

# A little-endian reading above this is re-read as big-endian; no backing
# file is expected to grow this large.
BYTE_ORDER_THRESHOLD = (2**31 - 1) << 1

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

BACKUP_SUFFIX = ".bak"
