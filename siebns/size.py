from __future__ import annotations

import base64
import binascii
import enum
import struct
from typing import Tuple

from .constants import BYTE_ORDER_THRESHOLD, INT64_MAX, INT64_MIN, SIZE_BYTES
from .errors import ByteOrderError, DecodeError, ZeroSizeError


class ByteOrder(enum.Enum):
    LITTLE = "little"
    BIG = "big"

    @property
    def struct_format(self) -> str:
        return "<q" if self is ByteOrder.LITTLE else ">q"


def _check_order(byte_order) -> ByteOrder:
    if not isinstance(byte_order, ByteOrder):
        raise ByteOrderError(f"invalid byte order: {byte_order!r}")
    return byte_order


def size_from_binary(data: bytes, byte_order: ByteOrder) -> int:
    """Unpack the first 8 bytes of ``data`` as a signed 64-bit integer."""
    fmt = _check_order(byte_order).struct_format
    if data is None or len(data) < SIZE_BYTES:
        raise DecodeError(f"need {SIZE_BYTES} bytes to decode size, got {len(data or b'')}")
    (size,) = struct.unpack(fmt, bytes(data[:SIZE_BYTES]))
    return size


def size_to_binary(size: int, byte_order: ByteOrder) -> bytes:
    fmt = _check_order(byte_order).struct_format
    if size < INT64_MIN or size > INT64_MAX:
        raise ValueError(f"size {size} does not fit in 64 bits")
    return struct.pack(fmt, size)


def decode_size(data: bytes) -> Tuple[int, ByteOrder]:
    """Decode the checksum field and guess the byte order it was written in.

    Trailing padding and line terminators are ignored. The 8 decoded bytes are
    read little-endian first; a value above BYTE_ORDER_THRESHOLD is taken to
    mean the file was written big-endian and the bytes are read again that way.

    The byte order is never stored in the file, so sizes close to the threshold
    are ambiguous, and a large size written little-endian reads back as
    big-endian.
    """
    text = bytes(data).strip(b" \r\n")
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"checksum is not valid base64: {exc}") from exc
    if len(raw) < SIZE_BYTES:
        raise DecodeError(f"checksum decodes to {len(raw)} bytes, expected {SIZE_BYTES}")

    size = size_from_binary(raw, ByteOrder.LITTLE)
    if size > BYTE_ORDER_THRESHOLD:
        return size_from_binary(raw, ByteOrder.BIG), ByteOrder.BIG
    return size, ByteOrder.LITTLE


def encode_size(size: int, byte_order: ByteOrder) -> bytes:
    """Encode ``size`` as 12 base64 characters; no padding spaces are added."""
    if size == 0:
        raise ZeroSizeError()
    return base64.b64encode(size_to_binary(size, byte_order))
