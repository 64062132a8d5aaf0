from __future__ import annotations

from typing import Optional

from .constants import HEADER_SIZE
from .errors import NotRecognizedFormatError, SiebnsError
from .handle import DiskHandle, Handle
from .header import NSHeader, read_header


class NSFile:
    """Name server backing file opened for checksum repair.

    The handle is supplied by the caller and owned by the NSFile from then on:
    ``close()`` closes it, and so does a failed ``open()``.
    """

    def __init__(self, handle: Handle):
        self.handle: Optional[Handle] = handle
        self.header: Optional[NSHeader] = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def open(self):
        if self.header is not None:
            return
        handle = self._handle()
        try:
            if handle.size() < HEADER_SIZE:
                raise NotRecognizedFormatError()
            self.header = read_header(handle)
        except (SiebnsError, OSError, ValueError) as exc:
            self.close()
            raise exc

    def close(self):
        if self.handle is not None:
            self.handle.close()
            self.handle = None

    def _handle(self) -> Handle:
        if self.handle is None:
            raise ValueError("NSFile is closed")
        return self.handle

    def _header(self) -> NSHeader:
        if self.header is None:
            raise ValueError("NSFile header not loaded; call open() first")
        return self.header

    @property
    def name(self) -> str:
        return self._handle().name

    def size(self) -> int:
        return self._handle().size()

    def read_stored_size(self) -> int:
        return self._header().read_encoded_size(self._handle())

    def is_header_correct(self) -> bool:
        """True when the size stored in the header matches the file size."""
        try:
            return self.read_stored_size() == self.size()
        except (SiebnsError, OSError, ValueError):
            return False

    def fix_size(self) -> int:
        """Write the real file size into the header; returns bytes written.

        Always rewrites, whether or not the header was already correct.
        """
        return self._header().write_encoded_size(self._handle(), self.size())


def open_nsfile(path: str) -> NSFile:
    ns = NSFile(DiskHandle(path))
    ns.open()
    return ns
