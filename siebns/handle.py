from __future__ import annotations

import io
import os
from typing import BinaryIO, Optional


class Handle:
    """Random-access byte store an NSFile operates through.

    Subclasses provide the underlying stream in ``self.f`` and know how to
    report the current total size.
    """

    f: Optional[BinaryIO] = None

    @property
    def name(self) -> str:
        raise NotImplementedError

    def size(self) -> int:
        raise NotImplementedError

    def _stream(self) -> BinaryIO:
        if self.f is None:
            raise ValueError(f"{self.name}: handle is closed")
        return self.f

    def seek(self, offset: int) -> int:
        return self._stream().seek(offset, io.SEEK_SET)

    def readline(self) -> bytes:
        return self._stream().readline()

    def read_at(self, offset: int, n: int) -> bytes:
        f = self._stream()
        f.seek(offset, io.SEEK_SET)
        return f.read(n)

    def write_at(self, offset: int, data: bytes) -> int:
        f = self._stream()
        f.seek(offset, io.SEEK_SET)
        n = f.write(data)
        f.flush()
        return n

    def close(self) -> None:
        if self.f is not None:
            self.f.close()
            self.f = None


class DiskHandle(Handle):
    def __init__(self, path: str):
        self.path = path
        self.f = open(path, "r+b")

    @property
    def name(self) -> str:
        return self.path

    def size(self) -> int:
        return os.fstat(self._stream().fileno()).st_size


class BufferHandle(Handle):
    """In-memory handle; handy for tests and for patching bytes already loaded."""

    def __init__(self, data: bytes = b"", name: str = "<memory>"):
        self._name = name
        self.f = io.BytesIO(data)

    @property
    def name(self) -> str:
        return self._name

    def size(self) -> int:
        return len(self._stream().getvalue())

    def getvalue(self) -> bytes:
        return self._stream().getvalue()
