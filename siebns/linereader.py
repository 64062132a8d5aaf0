from __future__ import annotations

from .constants import LF
from .errors import TruncatedHeaderError


class LineReader:
    """Reads LF-terminated lines and counts the bytes consumed so far."""

    def __init__(self, handle):
        self.handle = handle
        self.position = 0

    def readline(self) -> bytes:
        line = self.handle.readline()
        if not line.endswith(LF):
            raise TruncatedHeaderError(
                f"{self.handle.name}: header ends at byte {self.position + len(line)} before the line terminator"
            )
        self.position += len(line)
        return line

    def readstring(self) -> str:
        return self.readline().strip(b"\r\n").decode("utf-8", errors="replace")
