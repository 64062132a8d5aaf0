class SiebnsError(Exception):
    """Base class for siebns-specific errors."""


# Header recognition
class NotRecognizedFormatError(SiebnsError):
    def __init__(self, message: str = "not a siebel gateway file"):
        super().__init__(message)


class TruncatedHeaderError(SiebnsError):
    pass


class CorruptChecksumError(SiebnsError):
    def __init__(
        self,
        message: str = (
            "Checksum part is corrupt.  Please fix it manually by\n"
            "opening the file in the editor and deleting data from line 4 (leaving the\n"
            "line 4 empty)."
        ),
    ):
        super().__init__(message)


# Size codec
class DecodeError(SiebnsError):
    pass


class ZeroSizeError(SiebnsError):
    def __init__(self, message: str = "zero file size"):
        super().__init__(message)


class ByteOrderError(SiebnsError):
    pass
