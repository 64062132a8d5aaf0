"""
siebns: repair tooling for Siebel Gateway Name Server backing files.

The header of a name server file (siebns.dat) records the file's total size as
a base64-encoded 64-bit integer on its fourth line. Editing the file by hand
leaves that value stale and the gateway refuses to load it. This package:

- Parses the fixed header (signature, two version lines, checksum line),
  detecting a UTF-8 BOM and DOS line endings.
- Decodes the stored size, guessing its byte order from its magnitude.
- Rewrites the 12 encoded bytes in place with the real size, leaving every
  other byte of the file untouched.

Nothing else in the file is validated or repaired.
"""

__version__ = "2.0.0"

__all__ = [
    "constants",
    "errors",
    "size",
    "header",
    "handle",
    "nsfile",
]

# Programmatic use goes through siebns.nsfile.open_nsfile / NSFile; the CLI
# lives in siebns.cli.
