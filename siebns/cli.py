from __future__ import annotations

import argparse
import shutil
import sys
from typing import List

from siebns import __version__
from siebns.constants import BACKUP_SUFFIX
from siebns.errors import SiebnsError
from siebns.handle import DiskHandle
from siebns.nsfile import NSFile


def _backup(path: str) -> str:
    """Copy ``path`` next to itself with the backup suffix, keeping metadata."""
    target = path + BACKUP_SUFFIX
    shutil.copy2(path, target)
    return target


def cmd_info(path: str) -> bool:
    """Show the parsed header of a name server file.

    Args:
        path: Path to a siebns.dat file.
    """
    with NSFile(DiskHandle(path)) as ns:
        hdr = ns.header
        print(f"File: {ns.name}")
        print(f"  Siebel version: {hdr.siebel_version}")
        print(f"  NS file version: {hdr.nsfile_version}")
        print(f"  Unicode BOM: {'yes' if hdr.has_unicode_bom else 'no'}")
        print(f"  Line endings: {'CRLF' if hdr.uses_dos_line_endings else 'LF'}")
        print(f"  Checksum offset: {hdr.checksum_offset}")
        print(f"  Stored size: {ns.read_stored_size()}")
        print(f"  Byte order: {hdr.byte_order.value}-endian")
        print(f"  Real size: {ns.size()}")
    return True


def cmd_check(path: str) -> bool:
    """Report whether the header needs correction without writing anything.

    Returns:
        True when the stored size matches the file size.
    """
    with NSFile(DiskHandle(path)) as ns:
        if ns.is_header_correct():
            print(f"file {ns.name}:  OK:  no correction needed.")
            return True
        print(f"file {ns.name}:  correction needed.")
        return False


def cmd_fix(path: str, *, backup: bool = False) -> int:
    """Fix the stored size if it does not match the file size.

    Args:
        path: Path to a siebns.dat file.
        backup: Copy the file to ``<path>.bak`` before writing.

    Returns:
        Number of header bytes rewritten (0 when no correction was needed).
    """
    with NSFile(DiskHandle(path)) as ns:
        if ns.is_header_correct():
            print(f"file {ns.name}:  OK:  no correction needed.")
            return 0
        print(f"file {ns.name}:  correction needed.")
        if backup:
            print(f"Backup written to: {_backup(path)}")
        wrote = ns.fix_size()
        print(f"file {ns.name}:  OK: updated {wrote} bytes.")
        return wrote


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="siebnsfix",
        description="Fix the encoded file size in a Siebel Gateway Name Server file after manual edits",
    )
    ap.add_argument("path", nargs="?", help="Path to siebns.dat")
    ap.add_argument("--check", action="store_true", help="Only report whether correction is needed (exit 1 if it is)")
    ap.add_argument("--backup", action="store_true", help=f"Copy the file to <path>{BACKUP_SUFFIX} before fixing")
    ap.add_argument("--info", action="store_true", help="Print the parsed header before checking")

    print(f"Siebnsfix {__version__} - fix checksum in Siebel Gateway file")
    args = ap.parse_args(argv)
    if args.path is None:
        print(f"\nUsage: {ap.prog} <siebns.dat>")
        sys.exit(1)

    try:
        if args.info:
            cmd_info(args.path)
        if args.check:
            sys.exit(0 if cmd_check(args.path) else 1)
        cmd_fix(args.path, backup=args.backup)
    except (SiebnsError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
