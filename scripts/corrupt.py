from __future__ import annotations

import argparse
import os
import sys
from typing import Optional

from siebns.errors import SiebnsError
from siebns.handle import DiskHandle
from siebns.nsfile import NSFile


def _checksum_offset(path: str) -> int:
    with NSFile(DiskHandle(path)) as ns:
        return ns.header.checksum_offset


def cmd_drift(args: argparse.Namespace) -> None:
    """Append bytes to the body so the stored size no longer matches."""
    if args.count <= 0:
        raise ValueError("--count must be positive")
    with open(args.path, "ab") as f:
        f.write(b"#" * (args.count - 1) + b"\n")
        f.flush()
        os.fsync(f.fileno())
    print(f"Appended {args.count} byte(s); file is now {os.path.getsize(args.path)} bytes")


def cmd_damage(args: argparse.Namespace) -> None:
    """Delete characters from the checksum line, as a careless edit would."""
    off = _checksum_offset(args.path)
    with open(args.path, "r+b") as f:
        data = f.read()
        end = data.index(b"\n", off)
        line = data[off:end]
        if args.delete <= 0 or args.delete >= len(line):
            raise ValueError(f"--delete must be within checksum line length (1..{len(line) - 1})")
        f.seek(0)
        f.write(data[:off] + line[args.delete :] + data[end:])
        f.truncate()
        f.flush()
        os.fsync(f.fileno())
    print(f"Deleted {args.delete} byte(s) from the checksum line at offset {off}")


def cmd_flip(args: argparse.Namespace) -> None:
    """Replace one checksum character so it no longer decodes."""
    off = _checksum_offset(args.path) + args.within
    with open(args.path, "r+b") as f:
        f.seek(off)
        if not f.read(1):
            raise ValueError("Offset beyond end of file")
        f.seek(off)
        f.write(b"!")
        f.flush()
        os.fsync(f.fileno())
    print(f"Replaced checksum byte at offset {off}")


def main(argv: Optional[list[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="siebns.corrupt", description="Damage name server files for testing")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_drift = sub.add_parser("drift", help="Append bytes so the stored size is stale")
    p_drift.add_argument("path", help="Path to siebns.dat")
    p_drift.add_argument("--count", type=int, default=16, help="Number of bytes to append (default 16)")
    p_drift.set_defaults(func=cmd_drift)

    p_damage = sub.add_parser("damage", help="Shorten the checksum line (unrecoverable without manual edit)")
    p_damage.add_argument("path", help="Path to siebns.dat")
    p_damage.add_argument("--delete", type=int, default=9, help="Characters to delete from the line (default 9)")
    p_damage.set_defaults(func=cmd_damage)

    p_flip = sub.add_parser("flip", help="Make the checksum undecodable without changing its length")
    p_flip.add_argument("path", help="Path to siebns.dat")
    p_flip.add_argument("--within", type=int, default=0, help="Position within the checksum (default 0)")
    p_flip.set_defaults(func=cmd_flip)

    args = ap.parse_args(argv)
    try:
        args.func(args)
    except (SiebnsError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
