"""ginger - command line front end for channel group (.cgr) files.

Usage:
    ginger inspect <file.cgr>
    ginger tags <file.cgr>
    ginger info <file.cgr>
    ginger unpack <file.cgr> --output <plain.cgr>

Output formats (before the command):
    --format table    (default, human-readable)
    --format json     (machine-readable)

`unpack` writes the logical tag stream back as a plain QVRS file. It does not
re-compress or re-protect, so a wrapped file changes its framing.
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Optional

from . import __version__
from .formats.cgr import (
    ChannelGroup, FlatChannelGroup, ParseError, open_container, tag_summary,
)

logger = logging.getLogger("gingersuite")


def load_bytes(path: str) -> bytes:
    """Read a file. Exits on failure."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        print(f"ERROR: Cannot read {path}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)


def cmd_inspect(args) -> int:
    """Show the structured header of a channel group."""
    data = load_bytes(args.file)
    container = open_container(data)
    group = ChannelGroup.from_container(container)

    if args.format == "json":
        print(json.dumps({
            "file": args.file,
            "container": container.kind.value,
            "layers": container.layers,
            "engine_version": group.engine_version,
            "guid": str(group.guid),
            "channel_count": group.channel_count,
            "body_tags": len(group.body),
        }, indent=2))
        return 0

    print(f"Channel group: {args.file}")
    print("─" * 50)
    print(f"  Container:      {container.kind.value} ({container.kind.label})")
    print(f"  Layers:         {container.layers}")
    print(f"  Engine version: {group.engine_version}")
    print(f"  GUID:           {group.guid}")
    print(f"  Channels:       {group.channel_count}")
    print(f"  Body tags:      {len(group.body)}")
    return 0


def cmd_tags(args) -> int:
    """List the logical tags."""
    flat = FlatChannelGroup.from_bytes(load_bytes(args.file))

    if args.format == "json":
        print(json.dumps([
            {"index": i, "name": t.name, "size": t.size, "data": t.data.hex()}
            for i, t in enumerate(flat.tags)
        ], indent=2))
        return 0

    print(f"{len(flat)} tags in {args.file}")
    for i, tag in enumerate(flat.tags):
        print(f"  [{i:>4}] {tag_summary(tag)}")
    return 0


def cmd_info(args) -> int:
    """Report container variant and layer sizes."""
    data = load_bytes(args.file)
    container = open_container(data)
    transform = container.transform

    info = {
        "file": args.file,
        "size": len(data),
        "container": container.kind.value,
        "compressed": container.compressed,
        "obfuscated": container.obfuscated,
        "compressed_size": transform.compressed_size if transform else None,
        "decompressed_size": transform.decompressed_size if transform else None,
        "logical_tags": len(container.tags),
    }

    if args.format == "json":
        print(json.dumps(info, indent=2))
        return 0

    for key, value in info.items():
        if value is not None:
            print(f"  {key:<18} {value}")
    return 0


def cmd_unpack(args) -> int:
    """Write the logical stream back as a plain file."""
    flat = FlatChannelGroup.from_bytes(load_bytes(args.file))
    output_path = Path(args.output)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"ERROR: Cannot create {output_path.parent}: {e.strerror or e}", file=sys.stderr)
        return 1
    flat.save_to_file(output_path)
    print(f"Wrote {len(flat)} tags to {output_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ginger",
        description="Read, inspect and unpack channel group (.cgr) files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--format", choices=["table", "json"],
                        default="table", help="Output format (default: table)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every parsing stage")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="command", help="Command to run")

    p = sub.add_parser("inspect", help="Show engine version, guid and channel count")
    p.add_argument("file", help="Path to a .cgr file")

    p = sub.add_parser("tags", help="List the logical tags")
    p.add_argument("file", help="Path to a .cgr file")

    p = sub.add_parser("info", help="Show container variant and layer sizes")
    p.add_argument("file", help="Path to a .cgr file")

    p = sub.add_parser("unpack", help="Write the logical tags as a plain file")
    p.add_argument("file", help="Path to a .cgr file")
    p.add_argument("--output", "-o", required=True, help="Output file path")

    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "inspect": cmd_inspect,
        "tags": cmd_tags,
        "info": cmd_info,
        "unpack": cmd_unpack,
    }

    try:
        return commands[args.command](args)
    except ParseError as e:
        logger.debug("Decoding failed", exc_info=True)
        print(f"ERROR: {args.file}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
