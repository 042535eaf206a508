"""Main CLI entry point for zwire."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.convert import call_command, decode_command, encode_command

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def main() -> int:
    """Main entry point for the zwire CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="zwire: ZObject Wire Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  zwire --encode 42 --type Z16683              Encode an Integer
  zwire --encode 0.1 --type Z20838             Encode a Float64
  zwire --decode '{"Z1K1": "Z6", "Z6K1": "x"}'  Decode a wire object
  zwire --decode - < result.json               Decode from stdin
  zwire --call template.json --values '{"first number": 5}'
  zwire --version                              Show version
        """,
    )

    parser.add_argument(
        "--encode",
        metavar="VALUE",
        type=str,
        help="Encode a value (JSON scalar, nan, inf, or plain text)",
    )

    parser.add_argument(
        "--type",
        metavar="ZID",
        type=str,
        help="Required type identifier for --encode, e.g. Z16683",
    )

    parser.add_argument(
        "--decode",
        metavar="JSON",
        type=str,
        help="Decode a wire object given as JSON, or '-' to read stdin",
    )

    parser.add_argument(
        "--call",
        metavar="FILE",
        type=str,
        help="Build a function call from a call template JSON file",
    )

    parser.add_argument(
        "--values",
        metavar="JSON",
        type=str,
        help="Argument values for --call, as a JSON object keyed by key or name",
    )

    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"zwire {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, stream=sys.stderr)

    try:
        # Handle --encode
        if args.encode is not None:
            if not args.type:
                print("Error: --encode requires --type", file=sys.stderr)
                return 1
            encode_command(args.encode, args.type)
            return 0

        # Handle --decode
        if args.decode is not None:
            decode_command(args.decode)
            return 0

        # Handle --call
        if args.call:
            file_path = Path(args.call)
            if not file_path.exists():
                print(f"Error: File not found: {file_path}", file=sys.stderr)
                return 1
            call_command(file_path, args.values)
            return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
