"""Command line entry point for compressing and decompressing files."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .codec import HuffmanError, compress, decompress

_MENU = "Would you like to:\n1) Compress a file\n2) Decompress a file"


def _run(action: str, input_path: str, output_path: str) -> int:
    try:
        if action == "compress":
            compress(input_path, output_path)
            print("compression is done")
        else:
            decompress(input_path, output_path)
            print("Decompression is complete")
    except (OSError, HuffmanError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _interactive() -> int:
    print(_MENU)
    choice = input().strip()
    if choice == "1":
        input_path = input("Enter the path of the file to be compressed: ").strip()
        output_path = input("Enter the path where you'd like the compressed file to be saved: ").strip()
        return _run("compress", input_path, output_path)
    if choice == "2":
        input_path = input("Enter the path of the file to be decompressed: ").strip()
        output_path = input("Enter the path where you'd like the uncompressed file to be saved: ").strip()
        return _run("decompress", input_path, output_path)
    print("That is not a valid choice.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compress or decompress a file; prompts for input when no arguments are given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _interactive()

    parser = argparse.ArgumentParser(prog="huffpack", description="Huffman file compressor.")
    commands = parser.add_subparsers(dest="action", required=True)
    for name in ("compress", "decompress"):
        command = commands.add_parser(name)
        command.add_argument("input")
        command.add_argument("output")
    parsed = parser.parse_args(args)
    return _run(parsed.action, parsed.input, parsed.output)


if __name__ == "__main__":
    sys.exit(main())