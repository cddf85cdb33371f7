"""Huffman compression format: encoding, decoding and file helpers."""

from __future__ import annotations

import itertools
from os import PathLike
from pathlib import Path
from typing import Iterator, Union

from .tree import build_tree, encoding_table, frequency_table

StrPath = Union[str, "PathLike[str]"]

_WHITESPACE = b" \t\n\r\v\f"


class HuffmanError(ValueError):
    """Raised when compressed data cannot be decoded."""


def encode(data: bytes) -> bytes:
    """Compress bytes into the Huffman container format."""
    frequencies = frequency_table(data)
    codes = encoding_table(build_tree(frequencies))

    header = bytearray(f"{len(frequencies)}\n".encode("ascii"))
    for byte, count in frequencies.items():
        header.append(byte)
        header += f"{count}\n".encode("ascii")

    bits = "".join(codes[byte] for byte in data)
    header += f"{len(bits)}\n".encode("ascii")

    if bits:
        padded = bits + "0" * (-len(bits) % 8)
        header += int(padded, 2).to_bytes(len(padded) // 8, "big")
    return bytes(header)


class _Reader:
    def __init__(self, blob: bytes) -> None:
        self.blob = blob
        self.pos = 0

    def read_byte(self) -> int:
        if self.pos >= len(self.blob):
            raise HuffmanError("unexpected end of compressed data")
        byte = self.blob[self.pos]
        self.pos += 1
        return byte

    def skip(self) -> None:
        if self.pos < len(self.blob):
            self.pos += 1

    def read_int(self) -> int:
        while self.pos < len(self.blob) and self.blob[self.pos] in _WHITESPACE:
            self.pos += 1
        start = self.pos
        while self.pos < len(self.blob) and 0x30 <= self.blob[self.pos] <= 0x39:
            self.pos += 1
        if start == self.pos:
            raise HuffmanError("malformed header in compressed data")
        return int(self.blob[start:self.pos])

    def rest(self) -> bytes:
        return self.blob[self.pos:]


def _bits(payload: bytes) -> Iterator[int]:
    for byte in payload:
        for shift in range(7, -1, -1):
            yield (byte >> shift) & 1


def decode(blob: bytes) -> bytes:
    """Decompress bytes produced by encode()."""
    reader = _Reader(blob)
    table_size = reader.read_int()
    reader.skip()

    frequencies: dict[int, int] = {}
    for _ in range(table_size):
        letter = reader.read_byte()
        frequencies[letter] = reader.read_int()
        reader.skip()

    bit_length = reader.read_int()
    reader.skip()

    root = build_tree(frequencies)
    if root is None:
        raise HuffmanError("Huffman tree is empty. Cannot decompress.")
    if root.is_leaf():
        return bytes([root.letter]) * root.weight

    output = bytearray()
    node = root
    for bit in itertools.islice(_bits(reader.rest()), bit_length):
        node = node.one if bit else node.zero
        if node is None:
            raise HuffmanError("tree traversal failed")
        if node.is_leaf():
            output.append(node.letter)
            node = root
    return bytes(output)


def compress(input_path: StrPath, output_path: StrPath) -> None:
    """Compress the file at input_path into output_path."""
    data = Path(input_path).read_bytes()
    Path(output_path).write_bytes(encode(data))


def decompress(input_path: StrPath, output_path: StrPath) -> None:
    """Decompress the file at input_path into output_path."""
    blob = Path(input_path).read_bytes()
    Path(output_path).write_bytes(decode(blob))