"""Huffman coding: tree building, a byte codec with file helpers, and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "codec", "tree"]