"""Huffman tree construction and code table generation."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional


def _signed(byte: int) -> int:
    """Order bytes the way a signed char key would sort."""
    return byte - 256 if byte > 127 else byte


@dataclass(eq=False)
class Node:
    """A node of a Huffman tree; leaves carry a byte value."""

    letter: Optional[int]
    weight: int
    zero: Optional["Node"] = None
    one: Optional["Node"] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.zero is None and self.one is None


def frequency_table(data: bytes) -> dict[int, int]:
    """Count how often each byte occurs, ordered as signed byte values."""
    counts = Counter(data)
    return {byte: counts[byte] for byte in sorted(counts, key=_signed)}


def build_tree(frequencies: Mapping[int, int]) -> Optional[Node]:
    """Build a Huffman tree from byte frequencies; None when there are none."""
    sequence = itertools.count()
    heap: list[tuple[int, int, Node]] = [
        (weight, next(sequence), Node(byte, weight))
        for byte, weight in sorted(frequencies.items(), key=lambda item: _signed(item[0]))
    ]
    heapq.heapify(heap)

    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = Node(None, left.weight + right.weight, left, right)
        heapq.heappush(heap, (merged.weight, next(sequence), merged))

    return heap[0][2] if heap else None


def _walk(node: Optional[Node], prefix: str) -> Iterator[tuple[int, str]]:
    if node is None:
        return
    if node.is_leaf():
        yield node.letter, prefix
        return
    yield from _walk(node.zero, prefix + "0")
    yield from _walk(node.one, prefix + "1")


def encoding_table(root: Optional[Node]) -> dict[int, str]:
    """Map every leaf byte to its bit string ('0' for the zero branch)."""
    return dict(_walk(root, ""))