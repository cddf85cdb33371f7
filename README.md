# huffpack

Compress and decompress files with Huffman coding.

huffpack counts how often each byte occurs in a file and builds a Huffman
tree from those counts. It writes a compressed file that holds the
frequency table, the number of encoded bits and the packed bit stream.
Decompressing reads the table back and rebuilds the same tree, so the
compressed file needs no other data to be decoded.

## Installation

```
pip install .
```

## Command line

Compress or decompress directly by naming the action and both paths:

```
huffpack compress notes.txt notes.huff
huffpack decompress notes.huff notes.copy.txt
```

On success it prints `compression is done` or `Decompression is complete`
and exits with status 0. If a file cannot be read or written, or the
compressed data is malformed, it prints `Error: ...` to standard error and
exits with status 1.

Run it with no arguments for the interactive menu:

```
huffpack
```

```
Would you like to:
1) Compress a file
2) Decompress a file
1
Enter the path of the file to be compressed: notes.txt
Enter the path where you'd like the compressed file to be saved: notes.huff
compression is done
```

Any choice other than `1` or `2` prints `That is not a valid choice.`

## Library use

```python
from huffpack.codec import encode, decode, compress, decompress, HuffmanError

blob = encode(b"go go gophers for the win!")
assert decode(blob) == b"go go gophers for the win!"

compress("notes.txt", "notes.huff")
decompress("notes.huff", "notes.copy.txt")
```

`encode` and `decode` work on bytes; `compress` and `decompress` read and
write whole files, accepting `str` or path-like objects.

`decode` and `decompress` raise `HuffmanError` (a subclass of `ValueError`)
when the header is malformed, the data ends early, the bit stream cannot be
walked through the rebuilt tree, or the frequency table is empty. Encoding
empty input therefore produces data that `decode` rejects.

Input made of a single distinct byte encodes to zero bits; decoding
restores it from the stored count.

## Compressed format

All numbers are written as ASCII decimals followed by a newline:

1. the number of distinct bytes;
2. for each distinct byte: the raw byte, then its count;
3. the number of encoded bits;
4. the bits packed most significant first, the last byte padded with zeros.

## Tree building

The tree-building parts can be used on their own:

```python
from huffpack.tree import Node, frequency_table, build_tree, encoding_table

freqs = frequency_table(b"abracadabra")   # byte value -> count
root = build_tree(freqs)                   # Node, or None for no input
codes = encoding_table(root)               # byte value -> string of "0"/"1"
```

`Node.is_leaf()` tells whether a node has no children; leaves carry the
byte value in `letter` and its count in `weight`.

## Running the tests

```
pip install .[test]
pytest
```