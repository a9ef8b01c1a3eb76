"""
Huffman coding algorithm -
lossless compression of byte streams

Compressed layout:
    b"<symbol_count> "   decimal count of original bytes and one space
    node table           see huffcoder.tree_table
    payload              packed codes, LSB first, zero padded
"""

from typing import BinaryIO

from huffcoder.bit_utils.bit_reader import BitReader
from huffcoder.bit_utils.bit_writer import BitWriter
from huffcoder.compressor_abc import Compressor
from huffcoder.errors import HeaderError, TruncatedPayloadError
from huffcoder.huffman_tree import HuffmanTree
from huffcoder.tree_table import read_tree_table, write_tree_table

# symbol counts up to 10**20 bytes are more than enough
MAX_COUNT_DIGITS = 20


class HuffmanCompressor(Compressor):
    """
    Huffman encoder/decoder. The code tree is stored in front of
    the payload, so decoding never recomputes frequencies.
    """

    def __init__(self, verbose: bool = False) -> None:
        """
        Args:
            verbose: Whether to print debug information
        """
        self.verbose = verbose
        self.log: list[str] = []

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        data = input_stream.read()

        # No input so no output.
        if not data:
            self.log.append("Empty input, nothing written")
            return "\n".join(self.log)

        tree = HuffmanTree.from_data(data)
        if self.verbose:
            print(f"Alphabet: {len(tree.res_codes)} symbols, {tree.node_count} nodes")

        written = output_stream.write(f"{len(data)} ".encode("ascii"))
        written += write_tree_table(tree, output_stream)

        writer = BitWriter()
        codes = tree.code_table()
        for byte in data:
            writer.write_code(codes[byte])
        written += output_stream.write(writer.to_bytes())

        if self.verbose:
            print(f"Encoded {len(data)} bytes into {len(writer)} payload bits")

        diff = len(data) - written
        if diff > 0:
            ratio = diff / len(data) * 100
            self.log.append(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
        else:
            self.log.append(f"Size increased by {-diff} bytes")
        return "\n".join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        symbol_count = self._read_symbol_count(input_stream)

        # No input so no output.
        if symbol_count is None:
            self.log.append("Empty input, nothing written")
            return "\n".join(self.log)

        tree = read_tree_table(input_stream)
        if self.verbose:
            print(f"Read tree: {tree.node_count} nodes, {symbol_count} symbols expected")

        payload = input_stream.read()
        decoded = self._decode_payload(tree, BitReader(payload), symbol_count)
        output_stream.write(decoded)

        if self.verbose:
            print(f"Decoded {len(decoded)} bytes from {len(payload)} payload bytes")

        self.log.append(f"Restored {len(decoded)} bytes")
        return "\n".join(self.log)

    @staticmethod
    def _read_symbol_count(input_stream: BinaryIO) -> int | None:
        """
        Parse the b"<digits> " prefix.

        Returns:
            The symbol count, or None when the input is empty

        Raises:
            HeaderError: If the prefix is missing or malformed
        """
        digits = bytearray()
        while True:
            ch = input_stream.read(1)
            if not ch:
                if not digits:
                    return None
                raise HeaderError("Symbol count is not terminated by a space")
            if ch == b" ":
                break
            if not ch.isdigit():
                raise HeaderError(f"Unexpected byte {ch!r} in symbol count")
            digits += ch
            if len(digits) > MAX_COUNT_DIGITS:
                raise HeaderError("Symbol count is too long")

        if not digits:
            raise HeaderError("Missing symbol count")
        symbol_count = int(digits)
        if symbol_count == 0:
            raise HeaderError("Symbol count must be positive")
        return symbol_count

    @staticmethod
    def _decode_payload(tree: HuffmanTree, reader: BitReader, symbol_count: int) -> bytes:
        """
        Walk the tree bit by bit, keeping the current position between bits.
        Stops as soon as symbol_count bytes are produced, padding is ignored.
        """
        decoded = bytearray()
        root = tree.root
        try:
            if tree.is_degenerate():
                # one leaf, one bit per symbol
                while len(decoded) < symbol_count:
                    reader.read_bit()
                    decoded.append(root.symbol)
            else:
                node = root
                while len(decoded) < symbol_count:
                    bit = reader.read_bit()
                    node = tree.node(node.right if bit else node.left)
                    if node.is_leaf():
                        decoded.append(node.symbol)
                        node = root
        except EOFError:
            raise TruncatedPayloadError(len(decoded), symbol_count) from None
        return bytes(decoded)


def encode(data: bytes, verbose: bool = False) -> bytes:
    """Compress bytes. Empty input gives empty output."""
    return HuffmanCompressor(verbose).compress_bytes(data)[0]


def decode(data: bytes, verbose: bool = False) -> bytes:
    """Restore bytes produced by encode."""
    return HuffmanCompressor(verbose).decompress_bytes(data)[0]


def encode_file(input_file: str, output_file: str, verbose: bool = False) -> str:
    return HuffmanCompressor(verbose).compress_file(input_file, output_file)


def decode_file(input_file: str, output_file: str, verbose: bool = False) -> str:
    return HuffmanCompressor(verbose).decompress_file(input_file, output_file)
