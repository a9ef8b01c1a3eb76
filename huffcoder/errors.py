"""
Exceptions raised while reading Huffman-compressed data
"""


class HuffmanFormatError(ValueError):
    """Base class for malformed compressed input."""


class HeaderError(HuffmanFormatError):
    """The symbol count or node count prefix is missing or invalid."""


class TreeTableError(HuffmanFormatError):
    """The serialized node table does not describe a valid code tree."""


class TruncatedPayloadError(HuffmanFormatError):
    """The bitstream ended before the declared number of symbols was decoded."""

    def __init__(self, decoded: int, expected: int):
        super().__init__(
            f"Payload exhausted after {decoded} of {expected} symbols"
        )
        self.decoded = decoded
        self.expected = expected
