from bitarray import bitarray


class BitWriter:
    """
    Collects Huffman codes into a bitarray and packs them into bytes.
    Bits are stored least-significant-bit first within each byte.
    """

    def __init__(self) -> None:
        self.bits = bitarray(endian="little")

    def write_code(self, code: bitarray) -> None:
        """
        Append one code to the stream.

        Args:
            code: Bits of the code, first bit first
        """
        self.bits.extend(code)

    def __len__(self) -> int:
        return len(self.bits)

    def get_bitarray(self) -> bitarray:
        """
        Return the current bits (without padding).
        """
        return self.bits

    def to_bytes(self) -> bytes:
        """
        Return the packed bytes. The last byte is zero-filled in its
        unused high bits.
        """
        return self.bits.tobytes()
