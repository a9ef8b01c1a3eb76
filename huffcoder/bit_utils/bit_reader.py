from bitarray import bitarray


class BitReader:
    """
    Reads bits from packed bytes, least-significant-bit first within each byte.
    """

    def __init__(self, data: bytes) -> None:
        """
        Initialize BitReader over an in-memory buffer.

        Args:
            data: Packed payload bytes
        """
        self.bits = bitarray(endian="little")
        self.bits.frombytes(data)
        self.pos = 0

    def read_bit(self) -> int:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1)

        Raises:
            EOFError: If the bit stream is exhausted
        """
        if self.pos >= len(self.bits):
            raise EOFError("Bit stream length exceeded")
        val = self.bits[self.pos]
        self.pos += 1
        return val

    def remaining(self) -> int:
        return len(self.bits) - self.pos
