import pytest
from bitarray import bitarray

from huffcoder.bit_utils.bit_reader import BitReader
from huffcoder.bit_utils.bit_writer import BitWriter


def test_writer_packs_lsb_first():
    writer = BitWriter()
    for code in ("1", "0", "11"):
        writer.write_code(bitarray(code, endian="little"))

    assert len(writer) == 4
    assert writer.get_bitarray().to01() == "1011"
    assert writer.to_bytes() == b"\x0d"


def test_writer_partial_last_byte():
    writer = BitWriter()
    writer.write_code(bitarray("111111111", endian="little"))
    assert writer.to_bytes() == b"\xff\x01"


def test_writer_empty():
    assert BitWriter().to_bytes() == b""


def test_reader_reads_lsb_first():
    reader = BitReader(b"\x0d")
    bits = [reader.read_bit() for _ in range(8)]

    assert bits == [1, 0, 1, 1, 0, 0, 0, 0]
    assert reader.remaining() == 0
    with pytest.raises(EOFError):
        reader.read_bit()


def test_reader_matches_writer():
    writer = BitWriter()
    codes = ["0", "110", "10", "1111", "0", "1110"]
    for code in codes:
        writer.write_code(bitarray(code, endian="little"))

    reader = BitReader(writer.to_bytes())
    read = "".join(str(reader.read_bit()) for _ in range(len(writer)))
    assert read == "".join(codes)
    assert reader.remaining() == 16 - len(writer)
