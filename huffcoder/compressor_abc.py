from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Interface for compressing and decompressing data
    between binary streams, files and byte strings.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Read all bytes from the input stream, compress them and write
        the result to the output stream.

        Args:
            input_stream: Stream with the raw data
            output_stream: Stream for the compressed data

        Returns:
            Log information about the run
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Read compressed bytes from the input stream, decompress them and
        write the original data to the output stream.

        Args:
            input_stream: Stream with the compressed data
            output_stream: Stream for the restored data

        Returns:
            Log information about the run
        """

    def compress_file(self, input_file: str, output_file: str) -> str:
        """
        Compress a file. The result is built in memory first, so a failed
        run never leaves a partial output file behind.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file

        Returns:
            Log information about the run
        """
        with open(input_file, "rb") as in_file:
            in_buffer = io.BytesIO(in_file.read())
        out_buffer = io.BytesIO()
        log_info = self.compress(in_buffer, out_buffer)
        with open(output_file, "wb") as out_file:
            out_file.write(out_buffer.getvalue())
        return log_info

    def decompress_file(self, input_file: str, output_file: str) -> str:
        """
        Decompress a file. Nothing is written when the input is malformed.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file

        Returns:
            Log information about the run
        """
        with open(input_file, "rb") as in_file:
            in_buffer = io.BytesIO(in_file.read())
        out_buffer = io.BytesIO()
        log_info = self.decompress(in_buffer, out_buffer)
        with open(output_file, "wb") as out_file:
            out_file.write(out_buffer.getvalue())
        return log_info

    def compress_bytes(self, data: bytes) -> Tuple[bytes, str]:
        """
        Compress a byte string.

        Returns:
            Tuple (compressed data, log information)
        """
        out_buffer = io.BytesIO()
        log_info = self.compress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info

    def decompress_bytes(self, data: bytes) -> Tuple[bytes, str]:
        """
        Decompress a byte string.

        Returns:
            Tuple (decompressed data, log information)
        """
        out_buffer = io.BytesIO()
        log_info = self.decompress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info
