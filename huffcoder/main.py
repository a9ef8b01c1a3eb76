"""
Command line front end:

    huffcoder encode [inFile] [outFile]
    huffcoder decode [inFile] [outFile]
"""

import argparse
import sys

from huffcoder.errors import HuffmanFormatError
from huffcoder.huffman_coding import decode_file, encode_file

ACTIONS = {"encode": encode_file, "decode": decode_file}


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="huffcoder",
        description="A simple Huffman encoder/decoder for files.",
    )
    parser.add_argument(
        "action",
        type=str.lower,
        choices=sorted(ACTIONS),
        help="Whether to encode or decode the input file.",
    )
    parser.add_argument("input", help="File to read.")
    parser.add_argument("output", help="File to write.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print details about the tree and payload.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        log_info = ACTIONS[args.action](args.input, args.output, verbose=args.verbose)
    except OSError as e:
        print(f"{e.filename or args.input}: {e.strerror or e}", file=sys.stderr)
        return 1
    except HuffmanFormatError as e:
        print(f"{args.input}: invalid compressed file: {e}", file=sys.stderr)
        return 1

    print(log_info)
    return 0


if __name__ == "__main__":
    sys.exit(main())
