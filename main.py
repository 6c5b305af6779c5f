import argparse
import sys

from typing import List, Optional, Tuple
from bitops import STYLES, format_bits, parse_bits
from huffman import HuffmanCode, HuffmanError, InvalidInput

VERSION = "1.0.0"  #: huffcode release


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="huffcode",
        description="Encode and decode text with a Huffman code tree",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {VERSION}"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )

    alphabet = argparse.ArgumentParser(add_help=False)
    alphabet.add_argument(
        "-s",
        "--symbol",
        dest="symbols",
        action="append",
        required=True,
        metavar="SYM=FREQ",
        help="Alphabet symbol and its frequency (repeat for each symbol)",
    )

    style = argparse.ArgumentParser(add_help=False)
    style.add_argument(
        "--style",
        choices=sorted(STYLES),
        default="binary",
        help="How bits are printed (default: binary)",
    )

    encode = subparsers.add_parser(
        "encode",
        aliases=["e"],
        parents=[alphabet, style],
        help="Encode text into bits",
    )
    encode.add_argument("text", help="Text made of alphabet symbols")

    decode = subparsers.add_parser(
        "decode",
        aliases=["d"],
        parents=[alphabet],
        help="Decode bits into text",
    )
    decode.add_argument("bits", help="Bits such as 1011 or TFTT")

    subparsers.add_parser(
        "table",
        aliases=["t"],
        parents=[alphabet, style],
        help="Print the code of every symbol",
    )

    return parser


def _parse_symbol_pair(pair: str) -> Tuple[str, int]:
    """Split a ``SYM=FREQ`` command-line pair.

    The symbol is everything before the last ``=``, so ``==3`` gives the
    symbol ``=``.

    :param pair: Text such as ``"a=12"``.
    :type pair: str
    :returns: Symbol and frequency.
    :rtype: Tuple[str, int]
    :raises InvalidInput: If ``pair`` is malformed.
    """
    symbol, sep, freq = pair.rpartition("=")
    if not sep or not symbol:
        raise InvalidInput(f"Expected SYM=FREQ, got {pair!r}")
    try:
        return symbol, int(freq)
    except ValueError:
        raise InvalidInput(f"Frequency is not an integer in {pair!r}") from None


def _build_code(pairs: List[str]) -> HuffmanCode:
    return HuffmanCode.from_pairs(_parse_symbol_pair(p) for p in pairs)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        code = _build_code(args.symbols)
        if args.cmd in ["encode", "e"]:
            print(format_bits(code.encode(args.text), args.style))
        elif args.cmd in ["decode", "d"]:
            print(code.decode(parse_bits(args.bits)))
        elif args.cmd in ["table", "t"]:
            for symbol, path in code.code_table().items():
                print(f"{symbol!r}\t{format_bits(path, args.style)}")
    except (HuffmanError, ValueError) as e:
        print(f"[!] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
