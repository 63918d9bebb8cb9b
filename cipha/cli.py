import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .dispatch import cipher_names, get_cipher
from .engine import CIPHER_REGISTRY, DEFAULT_SHIFT, CipherKind
from .errors import CipherError, InputUnavailable
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

# ==========================================
#  CLI LOGIC
# ==========================================

def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for kind in CipherKind:
        cipher = CIPHER_REGISTRY[kind]
        params = ", ".join(f"--{p}" for p in cipher.parameters) or "---"
        print(f"  {kind.value:<10} [{params:<8}]  {cipher.description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def read_input(message: Optional[str], file_path: Optional[str]) -> str:
    """Return the text to transform from --message, --file, or stdin for '-f -'."""
    if message is not None:
        return message
    if file_path is None:
        raise InputUnavailable("Either --message or --file must be provided.")
    if file_path == "-":
        return sys.stdin.read()
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise InputUnavailable(f"File '{file_path}' not found.") from None
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailable(f"Could not read '{file_path}': {e}") from e


def write_output(result: str, output_file: Optional[str], decoded: bool = False):
    """Print the result, or write it to ``output_file``.

    Encoded files get no trailing newline, so they decode back exactly via --file.
    """
    if output_file:
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(result)
                if decoded: f.write("\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
        logger.info("Wrote %d character(s) to %s", len(result), output_file)
    else:
        print(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cipha",
        description="A simple CLI for classical ciphers and encodings.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info messages on stderr)")
    parser.add_argument("--log-file", metavar="PATH",
                        help="Also write log messages to this file")

    method_help = "\n".join(f"  {name:<10}: {CIPHER_REGISTRY[CipherKind(name)].description}"
                            for name in cipher_names())

    # Options shared by encode and decode
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--cipher", required=True, choices=cipher_names(),
                        help=f"The cipher to use.\n{method_help}")

    io_group = common.add_mutually_exclusive_group()
    io_group.add_argument("-m", "--message", help="The message text")
    io_group.add_argument("-f", "--file", metavar="PATH",
                          help="Read the message from a file ('-' for stdin)")

    common.add_argument("-s", "--shift", type=int,
                        help=f"Shift value for the Caesar cipher (default: {DEFAULT_SHIFT})")
    common.add_argument("-k", "--key", help="Key for the Vigenère cipher")
    common.add_argument("-r", "--rails", type=int, help="Number of rails for the Rail Fence cipher")
    common.add_argument("-o", "--output-file", metavar="PATH",
                        help="Output to a file instead of stdout")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    subparsers.add_parser("encode", parents=[common], help="Encode a message using a cipher",
                          formatter_class=argparse.RawTextHelpFormatter)
    subparsers.add_parser("decode", parents=[common], help="Decode a message using a cipher",
                          formatter_class=argparse.RawTextHelpFormatter)
    subparsers.add_parser("list", help="List all available ciphers")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(logging.INFO if args.verbose else logging.WARNING, args.log_file)
    except OSError as e:
        sys.exit(f"Error: could not open log file '{args.log_file}': {e}")

    if args.command == "list":
        list_ciphers()
        return

    # 1. SELECT CIPHER & READ INPUT
    try:
        cipher = get_cipher(args.cipher, shift=args.shift, key=args.key, rails=args.rails)
        source_text = read_input(args.message, args.file)

        # 2. TRANSFORM
        if args.command == "encode":
            result = cipher.encode(source_text)
        else:
            # Only text read from a file or stdin carries a line terminator to drop
            if cipher.trim_decode_input and args.message is None:
                source_text = source_text.rstrip("\r\n")
            result = cipher.decode(source_text)
    except CipherError as e:
        sys.exit(f"Error: {e}")

    # 3. WRITE OUTPUT
    write_output(result, args.output_file, decoded=args.command == "decode")


if __name__ == "__main__":
    main()
