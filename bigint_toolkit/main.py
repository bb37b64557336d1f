"""
bigint-toolkit - Main Entry Point
Command-line access to the conversion and modular arithmetic functions.
"""

import argparse
import sys

from .conversion.radix import to_integer
from .conversion.signed_bytes import bigint_to_bytes, bytes_to_bigint
from .conversion.hex_codec import hex_to_bytes
from .errors import BigintToolkitError
from .logger import get_logger, set_verbose_mode
from .modular.arithmetic import crt, extended_gcd, gcd, mod_exp, mod_inverse, phi
from .modular.random_range import random_in_range


def _integer(text):
    """argparse type for signed decimal integers."""
    try:
        return to_integer(text)
    except BigintToolkitError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_arguments(argv=None):
    """Parse command line arguments using argparse."""
    parser = argparse.ArgumentParser(
        prog="bigint-toolkit",
        description="Integer conversion and modular arithmetic",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("encode", help="Integer to big-endian bytes")
    p.add_argument("value", help="Integer text (a leading '-' is allowed in radix 10 and 16)")
    p.add_argument("--radix", type=int, default=10, help="Radix of VALUE (default 10)")
    p.add_argument("--negative", action="store_true", help="Use two's complement")

    p = sub.add_parser("decode", help="Big-endian hex bytes to integer")
    p.add_argument("hex", help="Bytes as hex digits, e.g. 075bcd15")
    p.add_argument("--negative", action="store_true", help="Read as two's complement")

    p = sub.add_parser("convert", help="Parse a number in any radix")
    p.add_argument("value")
    p.add_argument("--radix", type=int, required=True)

    for name, help_text in (("gcd", "Greatest common divisor"), ("egcd", "Extended gcd: g x y")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("a", type=_integer)
        p.add_argument("b", type=_integer)

    p = sub.add_parser("modinv", help="Modular inverse of A mod M")
    p.add_argument("a", type=_integer)
    p.add_argument("m", type=_integer)

    p = sub.add_parser("modpow", help="BASE^EXP mod M")
    p.add_argument("base", type=_integer)
    p.add_argument("exp", type=_integer)
    p.add_argument("m", type=_integer)

    p = sub.add_parser("crt", help="Chinese Remainder Theorem")
    p.add_argument("--moduli", type=_integer, nargs="+", required=True)
    p.add_argument("--remainders", type=_integer, nargs="+", required=True)

    p = sub.add_parser("phi", help="Euler's totient")
    p.add_argument("n", type=_integer)

    p = sub.add_parser("random", help="Random integer in [START, END]")
    p.add_argument("start", type=_integer)
    p.add_argument("end", type=_integer)

    return parser.parse_args(argv)


def run(args):
    """Execute one parsed command and return the text to print."""
    if args.command == "encode":
        data = bigint_to_bytes(to_integer(args.value, args.radix), args.negative)
        return f"{data.hex()} {list(data)}"
    if args.command == "decode":
        return str(bytes_to_bigint(hex_to_bytes(args.hex), args.negative))
    if args.command == "convert":
        return str(to_integer(args.value, args.radix))
    if args.command == "gcd":
        return str(gcd(args.a, args.b))
    if args.command == "egcd":
        return " ".join(str(v) for v in extended_gcd(args.a, args.b))
    if args.command == "modinv":
        return str(mod_inverse(args.a, args.m))
    if args.command == "modpow":
        return str(mod_exp(args.base, args.exp, args.m))
    if args.command == "crt":
        return str(crt(args.moduli, args.remainders))
    if args.command == "phi":
        return str(phi(args.n))
    if args.command == "random":
        return str(random_in_range(args.start, args.end))
    raise ValueError(f"Unknown command {args.command}")


def main(argv=None):
    """Main entry point for bigint-toolkit."""
    args = parse_arguments(argv)

    set_verbose_mode(args.verbose)
    logger = get_logger()
    logger.debug(f"Running command: {args.command}")

    try:
        print(run(args))
    except BigintToolkitError as e:
        logger.debug(f"{type(e).__name__} in {args.command}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
