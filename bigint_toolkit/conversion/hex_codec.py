"""
Hexadecimal Conversion Helpers

Elementary conversions between integers, hex strings and bytes:
- Padding a hex string to a whole number of bytes
- Integer to hex (lowercase, '-' prefix for negatives)
- Hex to bytes and hex to integer with strict digit validation
"""

import re

from ..errors import InvalidDigit


HEX_DIGITS = re.compile(r'[0-9a-fA-F]+')


def hex_pad_zero(hex_str: str) -> str:
    """
    Pad a '0' in front of the digits if their count is odd.

    A leading '-' stays in front and does not count as a digit.
    """
    sign = ''
    if hex_str.startswith('-'):
        sign, hex_str = '-', hex_str[1:]
    if len(hex_str) % 2 != 0:
        hex_str = '0' + hex_str
    return sign + hex_str


def bigint_to_hex(num: int, pad_zero: bool = False) -> str:
    """
    Convert an integer to a lowercase hex string.

    Args:
        num: The integer to convert
        pad_zero: If True, pad the digits to an even count

    Returns:
        Hex digits without '0x', prefixed with '-' if num is negative
    """
    hex_str = format(num, 'x')
    if not pad_zero:
        return hex_str
    return hex_pad_zero(hex_str)


def bigint_to_hex_pad_zero(num: int) -> str:
    """Convert an integer to hex, padded to a whole number of bytes."""
    return bigint_to_hex(num, True)


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hex string to bytes.

    Raises:
        InvalidDigit: If the string has an odd length or a non-hex character
    """
    if len(hex_str) % 2 != 0:
        raise InvalidDigit(16, message=f"Hex string must have an even length, got {len(hex_str)}")
    _check_digits(hex_str)
    return bytes.fromhex(hex_str)


def hex_to_bigint(hex_str: str) -> int:
    """
    Convert a hex string to an integer, honouring a leading '-'.

    Raises:
        InvalidDigit: If the digits are empty or not hexadecimal
    """
    is_negative = hex_str.startswith('-')
    if is_negative:
        hex_str = hex_str[1:]
    if hex_str == '':
        raise InvalidDigit(16, message="Hex string has no digits")
    _check_digits(hex_str)
    result = int(hex_str, 16)
    return -result if is_negative else result


def _check_digits(hex_str: str) -> None:
    if hex_str == '':
        return
    if HEX_DIGITS.fullmatch(hex_str) is None:
        bad = next(c for c in hex_str if c not in '0123456789abcdefABCDEF')
        raise InvalidDigit(16, bad)
