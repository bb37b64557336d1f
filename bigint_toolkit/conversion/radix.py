"""
Radix Parsing

Turns numbers written in any radix from 2 to 36 into integers, and
dispatches already-typed values (int, float, str) to the right parser.

    to_integer(123456789)                          -> 123456789
    to_integer('75bcd15', 16)                      -> 123456789
    to_integer('111010110111100110100010101', 2)   -> 123456789
"""

import string
from typing import Union

from ..errors import DomainError, InvalidDigit
from .hex_codec import hex_to_bigint


# ============================================================================
# Constants
# ============================================================================

MIN_RADIX = 2
MAX_RADIX = 36
DIGITS = string.digits + string.ascii_lowercase  # digit value == index


def _digit_value(char: str, radix: int) -> int:
    # str.lower() maps some non-ASCII letters onto a-z (U+212A KELVIN SIGN -> 'k')
    if len(char) != 1 or not char.isascii():
        raise InvalidDigit(radix, char)
    value = DIGITS.find(char.lower())
    if value < 0 or value >= radix:
        raise InvalidDigit(radix, char)
    return value


def parse_radix(text: str, radix: int) -> int:
    """
    Parse an unsigned number written in the given radix.

    Digits are accumulated left to right: value = value * radix + digit.
    Letters are case-insensitive. No sign or prefix is accepted.

    Args:
        text: The digits to parse
        radix: Base between 2 and 36

    Returns:
        The parsed integer

    Raises:
        DomainError: If radix is outside 2..36
        InvalidDigit: If text is empty or a character is not a digit of radix
    """
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise DomainError(f"Radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}")
    if text == '':
        raise InvalidDigit(radix, message=f"Empty string is not a base {radix} number")

    value = 0
    for char in text:
        value = value * radix + _digit_value(char, radix)
    return value


def _parse_decimal(text: str) -> int:
    body = text[1:] if text[:1] in ('-', '+') else text
    if body == '':
        raise InvalidDigit(10, message=f"No digits in {text!r}")
    for char in body:
        if char not in string.digits:
            raise InvalidDigit(10, char)
    return int(text, 10)


def to_integer(value: Union[int, float, str], radix: int = 10) -> int:
    """
    Convert a value of any supported type to an integer.

    Args:
        value: An int (bool becomes a plain int), an integral float, or a string
        radix: Radix of a string value; 10 and 16 accept a leading '-'

    Returns:
        The integer value

    Raises:
        DomainError: If a float is not integral or the radix is unsupported
        InvalidDigit: If a string has a character invalid for radix
        TypeError: For any other value type
    """
    if isinstance(value, int):
        # bool is an int subclass; hand back a plain int
        return int(value)

    if isinstance(value, float):
        if not value.is_integer():
            raise DomainError(f"Cannot convert non-integral float {value!r} to an integer")
        return int(value)

    if not isinstance(value, str):
        raise TypeError(f"Cannot convert {type(value).__name__} to an integer")

    if radix == 10:
        return _parse_decimal(value)
    elif radix == 16:
        return hex_to_bigint(value)
    else:
        return parse_radix(value, radix)
