"""
Signed Byte Codec

Converts between arbitrary-precision integers and big-endian byte sequences:
- Non-negative integers as their minimal whole-byte magnitude
- Negative integers as byte-aligned two's complement (opt-in)
- Decoding with optional two's complement interpretation

Round-trip laws:
    bytes_to_bigint(bigint_to_bytes(v, True), True) == v   for every int v
    bytes_to_bigint(bigint_to_bytes(v), False) == v        for every v >= 0

Decoding always works on a private copy, so the caller's buffer is never
modified.
"""

import logging
from typing import Iterable, Union

from ..errors import DomainError
from .hex_codec import bigint_to_hex, bigint_to_hex_pad_zero, hex_to_bytes


logger = logging.getLogger(__name__)

ByteLike = Union[bytes, bytearray, memoryview, Iterable[int]]

SIGN_BIT = 0x80
BYTE_MASK = 0xFF


# ============================================================================
# Encoding
# ============================================================================

def bigint_to_bytes(num: int, handle_negative: bool = False) -> bytes:
    """
    Convert an integer to a big-endian byte sequence.

    By default only non-negative integers are accepted. With
    ``handle_negative`` a negative integer is written as two's complement
    on the smallest whole number of bytes that leaves room for its sign,
    and a non-negative integer whose top bit would read as a sign gets a
    leading 0x00 byte. Decode such output with
    ``bytes_to_bigint(data, True)``.

    Args:
        num: The integer to convert
        handle_negative: Use two's complement for the sign

    Returns:
        The encoded bytes, at least one byte long

    Raises:
        DomainError: If num is negative and handle_negative is False
    """
    if num < 0:
        if not handle_negative:
            raise DomainError(
                "Negative value not convertible to bytes without two's complement "
                "(pass handle_negative=True)"
            )
        # Width from the base-2 text, sign included, rounded up past a byte boundary
        bits = (len(format(num, 'b')) // 8 + 1) * 8
        logger.debug("Two's complement of %d on %d bits", num, bits)
        num += 1 << bits
        return hex_to_bytes(bigint_to_hex_pad_zero(num))

    data = hex_to_bytes(bigint_to_hex_pad_zero(num))
    if handle_negative and data[0] & SIGN_BIT:
        data = b'\x00' + data
    return data


# ============================================================================
# Decoding
# ============================================================================

def bytes_to_bigint(data: ByteLike, handle_negative: bool = False) -> int:
    """
    Convert a big-endian byte sequence back to an integer.

    If the sequence holds two's complement (mostly produced from a negative
    integer), pass ``handle_negative=True`` to restore the sign. Without it
    the bytes are always read as an unsigned magnitude, even when the top
    bit is set.

    Args:
        data: bytes, bytearray, memoryview or an iterable of ints in 0..255
        handle_negative: Interpret a set top bit as a negative sign

    Returns:
        The decoded integer

    Raises:
        DomainError: If data is empty or holds a value outside 0..255
    """
    if isinstance(data, int):
        raise TypeError("Expected a byte sequence, got int")
    try:
        buf = bytearray(data)
    except ValueError as e:
        raise DomainError(f"Invalid byte value: {e}") from e

    if not buf:
        raise DomainError("Cannot convert an empty byte sequence")

    is_negative = handle_negative and (buf[0] & SIGN_BIT) != 0

    if is_negative:
        for i in range(len(buf)):
            buf[i] = ~buf[i] & BYTE_MASK

        carry = 1
        i = len(buf) - 1
        while i >= 0 and carry > 0:
            value = buf[i] + carry
            buf[i] = value & BYTE_MASK
            carry = value >> 8
            i -= 1

    result = 0
    for byte in buf:
        result = result * 256 + byte

    return -result if is_negative else result


def bytes_to_bigint_with_negative(data: ByteLike) -> int:
    """Convert bytes to an integer, reading them as two's complement."""
    return bytes_to_bigint(data, True)


# ============================================================================
# Hex and Buffer Helpers
# ============================================================================

def bytes_to_hex(data: ByteLike, handle_negative: bool = False) -> str:
    """
    Convert bytes to the hex string of the integer they encode.

    With ``handle_negative`` a two's complement sequence yields a '-'
    prefixed hex string instead of the raw digits.
    """
    return bigint_to_hex(bytes_to_bigint(data, handle_negative))


def bytes_to_hex_with_negative(data: ByteLike) -> str:
    """Convert bytes to hex, reading them as two's complement."""
    return bigint_to_hex(bytes_to_bigint_with_negative(data))


def bytes_to_buffer(data: ByteLike) -> bytearray:
    """Copy a byte sequence into a new mutable buffer."""
    return bytearray(data)


def buffer_to_bytes(buffer) -> bytes:
    """
    Read the raw bytes of any object supporting the buffer protocol.

    Raises:
        TypeError: If buffer does not support the buffer protocol
    """
    return memoryview(buffer).tobytes()
