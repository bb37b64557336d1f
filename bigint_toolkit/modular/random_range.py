"""
Random Integers in a Range

Uniform random integers in a closed interval [start, end] by rejection
sampling over cryptographically strong random bytes:
1. diff = end - start + 1 and bit_length = number of bits of diff
2. Draw ceil(bit_length / 8) bytes and read them big-endian
3. Keep only the low bit_length bits
4. Accept if the value is a valid offset (< diff), otherwise draw again

Each draw is accepted with probability above 1/2, so the expected number of
draws is below 2.

The byte source is injected; by default it is secrets.token_bytes, the
platform CSPRNG. A general-purpose PRNG must not be used here.
"""

import logging
import secrets
from typing import Callable, Optional

from ..errors import DomainError, ResourceExhausted


logger = logging.getLogger(__name__)

ByteSource = Callable[[int], bytes]

# None means the rejection loop runs until a candidate is accepted
DEFAULT_MAX_ATTEMPTS: Optional[int] = None


def random_bytes(size: int) -> bytes:
    """
    Generate cryptographically strong random bytes.

    Args:
        size: Number of bytes

    Returns:
        size bytes from the platform CSPRNG
    """
    if size < 0:
        raise DomainError(f"Byte count must be non-negative, got {size}")
    return secrets.token_bytes(size)


class RandomRange:
    """
    Generator of uniform random integers in closed intervals.

    Example:
        >>> rng = RandomRange()
        >>> 10 <= rng.random(10, 20) <= 20
        True
    """

    def __init__(
        self,
        byte_source: Optional[ByteSource] = None,
        max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS
    ):
        """
        Initialize the generator.

        Args:
            byte_source: Callable returning n random bytes; defaults to
                random_bytes (secrets.token_bytes)
            max_attempts: Cap on rejection-loop draws, or None for no cap
        """
        if max_attempts is not None and max_attempts < 1:
            raise DomainError(f"max_attempts must be at least 1, got {max_attempts}")
        self._byte_source = byte_source or random_bytes
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> Optional[int]:
        """Cap on draws per call, None if unbounded."""
        return self._max_attempts

    def random(self, start: int, end: int) -> int:
        """
        Generate a random integer in [start, end].

        Args:
            start: Lower bound (inclusive)
            end: Upper bound (inclusive)

        Returns:
            A uniformly distributed integer between start and end

        Raises:
            DomainError: If start > end, or the byte source returns the
                wrong number of bytes
            ResourceExhausted: If max_attempts draws were all rejected
        """
        if start > end:
            raise DomainError(f"Start must not be greater than end ({start} > {end})")

        diff = end - start + 1
        bit_length = len(format(diff, 'b'))
        byte_size = (bit_length + 7) // 8
        mask = (1 << bit_length) - 1

        attempts = 0
        while True:
            attempts += 1
            chunk = self._byte_source(byte_size)
            if len(chunk) != byte_size:
                raise DomainError(
                    f"Byte source returned {len(chunk)} bytes, expected {byte_size}"
                )

            value = int.from_bytes(chunk, byteorder='big') & mask
            if value < diff:
                if attempts > 1:
                    logger.debug("Accepted random offset after %d draws", attempts)
                return start + value

            if self._max_attempts is not None and attempts >= self._max_attempts:
                raise ResourceExhausted(
                    f"No random value in [{start}, {end}] accepted after {attempts} draws"
                )

    def __repr__(self) -> str:
        return f"RandomRange(max_attempts={self._max_attempts})"


def random_in_range(
    start: int,
    end: int,
    byte_source: Optional[ByteSource] = None,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS
) -> int:
    """Generate a random integer in [start, end]. See RandomRange.random."""
    return RandomRange(byte_source, max_attempts).random(start, end)
