"""
Modular Arithmetic Operations

Implements the integer and modular primitives used across the toolkit:
- Euclidean algorithm and Extended Euclidean Algorithm
- Reduction into Z_m and modular inverse
- Modular exponentiation (square-and-multiply algorithm)
- Chinese Remainder Theorem
- Euler's totient by trial division
- Small helpers: lcm, abs, negate, parity, min/max

Note: Modular exponentiation is written out with square-and-multiply instead
      of delegating to Python's built-in pow(a, b, mod).
"""

import logging
from typing import NamedTuple, Sequence

from ..errors import DomainError


logger = logging.getLogger(__name__)


class ExtendedGcdResult(NamedTuple):
    """Bezout triple with a*x + b*y == g."""
    g: int
    x: int
    y: int


# ============================================================================
# GCD
# ============================================================================

def gcd(a: int, b: int) -> int:
    """
    Compute the greatest common divisor using the Euclidean algorithm.

    gcd(a, 0) == a. Operands are not made positive first, so the sign of the
    result follows Python's % convention for negative inputs.
    """
    while b != 0:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> ExtendedGcdResult:
    """
    Extended Euclidean Algorithm.

    Finds integers x, y such that: a*x + b*y = gcd(a, b)

    Produces the same coefficients as the recursive definition
        egcd(0, b) = (b, 0, 1)
        egcd(a, b) = (g, y' - (b // a) * x', x')  where (g, x', y') = egcd(b % a, a)
    but runs as a loop, so very large inputs do not hit the recursion limit.

    Args:
        a: First integer
        b: Second integer

    Returns:
        ExtendedGcdResult (g, x, y) where a*x + b*y = g
    """
    # Runs the division chain on (b, a); coefficients of b land in prev_x, of a in prev_y
    r0, r1 = b, a
    prev_x, x = 1, 0
    prev_y, y = 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 % r1
        prev_x, x = x, prev_x - q * x
        prev_y, y = y, prev_y - q * y
    return ExtendedGcdResult(g=r0, x=prev_y, y=prev_x)


def lcm(a: int, b: int) -> int:
    """
    Least common multiple, (a // gcd(a, b)) * b.

    The result keeps the sign of its inputs; it is not wrapped in abs().
    """
    return (a // gcd(a, b)) * b


# ============================================================================
# Reduction and Inverse
# ============================================================================

def to_zn(a: int, m: int) -> int:
    """
    Find the smallest non-negative element congruent to a modulo m.

    Args:
        a: The integer to reduce
        m: The modulus (must be positive)

    Returns:
        The representative of a in [0, m)

    Raises:
        DomainError: If m <= 0
    """
    if m <= 0:
        raise DomainError(f"Modulus must be positive, got {m}")
    a_zm = a % m
    return a_zm + m if a_zm < 0 else a_zm


def mod(a: int, m: int) -> int:
    """An alias of to_zn()."""
    return to_zn(a, m)


def mod_inverse(a: int, m: int) -> int:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.

    Finds x such that (a * x) mod m = 1

    Args:
        a: The number to find inverse of
        m: The modulus (must be positive)

    Returns:
        Modular inverse of a mod m, in [0, m)

    Raises:
        DomainError: If m <= 0 or the inverse doesn't exist (gcd(a, m) != 1)
    """
    g, x, _ = extended_gcd(to_zn(a, m), m)

    if g != 1:
        raise DomainError(f"Modular inverse does not exist (gcd({a}, {m}) = {g})")

    return to_zn(x, m)


mod_inv = mod_inverse


# ============================================================================
# Modular Operations
# ============================================================================

def mod_add(a: int, b: int, m: int) -> int:
    """(a + b) mod m. A zero modulus raises ZeroDivisionError."""
    return ((a % m) + (b % m)) % m


def mod_multiply(a: int, b: int, m: int) -> int:
    """(a * b) mod m. A zero modulus raises ZeroDivisionError."""
    return ((a % m) * (b % m)) % m


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation using square-and-multiply algorithm.

    Computes (base^exponent) mod modulus. A negative exponent gives the
    inverse of base^|exponent|, when it exists.

    Algorithm (right-to-left binary method):
    1. Start with result = 1
    2. For each bit of exponent (from LSB to MSB):
       - If bit is 1, multiply result by base (mod modulus)
       - Square the base (mod modulus)

    Time complexity: O(log exponent) multiplications

    Args:
        base: The base number
        exponent: The exponent, any sign
        modulus: The modulus (must be positive)

    Returns:
        (base^exponent) mod modulus; 1 whenever exponent == 0

    Raises:
        DomainError: If modulus == 0 or < 0, or exponent < 0 and
            base has no inverse modulo modulus
    """
    if modulus == 0:
        raise DomainError("Cannot compute modular power with modulus 0")
    if exponent == 0:
        return 1

    # Reduce base first
    base = to_zn(base, modulus)

    if exponent < 0:
        return mod_inverse(mod_exp(base, -exponent, modulus), modulus)

    result = 1
    while exponent > 0:
        if base == 0:
            return 0

        # If current bit is 1, multiply result by base
        if exponent & 1:
            result = (result * base) % modulus

        exponent >>= 1
        base = (base * base) % modulus

    return result


mod_pow = mod_exp


# ============================================================================
# Chinese Remainder Theorem and Totient
# ============================================================================

def crt(moduli: Sequence[int], remainders: Sequence[int]) -> int:
    """
    Solve x = remainders[i] (mod moduli[i]) with the Chinese Remainder Theorem.

    Moduli must be pairwise coprime; this is not checked up front, but a
    pair sharing a factor makes one of the inverses fail.

    Args:
        moduli: The pairwise-coprime moduli
        remainders: One remainder per modulus

    Returns:
        x reduced modulo the product of the moduli (in [0, prod) for
        positive moduli)

    Raises:
        DomainError: If the sequences differ in length, a modulus is 0,
            or an inverse does not exist
    """
    if len(moduli) != len(remainders):
        raise DomainError(
            f"Need one remainder per modulus, got {len(moduli)} moduli "
            f"and {len(remainders)} remainders"
        )
    if any(m == 0 for m in moduli):
        raise DomainError("CRT moduli must be non-zero")

    prod = 1
    for m in moduli:
        prod *= m
    logger.debug("CRT over %d moduli, product has %d bits", len(moduli), prod.bit_length())

    total = 0
    for m, r in zip(moduli, remainders):
        p = prod // m
        total += r * mod_inverse(p, m) * p

    return total % prod


def phi(n: int) -> int:
    """
    Euler's totient: count of integers in [1, n] coprime to n.

    Trial division up to sqrt(n), where n shrinks as each prime factor is
    divided out; whatever remains above 1 is the last prime factor.

    Raises:
        DomainError: If n <= 0
    """
    if n <= 0:
        raise DomainError(f"Totient is only defined for positive integers, got {n}")

    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1

    if n > 1:
        result -= result // n

    return result


# ============================================================================
# Elementary Helpers
# ============================================================================

def absolute(num: int) -> int:
    """Absolute value."""
    return -num if num < 0 else num


def negate(num: int) -> int:
    """Make an integer negative (or zero)."""
    return -absolute(num)


def is_odd(n: int) -> bool:
    return n % 2 == 1


def is_even(n: int) -> bool:
    return not is_odd(n)


def is_unit(n: int) -> bool:
    """True for 1 and -1."""
    return absolute(n) == 1


def maximum(*nums: int) -> int:
    """
    Largest of one or more integers; on ties the earliest one wins.

    Raises:
        DomainError: If called with no values
    """
    if not nums:
        raise DomainError("maximum() needs at least one value")
    best = nums[0]
    for current in nums[1:]:
        if current > best:
            best = current
    return best


def minimum(*nums: int) -> int:
    """
    Smallest of one or more integers; on ties the earliest one wins.

    Raises:
        DomainError: If called with no values
    """
    if not nums:
        raise DomainError("minimum() needs at least one value")
    best = nums[0]
    for current in nums[1:]:
        if current < best:
            best = current
    return best
