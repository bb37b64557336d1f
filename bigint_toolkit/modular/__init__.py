# Modular Arithmetic Module
"""
Integer and modular arithmetic, grouped as one math namespace:
- gcd, extended gcd, lcm
- Reduction into Z_m, modular inverse, modular power
- Chinese Remainder Theorem, Euler's totient
- Cryptographically strong random integers in a range
"""

from .arithmetic import (
    ExtendedGcdResult,
    absolute,
    crt,
    extended_gcd,
    gcd,
    is_even,
    is_odd,
    is_unit,
    lcm,
    maximum,
    minimum,
    mod,
    mod_add,
    mod_exp,
    mod_inv,
    mod_inverse,
    mod_multiply,
    mod_pow,
    negate,
    phi,
    to_zn,
)
from .random_range import RandomRange, random_bytes, random_in_range

__all__ = [
    'ExtendedGcdResult',
    'RandomRange',
    'absolute',
    'crt',
    'extended_gcd',
    'gcd',
    'is_even',
    'is_odd',
    'is_unit',
    'lcm',
    'maximum',
    'minimum',
    'mod',
    'mod_add',
    'mod_exp',
    'mod_inv',
    'mod_inverse',
    'mod_multiply',
    'mod_pow',
    'negate',
    'phi',
    'random_bytes',
    'random_in_range',
    'to_zn',
]
