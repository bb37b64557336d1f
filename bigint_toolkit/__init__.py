# bigint_toolkit
"""
Integer conversion and modular arithmetic toolkit.

- conversion: integers <-> bytes (two's complement), hex, radix 2..36
- modular: gcd, inverse, modular power, CRT, totient, random ranges
"""

from .errors import BigintToolkitError, DomainError, InvalidDigit, ResourceExhausted

__version__ = "0.2.0"

__all__ = [
    'BigintToolkitError',
    'DomainError',
    'InvalidDigit',
    'ResourceExhausted',
    '__version__',
]
