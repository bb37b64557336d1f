"""
Security tests for bigint-toolkit.

Tests specifically for invalid inputs and edge cases:
- Domain errors (moduli, ranges, negative values)
- Invalid digits
- Errors are never swallowed
"""

import pytest

from bigint_toolkit import BigintToolkitError
from bigint_toolkit.errors import DomainError, InvalidDigit
from bigint_toolkit.conversion.signed_bytes import bigint_to_bytes, bytes_to_bigint
from bigint_toolkit.conversion.hex_codec import hex_to_bytes, hex_to_bigint
from bigint_toolkit.conversion.radix import parse_radix, to_integer
from bigint_toolkit.modular.arithmetic import (
    to_zn, mod_inverse, mod_pow, mod_add, mod_multiply, crt, phi, minimum, maximum, lcm
)
from bigint_toolkit.modular.random_range import RandomRange, random_in_range, random_bytes


class TestCodecInvalidInputs:
    """Invalid inputs to the byte codec."""

    def test_negative_without_flag(self):
        """Encode(-5, False) fails with DomainError."""
        with pytest.raises(DomainError):
            bigint_to_bytes(-5)

    def test_empty_bytes(self):
        """Decoding an empty sequence fails."""
        with pytest.raises(DomainError):
            bytes_to_bigint(b"")

    def test_out_of_range_byte(self):
        """Values outside 0..255 are rejected."""
        with pytest.raises(DomainError):
            bytes_to_bigint([1, 256])

    def test_int_is_not_a_byte_sequence(self):
        """An int is not silently turned into zero bytes."""
        with pytest.raises(TypeError):
            bytes_to_bigint(4)


class TestInvalidDigits:
    """Characters outside the radix alphabet."""

    @pytest.mark.parametrize("text, radix", [
        ("102", 2), ("8", 8), ("g", 16), ("12a", 10), ("-101", 2), ("", 2), ("", 10), ("-", 16),
    ])
    def test_invalid_digit(self, text, radix):
        """to_integer raises InvalidDigit."""
        with pytest.raises(InvalidDigit):
            to_integer(text, radix)

    def test_invalid_digit_details(self):
        """The error carries the radix and offending character."""
        with pytest.raises(InvalidDigit) as exc_info:
            parse_radix("1012", 2)
        assert exc_info.value.radix == 2
        assert exc_info.value.character == "2"

    @pytest.mark.parametrize("text", ["K", "1K", "İ"])
    def test_non_ascii_lookalike_letters(self, text):
        """Non-ASCII letters that lowercase into a-z are not digits."""
        with pytest.raises(InvalidDigit):
            to_integer(text, 36)

    def test_hex_errors(self):
        """Malformed hex is rejected."""
        with pytest.raises(InvalidDigit):
            hex_to_bytes("abc")
        with pytest.raises(InvalidDigit):
            hex_to_bytes("zz")
        with pytest.raises(InvalidDigit):
            hex_to_bigint("0x10")

    def test_invalid_digit_is_value_error(self):
        """Callers catching ValueError still see the error."""
        with pytest.raises(ValueError):
            to_integer("xyz", 10)

    def test_unsupported_radix(self):
        """Radix outside 2..36 is a domain error."""
        with pytest.raises(DomainError):
            to_integer("1", 37)
        with pytest.raises(DomainError):
            parse_radix("0", 1)

    def test_non_integral_float(self):
        with pytest.raises(DomainError):
            to_integer(1.5)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_integer([1, 2])


class TestModularDomainErrors:
    """Moduli and arguments outside the domain."""

    @pytest.mark.parametrize("m", [0, -7])
    def test_to_zn_non_positive(self, m):
        with pytest.raises(DomainError):
            to_zn(3, m)

    def test_mod_inverse_non_positive_modulus(self):
        with pytest.raises(DomainError):
            mod_inverse(3, 0)

    def test_mod_pow_zero_modulus(self):
        """Zero modulus is rejected even for a zero exponent."""
        with pytest.raises(DomainError):
            mod_pow(3, 0, 0)

    def test_mod_pow_negative_modulus(self):
        with pytest.raises(DomainError):
            mod_pow(3, 2, -7)

    def test_mod_add_zero_modulus_propagates(self):
        """mod_add and mod_multiply leave zero division to Python."""
        with pytest.raises(ZeroDivisionError):
            mod_add(1, 2, 0)
        with pytest.raises(ZeroDivisionError):
            mod_multiply(1, 2, 0)

    def test_lcm_of_zeros(self):
        with pytest.raises(ZeroDivisionError):
            lcm(0, 0)

    def test_crt_length_mismatch(self):
        with pytest.raises(DomainError):
            crt([3, 5], [1])

    def test_crt_non_coprime(self):
        """Moduli sharing a factor surface the inverse failure."""
        with pytest.raises(DomainError):
            crt([4, 6], [1, 3])

    def test_crt_zero_modulus(self):
        """A zero modulus is a domain error, not a ZeroDivisionError."""
        with pytest.raises(DomainError):
            crt([0, 5], [1, 1])

    @pytest.mark.parametrize("n", [0, -1, -12])
    def test_phi_non_positive(self, n):
        with pytest.raises(DomainError):
            phi(n)

    def test_min_max_empty(self):
        with pytest.raises(DomainError):
            minimum()
        with pytest.raises(DomainError):
            maximum()


class TestRandomDomainErrors:
    """Invalid random range requests."""

    def test_start_greater_than_end(self):
        with pytest.raises(DomainError):
            random_in_range(5, 4)

    def test_invalid_max_attempts(self):
        with pytest.raises(DomainError):
            RandomRange(max_attempts=0)

    def test_negative_byte_count(self):
        with pytest.raises(DomainError):
            random_bytes(-1)

    def test_all_errors_share_base(self):
        """Every toolkit error derives from BigintToolkitError."""
        with pytest.raises(BigintToolkitError):
            random_in_range(1, 0)
        with pytest.raises(BigintToolkitError):
            to_integer("9", 8)
