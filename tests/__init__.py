# bigint-toolkit Test Suite
"""
Test suite including:
- Unit tests (conversion, modular arithmetic, random ranges)
- Integration tests (cross-checks with the cryptography library, CLI)
- Security tests (invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
