# Conversion Module
"""
Conversions between integers, bytes, hex strings and string radices:
- Two's complement byte codec
- Hex padding and parsing
- Radix 2..36 parsing and typed-value dispatch
"""

_EXPORTS = {
    'bigint_to_bytes': 'signed_bytes',
    'bytes_to_bigint': 'signed_bytes',
    'bytes_to_bigint_with_negative': 'signed_bytes',
    'bytes_to_hex': 'signed_bytes',
    'bytes_to_hex_with_negative': 'signed_bytes',
    'bytes_to_buffer': 'signed_bytes',
    'buffer_to_bytes': 'signed_bytes',
    'hex_pad_zero': 'hex_codec',
    'bigint_to_hex': 'hex_codec',
    'bigint_to_hex_pad_zero': 'hex_codec',
    'hex_to_bytes': 'hex_codec',
    'hex_to_bigint': 'hex_codec',
    'parse_radix': 'radix',
    'to_integer': 'radix',
}


# Lazy imports to avoid RuntimeWarning when running a module directly
def __getattr__(name):
    """Lazy import of the public conversion functions."""
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module
    module = import_module(f".{_EXPORTS[name]}", __name__)
    return getattr(module, name)


__all__ = list(_EXPORTS)
