"""
Core math modules для Integer Base Converter

Точная radix-арифметика и two's-complement кодирование.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    MAX_RADIX,
    MIN_RADIX,
    InvalidRadixError,
    is_strict_int,
    validate_byte_size,
    validate_int_in_range,
    validate_positive_int,
    validate_radix,
)

# Radix (arbitrary precision)
from src.core.math.radix import (
    DIGIT_ALPHABET,
    NEGATIVE_SIGN,
    InvalidDigitError,
    convert_base,
    digit_range,
    format_digits,
    parse_digits,
    split_sign,
)

# Native Int (double precision)
from src.core.math.native_int import (
    MAX_SAFE_INTEGER,
    NATIVE_MAX_RADIX,
    UnparsableValueError,
    is_safe_integer,
    parse_native_int,
    to_native_precision,
)

# Byte Encoding
from src.core.math.byte_encoding import (
    BYTE_BITS,
    BYTE_SEPARATOR,
    NIBBLE_SEPARATOR,
    convert_to_bytes_binary,
    convert_to_bytes_hex,
    extract_byte,
    format_byte_binary,
    format_byte_hex,
    iter_bytes_big_endian,
)

__all__ = [
    # Integer Safeguards
    "MAX_RADIX",
    "MIN_RADIX",
    "InvalidRadixError",
    "is_strict_int",
    "validate_byte_size",
    "validate_int_in_range",
    "validate_positive_int",
    "validate_radix",
    # Radix — Constants
    "DIGIT_ALPHABET",
    "NEGATIVE_SIGN",
    # Radix — Exceptions
    "InvalidDigitError",
    # Radix — Functions
    "convert_base",
    "digit_range",
    "format_digits",
    "parse_digits",
    "split_sign",
    # Native Int — Constants
    "MAX_SAFE_INTEGER",
    "NATIVE_MAX_RADIX",
    # Native Int — Exceptions
    "UnparsableValueError",
    # Native Int — Functions
    "is_safe_integer",
    "parse_native_int",
    "to_native_precision",
    # Byte Encoding — Constants
    "BYTE_BITS",
    "BYTE_SEPARATOR",
    "NIBBLE_SEPARATOR",
    # Byte Encoding — Functions
    "convert_to_bytes_binary",
    "convert_to_bytes_hex",
    "extract_byte",
    "format_byte_binary",
    "format_byte_hex",
    "iter_bytes_big_endian",
]
