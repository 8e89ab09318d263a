"""
Byte Encoding — Fixed-Width Two's-Complement Representation

Кодирование знакового целого в byte_size-байтовое big-endian слово:
- convert_to_bytes_hex: верхний регистр hex, 2 символа на байт
- convert_to_bytes_binary: биты по nibble, разделитель "'" ("1010'0101")

Значение разбирается нативным парсером (native_int.parse_native_int),
т.е. с точностью double, а не точным парсером из radix.py.

АСИММЕТРИЯ HEX-ЭНКОДЕРА (сохраняется намеренно):
- value >= 0: прямой hex с padding до byte_size*2, БЕЗ усечения.
  Если значение не помещается в byte_size байт, результат длиннее
  ("256", 1 байт → "100").
- value < 0: побайтовое извлечение (n >> 8i) & 0xFF, результат ровно
  byte_size*2 символов (two's-complement wrap).

Binary-энкодер использует побайтовое извлечение для обоих знаков, поэтому
положительное переполнение усекается до byte_size байт.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Byte order — big-endian (старший байт первым)
2. Отрицательные значения: ровно byte_size*2 hex символов
3. Binary: ровно byte_size*10 - 1 символов (8 бит + 2 разделителя на байт, минус последний)
4. Неразбираемое значение → UnparsableValueError
"""

from typing import Final

from src.core.math.integer_safeguards import validate_byte_size
from src.core.math.native_int import parse_native_int

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BYTE_BITS: Final[int] = 8
BYTE_MASK: Final[int] = 0xFF
NIBBLE_BITS: Final[int] = 4

# Разделитель между nibble внутри байта и между байтами
NIBBLE_SEPARATOR: Final[str] = "'"
BYTE_SEPARATOR: Final[str] = "'"


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def extract_byte(n: int, index: int) -> int:
    """
    Байт index (0 = младший) из знакового int.

    Python >> на отрицательных числах арифметический, поэтому
    результат совпадает с two's-complement представлением.

    Examples:
        >>> extract_byte(0x1234, 0)
        52
        >>> extract_byte(-1, 3)
        255
    """
    return (n >> (index * BYTE_BITS)) & BYTE_MASK


def iter_bytes_big_endian(n: int, byte_size: int) -> list[int]:
    """Байты n от старшего к младшему, ровно byte_size штук."""
    return [extract_byte(n, index) for index in reversed(range(byte_size))]


def format_byte_hex(byte: int) -> str:
    """Байт как два hex символа в верхнем регистре."""
    return f"{byte:02X}"


def format_byte_binary(byte: int) -> str:
    """
    Байт как 8 бит, разбитые на два nibble.

    Examples:
        >>> format_byte_binary(0xA5)
        "1010'0101"
    """
    bits = f"{byte:08b}"
    return bits[:NIBBLE_BITS] + NIBBLE_SEPARATOR + bits[NIBBLE_BITS:]


# =============================================================================
# ENCODERS
# =============================================================================


def convert_to_bytes_hex(value: str, from_base: int, byte_size: int) -> str:
    """
    Two's-complement hex представление value шириной byte_size байт.

    Args:
        value: Строка цифр в from_base
        from_base: Основание разбора (2-36, нативный парсер)
        byte_size: Ширина слова в байтах (>= 1)

    Returns:
        Hex строка в верхнем регистре, big-endian

    Raises:
        ValueError: Если byte_size не положительное целое
        UnparsableValueError: Если value не разбирается в from_base

    Examples:
        >>> convert_to_bytes_hex("255", 10, 1)
        'FF'
        >>> convert_to_bytes_hex("-1", 10, 2)
        'FFFF'
        >>> convert_to_bytes_hex("256", 10, 1)
        '100'
    """
    validate_byte_size(byte_size)
    n = parse_native_int(value, from_base)

    if n >= 0:
        # Без усечения: переполнение расширяет результат
        return f"{n:X}".rjust(byte_size * 2, "0")

    return "".join(format_byte_hex(byte) for byte in iter_bytes_big_endian(n, byte_size))


def convert_to_bytes_binary(value: str, from_base: int, byte_size: int) -> str:
    """
    Two's-complement binary представление value, сгруппированное по nibble.

    Args:
        value: Строка цифр в from_base
        from_base: Основание разбора (2-36, нативный парсер)
        byte_size: Ширина слова в байтах (>= 1)

    Returns:
        Строка вида "nnnn'nnnn'nnnn'nnnn", big-endian

    Raises:
        ValueError: Если byte_size не положительное целое
        UnparsableValueError: Если value не разбирается в from_base

    Examples:
        >>> convert_to_bytes_binary("165", 10, 1)
        "1010'0101"
        >>> convert_to_bytes_binary("-2", 10, 2)
        "1111'1111'1111'1110"
    """
    validate_byte_size(byte_size)
    n = parse_native_int(value, from_base)

    return BYTE_SEPARATOR.join(format_byte_binary(byte) for byte in iter_bytes_big_endian(n, byte_size))
