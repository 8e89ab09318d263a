"""
Native Int — Narrowed Integer Parser (double precision)

Разбор строки в "нативное" число платформы: IEEE-754 double.
Используется byte-энкодерами вместо точного парсера из radix.py.

Семантика разбора:
- Ведущие пробелы (NATIVE_WHITESPACE, включая BOM) пропускаются,
  затем один опциональный '+' или '-'
- Для radix 16 пропускается опциональный префикс '0x' / '0X'
- Читается самый длинный префикс допустимых цифр (только ASCII, буквы case-insensitive),
  хвост после первого недопустимого символа игнорируется ("12abc" → 12)
- Основание ограничено 2-36

ОГРАНИЧЕНИЕ ТОЧНОСТИ:
Величина округляется до ближайшего double. Значения выше MAX_SAFE_INTEGER
(2^53 - 1) теряют младшие биты: "9007199254740993" → 9007199254740992.
Это наблюдаемое поведение byte-энкодеров, а не ошибка разбора.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет цифр / radix вне 2-36 / переполнение double → UnparsableValueError
2. Результат всегда точно представим как double
3. -0 нормализуется в 0
"""

import math
from typing import Final

from src.core.math.integer_safeguards import MIN_RADIX, is_strict_int

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное основание нативного парсера (0-9a-z)
NATIVE_MAX_RADIX: Final[int] = 36

# Максимальное целое, точно представимое в double без пропусков
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

HEX_PREFIXES: Final[tuple[str, ...]] = ("0x", "0X")

# Пробельные символы, пропускаемые нативным парсером (включая BOM)
NATIVE_WHITESPACE: Final[str] = (
    "\t\n\v\f\r "
    "\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Порог переполнения double: 2^1024
DOUBLE_MAX_EXPONENT: Final[int] = 1024

_NATIVE_DIGIT_VALUES: Final[dict[str, int]] = {
    digit: index for index, digit in enumerate("0123456789abcdefghijklmnopqrstuvwxyz")
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnparsableValueError(ValueError):
    """
    Значение не разбирается нативным парсером.

    Attributes:
        value: Исходная строка
        radix: Основание разбора
    """

    def __init__(self, value: str, radix: object, reason: str):
        self.value = value
        self.radix = radix
        self.reason = reason
        super().__init__(f"Cannot parse {value!r} in base {radix}: {reason}")


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def is_safe_integer(n: int) -> bool:
    """True если |n| <= MAX_SAFE_INTEGER (точное представление в double)."""
    return abs(n) <= MAX_SAFE_INTEGER


def to_native_precision(n: int) -> int:
    """
    Округление точного int до ближайшего double.

    Raises:
        OverflowError: Если |n| превышает диапазон double

    Examples:
        >>> to_native_precision(2**53 + 1)
        9007199254740992
        >>> to_native_precision(255)
        255
    """
    if is_safe_integer(n):
        return n
    return int(float(n))


def _read_digit_prefix(text: str, radix: int) -> str:
    end = 0
    for char in text:
        if not char.isascii():
            break
        digit_value = _NATIVE_DIGIT_VALUES.get(char.lower())
        if digit_value is None or digit_value >= radix:
            break
        end += 1
    return text[:end]


# =============================================================================
# PARSE
# =============================================================================


def parse_native_int(value: str, radix: int) -> int:
    """
    Разбор value в radix с точностью double.

    Args:
        value: Исходная строка
        radix: Основание (2-36)

    Returns:
        Знаковый int, точно представимый как double

    Raises:
        UnparsableValueError: Если radix вне 2-36, нет ни одной цифры
            или величина превышает диапазон double

    Examples:
        >>> parse_native_int("ff", 16)
        255
        >>> parse_native_int("  -12abc", 10)
        -12
        >>> parse_native_int("0x1F", 16)
        31
    """
    if not is_strict_int(radix) or not (MIN_RADIX <= radix <= NATIVE_MAX_RADIX):
        raise UnparsableValueError(
            value, radix, f"native radix must be in [{MIN_RADIX}, {NATIVE_MAX_RADIX}]"
        )

    text = value.lstrip(NATIVE_WHITESPACE)

    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]

    if radix == 16 and text.startswith(HEX_PREFIXES):
        text = text[2:]

    digits = _read_digit_prefix(text, radix)
    if not digits:
        raise UnparsableValueError(value, radix, "no digits")

    # Величина >= radix^(len-1): за пределами double без вызова int()
    significant = digits.lstrip("0")
    if (len(significant) - 1) * math.log2(radix) >= DOUBLE_MAX_EXPONENT:
        raise UnparsableValueError(value, radix, "value exceeds native number range")

    try:
        magnitude = to_native_precision(int(significant or "0", radix))
    except OverflowError:
        raise UnparsableValueError(value, radix, "value exceeds native number range")

    return -magnitude if negative else magnitude
