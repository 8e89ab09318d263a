"""
Radix — Arbitrary-Precision Base Conversion

Конвертация знаковой строки цифр из одного основания в другое (2-64)
без потери точности. Промежуточное значение — Python int (unbounded).

Алфавит цифр (64 символа, позиция = значение цифры):
    0-9, a-z, A-Z, +, /

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Основание r использует только первые r символов алфавита (case-sensitive)
2. Знак определяется чётностью количества ведущих '-' ("--5" → "5")
3. Нулевая величина всегда даёт "0" без знака (пустой результат невозможен)
4. Никаких float / fixed-width промежуточных значений
"""

from typing import Final

from src.core.math.integer_safeguards import MAX_RADIX, MIN_RADIX, validate_radix

# =============================================================================
# АЛФАВИТ
# =============================================================================

DIGIT_ALPHABET: Final[str] = (
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "+/"
)

NEGATIVE_SIGN: Final[str] = "-"

# Обратный индекс: символ → значение
_DIGIT_VALUES: Final[dict[str, int]] = {digit: index for index, digit in enumerate(DIGIT_ALPHABET)}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigitError(ValueError):
    """
    Символ не входит в первые `radix` символов алфавита.

    Attributes:
        digit: Недопустимый символ
        radix: Основание, для которого выполнялся разбор
    """

    def __init__(self, digit: str, radix: int):
        self.digit = digit
        self.radix = radix
        super().__init__(f'Invalid digit "{digit}" for base {radix}.')


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def digit_range(radix: int) -> str:
    """
    Символы, допустимые в основании radix.

    Examples:
        >>> digit_range(16)
        '0123456789abcdef'
    """
    validate_radix(radix)
    return DIGIT_ALPHABET[:radix]


def split_sign(value: str) -> tuple[str, bool]:
    """
    Отделение ведущих '-' от строки цифр.

    Знак отрицательный тогда и только тогда, когда число снятых '-' нечётно.

    Returns:
        (digits, negative)

    Examples:
        >>> split_sign("-5")
        ('5', True)
        >>> split_sign("--5")
        ('5', False)
    """
    digits = value.lstrip(NEGATIVE_SIGN)
    stripped = len(value) - len(digits)
    return digits, stripped % 2 == 1


def parse_digits(digits: str, radix: int) -> int:
    """
    Разбор беззнаковой строки цифр в int (positional, MSD-first).

    Цифра на позиции i справа (0-indexed) даёт вклад digit × radix^i.
    Сканирование идёт от младшего разряда, поэтому при нескольких
    недопустимых символах сообщается самый правый.

    Args:
        digits: Строка цифр без знака
        radix: Основание (2-64)

    Returns:
        Неотрицательное значение (пустая строка → 0)

    Raises:
        InvalidDigitError: Если символ не входит в digit_range(radix)
    """
    validate_radix(radix)

    magnitude = 0
    place = 1
    for digit in reversed(digits):
        digit_value = _DIGIT_VALUES.get(digit)
        if digit_value is None or digit_value >= radix:
            raise InvalidDigitError(digit, radix)
        magnitude += digit_value * place
        place *= radix

    return magnitude


def format_digits(magnitude: int, radix: int) -> str:
    """
    Представление неотрицательного int в основании radix.

    Повторное деление: остаток даёт следующую младшую цифру.

    Raises:
        ValueError: Если magnitude < 0
    """
    validate_radix(radix)
    if magnitude < 0:
        raise ValueError(f"magnitude must be non-negative, got {magnitude}")

    if magnitude == 0:
        return DIGIT_ALPHABET[0]

    output: list[str] = []
    while magnitude > 0:
        magnitude, remainder = divmod(magnitude, radix)
        output.append(DIGIT_ALPHABET[remainder])

    return "".join(reversed(output))


# =============================================================================
# CONVERT BASE
# =============================================================================


def convert_base(value: str, from_base: int, to_base: int) -> str:
    """
    Точная конвертация знаковой строки цифр между основаниями 2-64.

    Алгоритм:
    1. Снять все ведущие '-' (знак = чётность их количества)
    2. Разобрать остаток в from_base → int
    3. Записать int в to_base
    4. Добавить один '-' если знак отрицательный и величина ненулевая

    Args:
        value: Строка цифр, опционально с ведущими '-'
        from_base: Исходное основание (2-64)
        to_base: Целевое основание (2-64)

    Returns:
        Строка цифр в to_base (без ведущих нулей, "0" для нуля)

    Raises:
        InvalidRadixError: Если основание вне [2, 64]
        InvalidDigitError: Если символ недопустим для from_base

    Examples:
        >>> convert_base("ff", 16, 10)
        '255'
        >>> convert_base("255", 10, 16)
        'ff'
        >>> convert_base("--5", 10, 10)
        '5'
        >>> convert_base("-", 10, 2)
        '0'
    """
    validate_radix(from_base, "from_base", MIN_RADIX, MAX_RADIX)
    validate_radix(to_base, "to_base", MIN_RADIX, MAX_RADIX)

    digits, negative = split_sign(value)
    magnitude = parse_digits(digits, from_base)
    result = format_digits(magnitude, to_base)

    # Ноль знака не имеет
    if negative and magnitude != 0:
        return NEGATIVE_SIGN + result

    return result
