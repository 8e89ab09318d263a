"""
Integer Safeguards — Validation Primitives for Radix Arithmetic

Модуль содержит общие проверки параметров для всех конвертеров:
- Валидация radix (основания системы счисления) с диапазоном
- Валидация byte_size (ширины two's-complement слова)
- Валидация целочисленных параметров (bool отклоняется явно)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не принимается как int (True/False не являются radix)
2. Все ошибки — подклассы ValueError с диагностическим сообщением
3. Все проверки детерминированы и не имеют side effects
"""

from typing import Final

# =============================================================================
# ДИАПАЗОНЫ RADIX
# =============================================================================

# Минимальное основание системы счисления
MIN_RADIX: Final[int] = 2

# Максимальное основание (размер расширенного алфавита 0-9a-zA-Z+/)
MAX_RADIX: Final[int] = 64


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRadixError(ValueError):
    """
    Основание системы счисления вне допустимого диапазона.

    Attributes:
        radix: Переданное значение основания
        min_radix: Нижняя граница диапазона
        max_radix: Верхняя граница диапазона
    """

    def __init__(self, radix: object, name: str, min_radix: int, max_radix: int):
        self.radix = radix
        self.min_radix = min_radix
        self.max_radix = max_radix
        super().__init__(f"{name} must be an integer in [{min_radix}, {max_radix}], got {radix!r}")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """True если value — int, но не bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int_in_range(
    value: object,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Валидация, что значение — целое число в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value не int или вне диапазона
    """
    if not is_strict_int(value):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


def validate_positive_int(value: object, name: str) -> None:
    """
    Валидация, что значение — положительное целое.

    Raises:
        ValueError: Если value не int или value < 1
    """
    validate_int_in_range(value, name, min_value=1)


def validate_radix(
    radix: object,
    name: str = "radix",
    min_radix: int = MIN_RADIX,
    max_radix: int = MAX_RADIX,
) -> None:
    """
    Валидация основания системы счисления.

    Args:
        radix: Проверяемое основание
        name: Имя параметра (например, 'from_base')
        min_radix: Нижняя граница (default: MIN_RADIX)
        max_radix: Верхняя граница (default: MAX_RADIX)

    Raises:
        InvalidRadixError: Если radix не int или вне [min_radix, max_radix]

    Examples:
        >>> validate_radix(16, "from_base")
        >>> validate_radix(65, "to_base")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidRadixError: to_base must be an integer in [2, 64], got 65
    """
    if not is_strict_int(radix) or not (min_radix <= radix <= max_radix):
        raise InvalidRadixError(radix, name, min_radix, max_radix)


def validate_byte_size(byte_size: object) -> None:
    """
    Валидация ширины two's-complement слова в байтах.

    Raises:
        ValueError: Если byte_size не положительное целое
    """
    validate_positive_int(byte_size, "byte_size")
