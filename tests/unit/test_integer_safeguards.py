"""
Тесты для модуля Integer Safeguards

Проверяет:
1. Валидацию radix (границы, bool, нецелые)
2. Валидацию byte_size
3. Валидацию целочисленных диапазонов
"""

import pytest

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


class TestIsStrictInt:
    """Тесты для is_strict_int"""

    def test_int_accepted(self) -> None:
        assert is_strict_int(0)
        assert is_strict_int(-5)

    def test_bool_rejected(self) -> None:
        assert not is_strict_int(True)
        assert not is_strict_int(False)

    def test_non_int_rejected(self) -> None:
        assert not is_strict_int(16.0)
        assert not is_strict_int("16")
        assert not is_strict_int(None)


class TestValidateRadix:
    """Тесты для validate_radix"""

    @pytest.mark.parametrize("radix", [MIN_RADIX, 10, 16, 36, MAX_RADIX])
    def test_valid_radix(self, radix: int) -> None:
        validate_radix(radix)

    @pytest.mark.parametrize("radix", [-1, 0, 1, 65, 100])
    def test_out_of_range(self, radix: int) -> None:
        with pytest.raises(InvalidRadixError, match=r"must be an integer in \[2, 64\]"):
            validate_radix(radix)

    @pytest.mark.parametrize("radix", [True, 16.0, "16", None])
    def test_non_int(self, radix) -> None:
        with pytest.raises(InvalidRadixError):
            validate_radix(radix)

    def test_error_carries_radix_and_name(self) -> None:
        with pytest.raises(InvalidRadixError, match="to_base") as exc_info:
            validate_radix(99, "to_base")

        assert exc_info.value.radix == 99
        assert exc_info.value.min_radix == MIN_RADIX
        assert exc_info.value.max_radix == MAX_RADIX

    def test_custom_bounds(self) -> None:
        validate_radix(36, max_radix=36)
        with pytest.raises(InvalidRadixError):
            validate_radix(37, max_radix=36)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_radix(1)


class TestValidateByteSize:
    """Тесты для validate_byte_size"""

    @pytest.mark.parametrize("byte_size", [1, 2, 4, 8, 64])
    def test_valid(self, byte_size: int) -> None:
        validate_byte_size(byte_size)

    def test_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="byte_size must be >= 1"):
            validate_byte_size(0)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(ValueError, match="byte_size must be an integer"):
            validate_byte_size(2.0)

        with pytest.raises(ValueError, match="byte_size must be an integer"):
            validate_byte_size(True)


class TestValidateIntInRange:
    """Тесты для validate_int_in_range / validate_positive_int"""

    def test_within_range(self) -> None:
        validate_int_in_range(5, "x", min_value=0, max_value=10)
        validate_int_in_range(5, "x")

    def test_below_min(self) -> None:
        with pytest.raises(ValueError, match="x must be >= 0"):
            validate_int_in_range(-1, "x", min_value=0)

    def test_above_max(self) -> None:
        with pytest.raises(ValueError, match="x must be <= 10"):
            validate_int_in_range(11, "x", max_value=10)

    def test_positive_int(self) -> None:
        validate_positive_int(1, "count")
        with pytest.raises(ValueError, match="count must be >= 1"):
            validate_positive_int(0, "count")
