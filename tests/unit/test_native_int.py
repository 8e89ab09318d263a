"""
Тесты для модуля Native Int (narrowed parser)

Проверяет:
1. Семантику разбора префикса (пробелы, знак, 0x, хвост)
2. Case-insensitive цифры
3. Ограничение основания 2-36
4. Потерю точности выше 2^53 (наблюдаемое ограничение)
5. UnparsableValueError вместо NaN
"""

import pytest

from src.core.math.native_int import (
    MAX_SAFE_INTEGER,
    NATIVE_MAX_RADIX,
    UnparsableValueError,
    is_safe_integer,
    parse_native_int,
    to_native_precision,
)


class TestParseNativeInt:
    """Тесты для parse_native_int"""

    @pytest.mark.parametrize(
        "value, radix, expected",
        [
            ("255", 10, 255),
            ("ff", 16, 255),
            ("FF", 16, 255),
            ("Ff", 16, 255),
            ("0x1F", 16, 31),
            ("0X1f", 16, 31),
            ("-0x10", 16, -16),
            ("+42", 10, 42),
            ("-7", 10, -7),
            ("  -12", 10, -12),
            ("\t\n9", 10, 9),
            ("101", 2, 5),
            ("zz", 36, 1295),
            ("ZZ", 36, 1295),
        ],
    )
    def test_parses(self, value: str, radix: int, expected: int) -> None:
        assert parse_native_int(value, radix) == expected

    def test_trailing_garbage_ignored(self) -> None:
        assert parse_native_int("12abc", 10) == 12
        assert parse_native_int("12.9", 10) == 12
        assert parse_native_int("102", 2) == 2

    def test_negative_zero_normalized(self) -> None:
        result = parse_native_int("-0", 10)
        assert result == 0
        assert str(result) == "0"

    def test_0x_prefix_only_for_hex(self) -> None:
        """Для radix != 16 'x' прерывает разбор"""
        assert parse_native_int("0x1F", 10) == 0

    @pytest.mark.parametrize("value", ["", "   ", "-", "+", "--5", "z", "0x", "-x1"])
    def test_no_digits_raises(self, value: str) -> None:
        with pytest.raises(UnparsableValueError, match="no digits"):
            parse_native_int(value, 16 if value == "0x" else 10)

    @pytest.mark.parametrize("radix", [0, 1, 37, 64])
    def test_radix_outside_native_range_raises(self, radix: int) -> None:
        with pytest.raises(UnparsableValueError, match="native radix"):
            parse_native_int("10", radix)

    def test_error_attributes(self) -> None:
        with pytest.raises(UnparsableValueError) as exc_info:
            parse_native_int("zz", 10)

        error = exc_info.value
        assert error.value == "zz"
        assert error.radix == 10
        assert isinstance(error, ValueError)

    def test_precision_loss_above_safe_integer(self) -> None:
        """2^53 + 1 округляется до 2^53"""
        assert parse_native_int("9007199254740993", 10) == 9007199254740992
        assert parse_native_int("-9007199254740993", 10) == -9007199254740992

    def test_safe_integer_exact(self) -> None:
        assert parse_native_int("9007199254740991", 10) == MAX_SAFE_INTEGER

    def test_beyond_double_range_raises(self) -> None:
        with pytest.raises(UnparsableValueError, match="native number range"):
            parse_native_int("f" * 300, 16)

        with pytest.raises(UnparsableValueError, match="native number range"):
            parse_native_int("1" + "0" * 400, 10)

    def test_native_max_radix(self) -> None:
        assert NATIVE_MAX_RADIX == 36
        assert parse_native_int("10", NATIVE_MAX_RADIX) == 36


class TestNativePrecision:
    """Тесты для to_native_precision и is_safe_integer"""

    def test_safe_values_unchanged(self) -> None:
        assert to_native_precision(0) == 0
        assert to_native_precision(-255) == -255
        assert to_native_precision(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER

    def test_rounds_to_double(self) -> None:
        assert to_native_precision(2**53 + 1) == 2**53
        assert to_native_precision(-(2**53 + 1)) == -(2**53)
        assert to_native_precision(2**60 + 1) == 2**60

    def test_overflow_raises(self) -> None:
        with pytest.raises(OverflowError):
            to_native_precision(2**1100)

    def test_is_safe_integer(self) -> None:
        assert is_safe_integer(MAX_SAFE_INTEGER)
        assert is_safe_integer(-MAX_SAFE_INTEGER)
        assert not is_safe_integer(2**53)


class TestNativeUnicodeInput:
    """Не-ASCII ввод: только ASCII цифры, пробелы как у нативного парсера"""

    def test_kelvin_sign_ends_digit_prefix(self) -> None:
        """U+212A (KELVIN SIGN) не считается цифрой 'k'"""
        assert parse_native_int("1\u212a", 36) == 1

    def test_kelvin_sign_alone_has_no_digits(self) -> None:
        with pytest.raises(UnparsableValueError, match="no digits"):
            parse_native_int("\u212a", 36)

    @pytest.mark.parametrize(
        "value",
        ["\ufeff5", "\u00a05", "\u20285", "\u30005", "\ufeff \t5"],
    )
    def test_native_whitespace_skipped(self, value: str) -> None:
        assert parse_native_int(value, 10) == 5

    @pytest.mark.parametrize("value", ["\u0661", "\uff15", "\u00b2"])
    def test_non_ascii_digits_rejected(self, value: str) -> None:
        """Арабско-индийские, fullwidth и superscript цифры — не цифры"""
        with pytest.raises(UnparsableValueError, match="no digits"):
            parse_native_int(value, 10)

    def test_non_ascii_digit_ends_prefix(self) -> None:
        assert parse_native_int("12\u0663", 10) == 12


class TestNativeRangeBoundary:
    """Граница диапазона double и длинные строки"""

    def test_just_above_double_max_raises(self) -> None:
        """2^1024 - 1 проходит грубую проверку длины, но не помещается в double"""
        with pytest.raises(UnparsableValueError, match="native number range"):
            parse_native_int("f" * 256, 16)

    def test_long_leading_zeros(self) -> None:
        """Ведущие нули не влияют на величину и на лимит длины int()"""
        assert parse_native_int("0" * 5000 + "7", 10) == 7
        assert parse_native_int("0" * 5000, 10) == 0

    def test_long_decimal_overflow_is_range_error(self) -> None:
        with pytest.raises(UnparsableValueError, match="native number range"):
            parse_native_int("9" * 5000, 10)
