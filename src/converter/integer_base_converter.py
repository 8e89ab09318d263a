"""Integer Base Converter — фасад инструмента для UI-слоя

Принимает значение и основание из формы и строит полную панель вывода:
- binary / octal / decimal / hexadecimal / base64
- произвольное (custom) основание
- two's-complement слово фиксированной ширины (hex и binary)

Ошибки не пробрасываются: они возвращаются в результате (ok / error_reason /
details), чтобы UI показал сообщение вместо вывода.

Порядок обработки:
1. Точная конвертация во все основания (InvalidDigitError / InvalidRadixError
   → ok=False, весь вывод пустой)
2. Byte-кодирование (UnparsableValueError / невалидный byte_size → только
   bytes_* пустые, bytes_error_reason заполнен; основной вывод сохраняется)
"""

import logging
from dataclasses import dataclass

from src.core.domain.conversion import (
    BaseConversionRequest,
    ByteEncodingRequest,
    StandardBase,
)
from src.core.math.byte_encoding import convert_to_bytes_binary, convert_to_bytes_hex
from src.core.math.integer_safeguards import InvalidRadixError
from src.core.math.native_int import UnparsableValueError
from src.core.math.radix import InvalidDigitError, convert_base

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class IntegerBaseConverterConfig:
    """Конфигурация конвертера.

    Значения по умолчанию для полей формы, которые пользователь может
    не заполнить.
    """

    custom_base: int = 42
    byte_size: int = 4


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class IntegerBaseConverterResult:
    """Результат конвертации для отображения."""

    ok: bool
    error_reason: str

    # Вход
    input_value: str
    input_base: int

    # Стандартные основания
    binary: str
    octal: str
    decimal: str
    hexadecimal: str
    base64: str

    # Custom основание
    custom_base: int
    custom: str

    # Two's-complement слово
    byte_size: int
    bytes_hex: str
    bytes_binary: str
    bytes_error_reason: str

    # Детали
    details: str


# =============================================================================
# CONVERTER
# =============================================================================


class IntegerBaseConverter:
    """Integer Base Converter.

    Stateless: один экземпляр можно использовать из любого числа мест.
    """

    def __init__(self, config: IntegerBaseConverterConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or IntegerBaseConverterConfig()

    def evaluate(
        self,
        value: str,
        input_base: int,
        custom_base: int | None = None,
        byte_size: int | None = None,
    ) -> IntegerBaseConverterResult:
        """Построение панели вывода для value в input_base.

        Args:
            value: строка цифр из формы
            input_base: основание ввода (2-64)
            custom_base: custom основание вывода (default из config)
            byte_size: ширина two's-complement слова (default из config)

        Returns:
            IntegerBaseConverterResult; ошибки отражены в полях результата
        """
        custom_base = self.config.custom_base if custom_base is None else custom_base
        byte_size = self.config.byte_size if byte_size is None else byte_size

        # 1. Точная конвертация
        try:
            outputs = {
                base: convert_base(value, input_base, base.value) for base in StandardBase
            }
            custom = convert_base(value, input_base, custom_base)
        except InvalidDigitError as e:
            logger.warning(f"Invalid digit {e.digit!r} for base {e.radix} in input {value!r}")
            return self._failed(value, input_base, custom_base, byte_size, "invalid_digit", str(e))
        except InvalidRadixError as e:
            logger.warning(f"Invalid radix {e.radix!r}: {e}")
            return self._failed(value, input_base, custom_base, byte_size, "invalid_radix", str(e))

        # 2. Byte-кодирование
        bytes_error_reason = ""
        bytes_details = ""
        try:
            bytes_hex = convert_to_bytes_hex(value, input_base, byte_size)
            bytes_binary = convert_to_bytes_binary(value, input_base, byte_size)
        except UnparsableValueError as e:
            logger.warning(f"Byte encoding skipped: {e}")
            bytes_hex = bytes_binary = ""
            bytes_error_reason = "unparsable_value"
            bytes_details = f"; bytes: {e}"
        except ValueError as e:
            logger.warning(f"Byte encoding skipped: {e}")
            bytes_hex = bytes_binary = ""
            bytes_error_reason = "invalid_byte_size"
            bytes_details = f"; bytes: {e}"

        logger.debug(f"Converted {value!r} from base {input_base} (custom={custom_base}, bytes={byte_size})")

        return IntegerBaseConverterResult(
            ok=True,
            error_reason="",
            input_value=value,
            input_base=input_base,
            binary=outputs[StandardBase.BINARY],
            octal=outputs[StandardBase.OCTAL],
            decimal=outputs[StandardBase.DECIMAL],
            hexadecimal=outputs[StandardBase.HEXADECIMAL],
            base64=outputs[StandardBase.BASE64],
            custom_base=custom_base,
            custom=custom,
            byte_size=byte_size,
            bytes_hex=bytes_hex,
            bytes_binary=bytes_binary,
            bytes_error_reason=bytes_error_reason,
            details=f"PASS: base {input_base} -> {len(StandardBase)} standard bases + base {custom_base}{bytes_details}",
        )

    def convert(self, request: BaseConversionRequest | ByteEncodingRequest) -> str:
        """Выполнение одиночного запроса.

        В отличие от evaluate, ошибки пробрасываются вызывающему.

        Raises:
            InvalidDigitError: недопустимая цифра (BaseConversionRequest)
            UnparsableValueError: значение не разбирается (ByteEncodingRequest)
        """
        logger.debug(f"Executing {type(request).__name__}: {request!r}")
        return request.execute()

    def _failed(
        self,
        value: str,
        input_base: int,
        custom_base: int,
        byte_size: int,
        error_reason: str,
        details: str,
    ) -> IntegerBaseConverterResult:
        return IntegerBaseConverterResult(
            ok=False,
            error_reason=error_reason,
            input_value=value,
            input_base=input_base,
            binary="",
            octal="",
            decimal="",
            hexadecimal="",
            base64="",
            custom_base=custom_base,
            custom="",
            byte_size=byte_size,
            bytes_hex="",
            bytes_binary="",
            bytes_error_reason="",
            details=details,
        )
