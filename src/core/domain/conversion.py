"""
Conversion — Модели запросов конвертации

Immutable Pydantic модели, описывающие вызов конвертера так, как его
формирует UI-слой (значение из формы + основания / размер слова).
Соответствуют схемам base_conversion_request и byte_encoding_request.
"""

from enum import Enum

from pydantic import BaseModel, Field

from src.core.math.byte_encoding import convert_to_bytes_binary, convert_to_bytes_hex
from src.core.math.integer_safeguards import MAX_RADIX, MIN_RADIX
from src.core.math.radix import convert_base


# =============================================================================
# ENUMS
# =============================================================================


class ByteFormat(str, Enum):
    """Формат вывода two's-complement слова"""

    HEX = "hex"
    BINARY = "binary"


class StandardBase(int, Enum):
    """Стандартные основания панели вывода"""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16
    BASE64 = 64


# =============================================================================
# REQUESTS
# =============================================================================


class BaseConversionRequest(BaseModel):
    """
    Запрос точной конвертации между основаниями.

    value не валидируется моделью: недопустимые цифры обнаруживаются
    при выполнении (InvalidDigitError), как и в прямом вызове convert_base.
    """

    value: str = Field(..., description="Строка цифр, опционально с ведущими '-'")
    from_base: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX, description="Исходное основание")
    to_base: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX, description="Целевое основание")

    model_config = {"frozen": True}

    def execute(self) -> str:
        """Выполнение конвертации (см. convert_base)."""
        return convert_base(self.value, self.from_base, self.to_base)


class ByteEncodingRequest(BaseModel):
    """
    Запрос two's-complement кодирования фиксированной ширины.

    from_base допускается до 64 (как у поля формы), но нативный парсер
    принимает только 2-36: для больших оснований execute() поднимает
    UnparsableValueError.
    """

    value: str = Field(..., min_length=1, description="Строка цифр в from_base")
    from_base: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX, description="Основание разбора")
    byte_size: int = Field(..., ge=1, description="Ширина слова в байтах")
    byte_format: ByteFormat = Field(ByteFormat.HEX, description="Формат вывода (hex/binary)")

    model_config = {"frozen": True}

    def execute(self) -> str:
        """Выполнение кодирования в выбранном формате."""
        if self.byte_format == ByteFormat.BINARY:
            return convert_to_bytes_binary(self.value, self.from_base, self.byte_size)
        return convert_to_bytes_hex(self.value, self.from_base, self.byte_size)
