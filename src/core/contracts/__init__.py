"""
Contract Validation Module

Модуль для валидации JSON payload запросов конвертера.
"""

from .validators import (
    BaseConversionRequestValidator,
    ByteEncodingRequestValidator,
    ContractValidator,
    SchemaLoader,
    validate_base_conversion_request,
    validate_byte_encoding_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BaseConversionRequestValidator",
    "ByteEncodingRequestValidator",
    # Functions
    "validate_base_conversion_request",
    "validate_byte_encoding_request",
]
