"""
Domain models and value objects.

Contains request models for the converter: BaseConversionRequest, ByteEncodingRequest.
"""

from src.core.domain.conversion import (
    BaseConversionRequest,
    ByteEncodingRequest,
    ByteFormat,
    StandardBase,
)

__all__ = [
    "BaseConversionRequest",
    "ByteEncodingRequest",
    "ByteFormat",
    "StandardBase",
]
