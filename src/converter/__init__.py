"""Converter — фасад Integer Base Converter для UI-слоя."""

from .integer_base_converter import (
    IntegerBaseConverter,
    IntegerBaseConverterConfig,
    IntegerBaseConverterResult,
)

__all__ = [
    "IntegerBaseConverter",
    "IntegerBaseConverterConfig",
    "IntegerBaseConverterResult",
]
