"""
JSON Schema Contract Validators

Модуль для валидации JSON payload запросов конвертера согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- base_conversion_request.json
- byte_encoding_request.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

# Каталог схем внутри пакета (package data, см. pyproject.toml)
DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога schema/ рядом с этим модулем
    (поставляется вместе с пакетом как package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'byte_encoding_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class BaseConversionRequestValidator(ContractValidator):
    """Валидатор для base_conversion_request контракта."""

    def __init__(self):
        super().__init__("base_conversion_request")


class ByteEncodingRequestValidator(ContractValidator):
    """Валидатор для byte_encoding_request контракта."""

    def __init__(self):
        super().__init__("byte_encoding_request")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_base_conversion_request(data: Dict[str, Any]) -> None:
    """
    Валидация base_conversion_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BaseConversionRequestValidator().validate(data)


def validate_byte_encoding_request(data: Dict[str, Any]) -> None:
    """
    Валидация byte_encoding_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ByteEncodingRequestValidator().validate(data)
