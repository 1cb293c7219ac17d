"""
JSON Schema Contract Validators

Модуль для валидации файлов эталонных векторов согласно формальной
JSON Schema. Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- reference_vectors.json (golden input/output векторы примитивов)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Каталоги внутри пакета (поставляются как package data)
CONTRACTS_DIR = Path(__file__).parent
SCHEMA_DIR = CONTRACTS_DIR / "schema"
VECTORS_DIR = CONTRACTS_DIR / "vectors"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Ищет схемы в contracts/schema/ внутри пакета.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = Path(schema_dir)
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'reference_vectors')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

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

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
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

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ReferenceVectorsValidator(ContractValidator):
    """Валидатор для файлов эталонных векторов."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("reference_vectors", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_reference_vectors(data: Dict[str, Any]) -> None:
    """
    Валидация данных файла эталонных векторов.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ReferenceVectorsValidator().validate(data)


def load_vector_file(path: Path) -> Dict[str, Any]:
    """
    Загрузка и валидация одного файла эталонных векторов.

    Raises:
        ValidationError: Если файл не соответствует схеме
        json.JSONDecodeError: Если файл не является валидным JSON
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_reference_vectors(data)
    return data
