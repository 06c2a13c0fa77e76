"""
JSON Schema Contract Validators

Валидация внешних форм BigFraction по JSON Schema контрактам (jsonschema).
Схемы лежат в пакете (contracts/schema/) и устанавливаются вместе с ним.

Схемы:
- fraction.json (объект {"numerator": n, "denominator": d}, d >= 1)
- fraction_text.json (каноническая строка "n/d", ноль записывается как "0/1")

Валидаторы строятся один раз при импорте: схема, не прошедшая
meta-validation, ломает импорт, а не первый вызов.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator


SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema файла из SCHEMA_DIR.

    Args:
        schema_name: Имя схемы без расширения (например, 'fraction')

    Returns:
        Загруженная схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


FRACTION_VALIDATOR: Final = Draft202012Validator(load_schema("fraction"))
FRACTION_TEXT_VALIDATOR: Final = Draft202012Validator(load_schema("fraction_text"))


# =============================================================================
# VALIDATION
# =============================================================================


def validate_fraction(data: Dict[str, Any]) -> None:
    """
    Валидация объектной формы дроби.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FRACTION_VALIDATOR.validate(data)


def validate_fraction_text(text: str) -> None:
    """
    Валидация канонической текстовой формы дроби.

    Raises:
        ValidationError: Если текст не соответствует схеме
    """
    FRACTION_TEXT_VALIDATOR.validate(text)
