"""
Contract Validation Module

Модуль для валидации JSON контрактов внешних форм BigFraction.
"""

from .validators import (
    FRACTION_TEXT_VALIDATOR,
    FRACTION_VALIDATOR,
    SCHEMA_DIR,
    load_schema,
    validate_fraction,
    validate_fraction_text,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "FRACTION_VALIDATOR",
    "FRACTION_TEXT_VALIDATOR",
    # Functions
    "load_schema",
    "validate_fraction",
    "validate_fraction_text",
]
