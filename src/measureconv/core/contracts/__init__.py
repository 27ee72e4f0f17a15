"""
Contract Validation Module

Модуль для валидации JSON контрактов результатов конверсии.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_inch_conversion,
    validate_millimeter_conversion,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "get_validator",
    "validate_inch_conversion",
    "validate_millimeter_conversion",
]
