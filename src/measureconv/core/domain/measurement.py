"""
Measurement — Модели результатов конверсии

Immutable Pydantic модели, возвращаемые конвертером.
Полная совместимость с JSON Schema (core/contracts/schema/*.json).

Все модели транзиентны: создаются и отбрасываются в рамках одного вызова.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from measureconv.core.domain.units import is_power_of_two


# Паттерн десятичной строки с фиксированной точкой ("1.969", "25.400")
FIXED_DECIMAL_PATTERN = r"^-?[0-9]+(\.[0-9]+)?$"


# =============================================================================
# FRACTION
# =============================================================================


class InchFraction(BaseModel):
    """
    Дробь numerator/denominator.

    Immutable модель (frozen=True). Знаменатель не может быть нулевым.
    """

    numerator: int = Field(..., ge=0, description="Числитель")
    denominator: int = Field(..., ge=1, description="Знаменатель (ненулевой)")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def is_proper(self) -> bool:
        """Правильная дробь: 0 < numerator < denominator."""
        return 0 < self.numerator < self.denominator

    def is_binary(self) -> bool:
        """Знаменатель является степенью двойки (1/2, 1/4, ..., 1/128)."""
        return is_power_of_two(self.denominator)


# =============================================================================
# MIXED NUMBER
# =============================================================================


class MixedNumber(BaseModel):
    """
    Смешанное число: целая часть и/или правильная дробь.

    Tagged variant:
    - только whole: целое число ("2")
    - только fraction: простая дробь ("1/2")
    - whole + fraction: смешанное число ("4 1/2")
    """

    whole: Optional[int] = Field(None, ge=0, description="Целая часть")
    fraction: Optional[InchFraction] = Field(None, description="Правильная дробная часть")

    model_config = {"frozen": True}

    @field_validator("fraction")
    @classmethod
    def validate_fraction_proper(cls, v: Optional[InchFraction]) -> Optional[InchFraction]:
        """Дробная часть смешанного числа всегда правильная."""
        if v is not None and not v.is_proper():
            raise ValueError(f"fraction part {v} is not a proper fraction")
        return v

    @model_validator(mode="after")
    def validate_variant(self) -> "MixedNumber":
        if self.whole is None and self.fraction is None:
            raise ValueError("mixed number needs a whole part or a fraction part")
        if self.whole == 0 and self.fraction is not None:
            raise ValueError("zero whole part must be omitted when a fraction is present")
        return self

    def display(self) -> int | str:
        """
        Отображаемое значение.

        Returns:
            int для целого числа, иначе строка "q r/d" или "r/d"
        """
        if self.fraction is None:
            return self.whole
        if self.whole is None:
            return str(self.fraction)
        return f"{self.whole} {self.fraction}"

    def __str__(self) -> str:
        return str(self.display())


# =============================================================================
# CONVERSION RESULTS
# =============================================================================


class InchConversion(BaseModel):
    """
    Результат конверсии миллиметры → дюймы.

    Ровно одно из whole/fraction задано: whole для целого числа дюймов,
    fraction для значения, квантованного до 1/128".
    mixed задан только для дробей больше единицы.
    """

    schema_version: str = Field("1", pattern="^1$", description="Версия схемы")
    millimeters: str = Field(..., min_length=1, description="Исходное значение в мм")
    decimal: str = Field(
        ..., pattern=FIXED_DECIMAL_PATTERN, description="Дюймы с фиксированной точкой"
    )
    whole: Optional[int] = Field(None, description="Целое число дюймов")
    fraction: Optional[InchFraction] = Field(None, description="Дробь дюйма (несократимая)")
    mixed: Optional[str] = Field(None, min_length=1, description="Смешанное число")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_exactly_one_form(self) -> "InchConversion":
        if (self.whole is None) == (self.fraction is None):
            raise ValueError("exactly one of whole/fraction must be set")
        if self.mixed is not None and self.fraction is None:
            raise ValueError("mixed number requires a fraction")
        return self

    def fraction_display(self) -> int | str:
        """Колонка Fraction: целое число или "n/d"."""
        if self.fraction is None:
            return self.whole
        return str(self.fraction)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-совместимое представление (inch_conversion.json)."""
        return self.model_dump(mode="json", exclude_none=True)


class MillimeterConversion(BaseModel):
    """Результат конверсии дюймы → миллиметры."""

    schema_version: str = Field("1", pattern="^1$", description="Версия схемы")
    inches: str = Field(..., min_length=1, description="Исходное значение в дюймах")
    decimal: str = Field(
        ..., pattern=FIXED_DECIMAL_PATTERN, description="Миллиметры с фиксированной точкой"
    )

    model_config = {"frozen": True}

    def to_payload(self) -> Dict[str, Any]:
        """JSON-совместимое представление (millimeter_conversion.json)."""
        return self.model_dump(mode="json")
