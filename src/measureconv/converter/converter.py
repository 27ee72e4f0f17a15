"""Measurement Converter — композиция операций ядра.

Конверсия выбирается целевой единицей:
- Unit.INCH: мм → дюймы (дробь, десятичное значение, смешанное число)
- Unit.MILLIMETER: дюймы → мм (десятичное значение)

Порядок:
1. Input gate (пустой/нечисловой ввод → None)
2. Десятичная конверсия с фиксированной точкой
3. Дробные дюймы (только для Unit.INCH)
4. Смешанное число (только для дробей больше единицы)
"""

import logging
from dataclasses import dataclass, field
from typing import Final

from measureconv.core.domain.measurement import InchConversion, MillimeterConversion
from measureconv.core.domain.units import (
    FIXED_PLACES,
    MAX_DENOMINATOR,
    Unit,
    validate_max_denominator,
)
from measureconv.core.math.conversion import inches_to_mm_decimal, mm_to_inches_decimal
from measureconv.core.math.decimal_arithmetic import (
    DEFAULT_PRECISION,
    ContextDecimalBackend,
    DecimalBackend,
    validate_precision,
)
from measureconv.core.math.inch_fractions import needs_mixed, to_inch_fraction, to_mixed
from measureconv.converter.input_gate import check_input

log = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Максимальное число знаков после точки в десятичном представлении
MAX_FIXED_PLACES: Final[int] = 20


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация конвертера.

    backend по умолчанию это ContextDecimalBackend с точностью precision.
    Явно переданный backend имеет приоритет над precision.
    """

    precision: int = DEFAULT_PRECISION
    fixed_places: int = FIXED_PLACES
    max_denominator: int = MAX_DENOMINATOR
    backend: DecimalBackend | None = field(default=None, compare=False)

    def __post_init__(self):
        validate_precision(self.precision)
        if not 0 <= self.fixed_places <= MAX_FIXED_PLACES:
            raise ValueError(
                f"fixed_places must be in [0, {MAX_FIXED_PLACES}], got {self.fixed_places}"
            )
        validate_max_denominator(self.max_denominator)


# =============================================================================
# CONVERTER
# =============================================================================


class MeasurementConverter:
    """Конвертер мм ↔ дюймы.

    Каждый вызов: чистая функция ввода и единицы; состояние между
    вызовами не хранится.
    """

    def __init__(self, config: ConverterConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ConverterConfig()
        self.backend = self.config.backend or ContextDecimalBackend(self.config.precision)

    def convert(
        self, raw: str | None, unit: Unit | str
    ) -> InchConversion | MillimeterConversion | None:
        """Конверсия сырого ввода в целевую единицу.

        Args:
            raw: сырой ввод числового поля
            unit: целевая единица ("in": из мм в дюймы, "mm": из дюймов в мм)

        Returns:
            Результат конверсии или None, если ввод подавлен

        Raises:
            ValueError: если unit не является "in" или "mm"
        """
        unit = Unit(unit)

        check = check_input(raw)
        if not check.accepted:
            log.debug("Suppressed %s input %r: %s", unit.source.value, raw, check.block_reason)
            return None

        if unit is Unit.INCH:
            return self.to_inches(check.value)
        return self.to_millimeters(check.value)

    def to_inches(self, mm_value: str) -> InchConversion:
        """Конверсия мм → дюймы для валидированного ввода."""
        decimal = mm_to_inches_decimal(mm_value, self.backend, self.config.fixed_places)
        fraction = to_inch_fraction(mm_value, self.backend, self.config.max_denominator)

        if isinstance(fraction, int):
            return InchConversion(millimeters=mm_value, decimal=decimal, whole=fraction)

        mixed = None
        if needs_mixed(fraction):
            mixed = str(to_mixed(fraction.numerator, fraction.denominator))

        return InchConversion(
            millimeters=mm_value,
            decimal=decimal,
            fraction=fraction,
            mixed=mixed,
        )

    def to_millimeters(self, inch_value: str) -> MillimeterConversion:
        """Конверсия дюймы → мм для валидированного ввода."""
        decimal = inches_to_mm_decimal(inch_value, self.backend, self.config.fixed_places)
        return MillimeterConversion(inches=inch_value, decimal=decimal)
