"""
Conversion — Десятичная конверсия мм ↔ дюймы

Двунаправленная конверсия с фиксированной точкой:
- mm_to_inches_decimal: mm / 25.4
- inches_to_mm_decimal: in × 25.4

Разбор, умножение/деление и форматирование выполняются бэкендом
произвольной точности; двоичный float не используется.
Хвостовые нули сохраняются ("1.000", "25.400").
"""

from measureconv.core.domain.units import FIXED_PLACES, MM_PER_INCH
from measureconv.core.math.decimal_arithmetic import DEFAULT_BACKEND, DecimalBackend


def mm_to_inches_decimal(
    mm_value: str,
    backend: DecimalBackend | None = None,
    places: int = FIXED_PLACES,
) -> str:
    """
    Конверсия мм → дюймы с фиксированной точкой.

    Args:
        mm_value: Значение в миллиметрах (десятичная строка)
        backend: Арифметика произвольной точности (default: DEFAULT_BACKEND)
        places: Знаков после точки (default: 3)

    Returns:
        Десятичная строка, например "1.969"

    Examples:
        >>> mm_to_inches_decimal("50")
        '1.969'
        >>> mm_to_inches_decimal("25.4")
        '1.000'
    """
    backend = backend or DEFAULT_BACKEND
    inches = backend.divide(backend.construct(mm_value), backend.construct(MM_PER_INCH))
    return backend.to_fixed(inches, places)


def inches_to_mm_decimal(
    inch_value: str,
    backend: DecimalBackend | None = None,
    places: int = FIXED_PLACES,
) -> str:
    """
    Конверсия дюймы → мм с фиксированной точкой.

    Examples:
        >>> inches_to_mm_decimal("1")
        '25.400'
    """
    backend = backend or DEFAULT_BACKEND
    millimeters = backend.multiply(backend.construct(inch_value), backend.construct(MM_PER_INCH))
    return backend.to_fixed(millimeters, places)
