"""
Units — Единицы измерения конвертера

Единственные поддерживаемые единицы: дюймы и миллиметры.
Коэффициент пересчёта хранится строкой и строится бэкендом
арифметики, чтобы не проходить через двоичный float.
"""

from enum import Enum
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Миллиметров в дюйме (точное определение международного дюйма)
MM_PER_INCH: Final[str] = "25.4"

# Максимальный знаменатель дробного дюйма (1/128")
MAX_DENOMINATOR: Final[int] = 128

# Знаков после точки в десятичном представлении
FIXED_PLACES: Final[int] = 3


# =============================================================================
# ENUMS
# =============================================================================


class Unit(str, Enum):
    """Единица измерения (тег, выбираемый вызывающим кодом)"""

    INCH = "in"
    MILLIMETER = "mm"

    @property
    def source(self) -> "Unit":
        """Единица входного значения при конверсии в self."""
        return Unit.MILLIMETER if self is Unit.INCH else Unit.INCH


def is_power_of_two(value: int) -> bool:
    """Проверка, что value является положительной степенью двойки (1, 2, 4, ...)."""
    return value > 0 and value & (value - 1) == 0


def validate_max_denominator(max_denominator: int) -> None:
    """
    Проверка знаменателя квантования дробного дюйма.

    Raises:
        ValueError: Если знаменатель не является степенью двойки
            или превышает MAX_DENOMINATOR (1/128")
    """
    if not is_power_of_two(max_denominator):
        raise ValueError(
            f"max_denominator must be a power of two, got {max_denominator}"
        )

    if max_denominator > MAX_DENOMINATOR:
        raise ValueError(
            f"max_denominator must not exceed {MAX_DENOMINATOR}, got {max_denominator}"
        )
